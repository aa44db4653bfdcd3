"""
Tests for Fitbit MCP time series tool.
"""

import json
import pytest
from mcp.server.fastmcp import FastMCP

from fitbit_mcp import activity
from fitbit_mcp.sdk.client import API_URL


@pytest.fixture
def app_with_activity():
    app = FastMCP("Test Fitbit Activity")
    app = activity.register_tools(app)
    return app


@pytest.mark.asyncio
async def test_steps_with_period(app_with_activity, mock_session, response_factory, tool_text):
    mock_session.get.return_value = response_factory(200, {
        "activities-steps": [{"dateTime": "2024-01-31", "value": "10234"}]
    })

    result = await app_with_activity.call_tool("get_time_series", {
        "resource": "steps",
        "base_date": "2024-01-31",
        "period": "1w",
    })

    data = json.loads(tool_text(result))
    assert data["data_list"] == [{"date_time": "2024-01-31", "value": 10234}]
    mock_session.get.assert_called_once_with(
        f"{API_URL}/1/user/-/activities/steps/date/2024-01-31/1w.json"
    )


@pytest.mark.asyncio
async def test_distance_with_end_date(app_with_activity, mock_session, response_factory, tool_text):
    mock_session.get.return_value = response_factory(200, {
        "activities-distance": [{"dateTime": "2024-01-01", "value": "4.07"}]
    })

    result = await app_with_activity.call_tool("get_time_series", {
        "resource": "distance",
        "base_date": "2024-01-01",
        "end_date": "2024-01-07",
    })

    data = json.loads(tool_text(result))
    assert data["data_list"][0]["value"] == 4.07
    mock_session.get.assert_called_once_with(
        f"{API_URL}/1/user/-/activities/distance/date/2024-01-01/2024-01-07.json"
    )


@pytest.mark.asyncio
async def test_raw_resource_path_defaults_to_seven_days(app_with_activity, mock_session, response_factory):
    mock_session.get.return_value = response_factory(200, {"body-bmi": []})

    await app_with_activity.call_tool("get_time_series", {
        "resource": "/body/bmi",
        "base_date": "2024-01-31",
    })

    mock_session.get.assert_called_once_with(f"{API_URL}/1/user/-/body/bmi/date/2024-01-31/7d.json")


@pytest.mark.asyncio
async def test_unknown_resource(app_with_activity, mock_session, tool_text):
    result = await app_with_activity.call_tool("get_time_series", {
        "resource": "heartbeat",
        "base_date": "2024-01-31",
    })

    data = json.loads(tool_text(result))
    assert "Unknown resource 'heartbeat'" in data["error"]
    mock_session.get.assert_not_called()


@pytest.mark.asyncio
async def test_end_date_and_period_rejected(app_with_activity, mock_session, tool_text):
    result = await app_with_activity.call_tool("get_time_series", {
        "resource": "steps",
        "base_date": "2024-01-01",
        "end_date": "2024-01-07",
        "period": "7d",
    })

    data = json.loads(tool_text(result))
    assert "not both" in data["error"]
    mock_session.get.assert_not_called()


@pytest.mark.asyncio
async def test_invalid_date(app_with_activity, tool_text):
    result = await app_with_activity.call_tool("get_time_series", {
        "resource": "steps",
        "base_date": "31/01/2024",
    })

    data = json.loads(tool_text(result))
    assert "YYYY-MM-DD" in data["error"]


@pytest.mark.asyncio
async def test_time_entered_bed_keeps_clock_times(app_with_activity, mock_session, response_factory, tool_text):
    mock_session.get.return_value = response_factory(200, {
        "sleep-startTime": [
            {"dateTime": "2024-01-30", "value": "23:10"},
            {"dateTime": "2024-01-31", "value": ""},
        ]
    })

    result = await app_with_activity.call_tool("get_time_series", {
        "resource": "time_entered_bed",
        "base_date": "2024-01-31",
        "period": "7d",
    })

    data = json.loads(tool_text(result))
    assert data["data_list"] == [
        {"date_time": "2024-01-30", "value": "23:10"},
        {"date_time": "2024-01-31", "value": ""},
    ]
    mock_session.get.assert_called_once_with(
        f"{API_URL}/1/user/-/sleep/startTime/date/2024-01-31/7d.json"
    )
