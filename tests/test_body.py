"""
Tests for Fitbit MCP body tools.
"""

import json
import pytest
from mcp.server.fastmcp import FastMCP

from fitbit_mcp import body
from fitbit_mcp.sdk.client import API_URL


@pytest.fixture
def app_with_body():
    app = FastMCP("Test Fitbit Body")
    app = body.register_tools(app)
    return app


@pytest.mark.asyncio
async def test_get_body_fat_period(app_with_body, mock_session, response_factory, tool_text):
    mock_session.get.return_value = response_factory(200, {
        "fat": [{"date": "2024-01-01", "fat": 14.5, "logId": 1, "time": "07:00:00"}]
    })

    result = await app_with_body.call_tool("get_body_fat", {"start_date": "2024-01-01", "period": "1d"})

    data = json.loads(tool_text(result))
    assert data["fat_logs"][0]["fat"] == 14.5
    assert data["fat_logs"][0]["date"] == "2024-01-01"
    mock_session.get.assert_called_once_with(f"{API_URL}/1/user/-/body/log/fat/date/2024-01-01/1d.json")


@pytest.mark.asyncio
async def test_get_body_fat_unsupported_period(app_with_body, mock_session, tool_text):
    result = await app_with_body.call_tool("get_body_fat", {"start_date": "2024-01-01", "period": "3m"})

    data = json.loads(tool_text(result))
    assert "31 days" in data["error"]
    mock_session.get.assert_not_called()


@pytest.mark.asyncio
async def test_get_weight_log_range(app_with_body, mock_session, response_factory, tool_text):
    mock_session.get.return_value = response_factory(200, {
        "weight": [{"bmi": 23.57, "date": "2024-01-15", "logId": 2, "weight": 73.0}]
    })

    result = await app_with_body.call_tool(
        "get_weight_log", {"start_date": "2024-01-01", "end_date": "2024-02-01"}
    )

    data = json.loads(tool_text(result))
    assert data["weights"][0]["weight"] == 73.0
    mock_session.get.assert_called_once_with(
        f"{API_URL}/1/user/-/body/log/weight/date/2024-01-01/2024-02-01.json"
    )


@pytest.mark.asyncio
async def test_get_weight_log_range_too_long(app_with_body, mock_session, tool_text):
    result = await app_with_body.call_tool(
        "get_weight_log", {"start_date": "2024-01-01", "end_date": "2024-02-02"}
    )

    data = json.loads(tool_text(result))
    assert "max span" in data["error"]
    mock_session.get.assert_not_called()


@pytest.mark.asyncio
async def test_get_body_measurements(app_with_body, mock_session, response_factory, tool_text):
    mock_session.get.return_value = response_factory(200, {
        "body": {"bmi": 22.1, "weight": 70.2},
        "goals": {"weight": 68},
    })

    result = await app_with_body.call_tool("get_body_measurements", {"date": "2024-01-31"})

    data = json.loads(tool_text(result))
    assert data["body"]["weight"] == 70.2
    assert data["goals"]["weight"] == 68


@pytest.mark.asyncio
async def test_get_blood_pressure(app_with_body, mock_session, response_factory, tool_text):
    mock_session.get.return_value = response_factory(200, {
        "average": {"condition": "Normal", "diastolic": 78, "systolic": 118},
        "bp": [{"diastolic": 78, "logId": 9, "systolic": 118, "time": "08:00"}],
    })

    result = await app_with_body.call_tool(
        "get_blood_pressure", {"date": "2024-01-31", "encoded_user_id": "228TQ4"}
    )

    data = json.loads(tool_text(result))
    assert data["average"]["condition"] == "Normal"
    assert data["bp"][0]["systolic"] == 118
    mock_session.get.assert_called_once_with(f"{API_URL}/1/user/228TQ4/bp/date/2024-01-31.json")


@pytest.mark.asyncio
async def test_server_error(app_with_body, mock_session, response_factory, tool_text):
    mock_session.get.return_value = response_factory(502, "<html>Bad Gateway</html>")

    result = await app_with_body.call_tool("get_blood_pressure", {"date": "2024-01-31"})

    data = json.loads(tool_text(result))
    assert data == {"success": False, "status_code": 502, "errors": []}


def test_body_tools_registered(app_with_body):
    tool_names = list(app_with_body._tool_manager._tools.keys())
    assert set(tool_names) >= {
        "get_body_fat", "get_weight_log", "get_body_measurements", "get_blood_pressure",
    }
