"""
Tests for Fitbit MCP nutrition tool.
"""

import json
import pytest
from mcp.server.fastmcp import FastMCP

from fitbit_mcp import nutrition
from fitbit_mcp.sdk.client import API_URL


@pytest.fixture
def app_with_nutrition():
    app = FastMCP("Test Fitbit Nutrition")
    app = nutrition.register_tools(app)
    return app


@pytest.mark.asyncio
async def test_get_food_log(app_with_nutrition, mock_session, response_factory, tool_text):
    mock_session.get.return_value = response_factory(200, {
        "foods": [{
            "isFavorite": False,
            "logDate": "2024-01-31",
            "logId": 1820,
            "loggedFood": {"foodId": 18828, "name": "Banana", "amount": 1, "calories": 105, "mealTypeId": 1},
        }],
        "summary": {"calories": 105, "water": 750},
        "goals": {"calories": 2200},
    })

    result = await app_with_nutrition.call_tool("get_food_log", {"date": "2024-01-31"})

    data = json.loads(tool_text(result))
    assert data["foods"][0]["logged_food"]["name"] == "Banana"
    assert data["foods"][0]["nutritional_values"] is None
    assert data["summary"]["water"] == 750
    assert data["goals"]["calories"] == 2200
    mock_session.get.assert_called_once_with(f"{API_URL}/1/user/-/foods/log/date/2024-01-31.json")


@pytest.mark.asyncio
async def test_get_food_log_bad_date(app_with_nutrition, mock_session, tool_text):
    result = await app_with_nutrition.call_tool("get_food_log", {"date": "yesterday"})

    data = json.loads(tool_text(result))
    assert "Invalid date 'yesterday'" in data["error"]
    mock_session.get.assert_not_called()
