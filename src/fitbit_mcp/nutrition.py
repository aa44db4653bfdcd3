"""
Nutrition tools for Fitbit MCP server.
"""

import logging

from fitbit_mcp.client_factory import get_client
from fitbit_mcp.sdk import food as sdk_food
from fitbit_mcp.utils import error_result, parse_date, render_response

logger = logging.getLogger(__name__)


def register_tools(app):
    """Register nutrition tools with the MCP app."""

    @app.tool()
    async def get_food_log(date: str, encoded_user_id: str = "") -> str:
        """
        Get the food log for a day.

        Returns each logged food with its meal and calories, the day's
        nutrition summary (calories, carbs, fat, fiber, protein, sodium,
        water) and the calorie goal.

        Args:
            date: Date in YYYY-MM-DD format
            encoded_user_id: Another user's encoded id (default: yourself)

        Returns:
            JSON with foods, summary and goals
        """
        try:
            log_date = parse_date(date)
            client = get_client()
        except ValueError as e:
            logger.error(f"Error getting food log: {e}")
            return error_result(e)
        return render_response(sdk_food.get_food(client, log_date, encoded_user_id))

    return app
