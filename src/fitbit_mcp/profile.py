"""
User tools for Fitbit MCP server.

Profile, paired devices, and friends.
"""

import json
import logging

from fitbit_mcp.client_factory import get_client
from fitbit_mcp.sdk import user as sdk_user
from fitbit_mcp.utils import error_result, render_response

logger = logging.getLogger(__name__)


def register_tools(app):
    """Register user tools with the MCP app."""

    @app.tool()
    async def get_user_profile(encoded_user_id: str = "") -> str:
        """
        Get a Fitbit user profile.

        Returns name, date of birth, height, weight, stride lengths,
        timezone and unit preferences.

        Args:
            encoded_user_id: Another user's encoded id (default: yourself)

        Returns:
            JSON with the user profile
        """
        try:
            client = get_client()
        except ValueError as e:
            logger.error(f"Error creating Fitbit client: {e}")
            return error_result(e)
        return render_response(sdk_user.get_user_profile(client, encoded_user_id))

    @app.tool()
    async def get_devices() -> str:
        """
        Get the trackers and scales paired with your account.

        Returns:
            JSON list of devices with battery level and last sync time
        """
        try:
            client = get_client()
        except ValueError as e:
            logger.error(f"Error creating Fitbit client: {e}")
            return error_result(e)
        return render_response(sdk_user.get_devices(client))

    @app.tool()
    async def get_friends(encoded_user_id: str = "") -> str:
        """
        Get a user's friends.

        Args:
            encoded_user_id: Another user's encoded id (default: yourself)

        Returns:
            JSON list of friend profiles
        """
        try:
            client = get_client()
        except ValueError as e:
            logger.error(f"Error creating Fitbit client: {e}")
            return error_result(e)
        return render_response(sdk_user.get_friends(client, encoded_user_id))

    @app.tool()
    async def get_available_features() -> str:
        """
        Get list of available Fitbit data features.

        Returns a summary of what data types and tools are available
        through this MCP server.

        Returns:
            JSON with available feature categories
        """
        features = {
            "platform": "Fitbit",
            "user": [
                "get_user_profile - Name, biometrics, timezone and units",
                "get_devices - Paired trackers and scales with battery and last sync",
                "get_friends - Friend profiles",
                "get_available_features - This feature list",
            ],
            "activity": [
                "get_time_series - Daily values for steps, calories, distance, floors, sleep, weight...",
            ],
            "body": [
                "get_body_fat - Body fat log (single day, range up to 31 days, or period)",
                "get_weight_log - Weight log (single day, range up to 31 days, or period)",
                "get_body_measurements - Weight, BMI, fat and girths for a day",
                "get_blood_pressure - Blood pressure readings for a day",
            ],
            "nutrition": [
                "get_food_log - Logged foods, nutrition summary and calorie goal for a day",
            ],
            "notes": [
                "Credentials come from FITBIT_* environment variables",
                "All tools are read-only",
            ],
        }
        return json.dumps(features, indent=2)

    return app
