"""
Time series tools for Fitbit MCP server.

Daily values for activity, sleep, food and body resources.
"""

import logging

from fitbit_mcp.client_factory import get_client
from fitbit_mcp.sdk import time_series as sdk_time_series
from fitbit_mcp.sdk.types import INTEGER_RESOURCES, STRING_RESOURCES
from fitbit_mcp.utils import error_result, parse_date, parse_period, parse_resource, render_response

logger = logging.getLogger(__name__)


def register_tools(app):
    """Register time series tools with the MCP app."""

    @app.tool()
    async def get_time_series(
        resource: str,
        base_date: str,
        end_date: str = None,
        period: str = None,
        encoded_user_id: str = "",
    ) -> str:
        """
        Get daily values for a Fitbit resource.

        Give either end_date (base_date is then the range start) or period
        (base_date is then the last day and the period counts back).

        Args:
            resource: steps, calories, distance, floors, elevation,
                minutes_sedentary, minutes_very_active, minutes_asleep,
                time_in_bed, time_entered_bed, weight, bmi, fat, ... or a raw path like
                /activities/steps
            base_date: Date in YYYY-MM-DD format
            end_date: Range end in YYYY-MM-DD format (optional)
            period: 1d, 7d, 30d, 1w, 1m, 3m, 6m, 1y or max (optional)
            encoded_user_id: Another user's encoded id (default: yourself)

        Returns:
            JSON list of {date_time, value}
        """
        try:
            resource_type = parse_resource(resource)
            base = parse_date(base_date)
            if end_date and period:
                raise ValueError("Pass either end_date or period, not both")
            if end_date:
                end_or_period = parse_date(end_date)
            else:
                end_or_period = parse_period(period or "7d")
            client = get_client()
        except ValueError as e:
            logger.error(f"Invalid time series request: {e}")
            return error_result(e)

        if resource_type in STRING_RESOURCES:
            response = sdk_time_series.get_time_series_string(
                client, resource_type, base, end_or_period, encoded_user_id
            )
        elif resource_type in INTEGER_RESOURCES:
            response = sdk_time_series.get_time_series_int(
                client, resource_type, base, end_or_period, encoded_user_id
            )
        else:
            response = sdk_time_series.get_time_series(
                client, resource_type, base, end_or_period, encoded_user_id
            )
        return render_response(response)

    return app
