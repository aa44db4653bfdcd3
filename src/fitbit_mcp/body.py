"""
Body and heart tools for Fitbit MCP server.

Body fat and weight logs, body measurements, blood pressure.
"""

import logging

from fitbit_mcp.client_factory import get_client
from fitbit_mcp.sdk import body as sdk_body
from fitbit_mcp.utils import error_result, parse_date, parse_period, render_response

logger = logging.getLogger(__name__)


def _log_args(start_date: str, end_date: str, period: str) -> dict:
    args = {"start_date": parse_date(start_date)}
    if end_date:
        args["end_date"] = parse_date(end_date)
    if period:
        args["period"] = parse_period(period)
    return args


def register_tools(app):
    """Register body tools with the MCP app."""

    @app.tool()
    async def get_body_fat(start_date: str, end_date: str = None, period: str = None) -> str:
        """
        Get body fat log entries.

        One day by default; pass end_date for a range of at most 31 days,
        or period (1d, 7d, 1w, 30d, 1m) counting forward from start_date.

        Args:
            start_date: Date in YYYY-MM-DD format
            end_date: Range end in YYYY-MM-DD format (optional)
            period: 1d, 7d, 1w, 30d or 1m (optional)

        Returns:
            JSON with fat log entries
        """
        try:
            args = _log_args(start_date, end_date, period)
            client = get_client()
            response = sdk_body.get_fat(client, **args)
        except ValueError as e:
            logger.error(f"Error getting body fat: {e}")
            return error_result(e)
        return render_response(response)

    @app.tool()
    async def get_weight_log(start_date: str, end_date: str = None, period: str = None) -> str:
        """
        Get weight log entries (weight, BMI, source).

        Same date options as get_body_fat.

        Args:
            start_date: Date in YYYY-MM-DD format
            end_date: Range end in YYYY-MM-DD format (optional)
            period: 1d, 7d, 1w, 30d or 1m (optional)

        Returns:
            JSON with weight log entries
        """
        try:
            args = _log_args(start_date, end_date, period)
            client = get_client()
            response = sdk_body.get_weight(client, **args)
        except ValueError as e:
            logger.error(f"Error getting weight log: {e}")
            return error_result(e)
        return render_response(response)

    @app.tool()
    async def get_body_measurements(date: str, encoded_user_id: str = "") -> str:
        """
        Get body measurements (weight, BMI, fat, girths) for a day.

        Args:
            date: Date in YYYY-MM-DD format
            encoded_user_id: Another user's encoded id (default: yourself)

        Returns:
            JSON with body measurements and weight goal
        """
        try:
            log_date = parse_date(date)
            client = get_client()
        except ValueError as e:
            logger.error(f"Error getting body measurements: {e}")
            return error_result(e)
        return render_response(sdk_body.get_body_measurements(client, log_date, encoded_user_id))

    @app.tool()
    async def get_blood_pressure(date: str, encoded_user_id: str = "") -> str:
        """
        Get blood pressure readings for a day.

        Args:
            date: Date in YYYY-MM-DD format
            encoded_user_id: Another user's encoded id (default: yourself)

        Returns:
            JSON with the day's average and individual readings
        """
        try:
            log_date = parse_date(date)
            client = get_client()
        except ValueError as e:
            logger.error(f"Error getting blood pressure: {e}")
            return error_result(e)
        return render_response(sdk_body.get_blood_pressure(client, log_date, encoded_user_id))

    return app
