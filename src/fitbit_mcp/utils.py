"""
Shared utility functions for Fitbit MCP server.

Argument parsing and output formatting used across tool modules.
"""

import json
import logging
from datetime import date, datetime

from fitbit_mcp.client_factory import handle_token_error, is_token_error
from fitbit_mcp.sdk.models import FitbitResponse, to_plain
from fitbit_mcp.sdk.types import RESOURCE_NAMES, DateRangePeriod, TimeSeriesResourceType

logger = logging.getLogger(__name__)


def parse_date(date_str: str) -> date:
    """Parse a YYYY-MM-DD tool argument.

    Raises:
        ValueError: If the string is not a valid date
    """
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValueError(f"Invalid date '{date_str}'. Use YYYY-MM-DD format")


def parse_period(period: str) -> DateRangePeriod:
    """Parse a period keyword such as '7d' or '1m'.

    Raises:
        ValueError: If the keyword is unknown
    """
    try:
        return DateRangePeriod(period)
    except ValueError:
        valid = ", ".join(p.value for p in DateRangePeriod)
        raise ValueError(f"Invalid period '{period}'. Must be one of: {valid}")


def parse_resource(resource: str) -> TimeSeriesResourceType:
    """Resolve a friendly resource name ('steps') or raw path ('/activities/steps')."""
    if resource in RESOURCE_NAMES:
        return RESOURCE_NAMES[resource]
    try:
        return TimeSeriesResourceType(resource)
    except ValueError:
        valid = ", ".join(sorted(RESOURCE_NAMES))
        raise ValueError(f"Unknown resource '{resource}'. Must be one of: {valid}")


def render_response(response: FitbitResponse) -> str:
    """Render a FitbitResponse as the JSON text returned by a tool.

    Success returns the payload. Failure returns status and API errors,
    or the credentials hint when the API rejected the token.
    """
    if response.success:
        return json.dumps(to_plain(response.data), indent=2)

    logger.error(
        "Fitbit API call failed with status %s: %s",
        response.status_code,
        [e.message for e in response.errors],
    )
    if is_token_error(response.errors):
        return handle_token_error()

    return json.dumps({
        "success": False,
        "status_code": response.status_code,
        "errors": to_plain(response.errors),
    }, indent=2)


def error_result(error: Exception) -> str:
    """JSON payload for a configuration or input error."""
    return json.dumps({"error": str(error)}, indent=2)
