"""
Fitbit food log SDK functions.
"""

from datetime import date
from typing import Optional

from fitbit_mcp.sdk.client import FitbitClient, build_url, to_fitbit_format
from fitbit_mcp.sdk.models import Food, FitbitResponse
from fitbit_mcp.sdk.serializer import JsonSerializer


def get_food(
    client: FitbitClient,
    log_date: date,
    encoded_user_id: Optional[str] = None,
) -> FitbitResponse[Food]:
    """
    Get the food log for one day.

    GET /1/user/{user}/foods/log/date/{date}.json

    Returns:
        FitbitResponse with Food {foods, summary, goals}
    """
    url = build_url("/1/user/{0}/foods/log/date/{1}.json", encoded_user_id, to_fitbit_format(log_date))
    return client.get(url, lambda body: JsonSerializer().deserialize(body, Food.from_dict))
