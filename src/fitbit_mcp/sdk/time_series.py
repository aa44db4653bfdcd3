"""
Fitbit time series SDK functions.

All three functions accept either an end date or a DateRangePeriod as the
second bound; the two forms resolve to the same endpoint:

    /1/user/{user}{resource}/date/{base-date}/{end-date|period}.json
"""

from datetime import date
from typing import Optional, Union

from fitbit_mcp.sdk.client import FitbitClient, build_url, to_fitbit_format
from fitbit_mcp.sdk.models import (
    FitbitResponse,
    TimeSeriesDataList,
    TimeSeriesDataListInt,
    TimeSeriesDataListString,
)
from fitbit_mcp.sdk.serializer import JsonSerializer
from fitbit_mcp.sdk.types import DateRangePeriod, TimeSeriesResourceType

TIME_SERIES_TEMPLATE = "/1/user/{0}{1}/date/{2}/{3}.json"

EndDateOrPeriod = Union[date, DateRangePeriod]


def _end_segment(end_date_or_period: EndDateOrPeriod) -> str:
    if isinstance(end_date_or_period, DateRangePeriod):
        return end_date_or_period.value
    return to_fitbit_format(end_date_or_period)


def time_series_url(
    resource_type: TimeSeriesResourceType,
    base_date: date,
    end_date_or_period: EndDateOrPeriod,
    encoded_user_id: Optional[str] = None,
) -> str:
    return build_url(
        TIME_SERIES_TEMPLATE,
        encoded_user_id,
        resource_type.value,
        to_fitbit_format(base_date),
        _end_segment(end_date_or_period),
    )


def get_time_series(
    client: FitbitClient,
    resource_type: TimeSeriesResourceType,
    base_date: date,
    end_date_or_period: EndDateOrPeriod,
    encoded_user_id: Optional[str] = None,
) -> FitbitResponse[TimeSeriesDataList]:
    """
    Get a float-valued time series.

    With a date as the second bound, base_date is the start of the range.
    With a period, base_date is the end date and the period counts back.

    Returns:
        FitbitResponse with TimeSeriesDataList, from
        {"<resource-property>": [{"dateTime": ..., "value": ...}]}
    """
    url = time_series_url(resource_type, base_date, end_date_or_period, encoded_user_id)
    serializer = JsonSerializer(root_property=resource_type.time_series_property)
    return client.get(url, lambda body: serializer.deserialize(body, TimeSeriesDataList.from_list))


def get_time_series_int(
    client: FitbitClient,
    resource_type: TimeSeriesResourceType,
    base_date: date,
    end_date_or_period: EndDateOrPeriod,
    encoded_user_id: Optional[str] = None,
) -> FitbitResponse[TimeSeriesDataListInt]:
    """Get an integer-valued time series. Same URL shape as get_time_series()."""
    url = time_series_url(resource_type, base_date, end_date_or_period, encoded_user_id)
    serializer = JsonSerializer(root_property=resource_type.time_series_property)
    return client.get(url, lambda body: serializer.deserialize(body, TimeSeriesDataListInt.from_list))


def get_time_series_string(
    client: FitbitClient,
    resource_type: TimeSeriesResourceType,
    base_date: date,
    end_date_or_period: EndDateOrPeriod,
    encoded_user_id: Optional[str] = None,
) -> FitbitResponse[TimeSeriesDataListString]:
    """
    Get a text-valued time series, such as sleep start times.

    Values are kept as returned ("23:10"); days without data come back as "".
    """
    url = time_series_url(resource_type, base_date, end_date_or_period, encoded_user_id)
    serializer = JsonSerializer(root_property=resource_type.time_series_property)
    return client.get(url, lambda body: serializer.deserialize(body, TimeSeriesDataListString.from_list))
