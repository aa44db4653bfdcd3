"""
Fitbit body and heart SDK functions: blood pressure, body measurements,
body fat log, weight log.
"""

from datetime import date, timedelta
from typing import Callable, Optional, TypeVar, Union

from fitbit_mcp.sdk.client import FitbitClient, build_url, to_fitbit_format
from fitbit_mcp.sdk.models import (
    BloodPressureData,
    BodyMeasurements,
    Fat,
    FitbitResponse,
    Weight,
)
from fitbit_mcp.sdk.serializer import JsonSerializer
from fitbit_mcp.sdk.types import FAT_WEIGHT_PERIODS, MAX_LOG_RANGE_DAYS, DateRangePeriod

T = TypeVar("T")

FAT_DOCS_URL = "https://wiki.fitbit.com/display/API/API-Get-Body-Fat"
WEIGHT_DOCS_URL = "https://wiki.fitbit.com/display/API/API-Get-Body-Weight"


def get_blood_pressure(
    client: FitbitClient,
    log_date: date,
    encoded_user_id: Optional[str] = None,
) -> FitbitResponse[BloodPressureData]:
    """
    Get blood pressure readings for one day.

    GET /1/user/{user}/bp/date/{date}.json

    Returns:
        FitbitResponse with BloodPressureData {average, bp}
    """
    url = build_url("/1/user/{0}/bp/date/{1}.json", encoded_user_id, to_fitbit_format(log_date))
    return client.get(url, lambda body: JsonSerializer().deserialize(body, BloodPressureData.from_dict))


def get_body_measurements(
    client: FitbitClient,
    log_date: date,
    encoded_user_id: Optional[str] = None,
) -> FitbitResponse[BodyMeasurements]:
    """
    Get body measurements for one day.

    GET /1/user/{user}/body/date/{date}.json

    Returns:
        FitbitResponse with BodyMeasurements {body, goals}
    """
    url = build_url("/1/user/{0}/body/date/{1}.json", encoded_user_id, to_fitbit_format(log_date))
    return client.get(url, lambda body: JsonSerializer().deserialize(body, BodyMeasurements.from_dict))


def _log_url(
    resource: str,
    start_date: date,
    end_date: Optional[date],
    period: Optional[Union[DateRangePeriod, str]],
    docs_url: str,
) -> str:
    """Resolve one of the three body log call shapes, validating before any request."""
    if end_date is not None and period is not None:
        raise ValueError("Pass either end_date or period, not both")

    if period is not None:
        # Accept the keyword ("7d") as well as the enum member
        period = DateRangePeriod(period)
        if period not in FAT_WEIGHT_PERIODS:
            raise ValueError(
                f"This API endpoint only supports range up to {MAX_LOG_RANGE_DAYS} days "
                f"(got period '{period.value}'). See {docs_url}"
            )
        return build_url(
            f"/1/user/{{0}}/body/log/{resource}/date/{{1}}/{{2}}.json",
            None,
            to_fitbit_format(start_date),
            period.value,
        )

    if end_date is None:
        return build_url(
            f"/1/user/{{0}}/body/log/{resource}/date/{{1}}.json",
            None,
            to_fitbit_format(start_date),
        )

    if start_date + timedelta(days=MAX_LOG_RANGE_DAYS) < end_date:
        raise ValueError(
            f"{MAX_LOG_RANGE_DAYS} days is the max span. "
            f"Try using period format instead for longer: {docs_url}"
        )
    return build_url(
        f"/1/user/{{0}}/body/log/{resource}/date/{{1}}/{{2}}.json",
        None,
        to_fitbit_format(start_date),
        to_fitbit_format(end_date),
    )


def _get_log(
    client: FitbitClient,
    url: str,
    root_property: str,
    factory: Callable[[list], T],
) -> FitbitResponse[T]:
    serializer = JsonSerializer(root_property=root_property)
    return client.get(url, lambda body: serializer.deserialize(body, factory))


def get_fat(
    client: FitbitClient,
    start_date: date,
    end_date: Optional[date] = None,
    period: Optional[Union[DateRangePeriod, str]] = None,
) -> FitbitResponse[Fat]:
    """
    Get body fat logs for the current user.

    Three shapes:
        get_fat(client, day)                          single date
        get_fat(client, start, end_date=end)          range, max 31 days
        get_fat(client, start, period=ONE_WEEK)       1d, 7d, 1w, 30d or 1m

    GET /1/user/-/body/log/fat/date/{date}[/{end-date|period}].json

    Raises:
        ValueError: For an unsupported period or a range over 31 days
    """
    url = _log_url("fat", start_date, end_date, period, FAT_DOCS_URL)
    return _get_log(client, url, "fat", Fat.from_list)


def get_weight(
    client: FitbitClient,
    start_date: date,
    end_date: Optional[date] = None,
    period: Optional[Union[DateRangePeriod, str]] = None,
) -> FitbitResponse[Weight]:
    """
    Get weight logs for the current user. Same call shapes as get_fat().

    GET /1/user/-/body/log/weight/date/{date}[/{end-date|period}].json

    Raises:
        ValueError: For an unsupported period or a range over 31 days
    """
    url = _log_url("weight", start_date, end_date, period, WEIGHT_DOCS_URL)
    return _get_log(client, url, "weight", Weight.from_list)
