"""
Fitbit API Low-Level SDK.

Thin typed wrapper over the Fitbit HTTP API.
Each function maps 1:1 to a Fitbit endpoint and returns a FitbitResponse.
"""

from fitbit_mcp.sdk.client import API_URL, FitbitClient, build_url, to_fitbit_format
from fitbit_mcp.sdk.models import (
    ApiError,
    BloodPressureData,
    BodyMeasurements,
    Device,
    Fat,
    FitbitResponse,
    Food,
    TimeSeriesDataList,
    TimeSeriesDataListInt,
    TimeSeriesDataListString,
    UserProfile,
    Weight,
)
from fitbit_mcp.sdk.types import (
    DateRangePeriod,
    TimeSeriesResourceType,
    FAT_WEIGHT_PERIODS,
    MAX_LOG_RANGE_DAYS,
    STRING_RESOURCES,
)
from fitbit_mcp.sdk.user import get_devices, get_friends, get_user_profile
from fitbit_mcp.sdk.time_series import get_time_series, get_time_series_int, get_time_series_string
from fitbit_mcp.sdk.food import get_food
from fitbit_mcp.sdk.body import get_blood_pressure, get_body_measurements, get_fat, get_weight

__all__ = [
    # Client
    "API_URL", "FitbitClient", "build_url", "to_fitbit_format",
    # Models
    "ApiError", "FitbitResponse", "UserProfile", "Device",
    "TimeSeriesDataList", "TimeSeriesDataListInt", "TimeSeriesDataListString", "Food",
    "BloodPressureData", "BodyMeasurements", "Fat", "Weight",
    # Types
    "DateRangePeriod", "TimeSeriesResourceType", "FAT_WEIGHT_PERIODS", "MAX_LOG_RANGE_DAYS",
    "STRING_RESOURCES",
    # Endpoints
    "get_devices", "get_friends", "get_user_profile",
    "get_time_series", "get_time_series_int", "get_time_series_string",
    "get_food",
    "get_blood_pressure", "get_body_measurements", "get_fat", "get_weight",
]
