"""
Fitbit API types, enums, and constants.

All Fitbit-specific keywords and path segments live here.
"""

from enum import Enum


class DateRangePeriod(Enum):
    """Range shorthands accepted in place of an explicit end date."""
    ONE_DAY = "1d"
    SEVEN_DAYS = "7d"
    THIRTY_DAYS = "30d"
    ONE_WEEK = "1w"
    ONE_MONTH = "1m"
    THREE_MONTHS = "3m"
    SIX_MONTHS = "6m"
    ONE_YEAR = "1y"
    MAX = "max"


class TimeSeriesResourceType(Enum):
    """Time series resource path segments.

    The value is inserted after the user id in
    /1/user/{user}{resource}/date/{base}/{end}.json
    """
    # Food
    CALORIES_IN = "/foods/log/caloriesIn"
    WATER = "/foods/log/water"

    # Activity
    CALORIES_OUT = "/activities/calories"
    STEPS = "/activities/steps"
    DISTANCE = "/activities/distance"
    FLOORS = "/activities/floors"
    ELEVATION = "/activities/elevation"
    MINUTES_SEDENTARY = "/activities/minutesSedentary"
    MINUTES_LIGHTLY_ACTIVE = "/activities/minutesLightlyActive"
    MINUTES_FAIRLY_ACTIVE = "/activities/minutesFairlyActive"
    MINUTES_VERY_ACTIVE = "/activities/minutesVeryActive"
    ACTIVITY_CALORIES = "/activities/activityCalories"

    # Activity (tracker only)
    CALORIES_OUT_TRACKER = "/activities/tracker/calories"
    STEPS_TRACKER = "/activities/tracker/steps"
    DISTANCE_TRACKER = "/activities/tracker/distance"
    FLOORS_TRACKER = "/activities/tracker/floors"
    ELEVATION_TRACKER = "/activities/tracker/elevation"
    MINUTES_SEDENTARY_TRACKER = "/activities/tracker/minutesSedentary"
    MINUTES_LIGHTLY_ACTIVE_TRACKER = "/activities/tracker/minutesLightlyActive"
    MINUTES_FAIRLY_ACTIVE_TRACKER = "/activities/tracker/minutesFairlyActive"
    MINUTES_VERY_ACTIVE_TRACKER = "/activities/tracker/minutesVeryActive"
    ACTIVITY_CALORIES_TRACKER = "/activities/tracker/activityCalories"

    # Sleep
    TIME_ENTERED_BED = "/sleep/startTime"
    TIME_IN_BED = "/sleep/timeInBed"
    MINUTES_ASLEEP = "/sleep/minutesAsleep"
    AWAKENINGS_COUNT = "/sleep/awakeningsCount"
    MINUTES_AWAKE = "/sleep/minutesAwake"
    MINUTES_TO_FALL_ASLEEP = "/sleep/minutesToFallAsleep"
    MINUTES_AFTER_WAKEUP = "/sleep/minutesAfterWakeup"
    SLEEP_EFFICIENCY = "/sleep/efficiency"

    # Body
    WEIGHT = "/body/weight"
    BMI = "/body/bmi"
    FAT = "/body/fat"

    @property
    def time_series_property(self) -> str:
        """Top-level JSON key the series is returned under.

        "/activities/tracker/steps" -> "activities-tracker-steps"
        """
        return self.value.lstrip("/").replace("/", "-")


# Periods accepted by the body fat and weight log endpoints (max 31 days)
FAT_WEIGHT_PERIODS = frozenset({
    DateRangePeriod.ONE_DAY,
    DateRangePeriod.SEVEN_DAYS,
    DateRangePeriod.ONE_WEEK,
    DateRangePeriod.THIRTY_DAYS,
    DateRangePeriod.ONE_MONTH,
})

# Longest explicit date range the body fat and weight log endpoints accept
MAX_LOG_RANGE_DAYS = 31

# Human-readable names for resource keywords, used by the tool layer
RESOURCE_NAMES = {
    "steps": TimeSeriesResourceType.STEPS,
    "calories": TimeSeriesResourceType.CALORIES_OUT,
    "calories_in": TimeSeriesResourceType.CALORIES_IN,
    "water": TimeSeriesResourceType.WATER,
    "distance": TimeSeriesResourceType.DISTANCE,
    "floors": TimeSeriesResourceType.FLOORS,
    "elevation": TimeSeriesResourceType.ELEVATION,
    "minutes_sedentary": TimeSeriesResourceType.MINUTES_SEDENTARY,
    "minutes_lightly_active": TimeSeriesResourceType.MINUTES_LIGHTLY_ACTIVE,
    "minutes_fairly_active": TimeSeriesResourceType.MINUTES_FAIRLY_ACTIVE,
    "minutes_very_active": TimeSeriesResourceType.MINUTES_VERY_ACTIVE,
    "activity_calories": TimeSeriesResourceType.ACTIVITY_CALORIES,
    "time_entered_bed": TimeSeriesResourceType.TIME_ENTERED_BED,
    "time_in_bed": TimeSeriesResourceType.TIME_IN_BED,
    "minutes_asleep": TimeSeriesResourceType.MINUTES_ASLEEP,
    "minutes_awake": TimeSeriesResourceType.MINUTES_AWAKE,
    "awakenings": TimeSeriesResourceType.AWAKENINGS_COUNT,
    "sleep_efficiency": TimeSeriesResourceType.SLEEP_EFFICIENCY,
    "weight": TimeSeriesResourceType.WEIGHT,
    "bmi": TimeSeriesResourceType.BMI,
    "fat": TimeSeriesResourceType.FAT,
}

# Resources whose values are whole numbers (counts, minutes)
INTEGER_RESOURCES = frozenset({
    TimeSeriesResourceType.STEPS,
    TimeSeriesResourceType.STEPS_TRACKER,
    TimeSeriesResourceType.FLOORS,
    TimeSeriesResourceType.FLOORS_TRACKER,
    TimeSeriesResourceType.CALORIES_OUT,
    TimeSeriesResourceType.CALORIES_OUT_TRACKER,
    TimeSeriesResourceType.CALORIES_IN,
    TimeSeriesResourceType.ACTIVITY_CALORIES,
    TimeSeriesResourceType.ACTIVITY_CALORIES_TRACKER,
    TimeSeriesResourceType.MINUTES_SEDENTARY,
    TimeSeriesResourceType.MINUTES_SEDENTARY_TRACKER,
    TimeSeriesResourceType.MINUTES_LIGHTLY_ACTIVE,
    TimeSeriesResourceType.MINUTES_LIGHTLY_ACTIVE_TRACKER,
    TimeSeriesResourceType.MINUTES_FAIRLY_ACTIVE,
    TimeSeriesResourceType.MINUTES_FAIRLY_ACTIVE_TRACKER,
    TimeSeriesResourceType.MINUTES_VERY_ACTIVE,
    TimeSeriesResourceType.MINUTES_VERY_ACTIVE_TRACKER,
    TimeSeriesResourceType.TIME_IN_BED,
    TimeSeriesResourceType.MINUTES_ASLEEP,
    TimeSeriesResourceType.AWAKENINGS_COUNT,
    TimeSeriesResourceType.MINUTES_AWAKE,
    TimeSeriesResourceType.MINUTES_TO_FALL_ASLEEP,
    TimeSeriesResourceType.MINUTES_AFTER_WAKEUP,
    TimeSeriesResourceType.SLEEP_EFFICIENCY,
})

# Resources whose values are clock times rather than numbers
STRING_RESOURCES = frozenset({
    TimeSeriesResourceType.TIME_ENTERED_BED,
})
