"""
Fitbit API response types.

Plain dataclasses, one per endpoint payload. Each has a from_dict()
classmethod that maps the API's camelCase JSON onto snake_case fields.
"""

from dataclasses import dataclass, field, fields, is_dataclass
from datetime import date, datetime
from typing import Any, Generic, List, Mapping, Optional, TypeVar

from requests.structures import CaseInsensitiveDict

T = TypeVar("T")


def parse_date(value: Optional[str]) -> Optional[date]:
    """Parse a Fitbit YYYY-MM-DD date string."""
    if not value:
        return None
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse a Fitbit timestamp like 2011-08-26T11:19:03.000."""
    if not value:
        return None
    return datetime.fromisoformat(value)


# ── Envelope ─────────────────────────────────────────────────────────────


@dataclass
class ApiError:
    """One entry of the "errors" array returned with an unsuccessful status."""
    error_type: str
    message: str
    field_name: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict) -> "ApiError":
        return cls(
            error_type=d["errorType"],
            message=d.get("message", ""),
            field_name=d.get("fieldName"),
        )


@dataclass
class FitbitResponse(Generic[T]):
    """Outcome of one API call.

    data is only populated when the HTTP status was 2xx. On any other
    status, errors holds whatever the API reported (possibly nothing).
    """
    status_code: int
    headers: Mapping[str, str] = field(default_factory=CaseInsensitiveDict)
    errors: List[ApiError] = field(default_factory=list)
    data: Optional[T] = None

    @property
    def success(self) -> bool:
        return 200 <= self.status_code < 300


# ── User ─────────────────────────────────────────────────────────────────


@dataclass
class UserProfile:
    """Fitbit user profile (also used for friend entries)."""
    encoded_id: str
    display_name: Optional[str] = None
    full_name: Optional[str] = None
    nickname: Optional[str] = None
    about_me: Optional[str] = None
    avatar: Optional[str] = None
    avatar150: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    stride_length_running: Optional[float] = None
    stride_length_walking: Optional[float] = None
    timezone: Optional[str] = None
    offset_from_utc_millis: Optional[int] = None
    member_since: Optional[date] = None
    locale: Optional[str] = None
    foods_locale: Optional[str] = None
    distance_unit: Optional[str] = None
    weight_unit: Optional[str] = None
    height_unit: Optional[str] = None
    glucose_unit: Optional[str] = None
    water_unit: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict) -> "UserProfile":
        return cls(
            encoded_id=d["encodedId"],
            display_name=d.get("displayName"),
            full_name=d.get("fullName"),
            nickname=d.get("nickname"),
            about_me=d.get("aboutMe"),
            avatar=d.get("avatar"),
            avatar150=d.get("avatar150"),
            city=d.get("city"),
            state=d.get("state"),
            country=d.get("country"),
            date_of_birth=parse_date(d.get("dateOfBirth")),
            gender=d.get("gender"),
            height=d.get("height"),
            weight=d.get("weight"),
            stride_length_running=d.get("strideLengthRunning"),
            stride_length_walking=d.get("strideLengthWalking"),
            timezone=d.get("timezone"),
            offset_from_utc_millis=d.get("offsetFromUTCMillis"),
            member_since=parse_date(d.get("memberSince")),
            locale=d.get("locale"),
            foods_locale=d.get("foodsLocale"),
            distance_unit=d.get("distanceUnit"),
            weight_unit=d.get("weightUnit"),
            height_unit=d.get("heightUnit"),
            glucose_unit=d.get("glucoseUnit"),
            water_unit=d.get("waterUnit"),
        )


@dataclass
class Device:
    """A tracker or scale paired with the account."""
    id: str
    device_version: str
    type: str
    battery: Optional[str] = None
    last_sync_time: Optional[datetime] = None
    mac: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict) -> "Device":
        return cls(
            id=str(d["id"]),
            device_version=d.get("deviceVersion", ""),
            type=d.get("type", ""),
            battery=d.get("battery"),
            last_sync_time=parse_datetime(d.get("lastSyncTime")),
            mac=d.get("mac"),
        )


# ── Time series ──────────────────────────────────────────────────────────


@dataclass
class TimeSeriesData:
    date_time: date
    value: float

    @classmethod
    def from_dict(cls, d: dict) -> "TimeSeriesData":
        return cls(date_time=parse_date(d["dateTime"]), value=float(d["value"]))


@dataclass
class TimeSeriesDataInt:
    date_time: date
    value: int

    @classmethod
    def from_dict(cls, d: dict) -> "TimeSeriesDataInt":
        return cls(date_time=parse_date(d["dateTime"]), value=int(d["value"]))


@dataclass
class TimeSeriesDataList:
    """Float-valued series (distance, weight, bmi...)."""
    data_list: List[TimeSeriesData] = field(default_factory=list)

    @classmethod
    def from_list(cls, items: list) -> "TimeSeriesDataList":
        return cls(data_list=[TimeSeriesData.from_dict(i) for i in items])


@dataclass
class TimeSeriesDataListInt:
    """Integer-valued series (steps, floors, minutes...)."""
    data_list: List[TimeSeriesDataInt] = field(default_factory=list)

    @classmethod
    def from_list(cls, items: list) -> "TimeSeriesDataListInt":
        return cls(data_list=[TimeSeriesDataInt.from_dict(i) for i in items])


@dataclass
class TimeSeriesDataString:
    """A value the API reports as text, e.g. sleep start time "23:10" or "" for no sleep."""
    date_time: date
    value: str

    @classmethod
    def from_dict(cls, d: dict) -> "TimeSeriesDataString":
        return cls(date_time=parse_date(d["dateTime"]), value=str(d.get("value") or ""))


@dataclass
class TimeSeriesDataListString:
    """Text-valued series (sleep start time)."""
    data_list: List[TimeSeriesDataString] = field(default_factory=list)

    @classmethod
    def from_list(cls, items: list) -> "TimeSeriesDataListString":
        return cls(data_list=[TimeSeriesDataString.from_dict(i) for i in items])


# ── Food ─────────────────────────────────────────────────────────────────


@dataclass
class NutritionalValues:
    calories: float = 0
    carbs: float = 0
    fat: float = 0
    fiber: float = 0
    protein: float = 0
    sodium: float = 0

    @classmethod
    def from_dict(cls, d: dict) -> "NutritionalValues":
        return cls(
            calories=d.get("calories", 0),
            carbs=d.get("carbs", 0),
            fat=d.get("fat", 0),
            fiber=d.get("fiber", 0),
            protein=d.get("protein", 0),
            sodium=d.get("sodium", 0),
        )


@dataclass
class LoggedFood:
    food_id: int
    name: str
    amount: float
    calories: int
    meal_type_id: int
    brand: Optional[str] = None
    access_level: Optional[str] = None
    unit_name: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict) -> "LoggedFood":
        return cls(
            food_id=d["foodId"],
            name=d.get("name", ""),
            amount=d.get("amount", 0),
            calories=d.get("calories", 0),
            meal_type_id=d.get("mealTypeId", 0),
            brand=d.get("brand"),
            access_level=d.get("accessLevel"),
            unit_name=(d.get("unit") or {}).get("name"),
        )


@dataclass
class FoodLog:
    log_id: int
    log_date: Optional[date]
    is_favorite: bool
    logged_food: LoggedFood
    nutritional_values: Optional[NutritionalValues] = None

    @classmethod
    def from_dict(cls, d: dict) -> "FoodLog":
        values = d.get("nutritionalValues")
        return cls(
            log_id=d["logId"],
            log_date=parse_date(d.get("logDate")),
            is_favorite=d.get("isFavorite", False),
            logged_food=LoggedFood.from_dict(d["loggedFood"]),
            nutritional_values=NutritionalValues.from_dict(values) if values else None,
        )


@dataclass
class FoodSummary:
    calories: float = 0
    carbs: float = 0
    fat: float = 0
    fiber: float = 0
    protein: float = 0
    sodium: float = 0
    water: float = 0

    @classmethod
    def from_dict(cls, d: dict) -> "FoodSummary":
        return cls(
            calories=d.get("calories", 0),
            carbs=d.get("carbs", 0),
            fat=d.get("fat", 0),
            fiber=d.get("fiber", 0),
            protein=d.get("protein", 0),
            sodium=d.get("sodium", 0),
            water=d.get("water", 0),
        )


@dataclass
class FoodGoals:
    calories: Optional[int] = None

    @classmethod
    def from_dict(cls, d: dict) -> "FoodGoals":
        return cls(calories=d.get("calories"))


@dataclass
class Food:
    """Food log for one day."""
    foods: List[FoodLog] = field(default_factory=list)
    summary: Optional[FoodSummary] = None
    goals: Optional[FoodGoals] = None

    @classmethod
    def from_dict(cls, d: dict) -> "Food":
        return cls(
            foods=[FoodLog.from_dict(f) for f in d.get("foods", [])],
            summary=FoodSummary.from_dict(d["summary"]) if d.get("summary") else None,
            goals=FoodGoals.from_dict(d["goals"]) if d.get("goals") else None,
        )


# ── Blood pressure ───────────────────────────────────────────────────────


@dataclass
class BloodPressureAverage:
    condition: Optional[str] = None
    diastolic: Optional[int] = None
    systolic: Optional[int] = None

    @classmethod
    def from_dict(cls, d: dict) -> "BloodPressureAverage":
        return cls(
            condition=d.get("condition"),
            diastolic=d.get("diastolic"),
            systolic=d.get("systolic"),
        )


@dataclass
class BloodPressureLog:
    log_id: int
    systolic: int
    diastolic: int
    time: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict) -> "BloodPressureLog":
        return cls(
            log_id=d["logId"],
            systolic=d["systolic"],
            diastolic=d["diastolic"],
            time=d.get("time"),
        )


@dataclass
class BloodPressureData:
    average: Optional[BloodPressureAverage] = None
    bp: List[BloodPressureLog] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict) -> "BloodPressureData":
        return cls(
            average=BloodPressureAverage.from_dict(d["average"]) if d.get("average") else None,
            bp=[BloodPressureLog.from_dict(b) for b in d.get("bp", [])],
        )


# ── Body ─────────────────────────────────────────────────────────────────


@dataclass
class Body:
    """Body measurements; values are in the user's unit system."""
    bicep: float = 0
    bmi: float = 0
    calf: float = 0
    chest: float = 0
    fat: float = 0
    forearm: float = 0
    hips: float = 0
    neck: float = 0
    thigh: float = 0
    waist: float = 0
    weight: float = 0

    @classmethod
    def from_dict(cls, d: dict) -> "Body":
        return cls(**{f.name: d.get(f.name, 0) for f in fields(cls)})


@dataclass
class BodyGoals:
    weight: Optional[float] = None

    @classmethod
    def from_dict(cls, d: dict) -> "BodyGoals":
        return cls(weight=d.get("weight"))


@dataclass
class BodyMeasurements:
    body: Body
    goals: Optional[BodyGoals] = None

    @classmethod
    def from_dict(cls, d: dict) -> "BodyMeasurements":
        return cls(
            body=Body.from_dict(d["body"]),
            goals=BodyGoals.from_dict(d["goals"]) if d.get("goals") else None,
        )


@dataclass
class FatLog:
    log_id: int
    date: Optional[date]
    fat: float
    time: Optional[str] = None
    source: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict) -> "FatLog":
        return cls(
            log_id=d["logId"],
            date=parse_date(d.get("date")),
            fat=d["fat"],
            time=d.get("time"),
            source=d.get("source"),
        )


@dataclass
class Fat:
    fat_logs: List[FatLog] = field(default_factory=list)

    @classmethod
    def from_list(cls, items: list) -> "Fat":
        return cls(fat_logs=[FatLog.from_dict(i) for i in items])


@dataclass
class WeightLog:
    log_id: int
    date: Optional[date]
    weight: float
    bmi: Optional[float] = None
    fat: Optional[float] = None
    time: Optional[str] = None
    source: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict) -> "WeightLog":
        return cls(
            log_id=d["logId"],
            date=parse_date(d.get("date")),
            weight=d["weight"],
            bmi=d.get("bmi"),
            fat=d.get("fat"),
            time=d.get("time"),
            source=d.get("source"),
        )


@dataclass
class Weight:
    weights: List[WeightLog] = field(default_factory=list)

    @classmethod
    def from_list(cls, items: list) -> "Weight":
        return cls(weights=[WeightLog.from_dict(i) for i in items])


def to_plain(value: Any) -> Any:
    """Recursively convert models (and dates) into JSON-friendly structures."""
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_plain(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, dict):
        return {k: to_plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [to_plain(v) for v in value]
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value
