"""Candidate and preference schemas — coerce loosely-shaped input before scoring.

Flight and hotel candidates arrive either from caller JSON or from the vision
extraction step, so fields may be missing, strings, or spelled two ways. The
validators here map every variant onto one canonical, typed field so the
recommendation engine only ever sees clean numbers.
"""

import math
import re

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, PositiveFloat, field_validator

_NUMBER_PREFIX_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)")
_INT_PREFIX_RE = re.compile(r"^[+-]?\d+")
_CURRENCY_CHARS = "$€£¥₹ ,"


def coerce_number(value) -> float:
    """Best-effort float parse: "$1,200" -> 1200.0, junk/None -> 0.0, negatives -> 0.0."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            number = 0.0
    elif isinstance(value, str):
        match = _NUMBER_PREFIX_RE.match(value.strip().lstrip(_CURRENCY_CHARS).replace(",", ""))
        number = float(match.group(0)) if match else 0.0
    else:
        number = 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def coerce_count(value) -> int:
    """Best-effort non-negative integer parse: "2 stops" -> 2, junk/None -> 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        return max(int(value), 0) if math.isfinite(value) else 0
    if isinstance(value, str):
        match = _INT_PREFIX_RE.match(value.strip())
        return max(int(match.group(0)), 0) if match else 0
    return 0


def _text(value) -> str:
    if value is None:
        return ""
    return str(value)


class FlightCandidate(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    airline: str = ""
    price: float = 0.0
    departure_time: str = Field(
        default="", validation_alias=AliasChoices("departure_time", "departTime")
    )
    arrival_time: str = Field(
        default="", validation_alias=AliasChoices("arrival_time", "arriveTime")
    )
    duration: str = ""
    stopovers: int = 0
    score: float | None = None

    @field_validator("airline", "departure_time", "arrival_time", "duration", mode="before")
    @classmethod
    def _coerce_text(cls, v):
        return _text(v)

    @field_validator("price", mode="before")
    @classmethod
    def _coerce_price(cls, v):
        return coerce_number(v)

    @field_validator("stopovers", mode="before")
    @classmethod
    def _coerce_stopovers(cls, v):
        return coerce_count(v)


class HotelCandidate(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = ""
    price_per_night: float = Field(
        default=0.0, validation_alias=AliasChoices("price_per_night", "pricePerNight")
    )
    rating: float = 0.0
    location: str = ""
    score: float | None = None

    @field_validator("name", "location", mode="before")
    @classmethod
    def _coerce_text(cls, v):
        return _text(v)

    @field_validator("price_per_night", "rating", mode="before")
    @classmethod
    def _coerce_number(cls, v):
        return coerce_number(v)


class Preferences(BaseModel):
    """Trip preferences. Only vibe drives scoring; the rest feeds the itinerary prompt."""

    budget: PositiveFloat | None = None
    vibe: str | None = None
    purpose: str | None = None
    food: list[str] | None = None
    pace: str | None = None


def to_flight_candidates(raw: list[dict] | None) -> list[FlightCandidate]:
    return [FlightCandidate.model_validate(f) for f in raw or [] if isinstance(f, dict)]


def to_hotel_candidates(raw: list[dict] | None) -> list[HotelCandidate]:
    return [HotelCandidate.model_validate(h) for h in raw or [] if isinstance(h, dict)]
