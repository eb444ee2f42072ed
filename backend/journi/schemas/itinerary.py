import uuid
from datetime import date

from pydantic import BaseModel, Field, field_validator

from journi.schemas.candidates import FlightCandidate, HotelCandidate, Preferences, coerce_number


class ItineraryRequest(BaseModel):
    destination: str = Field(min_length=1)
    dates: list[date] = Field(min_length=1)
    preferences: Preferences
    flights: list[FlightCandidate] | None = None
    hotels: list[HotelCandidate] | None = None

    @field_validator("destination")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("destination must not be blank")
        return v.strip()


class ItineraryResult(BaseModel):
    """Model reply, with every key defaulted when the model leaves it out."""

    itinerary: list[dict] = Field(default_factory=list)
    summary: str = ""
    estimated_total_cost: float = 0.0

    @field_validator("itinerary", mode="before")
    @classmethod
    def _days(cls, v):
        if not isinstance(v, list):
            return []
        return [d for d in v if isinstance(d, dict)]

    @field_validator("summary", mode="before")
    @classmethod
    def _summary(cls, v):
        return "" if v is None else str(v)

    @field_validator("estimated_total_cost", mode="before")
    @classmethod
    def _cost(cls, v):
        return coerce_number(v)


class PreferencesResponse(BaseModel):
    weights: dict[str, float]
    preferences: Preferences


class PdfRequest(BaseModel):
    tripId: uuid.UUID | None = None
