"""Recommendation engine configuration — single source for all scoring weights."""

from dataclasses import asdict, dataclass
from enum import Enum


class Vibe(str, Enum):
    """Trip-style tags recognized by the scoring tables."""
    ADVENTURE = "adventure"
    RELAXING = "relaxing"
    PARTY = "party"
    LUXURY = "luxury"
    CULTURAL = "cultural"


@dataclass(frozen=True)
class FlightWeights:
    """Price dominates, duration second, stopovers third."""
    price: float = 0.5
    duration: float = 0.3
    stopover: float = 0.2


@dataclass(frozen=True)
class HotelWeights:
    price: float = 0.4
    rating: float = 0.4
    location: float = 0.2


@dataclass(frozen=True)
class LocationScores:
    """Location sub-score when a hotel does / does not match the vibe keyword."""
    match: float = 1.0
    neutral: float = 0.5


@dataclass(frozen=True)
class PreferenceWeights:
    """Activity-category weights derived from the trip vibe. Sum to 1.0."""
    food: float = 0.2
    outdoors: float = 0.2
    museums: float = 0.2
    nightlife: float = 0.2
    relaxation: float = 0.2

    @property
    def total(self) -> float:
        return self.food + self.outdoors + self.museums + self.nightlife + self.relaxation

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


FLIGHT_WEIGHTS = FlightWeights()
HOTEL_WEIGHTS = HotelWeights()
LOCATION_SCORES = LocationScores()

# Hotel location keyword per vibe (case-insensitive substring match).
# luxury / cultural have no keyword and always score neutral.
VIBE_LOCATION_KEYWORDS: dict[Vibe, str] = {
    Vibe.PARTY: "downtown",
    Vibe.RELAXING: "beach",
    Vibe.ADVENTURE: "mountain",
}

DEFAULT_PREFERENCE_WEIGHTS = PreferenceWeights()

VIBE_PREFERENCE_WEIGHTS: dict[Vibe, PreferenceWeights] = {
    Vibe.ADVENTURE: PreferenceWeights(
        food=0.2, outdoors=0.5, museums=0.1, nightlife=0.1, relaxation=0.1,
    ),
    Vibe.PARTY: PreferenceWeights(
        food=0.3, outdoors=0.1, museums=0.05, nightlife=0.5, relaxation=0.05,
    ),
    Vibe.RELAXING: PreferenceWeights(
        food=0.3, outdoors=0.2, museums=0.05, nightlife=0.05, relaxation=0.4,
    ),
    Vibe.LUXURY: PreferenceWeights(
        food=0.3, outdoors=0.2, museums=0.05, nightlife=0.05, relaxation=0.4,
    ),
    Vibe.CULTURAL: PreferenceWeights(
        food=0.3, outdoors=0.15, museums=0.4, nightlife=0.1, relaxation=0.05,
    ),
}


def resolve_vibe(vibe: str | None) -> Vibe | None:
    """Map a free-text vibe onto a known tag, case-insensitively. None if unknown."""
    if not vibe:
        return None
    try:
        return Vibe(vibe.lower())
    except ValueError:
        return None
