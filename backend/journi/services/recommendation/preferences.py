"""Derive activity-category weights from the trip vibe."""

from journi.schemas.candidates import Preferences
from journi.services.recommendation.config import (
    DEFAULT_PREFERENCE_WEIGHTS,
    VIBE_PREFERENCE_WEIGHTS,
    resolve_vibe,
)


def calculate_preference_weights(preferences: Preferences) -> dict[str, float]:
    """
    Return food/outdoors/museums/nightlife/relaxation weights summing to 1.0.

    Only vibe is consulted. Budget, purpose, food and pace are accepted but
    leave the weights untouched; an unknown or missing vibe yields the
    uniform 0.2 default.
    """
    vibe = resolve_vibe(preferences.vibe)
    weights = VIBE_PREFERENCE_WEIGHTS.get(vibe, DEFAULT_PREFERENCE_WEIGHTS)
    return weights.to_dict()
