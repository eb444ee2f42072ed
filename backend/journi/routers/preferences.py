from fastapi import APIRouter

from journi.schemas.candidates import Preferences
from journi.schemas.itinerary import PreferencesResponse
from journi.services.recommendation import calculate_preference_weights

router = APIRouter()


@router.post("", response_model=PreferencesResponse)
async def preference_weights(prefs: Preferences):
    """Return food/outdoors/museums/nightlife/relaxation weights for the given preferences."""
    return PreferencesResponse(weights=calculate_preference_weights(prefs), preferences=prefs)
