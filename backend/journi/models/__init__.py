from journi.models.trip import Flight, Hotel, Itinerary, Trip

__all__ = [
    "Flight",
    "Hotel",
    "Itinerary",
    "Trip",
]
