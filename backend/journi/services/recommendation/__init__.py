"""Recommendation engine — deterministic ranking of flight and hotel candidates."""

from journi.services.recommendation.flights import rank_flights, select_best_flight
from journi.services.recommendation.hotels import location_score, rank_hotels, select_best_hotel
from journi.services.recommendation.preferences import calculate_preference_weights
from journi.services.recommendation.scoring import normalize, parse_duration

__all__ = [
    "calculate_preference_weights",
    "location_score",
    "normalize",
    "parse_duration",
    "rank_flights",
    "rank_hotels",
    "select_best_flight",
    "select_best_hotel",
]
