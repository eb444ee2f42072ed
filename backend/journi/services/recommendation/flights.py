"""Flight ranking — weighted price / duration / stopover scoring."""

from journi.schemas.candidates import FlightCandidate
from journi.services.recommendation.config import FLIGHT_WEIGHTS, FlightWeights
from journi.services.recommendation.scoring import normalize, parse_duration


def rank_flights(
    flights: list[FlightCandidate],
    weights: FlightWeights = FLIGHT_WEIGHTS,
) -> list[FlightCandidate]:
    """
    Score and rank flight candidates.

    Each flight gets a score in [0, 1] (higher = better). Returns new copies
    with 'score' set, sorted by score descending; ties keep input order.
    A single flight is returned as-is and unscored.
    """
    if not flights:
        return []
    if len(flights) == 1:
        return list(flights)

    prices = [f.price for f in flights]
    durations = [parse_duration(f.duration) for f in flights]
    stopovers = [f.stopovers for f in flights]

    min_price, max_price = min(prices), max(prices)
    min_duration, max_duration = min(durations), max(durations)
    max_stopovers = max(stopovers)

    scored = []
    for flight, duration, stops in zip(flights, durations, stopovers):
        # Cheaper and shorter are better (inverted)
        price_score = 1.0 - normalize(flight.price, min_price, max_price)
        duration_score = 1.0 - normalize(duration, min_duration, max_duration)

        # Nobody has a layover -> everyone gets full marks
        stopover_score = 1.0 if max_stopovers == 0 else 1.0 - stops / max_stopovers

        total = (
            weights.price * price_score
            + weights.duration * duration_score
            + weights.stopover * stopover_score
        )
        scored.append(flight.model_copy(update={"score": total}))

    return sorted(scored, key=lambda f: f.score, reverse=True)


def select_best_flight(flights: list[FlightCandidate]) -> FlightCandidate | None:
    ranked = rank_flights(flights)
    return ranked[0] if ranked else None
