"""Hotel ranking — weighted price / rating / vibe-location scoring."""

from journi.schemas.candidates import HotelCandidate
from journi.services.recommendation.config import (
    HOTEL_WEIGHTS,
    LOCATION_SCORES,
    VIBE_LOCATION_KEYWORDS,
    HotelWeights,
    resolve_vibe,
)
from journi.services.recommendation.scoring import normalize


def location_score(location: str, vibe: str | None) -> float:
    """1.0 when the location mentions the vibe's keyword, else neutral 0.5."""
    if not vibe or not location:
        return LOCATION_SCORES.neutral
    keyword = VIBE_LOCATION_KEYWORDS.get(resolve_vibe(vibe))
    if keyword and keyword in location.lower():
        return LOCATION_SCORES.match
    return LOCATION_SCORES.neutral


def rank_hotels(
    hotels: list[HotelCandidate],
    vibe: str | None = None,
    weights: HotelWeights = HOTEL_WEIGHTS,
) -> list[HotelCandidate]:
    """
    Score and rank hotel candidates.

    Unlike price, rating is not inverted: the best-rated hotel scores 1.
    Returns new copies with 'score' set, sorted descending (stable on ties).
    A single hotel is returned as-is and unscored.
    """
    if not hotels:
        return []
    if len(hotels) == 1:
        return list(hotels)

    prices = [h.price_per_night for h in hotels]
    ratings = [h.rating for h in hotels]
    min_price, max_price = min(prices), max(prices)
    min_rating, max_rating = min(ratings), max(ratings)

    scored = []
    for hotel in hotels:
        price_score = 1.0 - normalize(hotel.price_per_night, min_price, max_price)
        rating_score = normalize(hotel.rating, min_rating, max_rating)

        total = (
            weights.price * price_score
            + weights.rating * rating_score
            + weights.location * location_score(hotel.location, vibe)
        )
        scored.append(hotel.model_copy(update={"score": total}))

    return sorted(scored, key=lambda h: h.score, reverse=True)


def select_best_hotel(hotels: list[HotelCandidate], vibe: str | None = None) -> HotelCandidate | None:
    ranked = rank_hotels(hotels, vibe)
    return ranked[0] if ranked else None
