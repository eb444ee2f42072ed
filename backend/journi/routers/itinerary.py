"""Itinerary router — pick the best flight/hotel, generate a plan, save the trip."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from journi.database import get_db
from journi.schemas.itinerary import ItineraryRequest
from journi.services.itinerary_generator import ItineraryGenerationError, itinerary_generator
from journi.services.recommendation import select_best_flight, select_best_hotel
from journi.services.trip_service import trip_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("")
async def create_itinerary(
    req: ItineraryRequest,
    db: AsyncSession = Depends(get_db),
):
    """Rank candidates, ask the LLM for a day-by-day plan and persist everything."""
    selected_flight = select_best_flight(req.flights or [])
    selected_hotel = select_best_hotel(req.hotels or [], req.preferences.vibe)

    try:
        result = await itinerary_generator.generate(
            destination=req.destination,
            dates=req.dates,
            preferences=req.preferences,
            selected_flight=selected_flight,
            selected_hotel=selected_hotel,
        )
    except ItineraryGenerationError as e:
        logger.warning(f"Itinerary generation failed for {req.destination}: {e}")
        raise HTTPException(
            status_code=422, detail="Failed to generate itinerary. Please try again."
        )

    try:
        trip = await trip_service.create_trip(db, req, result)
    except SQLAlchemyError as e:
        logger.error(f"Saving trip to {req.destination} failed: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

    return {
        "tripId": str(trip.id),
        "selectedFlight": selected_flight.model_dump() if selected_flight else None,
        "selectedHotel": selected_hotel.model_dump() if selected_hotel else None,
        "itinerary": result.itinerary,
        "summary": result.summary,
        "estimated_total_cost": result.estimated_total_cost,
    }
