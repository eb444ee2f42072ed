"""Trip service — persists a planned trip and loads it back for export."""

import logging
import uuid
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from journi.models.trip import Flight, Hotel, Itinerary, Trip
from journi.schemas.itinerary import ItineraryRequest, ItineraryResult

logger = logging.getLogger(__name__)


class TripService:
    """Stores trips with their candidate flights, hotels and generated itinerary."""

    async def create_trip(
        self,
        db: AsyncSession,
        request: ItineraryRequest,
        itinerary: ItineraryResult,
    ) -> Trip:
        """Insert the trip and all of its children in one transaction."""
        prefs = request.preferences
        trip = Trip(
            destination=request.destination,
            start_date=request.dates[0],
            end_date=request.dates[-1],
            budget=Decimal(str(prefs.budget or 0)),
            vibe=prefs.vibe or "leisure",
        )

        # Stored prices are whole currency units
        for i, f in enumerate(request.flights or []):
            trip.flights.append(Flight(
                position=i,
                airline=f.airline,
                price=int(f.price),
                depart_time=f.departure_time or None,
                arrive_time=f.arrival_time or None,
                duration=f.duration or None,
                stopovers=f.stopovers,
            ))

        for i, h in enumerate(request.hotels or []):
            trip.hotels.append(Hotel(
                position=i,
                name=h.name,
                price_per_night=int(h.price_per_night),
                rating=h.rating,
                location=h.location or "Unknown",
            ))

        trip.itinerary = Itinerary(json_data=itinerary.model_dump())

        db.add(trip)
        await db.commit()
        logger.info(
            f"Trip {trip.id} saved: {trip.destination}, "
            f"{len(trip.flights)} flights, {len(trip.hotels)} hotels"
        )
        return trip

    async def get_trip(self, db: AsyncSession, trip_id: uuid.UUID) -> Trip | None:
        result = await db.execute(
            select(Trip)
            .where(Trip.id == trip_id)
            .options(
                selectinload(Trip.flights),
                selectinload(Trip.hotels),
                selectinload(Trip.itinerary),
            )
        )
        return result.scalar_one_or_none()


trip_service = TripService()
