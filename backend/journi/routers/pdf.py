"""PDF router — download a saved trip as a travel-plan PDF."""

import logging
import re

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from journi.database import get_db
from journi.schemas.itinerary import PdfRequest
from journi.services.export_service import export_service
from journi.services.trip_service import trip_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("")
async def trip_pdf(
    req: PdfRequest,
    db: AsyncSession = Depends(get_db),
):
    """Download the travel plan for a trip as PDF."""
    if req.tripId is None:
        raise HTTPException(status_code=400, detail="Trip ID is required")

    trip = await trip_service.get_trip(db, req.tripId)
    if not trip:
        raise HTTPException(status_code=404, detail="Trip not found")

    try:
        pdf_bytes = export_service.generate_trip_pdf(trip)
    except Exception as e:
        logger.error(f"PDF generation failed for trip {trip.id}: {e}")
        raise HTTPException(status_code=500, detail="PDF generation failed. Try again.")

    filename = re.sub(r"[^A-Za-z0-9_-]+", "-", trip.destination).strip("-") or "plan"
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="journi-trip-{filename}.pdf"'},
    )
