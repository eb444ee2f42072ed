"""Export service — renders a saved trip as a one-page PDF travel plan."""

import io
import logging
from xml.sax.saxutils import escape

from reportlab.graphics.barcode.qr import QrCodeWidget
from reportlab.graphics.shapes import Drawing
from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from journi.config import settings
from journi.data.currency import format_price
from journi.models.trip import Trip

logger = logging.getLogger(__name__)

MAX_DAYS = 3
ACTIVITY_MAX_CHARS = 60
QR_SIZE = 80  # points


def truncate(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def trip_url(trip_id) -> str:
    return f"{settings.app_base_url.rstrip('/')}/trip/{trip_id}"


def _qr_drawing(url: str) -> Drawing:
    widget = QrCodeWidget(url)
    x1, y1, x2, y2 = widget.getBounds()
    drawing = Drawing(
        QR_SIZE, QR_SIZE,
        transform=[QR_SIZE / (x2 - x1), 0, 0, QR_SIZE / (y2 - y1), 0, 0],
    )
    drawing.add(widget)
    drawing.hAlign = "RIGHT"
    return drawing


class ExportService:
    """Generates trip PDFs."""

    def generate_trip_pdf(self, trip: Trip) -> bytes:
        """Render destination, dates, first flight/hotel, up to 3 days and a QR link."""
        buf = io.BytesIO()
        doc = SimpleDocTemplate(buf, pagesize=letter, topMargin=0.5 * inch)
        styles = getSampleStyleSheet()
        title_style = ParagraphStyle(
            "JourniTitle", parent=styles["Title"], textColor=colors.Color(0, 0.2, 0.6)
        )
        small = ParagraphStyle("Small", parent=styles["Normal"], fontSize=9, leftIndent=20)
        caption = ParagraphStyle("Caption", parent=styles["Normal"], fontSize=8, alignment=2)
        elements = []

        # Title
        elements.append(Paragraph("Journi Travel Plan", title_style))
        elements.append(Spacer(1, 12))

        # Trip details
        elements.append(Paragraph(f"<b>Destination:</b> {escape(trip.destination)}", styles["Heading3"]))
        info = [
            f"Dates: {trip.start_date:%a %b %d %Y} - {trip.end_date:%a %b %d %Y}",
            f"Budget: {format_price(trip.budget or 0)}",
            f"Vibe: {trip.vibe}",
        ]
        for line in info:
            elements.append(Paragraph(escape(line), styles["Normal"]))
        elements.append(Spacer(1, 12))

        # Flight
        if trip.flights:
            flight = trip.flights[0]
            elements.append(Paragraph("<b>Flight Information</b>", styles["Heading2"]))
            elements.append(Paragraph(
                escape(f"{flight.airline} - {format_price(flight.price)}"), styles["Normal"]
            ))
            elements.append(Paragraph(
                escape(f"{flight.depart_time or '?'} - {flight.arrive_time or '?'} ({flight.duration or 'n/a'})"),
                small,
            ))
            elements.append(Spacer(1, 8))

        # Hotel
        if trip.hotels:
            hotel = trip.hotels[0]
            elements.append(Paragraph("<b>Hotel Information</b>", styles["Heading2"]))
            elements.append(Paragraph(
                escape(f"{hotel.name} - {format_price(hotel.price_per_night)}/night"), styles["Normal"]
            ))
            elements.append(Paragraph(escape(f"Rating: {hotel.rating}/5 - {hotel.location}"), small))
            elements.append(Spacer(1, 8))

        # Itinerary
        if trip.itinerary:
            data = trip.itinerary.json_data or {}
            elements.append(Paragraph("<b>Itinerary</b>", styles["Heading2"]))

            if data.get("summary"):
                elements.append(Paragraph(escape(str(data["summary"])), styles["Normal"]))
                elements.append(Spacer(1, 6))

            days = data.get("itinerary") or []
            for i, day in enumerate(days[:MAX_DAYS]):
                elements.append(Paragraph(f"<b>Day {escape(str(day.get('day', i + 1)))}:</b>", styles["Normal"]))
                for part in ("morning", "afternoon"):
                    if day.get(part):
                        text = truncate(str(day[part]), ACTIVITY_MAX_CHARS)
                        elements.append(Paragraph(escape(f"{part.capitalize()}: {text}"), small))
                elements.append(Spacer(1, 4))

            if data.get("estimated_total_cost"):
                elements.append(Spacer(1, 6))
                elements.append(Paragraph(
                    f"<b>Total Estimated Cost: {format_price(data['estimated_total_cost'])}</b>",
                    styles["Normal"],
                ))

        # QR code linking to the web version
        elements.append(Spacer(1, 24))
        elements.append(_qr_drawing(trip_url(trip.id)))
        elements.append(Paragraph("Scan for web version", caption))

        doc.build(elements)
        logger.info(f"Rendered PDF for trip {trip.id}")
        return buf.getvalue()


export_service = ExportService()
