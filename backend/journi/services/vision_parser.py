"""Vision parser — extracts flight and hotel candidates from a travel screenshot."""

import json
import logging

from journi.config import settings
from journi.services.llm_client import llm_client

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a travel data extraction model. Return clean JSON only. "
    "Extract flight and hotel information from images."
)

USER_PROMPT = """Extract all flight and hotel data from this screenshot.
Return ONLY valid JSON with fields:
flights: [{airline, price, departure_time, arrival_time, duration, stopovers}]
hotels: [{name, price_per_night, rating, location}]

If no flights are found, return empty array for flights. Same for hotels.
Ensure all prices are numbers without currency symbols."""


class VisionParseError(Exception):
    """The screenshot could not be turned into structured travel data."""


def strip_code_fences(raw: str) -> str:
    """Drop ```json fences some models wrap around JSON replies."""
    if raw.startswith("```"):
        lines = raw.split("\n")
        lines = [l for l in lines if not l.strip().startswith("```")]
        raw = "\n".join(lines).strip()
    return raw


class VisionParser:
    """Turns a screenshot into best-effort {flights, hotels} lists."""

    async def parse(self, image: bytes, mime_type: str = "image/jpeg") -> dict:
        """
        Returns dict with keys: flights, hotels (lists of raw dicts).

        Fields inside each entry may be missing or malformed; candidates are
        coerced later by the candidate schemas.
        """
        if mime_type == "image/jpg":
            mime_type = "image/jpeg"

        raw = ""
        try:
            raw = await llm_client.complete(
                system=SYSTEM_PROMPT,
                user=USER_PROMPT,
                image=image,
                image_mime_type=mime_type,
                max_tokens=settings.vision_max_tokens,
                json_mode=True,
            )
            parsed = json.loads(strip_code_fences(raw))
        except json.JSONDecodeError as e:
            logger.warning(f"Vision parse: invalid JSON response: {e}\nRaw: {raw[:500]}")
            raise VisionParseError("Failed to parse image with Vision API") from e
        except Exception as e:
            logger.error(f"Vision parse: LLM error: {e}")
            raise VisionParseError("Failed to parse image with Vision API") from e

        if not isinstance(parsed, dict):
            raise VisionParseError("Vision API returned a non-object payload")

        flights = parsed.get("flights")
        hotels = parsed.get("hotels")
        return {
            "flights": flights if isinstance(flights, list) else [],
            "hotels": hotels if isinstance(hotels, list) else [],
        }


vision_parser = VisionParser()
