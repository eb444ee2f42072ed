"""Vision router — screenshot upload to structured flight/hotel candidates."""

import logging

from fastapi import APIRouter, File, HTTPException, UploadFile

from journi.config import settings
from journi.services.vision_parser import VisionParseError, vision_parser

logger = logging.getLogger(__name__)

router = APIRouter()

ALLOWED_MIME_TYPES = {"image/jpeg", "image/jpg", "image/png"}


@router.post("/parse")
async def parse_screenshot(image: UploadFile | None = File(None)):
    """Extract flights and hotels from a PNG/JPG travel screenshot."""
    if image is None:
        raise HTTPException(status_code=400, detail="No image file provided")

    if image.content_type not in ALLOWED_MIME_TYPES:
        raise HTTPException(status_code=400, detail="Upload PNG or JPG only.")

    data = await image.read()
    if len(data) > settings.max_upload_bytes:
        limit_mb = settings.max_upload_bytes // (1024 * 1024)
        raise HTTPException(status_code=400, detail=f"File size must be less than {limit_mb}MB")

    try:
        result = await vision_parser.parse(data, image.content_type)
    except VisionParseError as e:
        logger.warning(f"Vision parse failed for {image.filename}: {e}")
        raise HTTPException(
            status_code=422, detail="Could not extract data from image. Try a clearer image."
        )

    return {
        "flights": result["flights"],
        "hotels": result["hotels"],
        "raw_text": "Image processed successfully",
    }
