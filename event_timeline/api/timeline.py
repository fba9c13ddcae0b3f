"""
Timeline APIs.

POST /timeline/layout: column layout for a day's (or several days') entries.
POST /timeline/import: parse an uploaded schedule into entries to insert.
GET /timeline/days: the calendar days of an event.
"""

import logging
from datetime import date
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Form, HTTPException, Query, UploadFile, status

from event_timeline.api.auth import get_current_user
from event_timeline.config import Settings, get_settings
from event_timeline.models.timeline import LayoutRequest
from event_timeline.models.user import CurrentUser
from event_timeline.services.document_service import UnsupportedDocumentError
from event_timeline.services.layout_service import layout_by_day
from event_timeline.services.time_service import generate_date_range
from event_timeline.workers.document_processor import process_upload

logger = logging.getLogger(__name__)
router = APIRouter()

NO_EVENTS_FOUND = (
    "No timeline events found. Please ensure your document has times in formats like "
    '"9:00 AM - Event Name" or "14:30 - Event Name"'
)


@router.post(
    "/layout",
    response_model=dict,
    summary="Lay out timeline entries",
)
async def layout_timeline(
    body: LayoutRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> dict:
    """
    Return the on-screen position of every entry, grouped by day.
    Overlapping entries share the width; malformed ones get the minimum height.
    """
    pixels_per_hour = body.pixels_per_hour or settings.default_pixels_per_hour
    days = layout_by_day(
        body.entries,
        pixels_per_hour,
        default_date=body.event_date,
        pad_minutes=settings.layout_pad_minutes,
        min_height_px=settings.layout_min_height_px,
        default_duration_minutes=settings.default_duration_minutes,
    )
    logger.debug("Laid out %d entries over %d days for user %s", len(body.entries), len(days), current_user.id)
    return {
        "pixels_per_hour": pixels_per_hour,
        "days": {
            (day.isoformat() if day else "undated"): {
                entry_id: layout.model_dump() for entry_id, layout in layouts.items()
            }
            for day, layouts in days.items()
        },
    }


@router.post(
    "/import",
    response_model=dict,
    summary="Import timeline entries from a document",
)
async def import_timeline(
    file: UploadFile,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    settings: Annotated[Settings, Depends(get_settings)],
    event_date: Annotated[Optional[date], Form()] = None,
) -> dict:
    """
    Accept a PDF, DOCX or text schedule and return the entries found in it,
    ready to insert for event_date. Nothing is stored here.
    """
    content = await file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File size exceeds {settings.max_upload_size_mb} MB",
        )

    filename = file.filename or "schedule.txt"
    logger.info("Importing %s (%d bytes) for user %s", filename, len(content), current_user.id)
    try:
        entries = await process_upload(filename, content, event_date=event_date, content_type=file.content_type)
    except UnsupportedDocumentError as e:
        logger.info("Rejected upload %s: %s", filename, e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    if not entries:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=NO_EVENTS_FOUND)

    return {
        "filename": filename,
        "count": len(entries),
        "entries": [e.model_dump(mode="json") for e in entries],
    }


@router.get(
    "/days",
    response_model=dict,
    summary="List the days of an event",
)
async def list_event_days(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    start_date: date,
    end_date: Annotated[Optional[date], Query()] = None,
) -> dict:
    """Every day from start_date through end_date (inclusive), for the day picker."""
    return {"dates": [d.isoformat() for d in generate_date_range(start_date, end_date)]}
