"""
Document import pipeline.

Runs for each uploaded schedule: extracts text (PDF/DOCX/plain), parses
timeline lines, and builds the rows the client inserts for the selected day.

Why a thread: PDF and DOCX parsing is CPU-bound and blocking; running it via
asyncio.to_thread keeps the event loop free for other requests.
"""

import asyncio
import logging
from datetime import date
from typing import List, Optional

from event_timeline.config import get_settings
from event_timeline.models.timeline import TimelineEntryCreate
from event_timeline.services.document_service import extract_text
from event_timeline.services.parser_service import build_import_entries, parse_timeline_from_text

logger = logging.getLogger(__name__)


async def process_upload(
    filename: str,
    content: bytes,
    event_date: Optional[date] = None,
    content_type: Optional[str] = None,
) -> List[TimelineEntryCreate]:
    """
    Full pipeline for one upload: extract text -> parse lines -> build entries.
    Raises UnsupportedDocumentError for formats we cannot read.
    An empty list means the document had no recognizable timeline lines.
    """
    raw_text = await asyncio.to_thread(extract_text, filename, content, content_type)
    logger.info("Extracted %d characters from %s", len(raw_text), filename)
    if not raw_text.strip():
        logger.info("No text extracted from %s", filename)
        return []

    parsed = parse_timeline_from_text(raw_text)
    entries = build_import_entries(
        parsed,
        event_date=event_date,
        default_duration_minutes=get_settings().import_default_duration_minutes,
    )
    logger.info("Parsed %d timeline entries from %s", len(entries), filename)
    return entries
