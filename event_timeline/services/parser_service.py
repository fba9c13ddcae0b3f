"""
Timeline parsing for imported schedules.

Turns the raw text of an uploaded run-of-show ("9:00 AM - Hair & makeup",
"14:00-15:00 Reception") into timeline entries. Recognition is line based
and purely regex driven; lines without a leading time are ignored.
"""

import logging
import re
from datetime import date
from typing import List, Optional, Sequence

from event_timeline.models.timeline import ParsedEntry, TimelineEntryCreate
from event_timeline.services.time_service import calculate_end_time

logger = logging.getLogger(__name__)

# Colors cycled over imported entries, same order as the editor's picker
IMPORT_COLORS = [
    "#8B5CF6",  # Purple
    "#EC4899",  # Pink
    "#3B82F6",  # Blue
    "#10B981",  # Green
    "#F59E0B",  # Amber
    "#EF4444",  # Red
    "#6366F1",  # Indigo
    "#14B8A6",  # Teal
]

TIME_12H = re.compile(r"(\d{1,2}):?(\d{2})?\s*(am|pm)", re.IGNORECASE)
TIME_24H = re.compile(r"(\d{1,2}):(\d{2})")

TIME_RANGE_LINE = re.compile(
    r"(\d{1,2}:?\d{0,2}\s*(?:am|pm|AM|PM)?)\s*[-–to]+\s*"
    r"(\d{1,2}:?\d{0,2}\s*(?:am|pm|AM|PM)?)\s*[:\-–]?\s*(.+)"
)
SINGLE_TIME_LINE = re.compile(r"(\d{1,2}:?\d{0,2}\s*(?:am|pm|AM|PM)|\d{1,2}:\d{2})\s*[:\-–]?\s*(.+)")


def parse_time_string(text: str) -> Optional[str]:
    """
    Normalize a loose time ("9am", "9:30 PM", "14:05") to "HH:MM".
    Returns None when no valid time of day is found.
    """
    match = TIME_12H.search(text)
    if match:
        hours = int(match.group(1))
        minutes = int(match.group(2)) if match.group(2) else 0
        period = match.group(3).lower()
        if period == "pm" and hours != 12:
            hours += 12
        if period == "am" and hours == 12:
            hours = 0
        if hours <= 23 and minutes <= 59:
            return f"{hours:02d}:{minutes:02d}"
        return None

    match = TIME_24H.search(text)
    if match:
        hours, minutes = int(match.group(1)), int(match.group(2))
        if hours <= 23 and minutes <= 59:
            return f"{hours:02d}:{minutes:02d}"
    return None


def parse_timeline_from_text(text: str) -> List[ParsedEntry]:
    """
    Extract timeline lines from document text.

    Each line is tried first as a range ("9:00 AM - 10:00 AM Ceremony"),
    then as a single time ("9:00 AM - Ceremony"). A range whose end does
    not parse keeps its start with no end time.
    """
    entries: List[ParsedEntry] = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue

        range_match = TIME_RANGE_LINE.search(line)
        if range_match:
            start = parse_time_string(range_match.group(1))
            end = parse_time_string(range_match.group(2))
            title = range_match.group(3).strip()
            if start and title:
                entries.append(ParsedEntry(title=title, time=start, end_time=end))
            continue

        single_match = SINGLE_TIME_LINE.search(line)
        if single_match:
            start = parse_time_string(single_match.group(1))
            title = single_match.group(2).strip()
            if start and len(title) > 1:
                entries.append(ParsedEntry(title=title, time=start))

    logger.debug("Parsed %d timeline lines", len(entries))
    return entries


def build_import_entries(
    parsed: Sequence[ParsedEntry],
    event_date: Optional[date] = None,
    default_duration_minutes: int = 30,
) -> List[TimelineEntryCreate]:
    """Rows to insert for parsed lines: fill in end times and cycle colors."""
    return [
        TimelineEntryCreate(
            title=item.title,
            time=item.time,
            end_time=item.end_time or calculate_end_time(item.time, default_duration_minutes),
            color=IMPORT_COLORS[index % len(IMPORT_COLORS)],
            event_date=event_date,
        )
        for index, item in enumerate(parsed)
    ]
