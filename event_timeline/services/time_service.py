"""
Wall-clock helpers for timeline entries.

Entries are stored as "HH:MM" strings; the layout engine works in minutes
since local midnight. Everything here is pure and cheap.
"""

import logging
from datetime import date, timedelta
from typing import List, Optional, Tuple

from event_timeline.models.timeline import TimelineEntry

logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 24 * 60


def parse_hhmm(value: str) -> int:
    """
    Convert "HH:MM" (or "HH:MM:SS") to minutes since midnight.
    Raises ValueError on anything that is not a valid time of day.
    """
    parts = value.strip().split(":")
    if len(parts) not in (2, 3) or not all(p.isdigit() for p in parts):
        raise ValueError(f"Invalid time: {value!r}")
    hours, minutes = int(parts[0]), int(parts[1])
    if hours > 23 or minutes > 59:
        raise ValueError(f"Time out of range: {value!r}")
    return hours * 60 + minutes


def format_hhmm(total_minutes: int) -> str:
    """Minutes since midnight to "HH:MM", wrapping at 24h."""
    total_minutes %= MINUTES_PER_DAY
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"


def calculate_end_time(start_time: str, duration_minutes: int) -> str:
    """End time for a start time plus duration. Wraps past midnight."""
    return format_hhmm(parse_hhmm(start_time) + duration_minutes)


def calculate_duration(start_time: str, end_time: str) -> int:
    """Signed minutes between two times on the same day."""
    return parse_hhmm(end_time) - parse_hhmm(start_time)


def format_time_12h(time_24: str) -> str:
    """12-hour label, e.g. "14:30" -> "2:30 PM". Midnight is 12:00 AM."""
    minutes = parse_hhmm(time_24)
    hours, mins = divmod(minutes, 60)
    period = "PM" if hours >= 12 else "AM"
    hour_12 = hours % 12 or 12
    return f"{hour_12}:{mins:02d} {period}"


def generate_date_range(start_date: date, end_date: Optional[date] = None) -> List[date]:
    """
    Every calendar day of an event, start and end inclusive.
    A single-day event (no end date) yields just its start date.
    """
    end = end_date or start_date
    if end < start_date:
        logger.debug("End date %s before start %s; using start only", end, start_date)
        end = start_date
    days = (end - start_date).days
    return [start_date + timedelta(days=i) for i in range(days + 1)]


def normalize_entry(entry: TimelineEntry, default_duration_minutes: int = 60) -> Tuple[int, int]:
    """
    Resolve an entry to (start_minute, end_minute) within the day.

    A missing end time becomes start + default duration, capped at midnight.
    An end at or before the start is returned as-is so the layout engine
    can treat it as malformed.
    """
    start = parse_hhmm(entry.time)
    if entry.end_time is None:
        end = min(start + default_duration_minutes, MINUTES_PER_DAY)
    else:
        end = start + calculate_duration(entry.time, entry.end_time)
    return start, end
