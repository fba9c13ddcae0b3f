"""
Timeline layout engine.

Places one day's entries in side-by-side columns so that entries which
overlap in time never overlap on screen, the way calendar day views do.

The engine is a pure function of its arguments: it keeps no state between
calls, does no I/O and never mutates the entries it is given. Callers
re-run it on the full day whenever the entry list or zoom level changes.
"""

import logging
from collections import defaultdict
from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

from event_timeline.models.timeline import EntryLayout, TimelineEntry
from event_timeline.services.time_service import format_hhmm, format_time_12h, normalize_entry

logger = logging.getLogger(__name__)

DEFAULT_PAD_MINUTES = 1
DEFAULT_MIN_HEIGHT_PX = 40.0


def intervals_overlap(a_start: float, a_end: float, b_start: float, b_end: float) -> bool:
    """Half-open interval intersection; touching intervals do not overlap."""
    return a_start < b_end and b_start < a_end


def _visual_intervals(
    entries: Sequence[TimelineEntry],
    pad_minutes: int,
    default_duration_minutes: int,
) -> List[Tuple[int, int, int, int]]:
    """(start, end, visual_start, visual_end) per entry, in input order."""
    intervals = []
    for entry in entries:
        start, end = normalize_entry(entry, default_duration_minutes)
        visual_start = start + pad_minutes
        visual_end = end - pad_minutes
        if end <= start:
            logger.debug("Entry %s ends at or before its start (%s-%s)", entry.id, entry.time, entry.end_time)
        # Malformed or very short entries collapse to zero length at their start
        visual_end = max(visual_end, visual_start)
        intervals.append((start, end, visual_start, visual_end))
    return intervals


def _assign_columns(order: List[int], intervals: List[Tuple[int, int, int, int]]) -> Dict[int, int]:
    """First-fit column packing, visiting entries in the given order."""
    columns: List[List[int]] = []
    column_of: Dict[int, int] = {}
    for i in order:
        _, _, start, end = intervals[i]
        for col_index, column in enumerate(columns):
            if not any(intervals_overlap(start, end, intervals[j][2], intervals[j][3]) for j in column):
                column.append(i)
                column_of[i] = col_index
                break
        else:
            columns.append([i])
            column_of[i] = len(columns) - 1
    return column_of


def _overlap_groups(order: List[int], intervals: List[Tuple[int, int, int, int]]) -> List[List[int]]:
    """
    Split entries into groups of directly or transitively overlapping entries
    (connected components of the overlap graph), keeping the given order.

    A sweep on the running group end is not enough: a zero-length interval
    that starts inside the group but overlaps no member must stay on its own.
    """
    parent = list(range(len(intervals)))

    def find(i: int) -> int:
        while parent[i] != i:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    for pos, i in enumerate(order):
        _, _, start, end = intervals[i]
        for j in order[pos + 1 :]:
            if intervals[j][2] >= end:
                break
            if intervals_overlap(start, end, intervals[j][2], intervals[j][3]):
                parent[find(j)] = find(i)

    groups: Dict[int, List[int]] = {}
    for i in order:
        groups.setdefault(find(i), []).append(i)
    return list(groups.values())


def compute_layout(
    entries: Sequence[TimelineEntry],
    pixels_per_hour: float,
    pad_minutes: int = DEFAULT_PAD_MINUTES,
    min_height_px: float = DEFAULT_MIN_HEIGHT_PX,
    default_duration_minutes: int = 60,
) -> Dict[str, EntryLayout]:
    """
    Lay out a single day's entries.

    Entries are packed into columns in ascending start order; entries that
    start together keep the caller's order, so the first one supplied gets
    the leftmost column. Each group of overlapping entries shares the width
    evenly between the columns it uses, while an entry that overlaps nothing
    spans the full width.

    Entries whose end is at or before their start are not rejected: they are
    drawn at their start with the minimum height.

    Returns a new mapping of entry id -> EntryLayout covering every entry.
    """
    if pixels_per_hour <= 0:
        raise ValueError(f"pixels_per_hour must be positive, got {pixels_per_hour}")
    if not entries:
        return {}

    intervals = _visual_intervals(entries, pad_minutes, default_duration_minutes)
    # sorted() is stable: ties keep input order
    order = sorted(range(len(entries)), key=lambda i: intervals[i][2])
    column_of = _assign_columns(order, intervals)

    layouts: Dict[str, EntryLayout] = {}
    for group in _overlap_groups(order, intervals):
        column_count = max(column_of[i] for i in group) + 1
        width = 100 / column_count
        for i in group:
            entry = entries[i]
            start, end, visual_start, visual_end = intervals[i]
            if entry.id in layouts:
                logger.warning("Duplicate timeline entry id %s; keeping the last one", entry.id)
            layouts[entry.id] = EntryLayout(
                top=visual_start / 60 * pixels_per_hour,
                height=max((visual_end - visual_start) / 60 * pixels_per_hour, min_height_px),
                width_percent=width,
                left_percent=column_of[i] * 100 / column_count,
                column=column_of[i],
                column_count=column_count,
                start_minute=start,
                end_minute=end,
                label=f"{format_time_12h(format_hhmm(start))} - {format_time_12h(format_hhmm(end))}",
            )
    return layouts


def layout_by_day(
    entries: Sequence[TimelineEntry],
    pixels_per_hour: float,
    default_date: Optional[date] = None,
    **kwargs,
) -> Dict[Optional[date], Dict[str, EntryLayout]]:
    """
    Lay out a multi-day event: entries are grouped by event_date and each
    day is computed independently. Entries without a date fall on default_date.
    """
    by_day: Dict[Optional[date], List[TimelineEntry]] = defaultdict(list)
    for entry in entries:
        by_day[entry.event_date or default_date].append(entry)
    return {day: compute_layout(day_entries, pixels_per_hour, **kwargs) for day, day_entries in by_day.items()}
