"""
Timeline entry and layout models.

TimelineEntry mirrors a row of the hosted `event_timeline` table.
EntryLayout is what the layout engine returns for each entry.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

HHMM_PATTERN = r"^\d{1,2}:\d{2}(:\d{2})?$"  # Postgres `time` columns carry seconds


class TimelineEntry(BaseModel):
    """
    Single timed block on one day of an event.
    `time` and `end_time` are wall-clock "HH:MM" strings, as stored upstream.
    """

    id: str
    time: str = Field(pattern=HHMM_PATTERN)
    end_time: Optional[str] = Field(default=None, pattern=HHMM_PATTERN)
    title: str = ""
    description: str = ""
    location: str = ""
    color: str = "#8B5CF6"
    event_date: Optional[date] = None  # Day key; None means "the selected day"

    @field_validator("end_time", mode="before")
    @classmethod
    def blank_end_time(cls, v: Optional[str]) -> Optional[str]:
        # The store hands back "" for cleared end times
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("time", "end_time")
    @classmethod
    def time_of_day_in_range(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        hours, minutes = (int(p) for p in v.split(":")[:2])
        if hours > 23 or minutes > 59:
            raise ValueError(f"{v} is not a valid time of day")
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "id": "6f1c0d2e-9a51-4f7c-8d52-2b1d9c4a7e10",
                "time": "14:00",
                "end_time": "14:30",
                "title": "Ceremony",
                "location": "Garden",
                "color": "#8B5CF6",
                "event_date": "2025-06-14",
            }
        }


class EntryLayout(BaseModel):
    """Rendered position of one entry in the day column."""

    top: float
    height: float
    width_percent: float
    left_percent: float
    column: int
    column_count: int
    start_minute: int
    end_minute: int
    label: str = ""


class ParsedEntry(BaseModel):
    """A timeline line recognized in imported document text."""

    title: str
    time: str
    end_time: Optional[str] = None


class TimelineEntryCreate(BaseModel):
    """Row ready to insert into the timeline table after an import."""

    title: str
    time: str
    end_time: str
    description: str = ""
    location: str = ""
    color: str
    event_date: Optional[date] = None


class LayoutRequest(BaseModel):
    entries: List[TimelineEntry] = Field(default_factory=list)
    pixels_per_hour: Optional[float] = Field(default=None, gt=0)
    event_date: Optional[date] = None  # Day for entries that carry no event_date
