"""Pydantic schemas for timeline entries, layouts, chats and the current user."""

from event_timeline.models.message import ChatSummary, EventSummary, Message, ReadReceipt
from event_timeline.models.timeline import (
    EntryLayout,
    ParsedEntry,
    TimelineEntry,
    TimelineEntryCreate,
)
from event_timeline.models.user import CurrentUser

__all__ = [
    "CurrentUser",
    "TimelineEntry",
    "TimelineEntryCreate",
    "EntryLayout",
    "ParsedEntry",
    "EventSummary",
    "Message",
    "ReadReceipt",
    "ChatSummary",
]
