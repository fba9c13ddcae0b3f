"""
Chat models for the messages screen.

Rows come from the hosted `events`, `event_messages` and
`message_read_receipts` tables; the service only summarizes them.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class EventSummary(BaseModel):
    id: str
    event_name: str
    event_date: Optional[date] = None


class Message(BaseModel):
    id: str
    event_id: str
    user_id: str
    message: str = ""
    created_at: datetime


class ReadReceipt(BaseModel):
    message_id: str
    user_id: str


class ChatSummary(BaseModel):
    """One row of the chat list: latest message and unread badge for an event."""

    event_id: str
    event_name: str
    event_date: Optional[date] = None
    last_message: Optional[str] = None
    last_message_time: Optional[datetime] = None
    unread_count: int = 0
    badge: str = ""

    class Config:
        json_schema_extra = {
            "example": {
                "event_id": "evt_123",
                "event_name": "Smith Wedding",
                "event_date": "2025-06-14",
                "last_message": "Florist confirmed for 2pm",
                "last_message_time": "2025-06-01T18:22:00Z",
                "unread_count": 3,
                "badge": "3",
            }
        }


class ChatSummaryRequest(BaseModel):
    events: List[EventSummary] = Field(default_factory=list)
    messages: List[Message] = Field(default_factory=list)
    receipts: List[ReadReceipt] = Field(default_factory=list)
