"""
Messages API: chat list with unread badges for the authenticated user.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from event_timeline.api.auth import get_current_user
from event_timeline.models.message import ChatSummaryRequest
from event_timeline.models.user import CurrentUser
from event_timeline.services.message_service import summarize_chats

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/summaries",
    response_model=dict,
    summary="Summarize event chats",
)
async def chat_summaries(
    body: ChatSummaryRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> dict:
    """
    Build the chat list from rows the client fetched after a change
    notification: latest message and unread count per event, newest first.
    """
    chats = summarize_chats(body.events, body.messages, body.receipts, current_user.id)
    return {"chats": [c.model_dump(mode="json") for c in chats]}
