"""
Unread counts and chat-list ordering for the messages screen.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Sequence

from event_timeline.models.message import ChatSummary, EventSummary, Message, ReadReceipt

logger = logging.getLogger(__name__)

BADGE_CAP = 9


def count_unread(messages: Sequence[Message], receipts: Sequence[ReadReceipt], user_id: str) -> int:
    """Messages from other people that user_id has no read receipt for."""
    read_ids = {r.message_id for r in receipts if r.user_id == user_id}
    return sum(1 for m in messages if m.user_id != user_id and m.id not in read_ids)


def badge_label(count: int) -> str:
    if count <= 0:
        return ""
    return str(count) if count <= BADGE_CAP else f"{BADGE_CAP}+"


def summarize_chats(
    events: Sequence[EventSummary],
    messages: Sequence[Message],
    receipts: Sequence[ReadReceipt],
    user_id: str,
) -> List[ChatSummary]:
    """
    One chat row per event with its latest message and unread count.
    Rows are ordered newest activity first; events with no messages go last.
    """
    by_event: Dict[str, List[Message]] = defaultdict(list)
    for message in messages:
        by_event[message.event_id].append(message)

    chats: List[ChatSummary] = []
    for event in events:
        event_messages = by_event.get(event.id, [])
        last = max(event_messages, key=lambda m: m.created_at, default=None)
        unread = count_unread(event_messages, receipts, user_id)
        chats.append(
            ChatSummary(
                event_id=event.id,
                event_name=event.event_name,
                event_date=event.event_date,
                last_message=last.message if last else None,
                last_message_time=last.created_at if last else None,
                unread_count=unread,
                badge=badge_label(unread),
            )
        )

    # Stable sorts: newest first, then push message-less events to the end
    chats.sort(key=lambda c: c.last_message_time.timestamp() if c.last_message_time else 0, reverse=True)
    chats.sort(key=lambda c: c.last_message_time is None)
    logger.debug("Summarized %d chats for user %s", len(chats), user_id)
    return chats
