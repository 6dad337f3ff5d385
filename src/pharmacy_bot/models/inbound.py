"""Inbound webhook event data model."""

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class MessageKind(str, Enum):
    """Inbound message type, as far as the bot cares."""

    TEXT = "text"
    INTERACTIVE = "interactive"
    OTHER = "other"


class ReplyKind(str, Enum):
    """Interactive reply sub-type."""

    BUTTON_REPLY = "button_reply"
    LIST_REPLY = "list_reply"


class InboundEvent(BaseModel):
    """First message of a webhook delivery, flattened."""

    model_config = ConfigDict(frozen=True)

    sender_id: str = Field(..., min_length=1, description="WhatsApp ID of the sender")
    message_id: str | None = Field(default=None)
    kind: MessageKind
    message_type: str = Field(..., description="Raw message type from the platform")
    text: str | None = Field(default=None, description="Body of a text message")
    reply_kind: ReplyKind | None = Field(default=None)
    reply_id: str | None = Field(default=None, description="Button or list-row id")


def _first(items: Any) -> Any:
    if isinstance(items, list) and items:
        return items[0]
    return None


def _mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def parse_inbound_event(body: Any) -> InboundEvent | None:
    """
    Extract entry[0].changes[0].value.messages[0] from a webhook payload.
    Returns None when any link is missing, e.g. for status callbacks.
    """
    entry = _first(_mapping(body).get("entry"))
    change = _first(_mapping(entry).get("changes"))
    value = _mapping(_mapping(change).get("value"))
    message = _mapping(_first(value.get("messages")))
    if not message:
        return None

    sender_id = message.get("from")
    if not isinstance(sender_id, str) or not sender_id:
        logger.warning("Message without sender, ignoring")
        return None

    message_type = str(message.get("type", ""))
    try:
        kind = MessageKind(message_type)
    except ValueError:
        kind = MessageKind.OTHER

    text: str | None = None
    reply_kind: ReplyKind | None = None
    reply_id: str | None = None
    if kind is MessageKind.TEXT:
        body_text = _mapping(message.get("text")).get("body")
        text = body_text if isinstance(body_text, str) else None
    elif kind is MessageKind.INTERACTIVE:
        interactive = _mapping(message.get("interactive"))
        try:
            reply_kind = ReplyKind(interactive.get("type"))
        except ValueError:
            reply_kind = None
        if reply_kind is not None:
            raw_id = _mapping(interactive.get(reply_kind.value)).get("id")
            reply_id = raw_id if isinstance(raw_id, str) and raw_id else None

    return InboundEvent(
        sender_id=sender_id,
        message_id=message.get("id") if isinstance(message.get("id"), str) else None,
        kind=kind,
        message_type=message_type,
        text=text,
        reply_kind=reply_kind,
        reply_id=reply_id,
    )
