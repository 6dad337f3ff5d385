"""Data models."""

from pharmacy_bot.models.catalog import ButtonId, ListOptionId, MenuOption
from pharmacy_bot.models.inbound import InboundEvent, MessageKind, ReplyKind, parse_inbound_event
from pharmacy_bot.models.outbound import (
    ButtonMenuMessage,
    ImageMessage,
    ListMenuMessage,
    OutboundMessage,
    TextMessage,
)

__all__ = [
    "ButtonId",
    "ButtonMenuMessage",
    "ImageMessage",
    "InboundEvent",
    "ListMenuMessage",
    "ListOptionId",
    "MenuOption",
    "MessageKind",
    "OutboundMessage",
    "ReplyKind",
    "TextMessage",
    "parse_inbound_event",
]
