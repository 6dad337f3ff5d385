"""WhatsApp webhook handler - routes inbound messages to the menu service."""

import logging
from typing import Any

from pharmacy_bot.models import catalog
from pharmacy_bot.models.inbound import (
    InboundEvent,
    MessageKind,
    ReplyKind,
    parse_inbound_event,
)
from pharmacy_bot.services.menu_service import MenuService
from pharmacy_bot.services.reply_service import ReplyService
from pharmacy_bot.whatsapp.sender import DeliveryResult, WhatsAppSender

logger = logging.getLogger(__name__)


class WebhookHandler:
    """Handles incoming webhook, dispatches to services, sends at most one reply."""

    def __init__(
        self,
        menu_service: MenuService,
        reply_service: ReplyService,
        *,
        unmatched_text_reply: str | None = None,
    ) -> None:
        self._menu = menu_service
        self._replies = reply_service
        self._unmatched_text_reply = unmatched_text_reply

    def _normalize_text(self, text: str | None) -> str:
        return text.strip().lower() if text else ""

    async def handle_webhook(self, body: Any) -> DeliveryResult | None:
        """
        Process webhook payload. Meta format: entry[].changes[].value.messages[].
        Only the first message of the first change is considered.
        Returns the delivery outcome, or None when nothing was sent.
        """
        try:
            event = parse_inbound_event(body)
            if event is None:
                logger.debug("No message in webhook payload, acknowledging")
                return None
            return await self._dispatch(event)
        except Exception as e:
            logger.exception("Webhook handle error: %s", e)
            return None

    async def _dispatch(self, event: InboundEvent) -> DeliveryResult | None:
        if event.kind is MessageKind.TEXT:
            return await self._handle_text(event)
        if event.kind is MessageKind.INTERACTIVE:
            return await self._handle_interactive(event)
        logger.info("Ignoring %s message from %s", event.message_type, event.sender_id)
        return None

    async def _handle_text(self, event: InboundEvent) -> DeliveryResult | None:
        if self._normalize_text(event.text) == catalog.GREETING:
            return await self._menu.welcome(event.sender_id)
        if self._unmatched_text_reply:
            return await self._replies.send_text(event.sender_id, self._unmatched_text_reply)
        logger.debug("No reply for text from %s", event.sender_id)
        return None

    async def _handle_interactive(self, event: InboundEvent) -> DeliveryResult | None:
        if event.reply_kind is None:
            logger.info("Ignoring unsupported interactive reply from %s", event.sender_id)
            return None
        if not event.reply_id:
            if event.reply_kind is ReplyKind.BUTTON_REPLY:
                logger.error("Button ID not found in the response.")
            else:
                logger.error("List option ID not found in the response.")
            return None
        if event.reply_kind is ReplyKind.BUTTON_REPLY:
            return await self._menu.handle_button(event.sender_id, event.reply_id)
        return await self._menu.handle_list(event.sender_id, event.reply_id)


def create_webhook_handler(
    sender: WhatsAppSender,
    unmatched_text_reply: str | None = None,
) -> WebhookHandler:
    """Factory - wires dependencies."""
    replies = ReplyService(sender)
    return WebhookHandler(
        menu_service=MenuService(replies),
        reply_service=replies,
        unmatched_text_reply=unmatched_text_reply,
    )
