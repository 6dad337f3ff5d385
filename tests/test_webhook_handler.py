"""Tests for webhook dispatch to the menu and reply services."""

from __future__ import annotations

import pytest

from pharmacy_bot.models import catalog
from pharmacy_bot.models.outbound import (
    ButtonMenuMessage,
    ImageMessage,
    ListMenuMessage,
    TextMessage,
)
from pharmacy_bot.whatsapp.sender import DeliveryResult
from pharmacy_bot.whatsapp.webhook import WebhookHandler, create_webhook_handler
from tests.conftest import SENDER, RecordingSender, make_envelope, reply_payload, text_payload


class TestTextMessages:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("greeting", ["hi", "Hi", "HI", " hI "])
    async def test_greeting_sends_welcome_buttons(
        self, handler: WebhookHandler, recording_sender: RecordingSender, greeting: str,
    ) -> None:
        result = await handler.handle_webhook(text_payload(greeting))

        assert result is not None and result.ok
        (message,) = recording_sender.sent
        assert isinstance(message, ButtonMenuMessage)
        assert message.to == SENDER
        assert message.body == "Welcome to ABC Pharmacy! How can we assist you today?"
        assert [b.id for b in message.buttons] == [
            "ORDER_MEDICINE",
            "CHECK_AVAILABILITY",
            "MORE_SERVICES",
        ]

    @pytest.mark.asyncio
    async def test_other_text_is_silent_by_default(
        self, handler: WebhookHandler, recording_sender: RecordingSender,
    ) -> None:
        result = await handler.handle_webhook(text_payload("hello there"))

        assert result is None
        assert recording_sender.sent == []

    @pytest.mark.asyncio
    async def test_other_text_uses_configured_reply(self, recording_sender: RecordingSender) -> None:
        handler = create_webhook_handler(
            sender=recording_sender,  # type: ignore[arg-type]
            unmatched_text_reply="Send 'hi' to see the menu.",
        )

        await handler.handle_webhook(text_payload("hello there"))

        (message,) = recording_sender.sent
        assert isinstance(message, TextMessage)
        assert message.body == "Send 'hi' to see the menu."


class TestButtonReplies:
    @pytest.mark.asyncio
    async def test_order_medicine_sends_image(
        self, handler: WebhookHandler, recording_sender: RecordingSender,
    ) -> None:
        await handler.handle_webhook(reply_payload("button_reply", "order_medicine"))

        (message,) = recording_sender.sent
        assert isinstance(message, ImageMessage)
        assert message.link == catalog.PRESCRIPTION_IMAGE_URL
        assert "upload your prescription" in (message.caption or "")

    @pytest.mark.asyncio
    async def test_check_availability_sends_prompt(
        self, handler: WebhookHandler, recording_sender: RecordingSender,
    ) -> None:
        await handler.handle_webhook(reply_payload("button_reply", "CHECK_AVAILABILITY"))

        (message,) = recording_sender.sent
        assert isinstance(message, TextMessage)
        assert message.body == catalog.AVAILABILITY_PROMPT

    @pytest.mark.asyncio
    async def test_more_services_sends_list(
        self, handler: WebhookHandler, recording_sender: RecordingSender,
    ) -> None:
        await handler.handle_webhook(reply_payload("button_reply", "more_services"))

        (message,) = recording_sender.sent
        assert isinstance(message, ListMenuMessage)
        assert message.header == "Here are additional services we offer:"
        assert len(message.sections[0].rows) == 9

    @pytest.mark.asyncio
    async def test_unknown_button(
        self, handler: WebhookHandler, recording_sender: RecordingSender,
    ) -> None:
        await handler.handle_webhook(reply_payload("button_reply", "unknown_option"))

        (message,) = recording_sender.sent
        assert isinstance(message, TextMessage)
        assert message.body == "Invalid option. Please try again."

    @pytest.mark.asyncio
    async def test_missing_button_id_sends_nothing(
        self, handler: WebhookHandler, recording_sender: RecordingSender,
    ) -> None:
        result = await handler.handle_webhook(reply_payload("button_reply", None))

        assert result is None
        assert recording_sender.sent == []


class TestListReplies:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("row_id", ["PREVIOUS_MENU", "previous_menu"])
    async def test_previous_menu_resends_list(
        self, handler: WebhookHandler, recording_sender: RecordingSender, row_id: str,
    ) -> None:
        # The row ids are sent upper-case but matched case-insensitively,
        # so lower-cased ids reach their action instead of "Invalid option".
        await handler.handle_webhook(reply_payload("list_reply", row_id))

        (message,) = recording_sender.sent
        assert isinstance(message, ListMenuMessage)
        assert message.header == "Welcome back! How can we assist you today?"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("option", sorted(catalog.LIST_REPLIES, key=lambda o: o.value))
    async def test_canned_replies(
        self,
        handler: WebhookHandler,
        recording_sender: RecordingSender,
        option: catalog.ListOptionId,
    ) -> None:
        await handler.handle_webhook(reply_payload("list_reply", option.value.lower()))

        (message,) = recording_sender.sent
        assert isinstance(message, TextMessage)
        assert message.body == catalog.LIST_REPLIES[option]

    @pytest.mark.asyncio
    async def test_unknown_row(
        self, handler: WebhookHandler, recording_sender: RecordingSender,
    ) -> None:
        await handler.handle_webhook(reply_payload("list_reply", "NOT_A_ROW"))

        (message,) = recording_sender.sent
        assert message.body == catalog.INVALID_OPTION

    @pytest.mark.asyncio
    async def test_missing_row_id_sends_nothing(
        self, handler: WebhookHandler, recording_sender: RecordingSender,
    ) -> None:
        await handler.handle_webhook(reply_payload("list_reply", None))

        assert recording_sender.sent == []


class TestIgnoredEvents:
    @pytest.mark.asyncio
    async def test_status_callback(
        self, handler: WebhookHandler, recording_sender: RecordingSender,
    ) -> None:
        assert await handler.handle_webhook(make_envelope(None)) is None
        assert recording_sender.sent == []

    @pytest.mark.asyncio
    async def test_unsupported_message_type(
        self, handler: WebhookHandler, recording_sender: RecordingSender,
    ) -> None:
        body = make_envelope({"from": SENDER, "type": "location", "location": {}})

        assert await handler.handle_webhook(body) is None
        assert recording_sender.sent == []


class TestDelivery:
    @pytest.mark.asyncio
    async def test_failed_delivery_is_returned(self) -> None:
        sender = RecordingSender(DeliveryResult(ok=False, status_code=500, error="boom"))
        handler = create_webhook_handler(sender=sender)  # type: ignore[arg-type]

        result = await handler.handle_webhook(text_payload("hi"))

        assert result is not None
        assert not result.ok
        assert result.error == "boom"

    @pytest.mark.asyncio
    async def test_sender_exception_does_not_escape(self) -> None:
        class ExplodingSender(RecordingSender):
            async def send(self, message):  # type: ignore[override]
                raise RuntimeError("unexpected")

        handler = create_webhook_handler(sender=ExplodingSender())  # type: ignore[arg-type]

        assert await handler.handle_webhook(text_payload("hi")) is None

    @pytest.mark.asyncio
    async def test_duplicate_events_are_not_deduplicated(
        self, handler: WebhookHandler, recording_sender: RecordingSender,
    ) -> None:
        body = reply_payload("button_reply", "CHECK_AVAILABILITY")

        await handler.handle_webhook(body)
        await handler.handle_webhook(body)

        assert len(recording_sender.sent) == 2
