"""Shared test fixtures for pharmacy-chatbot."""

from __future__ import annotations

from typing import Any

import pytest

from pharmacy_bot.config import Settings
from pharmacy_bot.whatsapp.sender import DeliveryResult
from pharmacy_bot.whatsapp.webhook import WebhookHandler, create_webhook_handler

VERIFY_TOKEN = "verify-secret"
ACCESS_TOKEN = "access-secret"
API_URL = "https://graph.test/v21.0/PID/messages"
SENDER = "15551234567"


class RecordingSender:
    """Stands in for WhatsAppSender; keeps every message it was asked to send."""

    def __init__(self, result: DeliveryResult | None = None) -> None:
        self.sent: list[Any] = []
        self._result = result or DeliveryResult(ok=True, status_code=200, message_id="wamid.X")

    async def send(self, message: Any) -> DeliveryResult:
        self.sent.append(message)
        return self._result


def make_settings(**kwargs: Any) -> Settings:
    defaults: dict[str, Any] = {
        "whatsapp_api_url": API_URL,
        "whatsapp_access_token": ACCESS_TOKEN,
        "whatsapp_verify_token": VERIFY_TOKEN,
        "unmatched_text_reply": None,
    }
    defaults.update(kwargs)
    return Settings(_env_file=None, **defaults)


def make_envelope(message: dict[str, Any] | None) -> dict[str, Any]:
    value: dict[str, Any] = {
        "messaging_product": "whatsapp",
        "metadata": {"phone_number_id": "PID"},
    }
    if message is not None:
        value["messages"] = [message]
    return {
        "object": "whatsapp_business_account",
        "entry": [
            {
                "id": "BID",
                "changes": [{"value": value, "field": "messages"}],
            }
        ],
    }


def text_payload(text: str, phone: str = SENDER) -> dict[str, Any]:
    return make_envelope(
        {
            "from": phone,
            "id": "wamid.in1",
            "timestamp": "1700000000",
            "type": "text",
            "text": {"body": text},
        }
    )


def reply_payload(reply_kind: str, reply_id: str | None, phone: str = SENDER) -> dict[str, Any]:
    reply: dict[str, Any] = {"title": "Whatever"}
    if reply_id is not None:
        reply["id"] = reply_id
    return make_envelope(
        {
            "from": phone,
            "id": "wamid.in2",
            "timestamp": "1700000000",
            "type": "interactive",
            "interactive": {"type": reply_kind, reply_kind: reply},
        }
    )


@pytest.fixture
def recording_sender() -> RecordingSender:
    return RecordingSender()


@pytest.fixture
def handler(recording_sender: RecordingSender) -> WebhookHandler:
    return create_webhook_handler(sender=recording_sender)  # type: ignore[arg-type]
