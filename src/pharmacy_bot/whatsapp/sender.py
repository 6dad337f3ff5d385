"""WhatsApp message sender - delivers outbound messages via the Meta Cloud API."""

import logging
from dataclasses import dataclass

import httpx

from pharmacy_bot.config import Settings, get_settings
from pharmacy_bot.models.outbound import OutboundMessage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome of a single send. Failures carry the error detail."""

    ok: bool
    status_code: int | None = None
    message_id: str | None = None
    error: str | None = None


class WhatsAppSender:
    """Send WhatsApp messages. Never raises on delivery failure."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._url = settings.messages_url
        self._token = settings.whatsapp_access_token
        self._timeout = settings.http_timeout_seconds
        self._transport = transport

    async def send(self, message: OutboundMessage) -> DeliveryResult:
        """
        POST message to the messages endpoint with bearer auth.
        Errors are logged and returned, not raised. No retry.
        """
        if not self._url or not self._token:
            logger.warning("WhatsApp credentials not configured, skipping send")
            return DeliveryResult(ok=False, error="not configured")
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
        }
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                resp = await client.post(
                    self._url,
                    json=message.to_payload(),
                    headers=headers,
                    timeout=self._timeout,
                )
        except httpx.HTTPError as e:
            logger.exception("WhatsApp send error: %s", e)
            return DeliveryResult(ok=False, error=str(e) or type(e).__name__)

        if resp.status_code >= 400:
            logger.error(
                "WhatsApp send failed: %s %s",
                resp.status_code,
                resp.text[:500],
            )
            return DeliveryResult(ok=False, status_code=resp.status_code, error=resp.text)
        return DeliveryResult(
            ok=True,
            status_code=resp.status_code,
            message_id=_message_id(resp),
        )


def _message_id(resp: httpx.Response) -> str | None:
    """wamid from {"messages": [{"id": ...}]}, if the API returned one."""
    try:
        messages = resp.json().get("messages") or []
        return messages[0].get("id") if messages else None
    except (ValueError, AttributeError, IndexError):
        return None
