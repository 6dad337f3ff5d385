"""FastAPI application - webhook endpoints and health."""

import json
import logging
from hmac import compare_digest

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse

from pharmacy_bot.config import Settings, get_settings
from pharmacy_bot.whatsapp import WhatsAppSender, create_webhook_handler

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

WELCOME_TEXT = "Welcome! The Pharmacy Chatbot server is running."


def _verify_token_matches(token: str | None, expected: str) -> bool:
    """Constant-time token check. An unconfigured token never matches."""
    if not expected or token is None:
        return False
    return compare_digest(token.encode(), expected.encode())


def create_app(
    settings: Settings | None = None,
    *,
    sender: WhatsAppSender | None = None,
) -> FastAPI:
    """Build the app. Dependencies are wired once, here."""
    settings = settings or get_settings()
    sender = sender or WhatsAppSender(settings)
    handler = create_webhook_handler(
        sender=sender,
        unmatched_text_reply=settings.unmatched_text_reply,
    )

    app = FastAPI(
        title="Pharmacy Chatbot",
        description="WhatsApp menu bot for ordering medicine and pharmacy services",
        version="0.1.0",
    )

    @app.get("/", response_class=PlainTextResponse)
    async def index() -> str:
        return WELCOME_TEXT

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check for load balancers."""
        return {"status": "ok"}

    @app.get("/webhook")
    async def webhook_verify(request: Request) -> Response:
        """
        WhatsApp webhook verification. Meta sends GET with hub.mode, hub.verify_token, hub.challenge.
        """
        mode = request.query_params.get("hub.mode")
        token = request.query_params.get("hub.verify_token")
        challenge = request.query_params.get("hub.challenge")
        if mode == "subscribe" and _verify_token_matches(token, settings.whatsapp_verify_token):
            logger.info("Webhook verified successfully")
            return PlainTextResponse(challenge or "")
        logger.warning("Webhook verification failed: mode=%s", mode)
        return Response(status_code=403)

    @app.post("/webhook")
    async def webhook_receive(request: Request) -> Response:
        """
        WhatsApp webhook - receives incoming messages.
        Always 200; anything else makes Meta redeliver the event.
        """
        raw_body = await request.body()
        try:
            body = json.loads(raw_body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Invalid webhook body: %s", e)
            return Response(status_code=200)
        logger.debug("Incoming webhook event: %s", json.dumps(body, indent=2))
        await handler.handle_webhook(body)
        return Response(status_code=200)

    return app


app = create_app()
