"""WhatsApp webhook and message sending."""

from pharmacy_bot.whatsapp.sender import DeliveryResult, WhatsAppSender
from pharmacy_bot.whatsapp.webhook import WebhookHandler, create_webhook_handler

__all__ = ["DeliveryResult", "WhatsAppSender", "WebhookHandler", "create_webhook_handler"]
