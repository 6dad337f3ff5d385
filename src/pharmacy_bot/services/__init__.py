"""Business logic services."""

from pharmacy_bot.services.menu_service import MenuService
from pharmacy_bot.services.reply_service import ReplyService

__all__ = ["MenuService", "ReplyService"]
