"""Menu service - maps button and list selections to replies."""

import logging
from typing import TYPE_CHECKING

from pharmacy_bot.models import catalog
from pharmacy_bot.models.catalog import ButtonId, ListOptionId
from pharmacy_bot.services.reply_service import ReplyService

if TYPE_CHECKING:
    from pharmacy_bot.whatsapp.sender import DeliveryResult

logger = logging.getLogger(__name__)


class MenuService:
    """Resolves menu selections. Stateless; one reply per selection."""

    def __init__(self, replies: ReplyService) -> None:
        self._replies = replies

    async def welcome(self, to: str) -> "DeliveryResult":
        return await self._replies.send_welcome_menu(to, catalog.WELCOME_PROMPT)

    async def handle_button(self, to: str, raw_id: str) -> "DeliveryResult":
        """Reply to a welcome-menu button press."""
        button = catalog.parse_button_id(raw_id)
        logger.info("Button reply from %s: %s", to, button.value if button else raw_id)
        if button is ButtonId.ORDER_MEDICINE:
            return await self._replies.send_image(
                to,
                catalog.PRESCRIPTION_IMAGE_URL,
                catalog.PRESCRIPTION_CAPTION,
            )
        if button is ButtonId.CHECK_AVAILABILITY:
            return await self._replies.send_text(to, catalog.AVAILABILITY_PROMPT)
        if button is ButtonId.MORE_SERVICES:
            return await self._replies.send_services_list(to, catalog.SERVICES_HEADER)
        return await self._replies.send_text(to, catalog.INVALID_OPTION)

    async def handle_list(self, to: str, raw_id: str) -> "DeliveryResult":
        """Reply to a services-list selection."""
        option = catalog.parse_list_option_id(raw_id)
        logger.info("List reply from %s: %s", to, option.value if option else raw_id)
        if option is ListOptionId.PREVIOUS_MENU:
            return await self._replies.send_services_list(to, catalog.SERVICES_BACK_HEADER)
        reply = catalog.LIST_REPLIES.get(option) if option else None
        return await self._replies.send_text(to, reply or catalog.INVALID_OPTION)
