"""Reply service - builds outbound messages and sends them right away."""

from typing import TYPE_CHECKING

from pharmacy_bot.models import catalog
from pharmacy_bot.models.outbound import (
    build_button_menu,
    build_image,
    build_list_menu,
    build_text,
)

if TYPE_CHECKING:
    from pharmacy_bot.whatsapp.sender import DeliveryResult, WhatsAppSender


class ReplyService:
    """One method per outbound message kind."""

    def __init__(self, sender: "WhatsAppSender") -> None:
        self._sender = sender

    async def send_text(self, to: str, body: str) -> "DeliveryResult":
        return await self._sender.send(build_text(to, body))

    async def send_image(self, to: str, link: str, caption: str) -> "DeliveryResult":
        return await self._sender.send(build_image(to, link, caption))

    async def send_welcome_menu(self, to: str, prompt: str) -> "DeliveryResult":
        """Button menu: order medicine, check availability, more services."""
        message = build_button_menu(
            to,
            prompt,
            catalog.WELCOME_BUTTONS,
            footer=catalog.WELCOME_FOOTER,
        )
        return await self._sender.send(message)

    async def send_services_list(self, to: str, header: str) -> "DeliveryResult":
        """List menu of additional services."""
        message = build_list_menu(
            to,
            catalog.SERVICES_BODY,
            catalog.SERVICES_BUTTON,
            {catalog.SERVICES_SECTION_TITLE: catalog.SERVICE_ROWS},
            header=header,
        )
        return await self._sender.send(message)
