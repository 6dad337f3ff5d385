"""Outbound message data model - one variant per WhatsApp message type."""

from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import BaseModel, Field

from pharmacy_bot.models.catalog import MenuOption

# Cloud API limits for interactive messages
MAX_BUTTONS = 3
MAX_BUTTON_TITLE = 20
MAX_LIST_SECTIONS = 10
MAX_LIST_ROWS = 10
MAX_ROW_TITLE = 24
MAX_LIST_BUTTON_LABEL = 20


class ReplyButton(BaseModel):
    """Quick-reply button."""

    id: str = Field(..., min_length=1, max_length=256)
    title: str = Field(..., min_length=1, max_length=MAX_BUTTON_TITLE)


class ListRow(BaseModel):
    """Single selectable row in a list section."""

    id: str = Field(..., min_length=1, max_length=200)
    title: str = Field(..., min_length=1, max_length=MAX_ROW_TITLE)


class ListSection(BaseModel):
    """Titled group of list rows."""

    title: str = Field(..., min_length=1)
    rows: list[ListRow] = Field(..., min_length=1, max_length=MAX_LIST_ROWS)


class _Outbound(BaseModel):
    wire_type: ClassVar[str]

    to: str = Field(..., min_length=1, description="Recipient WhatsApp ID")

    def _content(self) -> dict[str, Any]:
        raise NotImplementedError

    def to_payload(self) -> dict[str, Any]:
        """Graph API request body."""
        return {
            "messaging_product": "whatsapp",
            "recipient_type": "individual",
            "to": self.to,
            "type": self.wire_type,
            self.wire_type: self._content(),
        }


class TextMessage(_Outbound):
    """Plain text message."""

    wire_type = "text"
    type: Literal["text"] = "text"
    body: str = Field(..., min_length=1, max_length=4096)

    def _content(self) -> dict[str, Any]:
        return {"body": self.body}


class ImageMessage(_Outbound):
    """Image by public link, with caption."""

    wire_type = "image"
    type: Literal["image"] = "image"
    link: str = Field(..., min_length=1)
    caption: str | None = Field(default=None)

    def _content(self) -> dict[str, Any]:
        image: dict[str, Any] = {"link": self.link}
        if self.caption:
            image["caption"] = self.caption
        return image


class ButtonMenuMessage(_Outbound):
    """Interactive message with up to three reply buttons."""

    wire_type = "interactive"
    type: Literal["button_menu"] = "button_menu"
    body: str = Field(..., min_length=1)
    footer: str | None = Field(default=None)
    buttons: list[ReplyButton] = Field(..., min_length=1, max_length=MAX_BUTTONS)

    def _content(self) -> dict[str, Any]:
        interactive: dict[str, Any] = {
            "type": "button",
            "body": {"text": self.body},
            "action": {
                "buttons": [
                    {"type": "reply", "reply": {"id": b.id, "title": b.title}}
                    for b in self.buttons
                ],
            },
        }
        if self.footer:
            interactive["footer"] = {"text": self.footer}
        return interactive


class ListMenuMessage(_Outbound):
    """Interactive list message."""

    wire_type = "interactive"
    type: Literal["list_menu"] = "list_menu"
    header: str | None = Field(default=None)
    body: str = Field(..., min_length=1)
    button: str = Field(..., min_length=1, max_length=MAX_LIST_BUTTON_LABEL)
    sections: list[ListSection] = Field(..., min_length=1, max_length=MAX_LIST_SECTIONS)

    def _content(self) -> dict[str, Any]:
        interactive: dict[str, Any] = {
            "type": "list",
            "body": {"text": self.body},
            "action": {
                "button": self.button,
                "sections": [
                    {
                        "title": s.title,
                        "rows": [{"id": r.id, "title": r.title} for r in s.rows],
                    }
                    for s in self.sections
                ],
            },
        }
        if self.header:
            interactive["header"] = {"type": "text", "text": self.header}
        return interactive


OutboundMessage = Annotated[
    Union[TextMessage, ImageMessage, ButtonMenuMessage, ListMenuMessage],
    Field(discriminator="type"),
]


def build_text(to: str, body: str) -> TextMessage:
    return TextMessage(to=to, body=body)


def build_image(to: str, link: str, caption: str | None = None) -> ImageMessage:
    return ImageMessage(to=to, link=link, caption=caption)


def build_button_menu(
    to: str,
    body: str,
    options: tuple[MenuOption, ...] | list[MenuOption],
    footer: str | None = None,
) -> ButtonMenuMessage:
    """Button menu from catalog options."""
    return ButtonMenuMessage(
        to=to,
        body=body,
        footer=footer,
        buttons=[ReplyButton(id=o.id, title=o.title) for o in options],
    )


def build_list_menu(
    to: str,
    body: str,
    button: str,
    sections: dict[str, tuple[MenuOption, ...] | list[MenuOption]],
    header: str | None = None,
) -> ListMenuMessage:
    """List menu from {section title: catalog options}, in insertion order."""
    return ListMenuMessage(
        to=to,
        header=header,
        body=body,
        button=button,
        sections=[
            ListSection(title=title, rows=[ListRow(id=o.id, title=o.title) for o in options])
            for title, options in sections.items()
        ],
    )
