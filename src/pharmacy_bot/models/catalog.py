"""Menu catalog - the fixed buttons, list rows and canned replies."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ButtonId(str, Enum):
    """Reply buttons on the welcome menu."""

    ORDER_MEDICINE = "ORDER_MEDICINE"
    CHECK_AVAILABILITY = "CHECK_AVAILABILITY"
    MORE_SERVICES = "MORE_SERVICES"


class ListOptionId(str, Enum):
    """Rows of the 'More Services' list menu."""

    CONSULT_PHARMACIST = "CONSULT_PHARMACIST"
    HEALTH_TIPS = "HEALTH_TIPS"
    OFFERS = "OFFERS"
    RETURN_POLICY = "RETURN_POLICY"
    SUPPORT = "SUPPORT"
    PREVIOUS_MENU = "PREVIOUS_MENU"
    DELIVERY_STATUS = "DELIVERY_STATUS"
    LOYALTY_PROGRAM = "LOYALTY_PROGRAM"
    COVID_VACCINE = "COVID_VACCINE"


class MenuOption(BaseModel):
    """Selectable (identifier, display title) pair."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)


def canonical_id(raw: str | None) -> str:
    """Canonical form of an inbound button or row id. Applied once, at the boundary."""
    return raw.strip().upper() if raw else ""


def parse_button_id(raw: str | None) -> ButtonId | None:
    """Map a raw button id to ButtonId, or None if it is not on the menu."""
    try:
        return ButtonId(canonical_id(raw))
    except ValueError:
        return None


def parse_list_option_id(raw: str | None) -> ListOptionId | None:
    """Map a raw list-row id to ListOptionId, or None if it is not on the menu."""
    try:
        return ListOptionId(canonical_id(raw))
    except ValueError:
        return None


GREETING = "hi"

WELCOME_PROMPT = "Welcome to ABC Pharmacy! How can we assist you today?"
WELCOME_FOOTER = "Please select an option below"
WELCOME_BUTTONS: tuple[MenuOption, ...] = (
    MenuOption(id=ButtonId.ORDER_MEDICINE.value, title="Order Medicine"),
    MenuOption(id=ButtonId.CHECK_AVAILABILITY.value, title="Check Availability"),
    MenuOption(id=ButtonId.MORE_SERVICES.value, title="More Services"),
)

PRESCRIPTION_IMAGE_URL = "https://img.freepik.com/free-photo/pharmacist-work_23-2150600097.jpg"
PRESCRIPTION_CAPTION = (
    "To order medicine, please upload your prescription here: "
    "https://cool-licorice-048bcb.netlify.app . "
    "Our pharmacist will contact you shortly."
)
AVAILABILITY_PROMPT = "Please specify the medicine name, and we'll check the stock for you."

SERVICES_HEADER = "Here are additional services we offer:"
SERVICES_BACK_HEADER = "Welcome back! How can we assist you today?"
SERVICES_BODY = "Please choose from the options below"
SERVICES_BUTTON = "Services"
SERVICES_SECTION_TITLE = "Our Services"
SERVICE_ROWS: tuple[MenuOption, ...] = (
    MenuOption(id=ListOptionId.CONSULT_PHARMACIST.value, title="Consult a Pharmacist"),
    MenuOption(id=ListOptionId.HEALTH_TIPS.value, title="Health & Wellness Tips"),
    MenuOption(id=ListOptionId.OFFERS.value, title="Current Offers"),
    MenuOption(id=ListOptionId.RETURN_POLICY.value, title="Return Policy"),
    MenuOption(id=ListOptionId.SUPPORT.value, title="Customer Support"),
    MenuOption(id=ListOptionId.PREVIOUS_MENU.value, title="Previous Menu"),
    MenuOption(id=ListOptionId.DELIVERY_STATUS.value, title="Check Delivery Status"),
    MenuOption(id=ListOptionId.LOYALTY_PROGRAM.value, title="Join Loyalty Program"),
    MenuOption(id=ListOptionId.COVID_VACCINE.value, title="COVID-19 Vaccine Info"),
)

# PREVIOUS_MENU is absent: it re-sends the list menu instead of a text reply
LIST_REPLIES: dict[ListOptionId, str] = {
    ListOptionId.CONSULT_PHARMACIST: (
        "Our pharmacist is available to assist you. Please describe your query."
    ),
    ListOptionId.HEALTH_TIPS: (
        "Stay healthy! Here are some daily wellness tips: "
        "eat well, exercise regularly, and stay hydrated."
    ),
    ListOptionId.OFFERS: "Check out our latest offers on medicines and wellness products!",
    ListOptionId.RETURN_POLICY: (
        "You may return unopened medicines within 7 days of purchase. "
        "Please keep the receipt."
    ),
    ListOptionId.SUPPORT: (
        "Our customer support is here to help. Reach us at support@abcpharmacy.com."
    ),
    ListOptionId.DELIVERY_STATUS: "Please provide your order number to check the delivery status.",
    ListOptionId.LOYALTY_PROGRAM: (
        "Join our loyalty program to earn points on each purchase! "
        "Contact support for more details."
    ),
    ListOptionId.COVID_VACCINE: (
        "Stay informed! Contact us to learn about availability "
        "and appointments for COVID-19 vaccines."
    ),
}

INVALID_OPTION = "Invalid option. Please try again."
