"""Screen identifiers and the static rules attached to them."""

from typing import Literal

from use_cases.errors import UnknownScreenError

ScreenId = Literal[
    "landing",
    "events",
    "business",
    "help",
    "login",
    "signup",
    "otpInput",
    "creatorAuth",
    "dashboard",
    "eventDetail",
    "checkout",
    "paymentLoading",
    "transactionSuccess",
    "ticketDisplay",
    "createEventInfo",
    "articlesPage",
    "businessDetail",
    "home",
]

SCREENS: tuple = (
    "landing",
    "events",
    "business",
    "help",
    "login",
    "signup",
    "otpInput",
    "creatorAuth",
    "dashboard",
    "eventDetail",
    "checkout",
    "paymentLoading",
    "transactionSuccess",
    "ticketDisplay",
    "createEventInfo",
    "articlesPage",
    "businessDetail",
    "home",
)

LANDING = "landing"

# Navigating to any of these keeps the auth overlays open.
AUTH_SCREENS = frozenset({"login", "signup", "otpInput", "creatorAuth", "paymentLoading"})

PAYLOAD_REQUIRED = frozenset({"eventDetail", "checkout"})
TRANSACTION_SCREENS = frozenset({"paymentLoading", "transactionSuccess", "ticketDisplay"})

# Screens rendered without the navbar.
FULL_SCREEN = frozenset({"paymentLoading", "dashboard"})
FULL_SCREEN_AUTH = frozenset({"creatorAuth", "otpInput"})
NO_FOOTER = frozenset({"eventDetail", "checkout", "transactionSuccess"})


# Descriptive spellings accepted by validate_screen.
SCREEN_ALIASES = {
    "catalog": "events",
    "business-listing": "business",
    "otp-entry": "otpInput",
    "creator-auth": "creatorAuth",
    "event-detail": "eventDetail",
    "payment-pending": "paymentLoading",
    "transaction-success": "transactionSuccess",
    "ticket-view": "ticketDisplay",
    "create-event-info": "createEventInfo",
    "article-list": "articlesPage",
    "business-detail": "businessDetail",
}


def validate_screen(screen: str) -> str:
    """Return the canonical ScreenId for `screen` or raise UnknownScreenError."""
    screen = SCREEN_ALIASES.get(screen, screen)
    if screen not in SCREENS:
        raise UnknownScreenError(f"Unknown screen: {screen!r}")
    return screen


def is_auth_screen(screen: str) -> bool:
    return screen in AUTH_SCREENS


def loading_message(screen: str) -> str:
    if screen == LANDING:
        return "Kembali ke Beranda..."
    return f"Menuju {screen}..."
