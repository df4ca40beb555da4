"""Session DTOs and role vocabulary shared across application layers."""

from dataclasses import dataclass
from typing import Literal, Optional

from use_cases.errors import InvalidSessionStateError

Role = Literal["visitor", "creator", "organization"]
RoleLabel = Literal["Event Visitor", "Event Creator", "Organization"]

ROLES: tuple = ("visitor", "creator", "organization")
ROLE_LABELS: tuple = ("Event Visitor", "Event Creator", "Organization")

_LABEL_TO_ROLE = dict(zip(ROLE_LABELS, ROLES))
_ROLE_TO_LABEL = dict(zip(ROLES, ROLE_LABELS))

# Fallback when login() receives an empty name.
DEFAULT_DISPLAY_NAMES = {
    "visitor": "Pengunjung Hegira",
    "creator": "Kreator Event",
    "organization": "Organisasi Hegira",
}

# Names given by a direct role switch.
ROLE_SWITCH_NAMES = {
    "visitor": "Pengunjung Hegira",
    "creator": "Kreator Hegira",
}

# Names given to a freshly verified account with no name on record.
NEW_ACCOUNT_NAMES = {
    "visitor": "Pengunjung Baru",
    "creator": "Kreator Baru",
    "organization": "Organisasi Baru",
}

ORGANIZATION_PLACEHOLDER_NAME = "Nama Organisasi Anda"


def role_from_label(label: Optional[str]) -> Optional[Role]:
    """Map an external role label (or an internal role) to the internal role."""
    if label in _ROLE_TO_LABEL:
        return label
    return _LABEL_TO_ROLE.get(label)


def label_from_role(role: Optional[str]) -> Optional[RoleLabel]:
    if role in _LABEL_TO_ROLE:
        return role
    return _ROLE_TO_LABEL.get(role)


def default_display_name(role: Role) -> str:
    return DEFAULT_DISPLAY_NAMES[role]


def new_account_name(role: Role) -> str:
    return NEW_ACCOUNT_NAMES[role]


@dataclass(frozen=True)
class SessionState:
    is_logged_in: bool = False
    role: Optional[Role] = None
    display_name: str = ""

    def __post_init__(self) -> None:
        if self.is_logged_in != (self.role is not None):
            raise InvalidSessionStateError(
                f"is_logged_in={self.is_logged_in} is inconsistent with role={self.role!r}"
            )
        if self.role is not None and self.role not in ROLES:
            raise InvalidSessionStateError(f"Unknown role: {self.role!r}")
        if self.is_logged_in and not self.display_name:
            raise InvalidSessionStateError("A logged-in session needs a display name")


LOGGED_OUT = SessionState()


def logged_in_session(role: Role, name: Optional[str]) -> SessionState:
    return SessionState(is_logged_in=True, role=role, display_name=name or default_display_name(role))


def is_business_role(session: SessionState) -> bool:
    """Creators and organizations land on the dashboard."""
    return session.role in ("creator", "organization")
