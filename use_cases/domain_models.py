"""Value objects passed between screens and the orchestration core."""

from dataclasses import dataclass, field
from typing import Any, Callable, Literal, Optional, Tuple

from use_cases.session_models import RoleLabel

EventStatus = Literal["Draf", "Aktif", "Selesai"]
Availability = Literal["sold-out", "almost-sold", "available"]


@dataclass(frozen=True)
class TicketCategory:
    id: str
    name: str
    price: int
    description: str = ""
    max_quantity: Optional[int] = None
    availability_status: Availability = "available"


@dataclass(frozen=True)
class EventRecord:
    """Catalog entry for one event. Only the fields the core and views read."""

    id: int
    category: Literal["B2C", "B2B", "B2G"]
    name: str
    location: str
    date_display: str
    time_display: str
    full_description: str
    display_price: str
    status: EventStatus
    theme: str
    address: str
    ticket_categories: Tuple[TicketCategory, ...] = ()
    timezone: Optional[str] = None
    summary: str = ""
    poster_url: str = ""
    organizer_name: str = ""
    event_slug: str = ""


@dataclass(frozen=True)
class SelectedTicket:
    category_id: str
    category_name: str
    quantity: int
    price_per_ticket: int


@dataclass(frozen=True)
class CheckoutInfo:
    event: EventRecord
    selected_tickets: Tuple[SelectedTicket, ...]
    total_price: int


@dataclass(frozen=True)
class TransactionFormData:
    full_name: str
    email: str
    phone_number: str
    gender: str = ""
    date_of_birth: str = ""


@dataclass(frozen=True)
class TransactionData:
    checkout_info: CheckoutInfo
    form_data: TransactionFormData
    transaction_id: str
    order_id: str


@dataclass(frozen=True)
class NavigationRequest:
    target: str
    payload: Any = None
    reset_callback: Optional[Callable[[], None]] = None


@dataclass(frozen=True)
class ConfirmationConfig:
    title: str
    message: str
    confirm_label: str
    cancel_label: str
    on_confirm_target: NavigationRequest
    tone: Literal["warning", "danger"] = "warning"


@dataclass
class AuthContext:
    """Scratch state carried between the steps of one auth flow."""

    active_role: Optional[RoleLabel] = None
    pending_email: str = ""
    pending_name: Optional[str] = None
    field_errors: dict = field(default_factory=dict)
