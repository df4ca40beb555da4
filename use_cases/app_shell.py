"""Application root: one shell object per browser session.

The shell owns the single current screen, the active overlay, the
session and the per-flow scratch state, and exposes the operations the
screens call. All state changes go through these named operations.
"""

import logging
import random
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence

from use_cases.auth_flow import AuthFlow
from use_cases.checkout_flow import CheckoutFlow
from use_cases.domain_models import CheckoutInfo, EventRecord
from use_cases.guarded_navigation import GuardedNavigationGate
from use_cases.navigation import NavigationController
from use_cases.overlays import OtpForm, Overlay, OverlayCoordinator
from use_cases.role_switch import RoleSwitchFlow
from use_cases.screens import (
    FULL_SCREEN,
    FULL_SCREEN_AUTH,
    LANDING,
    NO_FOOTER,
    PAYLOAD_REQUIRED,
    TRANSACTION_SCREENS,
    is_auth_screen,
)
from use_cases.session_lifecycle import SessionLifecycle
from use_cases.session_models import Role, SessionState
from use_cases.simulation import SimulationSettings
from use_cases.timers import TimerQueue

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShellSnapshot:
    """What the view layer needs to draw one frame."""

    screen: str
    overlay: Optional[Overlay]
    session: SessionState
    loading: bool
    loading_message: str
    show_loader: bool
    show_navbar: bool
    show_footer: bool


class AppShell:
    def __init__(
        self,
        events: Sequence[EventRecord] = (),
        *,
        settings: Optional[SimulationSettings] = None,
        timers: Optional[TimerQueue] = None,
        rng: Optional[random.Random] = None,
        epoch_ms: Optional[Callable[[], int]] = None,
    ) -> None:
        self.settings = settings or SimulationSettings()
        self.timers = timers or TimerQueue()
        self.overlays = OverlayCoordinator()

        self.events: List[EventRecord] = list(events)
        self.selected_event: Optional[EventRecord] = None
        self.selected_company: Any = None
        self.checkout_data: Optional[CheckoutInfo] = None
        self.event_being_edited: Optional[EventRecord] = None

        self.navigation = NavigationController(
            self.timers,
            self.settings.navigation_delay,
            on_request=self._on_navigation_requested,
            resolver=self._resolve_screen,
        )
        self.gate = GuardedNavigationGate(self.overlays, self.navigate, lambda: self.navigation.current)
        self.lifecycle = SessionLifecycle(self.overlays, self.gate, self.navigate)
        self.auth = AuthFlow(
            self.overlays,
            self.timers,
            self.settings,
            navigate=self.navigate,
            login=self.login,
            current_screen=lambda: self.navigation.current,
            is_logged_in=lambda: self.session.is_logged_in,
        )
        self.role_switch = RoleSwitchFlow(
            self.overlays,
            self.timers,
            self.settings,
            login=self.login,
            current_role=lambda: self.session.role,
        )
        self.checkout = CheckoutFlow(
            self.timers,
            self.settings,
            self.gate,
            self.navigate,
            rng=rng,
            epoch_ms=epoch_ms,
        )
        self.lifecycle.add_logout_hook(self.auth.clear_context)
        self.lifecycle.add_logout_hook(self.role_switch.reset)
        self.navigation.add_screen_listener(self.checkout.on_screen_changed)

    # --- read-only session props -------------------------------------------

    @property
    def session(self) -> SessionState:
        return self.lifecycle.session

    @property
    def is_logged_in(self) -> bool:
        return self.session.is_logged_in

    @property
    def role(self) -> Optional[Role]:
        return self.session.role

    @property
    def display_name(self) -> str:
        return self.session.display_name

    @property
    def current_screen(self) -> str:
        return self.navigation.current

    @property
    def active_overlay(self) -> Optional[Overlay]:
        return self.overlays.active

    # --- operations exposed to screens -------------------------------------

    def navigate(self, target: str, payload: Any = None) -> None:
        self.navigation.navigate(target, payload)

    def request_navigation_with_confirmation(
        self,
        target: str,
        payload: Any = None,
        reset_callback: Optional[Callable[[], None]] = None,
    ) -> None:
        self.gate.request(target, payload, reset_callback)

    def confirm_navigation(self) -> bool:
        return self.gate.confirm()

    def cancel_navigation(self) -> bool:
        return self.gate.cancel()

    def open_auth_modal(self, role_label: Optional[str] = None) -> None:
        self.auth.open_auth(role_label)

    def close_auth_flow(self) -> None:
        self.role_switch.reset()
        self.auth.close_auth_flow()

    def open_role_switch_modal(self) -> None:
        self.role_switch.open()

    def login(self, role: str, name: Optional[str] = None) -> SessionState:
        return self.lifecycle.login(role, name)

    def logout(self) -> None:
        self.lifecycle.logout()

    def add_screen_listener(self, listener: Callable[[str, str], None]) -> None:
        self.navigation.add_screen_listener(listener)

    # --- event catalog editing ---------------------------------------------

    def add_event(self, event: EventRecord) -> None:
        self.events.insert(0, event)

    def update_event(self, event: EventRecord) -> None:
        self.events = [event if existing.id == event.id else existing for existing in self.events]
        if self.selected_event is not None and self.selected_event.id == event.id:
            self.selected_event = event
        if self.event_being_edited is not None and self.event_being_edited.id == event.id:
            self.event_being_edited = event

    def set_event_for_editing(self, event: Optional[EventRecord]) -> None:
        self.event_being_edited = event

    # --- rendering ----------------------------------------------------------

    def tick(self) -> int:
        """Fire every timer that has come due on the wall clock."""
        return self.timers.run_due()

    def snapshot(self) -> ShellSnapshot:
        screen = self.navigation.current
        overlay = self.overlays.active
        otp_form_open = isinstance(overlay, OtpForm)
        full_screen = screen in FULL_SCREEN or (screen in FULL_SCREEN_AUTH and self.auth.context is not None)
        hide_navbar = full_screen or otp_form_open
        return ShellSnapshot(
            screen=screen,
            overlay=overlay,
            session=self.session,
            loading=self.navigation.loading,
            loading_message=self.navigation.loading_message,
            show_loader=self.navigation.loading and screen != "paymentLoading",
            show_navbar=not hide_navbar,
            show_footer=not (hide_navbar or screen in NO_FOOTER),
        )

    # --- navigation hooks ---------------------------------------------------

    def _on_navigation_requested(self, target: str) -> None:
        self.checkout.on_navigation_requested(target)
        if not is_auth_screen(target):
            self.overlays.close_auth_overlays()
            self.auth.clear_context()

    def _resolve_screen(self, target: str, payload: Any) -> str:
        """Apply arrival side effects; redirect when the screen lacks its context."""
        if target in PAYLOAD_REQUIRED and payload is None:
            log.warning(f"{target} reached without payload, redirecting to {LANDING}")
            return LANDING
        if target == "eventDetail":
            self.selected_event = payload
        elif target == "checkout":
            self.checkout_data = payload
        elif target == "businessDetail":
            if payload is None:
                log.warning("businessDetail reached without payload, redirecting to business")
                return "business"
            self.selected_company = payload
        elif target in TRANSACTION_SCREENS and self.checkout.transaction is None:
            log.warning(f"{target} reached without a transaction, redirecting to {LANDING}")
            return LANDING
        elif target == "otpInput":
            context = self.auth.context
            if not isinstance(self.overlays.active, OtpForm) or context is None or not context.pending_email:
                log.warning(f"otpInput reached without a pending email, redirecting to {LANDING}")
                return LANDING
        elif target == "dashboard" and not self.session.is_logged_in:
            log.warning(f"dashboard reached while logged out, redirecting to {LANDING}")
            return LANDING
        elif target == "creatorAuth":
            self.auth.enter_creator_auth()
        return target
