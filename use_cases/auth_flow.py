"""Authentication flow orchestration (application layer).

Role selection -> credential entry -> one-time code -> session. Visitors
verify in a lightweight inline OTP modal; every other role gets the
full-screen OTP form. Creators enter through their own screen instead of
the login overlay.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional

from infrastructure.observability import mask_email
from use_cases.domain_models import AuthContext
from use_cases.errors import FlowStateError
from use_cases.overlays import (
    OTP_OVERLAYS,
    LoginForm,
    OtpForm,
    OtpModal,
    OverlayCoordinator,
    RoleSelectionModal,
    SignupForm,
)
from use_cases.session_models import Role, label_from_role, new_account_name, role_from_label
from use_cases.simulation import OTP_LENGTH, SimulationSettings, is_accepted_otp
from use_cases.timers import TimerHandle, TimerQueue
from use_cases.validation import FieldErrors, validate_login, validate_otp_code, validate_signup

log = logging.getLogger(__name__)

CREATOR_LABEL = "Event Creator"
VISITOR_LABEL = "Event Visitor"

OTP_REJECTED_MESSAGE = "Kode OTP salah atau tidak valid. Silakan coba lagi."


@dataclass
class OtpEntryState:
    code: str = ""
    error: Optional[str] = None
    verifying: bool = False
    resending: bool = False
    sends: int = 0
    focus_index: int = 0


class AuthFlow:
    def __init__(
        self,
        overlays: OverlayCoordinator,
        timers: TimerQueue,
        settings: SimulationSettings,
        *,
        navigate: Callable[..., None],
        login: Callable[[Role, Optional[str]], None],
        current_screen: Callable[[], str],
        is_logged_in: Callable[[], bool],
    ) -> None:
        self._overlays = overlays
        self._timers = timers
        self._settings = settings
        self._navigate = navigate
        self._login = login
        self._current_screen = current_screen
        self._is_logged_in = is_logged_in

        self.context: Optional[AuthContext] = None
        self.otp = OtpEntryState()
        self._submit_handle: Optional[TimerHandle] = None
        self._verify_handle: Optional[TimerHandle] = None
        self._resend_handle: Optional[TimerHandle] = None
        self._cooldown_handle: Optional[TimerHandle] = None
        self._cooldown_until = 0.0

        overlays.add_close_listener(self._on_overlay_closed)

    @property
    def state(self) -> str:
        overlay = self._overlays.find((RoleSelectionModal, LoginForm, SignupForm, OtpForm, OtpModal))
        if isinstance(overlay, RoleSelectionModal):
            return "RoleSelection"
        if isinstance(overlay, LoginForm):
            return "Login"
        if isinstance(overlay, SignupForm):
            return "Signup"
        if isinstance(overlay, OTP_OVERLAYS):
            return "OtpPending"
        if self._current_screen() == "creatorAuth":
            return "CreatorAuth"
        if self._is_logged_in():
            return "Authenticated"
        return "Idle"

    @property
    def active_role(self) -> Optional[str]:
        return self.context.active_role if self.context is not None else None

    @property
    def submitting(self) -> bool:
        return self._submit_handle is not None and self._submit_handle.pending

    # --- entry -----------------------------------------------------------

    def open_auth(self, role_label: Optional[str] = None) -> None:
        self._ensure_context()
        if role_label:
            label = self._require_label(role_label)
            self.context.active_role = label
            self._overlays.open(LoginForm(label))
        else:
            self._overlays.open(RoleSelectionModal())

    def select_role(self, role_label: str) -> None:
        label = self._require_label(role_label)
        self._ensure_context().active_role = label
        self._overlays.close(RoleSelectionModal)
        if label == CREATOR_LABEL:
            self._navigate("creatorAuth")
        else:
            self._overlays.open(LoginForm(label))

    def enter_creator_auth(self) -> None:
        """Arrival side effect of the creator-auth screen."""
        self._ensure_context().active_role = CREATOR_LABEL

    def switch_to_signup(self) -> None:
        form = self._overlays.active
        if not isinstance(form, LoginForm):
            raise FlowStateError("switch_to_signup requires the login form")
        self._cancel(self._submit_handle)
        self._overlays.open(SignupForm(form.role))

    def switch_to_login(self) -> None:
        form = self._overlays.active
        if not isinstance(form, SignupForm):
            raise FlowStateError("switch_to_login requires the signup form")
        self._cancel(self._submit_handle)
        self._overlays.open(LoginForm(form.role))

    # --- credentials -----------------------------------------------------

    def submit_login(self, email: str, password: str) -> FieldErrors:
        label = self._credential_role()
        context = self._ensure_context()
        context.field_errors = validate_login(email, password)
        if context.field_errors or self.submitting:
            return context.field_errors
        self._submit_handle = self._timers.call_later(
            self._settings.submit_delay,
            lambda: self._complete_login(label),
            label="auth:login",
        )
        return {}

    def submit_signup(self, name: str, email: str, password: str, confirm_password: str) -> FieldErrors:
        label = self._credential_role()
        context = self._ensure_context()
        context.field_errors = validate_signup(name, email, password, confirm_password, label)
        if context.field_errors or self.submitting:
            return context.field_errors
        email = email.strip()
        name = name.strip() or None
        self._submit_handle = self._timers.call_later(
            self._settings.submit_delay,
            lambda: self.signup_success(email, name),
            label="auth:signup",
        )
        return {}

    def _complete_login(self, label: str) -> None:
        self._submit_handle = None
        role = role_from_label(label) or "visitor"
        pending_name = self.context.pending_name if self.context is not None else None
        self.context = None
        self._login(role, pending_name or new_account_name(role))

    def signup_success(self, email: str, name: Optional[str] = None) -> None:
        self._submit_handle = None
        context = self._ensure_context()
        context.pending_email = email
        context.pending_name = name
        self._reset_otp()
        if context.active_role == VISITOR_LABEL:
            self._overlays.open(OtpModal(email))
        else:
            self._overlays.open(OtpForm(email, name))
        log.info(f"Signup accepted for {mask_email(email)}, awaiting OTP")

    # --- one-time code ---------------------------------------------------

    def set_otp_code(self, code: str) -> None:
        self.otp.code = "".join(ch for ch in code if ch.isdigit())[:OTP_LENGTH]
        self.otp.error = None
        self.otp.focus_index = min(len(self.otp.code), OTP_LENGTH - 1)

    def verify_otp(self, code: Optional[str] = None) -> bool:
        """Start the simulated check. Returns False if the input was rejected up front."""
        self._require_otp_overlay()
        if code is not None:
            self.otp.code = code
        if self.otp.verifying:
            return False
        entry_error = validate_otp_code(self.otp.code)
        if entry_error:
            self.otp.error = entry_error
            return False
        self.otp.error = None
        self.otp.verifying = True
        submitted = self.otp.code
        self._verify_handle = self._timers.call_later(
            self._settings.otp_verify_delay,
            lambda: self._finish_verify(submitted),
            label="auth:verify-otp",
        )
        return True

    def _finish_verify(self, code: str) -> None:
        self._verify_handle = None
        self.otp.verifying = False
        email = self.context.pending_email if self.context is not None else ""
        if not is_accepted_otp(code):
            log.info(f"OTP rejected for {mask_email(email)}")
            self.otp.error = OTP_REJECTED_MESSAGE
            self.otp.code = ""
            self.otp.focus_index = 0
            return

        role = (role_from_label(self.context.active_role) if self.context is not None else None) or "visitor"
        name = self.context.pending_name if self.context is not None else None
        log.info(f"OTP verified for {mask_email(email)} as {role}")
        self._login(role, name or new_account_name(role))
        self.context = None
        self._overlays.close_auth_overlays()

    def resend_otp(self) -> bool:
        """Simulate a resend. A no-op while a send or its cooldown is in progress."""
        self._require_otp_overlay()
        if self.otp.resending or self.cooldown_remaining() > 0:
            return False
        self.otp.resending = True
        self.otp.error = None
        self._resend_handle = self._timers.call_later(
            self._settings.otp_resend_delay,
            self._finish_resend,
            label="auth:resend-otp",
        )
        return True

    def _finish_resend(self) -> None:
        self._resend_handle = None
        self.otp.resending = False
        self.otp.sends += 1
        email = self.context.pending_email if self.context is not None else ""
        log.info(f"Resending OTP to {mask_email(email)}")
        self._cooldown_until = self._timers.now() + self._settings.otp_resend_cooldown
        self._cooldown_handle = self._timers.call_later(
            self._settings.otp_resend_cooldown,
            self._end_cooldown,
            label="auth:resend-cooldown",
        )

    def _end_cooldown(self) -> None:
        self._cooldown_handle = None
        self._cooldown_until = 0.0

    def cooldown_remaining(self) -> int:
        """Whole seconds left before another resend is allowed."""
        if self._cooldown_handle is None or not self._cooldown_handle.pending:
            return 0
        return max(int(math.ceil(self._cooldown_until - self._timers.now())), 0)

    def change_email(self) -> None:
        if isinstance(self._overlays.active, OtpModal):
            self._overlays.close(OtpModal)
            self._ensure_context().active_role = VISITOR_LABEL
            self._overlays.open(SignupForm(VISITOR_LABEL))
        elif isinstance(self._overlays.active, OtpForm):
            self._overlays.close(OtpForm)
            if self._current_screen() != "creatorAuth":
                self._navigate("creatorAuth")
        else:
            raise FlowStateError("change_email requires an OTP overlay")

    # --- teardown --------------------------------------------------------

    def close_auth_flow(self) -> None:
        self.clear_context()
        self._overlays.close_auth_overlays()
        self._navigate("landing")

    def clear_context(self) -> None:
        self._cancel(self._submit_handle)
        self._submit_handle = None
        self.context = None

    def _on_overlay_closed(self, overlay) -> None:
        if isinstance(overlay, (LoginForm, SignupForm)):
            self._cancel(self._submit_handle)
        if isinstance(overlay, OTP_OVERLAYS) and self._overlays.find(OTP_OVERLAYS) is None:
            self._reset_otp()

    def _reset_otp(self) -> None:
        for handle in (self._verify_handle, self._resend_handle, self._cooldown_handle):
            self._cancel(handle)
        self._verify_handle = self._resend_handle = self._cooldown_handle = None
        self._cooldown_until = 0.0
        self.otp = OtpEntryState()

    # --- helpers ---------------------------------------------------------

    def _ensure_context(self) -> AuthContext:
        if self.context is None:
            self.context = AuthContext()
        return self.context

    def _credential_role(self) -> str:
        form = self._overlays.active
        if isinstance(form, (LoginForm, SignupForm)):
            return form.role
        if self._current_screen() == "creatorAuth":
            return CREATOR_LABEL
        raise FlowStateError("No credential form is open")

    def _require_otp_overlay(self) -> None:
        if not isinstance(self._overlays.active, OTP_OVERLAYS):
            raise FlowStateError("No OTP entry is open")

    @staticmethod
    def _require_label(role_label: str) -> str:
        label = label_from_role(role_label)
        if label is None:
            raise ValueError(f"Unknown role label: {role_label!r}")
        return label

    @staticmethod
    def _cancel(handle: Optional[TimerHandle]) -> None:
        if handle is not None:
            handle.cancel()
