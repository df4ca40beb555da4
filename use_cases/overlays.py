"""Active-overlay coordination.

Exactly one overlay is visible at a time. Each overlay kind is its own
frozen dataclass carrying only the data that overlay needs, so the view
layer renders with a single dispatch on the overlay type.

A ConfirmationPrompt opened over another overlay suspends it: the prompt
is the only visible overlay, and cancelling the prompt restores the
suspended one. Confirming discards it.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from use_cases.domain_models import ConfirmationConfig
from use_cases.session_models import Role, RoleLabel

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoleSelectionModal:
    pass


@dataclass(frozen=True)
class LoginForm:
    role: RoleLabel


@dataclass(frozen=True)
class SignupForm:
    role: RoleLabel


@dataclass(frozen=True)
class OtpForm:
    email: str
    name: Optional[str] = None


@dataclass(frozen=True)
class OtpModal:
    email: str


@dataclass(frozen=True)
class ConfirmationPrompt:
    config: ConfirmationConfig


@dataclass(frozen=True)
class RoleSwitchModal:
    current_role: Optional[Role] = None


@dataclass(frozen=True)
class OrgVerificationModal:
    pass


Overlay = Union[
    RoleSelectionModal,
    LoginForm,
    SignupForm,
    OtpForm,
    OtpModal,
    ConfirmationPrompt,
    RoleSwitchModal,
    OrgVerificationModal,
]

AUTH_OVERLAYS = (RoleSelectionModal, LoginForm, SignupForm, OtpForm, OtpModal)
OTP_OVERLAYS = (OtpForm, OtpModal)


def is_auth_overlay(overlay: Optional[Overlay]) -> bool:
    return isinstance(overlay, AUTH_OVERLAYS)


class OverlayCoordinator:
    def __init__(self) -> None:
        self._active: Optional[Overlay] = None
        self._suspended: Optional[Overlay] = None
        self._close_listeners: List[Callable[[Overlay], None]] = []

    @property
    def active(self) -> Optional[Overlay]:
        return self._active

    @property
    def suspended(self) -> Optional[Overlay]:
        return self._suspended

    def add_close_listener(self, listener: Callable[[Overlay], None]) -> None:
        """Register a callback fired for every overlay that is torn down."""
        self._close_listeners.append(listener)

    def find(self, kind) -> Optional[Overlay]:
        """Return the active or suspended overlay of `kind`, if any."""
        for overlay in (self._active, self._suspended):
            if isinstance(overlay, kind):
                return overlay
        return None

    def open(self, overlay: Overlay) -> None:
        previous = self._active
        if isinstance(overlay, ConfirmationPrompt) and previous is not None and not isinstance(previous, ConfirmationPrompt):
            if self._suspended is not None:
                self._teardown(self._suspended)
            self._suspended = previous
            log.debug(f"Suspended {type(previous).__name__} under confirmation prompt")
        else:
            if previous is not None and previous != overlay:
                self._teardown(previous)
            if self._suspended is not None and not isinstance(overlay, ConfirmationPrompt):
                self._teardown(self._suspended)
                self._suspended = None
        self._active = overlay
        log.debug(f"Overlay opened: {type(overlay).__name__}")

    def close(self, kind=None) -> Optional[Overlay]:
        """Close the active overlay (only if it is of `kind`, when given).

        Closing a confirmation prompt restores the overlay it suspended.
        """
        current = self._active
        if current is None or (kind is not None and not isinstance(current, kind)):
            return None
        self._active = None
        if isinstance(current, ConfirmationPrompt) and self._suspended is not None:
            self._active, self._suspended = self._suspended, None
        self._teardown(current)
        return current

    def close_kind(self, kind) -> Optional[Overlay]:
        """Close an overlay of `kind` whether it is visible or suspended under a prompt."""
        if isinstance(self._active, kind):
            return self.close()
        if isinstance(self._suspended, kind):
            suspended = self._suspended
            self.discard_suspended()
            return suspended
        return None

    def discard_suspended(self) -> None:
        if self._suspended is not None:
            suspended, self._suspended = self._suspended, None
            self._teardown(suspended)

    def close_auth_overlays(self) -> None:
        if is_auth_overlay(self._suspended):
            self.discard_suspended()
        if is_auth_overlay(self._active):
            self.close()

    def clear(self) -> None:
        self.discard_suspended()
        if self._active is not None:
            current, self._active = self._active, None
            self._teardown(current)

    def _teardown(self, overlay: Overlay) -> None:
        log.debug(f"Overlay closed: {type(overlay).__name__}")
        for listener in self._close_listeners:
            listener(overlay)
