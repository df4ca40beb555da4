"""Session lifecycle: login and confirmation-gated logout."""

import logging
from typing import Callable, List, Optional

from use_cases.guarded_navigation import GuardedNavigationGate, logout_confirmation
from use_cases.overlays import OverlayCoordinator
from use_cases.session_models import LOGGED_OUT, SessionState, is_business_role, logged_in_session, role_from_label

log = logging.getLogger(__name__)


class SessionLifecycle:
    def __init__(
        self,
        overlays: OverlayCoordinator,
        gate: GuardedNavigationGate,
        navigate: Callable[..., None],
    ) -> None:
        self._overlays = overlays
        self._gate = gate
        self._navigate = navigate
        self._logout_hooks: List[Callable[[], None]] = []
        self.session: SessionState = LOGGED_OUT

    def add_logout_hook(self, hook: Callable[[], None]) -> None:
        self._logout_hooks.append(hook)

    def login(self, role: str, name: Optional[str] = None) -> SessionState:
        resolved = role_from_label(role)
        if resolved is None:
            raise ValueError(f"Unknown role: {role!r}")
        self.session = logged_in_session(resolved, name)
        log.info(f"Logged in as {resolved} ({self.session.display_name})")
        self._overlays.close_auth_overlays()
        self._navigate("dashboard" if is_business_role(self.session) else "landing")
        return self.session

    def logout(self) -> None:
        """Ask for confirmation; the session is only cleared once confirmed."""
        self._gate.open(logout_confirmation(self._clear_session))

    def _clear_session(self) -> None:
        self.session = LOGGED_OUT
        for hook in self._logout_hooks:
            hook()
        self._overlays.clear()
        log.info("Logged out")
