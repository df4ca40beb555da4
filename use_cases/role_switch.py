"""Role switching for signed-in users.

Visitor and Creator switches apply immediately. Organization access is
gated behind an organization verification code.
"""

import logging
from typing import Callable, Optional

from use_cases.errors import FlowStateError
from use_cases.overlays import OrgVerificationModal, OverlayCoordinator, RoleSwitchModal
from use_cases.session_models import ORGANIZATION_PLACEHOLDER_NAME, ROLE_SWITCH_NAMES, Role, role_from_label
from use_cases.simulation import SimulationSettings, is_accepted_org_code
from use_cases.timers import TimerHandle, TimerQueue
from use_cases.validation import validate_org_code

log = logging.getLogger(__name__)

ORG_REJECTED_MESSAGE = "Kode verifikasi tidak valid atau salah."


class RoleSwitchFlow:
    def __init__(
        self,
        overlays: OverlayCoordinator,
        timers: TimerQueue,
        settings: SimulationSettings,
        *,
        login: Callable[[Role, Optional[str]], None],
        current_role: Callable[[], Optional[Role]],
    ) -> None:
        self._overlays = overlays
        self._timers = timers
        self._settings = settings
        self._login = login
        self._current_role = current_role

        self.pending_role: Optional[Role] = None
        self.org_code = ""
        self.error: Optional[str] = None
        self._verify_handle: Optional[TimerHandle] = None

        overlays.add_close_listener(self._on_overlay_closed)

    @property
    def verifying(self) -> bool:
        return self._verify_handle is not None and self._verify_handle.pending

    def open(self) -> None:
        self._overlays.open(RoleSwitchModal(self._current_role()))

    def close(self) -> None:
        self._overlays.close(RoleSwitchModal)

    def switch_role(self, new_role: str) -> None:
        role = role_from_label(new_role)
        if role is None:
            raise ValueError(f"Unknown role: {new_role!r}")

        if role == "organization":
            self._overlays.close(RoleSwitchModal)
            self._overlays.open(OrgVerificationModal())
            self.pending_role = role
            log.info("Organization role requested, verification required")
            return

        log.info(f"Switching role to {role}")
        self._login(role, ROLE_SWITCH_NAMES[role])
        self._overlays.close(RoleSwitchModal)

    def set_org_code(self, code: str) -> None:
        self.org_code = code
        self.error = None

    def verify_organization(self, code: Optional[str] = None) -> bool:
        """Start the simulated organization check; False if rejected up front."""
        if not isinstance(self._overlays.active, OrgVerificationModal):
            raise FlowStateError("Organization verification is not open")
        if code is not None:
            self.org_code = code
        if self.verifying:
            return False
        self.error = validate_org_code(self.org_code)
        if self.error:
            return False
        submitted = self.org_code
        self._verify_handle = self._timers.call_later(
            self._settings.org_verify_delay,
            lambda: self._finish_verify(submitted),
            label="role-switch:verify-org",
        )
        return True

    def _finish_verify(self, code: str) -> None:
        self._verify_handle = None
        if not is_accepted_org_code(code):
            log.info("Organization code rejected")
            self.error = ORG_REJECTED_MESSAGE
            return

        promote = self.pending_role == "organization"
        self._overlays.close_kind(OrgVerificationModal)
        self.pending_role = None
        if promote:
            log.info("Organization verified")
            self._login("organization", ORGANIZATION_PLACEHOLDER_NAME)

    def close_verification(self) -> None:
        self._overlays.close_kind(OrgVerificationModal)
        self.pending_role = None

    def reset(self) -> None:
        self._overlays.close(RoleSwitchModal)
        self.close_verification()
        self._clear_verification()

    def _on_overlay_closed(self, overlay) -> None:
        if isinstance(overlay, OrgVerificationModal):
            self.pending_role = None
            self._clear_verification()

    def _clear_verification(self) -> None:
        if self._verify_handle is not None:
            self._verify_handle.cancel()
        self._verify_handle = None
        self.org_code = ""
        self.error = None
