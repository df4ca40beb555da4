"""Application layer: navigation and authentication orchestration."""

from .app_shell import AppShell, ShellSnapshot
from .domain_models import AuthContext, CheckoutInfo, ConfirmationConfig, EventRecord, NavigationRequest, TransactionData
from .errors import FlowStateError, InvalidSessionStateError, UnknownScreenError
from .overlays import (
    ConfirmationPrompt,
    LoginForm,
    OrgVerificationModal,
    OtpForm,
    OtpModal,
    RoleSelectionModal,
    RoleSwitchModal,
    SignupForm,
)
from .screens import SCREENS, ScreenId
from .session_models import Role, RoleLabel, SessionState
from .simulation import ORG_ACCEPT_CODE, OTP_ACCEPT_CODE, SimulationSettings
from .timers import TimerQueue

__all__ = [
    "AppShell",
    "AuthContext",
    "CheckoutInfo",
    "ConfirmationConfig",
    "ConfirmationPrompt",
    "EventRecord",
    "FlowStateError",
    "InvalidSessionStateError",
    "LoginForm",
    "NavigationRequest",
    "ORG_ACCEPT_CODE",
    "OTP_ACCEPT_CODE",
    "OrgVerificationModal",
    "OtpForm",
    "OtpModal",
    "Role",
    "RoleLabel",
    "RoleSelectionModal",
    "RoleSwitchModal",
    "SCREENS",
    "ScreenId",
    "SessionState",
    "ShellSnapshot",
    "SignupForm",
    "SimulationSettings",
    "TimerQueue",
    "TransactionData",
    "UnknownScreenError",
]
