"""Simulation boundary: fixed acceptance codes and artificial delays."""

from dataclasses import dataclass

# Simulated server-side checks. There is no real verification behind these.
OTP_ACCEPT_CODE = "123456"
ORG_ACCEPT_CODE = "HEGIRAORG"
OTP_LENGTH = 6

NAVIGATION_DELAY = 0.3
SUBMIT_DELAY = 1.5
OTP_VERIFY_DELAY = 1.5
OTP_RESEND_DELAY = 1.0
OTP_RESEND_COOLDOWN = 60.0
ORG_VERIFY_DELAY = 1.5
PAYMENT_MIN_DELAY = 3.0
PAYMENT_MAX_DELAY = 5.0


@dataclass(frozen=True)
class SimulationSettings:
    """Delays (seconds) used by the orchestration core."""

    navigation_delay: float = NAVIGATION_DELAY
    submit_delay: float = SUBMIT_DELAY
    otp_verify_delay: float = OTP_VERIFY_DELAY
    otp_resend_delay: float = OTP_RESEND_DELAY
    otp_resend_cooldown: float = OTP_RESEND_COOLDOWN
    org_verify_delay: float = ORG_VERIFY_DELAY
    payment_min_delay: float = PAYMENT_MIN_DELAY
    payment_max_delay: float = PAYMENT_MAX_DELAY


def is_accepted_otp(code: str) -> bool:
    return code == OTP_ACCEPT_CODE


def is_accepted_org_code(code: str) -> bool:
    return code.upper() == ORG_ACCEPT_CODE
