"""Runtime configuration: Streamlit secrets first, then environment variables."""

import logging
import os
from dataclasses import fields

import streamlit as st

from use_cases.simulation import SimulationSettings

log = logging.getLogger(__name__)

SIMULATION_ENV_KEYS = {
    "navigation_delay": "HEGIRA_NAV_DELAY",
    "submit_delay": "HEGIRA_SUBMIT_DELAY",
    "otp_verify_delay": "HEGIRA_OTP_DELAY",
    "otp_resend_delay": "HEGIRA_RESEND_DELAY",
    "otp_resend_cooldown": "HEGIRA_RESEND_COOLDOWN",
    "org_verify_delay": "HEGIRA_ORG_DELAY",
    "payment_min_delay": "HEGIRA_PAYMENT_MIN",
    "payment_max_delay": "HEGIRA_PAYMENT_MAX",
}


def get_secret(key):
    try:
        return st.secrets.get(key)
    except FileNotFoundError:
        return None


def get_setting(key, default=None):
    value = get_secret(key)
    if value is None:
        value = os.getenv(key)
    return default if value is None else value


def load_simulation_settings() -> SimulationSettings:
    defaults = SimulationSettings()
    overrides = {}
    for field in fields(SimulationSettings):
        env_key = SIMULATION_ENV_KEYS[field.name]
        raw = get_setting(env_key)
        if raw is None:
            continue
        try:
            value = float(raw)
        except (TypeError, ValueError):
            log.warning(f"Ignoring {env_key}={raw!r}: not a number")
            continue
        if value < 0:
            log.warning(f"Ignoring {env_key}={raw!r}: negative delay")
            continue
        overrides[field.name] = value

    settings = SimulationSettings(**{**defaults.__dict__, **overrides})
    if settings.payment_min_delay > settings.payment_max_delay:
        log.warning("Payment delay bounds are inverted, using defaults")
        settings = SimulationSettings(
            **{**settings.__dict__, "payment_min_delay": defaults.payment_min_delay, "payment_max_delay": defaults.payment_max_delay}
        )
    return settings
