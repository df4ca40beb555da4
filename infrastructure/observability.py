"""
Logging and error reporting for the Hegira app.

Log level and Sentry are driven by environment variables only, so the
same build runs locally (plain console logs) and deployed (Sentry on).
"""

import logging
import os
import re
from typing import Any, Dict

log = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"([A-Za-z0-9._%+\-])[A-Za-z0-9._%+\-]*@([A-Za-z0-9.\-]+\.[A-Za-z]{2,})")
LONG_TOKEN_PATTERN = re.compile(r"([a-zA-Z0-9_\-]{30,})")

# Frame variables that never leave the process, whatever their value.
SENSITIVE_KEYS = frozenset({"code", "org_code", "password", "confirm_password"})

NOISY_LOGGERS = ("watchdog", "streamlit")


def mask_email(email: str) -> str:
    """a.user@example.com -> a***@example.com, for log lines."""
    if not email:
        return "<no email>"
    return EMAIL_PATTERN.sub(r"\1***@\2", email)


def _redact(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: "[REDACTED]" if key in SENSITIVE_KEYS else _redact(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_redact(item) for item in value]
    if isinstance(value, str):
        return EMAIL_PATTERN.sub("[REDACTED]", LONG_TOKEN_PATTERN.sub("[REDACTED]", value))
    return value


def _scrub_sensitive_data(event: Dict[str, Any], hint: Dict[str, Any]) -> Dict[str, Any]:
    """Sentry before_send hook: strip OTP/org codes, passwords and e-mails from frame vars."""
    for exc in event.get("exception", {}).get("values", []):
        for frame in exc.get("stacktrace", {}).get("frames", []):
            if "vars" in frame:
                frame["vars"] = _redact(frame["vars"])
    return event


def _init_sentry(dsn: str) -> None:
    import sentry_sdk

    environment = os.getenv("SENTRY_ENV", "development")
    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        traces_sample_rate=float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "1.0")),
        send_default_pii=False,
        before_send=_scrub_sensitive_data,
    )
    log.info(f"Sentry enabled (env: {environment})")


def setup_observability() -> None:
    """Call once, before anything else logs."""
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    dsn = os.getenv("SENTRY_DSN")
    if dsn:
        _init_sentry(dsn)
    else:
        log.info("SENTRY_DSN not set, error reporting disabled")

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
