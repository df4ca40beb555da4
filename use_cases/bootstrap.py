"""Startup orchestration for the per-session app shell."""

from dataclasses import dataclass
from typing import Literal, Tuple

from utils import session_manager

StartupStatus = Literal["CONTINUE", "STOP"]


@dataclass(frozen=True)
class StartupResult:
    """Result contract for startup/bootstrap orchestration."""

    status: StartupStatus
    planned_steps: Tuple[str, ...]


def run_startup() -> StartupResult:
    """Make sure the shell exists and has caught up with elapsed simulated delays."""
    executed_steps = []

    session_manager.init_session_state()
    executed_steps.append("init_session_state")

    fired = session_manager.drain_timers()
    executed_steps.append(f"drain_timers:{fired}")

    return StartupResult(status="CONTINUE", planned_steps=tuple(executed_steps))
