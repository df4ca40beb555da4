"""Navigation controller: owns the single current screen.

A navigation request flips the loading flag, applies its immediate side
effects and schedules the actual screen change after the navigation
delay. A newer request cancels a pending one, so the last request issued
is the one that lands.
"""

import logging
from typing import Any, Callable, List, Optional

from use_cases.screens import LANDING, loading_message, validate_screen
from use_cases.timers import TimerHandle, TimerQueue

log = logging.getLogger(__name__)

Resolver = Callable[[str, Any], str]
ScreenListener = Callable[[str, str], None]


class NavigationController:
    def __init__(
        self,
        timers: TimerQueue,
        delay: float,
        *,
        on_request: Optional[Callable[[str], None]] = None,
        resolver: Optional[Resolver] = None,
    ) -> None:
        self._timers = timers
        self._delay = delay
        self._on_request = on_request
        self._resolver = resolver
        self._pending: Optional[TimerHandle] = None
        self._listeners: List[ScreenListener] = []
        self.current = LANDING
        self.loading = False
        self.loading_message = ""

    def add_screen_listener(self, listener: ScreenListener) -> None:
        """`listener(previous, current)` runs after every resolved navigation."""
        self._listeners.append(listener)

    @property
    def pending_target(self) -> Optional[str]:
        if self._pending is not None and self._pending.pending:
            return self._pending.label.split(":", 1)[1]
        return None

    def navigate(self, target: str, payload: Any = None) -> None:
        target = validate_screen(target)
        if self._pending is not None and self._pending.pending:
            log.info(f"Navigation to {self.pending_target} superseded by {target}")
            self._pending.cancel()

        self.loading = True
        self.loading_message = loading_message(target)
        if self._on_request is not None:
            self._on_request(target)

        self._pending = self._timers.call_later(
            self._delay,
            lambda: self._arrive(target, payload),
            label=f"navigate:{target}",
        )

    def _arrive(self, target: str, payload: Any) -> None:
        self._pending = None
        resolved = self._resolver(target, payload) if self._resolver is not None else target
        previous = self.current
        self.current = resolved
        self.loading = False
        if resolved != target:
            log.info(f"Navigation to {target} resolved as {resolved}")
        else:
            log.info(f"Navigated {previous} -> {resolved}")
        for listener in self._listeners:
            listener(previous, resolved)
