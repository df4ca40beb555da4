"""Simulated payment: checkout -> payment pending -> transaction success."""

import logging
import random
import time
from typing import Callable, Optional

from use_cases.domain_models import CheckoutInfo, TransactionData, TransactionFormData
from use_cases.errors import FlowStateError
from use_cases.guarded_navigation import GuardedNavigationGate
from use_cases.simulation import SimulationSettings
from use_cases.timers import TimerHandle, TimerQueue

log = logging.getLogger(__name__)

PAYMENT_SCREEN = "paymentLoading"


def make_transaction_ids(epoch_ms: int):
    digits = str(epoch_ms)
    return f"TRX-HEGIRA-{digits[-8:]}", f"ORD-{digits[-6:]}"


class CheckoutFlow:
    def __init__(
        self,
        timers: TimerQueue,
        settings: SimulationSettings,
        gate: GuardedNavigationGate,
        navigate: Callable[..., None],
        *,
        rng: Optional[random.Random] = None,
        epoch_ms: Optional[Callable[[], int]] = None,
    ) -> None:
        self._timers = timers
        self._settings = settings
        self._gate = gate
        self._navigate = navigate
        self._rng = rng or random.Random()
        self._epoch_ms = epoch_ms or (lambda: int(time.time() * 1000))
        self._payment_handle: Optional[TimerHandle] = None
        self.transaction: Optional[TransactionData] = None

    @property
    def processing(self) -> bool:
        return self._payment_handle is not None and self._payment_handle.pending

    def process_payment(self, form_data: TransactionFormData, checkout_info: CheckoutInfo) -> TransactionData:
        transaction_id, order_id = make_transaction_ids(self._epoch_ms())
        self.transaction = TransactionData(
            checkout_info=checkout_info,
            form_data=form_data,
            transaction_id=transaction_id,
            order_id=order_id,
        )
        log.info(f"Payment started for order {order_id} ({checkout_info.total_price})")
        self._navigate(PAYMENT_SCREEN)
        return self.transaction

    def cancel_payment(self) -> None:
        """Ask to return to checkout; the payment keeps running until confirmed."""
        if self.transaction is None:
            raise FlowStateError("No payment in progress")
        self._gate.request("checkout", self.transaction.checkout_info)

    def on_navigation_requested(self, target: str) -> None:
        if target != PAYMENT_SCREEN and self._payment_handle is not None:
            self._payment_handle.cancel()
            self._payment_handle = None

    def on_screen_changed(self, previous: str, current: str) -> None:
        if current != PAYMENT_SCREEN or self.transaction is None or self.processing:
            return
        delay = self._rng.uniform(self._settings.payment_min_delay, self._settings.payment_max_delay)
        self._payment_handle = self._timers.call_later(delay, self._complete, label="checkout:payment")

    def _complete(self) -> None:
        self._payment_handle = None
        log.info(f"Payment completed for order {self.transaction.order_id}")
        self._navigate("transactionSuccess")
