import pytest

from services.event_catalog import build_checkout, find_event
from use_cases.checkout_flow import make_transaction_ids
from use_cases.domain_models import TransactionFormData
from use_cases.errors import FlowStateError
from use_cases.overlays import ConfirmationPrompt

FORM = TransactionFormData(full_name="Sari Dewi", email="sari@example.com", phone_number="081234567890")


def _at_checkout(shell):
    event = find_event(shell.events, 1)
    info = build_checkout(event, {"regular": 2})
    shell.navigate("eventDetail", event)
    shell.timers.advance(0.5)
    shell.navigate("checkout", info)
    shell.timers.advance(0.5)
    return info


def _at_payment(shell):
    info = _at_checkout(shell)
    shell.checkout.process_payment(FORM, info)
    shell.timers.advance(0.5)
    return info


def test_transaction_ids_use_trailing_epoch_digits():
    assert make_transaction_ids(1717171717123) == ("TRX-HEGIRA-71717123", "ORD-717123")


def test_checkout_screen_stores_checkout_info(shell):
    info = _at_checkout(shell)

    assert shell.current_screen == "checkout"
    assert shell.checkout_data == info
    assert info.total_price == 150000


def test_payment_runs_to_transaction_success(shell):
    info = _at_checkout(shell)

    transaction = shell.checkout.process_payment(FORM, info)
    assert transaction.transaction_id == "TRX-HEGIRA-71717123"
    assert transaction.order_id == "ORD-717123"
    assert shell.navigation.pending_target == "paymentLoading"

    shell.timers.advance(0.5)
    assert shell.current_screen == "paymentLoading"
    assert shell.checkout.processing is True
    snapshot = shell.snapshot()
    assert snapshot.show_navbar is False
    assert snapshot.show_loader is False

    shell.timers.advance(6.0)
    assert shell.current_screen == "transactionSuccess"
    assert shell.checkout.transaction == transaction


def test_cancel_payment_asks_with_payment_copy(shell):
    _at_payment(shell)

    shell.checkout.cancel_payment()

    prompt = shell.active_overlay
    assert isinstance(prompt, ConfirmationPrompt)
    assert prompt.config.title == "Batalkan Pembayaran?"
    assert prompt.config.tone == "danger"
    assert shell.checkout.processing is True


def test_confirmed_cancel_returns_to_checkout_and_stops_payment(shell):
    info = _at_payment(shell)

    shell.checkout.cancel_payment()
    shell.confirm_navigation()
    assert shell.checkout.processing is False

    shell.timers.advance(6.0)
    assert shell.current_screen == "checkout"
    assert shell.checkout_data == info


def test_dismissed_cancel_lets_payment_finish(shell):
    _at_payment(shell)

    shell.checkout.cancel_payment()
    shell.cancel_navigation()
    shell.timers.advance(6.0)

    assert shell.current_screen == "transactionSuccess"


def test_cancel_payment_without_transaction_is_a_flow_error(shell):
    with pytest.raises(FlowStateError):
        shell.checkout.cancel_payment()


def test_ticket_display_after_success(shell):
    _at_payment(shell)
    shell.timers.advance(6.0)

    shell.navigate("ticketDisplay")
    shell.timers.advance(0.5)
    assert shell.current_screen == "ticketDisplay"
