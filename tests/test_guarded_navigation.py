from unittest.mock import Mock

from use_cases.domain_models import NavigationRequest
from use_cases.guarded_navigation import navigation_confirmation
from use_cases.overlays import ConfirmationPrompt, LoginForm


def test_request_opens_one_prompt_and_does_not_navigate(shell):
    shell.request_navigation_with_confirmation("events")
    shell.timers.advance(1.0)

    assert isinstance(shell.active_overlay, ConfirmationPrompt)
    assert shell.active_overlay.config.title == "Konfirmasi Navigasi"
    assert shell.current_screen == "landing"
    assert shell.navigation.loading is False


def test_confirm_runs_reset_then_navigates(shell):
    reset = Mock()
    shell.request_navigation_with_confirmation("events", reset_callback=reset)

    assert shell.confirm_navigation() is True
    reset.assert_called_once()
    assert shell.active_overlay is None

    shell.timers.advance(0.5)
    assert shell.current_screen == "events"


def test_confirm_passes_payload_through(shell):
    event = shell.events[0]
    shell.request_navigation_with_confirmation("eventDetail", event)
    shell.confirm_navigation()
    shell.timers.advance(0.5)

    assert shell.current_screen == "eventDetail"
    assert shell.selected_event == event


def test_cancel_closes_prompt_without_side_effects(shell):
    reset = Mock()
    shell.request_navigation_with_confirmation("events", reset_callback=reset)

    assert shell.cancel_navigation() is True
    shell.timers.advance(1.0)

    reset.assert_not_called()
    assert shell.active_overlay is None
    assert shell.current_screen == "landing"
    assert shell.cancel_navigation() is False
    assert shell.confirm_navigation() is False


def test_leaving_payment_for_checkout_gets_payment_copy():
    config = navigation_confirmation(NavigationRequest(target="checkout"), "paymentLoading")
    assert config.title == "Batalkan Pembayaran?"
    assert config.tone == "danger"

    generic = navigation_confirmation(NavigationRequest(target="checkout"), "eventDetail")
    assert generic.title == "Konfirmasi Navigasi"
    assert generic.confirm_label == "Ya, Tinggalkan"
    assert generic.tone == "warning"


def test_cancel_restores_the_overlay_the_prompt_covered(shell):
    shell.open_auth_modal("Event Visitor")
    shell.request_navigation_with_confirmation("events")

    assert shell.overlays.suspended == LoginForm("Event Visitor")
    shell.cancel_navigation()
    assert shell.active_overlay == LoginForm("Event Visitor")


def test_confirm_discards_the_overlay_the_prompt_covered(shell):
    shell.open_auth_modal("Event Visitor")
    shell.request_navigation_with_confirmation("events")
    shell.confirm_navigation()

    assert shell.active_overlay is None
    assert shell.overlays.suspended is None
    assert shell.auth.context is None
