import logging

import pytest

from services.business_directory import list_companies
from services.event_catalog import find_event
from use_cases.errors import UnknownScreenError
from use_cases.navigation import NavigationController
from use_cases.overlays import RoleSelectionModal
from use_cases.screens import validate_screen
from use_cases.timers import TimerQueue


def test_navigate_sets_loading_then_arrives_after_delay():
    timers = TimerQueue(now=lambda: 0.0)
    nav = NavigationController(timers, 0.3)

    nav.navigate("events")
    assert nav.loading is True
    assert nav.loading_message == "Menuju events..."
    assert nav.current == "landing"

    timers.advance(0.5)
    assert nav.current == "events"
    assert nav.loading is False


def test_loading_message_for_landing():
    nav = NavigationController(TimerQueue(now=lambda: 0.0), 0.3)
    nav.navigate("landing")
    assert nav.loading_message == "Kembali ke Beranda..."


def test_newer_navigation_supersedes_pending_one():
    timers = TimerQueue(now=lambda: 0.0)
    nav = NavigationController(timers, 0.3)
    changes = []
    nav.add_screen_listener(lambda previous, current: changes.append((previous, current)))

    nav.navigate("events")
    timers.advance(0.1)
    nav.navigate("help")
    assert nav.pending_target == "help"

    timers.advance(1.0)
    assert nav.current == "help"
    assert changes == [("landing", "help")]


def test_unknown_screen_raises():
    nav = NavigationController(TimerQueue(now=lambda: 0.0), 0.3)
    with pytest.raises(UnknownScreenError):
        nav.navigate("settings")


def test_descriptive_aliases_resolve_to_screen_ids():
    assert validate_screen("catalog") == "events"
    assert validate_screen("otp-entry") == "otpInput"
    assert validate_screen("payment-pending") == "paymentLoading"
    assert validate_screen("eventDetail") == "eventDetail"


def test_event_detail_without_payload_falls_back_to_landing(shell, caplog):
    shell.navigate("events")
    shell.timers.advance(0.5)

    with caplog.at_level(logging.WARNING):
        shell.navigate("eventDetail")
        shell.timers.advance(0.5)

    assert shell.current_screen == "landing"
    assert "redirecting to landing" in caplog.text


def test_event_detail_with_payload_stores_selected_event(shell):
    event = find_event(shell.events, 2)
    shell.navigate("eventDetail", event)
    shell.timers.advance(0.5)

    assert shell.current_screen == "eventDetail"
    assert shell.selected_event == event


@pytest.mark.parametrize("target", ["checkout", "paymentLoading", "transactionSuccess", "ticketDisplay", "otpInput", "dashboard"])
def test_screens_missing_their_context_redirect_to_landing(shell, target):
    shell.navigate("help")
    shell.timers.advance(0.5)

    shell.navigate(target)
    shell.timers.advance(0.5)

    assert shell.current_screen == "landing"


def test_business_detail_without_payload_falls_back_to_listing(shell):
    shell.navigate("businessDetail")
    shell.timers.advance(0.5)
    assert shell.current_screen == "business"

    company = list_companies()[0]
    shell.navigate("businessDetail", company)
    shell.timers.advance(0.5)
    assert shell.current_screen == "businessDetail"
    assert shell.selected_company == company


def test_navigating_to_regular_screen_closes_auth_overlays_immediately(shell):
    shell.open_auth_modal()
    assert shell.active_overlay == RoleSelectionModal()

    shell.navigate("events")

    assert shell.active_overlay is None
    assert shell.auth.context is None


def test_navigating_to_auth_screen_keeps_auth_overlays(shell):
    shell.open_auth_modal()
    shell.navigate("login")
    shell.timers.advance(0.5)

    assert shell.active_overlay == RoleSelectionModal()
    assert shell.current_screen == "login"


def test_exactly_one_screen_is_current_after_each_navigation(shell):
    for target in ("events", "help", "business", "articlesPage", "landing"):
        shell.navigate(target)
        shell.timers.advance(0.5)
        assert shell.current_screen == target
