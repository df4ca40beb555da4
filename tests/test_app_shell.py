from services.event_catalog import find_event
from use_cases.overlays import OtpForm


def test_initial_snapshot(shell):
    snapshot = shell.snapshot()

    assert snapshot.screen == "landing"
    assert snapshot.overlay is None
    assert snapshot.session.is_logged_in is False
    assert snapshot.show_navbar is True
    assert snapshot.show_footer is True
    assert snapshot.show_loader is False


def test_loader_shows_while_navigating(shell):
    shell.navigate("help")
    snapshot = shell.snapshot()

    assert snapshot.show_loader is True
    assert snapshot.loading_message == "Menuju help..."

    shell.timers.advance(0.5)
    assert shell.snapshot().show_loader is False


def test_dashboard_is_full_screen(shell):
    shell.login("creator", "Budi")
    shell.timers.advance(0.5)
    snapshot = shell.snapshot()

    assert snapshot.screen == "dashboard"
    assert snapshot.show_navbar is False
    assert snapshot.show_footer is False


def test_event_detail_hides_footer_only(shell):
    shell.navigate("eventDetail", find_event(shell.events, 1))
    shell.timers.advance(0.5)
    snapshot = shell.snapshot()

    assert snapshot.show_navbar is True
    assert snapshot.show_footer is False


def test_full_otp_form_hides_chrome(shell):
    shell.open_auth_modal("Organization")
    shell.auth.signup_success("org@b.com", "Org")
    snapshot = shell.snapshot()

    assert snapshot.overlay == OtpForm("org@b.com", "Org")
    assert snapshot.show_navbar is False
    assert snapshot.show_footer is False


def test_read_only_session_props(shell):
    shell.login("Organization", "Yayasan")

    assert shell.is_logged_in is True
    assert shell.role == "organization"
    assert shell.display_name == "Yayasan"
    assert shell.session.role == shell.role
