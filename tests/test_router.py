from unittest.mock import Mock, patch

from use_cases.overlays import ConfirmationPrompt, LoginForm, OrgVerificationModal, OtpForm, OtpModal
from views import router


def test_overlays_dispatch_to_their_view(shell):
    with patch("views.router.auth_view.render_login_form") as mock_login, patch(
        "views.router.auth_view.render_otp"
    ) as mock_otp, patch("views.router.role_switch_view.render_org_verification") as mock_org:
        router.render_overlay(shell, LoginForm("Event Visitor"))
        router.render_overlay(shell, OtpModal("a@b.com"))
        router.render_overlay(shell, OrgVerificationModal())

    mock_login.assert_called_once_with(shell, LoginForm("Event Visitor"))
    mock_otp.assert_called_once_with(shell, OtpModal("a@b.com"))
    mock_org.assert_called_once_with(shell)


def test_confirmation_dispatch(shell):
    shell.request_navigation_with_confirmation("events")
    prompt = shell.active_overlay
    assert isinstance(prompt, ConfirmationPrompt)

    with patch("views.router.confirmation_view.render_confirmation") as mock_confirm:
        router.render_overlay(shell, prompt)

    mock_confirm.assert_called_once_with(shell, prompt)


def test_every_renderable_screen_has_a_renderer():
    from use_cases.screens import SCREENS

    for screen in SCREENS:
        assert screen in router.SCREEN_RENDERERS or screen in router.OVERLAY_BACKED_SCREENS


def test_screen_dispatch(shell):
    renderer = Mock()
    with patch.dict(router.SCREEN_RENDERERS, {"help": renderer}):
        router.render_screen(shell, "help")
    renderer.assert_called_once_with(shell)


def test_overlay_backed_screen_draws_landing(shell):
    with patch("views.router.event_views.render_landing") as mock_landing:
        router.render_screen(shell, "login")
    mock_landing.assert_called_once_with(shell)


def test_only_the_full_otp_form_takes_the_whole_page():
    assert router.is_full_page_overlay(OtpForm("a@b.com"))
    assert not router.is_full_page_overlay(OtpModal("a@b.com"))
    assert not router.is_full_page_overlay(None)
