from use_cases.domain_models import ConfirmationConfig, NavigationRequest
from use_cases.overlays import (
    ConfirmationPrompt,
    LoginForm,
    OrgVerificationModal,
    OtpModal,
    OverlayCoordinator,
    RoleSelectionModal,
    RoleSwitchModal,
    SignupForm,
)


def _prompt():
    return ConfirmationPrompt(
        ConfirmationConfig(
            title="t",
            message="m",
            confirm_label="ok",
            cancel_label="cancel",
            on_confirm_target=NavigationRequest(target="landing"),
        )
    )


def test_opening_an_overlay_replaces_the_previous_one():
    overlays = OverlayCoordinator()
    closed = []
    overlays.add_close_listener(closed.append)

    overlays.open(RoleSelectionModal())
    overlays.open(LoginForm("Event Visitor"))

    assert overlays.active == LoginForm("Event Visitor")
    assert closed == [RoleSelectionModal()]


def test_confirmation_prompt_suspends_and_cancel_restores():
    overlays = OverlayCoordinator()
    overlays.open(SignupForm("Event Visitor"))
    prompt = _prompt()

    overlays.open(prompt)
    assert overlays.active == prompt
    assert overlays.suspended == SignupForm("Event Visitor")

    overlays.close(ConfirmationPrompt)
    assert overlays.active == SignupForm("Event Visitor")
    assert overlays.suspended is None


def test_discard_suspended_tears_down_the_hidden_overlay():
    overlays = OverlayCoordinator()
    closed = []
    overlays.add_close_listener(closed.append)
    overlays.open(OtpModal("a@b.com"))
    overlays.open(_prompt())

    overlays.discard_suspended()
    overlays.close(ConfirmationPrompt)

    assert overlays.active is None
    assert OtpModal("a@b.com") in closed


def test_close_with_mismatched_kind_is_a_no_op():
    overlays = OverlayCoordinator()
    overlays.open(RoleSwitchModal("visitor"))

    assert overlays.close(OrgVerificationModal) is None
    assert overlays.active == RoleSwitchModal("visitor")


def test_close_auth_overlays_leaves_role_switch_alone():
    overlays = OverlayCoordinator()
    overlays.open(RoleSwitchModal("creator"))
    overlays.close_auth_overlays()
    assert overlays.active == RoleSwitchModal("creator")

    overlays.open(LoginForm("Organization"))
    overlays.close_auth_overlays()
    assert overlays.active is None


def test_find_sees_suspended_overlay():
    overlays = OverlayCoordinator()
    overlays.open(LoginForm("Event Visitor"))
    overlays.open(_prompt())

    assert overlays.find(LoginForm) == LoginForm("Event Visitor")
    assert overlays.find(OtpModal) is None


def test_clear_closes_everything():
    overlays = OverlayCoordinator()
    closed = []
    overlays.add_close_listener(closed.append)
    overlays.open(OrgVerificationModal())
    overlays.open(_prompt())

    overlays.clear()

    assert overlays.active is None
    assert overlays.suspended is None
    assert len(closed) == 2


def test_close_kind_reaches_a_suspended_overlay():
    overlays = OverlayCoordinator()
    closed = []
    overlays.add_close_listener(closed.append)
    overlays.open(OrgVerificationModal())
    prompt = _prompt()
    overlays.open(prompt)

    assert overlays.close_kind(OrgVerificationModal) == OrgVerificationModal()

    assert overlays.active == prompt
    assert overlays.suspended is None
    assert closed == [OrgVerificationModal()]


def test_close_kind_closes_the_visible_overlay():
    overlays = OverlayCoordinator()
    overlays.open(RoleSwitchModal("visitor"))

    assert overlays.close_kind(RoleSwitchModal) == RoleSwitchModal("visitor")
    assert overlays.close_kind(RoleSwitchModal) is None
    assert overlays.active is None
