import pytest

from use_cases.errors import FlowStateError
from use_cases.overlays import OrgVerificationModal, RoleSwitchModal
from use_cases.role_switch import ORG_REJECTED_MESSAGE


def _logged_in_visitor(shell):
    shell.login("visitor", "Sari")
    shell.timers.advance(0.5)


def test_open_role_switch_preselects_current_role(shell):
    _logged_in_visitor(shell)
    shell.open_role_switch_modal()

    assert shell.active_overlay == RoleSwitchModal("visitor")


def test_organization_switch_requires_verification(shell):
    _logged_in_visitor(shell)
    shell.open_role_switch_modal()
    shell.role_switch.switch_role("Organization")

    assert shell.active_overlay == OrgVerificationModal()
    assert shell.role_switch.pending_role == "organization"
    assert shell.role == "visitor"

    assert shell.role_switch.verify_organization("HEGIRAORG") is True
    assert shell.role_switch.verifying is True
    shell.timers.advance(2.5)

    assert shell.role == "organization"
    assert shell.display_name == "Nama Organisasi Anda"
    assert shell.current_screen == "dashboard"
    assert shell.active_overlay is None
    assert shell.role_switch.pending_role is None


def test_organization_code_is_case_insensitive(shell):
    _logged_in_visitor(shell)
    shell.open_role_switch_modal()
    shell.role_switch.switch_role("Organization")

    shell.role_switch.verify_organization("hegiraorg")
    shell.timers.advance(2.5)

    assert shell.role == "organization"


def test_wrong_organization_code_keeps_modal_and_input(shell):
    _logged_in_visitor(shell)
    shell.open_role_switch_modal()
    shell.role_switch.switch_role("Organization")

    shell.role_switch.verify_organization("WRONG")
    shell.timers.advance(2.5)

    assert shell.role == "visitor"
    assert shell.active_overlay == OrgVerificationModal()
    assert shell.role_switch.error == ORG_REJECTED_MESSAGE
    assert shell.role_switch.org_code == "WRONG"


def test_empty_organization_code_fails_immediately(shell):
    _logged_in_visitor(shell)
    shell.open_role_switch_modal()
    shell.role_switch.switch_role("Organization")

    assert shell.role_switch.verify_organization("") is False
    assert shell.role_switch.error == "Kode verifikasi tidak boleh kosong."
    assert shell.role_switch.verifying is False


@pytest.mark.parametrize(
    "label, role, name, screen",
    [
        ("Event Creator", "creator", "Kreator Hegira", "dashboard"),
        ("Event Visitor", "visitor", "Pengunjung Hegira", "landing"),
    ],
)
def test_direct_switch_never_opens_verification(shell, label, role, name, screen):
    shell.login("organization", "Org")
    shell.timers.advance(0.5)
    shell.open_role_switch_modal()

    shell.role_switch.switch_role(label)

    assert not isinstance(shell.active_overlay, OrgVerificationModal)
    assert shell.active_overlay is None
    assert shell.role == role
    assert shell.display_name == name
    shell.timers.advance(0.5)
    assert shell.current_screen == screen


def test_closing_verification_clears_pending_role(shell):
    _logged_in_visitor(shell)
    shell.open_role_switch_modal()
    shell.role_switch.switch_role("Organization")
    shell.role_switch.set_org_code("ABC")

    shell.role_switch.close_verification()

    assert shell.active_overlay is None
    assert shell.role_switch.pending_role is None
    assert shell.role_switch.org_code == ""


def test_closing_verification_cancels_pending_check(shell):
    _logged_in_visitor(shell)
    shell.open_role_switch_modal()
    shell.role_switch.switch_role("Organization")
    shell.role_switch.verify_organization("HEGIRAORG")

    shell.role_switch.close_verification()
    shell.timers.advance(2.5)

    assert shell.role == "visitor"


def test_verify_without_modal_is_a_flow_error(shell):
    with pytest.raises(FlowStateError):
        shell.role_switch.verify_organization("HEGIRAORG")


def test_verified_code_under_logout_prompt_does_not_leave_modal_behind(shell):
    _logged_in_visitor(shell)
    shell.open_role_switch_modal()
    shell.role_switch.switch_role("Organization")
    shell.role_switch.verify_organization("HEGIRAORG")

    shell.logout()
    shell.timers.advance(2.5)

    assert shell.role == "organization"
    assert shell.overlays.suspended is None

    shell.cancel_navigation()

    assert not isinstance(shell.active_overlay, OrgVerificationModal)
    assert shell.active_overlay is None
