from unittest.mock import patch

from use_cases import bootstrap
from use_cases.simulation import SimulationSettings


@patch("utils.session_manager.load_simulation_settings", return_value=SimulationSettings())
def test_run_startup_creates_shell(_mock_settings) -> None:
    bootstrap.session_manager.st.session_state.clear()

    result = bootstrap.run_startup()

    assert result.status == "CONTINUE"
    assert result.planned_steps == ("init_session_state", "drain_timers:0")
    assert "shell" in bootstrap.session_manager.st.session_state


@patch("utils.session_manager.load_simulation_settings", return_value=SimulationSettings(navigation_delay=0.0))
def test_run_startup_drains_due_timers(_mock_settings) -> None:
    bootstrap.session_manager.st.session_state.clear()
    shell = bootstrap.session_manager.get_shell()
    shell.navigate("events")

    result = bootstrap.run_startup()

    assert result.planned_steps[-1] == "drain_timers:1"
    assert shell.current_screen == "events"


def test_run_startup_init_happens_before_drain() -> None:
    order = []
    with patch(
        "use_cases.bootstrap.session_manager.init_session_state",
        side_effect=lambda: order.append("init_session_state"),
    ), patch(
        "use_cases.bootstrap.session_manager.drain_timers",
        side_effect=lambda: order.append("drain_timers") or 0,
    ):
        result = bootstrap.run_startup()

    assert result.status == "CONTINUE"
    assert order == ["init_session_state", "drain_timers"]
