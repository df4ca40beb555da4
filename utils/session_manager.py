import logging

import streamlit as st
import streamlit.components.v1 as components

from infrastructure.settings import load_simulation_settings
from services import event_catalog
from use_cases.app_shell import AppShell

"""
SESSION STATE CONTRACT

Streamlit keys owned by the app shell.

shell: AppShell
    navigation, overlays, session and flow state for this browser session
    default: fresh logged-out shell on the landing screen
    owner: session_manager

scroll_to_top: bool
    set when the current screen changed, consumed by the next render
    default: False
    owner: session_manager / app

form_keys: dict
    widget-key generations per form, bumped to clear a form's inputs
    default: {}
    owner: views
"""

log = logging.getLogger(__name__)

# Upper bound for one sleep while waiting on a simulated delay.
MAX_WAIT_SECONDS = 0.5


def init_session_state():
    if "shell" not in st.session_state:
        st.session_state.shell = create_shell()
        log.info("New browser session, shell created")
    if "scroll_to_top" not in st.session_state:
        st.session_state.scroll_to_top = False
    if "form_keys" not in st.session_state:
        st.session_state.form_keys = {}


def create_shell() -> AppShell:
    shell = AppShell(event_catalog.load_sample_events(), settings=load_simulation_settings())
    shell.add_screen_listener(_flag_scroll_to_top)
    return shell


def get_shell() -> AppShell:
    init_session_state()
    return st.session_state.shell


def _flag_scroll_to_top(previous, current):
    st.session_state.scroll_to_top = True


def form_key(form_name: str) -> str:
    generation = st.session_state.form_keys.get(form_name, 0)
    return f"{form_name}_{generation}"


def reset_form(form_name: str):
    """Drop a form's widget values by moving it to a fresh key generation."""
    st.session_state.form_keys[form_name] = st.session_state.form_keys.get(form_name, 0) + 1


def drain_timers() -> int:
    return get_shell().tick()


def seconds_until_next_timer():
    return get_shell().timers.next_due()


def scroll_to_top_if_needed():
    if st.session_state.get("scroll_to_top"):
        st.session_state.scroll_to_top = False
        components.html(
            """
            <script>
              try { window.parent.scrollTo(0, 0); } catch (e) { window.scrollTo(0, 0); }
            </script>
            """,
            height=0,
        )


def reset_session():
    """Throw away the shell, e.g. for a hard reload from the help screen."""
    for key in ("shell", "scroll_to_top", "form_keys"):
        if key in st.session_state:
            del st.session_state[key]
    init_session_state()
