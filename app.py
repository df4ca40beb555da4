import os
import time
from datetime import datetime, timezone

import sentry_sdk
import streamlit as st

from infrastructure.observability import setup_observability
setup_observability()

import ui
from use_cases import bootstrap
from utils import session_manager
from views import navbar_view, router

# --- PAGE SETTINGS ---
st.set_page_config(page_title="Hegira", page_icon="🎟️", layout="wide", initial_sidebar_state="collapsed")

# Health Check (Basic load-balancer heartbeat)
if st.query_params.get("health") == "1":
    st.write({"status": "ok", "version": "1.0", "uptime": datetime.now(timezone.utc).isoformat()})
    st.stop()

ui.setup_style()

# --- STARTUP ORCHESTRATION ---
startup_result = bootstrap.run_startup()
if startup_result.status == "STOP":
    st.stop()

shell = session_manager.get_shell()
snapshot = shell.snapshot()

if sentry_sdk.get_client().is_active():
    sentry_sdk.set_tag("app.screen", snapshot.screen)
    sentry_sdk.set_tag("app.role", snapshot.session.role or "anonymous")

session_manager.scroll_to_top_if_needed()

if os.getenv("DEBUG_NAV_TRACE", "0") == "1":
    st.write(f"🔍 DEBUG_NAV_TRACE: screen={snapshot.screen} overlay={type(snapshot.overlay).__name__} loading={snapshot.loading}")

# --- CHROME + CONTENT ---
if snapshot.show_navbar:
    navbar_view.render_navbar(shell)

if snapshot.overlay is not None:
    router.render_overlay(shell, snapshot.overlay)

if snapshot.show_loader:
    ui.show_loading_overlay(snapshot.loading_message)
elif not router.is_full_page_overlay(snapshot.overlay):
    router.render_screen(shell, snapshot.screen)

if snapshot.show_footer:
    ui.render_footer()

# --- SIMULATED DELAYS ---
# Keep rerunning while a delay is pending so its callback lands without user input.
wait = session_manager.seconds_until_next_timer()
if wait is not None:
    time.sleep(min(wait, session_manager.MAX_WAIT_SECONDS))
    st.rerun()
