import streamlit as st

from use_cases.session_models import is_business_role, label_from_role

NAV_LINKS = (
    ("Beranda", "landing"),
    ("Event", "events"),
    ("Bisnis", "business"),
    ("Artikel", "articlesPage"),
    ("Bantuan", "help"),
)


def render_navbar(shell):
    session = shell.session
    cols = st.columns([2, 1, 1, 1, 1, 1, 3])
    cols[0].markdown('<div class="hg-brand">Hegira</div>', unsafe_allow_html=True)
    for col, (label, target) in zip(cols[1:6], NAV_LINKS):
        if col.button(label, key=f"nav_{target}", use_container_width=True, disabled=shell.current_screen == target):
            shell.navigate(target)
            st.rerun()

    with cols[6]:
        if not session.is_logged_in:
            col_create, col_login = st.columns(2)
            if col_create.button("Buat Event", key="nav_create_event", use_container_width=True):
                shell.navigate("createEventInfo")
                st.rerun()
            if col_login.button("Masuk", key="nav_login", type="primary", use_container_width=True):
                shell.open_auth_modal()
                st.rerun()
            return

        with st.popover(f"👤 {session.display_name}", use_container_width=True):
            st.caption(label_from_role(session.role))
            if is_business_role(session) and st.button("Dashboard", key="nav_dashboard", use_container_width=True):
                shell.navigate("dashboard")
                st.rerun()
            if session.role == "visitor" and st.button("Beranda Saya", key="nav_home", use_container_width=True):
                shell.navigate("home")
                st.rerun()
            if st.button("Ganti Peran", key="nav_role_switch", use_container_width=True):
                shell.open_role_switch_modal()
                st.rerun()
            if st.button("Logout", key="nav_logout", use_container_width=True):
                shell.logout()
                st.rerun()
