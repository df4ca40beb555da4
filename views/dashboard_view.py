import dataclasses

import streamlit as st

from services import business_directory, event_catalog
from use_cases.domain_models import EventRecord
from use_cases.session_models import label_from_role

STATUSES = ("Draf", "Aktif", "Selesai")
CATEGORIES = ("B2C", "B2B", "B2G")
DASHBOARD_TITLES = {"creator": "Dashboard Kreator", "organization": "Dashboard Organisasi"}


def dashboard_title(role):
    return DASHBOARD_TITLES.get(role, "Hegira Dashboard")


def render_dashboard(shell):
    session = shell.session
    col_title, col_actions = st.columns([3, 2])
    with col_title:
        st.markdown(f'<div class="hg-brand">{dashboard_title(session.role)}</div>', unsafe_allow_html=True)
        st.title(session.display_name)
        st.caption(label_from_role(session.role))
    with col_actions:
        col_site, col_switch, col_logout = st.columns(3)
        if col_site.button("Lihat Situs", key="dash_site", use_container_width=True):
            shell.navigate("landing")
            st.rerun()
        if col_switch.button("Ganti Peran", key="dash_role_switch", use_container_width=True):
            shell.open_role_switch_modal()
            st.rerun()
        if col_logout.button("Logout", key="dash_logout", use_container_width=True):
            shell.logout()
            st.rerun()

    if session.role == "organization":
        _render_business_matching(shell)

    df = event_catalog.events_frame(shell.events)
    k1, k2, k3 = st.columns(3)
    k1.metric("Total Event", len(df))
    k2.metric("Aktif", int((df["Status"] == "Aktif").sum()) if not df.empty else 0)
    k3.metric("Draf", int((df["Status"] == "Draf").sum()) if not df.empty else 0)

    st.subheader("Event Saya")
    st.dataframe(df, hide_index=True, use_container_width=True)

    tab_edit, tab_new = st.tabs(["Ubah Event", "Event Baru"])
    with tab_edit:
        _render_edit_event(shell)
    with tab_new:
        _render_new_event(shell)


def _render_edit_event(shell):
    if not shell.events:
        st.info("Belum ada event.")
        return
    options = {event.id: event.name for event in shell.events}
    selected_id = st.selectbox("Pilih event", list(options), format_func=options.get, key="dash_edit_pick")
    event = event_catalog.find_event(shell.events, selected_id)
    if shell.event_being_edited is None or shell.event_being_edited.id != event.id:
        shell.set_event_for_editing(event)

    editing = shell.event_being_edited
    with st.form(f"dash_edit_{editing.id}"):
        name = st.text_input("Nama Event", value=editing.name)
        location = st.text_input("Lokasi", value=editing.location)
        status = st.selectbox("Status", STATUSES, index=STATUSES.index(editing.status))
        saved = st.form_submit_button("Simpan Perubahan", type="primary")
    if saved:
        shell.update_event(dataclasses.replace(editing, name=name.strip() or editing.name, location=location.strip(), status=status))
        st.toast("Event diperbarui.")
        st.rerun()


def _render_new_event(shell):
    with st.form("dash_new_event", clear_on_submit=True):
        name = st.text_input("Nama Event")
        category = st.selectbox("Kategori", CATEGORIES)
        theme = st.text_input("Tema")
        location = st.text_input("Lokasi")
        date_display = st.text_input("Tanggal", placeholder="2025/10/01")
        time_display = st.text_input("Waktu", placeholder="19:00 - 22:00")
        created = st.form_submit_button("Tambah Event", type="primary")
    if created:
        if not name.strip():
            st.error("Nama event tidak boleh kosong.")
            return
        next_id = max((event.id for event in shell.events), default=0) + 1
        shell.add_event(
            EventRecord(
                id=next_id,
                category=category,
                name=name.strip(),
                location=location.strip(),
                date_display=date_display.strip(),
                time_display=time_display.strip(),
                full_description="",
                display_price="Gratis",
                status="Draf",
                theme=theme.strip() or "Umum",
                address=location.strip(),
                timezone="WIB",
                organizer_name=shell.display_name,
            )
        )
        st.toast("Event ditambahkan sebagai draf.")
        st.rerun()


def _render_business_matching(shell):
    st.subheader("Business Matching")
    st.caption("Mitra yang dapat diajak berkolaborasi untuk event organisasi Anda.")
    cols = st.columns(2)
    for index, company in enumerate(business_directory.list_companies()):
        with cols[index % 2]:
            with st.container(border=True):
                st.markdown(f"**{company.name}**")
                st.caption(f"{company.sector} · {company.city}")
                if st.button("Lihat Profil", key=f"dash_match_{company.id}", use_container_width=True):
                    shell.navigate("businessDetail", company)
                    st.rerun()
