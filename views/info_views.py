import streamlit as st

from services import business_directory
from use_cases.session_models import is_business_role
from utils import session_manager


def render_business(shell):
    st.title("Hegira untuk Bisnis")
    st.write("Kenali mitra penyelenggara yang sudah bekerja sama dengan Hegira.")
    for company in business_directory.list_companies():
        with st.container(border=True):
            st.subheader(company.name)
            st.caption(f"{company.sector} · {company.city}")
            st.write(company.description)
            if st.button("Lihat Profil", key=f"company_{company.id}"):
                shell.navigate("businessDetail", company)
                st.rerun()


def render_business_detail(shell):
    company = shell.selected_company
    if st.button("← Kembali ke Daftar Bisnis", key="company_back"):
        shell.navigate("business")
        st.rerun()
    st.title(company.name)
    st.caption(f"{company.sector} · {company.city}")
    st.write(company.description)
    if company.services:
        st.subheader("Layanan")
        for service in company.services:
            st.markdown(f"- {service}")
    if company.contact_email:
        st.markdown(f"📧 {company.contact_email}")


def render_help(shell):
    st.title("Pusat Bantuan")
    for question, answer in business_directory.FAQ:
        with st.expander(question):
            st.write(answer)

    st.divider()
    st.caption("Tampilan macet? Mulai ulang sesi Anda. Anda akan keluar dari akun.")
    if st.button("Mulai Ulang Sesi", key="help_reset_session"):
        session_manager.reset_session()
        st.rerun()


def render_articles(shell):
    st.title("Artikel")
    for article in business_directory.list_articles():
        with st.container(border=True):
            st.caption(article.category)
            st.subheader(article.title)
            st.write(article.summary)


def render_home(shell):
    st.title(f"Halo, {shell.display_name or 'Pengunjung'} 👋")
    st.write("Lanjutkan menjelajah event atau lihat tiket yang sudah Anda beli.")
    col_events, col_tickets = st.columns(2)
    if col_events.button("Jelajahi Event", key="home_events", use_container_width=True):
        shell.navigate("events")
        st.rerun()
    if shell.checkout.transaction is not None and col_tickets.button("Tiket Terakhir", key="home_ticket", use_container_width=True):
        shell.navigate("ticketDisplay")
        st.rerun()


def render_create_event_info(shell):
    st.title("Buat Event di Hegira")
    st.write(
        "Kelola penjualan tiket, data peserta, dan publikasi event Anda dari satu dashboard. "
        "Daftar sebagai Event Creator untuk memulai."
    )
    st.markdown("- Publikasi event dalam hitungan menit\n- Kategori tiket dan kuota fleksibel\n- Laporan penjualan real-time")

    if shell.is_logged_in and is_business_role(shell.session):
        if st.button("Buka Dashboard", key="create_event_dashboard", type="primary"):
            shell.navigate("dashboard")
            st.rerun()
    elif st.button("Mulai sebagai Event Creator", key="create_event_start", type="primary"):
        shell.navigate("creatorAuth")
        st.rerun()
