import streamlit as st

from use_cases.auth_flow import CREATOR_LABEL
from use_cases.overlays import OtpModal
from use_cases.session_models import ROLE_LABELS
from use_cases.simulation import OTP_LENGTH
from use_cases.validation import name_label
from utils import session_manager

ROLE_DESCRIPTIONS = {
    "Event Visitor": "Temukan dan beli tiket event favorit Anda.",
    "Event Creator": "Buat, kelola, dan jual tiket event Anda sendiri.",
    "Organization": "Kelola event atas nama organisasi terverifikasi.",
}


def _field_error(errors, field):
    if errors.get(field):
        st.caption(f":red[{errors[field]}]")


def _close_button(shell, key):
    if st.button("✕ Tutup", key=key):
        shell.close_auth_flow()
        st.rerun()


def render_role_selection(shell):
    with st.container(border=True):
        st.subheader("Masuk sebagai")
        for label in ROLE_LABELS:
            col_text, col_btn = st.columns([4, 1])
            col_text.markdown(f"**{label}**  \n{ROLE_DESCRIPTIONS[label]}")
            if col_btn.button("Pilih", key=f"role_pick_{label}", use_container_width=True):
                shell.auth.select_role(label)
                st.rerun()
        _close_button(shell, "role_selection_close")


def _submitting_notice(shell):
    if shell.auth.submitting:
        st.info("⏳ Memproses, mohon tunggu...")


def render_login_form(shell, overlay):
    errors = shell.auth.context.field_errors if shell.auth.context else {}
    with st.container(border=True):
        st.subheader(f"Masuk · {overlay.role}")
        with st.form(session_manager.form_key("login_form")):
            email = st.text_input("Email")
            _field_error(errors, "email")
            password = st.text_input("Password", type="password")
            _field_error(errors, "password")
            submitted = st.form_submit_button("Masuk", type="primary", disabled=shell.auth.submitting)
        if submitted:
            shell.auth.submit_login(email, password)
            st.rerun()
        _submitting_notice(shell)

        if st.button("Belum punya akun? Daftar", key="login_to_signup"):
            shell.auth.switch_to_signup()
            st.rerun()
        _close_button(shell, "login_close")


def render_signup_form(shell, overlay):
    errors = shell.auth.context.field_errors if shell.auth.context else {}
    with st.container(border=True):
        st.subheader(f"Daftar · {overlay.role}")
        _render_signup_fields(shell, overlay.role, errors, session_manager.form_key("signup_form"))

        if st.button("Sudah punya akun? Masuk", key="signup_to_login"):
            shell.auth.switch_to_login()
            st.rerun()
        _close_button(shell, "signup_close")


def _render_signup_fields(shell, role_label, errors, key):
    with st.form(key):
        name = st.text_input(name_label(role_label))
        _field_error(errors, "name")
        email = st.text_input("Email")
        _field_error(errors, "email")
        password = st.text_input("Password", type="password")
        _field_error(errors, "password")
        confirm_password = st.text_input("Konfirmasi Password", type="password")
        _field_error(errors, "confirm_password")
        submitted = st.form_submit_button("Daftar", type="primary", disabled=shell.auth.submitting)
    if submitted:
        shell.auth.submit_signup(name, email, password, confirm_password)
        st.rerun()
    _submitting_notice(shell)


def render_otp(shell, overlay):
    """Inline modal for visitors, full page for every other role."""
    otp = shell.auth.otp
    inline = isinstance(overlay, OtpModal)
    with st.container(border=True):
        if inline:
            st.subheader("Verifikasi Email")
        else:
            st.markdown('<div class="hg-brand">Hegira</div>', unsafe_allow_html=True)
            st.title("Verifikasi Akun Anda")
        st.write(f"Kami telah mengirim {OTP_LENGTH} digit kode OTP ke **{overlay.email}**.")

        with st.form("otp_form", clear_on_submit=True):
            code = st.text_input("Kode OTP", max_chars=OTP_LENGTH, placeholder="••••••")
            submitted = st.form_submit_button("Verifikasi", type="primary", disabled=otp.verifying)
        if submitted:
            shell.auth.set_otp_code(code)
            shell.auth.verify_otp()
            st.rerun()

        if otp.verifying:
            st.info("⏳ Memverifikasi kode...")
        if otp.error:
            st.error(otp.error)

        col_resend, col_change = st.columns(2)
        remaining = shell.auth.cooldown_remaining()
        if otp.resending:
            col_resend.caption("Mengirim ulang kode...")
        elif remaining > 0:
            col_resend.caption(f"Kirim ulang kode dalam {remaining} detik")
        elif col_resend.button("Kirim ulang kode", key="otp_resend"):
            shell.auth.resend_otp()
            st.rerun()
        if otp.sends:
            col_resend.caption(f"Kode baru telah dikirim ({otp.sends}x).")

        if col_change.button("Ganti email", key="otp_change_email"):
            shell.auth.change_email()
            st.rerun()
        _close_button(shell, "otp_close")


def render_creator_auth(shell):
    st.markdown('<div class="hg-brand">Hegira Creator</div>', unsafe_allow_html=True)
    st.title("Masuk atau Daftar sebagai Event Creator")
    errors = shell.auth.context.field_errors if shell.auth.context else {}

    tab_login, tab_signup = st.tabs(["Masuk", "Daftar"])
    with tab_login:
        with st.form(session_manager.form_key("creator_login_form")):
            email = st.text_input("Email")
            _field_error(errors, "email")
            password = st.text_input("Password", type="password")
            _field_error(errors, "password")
            submitted = st.form_submit_button("Masuk", type="primary", disabled=shell.auth.submitting)
        if submitted:
            shell.auth.submit_login(email, password)
            st.rerun()
        _submitting_notice(shell)
    with tab_signup:
        _render_signup_fields(shell, CREATOR_LABEL, errors, session_manager.form_key("creator_signup_form"))

    if st.button("← Kembali ke Beranda", key="creator_auth_back"):
        shell.close_auth_flow()
        st.rerun()
