import streamlit as st

from use_cases.session_models import ROLE_LABELS, ROLES, label_from_role


def render_role_switch(shell, overlay):
    with st.container(border=True):
        st.subheader("Ganti Peran")
        current_index = ROLES.index(overlay.current_role) if overlay.current_role in ROLES else 0
        choice = st.radio("Pilih peran", ROLE_LABELS, index=current_index, key="role_switch_choice")
        if choice == "Organization":
            st.caption("Akses Organisasi memerlukan kode verifikasi.")

        col_cancel, col_apply = st.columns(2)
        if col_cancel.button("Batal", key="role_switch_cancel", use_container_width=True):
            shell.role_switch.close()
            st.rerun()
        if col_apply.button("Terapkan", key="role_switch_apply", type="primary", use_container_width=True):
            if choice == label_from_role(overlay.current_role):
                shell.role_switch.close()
            else:
                shell.role_switch.switch_role(choice)
            st.rerun()


def render_org_verification(shell):
    flow = shell.role_switch
    with st.container(border=True):
        st.subheader("Verifikasi Organisasi")
        st.write("Masukkan kode verifikasi organisasi yang diberikan oleh tim Hegira.")
        with st.form("org_verification_form"):
            code = st.text_input("Kode Verifikasi", value=flow.org_code)
            submitted = st.form_submit_button("Verifikasi", type="primary", disabled=flow.verifying)
        if submitted:
            flow.verify_organization(code.strip())
            st.rerun()

        if flow.verifying:
            st.info("⏳ Memverifikasi kode organisasi...")
        if flow.error:
            st.error(flow.error)

        if st.button("Batal", key="org_verification_cancel"):
            flow.close_verification()
            st.rerun()
