import streamlit as st


def render_confirmation(shell, prompt):
    config = prompt.config
    with st.container(border=True):
        st.subheader(config.title)
        if config.tone == "danger":
            st.error(config.message)
        else:
            st.warning(config.message)

        col_cancel, col_confirm = st.columns(2)
        if col_cancel.button(config.cancel_label, key="confirm_cancel", use_container_width=True):
            shell.cancel_navigation()
            st.rerun()
        if col_confirm.button(config.confirm_label, key="confirm_ok", type="primary", use_container_width=True):
            shell.confirm_navigation()
            st.rerun()
