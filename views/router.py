import logging

import streamlit as st

from use_cases.overlays import (
    ConfirmationPrompt,
    LoginForm,
    OrgVerificationModal,
    OtpForm,
    OtpModal,
    RoleSelectionModal,
    RoleSwitchModal,
    SignupForm,
)
from views import auth_view, confirmation_view, dashboard_view, event_views, info_views, role_switch_view

log = logging.getLogger(__name__)

SCREEN_RENDERERS = {
    "landing": event_views.render_landing,
    "events": event_views.render_events,
    "eventDetail": event_views.render_event_detail,
    "checkout": event_views.render_checkout,
    "paymentLoading": event_views.render_payment_loading,
    "transactionSuccess": event_views.render_transaction_success,
    "ticketDisplay": event_views.render_ticket_display,
    "business": info_views.render_business,
    "businessDetail": info_views.render_business_detail,
    "help": info_views.render_help,
    "articlesPage": info_views.render_articles,
    "home": info_views.render_home,
    "createEventInfo": info_views.render_create_event_info,
    "creatorAuth": auth_view.render_creator_auth,
    "dashboard": dashboard_view.render_dashboard,
}

# Screens whose content lives in an overlay; the landing page is drawn underneath.
OVERLAY_BACKED_SCREENS = ("login", "signup", "otpInput")


def render_screen(shell, screen):
    renderer = SCREEN_RENDERERS.get(screen)
    if renderer is None:
        if screen not in OVERLAY_BACKED_SCREENS:
            log.warning(f"No renderer for screen {screen}, showing landing")
        renderer = event_views.render_landing
    renderer(shell)


def is_full_page_overlay(overlay):
    return isinstance(overlay, OtpForm)


def render_overlay(shell, overlay):
    if isinstance(overlay, RoleSelectionModal):
        auth_view.render_role_selection(shell)
    elif isinstance(overlay, LoginForm):
        auth_view.render_login_form(shell, overlay)
    elif isinstance(overlay, SignupForm):
        auth_view.render_signup_form(shell, overlay)
    elif isinstance(overlay, (OtpForm, OtpModal)):
        auth_view.render_otp(shell, overlay)
    elif isinstance(overlay, ConfirmationPrompt):
        confirmation_view.render_confirmation(shell, overlay)
    elif isinstance(overlay, RoleSwitchModal):
        role_switch_view.render_role_switch(shell, overlay)
    elif isinstance(overlay, OrgVerificationModal):
        role_switch_view.render_org_verification(shell)
    else:
        st.error(f"Unknown overlay: {type(overlay).__name__}")
