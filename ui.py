import html

import streamlit as st

from services.formatting import format_event_time, format_rupiah


def setup_style():
    st.markdown("""
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Plus+Jakarta+Sans:wght@400;600;700;800&display=swap');

        :root {
            --hg-bg: #0f0a1e;
            --hg-card: rgba(255, 255, 255, 0.05);
            --hg-card-strong: rgba(255, 255, 255, 0.09);
            --hg-border: rgba(255, 255, 255, 0.12);
            --hg-text: #f5f3ff;
            --hg-text-soft: rgba(237, 233, 254, 0.7);
            --hg-accent: #a855f7;
            --hg-accent-2: #ec4899;
            --hg-danger: #ef4444;
            --hg-warning: #f59e0b;
            --ease-fluid: cubic-bezier(0.22, 1, 0.36, 1);
            --anim-mid: 300ms;
        }

        html, body, .stApp {
            font-family: 'Plus Jakarta Sans', sans-serif;
            color: var(--hg-text);
            background:
                radial-gradient(50rem 26rem at 12% -8%, rgba(168, 85, 247, 0.28), transparent 65%),
                radial-gradient(44rem 22rem at 92% 4%, rgba(236, 72, 153, 0.18), transparent 62%),
                linear-gradient(180deg, #0f0a1e 0%, #130d26 55%, #0f0a1e 100%);
            background-attachment: fixed;
        }

        .main .block-container {
            padding-top: 1.2rem;
            padding-bottom: 2rem;
            animation: pageFadeIn var(--anim-mid) var(--ease-fluid);
        }

        @keyframes pageFadeIn {
            from { opacity: 0; transform: translate3d(0, 8px, 0); }
            to { opacity: 1; transform: none; }
        }

        .hg-brand {
            font-weight: 800;
            font-size: 1.6rem;
            letter-spacing: 0.02em;
            background: linear-gradient(90deg, var(--hg-accent), var(--hg-accent-2));
            -webkit-background-clip: text;
            -webkit-text-fill-color: transparent;
        }

        .hg-card {
            background: var(--hg-card);
            border: 1px solid var(--hg-border);
            border-radius: 18px;
            padding: 1rem 1.2rem;
            margin-bottom: 0.8rem;
        }
        .hg-card h4 { margin: 0 0 0.3rem 0; }
        .hg-card .hg-meta { color: var(--hg-text-soft); font-size: 0.9rem; }
        .hg-card .hg-price { font-weight: 700; color: var(--hg-accent); }

        .hg-badge {
            display: inline-block;
            padding: 0.1rem 0.6rem;
            border-radius: 999px;
            font-size: 0.75rem;
            font-weight: 700;
            background: var(--hg-card-strong);
            border: 1px solid var(--hg-border);
        }
        .hg-badge.sold-out { color: var(--hg-danger); }
        .hg-badge.almost-sold { color: var(--hg-warning); }

        .hg-footer {
            margin-top: 3rem;
            padding-top: 1rem;
            border-top: 1px solid var(--hg-border);
            color: var(--hg-text-soft);
            font-size: 0.85rem;
            text-align: center;
        }

        .hg-loading-overlay {
            position: fixed;
            inset: 0;
            z-index: 9999;
            display: flex;
            align-items: center;
            justify-content: center;
            background: rgba(15, 10, 30, 0.72);
            backdrop-filter: blur(6px);
        }
        .hg-loading-card {
            text-align: center;
            padding: 1.6rem 2.2rem;
            border-radius: 20px;
            background: var(--hg-card-strong);
            border: 1px solid var(--hg-border);
        }
        .hg-loading-orb {
            width: 42px;
            height: 42px;
            margin: 0 auto 0.8rem auto;
            border-radius: 50%;
            border: 3px solid rgba(255, 255, 255, 0.15);
            border-top-color: var(--hg-accent);
            animation: hgSpin 0.9s linear infinite;
        }
        .hg-loading-title { font-weight: 700; }
        .hg-loading-sub { color: var(--hg-text-soft); font-size: 0.9rem; }

        @keyframes hgSpin { to { transform: rotate(360deg); } }

        [data-testid="stForm"], [data-testid="stVerticalBlockBorderWrapper"] {
            border-radius: 18px !important;
        }

        .stButton > button, .stFormSubmitButton > button {
            border-radius: 12px !important;
            font-weight: 600 !important;
        }
    </style>
    """, unsafe_allow_html=True)


def show_loading_overlay(message="Memuat..."):
    st.markdown(
        f"""
        <div class="hg-loading-overlay">
          <div class="hg-loading-card">
            <div class="hg-loading-orb"></div>
            <div class="hg-loading-title">Hegira</div>
            <div class="hg-loading-sub">{html.escape(message)}</div>
          </div>
        </div>
        """,
        unsafe_allow_html=True
    )


def render_event_card(event):
    """Read-only summary card; the caller adds its own action buttons."""
    when = format_event_time(event.time_display, event.timezone)
    st.markdown(
        f"""
        <div class="hg-card">
          <span class="hg-badge">{html.escape(event.theme)}</span>
          <h4>{html.escape(event.name)}</h4>
          <div class="hg-meta">📅 {html.escape(event.date_display)} · 🕒 {html.escape(when)}</div>
          <div class="hg-meta">📍 {html.escape(event.location)}</div>
          <div class="hg-price">{html.escape(event.display_price)}</div>
        </div>
        """,
        unsafe_allow_html=True
    )


def render_ticket_line(category):
    badge = ""
    if category.availability_status == "sold-out":
        badge = '<span class="hg-badge sold-out">Habis</span>'
    elif category.availability_status == "almost-sold":
        badge = '<span class="hg-badge almost-sold">Hampir Habis</span>'
    st.markdown(
        f"**{html.escape(category.name)}** · {format_rupiah(category.price)} {badge}",
        unsafe_allow_html=True
    )
    if category.description:
        st.caption(category.description)


def render_footer():
    st.markdown(
        '<div class="hg-footer">© Hegira · Platform manajemen dan tiket event</div>',
        unsafe_allow_html=True
    )
