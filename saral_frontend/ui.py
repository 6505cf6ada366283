"""UI helpers for the Streamlit frontend."""

from __future__ import annotations

from typing import Callable, Literal, Optional

import streamlit as st

from saral_backend.assistant import format_inr
from saral_backend.database import JsonFileBackend, MemoryBackend, MongoBackend
from saral_backend.translations import t
from saral_frontend.config import PAGE_CONFIG, STATUS_COLORS, STATUS_ICONS, get_custom_css
from saral_frontend.session import end_session, get_app_store, get_session, navigate


def setup_page() -> None:
    """Apply Streamlit page config and custom CSS."""
    if not st.session_state.get("_page_configured"):
        layout_value = PAGE_CONFIG.get("layout", "centered")
        layout_literal: Literal["centered", "wide"] = "wide" if layout_value == "wide" else "centered"

        sidebar_value = PAGE_CONFIG.get("initial_sidebar_state", "collapsed")
        sidebar_literal: Literal["auto", "collapsed", "expanded"]
        if sidebar_value == "auto":
            sidebar_literal = "auto"
        elif sidebar_value == "expanded":
            sidebar_literal = "expanded"
        else:
            sidebar_literal = "collapsed"

        st.set_page_config(
            page_title=PAGE_CONFIG.get("page_title", "Saral Loan"),
            page_icon=PAGE_CONFIG.get("page_icon", "🏦"),
            layout=layout_literal,
            initial_sidebar_state=sidebar_literal,
        )
        st.session_state._page_configured = True

    st.markdown(get_custom_css(), unsafe_allow_html=True)


def _storage_label() -> str:
    backend = get_app_store().backend
    if isinstance(backend, MongoBackend):
        return "MongoDB"
    if isinstance(backend, JsonFileBackend):
        return f"Local file ({backend.path})"
    if isinstance(backend, MemoryBackend):
        return "In-memory (not persisted)"
    return "Unavailable"


def render_sidebar() -> None:
    """Render navigation and storage status."""
    app_id = st.session_state.get("application_id")
    with st.sidebar:
        st.markdown("### Navigation")
        if st.button("📝 Apply", use_container_width=True):
            navigate("onboarding")
        if app_id:
            if st.button("📂 Documents", use_container_width=True):
                navigate("documents")
            if st.button("🧠 Decision", use_container_width=True):
                navigate("decision")
            if st.button("💬 Chat", use_container_width=True):
                navigate("chat")
        if st.button("📊 Admin", use_container_width=True):
            navigate("dashboard")

        st.markdown("---")
        if get_app_store().backend is None:
            st.info("Storage not available", icon="ℹ️")
        else:
            st.caption(f"Storage: {_storage_label()}")

        user = get_session().current_user
        if user:
            st.caption(f"User: {user.name or user.id}")
        if st.button("↺ Start over", use_container_width=True):
            end_session()
            st.rerun()


def render_header(title: str, back_page: Optional[str] = None) -> None:
    """Page title with an optional back button."""
    col_back, col_title = st.columns([1, 5])
    with col_back:
        if back_page and st.button("←", key=f"back_{title}"):
            navigate(back_page)
    with col_title:
        st.markdown(f"<div class='app-header'><h2>{title}</h2></div>", unsafe_allow_html=True)


def render_language_toggle(on_select: Callable[[str], None], current: str, key: str) -> None:
    """Compact हिं / EN switch aligned to the right."""
    _, col_hi, col_en = st.columns([4, 1, 1])
    with col_hi:
        if st.button("हिं", key=f"{key}_hi", type="primary" if current == "hi" else "secondary"):
            on_select("hi")
            st.rerun()
    with col_en:
        if st.button("EN", key=f"{key}_en", type="primary" if current == "en" else "secondary"):
            on_select("en")
            st.rerun()


def status_badge(status: str) -> str:
    color = STATUS_COLORS.get(status, "#6b7280")
    icon = STATUS_ICONS.get(status, "🕒")
    return f"<span class='status-badge' style='background:{color}'>{icon} {status}</span>"


def rupees(amount: int) -> str:
    return f"₹{format_inr(amount)}"


def render_summary_card(label: str, value: str) -> None:
    st.markdown(
        f"<div class='summary-card'><div class='label'>{label}</div>"
        f"<div class='value'>{value}</div></div>",
        unsafe_allow_html=True,
    )


def render_not_found(language: str) -> None:
    st.warning(t("applicationNotFound", language))
    if st.button(t("startApplication", language), type="primary"):
        navigate("onboarding")
