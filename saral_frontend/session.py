"""
Session state management for the Streamlit application.
Each browser session gets its own SessionContext over the shared store.
"""

import streamlit as st

from saral_backend.session import SessionContext
from saral_backend.store import ApplicationStore, get_store


def init_session_state():
    """Initialize all session state variables."""
    if "store" not in st.session_state:
        st.session_state.store = get_store()

    if "session" not in st.session_state:
        st.session_state.session = SessionContext(st.session_state.store)

    if "current_page" not in st.session_state:
        st.session_state.current_page = "onboarding"

    if "application_id" not in st.session_state:
        st.session_state.application_id = None

    if "onboarding_step" not in st.session_state:
        user = st.session_state.session.current_user
        st.session_state.onboarding_step = "welcome" if user else "language"

    if "admin_language" not in st.session_state:
        st.session_state.admin_language = "en"


def get_session() -> SessionContext:
    return st.session_state.session


def get_app_store() -> ApplicationStore:
    return st.session_state.store


def current_language() -> str:
    """The active user's language, Hindi by default."""
    return get_session().language


def navigate(page: str, application_id=None):
    """Switch page and optionally the application being viewed."""
    st.session_state.current_page = page
    if application_id is not None:
        st.session_state.application_id = application_id
    st.rerun()


def end_session():
    """Log the user out and start over from the language picker."""
    get_session().end()
    st.session_state.application_id = None
    st.session_state.onboarding_step = "language"
    st.session_state.current_page = "onboarding"


def view_language(application) -> str:
    """Language for an application screen: the user's choice, else the application's."""
    session = get_session()
    if session.current_user is not None:
        return session.language
    return application.language
