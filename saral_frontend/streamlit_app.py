"""
Saral Loan - Streamlit Frontend

Mobile-first, bilingual loan application demo: onboarding, document checklist,
AI decision, chat assistant and admin dashboard.

Run with: streamlit run saral_frontend/streamlit_app.py
"""

import logging
import os
import sys

import streamlit as st

# Add project root to path for imports when run from a source checkout
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from saral_backend.config import LOG_LEVEL
from saral_frontend.chat import render_chat
from saral_frontend.dashboard import render_dashboard
from saral_frontend.decision import render_decision
from saral_frontend.documents import render_documents
from saral_frontend.onboarding import render_onboarding
from saral_frontend.session import init_session_state
from saral_frontend.ui import render_sidebar, setup_page

PAGE_RENDERERS = {
    "onboarding": render_onboarding,
    "documents": render_documents,
    "decision": render_decision,
    "chat": render_chat,
    "dashboard": render_dashboard,
}


def main():
    """Main application entry point."""
    logging.basicConfig(level=LOG_LEVEL)

    # Setup page configuration
    setup_page()

    # Initialize session state
    init_session_state()

    render_sidebar()

    # Render the appropriate page based on selection
    renderer = PAGE_RENDERERS.get(st.session_state.current_page, render_onboarding)
    renderer()


if __name__ == "__main__":
    main()
