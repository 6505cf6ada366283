"""
Chat page for the rule-based loan assistant.
Messages are appended to the application's chat history in the store.
"""

import time
from typing import Iterable

import streamlit as st

from saral_backend.assistant import QUICK_REPLIES
from saral_backend.config import BOT_REPLY_DELAY_SECONDS
from saral_backend.errors import InvalidInputError
from saral_backend.translations import t
from saral_backend.workflow import ensure_welcome_message, send_chat_message
from saral_frontend.session import get_app_store, get_session, view_language
from saral_frontend.ui import render_header, render_language_toggle, render_not_found, status_badge


def render_chat_messages(messages: Iterable) -> None:
    """Replay chat history using Streamlit's chat components."""
    for message in messages:
        role = "user" if message.sender == "user" else "assistant"
        avatar = "👤" if role == "user" else "🤖"
        with st.chat_message(role, avatar=avatar):
            st.markdown(message.message.replace("\n", "  \n"))
            st.caption(message.timestamp.astimezone().strftime("%H:%M"))


def process_chat(application_id: str, text: str, lang: str) -> None:
    """Show the user's message, wait for the simulated typing delay, then store both."""
    with st.chat_message("user", avatar="👤"):
        st.markdown(text)
    with st.chat_message("assistant", avatar="🤖"):
        with st.spinner("..."):
            time.sleep(BOT_REPLY_DELAY_SECONDS)
            try:
                send_chat_message(get_app_store(), application_id, text, lang)
            except InvalidInputError:
                return
    st.rerun()


def render_chat() -> None:
    """Render the chat page for the active application."""
    store = get_app_store()
    application = ensure_welcome_message(store, st.session_state.get("application_id") or "")
    if application is None:
        render_not_found("hi")
        return

    lang = view_language(application)
    render_header(t("chatSupport", lang), back_page="decision")
    render_language_toggle(get_session().set_language, lang, key="chat_lang")

    st.markdown(
        f"**{application.personal_info.name}** &nbsp; {status_badge(application.status)}",
        unsafe_allow_html=True,
    )

    render_chat_messages(application.chat_history)

    quick_cols = st.columns(len(QUICK_REPLIES[lang]))
    quick_reply = None
    for col, reply in zip(quick_cols, QUICK_REPLIES[lang]):
        with col:
            if st.button(reply, key=f"quick_{reply}", use_container_width=True):
                quick_reply = reply

    user_input = st.chat_input(t("typeHere", lang)) or quick_reply
    if user_input:
        process_chat(application.id, user_input, lang)
