"""
Document checklist page.
Each upload is held for a short simulated delay, then stored with a simulated
verification result. Re-uploading a type replaces the earlier file.
"""

import time

import streamlit as st

from saral_backend.config import UPLOAD_DELAY_SECONDS
from saral_backend.models import DOCUMENT_TYPES, REQUIRED_DOCUMENT_TYPES
from saral_backend.translations import document_label, t
from saral_backend.workflow import missing_required_documents, upload_document
from saral_frontend.config import DOCUMENT_ICONS
from saral_frontend.session import get_app_store, navigate, view_language
from saral_frontend.ui import render_header, render_not_found


def _render_document_row(application, doc_type: str, lang: str) -> None:
    doc = application.document(doc_type)
    label = document_label(doc_type, lang)
    required = doc_type in REQUIRED_DOCUMENT_TYPES

    with st.container(border=True):
        col_info, col_state = st.columns([3, 2])
        with col_info:
            st.markdown(f"**{DOCUMENT_ICONS[doc_type]} {label}**")
            st.caption(t("required", lang) if required else t("optional", lang))
        with col_state:
            if doc is None:
                st.caption("—")
            elif doc.verified:
                st.success(t("verified", lang), icon="✅")
            else:
                st.warning(t("verificationPending", lang), icon="⚠️")

        uploaded = st.file_uploader(
            label,
            type=["jpg", "jpeg", "png", "pdf"],
            key=f"upload_{application.id}_{doc_type}",
            label_visibility="collapsed",
        )
        if uploaded is not None and st.session_state.get(f"handled_{application.id}_{doc_type}") != uploaded.file_id:
            with st.spinner(t("uploading", lang)):
                time.sleep(UPLOAD_DELAY_SECONDS)
                upload_document(get_app_store(), application.id, doc_type, uploaded.name)
            st.session_state[f"handled_{application.id}_{doc_type}"] = uploaded.file_id
            st.rerun()


def render_documents() -> None:
    """Render the upload checklist for the active application."""
    store = get_app_store()
    application = store.get_application(st.session_state.get("application_id") or "")
    if application is None:
        render_not_found("hi")
        return

    lang = view_language(application)
    render_header(t("uploadDocuments", lang), back_page="onboarding")

    uploaded_count = sum(1 for doc_type in DOCUMENT_TYPES if application.document(doc_type))
    st.progress(uploaded_count / len(DOCUMENT_TYPES), text=f"{uploaded_count}/{len(DOCUMENT_TYPES)}")

    for doc_type in DOCUMENT_TYPES:
        _render_document_row(application, doc_type, lang)

    if st.button(t("getDecision", lang), use_container_width=True, type="primary"):
        if missing_required_documents(application):
            st.warning(t("uploadAllRequired", lang))
        else:
            navigate("decision")
