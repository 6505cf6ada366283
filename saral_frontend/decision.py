"""
AI decision page.
Plays the processing / analyzing animation the first time, then shows the
stored decision with confidence, risk score and decision factors.
"""

import time

import streamlit as st

from saral_backend.config import DECISION_ANALYZING_SECONDS, DECISION_PROCESSING_SECONDS
from saral_backend.errors import InvalidInputError
from saral_backend.translations import t
from saral_backend.workflow import decide_application
from saral_frontend.config import THEME_COLORS
from saral_frontend.session import get_app_store, get_session, navigate, view_language
from saral_frontend.ui import (
    render_header,
    render_language_toggle,
    render_not_found,
    render_summary_card,
    rupees,
)


def _reason_color(reason: str) -> str:
    text = reason.lower()
    if "high" in text or "all" in text:
        return THEME_COLORS["success"]
    if "low" in text or "insufficient" in text:
        return THEME_COLORS["danger"]
    return THEME_COLORS["warning"]


def _run_decision(application_id: str, lang: str):
    """Show the simulated processing steps, then score and save."""
    progress = st.progress(20, text=t("processingApplication", lang))
    time.sleep(DECISION_PROCESSING_SECONDS)
    progress.progress(60, text=t("analyzingApplication", lang))
    time.sleep(DECISION_ANALYZING_SECONDS)
    application = decide_application(get_app_store(), application_id)
    progress.progress(100)
    return application


def render_decision_result(application, lang: str, just_decided: bool = False) -> None:
    decision = application.ai_decision
    details = application.loan_details

    if decision.approved:
        if just_decided:
            st.balloons()
        st.success(f"### 🎉 {t('congratulations', lang)}\n{t('loanApproved', lang)}")
    else:
        st.error(f"### {t('loanRejected', lang)}\n{t('loanRejectedMsg', lang)}")

    st.markdown(f"#### 🧠 {t('analysisReport', lang)}")

    st.markdown(f"**{t('confidenceScore', lang)}**: {round(decision.confidence * 100)}%")
    st.progress(decision.confidence)

    st.markdown(f"**{t('riskScore', lang)}**: {decision.risk_score}/100")
    st.progress(max(0, min(100, decision.risk_score)) / 100)

    st.markdown(f"**📈 {t('decisionFactors', lang)}**")
    for reason in decision.reasons:
        st.markdown(
            f"<div class='reason-row'><div class='reason-dot' style='background:{_reason_color(reason)}'></div>"
            f"<span>{reason}</span></div>",
            unsafe_allow_html=True,
        )

    st.markdown(f"#### 📄 {t('applicationSummary', lang)}")
    col1, col2 = st.columns(2)
    with col1:
        render_summary_card(t("applicant", lang), application.personal_info.name)
        if details:
            render_summary_card(t("loanAmount", lang), rupees(details.amount))
    with col2:
        render_summary_card(t("monthlyIncome", lang), rupees(application.personal_info.monthly_income))
        if details:
            render_summary_card(t("loanTenure", lang), f"{details.tenure} {t('months', lang)}")

    col_chat, col_admin = st.columns(2)
    with col_chat:
        if st.button(f"💬 {t('chatSupport', lang)}", use_container_width=True, type="primary"):
            navigate("chat")
    with col_admin:
        if st.button(f"📊 {t('adminDashboard', lang)}", use_container_width=True):
            navigate("dashboard")


def render_decision() -> None:
    """Render the decision page for the active application."""
    store = get_app_store()
    application = store.get_application(st.session_state.get("application_id") or "")
    if application is None:
        render_not_found("hi")
        return

    lang = view_language(application)
    render_header(t("analysisReport", lang), back_page="documents")
    render_language_toggle(get_session().set_language, lang, key="decision_lang")

    just_decided = application.ai_decision is None
    if just_decided:
        try:
            application = _run_decision(application.id, lang)
        except InvalidInputError as e:
            st.error(str(e))
            return
        if application is None:
            render_not_found(lang)
            return

    render_decision_result(application, lang, just_decided)
