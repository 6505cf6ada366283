"""
Onboarding wizard: language picker, welcome screen, personal info and loan details.
Finishing the wizard creates a pending application and opens the document checklist.
"""

import streamlit as st

from saral_backend.errors import InvalidInputError
from saral_backend.models import LOAN_PURPOSES, LOAN_TENURES
from saral_backend.translations import t
from saral_backend.workflow import create_application
from saral_frontend.session import current_language, get_session, navigate
from saral_frontend.ui import render_header, render_language_toggle


def _go(step: str) -> None:
    st.session_state.onboarding_step = step
    st.rerun()


def render_language_step() -> None:
    st.markdown("## 🌐 भाषा चुनें / Select Language")
    col_hi, col_en = st.columns(2)
    with col_hi:
        if st.button("हिंदी", use_container_width=True, type="primary"):
            get_session().select_language("hi")
            _go("welcome")
    with col_en:
        if st.button("English", use_container_width=True, type="primary"):
            get_session().select_language("en")
            _go("welcome")


def render_welcome_step(lang: str) -> None:
    render_language_toggle(get_session().set_language, lang, key="welcome_lang")
    st.markdown(f"# {t('welcomeTitle', lang)}")
    st.caption(t("welcomeSubtitle", lang))
    st.markdown("")
    if st.button(t("startApplication", lang), use_container_width=True, type="primary"):
        _go("personal-info")


def render_personal_info_step(lang: str) -> None:
    render_header(t("personalInfo", lang))
    form = st.session_state.setdefault("onboarding_form", {})

    with st.form("personal_info_form"):
        name = st.text_input(t("name", lang), value=form.get("name", ""))
        phone = st.text_input(t("phone", lang), value=form.get("phone", ""), max_chars=10)
        email = st.text_input(t("email", lang), value=form.get("email", ""))
        address = st.text_area(t("address", lang), value=form.get("address", ""), height=80)
        occupation = st.text_input(t("occupation", lang), value=form.get("occupation", ""))
        monthly_income = st.number_input(
            f"{t('monthlyIncome', lang)} (₹)",
            min_value=0,
            step=1000,
            value=int(form.get("monthly_income", 0)),
        )
        submitted = st.form_submit_button(t("next", lang), use_container_width=True, type="primary")

    if submitted:
        form.update({
            "name": name.strip(),
            "phone": phone.strip(),
            "email": email.strip(),
            "address": address.strip(),
            "occupation": occupation.strip(),
            "monthly_income": int(monthly_income),
        })
        if not form["name"] or not form["phone"] or not form["monthly_income"]:
            st.warning(t("fillAllFields", lang))
        else:
            _go("loan-details")

    if st.button(t("back", lang)):
        _go("welcome")


def render_loan_details_step(lang: str) -> None:
    render_header(t("loanDetails", lang))
    form = st.session_state.setdefault("onboarding_form", {})

    with st.form("loan_details_form"):
        amount = st.number_input(
            f"{t('loanAmount', lang)} (₹)",
            min_value=0,
            step=5000,
            value=int(form.get("loan_amount", 0)),
        )
        purpose = st.selectbox(
            t("loanPurpose", lang),
            options=LOAN_PURPOSES,
            format_func=lambda p: t(f"purpose_{p}", lang),
        )
        tenure = st.selectbox(
            t("loanTenure", lang),
            options=LOAN_TENURES,
            index=LOAN_TENURES.index(12),
            format_func=lambda m: f"{m} {t('months', lang)}",
        )
        submitted = st.form_submit_button(t("submit", lang), use_container_width=True, type="primary")

    if submitted:
        form.update({"loan_amount": int(amount), "loan_purpose": purpose, "loan_tenure": int(tenure)})
        if not amount or not purpose:
            st.warning(t("fillAllFields", lang))
            return
        try:
            application = create_application(
                get_session(),
                personal_info={
                    "name": form["name"],
                    "phone": form["phone"],
                    "email": form.get("email") or None,
                    "address": form.get("address", ""),
                    "occupation": form.get("occupation", ""),
                    "monthly_income": form["monthly_income"],
                },
                loan_details={"amount": form["loan_amount"], "purpose": purpose, "tenure": form["loan_tenure"]},
                language=lang,
            )
        except InvalidInputError as e:
            st.error(f"{t('fillAllFields', lang)}: {e}")
            return
        st.session_state.pop("onboarding_form", None)
        st.session_state.onboarding_step = "welcome"
        navigate("documents", application.id)

    if st.button(t("back", lang)):
        _go("personal-info")


def render_onboarding() -> None:
    """Render the current onboarding step."""
    step = st.session_state.get("onboarding_step", "language")
    if step != "language" and get_session().current_user is None:
        step = "language"

    lang = current_language()
    if step == "language":
        render_language_step()
    elif step == "welcome":
        render_welcome_step(lang)
    elif step == "personal-info":
        render_personal_info_step(lang)
    else:
        render_loan_details_step(lang)
