"""
Admin dashboard for the Saral Loan application.
Displays application statistics, status charts and a searchable application list.
"""

from typing import Dict, List, Literal, Optional

import plotly.graph_objects as go
import streamlit as st

from saral_backend.models import LoanApplication
from saral_backend.translations import t
from saral_backend.workflow import STATUS_FILTERS, application_stats, filter_applications
from saral_frontend.config import STATUS_COLORS, THEME_COLORS
from saral_frontend.session import get_app_store, navigate
from saral_frontend.ui import render_header, render_language_toggle, rupees, status_badge

STATUS_LABELS = {
    "all": {"hi": "सभी", "en": "All"},
    "pending": {"hi": "लंबित", "en": "Pending"},
    "under_review": {"hi": "समीक्षाधीन", "en": "Under Review"},
    "approved": {"hi": "अप्रूव्ड", "en": "Approved"},
    "rejected": {"hi": "अस्वीकृत", "en": "Rejected"},
}


def get_plotly_theme() -> Dict:
    """Get Plotly theme configuration matching the app's light theme."""
    return {
        "paper_bgcolor": "rgba(0,0,0,0)",
        "plot_bgcolor": "rgba(0,0,0,0)",
        "font": {
            "color": THEME_COLORS["text_primary"],
            "family": "system-ui, -apple-system, sans-serif"
        },
        "gridcolor": "rgba(5, 150, 105, 0.1)",
    }


def create_metric_card(label: str, value: str, delta: Optional[str] = None, delta_color: Literal["normal", "inverse", "off"] = "normal") -> None:
    """Create a styled metric card."""
    st.metric(label=label, value=value, delta=delta, delta_color=delta_color)


def render_kpi_section(stats: Dict, lang: str) -> None:
    """Render the headline counts and approved amount."""
    col1, col2 = st.columns(2)
    with col1:
        create_metric_card(t("totalApplications", lang), str(stats["total"]))
    with col2:
        create_metric_card(t("approvedApplications", lang), str(stats["approved"]))

    col3, col4 = st.columns(2)
    with col3:
        create_metric_card(t("rejectedApplications", lang), str(stats["rejected"]))
    with col4:
        create_metric_card(t("pendingReview", lang), str(stats["pending"] + stats["under_review"]))

    create_metric_card(t("totalDisbursed", lang), rupees(stats["total_amount"]))


def render_status_chart(stats: Dict, lang: str) -> None:
    """Render application status distribution donut chart."""
    theme = get_plotly_theme()

    statuses = [s for s in STATUS_FILTERS if s != "all" and stats.get(s)]
    if not statuses:
        st.info(t("noApplications", lang))
        return

    fig = go.Figure(data=[go.Pie(
        labels=[STATUS_LABELS[s][lang] for s in statuses],
        values=[stats[s] for s in statuses],
        hole=0.5,
        marker=dict(colors=[STATUS_COLORS[s] for s in statuses]),
        textinfo='label+percent',
        textposition='outside',
        textfont=dict(size=12, color=theme["font"]["color"]),
        hovertemplate='<b>%{label}</b><br>Count: %{value}<br>Percentage: %{percent}<extra></extra>'
    )])

    fig.update_layout(
        paper_bgcolor=theme["paper_bgcolor"],
        plot_bgcolor=theme["plot_bgcolor"],
        font=theme["font"],
        showlegend=False,
        margin=dict(t=20, b=40, l=20, r=20),
        height=300,
        annotations=[dict(
            text=f"<b>{stats['total']}</b><br>{t('totalApplications', lang)}",
            x=0.5, y=0.5,
            font=dict(size=14, color=theme["font"]["color"]),
            showarrow=False
        )]
    )

    st.plotly_chart(fig, use_container_width=True)


def render_amount_by_status_chart(applications: List[LoanApplication], lang: str) -> None:
    """Render requested amounts grouped by status."""
    theme = get_plotly_theme()

    status_amounts: Dict[str, int] = {}
    for app in applications:
        if app.loan_details:
            status_amounts[app.status] = status_amounts.get(app.status, 0) + app.loan_details.amount
    if not status_amounts:
        return

    statuses = list(status_amounts.keys())
    values = list(status_amounts.values())

    fig = go.Figure(data=[go.Bar(
        x=[STATUS_LABELS[s][lang] for s in statuses],
        y=values,
        marker=dict(color=[STATUS_COLORS.get(s, "#6b7280") for s in statuses]),
        text=[rupees(v) for v in values],
        textposition='outside',
        textfont=dict(size=12, color=theme["font"]["color"]),
        hovertemplate='<b>%{x}</b><br>Total Amount: ₹%{y:,.0f}<extra></extra>'
    )])

    fig.update_layout(
        paper_bgcolor=theme["paper_bgcolor"],
        plot_bgcolor=theme["plot_bgcolor"],
        font=theme["font"],
        xaxis=dict(showgrid=False),
        yaxis=dict(title=t("loanAmount", lang), gridcolor=theme["gridcolor"], showgrid=True),
        margin=dict(t=30, b=40, l=60, r=20),
        height=300,
        bargap=0.4,
    )

    st.plotly_chart(fig, use_container_width=True)


def render_application_row(app: LoanApplication, lang: str) -> None:
    amount = rupees(app.loan_details.amount) if app.loan_details else "—"
    with st.container(border=True):
        st.markdown(
            f"**{app.personal_info.name}** &nbsp; {status_badge(app.status)}<br/>"
            f"<small>#{app.id} · {app.personal_info.phone} · {amount}</small>",
            unsafe_allow_html=True,
        )
        col_info, col_view = st.columns([3, 1])
        with col_info:
            verified = app.verified_document_count
            caption = f"📄 {verified}/{len(app.documents)} · {app.created_at.astimezone():%d %b %Y}"
            if app.ai_decision:
                caption += f" · {t('riskScore', lang)} {app.ai_decision.risk_score}"
            st.caption(caption)
        with col_view:
            if st.button("👁", key=f"view_{app.id}", use_container_width=True):
                navigate("decision", app.id)


def render_dashboard() -> None:
    """Render the admin dashboard page."""
    lang = st.session_state.get("admin_language", "en")

    def set_admin_language(value: str) -> None:
        st.session_state.admin_language = value

    render_header(f"📊 {t('adminDashboard', lang)}", back_page="onboarding")
    render_language_toggle(set_admin_language, lang, key="admin_lang")

    applications = get_app_store().list_applications()
    stats = application_stats(applications)

    render_kpi_section(stats, lang)

    tab_status, tab_amount = st.tabs([
        t("statusBreakdown", lang),
        t("loanAmount", lang),
    ])
    with tab_status:
        render_status_chart(stats, lang)
    with tab_amount:
        render_amount_by_status_chart(applications, lang)

    search = st.text_input(t("search", lang), key="admin_search")
    status = st.selectbox(
        "Status",
        options=STATUS_FILTERS,
        format_func=lambda s: STATUS_LABELS[s][lang],
        key="admin_status",
        label_visibility="collapsed",
    )

    filtered = filter_applications(applications, search.strip(), status)
    if not filtered:
        st.info(t("noApplications", lang))
        return

    for app in reversed(filtered):
        render_application_row(app, lang)
