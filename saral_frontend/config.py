"""
Configuration settings for the Streamlit frontend.
"""

# ======================
# UI Configuration
# ======================

PAGE_CONFIG = {
    "page_title": "Saral Loan 🏦",
    "page_icon": "🏦",
    "layout": "centered",
    "initial_sidebar_state": "collapsed",
}

# Theme colors (light theme, tuned for narrow mobile screens)
THEME_COLORS = {
    "bg_primary": "#f4f6ff",
    "bg_secondary": "#ffffff",
    "content_panel_bg": "#ffffff",
    "panel_border": "rgba(15, 23, 42, 0.08)",
    "panel_shadow": "0 25px 60px rgba(15, 23, 42, 0.08)",
    "text_primary": "#0f172a",
    "text_secondary": "#475569",
    "muted_text": "#6b7280",
    "accent": "#059669",
    "accent_hover": "#047857",
    "card_bg": "#f8fafc",
    "success": "#10b981",
    "danger": "#ef4444",
    "warning": "#f59e0b",
    "info": "#3b82f6",
    "user_msg_bg": "#059669",
    "bot_msg_bg": "#f3f4f6",
    "primary_button_bg": "linear-gradient(135deg, #059669 0%, #047857 100%)",
    "primary_button_text": "#ffffff",
    "primary_button_shadow": "0 4px 15px rgba(5, 150, 105, 0.35)",
}

# Badge colors per application status
STATUS_COLORS = {
    "approved": "#10b981",
    "rejected": "#ef4444",
    "pending": "#f59e0b",
    "under_review": "#3b82f6",
}

STATUS_ICONS = {
    "approved": "✅",
    "rejected": "❌",
    "pending": "🕒",
    "under_review": "📄",
}

DOCUMENT_ICONS = {
    "aadhar": "🪪",
    "pan": "💳",
    "salary_slip": "📄",
    "bank_statement": "🏦",
    "selfie": "🤳",
}


def get_custom_css() -> str:
    """Generate the app's custom CSS.

    Returns:
        CSS string for the mobile-width card layout
    """
    colors = THEME_COLORS
    background_gradient = (
        f"radial-gradient(circle at 15% 20%, {colors['bg_secondary']} 0%, "
        f"{colors['bg_primary']} 55%, {colors['bg_primary']} 100%)"
    )

    return f"""
    <style>
    /* ===== Base Styles ===== */
    html, body, [data-testid="stAppViewContainer"] {{
        margin: 0;
        padding: 0;
        min-height: 100vh;
        background: {background_gradient};
    }}

    .stApp {{
        background: transparent;
    }}

    [data-testid="stHeader"] {{
        background: transparent !important;
    }}

    /* ===== Mobile Container ===== */
    .block-container {{
        padding: 1.5rem 1.25rem 2rem 1.25rem;
        max-width: 480px;
        margin-left: auto;
        margin-right: auto;
        background: {colors['content_panel_bg']};
        border-radius: 24px;
        border: 1px solid {colors['panel_border']};
        box-shadow: {colors['panel_shadow']};
    }}

    /* ===== Header ===== */
    .app-header {{
        display: flex;
        align-items: center;
        justify-content: space-between;
        margin-bottom: 0.5rem;
    }}

    .app-header h2 {{
        margin: 0;
        font-size: 1.35rem;
        color: {colors['text_primary']};
    }}

    /* ===== Status Badge ===== */
    .status-badge {{
        display: inline-block;
        padding: 0.15rem 0.6rem;
        border-radius: 999px;
        font-size: 0.75rem;
        font-weight: 600;
        color: #ffffff;
    }}

    /* ===== Cards ===== */
    .summary-card {{
        background: {colors['card_bg']};
        border: 1px solid {colors['panel_border']};
        border-radius: 16px;
        padding: 1rem 1.25rem;
        margin-bottom: 0.75rem;
    }}

    .summary-card .label {{
        font-size: 0.8rem;
        color: {colors['muted_text']};
    }}

    .summary-card .value {{
        font-size: 1.05rem;
        font-weight: 600;
        color: {colors['text_primary']};
    }}

    .reason-row {{
        display: flex;
        align-items: flex-start;
        gap: 0.6rem;
        padding: 0.6rem 0.8rem;
        background: {colors['bot_msg_bg']};
        border-radius: 12px;
        margin-bottom: 0.4rem;
        font-size: 0.9rem;
    }}

    .reason-dot {{
        width: 0.5rem;
        height: 0.5rem;
        border-radius: 999px;
        margin-top: 0.4rem;
        flex-shrink: 0;
    }}

    /* ===== Buttons ===== */
    .stButton > button[kind="primary"] {{
        background: {colors['primary_button_bg']};
        color: {colors['primary_button_text']};
        border: none;
        box-shadow: {colors['primary_button_shadow']};
    }}

    .stButton > button[kind="primary"]:hover {{
        background: {colors['accent_hover']};
    }}

    /* ===== Chat ===== */
    [data-testid="stChatMessage"] {{
        animation: fadeIn 0.4s ease-out;
        border-radius: 16px;
    }}

    @keyframes fadeIn {{
        from {{
            opacity: 0;
            transform: translateY(12px);
        }}
        to {{
            opacity: 1;
            transform: translateY(0);
        }}
    }}

    /* ===== Loading Spinner ===== */
    .stSpinner > div {{
        border-top-color: {colors['accent']};
    }}
    </style>
    """
