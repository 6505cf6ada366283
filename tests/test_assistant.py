import pytest

from saral_backend.assistant import (
    BOT_RESPONSES,
    QUICK_REPLIES,
    format_inr,
    generate_bot_response,
    welcome_message,
)
from saral_backend.models import LoanApplication


@pytest.fixture
def pending(application_record):
    return LoanApplication.model_validate(application_record(verified=3, unverified=1))


@pytest.fixture
def approved(application_record):
    return LoanApplication.model_validate(application_record(
        amount=150000,
        status="approved",
        aiDecision={"approved": True, "confidence": 0.7, "riskScore": 20, "reasons": []},
    ))


@pytest.mark.parametrize("amount, expected", [
    (0, "0"),
    (999, "999"),
    (1000, "1,000"),
    (100000, "1,00,000"),
    (2550000, "25,50,000"),
    (123456789, "12,34,56,789"),
])
def test_format_inr(amount, expected):
    assert format_inr(amount) == expected


def test_status_reply_for_approved_loan(approved):
    assert generate_bot_response("What's my status?", approved, "en") == (
        "Congratulations! Your loan has been approved. Amount: ₹1,50,000"
    )
    assert "₹1,50,000" in generate_bot_response("मेरी स्थिति क्या है?", approved, "hi")


def test_status_reply_for_pending_loan(pending):
    assert generate_bot_response("STATUS please", pending, "en") == BOT_RESPONSES["en"]["status"]


def test_status_reply_for_rejected_loan(application_record):
    rejected = LoanApplication.model_validate(application_record(
        status="rejected",
        aiDecision={"approved": False, "confidence": 0.6, "riskScore": 95, "reasons": []},
    ))
    assert "not approved" in generate_bot_response("status", rejected, "en")


def test_documents_reply_counts_verified(pending):
    assert generate_bot_response("How to upload documents?", pending, "en") == (
        "3/4 of your documents have been verified."
    )
    assert "3/4" in generate_bot_response("दस्तावेज", pending, "hi")


def test_help_and_thanks(pending):
    assert generate_bot_response("Need help", pending, "en") == BOT_RESPONSES["en"]["help"]
    assert generate_bot_response("मदद चाहिए", pending, "hi") == BOT_RESPONSES["hi"]["help"]
    assert generate_bot_response("Thank you", pending, "en") == BOT_RESPONSES["en"]["thanks"]
    assert generate_bot_response("धन्यवाद", pending, "hi") == BOT_RESPONSES["hi"]["thanks"]


def test_amount_reply(pending):
    assert generate_bot_response("how much loan did I ask for", pending, "en") == (
        "You have applied for ₹1,00,000 loan for personal."
    )


def test_status_keywords_win_over_later_rules(pending):
    reply = generate_bot_response("help me with my status", pending, "en")
    assert reply == BOT_RESPONSES["en"]["status"]


def test_unknown_message_gets_default(pending):
    assert generate_bot_response("what is the weather", pending, "en") == BOT_RESPONSES["en"]["default"]
    assert generate_bot_response("loan", None, "en") == BOT_RESPONSES["en"]["default"]


def test_quick_replies_trigger_matching_rules(pending):
    for lang in ("hi", "en"):
        replies = [generate_bot_response(q, pending, lang) for q in QUICK_REPLIES[lang]]
        assert BOT_RESPONSES[lang]["default"] not in replies


def test_welcome_message():
    assert welcome_message("en").startswith("Hello!")
    assert welcome_message("hi").startswith("नमस्ते")
