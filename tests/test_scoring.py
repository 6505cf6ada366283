import math

import pytest

from saral_backend.errors import InvalidInputError
from saral_backend.models import LoanApplication
from saral_backend.scoring import (
    calculate_confidence,
    filter_reasons,
    generate_ai_decision,
    loan_to_income_ratio,
)


def test_strong_applicant_is_approved(application_record):
    decision = generate_ai_decision(application_record(monthly_income=60000, amount=100000, verified=4))

    assert decision.risk_score == 20
    assert decision.approved is True
    assert decision.confidence == pytest.approx(0.7)
    assert decision.reasons == [
        "High monthly income",
        "All documents verified",
        "Conservative loan amount",
    ]


def test_weak_applicant_is_rejected_with_all_reasons(application_record):
    decision = generate_ai_decision(application_record(monthly_income=10000, amount=1000000, verified=0))

    assert decision.risk_score == 95
    assert decision.approved is False
    assert decision.confidence == pytest.approx(0.6)
    assert decision.reasons == [
        "Low monthly income",
        "Insufficient document verification",
        "High loan-to-income ratio",
    ]


def test_moderate_tiers(application_record):
    # 30000/month -> 360000/year; 1200000 is a ratio of 3.33
    decision = generate_ai_decision(application_record(monthly_income=30000, amount=1200000, verified=2))

    assert decision.risk_score == 50
    assert decision.approved is True
    assert decision.reasons == [
        "Moderate monthly income",
        "Most documents verified",
        "Moderate loan-to-income ratio",
    ]


def test_tier_boundaries_are_inclusive_for_income_and_documents(application_record):
    high = generate_ai_decision(application_record(monthly_income=50000, amount=10000, verified=4))
    moderate = generate_ai_decision(application_record(monthly_income=25000, amount=10000, verified=2))

    assert "High monthly income" in high.reasons
    assert "Moderate monthly income" in moderate.reasons
    assert "Most documents verified" in moderate.reasons


def test_ratio_boundaries_are_exclusive(application_record):
    # Exactly 5x and 3x annual income fall into the next tier down
    at_five = generate_ai_decision(application_record(monthly_income=10000, amount=600000, verified=0))
    at_three = generate_ai_decision(application_record(monthly_income=10000, amount=360000, verified=0))

    assert "Moderate loan-to-income ratio" in at_five.reasons
    assert "Conservative loan amount" in at_three.reasons


def test_approval_hides_negative_reasons(application_record):
    # Low income (+10) offset by documents (-10) and a small loan (-5)
    decision = generate_ai_decision(application_record(monthly_income=10000, amount=100000, verified=4))

    assert decision.risk_score == 45
    assert decision.approved is True
    assert "Low monthly income" not in decision.reasons
    assert decision.reasons == ["All documents verified", "Conservative loan amount"]


def test_cutoff_at_sixty_is_rejection(application_record):
    # High income offset by no verified documents and a moderate loan-to-income ratio
    decision = generate_ai_decision(application_record(monthly_income=50000, amount=2000000, verified=0))
    assert decision.risk_score == 60
    assert decision.approved is False

    decision = generate_ai_decision(application_record(monthly_income=30000, amount=100000, verified=0))
    assert decision.risk_score == 55
    assert decision.approved is True


def test_zero_income_is_highest_ratio_tier(application_record):
    decision = generate_ai_decision(application_record(monthly_income=0, amount=50000, verified=4))

    assert "High loan-to-income ratio" in decision.reasons
    assert decision.risk_score == 50 + 10 - 10 + 20
    assert decision.approved is False


def test_only_verified_documents_count(application_record):
    decision = generate_ai_decision(application_record(verified=1, unverified=4))

    assert "Insufficient document verification" in decision.reasons
    assert decision.risk_score == 50 - 15 + 15 - 5


def test_scoring_is_deterministic(application_record):
    record = application_record(monthly_income=42000, amount=900000, verified=3)
    first = generate_ai_decision(record)
    second = generate_ai_decision(record)

    assert first.risk_score == second.risk_score
    assert first.approved == second.approved
    assert first.reasons == second.reasons
    assert first.confidence == second.confidence


def test_accepts_model_instances(application_record):
    application = LoanApplication.model_validate(application_record())
    assert generate_ai_decision(application).approved is True


def test_missing_loan_details_is_invalid_input(application_record):
    record = application_record()
    del record["loanDetails"]

    with pytest.raises(InvalidInputError):
        generate_ai_decision(record)


@pytest.mark.parametrize("overrides", [
    {"personalInfo": {"name": "x", "phone": "1", "monthlyIncome": -1}},
    {"loanDetails": {"amount": 0, "purpose": "personal", "tenure": 12}},
    {"loanDetails": {"amount": -500, "purpose": "personal", "tenure": 12}},
])
def test_out_of_range_amounts_are_invalid_input(application_record, overrides):
    with pytest.raises(InvalidInputError):
        generate_ai_decision(application_record(**overrides))


def test_invalid_input_is_a_value_error(application_record):
    record = application_record()
    record["loanDetails"] = None
    with pytest.raises(ValueError):
        generate_ai_decision(record)


@pytest.mark.parametrize("risk_score, expected", [
    (50, 0.95),
    (45, 0.95),
    (20, 0.7),
    (80, 0.7),
    (95, 0.6),
    (-10, 0.6),
])
def test_confidence_is_clamped(risk_score, expected):
    assert calculate_confidence(risk_score) == pytest.approx(expected)


def test_loan_to_income_ratio():
    assert loan_to_income_ratio(120000, 10000) == pytest.approx(1.0)
    assert math.isinf(loan_to_income_ratio(1, 0))


def test_filter_reasons_keeps_everything_on_rejection():
    reasons = ["Low monthly income", "High loan-to-income ratio"]
    assert filter_reasons(reasons, approved=False) == reasons
    assert filter_reasons(reasons, approved=True) == []
