"""
Rule-based risk scoring for loan applications.

Turns monthly income, the number of verified documents and the
loan-to-income ratio into an approval decision. The thresholds and score
deltas below are placeholder business rules, not validated underwriting
policy; they are kept exactly so decisions match the ones the web demo makes.
"""

import logging
import math
from datetime import datetime
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from saral_backend.errors import InvalidInputError
from saral_backend.models import AIDecision, LoanApplication, utcnow

logger = logging.getLogger(__name__)

BASE_RISK_SCORE = 50
APPROVAL_CUTOFF = 60

HIGH_INCOME = 50000
MODERATE_INCOME = 25000

ALL_DOCUMENTS_VERIFIED = 4
MOST_DOCUMENTS_VERIFIED = 2

HIGH_LOAN_TO_INCOME = 5
MODERATE_LOAN_TO_INCOME = 3

MIN_CONFIDENCE = 0.6
MAX_CONFIDENCE = 0.95

# Reasons containing these fragments are hidden from an approval explanation
NEGATIVE_REASON_MARKERS = ("Low", "High loan")


def _coerce_application(application: Union[LoanApplication, Mapping[str, Any]]) -> LoanApplication:
    if isinstance(application, LoanApplication):
        return application
    try:
        return LoanApplication.model_validate(application)
    except ValidationError as exc:
        raise InvalidInputError(f"Malformed application: {exc}") from exc


def loan_to_income_ratio(amount: int, monthly_income: int) -> float:
    """Loan amount over annual income; infinite when there is no income."""
    annual_income = monthly_income * 12
    if annual_income <= 0:
        return math.inf
    return amount / annual_income


def calculate_confidence(risk_score: int) -> float:
    """Confidence shrinks as the score moves away from 50, clamped to [0.6, 0.95]."""
    raw = (100 - abs(risk_score - BASE_RISK_SCORE)) / 100
    return max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, raw))


def filter_reasons(reasons, approved: bool):
    """Drop negative-sounding reasons from an approval explanation."""
    if not approved:
        return list(reasons)
    return [r for r in reasons if not any(marker in r for marker in NEGATIVE_REASON_MARKERS)]


def generate_ai_decision(
    application: Union[LoanApplication, Mapping[str, Any]],
    now: Optional[datetime] = None,
) -> AIDecision:
    """Score an application and return the decision record.

    Args:
        application: A LoanApplication, or a camelCase/snake_case mapping that
            validates as one
        now: Timestamp for the decision (defaults to the current time)

    Returns:
        AIDecision with approval flag, confidence, risk score and reasons

    Raises:
        InvalidInputError: If loan details are missing or amounts are out of range
    """
    app = _coerce_application(application)
    personal_info = app.personal_info
    loan_details = app.loan_details

    if loan_details is None:
        raise InvalidInputError(f"Application {app.id} has no loan details")
    if personal_info.monthly_income < 0:
        raise InvalidInputError("Monthly income cannot be negative")
    if loan_details.amount <= 0:
        raise InvalidInputError("Loan amount must be positive")

    risk_score = BASE_RISK_SCORE
    reasons = []

    # Income-based scoring
    income = personal_info.monthly_income
    if income >= HIGH_INCOME:
        risk_score -= 15
        reasons.append("High monthly income")
    elif income >= MODERATE_INCOME:
        risk_score -= 5
        reasons.append("Moderate monthly income")
    else:
        risk_score += 10
        reasons.append("Low monthly income")

    # Document verification
    verified_docs = app.verified_document_count
    if verified_docs >= ALL_DOCUMENTS_VERIFIED:
        risk_score -= 10
        reasons.append("All documents verified")
    elif verified_docs >= MOST_DOCUMENTS_VERIFIED:
        risk_score -= 5
        reasons.append("Most documents verified")
    else:
        risk_score += 15
        reasons.append("Insufficient document verification")

    # Loan amount vs income ratio
    ratio = loan_to_income_ratio(loan_details.amount, income)
    if ratio > HIGH_LOAN_TO_INCOME:
        risk_score += 20
        reasons.append("High loan-to-income ratio")
    elif ratio > MODERATE_LOAN_TO_INCOME:
        risk_score += 10
        reasons.append("Moderate loan-to-income ratio")
    else:
        risk_score -= 5
        reasons.append("Conservative loan amount")

    approved = risk_score < APPROVAL_CUTOFF
    decision = AIDecision(
        approved=approved,
        confidence=calculate_confidence(risk_score),
        reasons=filter_reasons(reasons, approved),
        risk_score=risk_score,
        created_at=now or utcnow(),
    )
    logger.debug("Scored application %s: risk=%s approved=%s", app.id, risk_score, approved)
    return decision
