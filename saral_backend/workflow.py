"""
Application workflow: the operations the screens perform on the store.

Onboarding creates the application, the checklist uploads documents, the
decision screen runs scoring, the chat screen appends messages and the admin
dashboard filters and summarizes. Every mutation is a full-record upsert.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from saral_backend.assistant import generate_bot_response, welcome_message
from saral_backend.errors import InvalidInputError
from saral_backend.models import (
    DOCUMENT_TYPES,
    REQUIRED_DOCUMENT_TYPES,
    ChatMessage,
    Document,
    Language,
    LoanApplication,
    LoanDetails,
    PersonalInfo,
    utcnow,
)
from saral_backend.scoring import generate_ai_decision
from saral_backend.session import SessionContext
from saral_backend.store import ApplicationStore
from saral_backend.translations import t
from saral_backend.verification import DocumentVerifier, simulate_verification

logger = logging.getLogger(__name__)

STATUS_FILTERS = ["all", "pending", "under_review", "approved", "rejected"]


def _parse(model, data: Union[Mapping[str, Any], Any]):
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise InvalidInputError(str(exc)) from exc


# ======================
# Onboarding
# ======================

def create_application(
    session: SessionContext,
    personal_info: Union[PersonalInfo, Mapping[str, Any]],
    loan_details: Union[LoanDetails, Mapping[str, Any]],
    language: Optional[Language] = None,
    now: Optional[datetime] = None,
) -> LoanApplication:
    """Create and save a pending application from the onboarding forms.

    Also copies the applicant's name and phone onto the current user.

    Raises:
        InvalidInputError: If name, phone, income, amount or purpose is missing
    """
    info = _parse(PersonalInfo, personal_info)
    details = _parse(LoanDetails, loan_details)
    if not info.name.strip() or not info.phone.strip():
        raise InvalidInputError("Name and phone are required")
    if not details.purpose.strip():
        raise InvalidInputError("Loan purpose is required")

    store = session.store
    lang = language or session.language
    user = session.current_user
    timestamp = now or utcnow()

    application = LoanApplication(
        id=store.generate_id(),
        user_id=user.id if user else "",
        status="pending",
        language=lang,
        personal_info=info,
        documents=[],
        loan_details=details,
        chat_history=[
            ChatMessage(
                id=store.generate_id(),
                message=t("chatWelcome", lang),
                sender="bot",
                timestamp=timestamp,
                language=lang,
            )
        ],
        created_at=timestamp,
        updated_at=timestamp,
    )
    store.save_application(application)
    session.update_profile(info.name, info.phone)
    logger.info("Created application %s for user %s", application.id, application.user_id)
    return application


# ======================
# Documents
# ======================

def upload_document(
    store: ApplicationStore,
    application_id: str,
    doc_type: str,
    file_name: str,
    verifier: DocumentVerifier = simulate_verification,
    now: Optional[datetime] = None,
) -> Optional[LoanApplication]:
    """Attach a document, replacing any earlier upload of the same type.

    Returns:
        The updated application, or None if the id is unknown
    """
    if doc_type not in DOCUMENT_TYPES:
        raise InvalidInputError(f"Unknown document type: {doc_type}")

    application = store.get_application(application_id)
    if application is None:
        return None

    document = Document(
        id=store.generate_id(),
        type=doc_type,
        name=file_name,
        uploaded_at=now or utcnow(),
        verified=verifier(),
    )
    documents = [d for d in application.documents if d.type != doc_type] + [document]
    updated = store.save_application(application.model_copy(update={"documents": documents}))
    logger.info(
        "Application %s: uploaded %s (verified=%s)", application_id, doc_type, document.verified
    )
    return updated


def missing_required_documents(application: LoanApplication) -> List[str]:
    uploaded = {doc.type for doc in application.documents}
    return [doc_type for doc_type in REQUIRED_DOCUMENT_TYPES if doc_type not in uploaded]


# ======================
# Decision
# ======================

def decide_application(
    store: ApplicationStore,
    application_id: str,
    now: Optional[datetime] = None,
) -> Optional[LoanApplication]:
    """Score the application once and persist the decision.

    An application that already has a decision is returned unchanged.

    Raises:
        InvalidInputError: If the application cannot be scored
    """
    application = store.get_application(application_id)
    if application is None:
        return None
    if application.ai_decision is not None:
        return application

    decision = generate_ai_decision(application, now=now)
    updated = store.save_application(
        application.model_copy(update={
            "ai_decision": decision,
            "status": "approved" if decision.approved else "rejected",
        })
    )
    logger.info(
        "Application %s %s (risk score %s)",
        application_id,
        updated.status,
        decision.risk_score,
    )
    return updated


# ======================
# Chat
# ======================

def ensure_welcome_message(store: ApplicationStore, application_id: str) -> Optional[LoanApplication]:
    """Seed an empty chat history with the assistant's greeting."""
    application = store.get_application(application_id)
    if application is None or application.chat_history:
        return application

    greeting = ChatMessage(
        id=store.generate_id(),
        message=welcome_message(application.language),
        sender="bot",
        language=application.language,
    )
    return store.save_application(application.model_copy(update={"chat_history": [greeting]}))


def send_chat_message(
    store: ApplicationStore,
    application_id: str,
    text: str,
    language: Optional[Language] = None,
) -> Optional[LoanApplication]:
    """Append the user's message and the assistant's reply.

    Returns:
        The updated application (last two chat entries are the new messages),
        or None if the id is unknown
    """
    if not text or not text.strip():
        raise InvalidInputError("Message is empty")

    application = store.get_application(application_id)
    if application is None:
        return None

    lang = language or application.language
    user_message = ChatMessage(
        id=store.generate_id(),
        message=text.strip(),
        sender="user",
        language=lang,
    )
    bot_message = ChatMessage(
        id=store.generate_id(),
        message=generate_bot_response(text, application, lang),
        sender="bot",
        language=lang,
    )
    history = application.chat_history + [user_message, bot_message]
    return store.save_application(application.model_copy(update={"chat_history": history}))


# ======================
# Admin
# ======================

def filter_applications(
    applications: List[LoanApplication],
    search: str = "",
    status: str = "all",
) -> List[LoanApplication]:
    """Filter by a name / phone / id search term and by status."""
    filtered = applications

    if search:
        term = search.lower()
        filtered = [
            app for app in filtered
            if term in app.personal_info.name.lower()
            or search in app.personal_info.phone
            or term in app.id.lower()
        ]

    if status != "all":
        filtered = [app for app in filtered if app.status == status]

    return filtered


def application_stats(applications: List[LoanApplication]) -> Dict[str, int]:
    """Headline numbers for the admin dashboard."""
    if not applications:
        return {
            "total": 0,
            "approved": 0,
            "rejected": 0,
            "pending": 0,
            "under_review": 0,
            "total_amount": 0,
        }

    def count(status: str) -> int:
        return sum(1 for app in applications if app.status == status)

    return {
        "total": len(applications),
        "approved": count("approved"),
        "rejected": count("rejected"),
        "pending": count("pending"),
        "under_review": count("under_review"),
        "total_amount": sum(
            app.loan_details.amount
            for app in applications
            if app.status == "approved" and app.loan_details
        ),
    }
