"""
FastAPI application for the Saral Loan backend.
Provides REST endpoints for applications, documents, decisions, chat and the admin summary.
"""

import logging
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException

from saral_backend.config import LOG_LEVEL
from saral_backend.errors import InvalidInputError
from saral_backend.models import (
    DocumentType,
    Language,
    LoanDetails,
    PersonalInfo,
    RecordModel,
)
from saral_backend.session import SessionContext
from saral_backend.store import ApplicationStore, get_store
from saral_backend.verification import DocumentVerifier, simulate_verification
from saral_backend import workflow

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


class ApplicationCreate(RecordModel):
    """Payload collected by the onboarding wizard."""
    personal_info: PersonalInfo
    loan_details: LoanDetails
    language: Optional[Language] = None


class DocumentUpload(RecordModel):
    type: DocumentType
    name: str


class ChatRequest(RecordModel):
    message: str
    language: Optional[Language] = None


class UserUpdate(RecordModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    preferred_language: Optional[Language] = None


app = FastAPI(title="Saral Loan Backend")


def get_application_store() -> ApplicationStore:
    return get_store()


def get_document_verifier() -> DocumentVerifier:
    return simulate_verification


def _not_found() -> HTTPException:
    return HTTPException(404, "Application not found")


# ================
#   APPLICATIONS
# ================
@app.get(
    "/applications",
    description="Lists loan applications, optionally filtered by a name/phone/id search term and status."
)
def list_applications(
    search: str = "",
    status: str = "all",
    store: ApplicationStore = Depends(get_application_store),
):
    if status not in workflow.STATUS_FILTERS:
        raise HTTPException(422, f"Unknown status filter: {status}")
    apps = workflow.filter_applications(store.list_applications(), search, status)
    return [app_.to_record() for app_ in apps]


@app.get(
    "/applications/{application_id}",
    description="Returns one loan application with its documents, decision and chat history."
)
def get_application(application_id: str, store: ApplicationStore = Depends(get_application_store)):
    application = store.get_application(application_id)
    if application is None:
        raise _not_found()
    return application.to_record()


@app.post(
    "/applications",
    status_code=201,
    description="Creates a pending loan application for the current user from onboarding details."
)
def create_application(request: ApplicationCreate, store: ApplicationStore = Depends(get_application_store)):
    session = SessionContext(store)
    try:
        application = workflow.create_application(
            session, request.personal_info, request.loan_details, request.language
        )
    except InvalidInputError as exc:
        raise HTTPException(422, str(exc)) from exc
    return application.to_record()


# ================
#   DOCUMENTS
# ================
@app.post(
    "/applications/{application_id}/documents",
    description="Uploads a document (replacing any earlier one of the same type). Verification is simulated."
)
def upload_document(
    application_id: str,
    request: DocumentUpload,
    store: ApplicationStore = Depends(get_application_store),
    verifier: DocumentVerifier = Depends(get_document_verifier),
):
    application = workflow.upload_document(store, application_id, request.type, request.name, verifier)
    if application is None:
        raise _not_found()
    return {
        "application": application.to_record(),
        "document": application.document(request.type).to_record(),
        "missingRequired": workflow.missing_required_documents(application),
    }


# ================
#   DECISION
# ================
@app.post(
    "/applications/{application_id}/decision",
    description="Runs the risk scoring once and stores the approval decision on the application."
)
def decide(application_id: str, store: ApplicationStore = Depends(get_application_store)):
    try:
        application = workflow.decide_application(store, application_id)
    except InvalidInputError as exc:
        raise HTTPException(422, str(exc)) from exc
    if application is None:
        raise _not_found()
    return application.ai_decision.to_record()


# ================
#   CHAT
# ================
@app.post(
    "/applications/{application_id}/chat",
    description="Sends a chat message and returns it together with the assistant's reply."
)
def chat(application_id: str, request: ChatRequest, store: ApplicationStore = Depends(get_application_store)):
    try:
        application = workflow.send_chat_message(store, application_id, request.message, request.language)
    except InvalidInputError as exc:
        raise HTTPException(422, str(exc)) from exc
    if application is None:
        raise _not_found()
    return [message.to_record() for message in application.chat_history[-2:]]


# ================
#   ANALYTICS
# ================
@app.get("/analytics/summary", description="Counts by status and total approved amount across all applications")
def analytics_summary(store: ApplicationStore = Depends(get_application_store)):
    return workflow.application_stats(store.list_applications())


# ================
#   CURRENT USER
# ================
@app.get("/users/current", description="Returns the active user profile.")
def get_current_user(store: ApplicationStore = Depends(get_application_store)):
    user = store.get_current_user()
    if user is None:
        raise HTTPException(404, "No active user")
    return user.to_record()


@app.put("/users/current", description="Creates or updates the active user's name, phone and language.")
def update_current_user(request: UserUpdate, store: ApplicationStore = Depends(get_application_store)):
    session = SessionContext(store)
    if session.current_user is None:
        session.select_language(request.preferred_language or "hi")
    elif request.preferred_language:
        session.set_language(request.preferred_language)

    user = session.current_user
    if request.name is not None or request.phone is not None:
        user = session.update_profile(
            request.name if request.name is not None else (user.name or ""),
            request.phone if request.phone is not None else user.phone,
        )
    return user.to_record()
