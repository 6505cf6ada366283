"""
Pydantic models for the Saral Loan application.
Defines data structures for users, loan applications, documents, decisions and chat.

Records are stored as JSON with camelCase keys (``userId``, ``personalInfo``,
``aiDecision`` ...) so they stay interchangeable with records written by the
browser version of the app. Use ``to_record()`` to get that shape.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


Language = Literal["hi", "en"]
ApplicationStatus = Literal["pending", "under_review", "approved", "rejected"]
DocumentType = Literal["aadhar", "pan", "salary_slip", "bank_statement", "selfie"]
Sender = Literal["user", "bot"]

DOCUMENT_TYPES: List[str] = ["aadhar", "pan", "salary_slip", "bank_statement", "selfie"]
REQUIRED_DOCUMENT_TYPES: List[str] = ["aadhar", "pan", "salary_slip", "selfie"]
LOAN_PURPOSES: List[str] = ["personal", "business", "education", "medical", "home"]
LOAN_TENURES: List[int] = [6, 12, 18, 24, 36]


def utcnow() -> datetime:
    """Current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class RecordModel(BaseModel):
    """Base model that reads and writes camelCase JSON records."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_record(self) -> Dict[str, Any]:
        """JSON-safe dict with camelCase keys, as persisted in the store."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class User(RecordModel):
    """Active user profile for a single device session."""
    id: str
    phone: str = ""
    name: Optional[str] = None
    preferred_language: Language = "hi"
    created_at: datetime = Field(default_factory=utcnow)


class PersonalInfo(RecordModel):
    """Applicant details captured by the onboarding wizard."""
    name: str
    phone: str
    email: Optional[str] = None
    address: str = ""
    occupation: str = ""
    monthly_income: int = Field(..., ge=0)


class LoanDetails(RecordModel):
    """Requested loan: amount in rupees, purpose category and tenure in months."""
    amount: int = Field(..., gt=0)
    purpose: str
    tenure: int = Field(12, gt=0)


class Document(RecordModel):
    """An uploaded KYC / income document."""
    id: str
    type: DocumentType
    name: str
    uploaded_at: datetime = Field(default_factory=utcnow)
    verified: bool = False


class AIDecision(RecordModel):
    """Outcome of the risk scoring run."""
    approved: bool
    confidence: float = Field(..., ge=0.6, le=0.95)
    reasons: List[str] = []
    risk_score: int
    created_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def _approval_follows_score(self):
        if self.approved != (self.risk_score < 60):
            raise ValueError("approved must be true exactly when riskScore < 60")
        return self


class ChatMessage(RecordModel):
    """One chat line between the applicant and the assistant."""
    id: str
    message: str
    sender: Sender
    timestamp: datetime = Field(default_factory=utcnow)
    language: Language = "hi"


class LoanApplication(RecordModel):
    """A single loan request and everything attached to it."""
    id: str
    user_id: str = ""
    status: ApplicationStatus = "pending"
    language: Language = "hi"
    personal_info: PersonalInfo
    documents: List[Document] = []
    loan_details: Optional[LoanDetails] = None
    ai_decision: Optional[AIDecision] = None
    chat_history: List[ChatMessage] = []
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def _status_matches_decision(self):
        if self.ai_decision is not None:
            expected = "approved" if self.ai_decision.approved else "rejected"
            if self.status != expected:
                raise ValueError(
                    f"status must be '{expected}' when aiDecision is present, got '{self.status}'"
                )
        return self

    def document(self, doc_type: str) -> Optional[Document]:
        """Return the retained document of the given type, if uploaded."""
        for doc in self.documents:
            if doc.type == doc_type:
                return doc
        return None

    @property
    def verified_document_count(self) -> int:
        return sum(1 for doc in self.documents if doc.verified)
