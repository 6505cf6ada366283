import pytest
from fastapi.testclient import TestClient

from saral_backend.app import app, get_application_store
from saral_backend.database import MemoryBackend
from saral_backend.session import SessionContext
from saral_backend.store import ApplicationStore


@pytest.fixture
def backend():
    return MemoryBackend()


@pytest.fixture
def store(backend):
    return ApplicationStore(backend)


@pytest.fixture
def session(store):
    return SessionContext(store)


@pytest.fixture
def client(store):
    # Override the store dependency with the in-memory one
    app.dependency_overrides[get_application_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def personal_info():
    return {
        "name": "Ravi Kumar",
        "phone": "9876543210",
        "email": "ravi@example.com",
        "address": "12 MG Road, Pune",
        "occupation": "Shopkeeper",
        "monthlyIncome": 60000,
    }


@pytest.fixture
def loan_details():
    return {"amount": 100000, "purpose": "education", "tenure": 12}


def make_application(
    monthly_income=60000,
    amount=100000,
    verified=4,
    unverified=0,
    app_id="app000001",
    **overrides,
):
    """Build a camelCase application record with the given document counts."""
    types = ["aadhar", "pan", "salary_slip", "bank_statement", "selfie"]
    documents = []
    for i in range(verified + unverified):
        documents.append({
            "id": f"doc{i}",
            "type": types[i % len(types)],
            "name": f"file{i}.jpg",
            "verified": i < verified,
        })
    record = {
        "id": app_id,
        "userId": "user00001",
        "status": "pending",
        "language": "en",
        "personalInfo": {"name": "Ravi Kumar", "phone": "9876543210", "monthlyIncome": monthly_income},
        "documents": documents,
        "loanDetails": {"amount": amount, "purpose": "personal", "tenure": 12},
        "chatHistory": [],
    }
    record.update(overrides)
    return record


@pytest.fixture
def application_record():
    return make_application
