# Backend package
# Contains the scoring engine, application store, workflow and FastAPI app

from saral_backend.scoring import generate_ai_decision
from saral_backend.store import ApplicationStore, get_store

__all__ = ["generate_ai_decision", "ApplicationStore", "get_store"]
