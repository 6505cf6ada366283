"""
Application store: keyed persistence for loan applications and the current user.

Records are JSON-serialized into a key-value backend. Writes are
last-writer-wins with no versioning, locking or merging; two writers saving
the same application will silently overwrite each other. That is acceptable
for a single-user, single-device session and is the known limitation of this
store.

When storage is missing or failing, reads return empty results and writes
become no-ops, so the app behaves like a first-time visit instead of crashing.
"""

import json
import logging
from typing import Any, List, Optional

from pydantic import ValidationError

from saral_backend.database import KeyValueBackend, create_backend
from saral_backend.errors import StorageUnavailableError
from saral_backend.ids import generate_id
from saral_backend.models import LoanApplication, User, utcnow

logger = logging.getLogger(__name__)

# Returned by _read when a slot exists but cannot be read
_UNREADABLE = object()

STORAGE_KEYS = {
    "APPLICATIONS": "loan_applications",
    "CURRENT_USER": "current_user",
}


class ApplicationStore:
    """get / list / upsert operations over a key-value backend.

    Attributes:
        backend: The storage medium, or None when no storage is available
    """

    def __init__(self, backend: Optional[KeyValueBackend]):
        self.backend = backend

    # ----- raw slot access -----

    def _read(self, key: str) -> Any:
        """Decoded slot value, None when never written, _UNREADABLE on failure."""
        if self.backend is None:
            return _UNREADABLE
        try:
            data = self.backend.get(key)
        except StorageUnavailableError as e:
            logger.warning("Storage unavailable while reading %s: %s", key, e)
            return _UNREADABLE
        if data is None:
            return None
        try:
            return json.loads(data)
        except json.JSONDecodeError as e:
            logger.warning("Ignoring corrupt data under %s: %s", key, e)
            return _UNREADABLE

    def _write(self, key: str, value: Any) -> None:
        if self.backend is None:
            return
        try:
            self.backend.set(key, json.dumps(value, ensure_ascii=False))
        except StorageUnavailableError as e:
            logger.warning("Storage unavailable while writing %s: %s", key, e)

    def _raw_applications(self) -> Optional[List[Any]]:
        """Stored application records, or None when the slot cannot be read."""
        data = self._read(STORAGE_KEYS["APPLICATIONS"])
        if data is None:
            return []
        if not isinstance(data, list):
            if data is not _UNREADABLE:
                logger.warning("Ignoring non-list data under %s", STORAGE_KEYS["APPLICATIONS"])
            return None
        return data

    # ----- public operations -----

    @staticmethod
    def generate_id() -> str:
        return generate_id()

    def list_applications(self) -> List[LoanApplication]:
        """All stored applications in insertion order."""
        applications = []
        for record in self._raw_applications() or []:
            try:
                applications.append(LoanApplication.model_validate(record))
            except ValidationError as e:
                record_id = record.get("id") if isinstance(record, dict) else None
                logger.warning("Skipping unreadable application record %s: %s", record_id, e)
        return applications

    def get_application(self, application_id: str) -> Optional[LoanApplication]:
        """Point lookup; None when the id is unknown."""
        for app in self.list_applications():
            if app.id == application_id:
                return app
        return None

    def save_application(self, application: LoanApplication) -> LoanApplication:
        """Insert or fully replace an application by id.

        A replaced record gets a fresh ``updated_at``; a new record is
        appended unchanged.

        Nothing is written when the existing records cannot be read, so a
        failed read never overwrites the stored list.

        Returns:
            The record as stored, or the given record unchanged when the
            write was skipped
        """
        records = self._raw_applications()
        if records is None:
            logger.warning("Not saving application %s: stored applications are unreadable", application.id)
            return application
        for index, record in enumerate(records):
            if isinstance(record, dict) and record.get("id") == application.id:
                stored = application.model_copy(update={"updated_at": utcnow()})
                records[index] = stored.to_record()
                break
        else:
            stored = application
            records.append(stored.to_record())

        self._write(STORAGE_KEYS["APPLICATIONS"], records)
        return stored

    def get_current_user(self) -> Optional[User]:
        data = self._read(STORAGE_KEYS["CURRENT_USER"])
        if not data or data is _UNREADABLE:
            return None
        try:
            return User.model_validate(data)
        except ValidationError as e:
            logger.warning("Ignoring unreadable current user record: %s", e)
            return None

    def set_current_user(self, user: User) -> None:
        self._write(STORAGE_KEYS["CURRENT_USER"], user.to_record())

    def clear_current_user(self) -> None:
        self._write(STORAGE_KEYS["CURRENT_USER"], None)


_store: Optional[ApplicationStore] = None


def get_store() -> ApplicationStore:
    """Process-wide store built from configuration (cached singleton)."""
    global _store

    if _store is None:
        _store = ApplicationStore(create_backend())
    return _store
