import json
import time

import pytest

from saral_backend.database import KeyValueBackend, MemoryBackend
from saral_backend.errors import StorageUnavailableError
from saral_backend.models import LoanApplication, User
from saral_backend.store import STORAGE_KEYS, ApplicationStore


class FailingBackend(KeyValueBackend):
    """Backend whose every call fails, like a locked-down browser storage."""

    def get(self, key):
        raise StorageUnavailableError("storage disabled")

    def set(self, key, value):
        raise StorageUnavailableError("storage disabled")


def _application(application_record, **kwargs):
    return LoanApplication.model_validate(application_record(**kwargs))


def test_empty_store(store):
    assert store.list_applications() == []
    assert store.get_application("missing") is None
    assert store.get_current_user() is None


def test_save_and_get(store, application_record):
    application = _application(application_record, app_id="abc123xyz")
    saved = store.save_application(application)

    assert saved == application
    assert store.get_application("abc123xyz") == application
    assert [a.id for a in store.list_applications()] == ["abc123xyz"]


def test_records_are_stored_with_camel_case_keys(store, backend, application_record):
    store.save_application(_application(application_record))

    records = json.loads(backend.get(STORAGE_KEYS["APPLICATIONS"]))
    assert records[0]["personalInfo"]["monthlyIncome"] == 60000
    assert "userId" in records[0]
    assert "personal_info" not in records[0]


def test_upsert_replaces_without_duplicates(store, application_record):
    first = _application(application_record, app_id="a1")
    second = _application(application_record, app_id="a2")
    store.save_application(first)
    store.save_application(second)

    changed = first.model_copy(update={"status": "under_review"})
    store.save_application(changed)

    applications = store.list_applications()
    assert [a.id for a in applications] == ["a1", "a2"]
    assert applications[0].status == "under_review"


def test_replace_refreshes_updated_at(store, application_record):
    application = _application(application_record)
    store.save_application(application)
    time.sleep(0.01)

    replaced = store.save_application(application)

    assert replaced.updated_at > application.updated_at
    assert store.get_application(application.id).updated_at == replaced.updated_at


def test_new_record_keeps_its_timestamps(store, application_record):
    application = _application(application_record)
    saved = store.save_application(application)
    assert saved.updated_at == application.updated_at


def test_unreadable_records_are_skipped_but_kept(store, backend, application_record):
    good = application_record(app_id="good")
    backend.set(STORAGE_KEYS["APPLICATIONS"], json.dumps([{"id": "broken"}, good]))

    assert [a.id for a in store.list_applications()] == ["good"]

    store.save_application(LoanApplication.model_validate(good))
    records = json.loads(backend.get(STORAGE_KEYS["APPLICATIONS"]))
    assert [r["id"] for r in records] == ["broken", "good"]


def test_corrupt_json_reads_as_empty(backend):
    backend.set(STORAGE_KEYS["APPLICATIONS"], "{not json")
    backend.set(STORAGE_KEYS["CURRENT_USER"], "[")
    store = ApplicationStore(backend)

    assert store.list_applications() == []
    assert store.get_current_user() is None


@pytest.mark.parametrize("backend", [None, FailingBackend()])
def test_unavailable_storage_degrades_quietly(backend, application_record):
    store = ApplicationStore(backend)
    application = _application(application_record)

    saved = store.save_application(application)
    store.set_current_user(User(id="u1"))

    assert saved == application
    assert store.list_applications() == []
    assert store.get_application(application.id) is None
    assert store.get_current_user() is None


def test_current_user_round_trip(store):
    user = User(id="u1", name="Asha", phone="9000000000", preferred_language="en")
    store.set_current_user(user)

    assert store.get_current_user() == user


def test_store_survives_a_new_instance(backend, application_record):
    ApplicationStore(backend).save_application(_application(application_record, app_id="persisted"))

    assert ApplicationStore(backend).get_application("persisted") is not None


def test_generate_id_is_unique(store):
    ids = {store.generate_id() for _ in range(500)}
    assert len(ids) == 500
    assert all(len(i) == 9 and i.isalnum() for i in ids)


class FlakyReadBackend(MemoryBackend):
    """Reads can be switched off while writes keep succeeding."""

    def __init__(self):
        super().__init__()
        self.reads_fail = False

    def get(self, key):
        if self.reads_fail:
            raise StorageUnavailableError("read timed out")
        return super().get(key)


def test_failed_read_does_not_overwrite_stored_applications(application_record):
    backend = FlakyReadBackend()
    store = ApplicationStore(backend)
    for i in range(3):
        store.save_application(_application(application_record, app_id=f"a{i}"))

    backend.reads_fail = True
    store.save_application(_application(application_record, app_id="new"))
    backend.reads_fail = False

    assert [a.id for a in store.list_applications()] == ["a0", "a1", "a2"]


def test_corrupt_applications_slot_is_not_overwritten(backend, application_record):
    backend.set(STORAGE_KEYS["APPLICATIONS"], "{not json")
    store = ApplicationStore(backend)

    store.save_application(_application(application_record))

    assert backend.get(STORAGE_KEYS["APPLICATIONS"]) == "{not json"


def test_storage_keys():
    assert set(STORAGE_KEYS.values()) == {"loan_applications", "current_user"}
