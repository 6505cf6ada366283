import pytest

from saral_backend import database
from saral_backend.database import (
    JsonFileBackend,
    MemoryBackend,
    MongoBackend,
    create_backend,
)
from saral_backend.errors import StorageUnavailableError
from pymongo.errors import ServerSelectionTimeoutError


def test_memory_backend():
    backend = MemoryBackend({"a": "1"})
    backend.set("b", "2")

    assert backend.get("a") == "1"
    assert backend.get("b") == "2"
    assert backend.get("c") is None


def test_json_file_backend_round_trip(tmp_path):
    path = tmp_path / "nested" / "storage.json"
    backend = JsonFileBackend(str(path))

    assert backend.get("loan_applications") is None
    backend.set("loan_applications", "[]")
    backend.set("current_user", '{"id": "u1"}')

    reopened = JsonFileBackend(str(path))
    assert reopened.get("loan_applications") == "[]"
    assert reopened.get("current_user") == '{"id": "u1"}'
    assert not (tmp_path / "nested" / "storage.json.tmp").exists()


def test_json_file_backend_rejects_corrupt_file(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("not json", encoding="utf-8")

    with pytest.raises(StorageUnavailableError):
        JsonFileBackend(str(path)).get("loan_applications")


def test_json_file_backend_rejects_non_object(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(StorageUnavailableError):
        JsonFileBackend(str(path)).set("k", "v")


class _FakeCollection:
    def __init__(self, fail=False):
        self.docs = {}
        self.fail = fail

    def find_one(self, query, projection=None):
        if self.fail:
            raise ServerSelectionTimeoutError("no server")
        value = self.docs.get(query["key"])
        return None if value is None else {"key": query["key"], "value": value}

    def update_one(self, query, update, upsert=False):
        if self.fail:
            raise ServerSelectionTimeoutError("no server")
        self.docs[query["key"]] = update["$set"]["value"]


def test_mongo_backend_uses_key_documents():
    collection = _FakeCollection()
    backend = MongoBackend(collection)

    backend.set("current_user", '{"id": "u1"}')

    assert collection.docs == {"current_user": '{"id": "u1"}'}
    assert backend.get("current_user") == '{"id": "u1"}'
    assert backend.get("loan_applications") is None


def test_mongo_backend_errors_become_storage_unavailable():
    backend = MongoBackend(_FakeCollection(fail=True))

    with pytest.raises(StorageUnavailableError):
        backend.get("current_user")
    with pytest.raises(StorageUnavailableError):
        backend.set("current_user", "{}")


def test_create_backend_kinds(tmp_path):
    path = str(tmp_path / "storage.json")

    assert isinstance(create_backend("memory", path), MemoryBackend)
    file_backend = create_backend("FILE", path)
    assert isinstance(file_backend, JsonFileBackend)
    assert file_backend.path == path

    with pytest.raises(ValueError):
        create_backend("redis", path)


def test_create_backend_falls_back_to_file_without_mongo(tmp_path, monkeypatch):
    monkeypatch.setattr(database, "get_mongo_collection", lambda: None)

    backend = create_backend("mongo", str(tmp_path / "storage.json"))

    assert isinstance(backend, JsonFileBackend)


def test_create_backend_uses_mongo_collection(tmp_path, monkeypatch):
    collection = _FakeCollection()
    monkeypatch.setattr(database, "get_mongo_collection", lambda: collection)

    backend = create_backend("mongo", str(tmp_path / "storage.json"))

    assert isinstance(backend, MongoBackend)
    assert backend.collection is collection
