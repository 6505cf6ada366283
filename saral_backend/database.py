"""
Key-value storage backends for the application store.
Provides an in-memory map, a JSON file (the browser local-storage analogue)
and a MongoDB collection (PyMongo), all behind the same get/set interface.
"""

import json
import logging
import os
from typing import Dict, Optional

import pymongo
from pymongo.errors import PyMongoError

from saral_backend.config import (
    MONGO_COLLECTION,
    MONGO_DB_NAME,
    MONGO_URI,
    STORE_BACKEND,
    STORE_PATH,
)
from saral_backend.errors import StorageUnavailableError

logger = logging.getLogger(__name__)


class KeyValueBackend:
    """String key to string value storage used by ApplicationStore."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError


class MemoryBackend(KeyValueBackend):
    """Process-local storage; contents vanish with the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileBackend(KeyValueBackend):
    """All keys kept in one JSON object on disk."""

    def __init__(self, path: str):
        self.path = path

    def _read_all(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageUnavailableError(f"Cannot read {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise StorageUnavailableError(f"{self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        tmp_path = self.path + ".tmp"
        try:
            os.makedirs(os.path.dirname(os.path.abspath(self.path)), exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            raise StorageUnavailableError(f"Cannot write {self.path}: {exc}") from exc


class MongoBackend(KeyValueBackend):
    """Keys stored as {key, value} documents in a MongoDB collection."""

    def __init__(self, collection):
        self.collection = collection

    def get(self, key: str) -> Optional[str]:
        try:
            doc = self.collection.find_one({"key": key}, {"_id": 0})
        except PyMongoError as exc:
            raise StorageUnavailableError(f"MongoDB read failed: {exc}") from exc
        return doc.get("value") if doc else None

    def set(self, key: str, value: str) -> None:
        try:
            self.collection.update_one({"key": key}, {"$set": {"value": value}}, upsert=True)
        except PyMongoError as exc:
            raise StorageUnavailableError(f"MongoDB write failed: {exc}") from exc


# ======================
# Sync MongoDB (PyMongo)
# ======================

_mongo_client = None


def get_mongo_client():
    """Get sync MongoDB client (cached singleton).

    Returns:
        pymongo.MongoClient or None: MongoDB client if connection succeeds
    """
    global _mongo_client

    if _mongo_client is not None:
        return _mongo_client

    try:
        client = pymongo.MongoClient(MONGO_URI, serverSelectionTimeoutMS=2000)
        # Check connection
        client.server_info()
        _mongo_client = client
        return client
    except PyMongoError as e:
        logger.warning("MongoDB connection failed: %s", e)
        return None


def get_mongo_collection(collection_name: str = MONGO_COLLECTION):
    """Get a specific collection from the Saral Loan database.

    Args:
        collection_name: Name of the collection to retrieve

    Returns:
        Collection or None: The requested collection if client is available
    """
    client = get_mongo_client()
    if client:
        db = client[MONGO_DB_NAME]
        return db[collection_name]
    return None


def create_backend(kind: str = STORE_BACKEND, path: str = STORE_PATH) -> KeyValueBackend:
    """Build the configured backend.

    A "mongo" backend with no reachable server falls back to the JSON file.
    """
    kind = (kind or "file").lower()
    if kind == "memory":
        return MemoryBackend()
    if kind == "mongo":
        collection = get_mongo_collection()
        if collection is not None:
            return MongoBackend(collection)
        logger.warning("MongoDB not available, using JSON file storage at %s", path)
        return JsonFileBackend(path)
    if kind != "file":
        raise ValueError(f"Unknown store backend: {kind}")
    return JsonFileBackend(path)
