# recipe_nutrition/infrastructure/kv_stores.py
from __future__ import annotations

import logging
import os
import threading
from typing import Any, Dict

import ujson as json
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from recipe_nutrition.domain.repositories import KeyValueStore

log = logging.getLogger("infra.kv_store")


class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store. Values round-trip through JSON like the other backends."""

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Any | None:
        raw = self._data.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            log.warning("Corrupt value for key %s; ignoring", key)
            return None

    def set(self, key: str, value: Any) -> bool:
        try:
            self._data[key] = json.dumps(value)
            return True
        except (TypeError, OverflowError) as e:
            log.error("Error writing key %s: %s", key, e)
            return False

    def remove(self, key: str) -> bool:
        self._data.pop(key, None)
        return True


class JsonFileKeyValueStore(KeyValueStore):
    """
    All keys live in one JSON document on disk.
    Writes go to a temp file and are swapped in with os.replace.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        self._lock = threading.Lock()
        d = os.path.dirname(os.path.abspath(path))
        os.makedirs(d, exist_ok=True)

    def _load(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            log.warning("Unreadable store file %s (%s); starting empty", self.path, e)
            return {}
        if not isinstance(data, dict):
            log.warning("Store file %s is not an object; starting empty", self.path)
            return {}
        return data

    def get(self, key: str) -> Any | None:
        with self._lock:
            return self._load().get(key)

    def set(self, key: str, value: Any) -> bool:
        with self._lock:
            data = self._load()
            if value is None:
                data.pop(key, None)
            else:
                data[key] = value
            tmp = self.path + ".tmp"
            try:
                with open(tmp, "w", encoding="utf-8") as f:
                    json.dump(data, f, ensure_ascii=False)
                os.replace(tmp, self.path)
                return True
            except (OSError, TypeError, OverflowError) as e:
                log.error("Error writing %s to %s: %s", key, self.path, e)
                return False


class MongoKeyValueStore(KeyValueStore):
    """One document per key: {_id: key, value: ...}."""

    def __init__(self, col: Collection) -> None:
        self._col = col

    def get(self, key: str) -> Any | None:
        try:
            doc = self._col.find_one({"_id": key})
        except PyMongoError as e:
            log.error("Mongo read failed for %s: %s", key, e)
            return None
        if not doc:
            return None
        return doc.get("value")

    def set(self, key: str, value: Any) -> bool:
        try:
            self._col.replace_one({"_id": key}, {"_id": key, "value": value}, upsert=True)
            return True
        except PyMongoError as e:
            log.error("Mongo write failed for %s: %s", key, e)
            return False

    def remove(self, key: str) -> bool:
        try:
            self._col.delete_one({"_id": key})
            return True
        except PyMongoError as e:
            log.error("Mongo delete failed for %s: %s", key, e)
            return False
