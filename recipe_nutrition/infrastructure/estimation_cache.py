# recipe_nutrition/infrastructure/estimation_cache.py
from __future__ import annotations

import base64
import logging
import time
from typing import Any, Callable, Dict, List, Optional

import ujson as json

from recipe_nutrition.domain.entities import CacheEntry
from recipe_nutrition.domain.repositories import KeyValueStore

log = logging.getLogger("infra.estimation_cache")


class EstimationCache:
    """
    Versioned, optionally TTL- and count-bounded cache kept under one
    namespace key of a KeyValueStore.

    An entry is a miss when its version differs from ``version``, when it is
    older than ``ttl_s`` or when it is malformed. Beyond ``max_entries`` the
    oldest entries (by timestamp) are dropped on write.
    """

    def __init__(
        self,
        store: KeyValueStore,
        namespace: str,
        version: int,
        ttl_s: Optional[float] = None,
        max_entries: Optional[int] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.store = store
        self.namespace = namespace
        self.version = version
        self.ttl_s = ttl_s
        self.max_entries = max_entries
        self.clock = clock

    def _now_ms(self) -> int:
        return int(self.clock() * 1000)

    def _load(self) -> Dict[str, Any]:
        data = self.store.get(self.namespace)
        if data is None:
            return {}
        if not isinstance(data, dict):
            log.warning("Cache namespace %s is corrupt; resetting", self.namespace)
            return {}
        return data

    def _entry(self, key: str, raw: Any) -> Optional[CacheEntry]:
        if not isinstance(raw, dict) or "value" not in raw:
            return None
        try:
            return CacheEntry(
                key=key,
                value=raw["value"],
                version=int(raw.get("version", -1)),
                timestamp=int(raw.get("timestamp", 0)),
            )
        except (TypeError, ValueError):
            return None

    def get(self, fingerprint: str) -> Any | None:
        key = str(fingerprint)
        entry = self._entry(key, self._load().get(key))
        if entry is None:
            log.debug("cache miss %s:%s", self.namespace, key)
            return None
        if entry.version != self.version:
            log.debug("cache stale version %s:%s (v%d != v%d)", self.namespace, key, entry.version, self.version)
            return None
        if self.ttl_s is not None and (self._now_ms() - entry.timestamp) >= self.ttl_s * 1000:
            log.debug("cache expired %s:%s", self.namespace, key)
            return None
        log.debug("cache hit %s:%s", self.namespace, key)
        return entry.value

    def set(self, fingerprint: str, value: Any) -> bool:
        key = str(fingerprint)
        data = self._load()
        data[key] = CacheEntry(key=key, value=value, version=self.version, timestamp=self._now_ms()).to_dict()

        if self.max_entries is not None and len(data) > self.max_entries:
            def _ts(kv) -> int:
                raw = kv[1]
                try:
                    return int(raw.get("timestamp", 0)) if isinstance(raw, dict) else 0
                except (TypeError, ValueError):
                    return 0

            newest = sorted(data.items(), key=_ts, reverse=True)[: self.max_entries]
            data = dict(newest)

        return self.store.set(self.namespace, data)

    def clear(self) -> bool:
        return self.store.set(self.namespace, {})

    def __len__(self) -> int:
        return len(self._load())


def text_fingerprint(text: str) -> str:
    return (text or "").strip().lower()


def search_fingerprint(query: str, filters: Optional[Dict[str, Any]] = None) -> str:
    q = (query or "").strip().lower()
    f = json.dumps(filters or {}, sort_keys=True)
    return base64.b64encode(f"{q}_{f}".encode("utf-8")).decode("ascii")


class RecipeSearchCache:
    """Search results by normalized query + sorted filters."""

    def __init__(self, cache: EstimationCache) -> None:
        self.cache = cache

    def get(self, query: str, filters: Optional[Dict[str, Any]] = None) -> Optional[List[Dict[str, Any]]]:
        return self.cache.get(search_fingerprint(query, filters))

    def set(self, query: str, filters: Optional[Dict[str, Any]], recipes: List[Dict[str, Any]]) -> bool:
        return self.cache.set(search_fingerprint(query, filters), recipes)
