from __future__ import annotations

import time
from typing import Any, Callable, Dict, Mapping, Optional, Union

from momento_demo.domain.outcomes import (
    AlreadyExists,
    Created,
    CreateCacheOutcome,
    Error,
    Hit,
    Miss,
    ReadOutcome,
    Success,
    WriteOutcome,
)
from momento_demo.infrastructure.config import DEFAULT_TTL_SECONDS

NOT_FOUND_ERROR = "NOT_FOUND_ERROR"
TYPE_MISMATCH_ERROR = "TYPE_MISMATCH_ERROR"


class CacheEntry:
    def __init__(self, value: Union[str, Dict[str, str]], ttl: Optional[float], created_at: float):
        self.value = value
        self.ttl = None if ttl is not None and ttl <= 0 else ttl
        self.created_at = created_at


class InMemoryCacheClient:
    """In-process stand-in for the hosted cache.

    Entries expire ``default_ttl_seconds`` after their last write, measured
    with ``clock``. Expired entries are dropped lazily on read.
    """

    def __init__(
        self,
        default_ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Optional[Callable[[], float]] = None,
    ):
        if default_ttl_seconds <= 0:
            raise ValueError(f"default_ttl_seconds must be > 0, got {default_ttl_seconds}")
        self.default_ttl_seconds = default_ttl_seconds
        self.caches: Dict[str, Dict[str, CacheEntry]] = {}
        self.hits = 0
        self.misses = 0
        self._clock = clock or time.monotonic

    def _is_expired(self, entry: CacheEntry) -> bool:
        if entry.ttl is None:
            return False
        return (self._clock() - entry.created_at) > entry.ttl

    def _new_entry(self, value: Union[str, Dict[str, str]]) -> CacheEntry:
        return CacheEntry(value, self.default_ttl_seconds, created_at=self._clock())

    def _live_entry(self, store: Dict[str, CacheEntry], key: str) -> Optional[CacheEntry]:
        entry = store.get(key)
        if entry is not None and self._is_expired(entry):
            del store[key]
            return None
        return entry

    def _miss(self) -> Miss:
        self.misses += 1
        return Miss()

    def _hit(self, value: Any) -> Hit:
        self.hits += 1
        return Hit(value)

    async def create_cache(self, cache_name: str) -> CreateCacheOutcome:
        if cache_name in self.caches:
            return AlreadyExists()
        self.caches[cache_name] = {}
        return Created()

    async def set(self, cache_name: str, key: str, value: str) -> WriteOutcome:
        store = self.caches.get(cache_name)
        if store is None:
            return _cache_not_found(cache_name)
        store[key] = self._new_entry(value)
        return Success()

    async def get(self, cache_name: str, key: str) -> ReadOutcome[str]:
        store = self.caches.get(cache_name)
        if store is None:
            return _cache_not_found(cache_name)
        entry = self._live_entry(store, key)
        if entry is None:
            return self._miss()
        if not isinstance(entry.value, str):
            return _type_mismatch(key, "a dictionary")
        return self._hit(entry.value)

    async def dictionary_set_fields(
        self, cache_name: str, dictionary_name: str, fields: Mapping[str, str]
    ) -> WriteOutcome:
        store = self.caches.get(cache_name)
        if store is None:
            return _cache_not_found(cache_name)
        store[dictionary_name] = self._new_entry(dict(fields))
        return Success()

    async def dictionary_set_field(
        self, cache_name: str, dictionary_name: str, field: str, value: str
    ) -> WriteOutcome:
        store = self.caches.get(cache_name)
        if store is None:
            return _cache_not_found(cache_name)
        entry = self._live_entry(store, dictionary_name)
        if entry is None:
            fields: Dict[str, str] = {}
        elif isinstance(entry.value, dict):
            fields = entry.value
        else:
            return _type_mismatch(dictionary_name, "a string")
        fields[field] = value
        store[dictionary_name] = self._new_entry(fields)
        return Success()

    async def dictionary_fetch(
        self, cache_name: str, dictionary_name: str
    ) -> ReadOutcome[dict[str, str]]:
        store = self.caches.get(cache_name)
        if store is None:
            return _cache_not_found(cache_name)
        entry = self._live_entry(store, dictionary_name)
        if entry is None:
            return self._miss()
        if not isinstance(entry.value, dict):
            return _type_mismatch(dictionary_name, "a string")
        return self._hit(dict(entry.value))

    async def dictionary_get_field(
        self, cache_name: str, dictionary_name: str, field: str
    ) -> ReadOutcome[str]:
        store = self.caches.get(cache_name)
        if store is None:
            return _cache_not_found(cache_name)
        entry = self._live_entry(store, dictionary_name)
        if entry is None:
            return self._miss()
        if not isinstance(entry.value, dict):
            return _type_mismatch(dictionary_name, "a string")
        if field not in entry.value:
            return self._miss()
        return self._hit(entry.value[field])

    def stats(self) -> Dict[str, Any]:
        return {
            "caches": len(self.caches),
            "entries": sum(len(store) for store in self.caches.values()),
            "hits": self.hits,
            "misses": self.misses,
        }


def _cache_not_found(cache_name: str) -> Error:
    return Error(NOT_FOUND_ERROR, f"Cache not found: {cache_name}")


def _type_mismatch(key: str, held: str) -> Error:
    return Error(TYPE_MISMATCH_ERROR, f"Key {key!r} holds {held}")
