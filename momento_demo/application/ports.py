from __future__ import annotations

from typing import Mapping, Protocol

from momento_demo.domain.outcomes import CreateCacheOutcome, ReadOutcome, WriteOutcome


class CacheClientPort(Protocol):
    async def create_cache(self, cache_name: str) -> CreateCacheOutcome: ...

    async def set(self, cache_name: str, key: str, value: str) -> WriteOutcome: ...

    async def get(self, cache_name: str, key: str) -> ReadOutcome[str]: ...

    async def dictionary_set_fields(
        self, cache_name: str, dictionary_name: str, fields: Mapping[str, str]
    ) -> WriteOutcome: ...

    async def dictionary_set_field(
        self, cache_name: str, dictionary_name: str, field: str, value: str
    ) -> WriteOutcome: ...

    async def dictionary_fetch(
        self, cache_name: str, dictionary_name: str
    ) -> ReadOutcome[dict[str, str]]: ...

    async def dictionary_get_field(
        self, cache_name: str, dictionary_name: str, field: str
    ) -> ReadOutcome[str]: ...
