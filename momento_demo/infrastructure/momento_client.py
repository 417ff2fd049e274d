from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, Callable, Mapping

from momento import CacheClientAsync, Configurations, CredentialProvider
from momento.responses import (
    CacheDelete,
    CacheDictionaryFetch,
    CacheDictionaryGetField,
    CacheDictionarySetField,
    CacheDictionarySetFields,
    CacheGet,
    CacheSet,
    CreateCache,
)

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
from momento_demo.infrastructure.config import Settings

logger = logging.getLogger(__name__)

CONFIGURATION_PROFILES: dict[str, Callable[[], Any]] = {
    "laptop": Configurations.Laptop.v1,
    "in_region": Configurations.InRegion.Default.v1,
    "low_latency": Configurations.InRegion.LowLatency.v1,
}


def _error(response: Any) -> Error:
    error_code = getattr(response, "error_code", None)
    code = getattr(error_code, "name", None) or str(error_code or "UNKNOWN_ERROR")
    return Error(code, getattr(response, "message", "") or "")


def _unexpected(response: Any) -> Error:
    return Error("UNEXPECTED_RESPONSE", f"unexpected response {type(response).__name__}")


def translate_create_cache(response: Any) -> CreateCacheOutcome:
    if isinstance(response, CreateCache.Success):
        return Created()
    if isinstance(response, CreateCache.CacheAlreadyExists):
        return AlreadyExists()
    if isinstance(response, CreateCache.Error):
        return _error(response)
    return _unexpected(response)


def translate_write(response: Any, success_type: type, error_type: type) -> WriteOutcome:
    if isinstance(response, success_type):
        return Success()
    if isinstance(response, error_type):
        return _error(response)
    return _unexpected(response)


def translate_read(
    response: Any,
    hit_type: type,
    miss_type: type,
    error_type: type,
    value_of: Callable[[Any], Any],
) -> ReadOutcome:
    if isinstance(response, hit_type):
        return Hit(value_of(response))
    if isinstance(response, miss_type):
        return Miss()
    if isinstance(response, error_type):
        return _error(response)
    return _unexpected(response)


class MomentoCacheClient:
    """Adapts ``momento.CacheClientAsync`` responses to outcome values."""

    def __init__(self, client: CacheClientAsync):
        self._client = client

    @classmethod
    async def connect(cls, settings: Settings) -> "MomentoCacheClient":
        configuration = CONFIGURATION_PROFILES[settings.configuration_profile]()
        credential_provider = CredentialProvider.from_environment_variable(
            settings.api_key_env_var
        )
        client = await CacheClientAsync.create(
            configuration,
            credential_provider,
            timedelta(seconds=settings.default_ttl_seconds),
        )
        logger.debug(
            "Momento client created (profile=%s, default_ttl=%ss)",
            settings.configuration_profile,
            settings.default_ttl_seconds,
        )
        return cls(client)

    async def create_cache(self, cache_name: str) -> CreateCacheOutcome:
        return translate_create_cache(await self._client.create_cache(cache_name))

    async def set(self, cache_name: str, key: str, value: str) -> WriteOutcome:
        response = await self._client.set(cache_name, key, value)
        return translate_write(response, CacheSet.Success, CacheSet.Error)

    async def get(self, cache_name: str, key: str) -> ReadOutcome[str]:
        response = await self._client.get(cache_name, key)
        return translate_read(
            response, CacheGet.Hit, CacheGet.Miss, CacheGet.Error,
            lambda hit: hit.value_string,
        )

    async def dictionary_set_fields(
        self, cache_name: str, dictionary_name: str, fields: Mapping[str, str]
    ) -> WriteOutcome:
        # the service merges fields; drop the old map so the write replaces it
        deleted = translate_write(
            await self._client.delete(cache_name, dictionary_name),
            CacheDelete.Success,
            CacheDelete.Error,
        )
        if isinstance(deleted, Error):
            return deleted

        response = await self._client.dictionary_set_fields(
            cache_name, dictionary_name, dict(fields)
        )
        return translate_write(
            response, CacheDictionarySetFields.Success, CacheDictionarySetFields.Error
        )

    async def dictionary_set_field(
        self, cache_name: str, dictionary_name: str, field: str, value: str
    ) -> WriteOutcome:
        response = await self._client.dictionary_set_field(
            cache_name, dictionary_name, field, value
        )
        return translate_write(
            response, CacheDictionarySetField.Success, CacheDictionarySetField.Error
        )

    async def dictionary_fetch(
        self, cache_name: str, dictionary_name: str
    ) -> ReadOutcome[dict[str, str]]:
        response = await self._client.dictionary_fetch(cache_name, dictionary_name)
        return translate_read(
            response,
            CacheDictionaryFetch.Hit,
            CacheDictionaryFetch.Miss,
            CacheDictionaryFetch.Error,
            lambda hit: dict(hit.value_dictionary_string_string),
        )

    async def dictionary_get_field(
        self, cache_name: str, dictionary_name: str, field: str
    ) -> ReadOutcome[str]:
        response = await self._client.dictionary_get_field(
            cache_name, dictionary_name, field
        )
        return translate_read(
            response,
            CacheDictionaryGetField.Hit,
            CacheDictionaryGetField.Miss,
            CacheDictionaryGetField.Error,
            lambda hit: hit.value_string,
        )
