from __future__ import annotations

import logging
from typing import Awaitable, Callable, Mapping

from momento_demo.domain.errors import ClientNotInitializedError
from momento_demo.domain.outcomes import (
    CreateCacheOutcome,
    Hit,
    ReadOutcome,
    WriteOutcome,
)

from .client_state import ClientState, Ready, Uninitialized
from .ports import CacheClientPort
from .timing import measure_processing_time

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], Awaitable[CacheClientPort]]


class CacheManager:
    """Sequences calls against a cache client and logs what comes back.

    The client is created once by :meth:`create_cache_client`; every other
    operation raises :class:`ClientNotInitializedError` before that.
    """

    def __init__(self, client_factory: ClientFactory):
        self._client_factory = client_factory
        self._state: ClientState = Uninitialized()

    @property
    def state(self) -> ClientState:
        return self._state

    def _require_client(self) -> CacheClientPort:
        if not isinstance(self._state, Ready):
            raise ClientNotInitializedError()
        return self._state.client

    @measure_processing_time
    async def create_cache_client(self) -> None:
        client = await self._client_factory()
        self._state = Ready(client)

    @measure_processing_time
    async def create_cache(self, cache_name: str) -> CreateCacheOutcome:
        client = self._require_client()

        response = await client.create_cache(cache_name)
        logger.info("create_cache: %s", response.kind)
        return response

    @measure_processing_time
    async def write_string(self, cache_name: str, key: str, value: str) -> WriteOutcome:
        client = self._require_client()

        response = await client.set(cache_name, key, value)
        logger.info("write_string: %s", response.kind)
        return response

    @measure_processing_time
    async def write_dictionary(
        self, cache_name: str, key: str, fields: Mapping[str, str]
    ) -> WriteOutcome:
        client = self._require_client()

        response = await client.dictionary_set_fields(cache_name, key, fields)
        logger.info("write_dictionary: %s", response.kind)
        return response

    @measure_processing_time
    async def write_dictionary_item(
        self, cache_name: str, key: str, field_name: str, field_value: str
    ) -> WriteOutcome:
        client = self._require_client()

        response = await client.dictionary_set_field(
            cache_name, key, field_name, field_value
        )
        logger.info("write_dictionary_item: %s", response.kind)
        return response

    @measure_processing_time
    async def read_from_cache(self, cache_name: str, key: str) -> ReadOutcome[str]:
        client = self._require_client()

        response = await client.get(cache_name, key)
        _log_read("read_from_cache", response)
        return response

    @measure_processing_time
    async def fetch_from_cache(
        self, cache_name: str, key: str
    ) -> ReadOutcome[dict[str, str]]:
        client = self._require_client()

        response = await client.dictionary_fetch(cache_name, key)
        _log_read("fetch_from_cache", response)
        return response

    @measure_processing_time
    async def get_dictionary_item(
        self, cache_name: str, key: str, field_name: str
    ) -> ReadOutcome[str]:
        client = self._require_client()

        response = await client.dictionary_get_field(cache_name, key, field_name)
        _log_read("get_dictionary_item", response)
        return response


def _log_read(operation: str, response: ReadOutcome) -> None:
    if isinstance(response, Hit):
        logger.info("%s: %r", operation, response.value)
    else:
        logger.info("%s: %s", operation, response.kind)
