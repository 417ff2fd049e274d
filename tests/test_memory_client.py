import pytest

from momento_demo.domain.outcomes import AlreadyExists, Created, Error, Hit, Miss, Success
from momento_demo.infrastructure.memory_client import (
    NOT_FOUND_ERROR,
    TYPE_MISMATCH_ERROR,
    CacheEntry,
    InMemoryCacheClient,
)

pytestmark = [pytest.mark.unit]


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.mark.asyncio
class TestInMemoryCacheClient:
    """Test cases for the InMemoryCacheClient class."""

    def setup_method(self):
        self.clock = FakeClock()
        self.client = InMemoryCacheClient(default_ttl_seconds=600, clock=self.clock)

    async def test_create_cache_reports_created_then_already_exists(self):
        assert isinstance(await self.client.create_cache("c"), Created)
        assert isinstance(await self.client.create_cache("c"), AlreadyExists)
        assert self.client.stats()["caches"] == 1

    async def test_data_calls_on_unknown_cache_are_not_found(self):
        responses = [
            await self.client.set("c", "k", "v"),
            await self.client.get("c", "k"),
            await self.client.dictionary_set_fields("c", "d", {"a": "1"}),
            await self.client.dictionary_set_field("c", "d", "a", "1"),
            await self.client.dictionary_fetch("c", "d"),
            await self.client.dictionary_get_field("c", "d", "a"),
        ]
        for response in responses:
            assert isinstance(response, Error)
            assert response.error_code == NOT_FOUND_ERROR

    async def test_entries_expire_after_default_ttl(self):
        await self.client.create_cache("c")
        await self.client.set("c", "k", "v")

        self.clock.advance(600)
        assert await self.client.get("c", "k") == Hit("v")

        self.clock.advance(1)
        assert isinstance(await self.client.get("c", "k"), Miss)
        assert self.client.stats()["entries"] == 0

    async def test_set_field_refreshes_dictionary_ttl(self):
        await self.client.create_cache("c")
        await self.client.dictionary_set_fields("c", "d", {"a": "1"})

        self.clock.advance(500)
        await self.client.dictionary_set_field("c", "d", "b", "2")
        self.clock.advance(500)

        assert await self.client.dictionary_fetch("c", "d") == Hit({"a": "1", "b": "2"})

    async def test_set_fields_replaces_existing_dictionary(self):
        await self.client.create_cache("c")
        await self.client.dictionary_set_fields("c", "d", {"a": "1", "b": "2"})
        await self.client.dictionary_set_fields("c", "d", {"c": "3"})

        assert await self.client.dictionary_fetch("c", "d") == Hit({"c": "3"})

    async def test_set_field_creates_missing_dictionary(self):
        await self.client.create_cache("c")

        assert isinstance(await self.client.dictionary_set_field("c", "d", "a", "1"), Success)
        assert await self.client.dictionary_get_field("c", "d", "a") == Hit("1")

    async def test_fetched_dictionary_is_a_copy(self):
        await self.client.create_cache("c")
        await self.client.dictionary_set_fields("c", "d", {"a": "1"})

        fetched = await self.client.dictionary_fetch("c", "d")
        fetched.value["a"] = "changed"

        assert await self.client.dictionary_get_field("c", "d", "a") == Hit("1")

    async def test_type_mismatch_between_scalar_and_dictionary(self):
        await self.client.create_cache("c")
        await self.client.set("c", "s", "v")
        await self.client.dictionary_set_fields("c", "d", {"a": "1"})

        for response in (
            await self.client.get("c", "d"),
            await self.client.dictionary_fetch("c", "s"),
            await self.client.dictionary_get_field("c", "s", "a"),
            await self.client.dictionary_set_field("c", "s", "a", "1"),
        ):
            assert isinstance(response, Error)
            assert response.error_code == TYPE_MISMATCH_ERROR

    async def test_stats_count_hits_and_misses(self):
        await self.client.create_cache("c")
        await self.client.set("c", "k", "v")

        await self.client.get("c", "k")
        await self.client.get("c", "missing")
        await self.client.dictionary_get_field("c", "missing", "a")

        stats = self.client.stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 2


def test_rejects_non_positive_default_ttl():
    with pytest.raises(ValueError, match="default_ttl_seconds must be > 0"):
        InMemoryCacheClient(default_ttl_seconds=0)


def test_cache_entry_treats_non_positive_ttl_as_no_expiry():
    assert CacheEntry("v", ttl=0, created_at=0.0).ttl is None
    assert CacheEntry("v", ttl=5, created_at=0.0).ttl == 5
