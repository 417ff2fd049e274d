from __future__ import annotations

import asyncio
import logging

from momento_demo.application.manager import CacheManager, ClientFactory
from momento_demo.infrastructure.config import Settings, load_settings
from momento_demo.infrastructure.logging import configure_logging
from momento_demo.infrastructure.memory_client import InMemoryCacheClient
from momento_demo.infrastructure.momento_client import MomentoCacheClient

logger = logging.getLogger(__name__)


def build_client_factory(settings: Settings) -> ClientFactory:
    if settings.backend == "memory":
        async def _memory_client() -> InMemoryCacheClient:
            return InMemoryCacheClient(default_ttl_seconds=settings.default_ttl_seconds)

        return _memory_client

    async def _momento_client() -> MomentoCacheClient:
        return await MomentoCacheClient.connect(settings)

    return _momento_client


def build_manager(settings: Settings) -> CacheManager:
    return CacheManager(build_client_factory(settings))


async def run_demo(manager: CacheManager, cache_name: str) -> None:
    await manager.create_cache_client()
    await manager.create_cache(cache_name)

    await manager.write_string(cache_name, "string-key", "hoge")
    await manager.read_from_cache(cache_name, "string-key")

    await manager.write_dictionary(
        cache_name,
        "dic-key",
        {"key1": "value1", "key2": "value2"},
    )
    await manager.write_dictionary_item(cache_name, "dic-key", "key3", "value3")

    # field order of the fetched dictionary is not guaranteed
    await manager.fetch_from_cache(cache_name, "dic-key")

    await manager.get_dictionary_item(cache_name, "dic-key", "key2")


def main() -> None:
    configure_logging("INFO")
    try:
        settings = load_settings()
        configure_logging(settings.log_level, settings.log_format)
        logger.info(
            "Running cache demo against %s backend (cache=%s)",
            settings.backend,
            settings.cache_name,
        )
        asyncio.run(run_demo(build_manager(settings), settings.cache_name))
    except Exception:
        logger.exception("Cache demo failed")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
