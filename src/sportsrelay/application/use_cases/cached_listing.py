"""Use case: serve a scraped listing from the TTL cache or refresh it."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import structlog

from sportsrelay.domain.entities import DataSource
from sportsrelay.domain.errors import SourceUnavailableError
from sportsrelay.domain.ports import DataSourcePort, ScrapeCachePort

log = structlog.get_logger(__name__)

PayloadShaper = Callable[[list[dict[str, Any]]], Any]


def football_payload(matches: list[dict[str, Any]]) -> dict[str, Any]:
    return {"success": True, "data": matches, "count": len(matches)}


def raw_payload(items: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return items


class CachedListingUseCase:
    """Shields a slow scraper behind the scrape cache.

    Fresh entries are returned verbatim without touching the lock.  A
    stale or missing entry triggers one refresh per source: concurrent
    callers queue on the per-source lock and re-check the cache once
    they get it.  A failed refresh raises ``SourceUnavailableError`` and
    leaves any previous entry in place.
    """

    def __init__(
        self,
        source: DataSourcePort,
        cache: ScrapeCachePort,
        shape: PayloadShaper = raw_payload,
    ) -> None:
        self._source = source
        self._cache = cache
        self._shape = shape
        self._refresh_lock = asyncio.Lock()

    @property
    def data_source(self) -> DataSource:
        return self._source.source

    def _fresh_payload(self) -> tuple[bool, Any]:
        entry = self._cache.get(self.data_source)
        if entry is not None and self._cache.is_fresh(entry):
            return True, entry.payload
        return False, None

    async def execute(self) -> Any:
        hit, payload = self._fresh_payload()
        if hit:
            log.debug("listing_cache_hit", source=self.data_source.value)
            return payload

        async with self._refresh_lock:
            # Another request may have refreshed while we waited
            hit, payload = self._fresh_payload()
            if hit:
                return payload

            log.info("listing_refresh", source=self.data_source.value)
            try:
                items = await self._source.fetch()
            except Exception as exc:
                log.error(
                    "listing_refresh_failed",
                    source=self.data_source.value,
                    exc_info=True,
                )
                raise SourceUnavailableError(self.data_source.value, str(exc)) from exc

            entry = self._cache.put(self.data_source, self._shape(items))
            log.info(
                "listing_refreshed",
                source=self.data_source.value,
                count=len(items),
            )
            return entry.payload
