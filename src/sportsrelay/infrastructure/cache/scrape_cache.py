"""In-memory scrape result cache - one slot per data source."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

import structlog

from sportsrelay.domain.entities import CachedResult, DataSource

log = structlog.get_logger(__name__)

DEFAULT_TTL_SECONDS = 60.0


class InMemoryScrapeCache:
    """Holds the most recent successful scrape per source.

    Entries are never evicted; a stale entry stays readable until a
    refresh replaces it.  ``put()`` swaps the slot in a single dict
    assignment, so readers never see a half-written entry.

    Args:
        ttl_seconds: Freshness window for ``is_fresh()``.
        clock: Epoch-seconds source (override in tests).
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if ttl_seconds < 0:
            raise ValueError("ttl_seconds must be >= 0")
        self._ttl = ttl_seconds
        self._clock = clock
        self._slots: dict[DataSource, CachedResult] = {}

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def get(self, source: DataSource) -> CachedResult | None:
        return self._slots.get(source)

    def put(self, source: DataSource, payload: Any) -> CachedResult:
        entry = CachedResult(source=source, payload=payload, fetched_at=self._clock())
        self._slots[source] = entry
        log.debug("scrape_cache_put", source=source.value, fetched_at=entry.fetched_at)
        return entry

    def is_fresh(self, entry: CachedResult) -> bool:
        return self._clock() - entry.fetched_at < self._ttl
