"""Scrape cache port - one result slot per data source."""

from __future__ import annotations

from typing import Any, Protocol

from sportsrelay.domain.entities import CachedResult, DataSource


class ScrapeCachePort(Protocol):
    """Port for the process-local scrape result cache.

    Implementations:
      - InMemoryScrapeCache (dict of slots, injectable clock)
    """

    @property
    def ttl_seconds(self) -> float: ...

    def get(self, source: DataSource) -> CachedResult | None:
        """Return the current entry for *source*, fresh or stale. None = never filled."""
        ...

    def put(self, source: DataSource, payload: Any) -> CachedResult:
        """Store *payload* stamped with the current time, replacing any prior entry."""
        ...

    def is_fresh(self, entry: CachedResult) -> bool:
        """True while the entry is younger than the TTL."""
        ...
