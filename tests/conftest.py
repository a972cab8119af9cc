"""Shared test fixtures for the sportsrelay test suite."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from sportsrelay.domain.entities import DataSource
from sportsrelay.infrastructure.cache import InMemoryScrapeCache

# ---------------------------------------------------------------------------
# Clock / cache fixtures
# ---------------------------------------------------------------------------


class FakeClock:
    """Manually advanced epoch clock."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def scrape_cache(clock: FakeClock) -> InMemoryScrapeCache:
    return InMemoryScrapeCache(ttl_seconds=60.0, clock=clock)


# ---------------------------------------------------------------------------
# Fake data sources
# ---------------------------------------------------------------------------


@dataclass
class FakeDataSource:
    """DataSourcePort stand-in that records calls."""

    source: DataSource = DataSource.FOOTBALL
    results: list[list[dict[str, Any]]] = field(default_factory=list)
    error: Exception | None = None
    calls: int = 0

    async def fetch(self) -> list[dict[str, Any]]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        if self.results:
            return self.results.pop(0)
        return []


@pytest.fixture()
def football_matches() -> list[dict[str, Any]]:
    return [
        {
            "time": "20:00",
            "homeTeam": "Arsenal",
            "awayTeam": "Chelsea",
            "score": "1 - 0",
            "streams": [
                {
                    "img": "https://img.example/tv1.png",
                    "alt": "TV1",
                    "dataUrl": "https://cdn.example/a/index.m3u8",
                }
            ],
        }
    ]


@pytest.fixture()
def fake_football_source(football_matches: list[dict[str, Any]]) -> FakeDataSource:
    return FakeDataSource(source=DataSource.FOOTBALL, results=[football_matches])
