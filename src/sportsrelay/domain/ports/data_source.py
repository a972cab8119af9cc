"""Data source port - produces a scraped schedule on demand."""

from __future__ import annotations

from typing import Any, Protocol

from sportsrelay.domain.entities import DataSource


class DataSourcePort(Protocol):
    """A scraper for one schedule page.

    ``fetch()`` may raise any exception or return an empty list; the
    caller decides how failures surface.
    """

    source: DataSource

    async def fetch(self) -> list[dict[str, Any]]: ...
