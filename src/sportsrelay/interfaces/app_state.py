"""Application state container for FastAPI dependency injection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from starlette.datastructures import State

from sportsrelay.infrastructure.config import AppConfig

if TYPE_CHECKING:
    from sportsrelay.application.use_cases import (
        CachedListingUseCase,
        StreamRelayUseCase,
    )
    from sportsrelay.domain.ports import ChannelCatalogPort, ScrapeCachePort
    from sportsrelay.infrastructure.sources import SharedBrowserPool


class AppState(State):
    """FastAPI application state with all DI resources.

    Lifecycle managed by composition.py::lifespan().
    """

    # Configuration
    config: AppConfig

    # Infrastructure
    http_client: httpx.AsyncClient
    browser_pool: SharedBrowserPool
    scrape_cache: ScrapeCachePort
    channel_catalog: ChannelCatalogPort

    # Listings (cached scrapes)
    football_listing: CachedListingUseCase
    volleyball_listing: CachedListingUseCase

    # Relays
    football_relay: StreamRelayUseCase
    tv_relay: StreamRelayUseCase
