"""Composition root: dependency injection via FastAPI lifespan."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, cast

import httpx
import structlog
from fastapi import FastAPI

from sportsrelay.application.use_cases import (
    CachedListingUseCase,
    StreamRelayUseCase,
    football_payload,
    raw_payload,
)
from sportsrelay.domain.entities import RetryPolicy, SourceSite
from sportsrelay.infrastructure.cache import InMemoryScrapeCache
from sportsrelay.infrastructure.channels import JsonChannelCatalog
from sportsrelay.infrastructure.config import AppConfig
from sportsrelay.infrastructure.relay import HttpxUpstreamFetcher, SiteProfile
from sportsrelay.infrastructure.sources import (
    FootballScheduleSource,
    SharedBrowserPool,
    VolleyballLiveSource,
)
from sportsrelay.interfaces.app_state import AppState

log = structlog.get_logger(__name__)

FOOTBALL_STREAM_PATH = "/api/football/stream"
TV_STREAM_PATH = "/api/tv/stream"


def build_site_profiles(config: AppConfig) -> dict[SourceSite, SiteProfile]:
    user_agent = config.http.user_agent
    return {
        SourceSite.FOOTBALL: SiteProfile(
            site=SourceSite.FOOTBALL,
            referer=config.relay.football_referer,
            user_agent=user_agent,
        ),
        SourceSite.TV: SiteProfile(
            site=SourceSite.TV,
            referer=config.relay.tv_referer,
            user_agent=user_agent,
        ),
    }


def build_relays(
    fetcher: HttpxUpstreamFetcher, config: AppConfig
) -> tuple[StreamRelayUseCase, StreamRelayUseCase]:
    """Football relay retries 403/network errors; TV relay tries once."""
    football = StreamRelayUseCase(
        fetcher,
        site=SourceSite.FOOTBALL,
        policy=RetryPolicy.linear(
            max_attempts=config.relay.max_attempts,
            backoff_step_seconds=config.relay.backoff_seconds,
        ),
        proxy_path=FOOTBALL_STREAM_PATH,
    )
    tv = StreamRelayUseCase(
        fetcher,
        site=SourceSite.TV,
        policy=RetryPolicy.single_attempt(),
        proxy_path=TV_STREAM_PATH,
    )
    return football, tv


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan Hook: Initialize and cleanup all resources (DI Composition Root).

    Order matters:
        1. Scrape cache + channel catalog (no dependencies)
        2. HTTP client + upstream fetcher
        3. Relays (use fetcher)
        4. Browser pool + listing use cases (use cache)
    """
    state = cast(AppState, app.state)
    config = state.config

    # 1) Cache + local assets
    state.scrape_cache = InMemoryScrapeCache(ttl_seconds=config.cache.ttl_seconds)
    state.channel_catalog = JsonChannelCatalog(config.channels_file)
    log.info(
        "scrape_cache_initialized",
        ttl_seconds=config.cache.ttl_seconds,
        channels_file=str(config.channels_file),
    )

    # 2) HTTP client (timeouts are applied per attempt by the fetcher)
    state.http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(config.http.timeout_seconds),
        follow_redirects=True,
    )
    fetcher = HttpxUpstreamFetcher(
        state.http_client,
        profiles=build_site_profiles(config),
        timeout_seconds=config.http.timeout_seconds,
        chunk_size=config.relay.chunk_size,
    )
    log.info("http_client_initialized", timeout_seconds=config.http.timeout_seconds)

    # 3) Relays
    state.football_relay, state.tv_relay = build_relays(fetcher, config)
    log.info(
        "relays_initialized",
        football_max_attempts=config.relay.max_attempts,
        backoff_seconds=config.relay.backoff_seconds,
    )

    # 4) Scrapers behind the cache (Chromium launches lazily)
    state.browser_pool = SharedBrowserPool(headless=config.sources.headless)
    scraper_profile = SiteProfile(
        site=SourceSite.FOOTBALL, referer=None, user_agent=config.http.user_agent
    )
    state.football_listing = CachedListingUseCase(
        FootballScheduleSource(
            state.browser_pool,
            scraper_profile,
            page_url=config.sources.football_url,
            navigation_timeout_ms=config.sources.navigation_timeout_ms,
        ),
        state.scrape_cache,
        shape=football_payload,
    )
    state.volleyball_listing = CachedListingUseCase(
        VolleyballLiveSource(
            state.browser_pool,
            scraper_profile,
            page_url=config.sources.volleyball_url,
            navigation_timeout_ms=config.sources.navigation_timeout_ms,
        ),
        state.scrape_cache,
        shape=raw_payload,
    )
    log.info("listings_initialized")

    try:
        yield
    finally:
        await state.browser_pool.cleanup()
        await state.http_client.aclose()
        log.info("app_shutdown")
