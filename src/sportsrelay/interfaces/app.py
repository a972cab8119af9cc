"""FastAPI application factory (create_app)."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone

import structlog
from fastapi import FastAPI, Request
from starlette.responses import Response

from sportsrelay.infrastructure.config import AppConfig
from sportsrelay.interfaces.api.errors import register_error_handlers
from sportsrelay.interfaces.app_state import AppState
from sportsrelay.interfaces.composition import lifespan

log = structlog.get_logger(__name__)


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and ``Z``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def create_app(config: AppConfig) -> FastAPI:
    """Create FastAPI app: configuration only, no resource initialization.

    Resources (HTTP client, cache, browser, relays) are created in lifespan().
    """
    app = FastAPI(
        title="sportsrelay",
        description="Live sports schedules and same-origin HLS stream relay",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state = AppState()
    app.state.config = config

    register_error_handlers(app)

    from sportsrelay.interfaces.api.football import router as football_router
    from sportsrelay.interfaces.api.tv import router as tv_router
    from sportsrelay.interfaces.api.volleyball import router as volleyball_router

    app.include_router(football_router, prefix="/api")
    app.include_router(volleyball_router, prefix="/api")
    app.include_router(tv_router, prefix="/api")

    @app.get("/api/health")
    async def health() -> dict[str, str]:
        """Liveness probe: returns 200 as long as the process is running."""
        return {"status": "OK", "timestamp": utc_timestamp()}

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ):
        start = time.perf_counter()
        try:
            response = await call_next(request)
            return response
        finally:
            duration_ms = (time.perf_counter() - start) * 1000.0
            status_code = getattr(locals().get("response", None), "status_code", 500)

            log.info(
                "http_request",
                method=request.method,
                path=request.url.path,
                status_code=status_code,
                duration_ms=round(duration_ms, 2),
                client_host=(request.client.host if request.client else None),
            )

    return app
