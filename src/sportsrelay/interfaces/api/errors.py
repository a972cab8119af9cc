"""Translate relay errors into ``{success: false, error}`` JSON responses."""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from sportsrelay.domain.errors import RelayError

log = structlog.get_logger(__name__)


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message},
        headers={"Access-Control-Allow-Origin": "*"},
    )


async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    event = "request_rejected" if exc.status_code < 500 else "request_failed"
    level = log.warning if exc.status_code < 500 else log.error
    level(
        event,
        path=request.url.path,
        error_type=type(exc).__name__,
        error=exc.message,
        status_code=exc.status_code,
    )
    return error_response(exc.message, exc.status_code)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RelayError, relay_error_handler)
