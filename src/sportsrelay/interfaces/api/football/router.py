"""Football listing and football stream relay endpoints."""

from __future__ import annotations

from typing import Any, cast

from fastapi import APIRouter, Request
from starlette.responses import Response

from sportsrelay.interfaces.api.relay_response import build_relay_response
from sportsrelay.interfaces.app_state import AppState

router = APIRouter(prefix="/football", tags=["football"])


@router.get("")
async def football_matches(request: Request) -> Any:
    """Scraped football schedule, cached for the configured TTL."""
    state = cast(AppState, request.app.state)
    return await state.football_listing.execute()


@router.get("/stream")
async def football_stream(request: Request, url: str | None = None) -> Response:
    """Relay a football HLS manifest or segment (retries 403/network errors)."""
    state = cast(AppState, request.app.state)
    result = await state.football_relay.execute(url, request.headers.get("range"))
    return build_relay_response(result)
