"""TV channel list and TV stream relay endpoints."""

from __future__ import annotations

from typing import Any, cast

from fastapi import APIRouter, Request
from starlette.responses import Response

from sportsrelay.interfaces.api.relay_response import build_relay_response
from sportsrelay.interfaces.app_state import AppState

router = APIRouter(prefix="/tv", tags=["tv"])


@router.get("")
async def tv_channels(request: Request) -> Any:
    state = cast(AppState, request.app.state)
    return await state.channel_catalog.load()


@router.get("/stream")
async def tv_stream(request: Request, url: str | None = None) -> Response:
    """Relay a TV HLS manifest or segment (single attempt)."""
    state = cast(AppState, request.app.state)
    result = await state.tv_relay.execute(url, request.headers.get("range"))
    return build_relay_response(result)
