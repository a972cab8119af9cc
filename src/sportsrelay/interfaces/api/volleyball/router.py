"""Live volleyball listing endpoint."""

from __future__ import annotations

from typing import Any, cast

from fastapi import APIRouter, Request

from sportsrelay.interfaces.app_state import AppState

router = APIRouter(prefix="/live", tags=["volleyball"])


@router.get("/volleyball")
async def live_volleyball(request: Request) -> Any:
    """Live volleyball matches as a bare ``[{match, src}]`` array."""
    state = cast(AppState, request.app.state)
    return await state.volleyball_listing.execute()
