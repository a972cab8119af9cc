"""Build HTTP responses for relay results."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from starlette.responses import Response, StreamingResponse
from starlette.types import Receive, Scope, Send

from sportsrelay.application.use_cases import ManifestResult, SegmentResult
from sportsrelay.domain.manifest import MANIFEST_CONTENT_TYPE

NO_CACHE = "no-cache, no-store, must-revalidate"

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "*",
}


class UpstreamStreamingResponse(StreamingResponse):
    """StreamingResponse that always releases its upstream body.

    Starlette skips background tasks when the client disconnects
    mid-stream, so the upstream close runs in ``finally`` instead.
    """

    def __init__(
        self, *args, close: Callable[[], Awaitable[None]], **kwargs
    ) -> None:
        super().__init__(*args, **kwargs)
        self._close_upstream = close

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await super().__call__(scope, receive, send)
        finally:
            await self._close_upstream()


def build_relay_response(result: ManifestResult | SegmentResult) -> Response:
    if isinstance(result, ManifestResult):
        return Response(
            content=result.body,
            media_type=MANIFEST_CONTENT_TYPE,
            headers={**_CORS_HEADERS, "Cache-Control": NO_CACHE},
        )

    headers = {
        **_CORS_HEADERS,
        "Cache-Control": NO_CACHE,
        "Accept-Ranges": "bytes",
    }
    if result.content_range:
        headers["Content-Range"] = result.content_range

    return UpstreamStreamingResponse(
        result.chunks,
        status_code=result.status_code,
        media_type=result.content_type,
        headers=headers,
        close=result.close,
    )
