"""Upstream fetcher port - outbound requests to third-party stream hosts."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Protocol

from sportsrelay.domain.entities import ProxyRequest, RetryPolicy


class UpstreamBody(Protocol):
    """An open upstream response whose body has not been read yet."""

    status_code: int
    url: str
    content_type: str | None
    content_range: str | None

    async def read_text(self) -> str:
        """Read the whole body as text and close the response."""
        ...

    def iter_chunks(self) -> AsyncIterator[bytes]:
        """Stream the body; the response is closed when iteration ends."""
        ...

    async def aclose(self) -> None: ...


class UpstreamFetcherPort(Protocol):
    async def open(self, request: ProxyRequest, policy: RetryPolicy) -> UpstreamBody:
        """Fetch ``request.target_url`` applying *policy*.

        Raises ``UpstreamHttpError`` / ``UpstreamNetworkError`` once the
        policy gives up.
        """
        ...
