"""Use case: relay an upstream HLS manifest or media segment.

RECEIVED -> VALIDATING -> FETCHING -> CLASSIFYING -> result.  The API
layer turns the result into a response; a ``SegmentResult`` body is
only read once the response starts streaming.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import dataclass

import structlog

from sportsrelay.domain.entities import ProxyRequest, RetryPolicy, SourceSite
from sportsrelay.domain.ports import UpstreamFetcherPort
from sportsrelay.domain.manifest import is_manifest, rewrite_manifest

log = structlog.get_logger(__name__)

DEFAULT_SEGMENT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class ManifestResult:
    """A playlist already rewritten to point back at the relay."""

    body: str


@dataclass(frozen=True)
class SegmentResult:
    """An opaque binary body, streamed chunk by chunk."""

    chunks: AsyncIterator[bytes]
    content_type: str
    status_code: int
    close: Callable[[], Awaitable[None]]
    content_range: str | None = None


RelayResult = ManifestResult | SegmentResult


class StreamRelayUseCase:
    """One relay endpoint: a site identity, a retry policy, a proxy path."""

    def __init__(
        self,
        fetcher: UpstreamFetcherPort,
        *,
        site: SourceSite,
        policy: RetryPolicy,
        proxy_path: str,
    ) -> None:
        self._fetcher = fetcher
        self.site = site
        self.policy = policy
        self.proxy_path = proxy_path

    async def execute(self, target_url: str | None, range_header: str | None = None) -> RelayResult:
        request = ProxyRequest.parse(target_url, self.site, range_header)
        upstream = await self._fetcher.open(request, self.policy)

        if is_manifest(upstream.content_type, request.target_url):
            text = await upstream.read_text()
            rewritten = rewrite_manifest(text, upstream.url, self.proxy_path)
            log.info(
                "relay_manifest",
                site=self.site.value,
                url=request.target_url,
                size=len(rewritten),
            )
            return ManifestResult(body=rewritten)

        log.debug(
            "relay_segment",
            site=self.site.value,
            url=request.target_url,
            status=upstream.status_code,
        )
        return SegmentResult(
            chunks=upstream.iter_chunks(),
            content_type=upstream.content_type or DEFAULT_SEGMENT_CONTENT_TYPE,
            status_code=upstream.status_code,
            close=upstream.aclose,
            content_range=upstream.content_range,
        )
