"""httpx-based upstream fetcher with spoofed headers and a retry policy."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Mapping

import httpx
import structlog

from sportsrelay.domain.entities import (
    FetchAttempt,
    ProxyRequest,
    RetryPolicy,
    SourceSite,
)
from sportsrelay.domain.errors import UpstreamHttpError, UpstreamNetworkError
from sportsrelay.infrastructure.relay.headers import SiteProfile, default_profile

log = structlog.get_logger(__name__)

DEFAULT_TIMEOUT_SECONDS = 15.0
DEFAULT_CHUNK_SIZE = 65536


class HttpxUpstreamBody:
    """An open ``httpx.Response`` whose body has not been consumed.

    Closing is idempotent, so the body can be released from both the
    chunk iterator and a response background task.
    """

    def __init__(self, response: httpx.Response, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        self._response = response
        self._chunk_size = chunk_size
        self.attempts: list[FetchAttempt] = []

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def url(self) -> str:
        return str(self._response.url)

    @property
    def content_type(self) -> str | None:
        return self._response.headers.get("content-type")

    @property
    def content_range(self) -> str | None:
        return self._response.headers.get("content-range")

    async def read_text(self) -> str:
        try:
            await self._response.aread()
            return self._response.text
        except httpx.RequestError as exc:
            raise UpstreamNetworkError(
                f"Upstream body read failed: {exc.__class__.__name__}"
            ) from exc
        finally:
            await self.aclose()

    async def iter_chunks(self) -> AsyncIterator[bytes]:
        try:
            async for chunk in self._response.aiter_bytes(chunk_size=self._chunk_size):
                yield chunk
        finally:
            await self.aclose()

    async def aclose(self) -> None:
        if not self._response.is_closed:
            await self._response.aclose()


class HttpxUpstreamFetcher:
    """Issues outbound requests on behalf of the relay endpoints.

    One shared ``httpx.AsyncClient`` serves every relay; the per-site
    header profile and the retry policy are chosen per call.  The
    timeout applies to each attempt, independent of backoff sleeps.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        profiles: Mapping[SourceSite, SiteProfile] | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        self._client = http_client
        self._profiles = dict(profiles or {})
        self._timeout = timeout_seconds
        self._chunk_size = chunk_size

    def profile_for(self, site: SourceSite) -> SiteProfile:
        profile = self._profiles.get(site)
        if profile is None:
            profile = default_profile(site)
            self._profiles[site] = profile
        return profile

    async def open(self, request: ProxyRequest, policy: RetryPolicy) -> HttpxUpstreamBody:
        headers = self.profile_for(request.source_site).build_headers(request.range_header)
        attempts: list[FetchAttempt] = []

        for attempt_number in range(1, policy.max_attempts + 1):
            delay = policy.delay_before(attempt_number)
            if delay > 0:
                await asyncio.sleep(delay)

            try:
                response = await self._send(request.target_url, headers)
            except httpx.RequestError as exc:
                attempts.append(
                    FetchAttempt(attempt_number, int(delay * 1000), "network_error")
                )
                log.warning(
                    "upstream_network_error",
                    url=request.target_url,
                    attempt=attempt_number,
                    error=repr(exc),
                )
                if policy.should_retry_network_error(attempt_number):
                    continue
                raise UpstreamNetworkError(
                    f"Upstream request failed: {exc.__class__.__name__}"
                ) from exc

            if response.is_success:
                attempts.append(
                    FetchAttempt(attempt_number, int(delay * 1000), "ok", response.status_code)
                )
                log.debug(
                    "upstream_fetched",
                    url=request.target_url,
                    status=response.status_code,
                    attempts=attempt_number,
                )
                body = HttpxUpstreamBody(response, chunk_size=self._chunk_size)
                body.attempts = attempts
                return body

            status = response.status_code
            reason = response.reason_phrase
            await response.aclose()
            attempts.append(
                FetchAttempt(attempt_number, int(delay * 1000), "http_error", status)
            )
            log.warning(
                "upstream_http_error",
                url=request.target_url,
                status=status,
                attempt=attempt_number,
            )
            if policy.should_retry_status(status, attempt_number):
                continue
            raise UpstreamHttpError(status, reason)

        # Unreachable: the last attempt always returns or raises
        raise UpstreamNetworkError("Upstream request failed")  # pragma: no cover

    async def _send(self, url: str, headers: dict[str, str]) -> httpx.Response:
        return await self._client.send(
            self._client.build_request("GET", url, headers=headers, timeout=self._timeout),
            stream=True,
            follow_redirects=True,
        )
