"""Domain entities for the stream relay and scrape cache.

Pure value objects without framework dependencies or I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal
from urllib.parse import urlparse

from sportsrelay.domain.errors import ValidationError


class DataSource(str, Enum):
    """Scraped schedule sources, one cache slot each."""

    FOOTBALL = "football"
    VOLLEYBALL = "volleyball"


class SourceSite(str, Enum):
    """Upstream site a relay impersonates (selects Referer/User-Agent)."""

    FOOTBALL = "football"
    TV = "tv"


@dataclass(frozen=True)
class CachedResult:
    """Most recent successful scrape for one source."""

    source: DataSource
    payload: Any
    fetched_at: float  # epoch seconds


@dataclass(frozen=True)
class ProxyRequest:
    """A validated relay request."""

    target_url: str
    source_site: SourceSite
    range_header: str | None = None

    @classmethod
    def parse(
        cls,
        target_url: str | None,
        source_site: SourceSite,
        range_header: str | None = None,
    ) -> ProxyRequest:
        """Build a request, rejecting missing or non-absolute URLs.

        >>> ProxyRequest.parse("https://cdn.example/a.m3u8", SourceSite.TV).target_url
        'https://cdn.example/a.m3u8'
        """
        if not target_url:
            raise ValidationError("Missing url parameter")
        parsed = urlparse(target_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValidationError("url must be an absolute http(s) URL")
        return cls(
            target_url=target_url,
            source_site=source_site,
            range_header=range_header or None,
        )


FetchOutcome = Literal["ok", "http_error", "network_error"]


@dataclass(frozen=True)
class FetchAttempt:
    """Record of one upstream request inside a retry loop."""

    attempt_number: int
    delay_before_ms: int
    outcome: FetchOutcome
    status: int | None = None


@dataclass(frozen=True)
class RetryPolicy:
    """Declarative retry policy consumed by the upstream fetcher.

    ``delay_before(n)`` grows linearly: attempt 1 starts immediately,
    attempt *n* waits ``(n - 1) * backoff_step_seconds``.
    """

    max_attempts: int = 1
    backoff_step_seconds: float = 1.0
    retryable_statuses: frozenset[int] = field(default_factory=frozenset)
    retry_network_errors: bool = False

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if self.backoff_step_seconds < 0:
            raise ValueError("backoff_step_seconds must be >= 0")

    @classmethod
    def single_attempt(cls) -> RetryPolicy:
        return cls(max_attempts=1)

    @classmethod
    def linear(
        cls,
        max_attempts: int = 3,
        backoff_step_seconds: float = 1.0,
        retryable_statuses: frozenset[int] = frozenset({403}),
    ) -> RetryPolicy:
        return cls(
            max_attempts=max_attempts,
            backoff_step_seconds=backoff_step_seconds,
            retryable_statuses=retryable_statuses,
            retry_network_errors=True,
        )

    def delay_before(self, attempt_number: int) -> float:
        return max(0, attempt_number - 1) * self.backoff_step_seconds

    def should_retry_status(self, status: int, attempt_number: int) -> bool:
        return status in self.retryable_statuses and attempt_number < self.max_attempts

    def should_retry_network_error(self, attempt_number: int) -> bool:
        return self.retry_network_errors and attempt_number < self.max_attempts
