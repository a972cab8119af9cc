"""Tests for relay value objects (ProxyRequest, RetryPolicy, CachedResult)."""

from __future__ import annotations

import pytest

from sportsrelay.domain.entities import ProxyRequest, RetryPolicy, SourceSite
from sportsrelay.domain.errors import (
    LocalAssetError,
    SourceUnavailableError,
    UpstreamHttpError,
    UpstreamNetworkError,
    ValidationError,
)


class TestProxyRequestParse:
    def test_accepts_absolute_https_url(self) -> None:
        req = ProxyRequest.parse(
            "https://cdn.example/a/index.m3u8", SourceSite.FOOTBALL, "bytes=0-99"
        )
        assert req.target_url == "https://cdn.example/a/index.m3u8"
        assert req.source_site is SourceSite.FOOTBALL
        assert req.range_header == "bytes=0-99"

    def test_accepts_plain_http(self) -> None:
        req = ProxyRequest.parse("http://cdn.example/seg.ts", SourceSite.TV)
        assert req.range_header is None

    @pytest.mark.parametrize("url", [None, ""])
    def test_missing_url_rejected(self, url: str | None) -> None:
        with pytest.raises(ValidationError, match="Missing url parameter"):
            ProxyRequest.parse(url, SourceSite.TV)

    @pytest.mark.parametrize(
        "url",
        ["seg1.ts", "/a/index.m3u8", "ftp://cdn.example/a.ts", "https://"],
    )
    def test_non_absolute_url_rejected(self, url: str) -> None:
        with pytest.raises(ValidationError, match="absolute"):
            ProxyRequest.parse(url, SourceSite.FOOTBALL)

    def test_empty_range_header_normalized_to_none(self) -> None:
        req = ProxyRequest.parse("https://cdn.example/x.ts", SourceSite.TV, "")
        assert req.range_header is None


class TestRetryPolicy:
    def test_linear_delays(self) -> None:
        policy = RetryPolicy.linear(max_attempts=3, backoff_step_seconds=1.0)
        assert [policy.delay_before(n) for n in (1, 2, 3)] == [0.0, 1.0, 2.0]

    def test_retries_403_until_last_attempt(self) -> None:
        policy = RetryPolicy.linear(max_attempts=3)
        assert policy.should_retry_status(403, 1)
        assert policy.should_retry_status(403, 2)
        assert not policy.should_retry_status(403, 3)

    def test_other_statuses_never_retried(self) -> None:
        policy = RetryPolicy.linear(max_attempts=3)
        assert not policy.should_retry_status(404, 1)
        assert not policy.should_retry_status(500, 1)

    def test_network_errors_retried_for_linear_policy(self) -> None:
        policy = RetryPolicy.linear(max_attempts=3)
        assert policy.should_retry_network_error(2)
        assert not policy.should_retry_network_error(3)

    def test_single_attempt_never_retries(self) -> None:
        policy = RetryPolicy.single_attempt()
        assert policy.max_attempts == 1
        assert not policy.should_retry_status(403, 1)
        assert not policy.should_retry_network_error(1)

    def test_rejects_zero_attempts(self) -> None:
        with pytest.raises(ValueError):
            RetryPolicy(max_attempts=0)


class TestErrorTaxonomy:
    def test_status_codes(self) -> None:
        assert ValidationError("x").status_code == 400
        assert UpstreamHttpError(404, "Not Found").status_code == 500
        assert UpstreamNetworkError("x").status_code == 500
        assert SourceUnavailableError("football").status_code == 500
        assert LocalAssetError().status_code == 500

    def test_upstream_http_error_message(self) -> None:
        err = UpstreamHttpError(403, "Forbidden")
        assert err.message == "HTTP 403: Forbidden"
        assert err.status == 403

    def test_source_unavailable_message_includes_detail(self) -> None:
        err = SourceUnavailableError("volleyball", "timeout")
        assert err.message == "Source 'volleyball' unavailable: timeout"
