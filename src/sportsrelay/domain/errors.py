"""Relay and cache errors.

Every error carries the HTTP status the API layer answers with.
"""

from __future__ import annotations


class RelayError(Exception):
    """Base class for all errors surfaced to API clients."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(RelayError):
    """A required request parameter is missing or malformed."""

    status_code = 400


class UpstreamHttpError(RelayError):
    """The upstream host answered with a non-2xx final status."""

    def __init__(self, status: int, reason: str = "") -> None:
        super().__init__(f"HTTP {status}: {reason or 'Request failed'}")
        self.status = status
        self.reason = reason


class UpstreamNetworkError(RelayError):
    """Connection, TLS, or timeout failure talking to the upstream host."""


class SourceUnavailableError(RelayError):
    """A data source adapter failed; the cache was left untouched."""

    def __init__(self, source: str, detail: str = "") -> None:
        message = f"Source '{source}' unavailable"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.source = source


class LocalAssetError(RelayError):
    """The persisted channel list could not be read."""

    def __init__(self, message: str = "Unable to load TV channel list") -> None:
        super().__init__(message)
