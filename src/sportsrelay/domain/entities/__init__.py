from .relay import (
    CachedResult,
    DataSource,
    FetchAttempt,
    FetchOutcome,
    ProxyRequest,
    RetryPolicy,
    SourceSite,
)

__all__ = [
    "CachedResult",
    "DataSource",
    "FetchAttempt",
    "FetchOutcome",
    "ProxyRequest",
    "RetryPolicy",
    "SourceSite",
]
