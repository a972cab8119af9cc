from .headers import DEFAULT_USER_AGENT, SiteProfile, default_profile
from .upstream import HttpxUpstreamBody, HttpxUpstreamFetcher

__all__ = [
    "DEFAULT_USER_AGENT",
    "HttpxUpstreamBody",
    "HttpxUpstreamFetcher",
    "SiteProfile",
    "default_profile",
]
