"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "sportsrelay",
    "environment": "dev",
    "channels_file": "./tv.json",
    "http": {
        "timeout_seconds": 15.0,
        "user_agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/120.0.0.0 Safari/537.36"
        ),
    },
    "relay": {
        "football_referer": "https://doofootball.vip/",
        "tv_referer": "https://www.dooballfree24hrs.com/",
        "max_attempts": 3,
        "backoff_seconds": 1.0,
        "chunk_size": 65536,
    },
    "cache": {
        "ttl_seconds": 60.0,
    },
    "sources": {
        "football_url": "https://doofootball.vip/new-doofootball-vip-2025/",
        "volleyball_url": "https://pixielive.vip/volleyball-women-world-championship-2025/",
        "headless": True,
        "navigation_timeout_ms": 30_000,
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
    },
}
