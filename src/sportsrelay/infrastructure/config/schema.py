"""Pydantic configuration models with validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


def _normalize_path(value: Any) -> Path:
    """Normalize a path-like value without touching the filesystem."""
    if isinstance(value, Path):
        return value.expanduser()
    if isinstance(value, str):
        return Path(value).expanduser()
    raise TypeError(f"Expected path-like value, got: {type(value)!r}")


class HttpConfig(BaseModel):
    """Outbound HTTP settings shared by both relays."""

    timeout_seconds: float = Field(
        default=15.0,
        description="Per-attempt upstream timeout in seconds.",
    )
    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/120.0.0.0 Safari/537.36"
        ),
        description="Desktop browser User-Agent presented to upstream hosts.",
    )

    @field_validator("timeout_seconds")
    @classmethod
    def _validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout_seconds must be > 0")
        return v


class RelayConfig(BaseModel):
    """Stream relay settings (YAML section: relay.*)."""

    football_referer: str = Field(
        default="https://doofootball.vip/",
        description="Referer sent by the football relay.",
    )
    tv_referer: str = Field(
        default="https://www.dooballfree24hrs.com/",
        description="Referer sent by the TV relay.",
    )
    max_attempts: int = Field(
        default=3,
        description="Football relay attempts on 403 / network errors.",
    )
    backoff_seconds: float = Field(
        default=1.0,
        description="Linear backoff step: attempt N waits (N-1) * step.",
    )
    chunk_size: int = Field(
        default=65536,
        description="Bytes per streamed segment chunk.",
    )

    @field_validator("max_attempts", "chunk_size")
    @classmethod
    def _validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be >= 1")
        return v

    @field_validator("backoff_seconds")
    @classmethod
    def _validate_backoff(cls, v: float) -> float:
        if v < 0:
            raise ValueError("backoff_seconds must be >= 0")
        return v


class CacheConfig(BaseModel):
    """Scrape cache settings (YAML section: cache.*)."""

    ttl_seconds: float = Field(
        default=60.0,
        description="Freshness window for scraped listings (seconds).",
    )

    @field_validator("ttl_seconds")
    @classmethod
    def _validate_ttl(cls, v: float) -> float:
        if v < 0:
            raise ValueError("ttl_seconds must be >= 0")
        return v


class SourcesConfig(BaseModel):
    """Playwright scraper settings (YAML section: sources.*)."""

    football_url: str = Field(
        default="https://doofootball.vip/new-doofootball-vip-2025/",
        description="Football schedule page.",
    )
    volleyball_url: str = Field(
        default="https://pixielive.vip/volleyball-women-world-championship-2025/",
        description="Live volleyball page.",
    )
    headless: bool = Field(default=True, description="Run Chromium headless.")
    navigation_timeout_ms: int = Field(
        default=30_000,
        description="Page navigation timeout in milliseconds.",
    )

    @field_validator("navigation_timeout_ms")
    @classmethod
    def _validate_nav_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("navigation_timeout_ms must be > 0")
        return v


class AppConfig(BaseModel):
    """
    Canonical application configuration (validated, final).

    Note:
    - YAML is expected to be sectioned (http/relay/cache/sources/logging).
    - Environment variables are handled by EnvOverrides(BaseSettings) so
      precedence stays defaults < YAML < ENV < CLI (see load.py).
    """

    app_name: str = Field(default="sportsrelay", description="Application name.")
    environment: Environment = Field(
        default="dev",
        description="Runtime environment (affects defaults like log format).",
    )

    channels_file: Path = Field(
        default=Path("./tv.json"),
        description="Locally persisted TV channel list served by /api/tv.",
    )

    http: HttpConfig = Field(default_factory=HttpConfig)
    relay: RelayConfig = Field(default_factory=RelayConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    sources: SourcesConfig = Field(default_factory=SourcesConfig)

    log_level: LogLevel = Field(default="INFO", description="Log level.")
    log_format: Optional[LogFormat] = Field(
        default=None,
        description="Log renderer (console/json). If unset, derived from environment.",
    )

    @field_validator("channels_file", mode="before")
    @classmethod
    def _validate_paths(cls, v: Any) -> Path:
        return _normalize_path(v)

    @model_validator(mode="after")
    def _derive_defaults(self) -> "AppConfig":
        # Default log format: console in dev/test, json in prod.
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        return self


class EnvOverrides(BaseSettings):
    """
    Environment-variable overrides (all optional).

    Supported env vars (flat, explicit):
    - SPORTSRELAY_ENVIRONMENT
    - SPORTSRELAY_CHANNELS_FILE
    - SPORTSRELAY_HTTP_TIMEOUT_SECONDS
    - SPORTSRELAY_RELAY_MAX_ATTEMPTS
    - SPORTSRELAY_CACHE_TTL_SECONDS
    - SPORTSRELAY_SOURCES_HEADLESS
    - SPORTSRELAY_LOG_LEVEL / SPORTSRELAY_LOG_FORMAT
    """

    model_config = SettingsConfigDict(
        env_prefix="SPORTSRELAY_",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: Optional[str] = None
    environment: Optional[Environment] = None
    channels_file: Optional[Path] = None

    http_timeout_seconds: Optional[float] = None
    http_user_agent: Optional[str] = None

    relay_football_referer: Optional[str] = None
    relay_tv_referer: Optional[str] = None
    relay_max_attempts: Optional[int] = None
    relay_backoff_seconds: Optional[float] = None

    cache_ttl_seconds: Optional[float] = None

    sources_football_url: Optional[str] = None
    sources_volleyball_url: Optional[str] = None
    sources_headless: Optional[bool] = None

    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None

    def to_update_dict(self) -> dict[str, Any]:
        """Return only values that were actually provided (non-None), for merging."""
        return self.model_dump(exclude_none=True)
