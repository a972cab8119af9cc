from .scrape_cache import DEFAULT_TTL_SECONDS, InMemoryScrapeCache

__all__ = ["DEFAULT_TTL_SECONDS", "InMemoryScrapeCache"]
