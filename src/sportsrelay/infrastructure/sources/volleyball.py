"""Live volleyball scraper."""

from __future__ import annotations

from typing import Any

from playwright.async_api import Page

from sportsrelay.domain.entities import DataSource
from sportsrelay.infrastructure.sources.base import PlaywrightSourceBase

VOLLEYBALL_PAGE_URL = "https://pixielive.vip/volleyball-women-world-championship-2025/"

_EXTRACT_JS = """
() => Array.from(document.querySelectorAll("div.pls-card")).map((card) => {
  const btn = card.querySelector("button.pls-btn");
  return {
    live: Boolean(card.querySelector("span.pls-status.live")),
    match: btn ? btn.getAttribute("aria-label") : null,
    src: btn ? btn.getAttribute("data-src") : null,
    hasButton: Boolean(btn),
  };
})
"""


def keep_live_cards(cards: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Reduce raw cards to ``{match, src}`` for live cards with a play button."""
    return [
        {"match": card.get("match"), "src": card.get("src")}
        for card in cards
        if card.get("live") and card.get("hasButton")
    ]


class VolleyballLiveSource(PlaywrightSourceBase):
    source = DataSource.VOLLEYBALL
    page_url = VOLLEYBALL_PAGE_URL

    async def extract(self, page: Page) -> list[dict[str, Any]]:
        cards = await page.evaluate(_EXTRACT_JS)
        return keep_live_cards(cards)
