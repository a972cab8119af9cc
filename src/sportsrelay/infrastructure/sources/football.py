"""Football schedule scraper."""

from __future__ import annotations

from typing import Any

from playwright.async_api import Page

from sportsrelay.domain.entities import DataSource
from sportsrelay.infrastructure.sources.base import PlaywrightSourceBase

FOOTBALL_PAGE_URL = "https://doofootball.vip/new-doofootball-vip-2025/"

# Each schedule row holds time / teams+score / TV logo columns side by side.
_EXTRACT_JS = """
() => {
  const matches = [];
  document.querySelectorAll("div.row.gy-3").forEach((row) => {
    row.querySelectorAll("div.col-lg-1").forEach((timeCol) => {
      const teamCol = timeCol.nextElementSibling;
      if (!teamCol) return;
      const text = (sel) => teamCol.querySelector(sel)?.innerText.trim() || "";
      const tvBlock = teamCol.nextElementSibling;
      const streams = Array.from(tvBlock ? tvBlock.querySelectorAll("img.iam-list-tv") : [])
        .map((img) => ({
          img: img.getAttribute("src"),
          alt: img.getAttribute("alt") || "",
          dataUrl: img.getAttribute("data-url"),
        }))
        .filter((tv) => tv.dataUrl);
      matches.push({
        time: timeCol.innerText.replace(/\\s+/g, " ").trim().replace("LIVE", "").trim(),
        homeTeam: text("div.text-end p"),
        score: text("div.col-lg-2 p"),
        awayTeam: text("div.text-start p"),
        streams,
      });
    });
  });
  return matches;
}
"""


def keep_complete_matches(rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Drop rows without both teams, a score, and at least one stream."""
    return [
        row
        for row in rows
        if row.get("homeTeam")
        and row.get("awayTeam")
        and row.get("score")
        and row.get("streams")
    ]


class FootballScheduleSource(PlaywrightSourceBase):
    source = DataSource.FOOTBALL
    page_url = FOOTBALL_PAGE_URL
    wait_until = "networkidle"

    _row_timeout_ms = 15_000

    async def extract(self, page: Page) -> list[dict[str, Any]]:
        await page.wait_for_selector("div.row.gy-3", timeout=self._row_timeout_ms)
        rows = await page.evaluate(_EXTRACT_JS)
        return keep_complete_matches(rows)
