"""Browser-like outbound header profiles per upstream site.

Most of the stream hosts reject requests whose ``Referer`` does not
match the page that embeds the player.
"""

from __future__ import annotations

from dataclasses import dataclass

from sportsrelay.domain.entities import SourceSite

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

DEFAULT_REFERERS: dict[SourceSite, str] = {
    SourceSite.FOOTBALL: "https://doofootball.vip/",
    SourceSite.TV: "https://www.dooballfree24hrs.com/",
}


@dataclass(frozen=True)
class SiteProfile:
    """Spoofed identity presented to one upstream site."""

    site: SourceSite
    referer: str | None
    user_agent: str = DEFAULT_USER_AGENT
    accept_language: str = "th-TH,th;q=0.9,en-US;q=0.8,en;q=0.7"

    def build_headers(self, range_header: str | None = None) -> dict[str, str]:
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "*/*",
            "Accept-Language": self.accept_language,
            "Cache-Control": "no-cache",
            "Pragma": "no-cache",
            "Sec-Fetch-Dest": "empty",
            "Sec-Fetch-Mode": "cors",
            "Sec-Fetch-Site": "cross-site",
            "sec-ch-ua": '"Not_A Brand";v="8", "Chromium";v="120", "Google Chrome";v="120"',
            "sec-ch-ua-mobile": "?0",
            "sec-ch-ua-platform": '"Windows"',
        }
        if self.referer:
            headers["Referer"] = self.referer
        if range_header:
            headers["Range"] = range_header
        return headers


def default_profile(site: SourceSite, user_agent: str = DEFAULT_USER_AGENT) -> SiteProfile:
    return SiteProfile(site=site, referer=DEFAULT_REFERERS.get(site), user_agent=user_agent)
