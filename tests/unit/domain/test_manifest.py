"""Tests for HLS manifest classification and rewriting."""

from __future__ import annotations

from urllib.parse import parse_qs, unquote, urlparse

import pytest

from sportsrelay.domain.manifest import (
    LineKind,
    classify_line,
    is_manifest,
    manifest_base_url,
    proxy_url,
    rewrite_manifest,
)

_PROXY = "/api/football/stream"


# ---------------------------------------------------------------------------
# classify_line
# ---------------------------------------------------------------------------


class TestClassifyLine:
    @pytest.mark.parametrize("line", ["", "   ", "\t"])
    def test_blank(self, line: str) -> None:
        assert classify_line(line) is LineKind.BLANK

    @pytest.mark.parametrize(
        "line", ["#EXTM3U", "#EXTINF:10.0,", '#EXT-X-KEY:METHOD=AES-128,URI="key.bin"']
    )
    def test_directive(self, line: str) -> None:
        assert classify_line(line) is LineKind.DIRECTIVE

    @pytest.mark.parametrize(
        "line", ["http://cdn.example/seg.ts", "https://cdn.example/seg.ts?t=1"]
    )
    def test_absolute(self, line: str) -> None:
        assert classify_line(line) is LineKind.ABSOLUTE

    @pytest.mark.parametrize("line", ["seg1.ts", "low/index.m3u8?t=abc", "/root/seg.ts"])
    def test_relative(self, line: str) -> None:
        assert classify_line(line) is LineKind.RELATIVE


# ---------------------------------------------------------------------------
# manifest_base_url / proxy_url
# ---------------------------------------------------------------------------


class TestManifestBaseUrl:
    def test_directory_of_playlist(self) -> None:
        assert (
            manifest_base_url("https://cdn.example/a/index.m3u8")
            == "https://cdn.example/a/"
        )

    def test_ignores_slashes_in_query(self) -> None:
        assert (
            manifest_base_url("https://cdn.example/a/b/index.m3u8?token=x/y")
            == "https://cdn.example/a/b/"
        )

    def test_root_path(self) -> None:
        assert manifest_base_url("https://cdn.example") == "https://cdn.example/"


class TestProxyUrl:
    def test_encodes_whole_url_as_one_value(self) -> None:
        result = proxy_url(_PROXY, "https://cdn.example/a/seg1.ts?t=abc&e=1")
        assert result == (
            "/api/football/stream?url="
            "https%3A%2F%2Fcdn.example%2Fa%2Fseg1.ts%3Ft%3Dabc%26e%3D1"
        )


# ---------------------------------------------------------------------------
# rewrite_manifest
# ---------------------------------------------------------------------------


_VARIANT = (
    "#EXTM3U\n"
    "#EXT-X-TARGETDURATION:10\n"
    "#EXTINF:10.0,\n"
    "seg-1.ts?t=abc\n"
    "#EXTINF:10.0,\n"
    "https://other.cdn/seg-2.ts\n"
    "\n"
    "#EXT-X-ENDLIST\n"
)


class TestRewriteManifest:
    def test_football_scenario(self) -> None:
        content = "#EXTM3U\n#EXT-X-VERSION:3\nseg1.ts\nhttps://other.cdn/seg2.ts\n"
        result = rewrite_manifest(
            content, "https://cdn.example/a/index.m3u8", _PROXY
        )
        assert result == (
            "#EXTM3U\n"
            "#EXT-X-VERSION:3\n"
            "/api/football/stream?url=https%3A%2F%2Fcdn.example%2Fa%2Fseg1.ts\n"
            "https://other.cdn/seg2.ts\n"
        )

    def test_absolute_comment_and_blank_lines_unchanged(self) -> None:
        result = rewrite_manifest(_VARIANT, "https://cdn.example/v/index.m3u8", _PROXY)
        original_lines = _VARIANT.split("\n")
        result_lines = result.split("\n")
        assert len(original_lines) == len(result_lines)
        for before, after in zip(original_lines, result_lines):
            if classify_line(before) is not LineKind.RELATIVE:
                assert before == after

    def test_relative_line_round_trips_to_absolute_target(self) -> None:
        result = rewrite_manifest(_VARIANT, "https://cdn.example/v/index.m3u8", _PROXY)
        rewritten = [
            line for line in result.split("\n") if line.startswith(_PROXY)
        ]
        assert len(rewritten) == 1
        query = parse_qs(urlparse(rewritten[0]).query)
        assert query["url"] == ["https://cdn.example/v/seg-1.ts?t=abc"]

    def test_query_string_in_relative_line_stays_opaque(self) -> None:
        result = rewrite_manifest(
            "low/index.m3u8?t=1&e=2\n", "https://cdn.example/master.m3u8", _PROXY
        )
        assert "&" not in result
        assert unquote(result.split("url=", 1)[1].strip()) == (
            "https://cdn.example/low/index.m3u8?t=1&e=2"
        )

    def test_root_relative_line_resolves_against_host(self) -> None:
        result = rewrite_manifest(
            "/hls/seg.ts\n", "https://cdn.example/a/b/index.m3u8", _PROXY
        )
        assert unquote(result.split("url=", 1)[1].strip()) == (
            "https://cdn.example/hls/seg.ts"
        )

    def test_preserves_crlf_terminators(self) -> None:
        content = "#EXTM3U\r\nseg1.ts\r\n#EXT-X-ENDLIST\r\n"
        result = rewrite_manifest(content, "https://cdn.example/a/x.m3u8", _PROXY)
        assert result.count("\r\n") == 3
        assert result.startswith("#EXTM3U\r\n/api/football/stream?url=")
        assert result.endswith("#EXT-X-ENDLIST\r\n")

    def test_missing_final_newline_preserved(self) -> None:
        result = rewrite_manifest("#EXTM3U\nseg1.ts", "https://c.example/x.m3u8", _PROXY)
        assert not result.endswith("\n")

    def test_uri_attributes_in_tags_untouched(self) -> None:
        line = '#EXT-X-KEY:METHOD=AES-128,URI="key.bin"\n'
        assert rewrite_manifest(line, "https://cdn.example/a/x.m3u8", _PROXY) == line

    def test_empty_manifest(self) -> None:
        assert rewrite_manifest("", "https://cdn.example/a/x.m3u8", _PROXY) == ""

    def test_already_rewritten_absolute_lines_are_idempotent(self) -> None:
        content = "#EXTM3U\nhttps://cdn.example/a/seg.ts\n"
        once = rewrite_manifest(content, "https://cdn.example/a/x.m3u8", _PROXY)
        assert once == content


class TestIsManifest:
    def test_mpegurl_content_type(self) -> None:
        assert is_manifest("application/vnd.apple.mpegurl", "https://c/x")
        assert is_manifest("audio/x-mpegURL; charset=utf-8", "https://c/x")

    def test_m3u8_suffix(self) -> None:
        assert is_manifest(None, "https://c.example/live/index.m3u8")
        assert is_manifest("text/plain", "https://c.example/live/index.m3u8?t=1")

    def test_segment(self) -> None:
        assert not is_manifest("video/mp2t", "https://c.example/live/seg1.ts")
        assert not is_manifest(None, "https://c.example/live/seg1.ts")
