"""Locally persisted TV channel list (``tv.json``)."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

import structlog

from sportsrelay.domain.errors import LocalAssetError

log = structlog.get_logger(__name__)


class JsonChannelCatalog:
    """Reads the channel list from disk on every call.

    The file is edited by hand while the service runs, so nothing is
    cached.  File I/O runs in a worker thread to keep the loop free.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read(self) -> Any:
        return json.loads(self.path.read_text(encoding="utf-8"))

    async def load(self) -> Any:
        try:
            return await asyncio.to_thread(self._read)
        except (OSError, ValueError) as exc:
            log.error("channel_list_unreadable", path=str(self.path), error=repr(exc))
            raise LocalAssetError() from exc
