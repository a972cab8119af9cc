"""Channel catalog port - the locally persisted TV channel list."""

from __future__ import annotations

from typing import Any, Protocol


class ChannelCatalogPort(Protocol):
    async def load(self) -> Any:
        """Return the parsed channel list. Raises ``LocalAssetError``."""
        ...
