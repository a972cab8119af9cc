from .cached_listing import CachedListingUseCase, football_payload, raw_payload
from .stream_relay import ManifestResult, SegmentResult, StreamRelayUseCase

__all__ = [
    "CachedListingUseCase",
    "ManifestResult",
    "SegmentResult",
    "StreamRelayUseCase",
    "football_payload",
    "raw_payload",
]
