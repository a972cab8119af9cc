from .cache import ScrapeCachePort
from .channels import ChannelCatalogPort
from .data_source import DataSourcePort
from .upstream import UpstreamBody, UpstreamFetcherPort

__all__ = [
    "ChannelCatalogPort",
    "DataSourcePort",
    "ScrapeCachePort",
    "UpstreamBody",
    "UpstreamFetcherPort",
]
