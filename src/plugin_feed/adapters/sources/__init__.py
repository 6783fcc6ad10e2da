"""Source adapters for loading feeds."""

from plugin_feed.adapters.sources.http_source import HttpFeedSource
from plugin_feed.adapters.sources.local_source import LocalFeedSource

__all__ = ["HttpFeedSource", "LocalFeedSource"]
