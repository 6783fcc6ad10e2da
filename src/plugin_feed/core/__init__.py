"""Core domain layer."""

from plugin_feed.core.entities import (
    AggregatorBranding,
    DeveloperGroup,
    FeedQuery,
    FeedSnapshot,
    MergeResult,
    Occurrence,
    PluginRecord,
    ProcessedPlugin,
    Repository,
    RepositoryDocument,
    SearchMeta,
    SortKey,
)
from plugin_feed.core.exceptions import FeedLoadError
from plugin_feed.core.interfaces import FeedRenderer, FeedSource
from plugin_feed.core.merge import process_plugins
from plugin_feed.core.search import normalize_for_search
from plugin_feed.core.timestamps import normalize_timestamp, time_ago

__all__ = [
    "AggregatorBranding",
    "DeveloperGroup",
    "FeedQuery",
    "FeedSnapshot",
    "MergeResult",
    "Occurrence",
    "PluginRecord",
    "ProcessedPlugin",
    "Repository",
    "RepositoryDocument",
    "SearchMeta",
    "SortKey",
    "FeedLoadError",
    "FeedRenderer",
    "FeedSource",
    "process_plugins",
    "normalize_for_search",
    "normalize_timestamp",
    "time_ago",
]
