"""Business logic use cases."""

import asyncio
from typing import Optional

from plugin_feed.core import (
    AggregatorBranding,
    FeedQuery,
    FeedSnapshot,
    FeedSource,
    ProcessedPlugin,
    process_plugins,
)
from plugin_feed.core.catalog import apply_query


class FeedService:
    """Service for loading feeds and merging them into one plugin list."""

    def __init__(
        self,
        source: FeedSource,
        branding: Optional[AggregatorBranding] = None,
    ) -> None:
        self.source = source
        self.branding = branding

    async def load(self) -> FeedSnapshot:
        """Fetch all feeds and run the merge.

        Raises:
            FeedLoadError: if the primary plugin feed cannot be loaded
        """
        emoji = getattr(self.source, "emoji", "🔍")
        name = getattr(self.source, "name", self.source.__class__.__name__)
        print(f"\n{emoji} Loading: {name}")

        repositories, priority_urls, current_api_level = await asyncio.gather(
            self.source.fetch_repositories(),
            self.source.fetch_priority_urls(),
            self.source.fetch_current_api_level(),
        )

        plugin_count = sum(len(doc.plugins) for doc in repositories)
        print(f"  └─ Repositories: {len(repositories)}, plugin records: {plugin_count}")
        print(f"  └─ Priority repositories: {len(priority_urls)}")
        if current_api_level:
            print(f"  └─ Current API level: {current_api_level}")

        result = process_plugins(repositories, priority_urls, self.branding)

        print(f"✓ Merged plugins: {len(result.plugins)}")
        if result.skipped:
            print(f"⚠️  Unidentifiable records skipped: {result.skipped}")

        return FeedSnapshot(
            result=result,
            priority_urls=priority_urls,
            current_api_level=current_api_level,
        )

    def browse(self, snapshot: FeedSnapshot, query: FeedQuery) -> list[ProcessedPlugin]:
        """Filter and sort a loaded snapshot."""
        return apply_query(snapshot.result.plugins, query)
