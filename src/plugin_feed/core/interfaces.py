"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from typing import Optional

from plugin_feed.core.entities import ProcessedPlugin, RepositoryDocument


class FeedSource(ABC):
    """Interface for loading the raw feeds."""

    @abstractmethod
    async def fetch_repositories(self) -> list[RepositoryDocument]:
        """Fetch repository documents. Raises FeedLoadError on failure."""
        pass

    @abstractmethod
    async def fetch_priority_urls(self) -> frozenset[str]:
        """Fetch the trusted repository allowlist (empty if unavailable)."""
        pass

    @abstractmethod
    async def fetch_current_api_level(self) -> Optional[int]:
        """Fetch the current platform API level (None if unavailable)."""
        pass


class FeedRenderer(ABC):
    """Interface for rendering merged plugins."""

    @abstractmethod
    def render(
        self,
        plugins: list[ProcessedPlugin],
        current_api_level: Optional[int] = None,
        now_ms: Optional[int] = None,
    ) -> str:
        """Render plugins to text."""
        pass
