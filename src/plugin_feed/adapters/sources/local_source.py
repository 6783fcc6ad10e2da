"""Local directory source, reading the feeds from JSON files on disk."""

import json
from pathlib import Path
from typing import Any, Optional

from plugin_feed.adapters.sources.payloads import (
    parse_api_level_info,
    parse_priority_list,
    parse_repository_list,
)
from plugin_feed.core import FeedLoadError, FeedSource, RepositoryDocument


class LocalFeedSource(FeedSource):
    """Read feeds from a data directory."""

    emoji = "📁"
    name = "Local feed"

    def __init__(
        self,
        data_dir: Path,
        plugins_file: str = "plugins.json",
        priority_file: str = "priority-repos.json",
        api_level_file: str = "dalamud-version.json",
    ) -> None:
        self.data_dir = data_dir
        self.plugins_path = data_dir / plugins_file
        self.priority_path = data_dir / priority_file
        self.api_level_path = data_dir / api_level_file

    async def fetch_repositories(self) -> list[RepositoryDocument]:
        try:
            with open(self.plugins_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise FeedLoadError(f"Failed to read plugins: {e}") from e
        except ValueError as e:
            raise FeedLoadError(f"Plugin feed is not valid JSON: {e}") from e

        return parse_repository_list(data)

    async def fetch_priority_urls(self) -> frozenset[str]:
        return parse_priority_list(self._read_optional(self.priority_path))

    async def fetch_current_api_level(self) -> Optional[int]:
        return parse_api_level_info(self._read_optional(self.api_level_path))

    def _read_optional(self, path: Path) -> Any:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError):
            return None
