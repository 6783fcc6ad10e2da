"""HTTP source for the published plugin feeds."""

from typing import Any, Optional

import httpx

from plugin_feed.adapters.sources.payloads import (
    parse_api_level_info,
    parse_priority_list,
    parse_repository_list,
)
from plugin_feed.core import FeedLoadError, FeedSource, RepositoryDocument


class HttpFeedSource(FeedSource):
    """Fetch feeds from a static site (``<base_url>/<file>``)."""

    emoji = "🌐"
    name = "HTTP feed"

    def __init__(
        self,
        base_url: str,
        plugins_file: str = "plugins.json",
        priority_file: str = "priority-repos.json",
        api_level_file: str = "dalamud-version.json",
        timeout: float = 30.0,
        user_agent: str = "plugin-feed",
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.plugins_url = f"{self.base_url}/{plugins_file}"
        self.priority_url = f"{self.base_url}/{priority_file}"
        self.api_level_url = f"{self.base_url}/{api_level_file}"
        self.timeout = timeout
        self.user_agent = user_agent

    async def fetch_repositories(self) -> list[RepositoryDocument]:
        """Fetch the plugin feed. Any failure here is fatal."""
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            try:
                response = await client.get(self.plugins_url, headers=self._get_headers())
                response.raise_for_status()
                data = response.json()
            except httpx.HTTPError as e:
                raise FeedLoadError(f"Failed to fetch plugins: {e}") from e
            except ValueError as e:
                raise FeedLoadError(f"Plugin feed is not valid JSON: {e}") from e

        return parse_repository_list(data)

    async def fetch_priority_urls(self) -> frozenset[str]:
        return parse_priority_list(await self._fetch_optional(self.priority_url))

    async def fetch_current_api_level(self) -> Optional[int]:
        return parse_api_level_info(await self._fetch_optional(self.api_level_url))

    async def _fetch_optional(self, url: str) -> Any:
        """Fetch an optional JSON document; None on any failure."""
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            try:
                response = await client.get(url, headers=self._get_headers())
                if response.status_code != 200:
                    return None
                return response.json()
            except (httpx.HTTPError, ValueError):
                return None

    def _get_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }
