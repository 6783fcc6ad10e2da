"""Parsing of raw feed payloads shared by all sources."""

from typing import Any, Optional

from plugin_feed.core import PluginRecord, Repository, RepositoryDocument


def parse_repository_list(data: Any) -> list[RepositoryDocument]:
    """
    Parse the primary feed: a JSON array of repository documents.

    Malformed entries are skipped with a warning. A non-array payload is
    treated as an empty feed.
    """
    if not isinstance(data, list):
        print(f"  ⚠️  Plugin feed is not an array ({type(data).__name__}), treating as empty")
        return []

    documents: list[RepositoryDocument] = []

    for position, entry in enumerate(data):
        if not isinstance(entry, dict):
            print(f"  ⚠️  Repository entry #{position} is not an object, skipped")
            continue

        repository = Repository.from_dict(entry)
        label = repository.url or f"#{position}"

        raw_plugins = entry.get("plugins")
        if not isinstance(raw_plugins, list):
            raw_plugins = []

        plugins = []
        for raw in raw_plugins:
            if not isinstance(raw, dict):
                print(f"  ⚠️  Non-object plugin entry skipped (repo: {label})")
                continue
            plugins.append(PluginRecord.from_dict(raw))

        documents.append(RepositoryDocument(repository=repository, plugins=tuple(plugins)))

    return documents


def parse_priority_list(data: Any) -> frozenset[str]:
    """Parse the trusted repository allowlist; anything malformed is empty."""
    if not isinstance(data, list):
        return frozenset()
    return frozenset(url for url in data if isinstance(url, str) and url)


def parse_api_level_info(data: Any) -> Optional[int]:
    """Extract the current platform API level from ``{"apiLevel": N}``."""
    if not isinstance(data, dict):
        return None

    level = data.get("apiLevel")
    if isinstance(level, bool) or not isinstance(level, int) or level <= 0:
        return None
    return level
