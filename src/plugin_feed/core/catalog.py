"""Browsing queries over merged plugins: search, filters and sorting."""

import re
from typing import Iterable

from plugin_feed.core.entities import FeedQuery, ProcessedPlugin, SortKey
from plugin_feed.core.search import normalize_for_search

CHINESE = re.compile(r"[\u4e00-\u9fff]")
JAPANESE = re.compile(r"[\u3040-\u30ff\u31f0-\u31ff\u3400-\u4dbf]")
KOREAN = re.compile(r"[\u1100-\u11ff\uac00-\ud7af]")


def matches_search(plugin: ProcessedPlugin, term: str) -> bool:
    """Check if normalized term is contained in any search key."""
    needle = normalize_for_search(term)
    if not needle:
        return True

    meta = plugin.search_meta
    return (
        needle in meta.name
        or needle in meta.description
        or needle in meta.author
        or needle in meta.repo
    )


def matches_api_levels(plugin: ProcessedPlugin, levels: frozenset[int]) -> bool:
    if not levels:
        return True
    return any(level in levels for level in plugin.api_levels)


def is_latin_only(plugin: ProcessedPlugin) -> bool:
    """False if name or description contains Chinese, Japanese or Korean script."""
    for text in (plugin.display_name, plugin.description or ""):
        if CHINESE.search(text) or JAPANESE.search(text) or KOREAN.search(text):
            return False
    return True


def sort_plugins(
    plugins: Iterable[ProcessedPlugin], sort_by: SortKey, descending: bool
) -> list[ProcessedPlugin]:
    """Sort plugins; equal keys fall back to name, ascending."""
    by_name = sorted(plugins, key=lambda p: p.display_name.casefold())

    if sort_by == SortKey.NAME:
        return sorted(by_name, key=lambda p: p.display_name.casefold(), reverse=descending)
    if sort_by == SortKey.AUTHOR:
        return sorted(by_name, key=lambda p: p.display_author.casefold(), reverse=descending)
    return sorted(by_name, key=lambda p: p.last_updated_max_ts, reverse=descending)


def apply_query(plugins: Iterable[ProcessedPlugin], query: FeedQuery) -> list[ProcessedPlugin]:
    """Filter and sort plugins the way the browsing view shows them."""
    selected = [
        plugin
        for plugin in plugins
        if matches_search(plugin, query.search)
        and matches_api_levels(plugin, query.api_levels)
        and (not query.latin_only or is_latin_only(plugin))
    ]
    return sort_plugins(selected, query.sort_by, query.is_descending)
