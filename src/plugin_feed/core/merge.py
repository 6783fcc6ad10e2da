"""Merge engine: groups raw repository records into canonical plugins.

Stages run strictly downstream and each returns new immutable collections:

    group_by_identity -> dedupe_by_developer -> resolve_priority
    -> build_processed_plugin

Ties that the ranking rules leave open are settled by discovery order
(repository order in the feed, then plugin order within the repository):
the earliest discovered occurrence wins.
"""

import math
import re
from functools import reduce
from typing import Any, Iterable, Optional

from plugin_feed.core.entities import (
    AggregatorBranding,
    DeveloperGroup,
    MergeResult,
    Occurrence,
    ProcessedPlugin,
    RepositoryDocument,
    SearchMeta,
)
from plugin_feed.core.search import normalize_for_search
from plugin_feed.core.timestamps import normalize_timestamp

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_api_level(value: Any) -> int:
    """Parse a declared API level; 0 means absent or invalid."""
    if value is None or isinstance(value, bool):
        return 0

    if isinstance(value, int):
        level = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            return 0
        level = int(value)
    elif isinstance(value, str):
        match = _LEADING_INT.match(value)
        if not match:
            return 0
        level = int(match.group(1))
    else:
        return 0

    return level if level > 0 else 0


def group_by_identity(
    documents: Iterable[RepositoryDocument],
) -> tuple[dict[str, tuple[Occurrence, ...]], int]:
    """Group every plugin occurrence by InternalName (or Name).

    Returns:
        Tuple of (identity -> occurrences in discovery order, skipped count)
    """
    groups: dict[str, list[Occurrence]] = {}
    skipped = 0
    index = 0

    for document in documents:
        for record in document.plugins:
            identity = record.identity
            if not identity:
                skipped += 1
                print(
                    f"  ⚠️  Plugin without InternalName and Name skipped "
                    f"(repo: {document.repository.url})"
                )
                continue

            groups.setdefault(identity, []).append(
                Occurrence(record=record, repository=document.repository, index=index)
            )
            index += 1

    return {identity: tuple(occs) for identity, occs in groups.items()}, skipped


def _pick_better(best: Occurrence, candidate: Occurrence) -> Occurrence:
    best_api = parse_api_level(best.record.api_level)
    candidate_api = parse_api_level(candidate.record.api_level)

    if candidate_api > best_api:
        return candidate
    if candidate_api == best_api:
        if normalize_timestamp(candidate.record.last_update) > normalize_timestamp(
            best.record.last_update
        ):
            return candidate
    return best


def _reduce_developer(key: str, occurrences: tuple[Occurrence, ...]) -> DeveloperGroup:
    best = reduce(_pick_better, occurrences[1:], occurrences[0])
    levels = frozenset(
        level
        for level in (parse_api_level(occ.record.api_level) for occ in occurrences)
        if level
    )
    freshest = max(normalize_timestamp(occ.record.last_update) for occ in occurrences)

    return DeveloperGroup(
        key=key,
        best=best,
        api_levels=levels,
        max_last_update=freshest,
    )


def dedupe_by_developer(occurrences: Iterable[Occurrence]) -> tuple[DeveloperGroup, ...]:
    """Reduce one identity's occurrences to one representative per developer."""
    by_developer: dict[str, list[Occurrence]] = {}
    for occ in sorted(occurrences, key=lambda o: o.index):
        by_developer.setdefault(occ.developer_key, []).append(occ)

    return tuple(
        _reduce_developer(key, tuple(occs)) for key, occs in by_developer.items()
    )


def _priority_rank(group: DeveloperGroup) -> tuple[int, int, bool, int]:
    return (
        group.max_api_level,
        group.max_last_update,
        bool(group.best.record.repo_url),
        -group.best.index,
    )


def resolve_priority(
    groups: tuple[DeveloperGroup, ...], priority_urls: frozenset[str]
) -> tuple[DeveloperGroup, ...]:
    """Collapse an identity to its best trusted group, if it has any.

    Without a trusted group every developer's version is kept.
    """
    trusted = [g for g in groups if g.best.repository.url in priority_urls]
    if not trusted:
        return groups
    return (max(trusted, key=_priority_rank),)


def build_processed_plugin(
    group: DeveloperGroup, branding: Optional[AggregatorBranding] = None
) -> ProcessedPlugin:
    """Assemble the display-ready plugin for a winning developer group."""
    record = group.best.record
    repository = group.best.repository
    branding = branding or AggregatorBranding()

    own_level = parse_api_level(record.api_level)
    levels = set(group.api_levels)
    if own_level:
        levels.add(own_level)

    is_aggregator = branding.matches(repository)
    repo_label = repository.name
    if is_aggregator and branding.keywords:
        repo_label = f"{repo_label} {branding.keywords}"

    contact_url = repository.discord_url
    if is_aggregator and branding.contact_url:
        contact_url = branding.contact_url

    return ProcessedPlugin(
        identity=record.identity or "",
        internal_name=record.internal_name,
        name=record.name,
        description=record.description,
        author=record.author,
        repo_url=record.repo_url,
        last_update=record.last_update,
        api_level=record.api_level,
        is_closed_source=record.is_closed_source,
        repository=repository,
        api_levels=tuple(sorted(levels, reverse=True)),
        last_updated_max_ts=group.max_last_update,
        search_meta=SearchMeta(
            name=normalize_for_search(record.name or record.internal_name),
            description=normalize_for_search(record.description),
            author=normalize_for_search(record.author),
            repo=normalize_for_search(repo_label),
        ),
        is_aggregator=is_aggregator,
        contact_url=contact_url,
        extra=dict(record.extra),
    )


def process_plugins(
    documents: Iterable[RepositoryDocument],
    priority_urls: Iterable[str] = (),
    branding: Optional[AggregatorBranding] = None,
) -> MergeResult:
    """Run the full merge over loaded repository documents."""
    trusted = frozenset(priority_urls)
    grouped, skipped = group_by_identity(documents)

    plugins = tuple(
        build_processed_plugin(group, branding)
        for occurrences in grouped.values()
        for group in resolve_priority(dedupe_by_developer(occurrences), trusted)
    )
    api_levels = tuple(
        sorted({level for plugin in plugins for level in plugin.api_levels}, reverse=True)
    )

    return MergeResult(plugins=plugins, api_levels=api_levels, skipped=skipped)
