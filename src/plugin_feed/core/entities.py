"""Core domain entities."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

UNKNOWN_DEVELOPER = "Unknown Developer"

# Raw plugin keys mapped onto PluginRecord fields
_PLUGIN_KEYS = {
    "InternalName": "internal_name",
    "Name": "name",
    "Description": "description",
    "Author": "author",
    "RepoUrl": "repo_url",
    "LastUpdate": "last_update",
    "DalamudApiLevel": "api_level",
    "is_closed_source": "is_closed_source",
}


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text if text else None


class SortKey(str, Enum):
    """Sort key for browsing the feed."""

    NAME = "name"
    UPDATED = "updated"
    AUTHOR = "author"


@dataclass(frozen=True)
class Repository:
    """Repository metadata (a repository document without its plugin list)."""

    url: str = ""
    name: str = ""
    developer_name: Optional[str] = None
    source_url: Optional[str] = None
    discord_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Repository":
        return cls(
            url=str(data.get("repo_url") or ""),
            name=str(data.get("repo_name") or ""),
            developer_name=_optional_str(data.get("repo_developer_name")),
            source_url=_optional_str(data.get("repo_source_url")),
            discord_url=_optional_str(data.get("repo_discord_url")),
        )


@dataclass(frozen=True)
class PluginRecord:
    """Raw plugin entry as published by a repository."""

    internal_name: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    author: Optional[str] = None
    repo_url: Optional[str] = None
    last_update: Any = None
    api_level: Any = None
    is_closed_source: Optional[bool] = None
    extra: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @property
    def identity(self) -> Optional[str]:
        """Grouping key: InternalName, falling back to Name."""
        return self.internal_name or self.name

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PluginRecord":
        known: dict[str, Any] = {}
        extra: dict[str, Any] = {}
        for key, value in data.items():
            if key in _PLUGIN_KEYS:
                known[_PLUGIN_KEYS[key]] = value
            else:
                extra[key] = value

        closed = known.get("is_closed_source")
        return cls(
            internal_name=_optional_str(known.get("internal_name")),
            name=_optional_str(known.get("name")),
            description=_optional_str(known.get("description")),
            author=_optional_str(known.get("author")),
            repo_url=_optional_str(known.get("repo_url")),
            last_update=known.get("last_update"),
            api_level=known.get("api_level"),
            is_closed_source=closed if isinstance(closed, bool) else None,
            extra=extra,
        )


@dataclass(frozen=True)
class RepositoryDocument:
    """One distributed source feed: repository metadata plus its plugins."""

    repository: Repository
    plugins: tuple[PluginRecord, ...] = ()


@dataclass(frozen=True)
class Occurrence:
    """A plugin record paired with the repository that carried it."""

    record: PluginRecord
    repository: Repository
    index: int

    @property
    def developer_key(self) -> str:
        return self.repository.developer_name or self.record.author or UNKNOWN_DEVELOPER


@dataclass(frozen=True)
class DeveloperGroup:
    """Occurrences of one plugin identity reduced per publishing developer."""

    key: str
    best: Occurrence
    api_levels: frozenset[int]
    max_last_update: int

    @property
    def max_api_level(self) -> int:
        return max(self.api_levels, default=0)


@dataclass(frozen=True)
class AggregatorBranding:
    """Known aggregator detection rules."""

    url_prefixes: tuple[str, ...] = ()
    keywords: str = ""
    contact_url: Optional[str] = None

    def matches(self, repository: Repository) -> bool:
        return any(repository.url.startswith(prefix) for prefix in self.url_prefixes)


@dataclass(frozen=True)
class SearchMeta:
    """Pre-normalized search keys."""

    name: str
    description: str
    author: str
    repo: str


@dataclass(frozen=True)
class ProcessedPlugin:
    """Canonical plugin entity exposed to presentation."""

    identity: str
    internal_name: Optional[str]
    name: Optional[str]
    description: Optional[str]
    author: Optional[str]
    repo_url: Optional[str]
    last_update: Any
    api_level: Any
    is_closed_source: Optional[bool]
    repository: Repository
    api_levels: tuple[int, ...]
    last_updated_max_ts: int
    search_meta: SearchMeta
    is_aggregator: bool = False
    contact_url: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @property
    def display_name(self) -> str:
        return self.name or self.internal_name or ""

    @property
    def display_author(self) -> str:
        return self.author or self.repository.developer_name or ""

    @property
    def install_url(self) -> str:
        return self.repository.url

    @property
    def source_link(self) -> Optional[str]:
        return self.repo_url or self.repository.source_url


@dataclass(frozen=True)
class MergeResult:
    """Output of one merge pass."""

    plugins: tuple[ProcessedPlugin, ...]
    api_levels: tuple[int, ...]
    skipped: int = 0


@dataclass(frozen=True)
class FeedQuery:
    """Browsing query applied to merged plugins."""

    search: str = ""
    api_levels: frozenset[int] = frozenset()
    latin_only: bool = True
    sort_by: SortKey = SortKey.UPDATED
    descending: Optional[bool] = None

    @property
    def is_descending(self) -> bool:
        if self.descending is not None:
            return self.descending
        return self.sort_by == SortKey.UPDATED


@dataclass(frozen=True)
class FeedSnapshot:
    """Everything one load produces."""

    result: MergeResult
    priority_urls: frozenset[str]
    current_api_level: Optional[int] = None
