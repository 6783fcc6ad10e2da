"""Tests for core entities."""

from plugin_feed.core import FeedQuery, PluginRecord, Repository, SortKey
from plugin_feed.core.entities import UNKNOWN_DEVELOPER, Occurrence


def test_repository_from_dict() -> None:
    """Test repository metadata mapping."""
    repo = Repository.from_dict({
        "repo_url": "https://example.com/repo.json",
        "repo_name": "Example Repo",
        "repo_developer_name": "Alice",
        "repo_source_url": "https://github.com/alice/plugins",
        "repo_discord_url": "https://discord.gg/example",
        "plugins": [],
    })

    assert repo.url == "https://example.com/repo.json"
    assert repo.name == "Example Repo"
    assert repo.developer_name == "Alice"
    assert repo.source_url == "https://github.com/alice/plugins"
    assert repo.discord_url == "https://discord.gg/example"


def test_repository_without_url() -> None:
    """Test a document without repository metadata is still accepted."""
    repo = Repository.from_dict({"plugins": []})

    assert repo.url == ""
    assert repo.name == ""
    assert repo.developer_name is None


def test_plugin_record_from_dict() -> None:
    """Test plugin fields are mapped and unknown keys kept as extra."""
    record = PluginRecord.from_dict({
        "InternalName": "NoClippy",
        "Name": "No Clippy",
        "Description": "Removes the clippy",
        "Author": "Bob",
        "RepoUrl": "https://github.com/bob/noclippy",
        "LastUpdate": 1700000000,
        "DalamudApiLevel": "9",
        "is_closed_source": True,
        "IconUrl": "https://example.com/icon.png",
    })

    assert record.internal_name == "NoClippy"
    assert record.name == "No Clippy"
    assert record.author == "Bob"
    assert record.last_update == 1700000000
    assert record.api_level == "9"
    assert record.is_closed_source is True
    assert record.extra == {"IconUrl": "https://example.com/icon.png"}


def test_plugin_record_identity() -> None:
    """Test identity prefers InternalName and falls back to Name."""
    assert PluginRecord(internal_name="Foo", name="Bar").identity == "Foo"
    assert PluginRecord(name="Bar").identity == "Bar"
    assert PluginRecord.from_dict({"InternalName": "", "Name": ""}).identity is None


def test_closed_source_must_be_bool() -> None:
    """Test non-boolean closed-source flags are ignored."""
    assert PluginRecord.from_dict({"Name": "X", "is_closed_source": "yes"}).is_closed_source is None


def test_developer_key_fallbacks() -> None:
    """Test developer key: repo developer, then author, then sentinel."""
    with_dev = Occurrence(
        record=PluginRecord(name="X", author="Bob"),
        repository=Repository(url="https://a.example", developer_name="Alice"),
        index=0,
    )
    with_author = Occurrence(
        record=PluginRecord(name="X", author="Bob"),
        repository=Repository(url="https://a.example"),
        index=1,
    )
    anonymous = Occurrence(
        record=PluginRecord(name="X"),
        repository=Repository(url="https://a.example"),
        index=2,
    )

    assert with_dev.developer_key == "Alice"
    assert with_author.developer_key == "Bob"
    assert anonymous.developer_key == UNKNOWN_DEVELOPER


def test_feed_query_default_order() -> None:
    """Test default sort direction depends on sort key."""
    assert FeedQuery(sort_by=SortKey.UPDATED).is_descending
    assert not FeedQuery(sort_by=SortKey.NAME).is_descending
    assert not FeedQuery(sort_by=SortKey.AUTHOR).is_descending
    assert FeedQuery(sort_by=SortKey.NAME, descending=True).is_descending
