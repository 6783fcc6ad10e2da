"""Tests for configuration loading."""

from pathlib import Path

from plugin_feed.config import Settings, get_settings, load_config


def test_missing_config_uses_defaults(tmp_path, monkeypatch):
    """Test defaults when no config file exists."""
    monkeypatch.delenv("PLUGIN_FEED_BASE_URL", raising=False)

    settings = get_settings(tmp_path / "missing.yaml")

    assert load_config(tmp_path / "missing.yaml") == {}
    assert settings.base_url is None
    assert settings.data_dir == Path("data")
    assert settings.http.timeout == 30.0
    assert settings.browse.sort_by == "updated"
    assert settings.browse.latin_only is True
    assert settings.browse.order is None


def test_yaml_overrides(tmp_path, monkeypatch):
    """Test YAML sections override defaults."""
    monkeypatch.delenv("PLUGIN_FEED_BASE_URL", raising=False)
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "feeds:\n"
        "  data_dir: feeds\n"
        "  plugins_file: repos.json\n"
        "http:\n"
        "  timeout: 5\n"
        "branding:\n"
        "  aggregator_url_prefixes: [https://agg.example/]\n"
        "  aggregator_keywords: agg\n"
        "browse:\n"
        "  sort_by: name\n"
        "  latin_only: false\n",
        encoding="utf-8",
    )

    settings = get_settings(config_path)

    assert settings.data_dir == Path("feeds")
    assert settings.feeds.plugins_file == "repos.json"
    assert settings.feeds.priority_file == "priority-repos.json"
    assert settings.http.timeout == 5
    assert settings.browse.sort_by == "name"
    assert settings.browse.latin_only is False

    branding = settings.aggregator_branding()
    assert branding.url_prefixes == ("https://agg.example/",)
    assert branding.keywords == "agg"


def test_env_base_url_wins(tmp_path, monkeypatch):
    """Test environment variable overrides YAML base URL."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("feeds:\n  base_url: https://yaml.example\n", encoding="utf-8")
    monkeypatch.setenv("PLUGIN_FEED_BASE_URL", "https://env.example")

    assert get_settings(config_path).base_url == "https://env.example"


def test_default_branding():
    """Test default aggregator branding rules."""
    branding = Settings().aggregator_branding()

    assert "https://puni.sh/" in branding.url_prefixes
    assert branding.contact_url
