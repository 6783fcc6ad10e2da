"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from plugin_feed.core import AggregatorBranding, SortKey


@dataclass
class FeedsConfig:
    """Feed locations."""
    base_url: Optional[str] = None
    data_dir: Path = Path("data")
    plugins_file: str = "plugins.json"
    priority_file: str = "priority-repos.json"
    api_level_file: str = "dalamud-version.json"


@dataclass
class HttpConfig:
    """HTTP client settings."""
    timeout: float = 30.0
    user_agent: str = "plugin-feed"


@dataclass
class BrandingConfig:
    """Known aggregator branding."""
    aggregator_url_prefixes: list[str] = field(default_factory=lambda: [
        "https://puni.sh/",
        "https://love.puni.sh/",
    ])
    aggregator_keywords: str = "punish puni.sh"
    aggregator_contact_url: Optional[str] = "https://discord.gg/punishxiv"


@dataclass
class BrowseConfig:
    """Default browsing options."""
    sort_by: str = SortKey.UPDATED.value
    order: Optional[str] = None
    latin_only: bool = True
    page_size: int = 50


@dataclass
class Settings:
    """Application settings."""

    feeds: FeedsConfig = field(default_factory=FeedsConfig)
    http: HttpConfig = field(default_factory=HttpConfig)
    branding: BrandingConfig = field(default_factory=BrandingConfig)
    browse: BrowseConfig = field(default_factory=BrowseConfig)

    @property
    def base_url(self) -> Optional[str]:
        return self.feeds.base_url

    @property
    def data_dir(self) -> Path:
        return self.feeds.data_dir

    def aggregator_branding(self) -> AggregatorBranding:
        return AggregatorBranding(
            url_prefixes=tuple(self.branding.aggregator_url_prefixes),
            keywords=self.branding.aggregator_keywords,
            contact_url=self.branding.aggregator_contact_url,
        )


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)
    settings = Settings()

    if "feeds" in config:
        for key, value in config["feeds"].items():
            if key == "data_dir":
                value = Path(value)
            setattr(settings.feeds, key, value)

    if "http" in config:
        for key, value in config["http"].items():
            setattr(settings.http, key, value)

    if "branding" in config:
        for key, value in config["branding"].items():
            setattr(settings.branding, key, value)

    if "browse" in config:
        for key, value in config["browse"].items():
            setattr(settings.browse, key, value)

    # Environment wins over YAML for deployment-specific values
    base_url = os.getenv("PLUGIN_FEED_BASE_URL")
    if base_url:
        settings.feeds.base_url = base_url

    return settings
