"""Renderers for merged plugins."""

from plugin_feed.adapters.render.markdown_renderer import (
    BadgeTier,
    MarkdownFeedRenderer,
    api_badge_tier,
)

__all__ = ["BadgeTier", "MarkdownFeedRenderer", "api_badge_tier"]
