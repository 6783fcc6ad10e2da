"""Markdown feed renderer."""

from enum import Enum
from typing import Optional

from plugin_feed.core import FeedRenderer, ProcessedPlugin, time_ago


class BadgeTier(str, Enum):
    """How current an API level badge is."""

    CURRENT = "current"
    PREVIOUS = "previous"
    OUTDATED = "outdated"
    UNKNOWN = "unknown"


BADGE_EMOJI = {
    BadgeTier.CURRENT: "🟢",
    BadgeTier.PREVIOUS: "🟡",
    BadgeTier.OUTDATED: "⚪",
    BadgeTier.UNKNOWN: "⚪",
}


def api_badge_tier(level: int, current_level: Optional[int]) -> BadgeTier:
    """Classify an API level against the current platform level."""
    if not current_level:
        return BadgeTier.UNKNOWN
    if level == current_level:
        return BadgeTier.CURRENT
    if level == current_level - 1:
        return BadgeTier.PREVIOUS
    return BadgeTier.OUTDATED


class MarkdownFeedRenderer(FeedRenderer):
    """Render merged plugins as a markdown document."""

    def render(
        self,
        plugins: list[ProcessedPlugin],
        current_api_level: Optional[int] = None,
        now_ms: Optional[int] = None,
    ) -> str:
        """Render plugins in the given order.

        Without a known current API level, the highest level among the
        rendered plugins is used for badges.
        """
        if not plugins:
            return "# Plugin Feed\n\nNo plugins found."

        if not current_api_level:
            current_api_level = max(
                (level for p in plugins for level in p.api_levels), default=None
            )

        lines = [
            "# Plugin Feed",
            "",
            f"Plugins: {len(plugins)}",
            "",
        ]
        for plugin in plugins:
            lines.extend(self._format_plugin(plugin, current_api_level, now_ms))

        return "\n".join(lines)

    def _format_plugin(
        self,
        plugin: ProcessedPlugin,
        current_api_level: Optional[int],
        now_ms: Optional[int],
    ) -> list[str]:
        """Format single plugin entry."""
        title = plugin.display_name
        if plugin.is_aggregator:
            title = f"{title} ✨"

        lines = [f"### {title}", ""]

        if plugin.display_author:
            lines.append(f"**Author:** {plugin.display_author}")

        if plugin.api_levels:
            badges = " ".join(
                f"{BADGE_EMOJI[api_badge_tier(level, current_api_level)]} API {level}"
                for level in plugin.api_levels
            )
            lines.append(f"**API:** {badges}")

        lines.append(f"**Updated:** {time_ago(plugin.last_updated_max_ts, now_ms)}")
        lines.append("")

        if plugin.description:
            lines.extend([plugin.description, ""])

        links = []
        if plugin.install_url:
            links.append(f"[Install]({plugin.install_url})")
        if plugin.is_closed_source:
            links.append("🔒 Closed Source")
        elif plugin.source_link:
            links.append(f"[Source]({plugin.source_link})")
        if plugin.contact_url:
            links.append(f"[Discord]({plugin.contact_url})")

        if links:
            lines.append(" | ".join(links))
            lines.append("")
        lines.append("---")
        lines.append("")

        return lines
