"""CLI entry point for plugin feed."""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from plugin_feed.adapters.render import MarkdownFeedRenderer
from plugin_feed.adapters.sources import HttpFeedSource, LocalFeedSource
from plugin_feed.config import Settings, get_settings
from plugin_feed.core import FeedLoadError, FeedQuery, FeedSource, SortKey
from plugin_feed.use_cases import FeedService


def main(
    search: str = typer.Option("", "--search", "-s", help="Search name, description, author or repository"),
    api_level: list[int] = typer.Option([], "--api-level", "-a", help="Only plugins supporting this API level"),
    sort: Optional[SortKey] = typer.Option(None, "--sort", help="Sort key"),
    order: Optional[str] = typer.Option(None, "--order", help="Sort order: asc or desc"),
    all_languages: bool = typer.Option(False, "--all-languages", help="Include non-Latin plugins"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Maximum plugins to show"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write markdown to file"),
    config: Path = typer.Option(Path("config.yaml"), "--config", help="Config file"),
) -> None:
    """Load plugin repositories and show the merged feed."""
    asyncio.run(async_run(search, api_level, sort, order, all_languages, limit, output, config))


def app() -> None:
    """CLI entry point."""
    typer.run(main)


def build_source(settings: Settings) -> FeedSource:
    """Pick the HTTP source when a base URL is configured, else local files."""
    feeds = settings.feeds
    if feeds.base_url:
        return HttpFeedSource(
            base_url=feeds.base_url,
            plugins_file=feeds.plugins_file,
            priority_file=feeds.priority_file,
            api_level_file=feeds.api_level_file,
            timeout=settings.http.timeout,
            user_agent=settings.http.user_agent,
        )
    return LocalFeedSource(
        data_dir=feeds.data_dir,
        plugins_file=feeds.plugins_file,
        priority_file=feeds.priority_file,
        api_level_file=feeds.api_level_file,
    )


async def async_run(
    search: str,
    api_level: list[int],
    sort: Optional[SortKey],
    order: Optional[str],
    all_languages: bool,
    limit: Optional[int],
    output: Optional[Path],
    config: Path,
) -> None:
    """Async implementation of run command."""
    settings = get_settings(config)
    order = order or settings.browse.order

    if order is not None and order.lower() not in ("asc", "desc"):
        print(f"❌ Unknown sort order: {order} (use asc or desc)")
        raise typer.Exit(code=2)

    if limit is not None and limit < 0:
        print(f"❌ Limit cannot be negative: {limit}")
        raise typer.Exit(code=2)

    print("\n" + "=" * 70)
    print("🧩 PLUGIN FEED")
    print("=" * 70)

    service = FeedService(
        source=build_source(settings),
        branding=settings.aggregator_branding(),
    )

    try:
        snapshot = await service.load()
    except FeedLoadError as e:
        print(f"\n❌ Error loading plugins: {e}")
        raise typer.Exit(code=1)

    query = FeedQuery(
        search=search,
        api_levels=frozenset(api_level),
        latin_only=settings.browse.latin_only and not all_languages,
        sort_by=sort or SortKey(settings.browse.sort_by),
        descending=None if order is None else order.lower() == "desc",
    )
    plugins = service.browse(snapshot, query)

    print(f"\n⚙️  Query:")
    if search:
        print(f"  • Search: {search}")
    if api_level:
        print(f"  • API levels: {', '.join(str(level) for level in sorted(api_level))}")
    print(f"  • Sort: {query.sort_by.value} ({'desc' if query.is_descending else 'asc'})")
    print(f"  • Matching: {len(plugins)} of {len(snapshot.result.plugins)}")
    if snapshot.result.api_levels:
        print(f"  • Available API levels: {', '.join(str(level) for level in snapshot.result.api_levels)}")

    shown = plugins[: limit if limit is not None else settings.browse.page_size]
    markdown = MarkdownFeedRenderer().render(shown, snapshot.current_api_level)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(markdown, encoding="utf-8")
        print(f"\n📄 Feed saved to {output}")
    else:
        print()
        print(markdown)


if __name__ == "__main__":
    app()
