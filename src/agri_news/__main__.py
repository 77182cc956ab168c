# ABOUTME: CLI entry point for the Agri News content backend.
# ABOUTME: Provides subcommands: articles, magazines, videos, categories, refresh, bookmarks, serve.

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Awaitable, Callable
from typing import Any

import structlog
from pydantic import BaseModel

from agri_news.config import get_settings
from agri_news.errors import ContentLoadError
from agri_news.normalize import filter_articles
from agri_news.services import BookmarkStore, ContentFeeds, ContentService
from agri_news.wordpress import WordPressClient


def configure_logging() -> None:
    """Configure structlog for console or JSON output."""
    settings = get_settings()

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    if settings.log_format == "json":
        structlog.configure(
            processors=[
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.add_log_level,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(log_level),
            logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        )
    else:
        structlog.configure(
            processors=[
                structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
                structlog.processors.add_log_level,
                structlog.dev.ConsoleRenderer(colors=True),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(log_level),
            logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        )


def _print_json(items: list[BaseModel]) -> None:
    print(json.dumps([item.model_dump(mode="json", by_alias=True) for item in items], indent=2))


def _run_fetch(fetch: Callable[[ContentService], Awaitable[list[Any]]]) -> list[Any]:
    """Run one fetch against a fresh client and close it afterwards."""

    async def run() -> list[Any]:
        async with WordPressClient() as client:
            return await fetch(ContentService(client))

    return asyncio.run(run())


def _fetch_command(
    name: str,
    fetch: Callable[[ContentService], Awaitable[list[Any]]],
    args: argparse.Namespace,
    render: Callable[[Any], str],
    transform: Callable[[list[Any]], list[Any]] | None = None,
) -> int:
    log = structlog.get_logger()
    try:
        items = _run_fetch(fetch)
    except ContentLoadError as e:
        log.error(f"cmd_{name}_failed", endpoint=e.endpoint, reason=e.reason)
        print(f"\nFailed to load {name}: {e.reason}\n")
        return 1

    if transform is not None:
        items = transform(items)
    if args.json:
        _print_json(items)
    else:
        for item in items:
            print(render(item))
        print(f"\n{len(items)} {name}")
    return 0


def cmd_articles(args: argparse.Namespace) -> int:
    """List latest articles, optionally by category and search term."""

    async def fetch(service: ContentService) -> list[Any]:
        if args.category is not None:
            return await service.fetch_articles_by_category(args.category)
        return await service.fetch_articles()

    return _fetch_command(
        "articles",
        fetch,
        args,
        lambda a: f"[{a.id}] {a.title} ({a.category}, {a.date})",
        transform=lambda articles: filter_articles(articles, args.search or ""),
    )


def cmd_magazines(args: argparse.Namespace) -> int:
    """List magazine issues, newest first."""
    return _fetch_command(
        "magazines",
        lambda service: service.fetch_magazines(),
        args,
        lambda m: f"[{m.id}] {m.issue_label} - {m.display_title}: {m.pdf_url}",
    )


def cmd_videos(args: argparse.Namespace) -> int:
    """List videos with their watch URLs."""
    return _fetch_command(
        "videos",
        lambda service: service.fetch_videos(),
        args,
        lambda v: f"[{v.id}] {v.title}: {v.watch_url}",
    )


def cmd_categories(args: argparse.Namespace) -> int:
    """List non-empty categories."""
    return _fetch_command(
        "categories",
        lambda service: service.fetch_categories(),
        args,
        lambda c: f"[{c.id}] {c.name} ({c.count}) {c.icon}",
    )


def cmd_refresh(_args: argparse.Namespace) -> int:
    """Refresh all feeds concurrently and report per-feed status."""
    log = structlog.get_logger()

    async def run() -> ContentFeeds:
        async with WordPressClient() as client:
            feeds = ContentFeeds(ContentService(client))
            await feeds.refresh_all()
            return feeds

    feeds = asyncio.run(run())

    print("\n=== Agri News Feeds ===\n")
    for feed in feeds.all:
        if feed.last_error:
            print(f"  {feed.label}: ERROR {feed.last_error}")
        else:
            print(f"  {feed.label}: {len(feed.items)} items")
    print()

    failed = [feed.label for feed in feeds.all if feed.last_error]
    if failed:
        log.warning("cmd_refresh_partial", failed=failed)
        return 1
    log.info("cmd_refresh_complete")
    return 0


def cmd_bookmarks(args: argparse.Namespace) -> int:
    """List, remove or clear bookmarks."""
    store = BookmarkStore()

    if args.clear:
        store.clear()
        print("Bookmarks cleared.")
        return 0

    if args.remove is not None:
        if not store.remove(args.remove):
            print(f"No bookmark with id {args.remove}.")
            return 1
        print(f"Removed bookmark {args.remove}.")
        return 0

    articles = store.bookmarks
    if args.json:
        _print_json(articles)
        return 0

    for article in articles:
        print(f"[{article.id}] {article.title} ({article.link})")
    print(f"\n{len(articles)} bookmarks")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the JSON API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "agri_news.web.app:app",
        host=args.host or settings.api_host,
        port=args.port or settings.api_port,
    )
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="agri_news",
        description="Agri News - normalized WordPress content for the news reader",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    articles_parser = subparsers.add_parser("articles", help="List latest articles")
    articles_parser.add_argument("--category", type=int, help="WordPress category id")
    articles_parser.add_argument("--search", type=str, help="Filter by title, excerpt or category")
    articles_parser.add_argument("--json", action="store_true", help="Print JSON")

    for name, help_text in [
        ("magazines", "List magazine issues"),
        ("videos", "List videos"),
        ("categories", "List categories with articles"),
    ]:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--json", action="store_true", help="Print JSON")

    subparsers.add_parser("refresh", help="Refresh all feeds and show status")

    bookmarks_parser = subparsers.add_parser("bookmarks", help="Manage saved articles")
    bookmarks_group = bookmarks_parser.add_mutually_exclusive_group()
    bookmarks_group.add_argument("--remove", type=int, metavar="ID", help="Remove a bookmark")
    bookmarks_group.add_argument("--clear", action="store_true", help="Remove all bookmarks")
    bookmarks_parser.add_argument("--json", action="store_true", help="Print JSON")

    serve_parser = subparsers.add_parser("serve", help="Run the JSON API")
    serve_parser.add_argument("--host", type=str, help="Bind address")
    serve_parser.add_argument("--port", type=int, help="Bind port")

    return parser


def main() -> int:
    """Main entry point."""
    configure_logging()

    parser = create_parser()
    args = parser.parse_args()

    commands = {
        "articles": cmd_articles,
        "magazines": cmd_magazines,
        "videos": cmd_videos,
        "categories": cmd_categories,
        "refresh": cmd_refresh,
        "bookmarks": cmd_bookmarks,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
