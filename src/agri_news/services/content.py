# ABOUTME: Fetch-and-normalize operations per content type, plus refreshable feed state.
# ABOUTME: Feeds expose is_loading / last_error / items and keep old items when a refresh fails.

import asyncio
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

import structlog

from agri_news.errors import ContentLoadError
from agri_news.models import Article, ArticleCategory, Magazine, Video
from agri_news.normalize import (
    extract_magazines,
    extract_videos,
    normalize_categories,
    normalize_post,
)
from agri_news.wordpress.client import WordPressClient

log = structlog.get_logger()

T = TypeVar("T")


class ContentService:
    """Fetches WordPress content and returns normalized entities.

    Every method raises ContentLoadError when the batch cannot be loaded.
    """

    def __init__(self, client: WordPressClient) -> None:
        self.client = client

    async def fetch_articles(self) -> list[Article]:
        posts = await self.client.fetch_posts()
        articles = [normalize_post(post) for post in posts]
        log.info("articles_fetched", count=len(articles))
        return articles

    async def fetch_articles_by_category(self, category_id: int) -> list[Article]:
        posts = await self.client.fetch_posts(category_id=category_id)
        articles = [normalize_post(post) for post in posts]
        log.info("category_articles_fetched", category_id=category_id, count=len(articles))
        return articles

    async def fetch_magazines(self) -> list[Magazine]:
        items = await self.client.fetch_media()
        magazines = extract_magazines(items)
        log.info("magazines_fetched", media_items=len(items), count=len(magazines))
        return magazines

    async def fetch_videos(self) -> list[Video]:
        posts = await self.client.fetch_video_posts()
        videos = extract_videos(posts)
        log.info("videos_fetched", posts=len(posts), count=len(videos))
        return videos

    async def fetch_categories(self) -> list[ArticleCategory]:
        categories = normalize_categories(await self.client.fetch_categories())
        log.info("categories_fetched", count=len(categories))
        return categories


class ContentFeed(Generic[T]):
    """Refreshable list with loading and error state.

    A failed refresh sets last_error and leaves the previous items in place.
    """

    def __init__(self, label: str, loader: Callable[[], Awaitable[list[T]]]) -> None:
        self.label = label
        self._loader = loader
        self.items: list[T] = []
        self.is_loading = False
        self.last_error: str | None = None

    async def refresh(self) -> bool:
        """Reload the feed. Returns True on success."""
        self.is_loading = True
        self.last_error = None
        try:
            items = await self._loader()
        except ContentLoadError as e:
            self.last_error = f"Failed to load {self.label}: {e.reason}"
            log.warning("feed_refresh_failed", feed=self.label, error=self.last_error)
            return False
        finally:
            self.is_loading = False

        self.items = items
        return True


class ContentFeeds:
    """The four independent top-level feeds of the reader."""

    def __init__(self, service: ContentService) -> None:
        self.articles: ContentFeed[Article] = ContentFeed("news", service.fetch_articles)
        self.magazines: ContentFeed[Magazine] = ContentFeed("magazines", service.fetch_magazines)
        self.videos: ContentFeed[Video] = ContentFeed("videos", service.fetch_videos)
        self.categories: ContentFeed[ArticleCategory] = ContentFeed(
            "categories", service.fetch_categories
        )

    @property
    def all(self) -> list[ContentFeed]:
        return [self.articles, self.magazines, self.videos, self.categories]

    async def refresh_all(self) -> dict[str, bool]:
        """Refresh every feed concurrently; returns success per feed label."""
        feeds = self.all
        results = await asyncio.gather(*(feed.refresh() for feed in feeds), return_exceptions=True)

        outcome: dict[str, bool] = {}
        for feed, result in zip(feeds, results, strict=True):
            if isinstance(result, Exception):
                feed.last_error = f"Failed to load {feed.label}: {result}"
                log.error("feed_refresh_crashed", feed=feed.label, error=repr(result))
                result = False
            outcome[feed.label] = result
        return outcome
