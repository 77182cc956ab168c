# ABOUTME: Services layer for content fetching and bookmark persistence.
# ABOUTME: Combines the WordPress client with normalizers and owns per-feed state.

from agri_news.services.bookmarks import BookmarkStore
from agri_news.services.content import ContentFeed, ContentFeeds, ContentService

__all__ = ["BookmarkStore", "ContentFeed", "ContentFeeds", "ContentService"]
