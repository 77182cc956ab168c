# ABOUTME: WordPress REST API access layer.
# ABOUTME: Raw payload schemas and the async HTTP client.

from agri_news.wordpress.client import WordPressClient
from agri_news.wordpress.schemas import WPCategory, WPMediaItem, WPPost, WPVideoPost

__all__ = ["WordPressClient", "WPCategory", "WPMediaItem", "WPPost", "WPVideoPost"]
