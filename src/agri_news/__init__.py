# ABOUTME: Main package for the Agri News content backend.
# ABOUTME: Exports settings and the normalized content entities.

from agri_news.config import get_settings
from agri_news.errors import ContentLoadError
from agri_news.models import Article, ArticleCategory, Magazine, Video

__all__ = [
    "get_settings",
    "Article",
    "ArticleCategory",
    "ContentLoadError",
    "Magazine",
    "Video",
]
