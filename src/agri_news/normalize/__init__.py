# ABOUTME: Normalization of raw WordPress payloads into content entities.
# ABOUTME: Pure functions only; lenient per item, no I/O.

from agri_news.normalize.articles import (
    dedupe_articles,
    filter_articles,
    normalize_post,
    relative_time,
)
from agri_news.normalize.categories import normalize_categories
from agri_news.normalize.html import clean_html
from agri_news.normalize.magazines import extract_issue_info, extract_magazines, is_magazine_issue
from agri_news.normalize.videos import extract_videos, find_youtube_url, normalize_video_post

__all__ = [
    "clean_html",
    "dedupe_articles",
    "extract_issue_info",
    "extract_magazines",
    "extract_videos",
    "filter_articles",
    "find_youtube_url",
    "is_magazine_issue",
    "normalize_categories",
    "normalize_post",
    "normalize_video_post",
    "relative_time",
]
