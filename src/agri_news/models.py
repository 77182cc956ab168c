# ABOUTME: Pydantic models for the normalized content entities.
# ABOUTME: Defines Article, Magazine, Video, ArticleCategory and the API response envelopes.

import re

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

YOUTUBE_THUMBNAIL_URL = "https://img.youtube.com/vi/{video_id}/hqdefault.jpg"
YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v={video_id}"

# Tried in order, first match wins. The lookahead rejects tokens longer than 11 chars.
YOUTUBE_ID_PATTERNS = [
    re.compile(
        r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)"
        r"([a-zA-Z0-9_-]{11})(?![a-zA-Z0-9_-])",
        re.IGNORECASE,
    ),
    re.compile(r"youtube\.com/watch\?.*v=([a-zA-Z0-9_-]{11})(?![a-zA-Z0-9_-])", re.IGNORECASE),
]

DEFAULT_CATEGORY_ICON = "doc.text.fill"

CATEGORY_ICONS: dict[str, str] = {
    "agribusiness": "building.2.fill",
    "livestock": "hare.fill",
    "crops": "leaf.fill",
    "business": "briefcase.fill",
    "beef": "fork.knife",
    "poultry": "bird.fill",
    "dairy": "drop.fill",
    "beans": "circle.grid.3x3.fill",
    "grains": "circle.hexagongrid.fill",
    "horticulture": "camera.macro",
    "fruits": "apple.logo",
    "goat": "pawprint.fill",
    "pork": "fork.knife",
    "fish": "fish.fill",
    "forestry": "tree.fill",
    "sugar": "cube.fill",
    "cotton": "cloud.fill",
    "flowers": "camera.macro",
    "events": "calendar",
    "education-training": "graduationcap.fill",
    "technology-and-innovation": "cpu.fill",
    "news": "newspaper.fill",
    "eswatini-news": "map.fill",
    "africa": "globe.africa.fill",
    "world": "globe",
    "media": "play.rectangle.fill",
    "sponsored": "star.fill",
}


def youtube_video_id(url: str) -> str | None:
    """Extract the 11-character YouTube video ID from a watch, short or embed URL."""
    url = url.strip()
    for pattern in YOUTUBE_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None


def category_icon(slug: str) -> str:
    """Icon name for a category slug, with a generic fallback."""
    return CATEGORY_ICONS.get(slug.lower(), DEFAULT_CATEGORY_ICON)


class ContentModel(BaseModel):
    """Base for entities serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Article(ContentModel):
    """News article normalized from a WordPress post."""

    id: int
    title: str
    excerpt: str
    content: str = ""
    link: str
    image: str | None = None
    category: str = "News"
    date: str
    timestamp: str


class Magazine(ContentModel):
    """Magazine issue PDF from the WordPress media library."""

    id: int
    title: str
    issue_number: str
    month_year: str
    pdf_url: str
    cover_image_url: str | None = None
    published_date: str

    @property
    def display_title(self) -> str:
        return self.month_year

    @property
    def issue_label(self) -> str:
        return self.issue_number


class Video(ContentModel):
    """Video post with a YouTube link."""

    id: int
    title: str
    description: str = ""
    youtube_url: str
    thumbnail_url: str | None = None
    published_date: str
    web_url: str

    @property
    def youtube_video_id(self) -> str | None:
        return youtube_video_id(self.youtube_url)

    @property
    def youtube_thumbnail_url(self) -> str | None:
        video_id = self.youtube_video_id
        if video_id is None:
            return None
        return YOUTUBE_THUMBNAIL_URL.format(video_id=video_id)

    @property
    def watch_url(self) -> str:
        """Canonical watch URL, or the raw link when no ID can be derived."""
        video_id = self.youtube_video_id
        if video_id is None:
            return self.youtube_url
        return YOUTUBE_WATCH_URL.format(video_id=video_id)


class ArticleCategory(ContentModel):
    """WordPress category with at least one article."""

    id: int
    name: str
    count: int
    slug: str

    @property
    def icon(self) -> str:
        return category_icon(self.slug)


class ArticleListResponse(BaseModel):
    success: bool = True
    count: int
    articles: list[Article]


class MagazineListResponse(BaseModel):
    success: bool = True
    count: int
    magazines: list[Magazine]


class VideoListResponse(BaseModel):
    success: bool = True
    count: int
    videos: list[Video]


class CategoryListResponse(BaseModel):
    success: bool = True
    count: int
    categories: list[ArticleCategory]
