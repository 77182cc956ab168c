# ABOUTME: Maps video custom-post-type records to Video entities.
# ABOUTME: Reads the YouTube link from ACF fields, or scrapes it from the post HTML as a fallback.

import re

import structlog

from agri_news.models import YOUTUBE_THUMBNAIL_URL, Video, youtube_video_id
from agri_news.normalize.html import clean_html
from agri_news.wordpress.schemas import WPVideoPost

log = structlog.get_logger()

_VIDEO_ID = r"[a-zA-Z0-9_-]{11}(?![a-zA-Z0-9_-])"

# Tried in order against content, then excerpt. Any src="...embed..." attribute is
# already caught by the bare embed pattern, so the last entry only applies if the
# order changes.
YOUTUBE_URL_PATTERNS = [
    re.compile(rf"https?://(?:www\.)?youtube\.com/watch\?v={_VIDEO_ID}"),
    re.compile(rf"https?://(?:www\.)?youtu\.be/{_VIDEO_ID}"),
    re.compile(rf"https?://(?:www\.)?youtube\.com/embed/{_VIDEO_ID}"),
    re.compile(rf"src=[\"']https?://(?:www\.)?youtube\.com/embed/{_VIDEO_ID}[\"']"),
]


def _strip_src(match: str) -> str:
    if match.startswith("src="):
        match = match[len("src=") :]
    return match.strip("\"'")


def find_youtube_url(*html_fields: str) -> str | None:
    """Find the first YouTube link in the given HTML fields, searched in order."""
    for html in html_fields:
        for pattern in YOUTUBE_URL_PATTERNS:
            match = pattern.search(html)
            if match:
                return _strip_src(match.group())
    return None


def resolve_thumbnail(post: WPVideoPost, youtube_url: str) -> str | None:
    """Featured image if embedded, else the YouTube hqdefault frame."""
    if post.embedded is not None and post.embedded.first_media_url:
        return post.embedded.first_media_url

    video_id = youtube_video_id(youtube_url)
    if video_id is None:
        return None
    return YOUTUBE_THUMBNAIL_URL.format(video_id=video_id)


def normalize_video_post(post: WPVideoPost) -> Video | None:
    """Convert a video post into a Video, or None when it carries no YouTube link."""
    if post.acf is not None:
        youtube_url = (post.acf.youtube_url or "").strip()
        description = clean_html(post.acf.description or "")
    else:
        youtube_url = find_youtube_url(post.content.rendered, post.excerpt.rendered) or ""
        description = clean_html(post.excerpt.rendered)

    if not youtube_url:
        return None

    return Video(
        id=post.id,
        title=clean_html(post.title.rendered),
        description=description,
        youtube_url=youtube_url,
        thumbnail_url=resolve_thumbnail(post, youtube_url),
        published_date=post.date,
        web_url=post.link,
    )


def extract_videos(posts: list[WPVideoPost]) -> list[Video]:
    """Normalize video posts, dropping those without a YouTube link."""
    videos: list[Video] = []
    for post in posts:
        video = normalize_video_post(post)
        if video is None:
            log.debug("video_post_skipped", id=post.id)
            continue
        videos.append(video)
    return videos
