# ABOUTME: Maps WordPress posts to Article entities.
# ABOUTME: Also computes the relative "time ago" label and offers search and de-duplication helpers.

from collections.abc import Iterable
from datetime import UTC, datetime

from agri_news.models import Article
from agri_news.normalize.html import clean_html
from agri_news.wordpress.schemas import WPPost

DEFAULT_CATEGORY = "News"
EXCERPT_LENGTH = 150
UNKNOWN_DATE = "Recent"


def parse_timestamp(value: str) -> datetime | None:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def relative_time(timestamp: str, now: datetime | None = None) -> str:
    """Label the time since `timestamp`: "Just now", "5h ago", "Yesterday" or "3d ago"."""
    published = parse_timestamp(timestamp)
    if published is None:
        return UNKNOWN_DATE

    now = now or datetime.now(UTC)
    hours = int((now - published).total_seconds() / 3600)

    if hours < 1:
        return "Just now"
    if hours < 24:
        return f"{hours}h ago"
    if hours < 48:
        return "Yesterday"
    return f"{hours // 24}d ago"


def normalize_post(post: WPPost, now: datetime | None = None) -> Article:
    """Convert a WordPress post into an Article.

    Args:
        post: Raw post, optionally carrying `_embedded` media and terms.
        now: Reference instant for the relative date. Defaults to current time.

    Returns:
        Article with sanitized text fields.
    """
    image = None
    category = DEFAULT_CATEGORY
    if post.embedded is not None:
        image = post.embedded.first_media_url
        category = post.embedded.first_term_name or DEFAULT_CATEGORY

    # Truncation counts sanitized characters only and may cut mid-word
    excerpt = clean_html(post.excerpt.rendered)[:EXCERPT_LENGTH].strip()

    return Article(
        id=post.id,
        title=clean_html(post.title.rendered),
        excerpt=excerpt,
        content=clean_html(post.content.rendered),
        link=post.link,
        image=image,
        category=category,
        date=relative_time(post.date, now),
        timestamp=post.date,
    )


def filter_articles(articles: list[Article], query: str) -> list[Article]:
    """Case-insensitive search across title, excerpt and category."""
    needle = query.strip().casefold()
    if not needle:
        return articles
    return [
        article
        for article in articles
        if needle in article.title.casefold()
        or needle in article.excerpt.casefold()
        or needle in article.category.casefold()
    ]


def dedupe_articles(articles: Iterable[Article]) -> list[Article]:
    """Keep the first article seen for each id."""
    seen: set[int] = set()
    unique: list[Article] = []
    for article in articles:
        if article.id in seen:
            continue
        seen.add(article.id)
        unique.append(article)
    return unique
