# ABOUTME: Pytest fixtures and configuration for Agri News tests.
# ABOUTME: Provides test settings and builders for raw WordPress payloads.

from pathlib import Path
from typing import Any

import pytest

from agri_news.config import Settings
from agri_news.models import Article


@pytest.fixture
def mock_settings(tmp_path: Path) -> Settings:
    """Create settings for testing."""
    return Settings(
        wp_base_url="https://wp.example.com",
        http_timeout=5,
        articles_per_page=20,
        categories_per_page=50,
        magazines_per_page=50,
        videos_per_page=50,
        video_post_type="agri-tv",
        video_embed=False,
        data_dir=tmp_path / "data",
        log_level="DEBUG",
    )


def make_post(
    post_id: int = 1,
    *,
    title: str = "Maize prices rise",
    excerpt: str = "<p>Farmers see better returns.</p>",
    content: str = "<p>Full story.</p>",
    date: str = "2026-02-14T10:00:00",
    embedded: dict[str, Any] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """Build a raw /wp/v2/posts record."""
    post: dict[str, Any] = {
        "id": post_id,
        "date": date,
        "link": f"https://wp.example.com/?p={post_id}",
        "title": {"rendered": title},
        "excerpt": {"rendered": excerpt, "protected": False},
        "content": {"rendered": content, "protected": False},
        "status": "publish",
        **extra,
    }
    if embedded is not None:
        post["_embedded"] = embedded
    return post


def make_media(
    media_id: int = 10,
    *,
    title: str = "ISSUE 30",
    source_url: str = "https://x.com/mag.PDF",
    date: str = "2026-02-01T09:00:00",
) -> dict[str, Any]:
    """Build a raw /wp/v2/media record."""
    return {
        "id": media_id,
        "date": date,
        "title": {"rendered": title},
        "source_url": source_url,
        "mime_type": "application/pdf",
    }


def make_video_post(
    post_id: int = 100,
    *,
    title: str = "Dairy farm tour",
    content: str = "",
    excerpt: str = "",
    acf: Any = None,
    embedded: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a raw video custom-post-type record."""
    post: dict[str, Any] = {
        "id": post_id,
        "date": "2026-02-10T08:00:00",
        "link": f"https://wp.example.com/agri-tv/{post_id}",
        "title": {"rendered": title},
        "content": {"rendered": content},
        "excerpt": {"rendered": excerpt},
    }
    if acf is not None:
        post["acf"] = acf
    if embedded is not None:
        post["_embedded"] = embedded
    return post


@pytest.fixture
def sample_article() -> Article:
    """Create a sample Article for testing."""
    return Article(
        id=42,
        title="Sugar cane harvest begins",
        excerpt="The season opened early this year.",
        content="The season opened early this year across the lowveld.",
        link="https://wp.example.com/sugar-cane-harvest",
        image="https://wp.example.com/uploads/cane.jpg",
        category="Sugar",
        date="2h ago",
        timestamp="2026-02-14T10:00:00",
    )
