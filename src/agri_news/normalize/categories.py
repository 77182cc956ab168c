# ABOUTME: Normalizes WordPress categories for the category browser.
# ABOUTME: Drops empty categories and decodes ampersands in names.

from agri_news.models import ArticleCategory
from agri_news.wordpress.schemas import WPCategory


def normalize_categories(categories: list[WPCategory]) -> list[ArticleCategory]:
    """Keep categories with articles, preserving source order."""
    return [
        ArticleCategory(
            id=category.id,
            name=category.name.replace("&amp;", "&"),
            count=category.count,
            slug=category.slug,
        )
        for category in categories
        if category.count > 0
    ]
