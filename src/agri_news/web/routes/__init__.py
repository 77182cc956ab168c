# ABOUTME: Routes module initialization.
# ABOUTME: Exports all route modules for FastAPI app.

from agri_news.web.routes import api, bookmarks

__all__ = ["api", "bookmarks"]
