# ABOUTME: FastAPI dependency injection for the content service and bookmark store.
# ABOUTME: Both live on app.state and are created by the application lifespan.

from typing import Annotated

from fastapi import Depends, Request

from agri_news.services import BookmarkStore, ContentService


def get_content_service(request: Request) -> ContentService:
    """Get the content service from app state."""
    return request.app.state.content_service


ContentSvc = Annotated[ContentService, Depends(get_content_service)]


def get_bookmark_store(request: Request) -> BookmarkStore:
    """Get the bookmark store from app state."""
    return request.app.state.bookmark_store


Bookmarks = Annotated[BookmarkStore, Depends(get_bookmark_store)]
