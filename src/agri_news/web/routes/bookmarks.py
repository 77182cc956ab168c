# ABOUTME: Bookmark routes backed by the JSON bookmark store.
# ABOUTME: List, toggle, remove and clear saved articles.

import structlog
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from agri_news.models import Article, ArticleListResponse
from agri_news.web.dependencies import Bookmarks

router = APIRouter(prefix="/api/bookmarks", tags=["bookmarks"])
log = structlog.get_logger()


class BookmarkStatus(BaseModel):
    id: int
    bookmarked: bool


@router.get("", response_model=ArticleListResponse)
async def list_bookmarks(store: Bookmarks):
    articles = store.bookmarks
    return ArticleListResponse(count=len(articles), articles=articles)


@router.post("/toggle", response_model=BookmarkStatus)
async def toggle_bookmark(article: Article, store: Bookmarks):
    bookmarked = store.toggle(article)
    log.info("bookmark_toggled", id=article.id, bookmarked=bookmarked)
    return BookmarkStatus(id=article.id, bookmarked=bookmarked)


@router.delete("/{article_id}", response_model=BookmarkStatus)
async def remove_bookmark(article_id: int, store: Bookmarks):
    if not store.remove(article_id):
        raise HTTPException(status_code=404, detail="Bookmark not found")
    log.info("bookmark_removed", id=article_id)
    return BookmarkStatus(id=article_id, bookmarked=False)


@router.delete("", status_code=204)
async def clear_bookmarks(store: Bookmarks) -> None:
    store.clear()
    log.info("bookmarks_cleared")
