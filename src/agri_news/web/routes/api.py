# ABOUTME: Content routes: articles, magazines, videos and categories.
# ABOUTME: Each request fetches fresh from WordPress and returns a success/count envelope.

import structlog
from fastapi import APIRouter
from pydantic import BaseModel

from agri_news.models import (
    ArticleListResponse,
    CategoryListResponse,
    MagazineListResponse,
    VideoListResponse,
)
from agri_news.normalize import filter_articles
from agri_news.web.dependencies import ContentSvc

router = APIRouter(prefix="/api", tags=["api"])
log = structlog.get_logger()


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    version: str = "0.1.0"


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint for load balancer."""
    return HealthResponse(status="healthy")


@router.get("/articles", response_model=ArticleListResponse)
async def list_articles(service: ContentSvc, category: int | None = None, q: str = ""):
    """Latest articles, optionally within one category and filtered by a search term."""
    if category is not None:
        articles = await service.fetch_articles_by_category(category)
    else:
        articles = await service.fetch_articles()
    articles = filter_articles(articles, q)
    return ArticleListResponse(count=len(articles), articles=articles)


@router.get("/magazines", response_model=MagazineListResponse)
async def list_magazines(service: ContentSvc):
    magazines = await service.fetch_magazines()
    return MagazineListResponse(count=len(magazines), magazines=magazines)


@router.get("/videos", response_model=VideoListResponse)
async def list_videos(service: ContentSvc):
    videos = await service.fetch_videos()
    return VideoListResponse(count=len(videos), videos=videos)


@router.get("/categories", response_model=CategoryListResponse)
async def list_categories(service: ContentSvc):
    categories = await service.fetch_categories()
    return CategoryListResponse(count=len(categories), categories=categories)
