# ABOUTME: FastAPI application factory with WordPress client lifespan.
# ABOUTME: Maps batch load failures to 502 responses.

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from agri_news.config import get_settings
from agri_news.errors import ContentLoadError
from agri_news.services import BookmarkStore, ContentService
from agri_news.web.routes import api, bookmarks
from agri_news.wordpress import WordPressClient

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Own the WordPress client and bookmark store for the app's lifetime."""
    settings = get_settings()
    client = WordPressClient(settings)
    app.state.content_service = ContentService(client)
    app.state.bookmark_store = BookmarkStore(settings)
    logger.info("app_startup", wordpress=settings.wp_base_url)
    yield
    logger.info("app_shutdown")
    await client.close()


async def content_load_error_handler(_request: Request, exc: ContentLoadError) -> JSONResponse:
    """Report a failed upstream fetch as a retryable gateway error."""
    logger.warning("content_load_failed", endpoint=exc.endpoint, reason=exc.reason)
    return JSONResponse(status_code=502, content={"success": False, "error": str(exc)})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Agri News",
        description="Normalized Agribusiness Media content from WordPress",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(ContentLoadError, content_load_error_handler)

    app.include_router(api.router)
    app.include_router(bookmarks.router)

    return app


# Application instance for uvicorn
app = create_app()
