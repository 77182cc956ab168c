# ABOUTME: Async client for the WordPress REST API.
# ABOUTME: Fetches posts, media, categories and video posts and validates each batch as a whole.

import json
from typing import Any, TypeVar

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from agri_news.config import Settings, get_settings
from agri_news.errors import ContentLoadError
from agri_news.wordpress.schemas import WPCategory, WPMediaItem, WPPost, WPVideoPost

log = structlog.get_logger()

T = TypeVar("T")


class WordPressClient:
    """Fetches raw content listings from a WordPress site."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-initialized HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.settings.http_timeout,
                headers={"User-Agent": self.settings.http_user_agent},
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "WordPressClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def _get_list(self, path: str, params: dict[str, Any], schema: type[T]) -> list[T]:
        """GET a listing endpoint and validate the whole response.

        Raises:
            ContentLoadError: On transport, status, JSON or schema failure.
        """
        url = f"{self.settings.api_root}/{path}"
        log.debug("wordpress_request", url=url, params=params)

        try:
            response = await self.client.get(url, params=params)
            response.raise_for_status()
            payload = response.json()
            records = TypeAdapter(list[schema]).validate_python(payload)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            log.error("wordpress_request_failed", url=url, error=str(e))
            raise ContentLoadError(path, str(e)) from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            log.error("wordpress_invalid_json", url=url, error=str(e))
            raise ContentLoadError(path, f"invalid JSON: {e}") from e
        except ValidationError as e:
            log.error("wordpress_schema_mismatch", url=url, errors=e.error_count())
            raise ContentLoadError(path, f"unexpected payload: {e.error_count()} errors") from e

        log.info("wordpress_response", path=path, count=len(records))
        return records

    async def fetch_posts(self, category_id: int | None = None) -> list[WPPost]:
        """Fetch latest posts with embedded featured media and terms."""
        params: dict[str, Any] = {"per_page": self.settings.articles_per_page, "_embed": "true"}
        if category_id is not None:
            params["categories"] = category_id
        return await self._get_list("posts", params, WPPost)

    async def fetch_categories(self) -> list[WPCategory]:
        """Fetch categories, largest first."""
        params = {
            "per_page": self.settings.categories_per_page,
            "orderby": "count",
            "order": "desc",
        }
        return await self._get_list("categories", params, WPCategory)

    async def fetch_media(self) -> list[WPMediaItem]:
        """Fetch application (PDF) media items, newest first."""
        params = {
            "media_type": "application",
            "per_page": self.settings.magazines_per_page,
            "orderby": "date",
            "order": "desc",
        }
        return await self._get_list("media", params, WPMediaItem)

    async def fetch_video_posts(self) -> list[WPVideoPost]:
        """Fetch posts of the video custom post type, newest first."""
        params: dict[str, Any] = {
            "per_page": self.settings.videos_per_page,
            "orderby": "date",
            "order": "desc",
        }
        if self.settings.video_embed:
            params["_embed"] = "true"
        return await self._get_list(self.settings.video_post_type, params, WPVideoPost)
