# ABOUTME: Tests for the WordPress REST client.
# ABOUTME: Uses httpx.MockTransport to verify endpoints, params and whole-batch failure handling.

import json
from collections.abc import Callable

import httpx
import pytest
from conftest import make_media, make_post, make_video_post

from agri_news.config import Settings
from agri_news.errors import ContentLoadError
from agri_news.wordpress.client import WordPressClient
from agri_news.wordpress.schemas import WPPost

Handler = Callable[[httpx.Request], httpx.Response]


def _client(settings: Settings, handler: Handler) -> WordPressClient:
    return WordPressClient(settings, transport=httpx.MockTransport(handler))


class RecordingHandler:
    """Returns a fixed JSON payload and records requests."""

    def __init__(self, payload: object, status_code: int = 200) -> None:
        self.payload = payload
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


class TestClientLifecycle:
    """Tests for lazy client creation and closing."""

    def test_client_lazy_initialization(self, mock_settings: Settings) -> None:
        wp = WordPressClient(mock_settings)
        assert wp._client is None

        client = wp.client

        assert wp._client is client
        assert wp.client is client

    @pytest.mark.asyncio
    async def test_async_context_manager(self, mock_settings: Settings) -> None:
        async with WordPressClient(mock_settings) as wp:
            _ = wp.client
            assert wp._client is not None

        assert wp._client is None


class TestEndpoints:
    """Tests for request paths and query parameters."""

    @pytest.mark.asyncio
    async def test_fetch_posts(self, mock_settings: Settings) -> None:
        handler = RecordingHandler([make_post(1), make_post(2)])

        async with _client(mock_settings, handler) as wp:
            posts = await wp.fetch_posts()

        assert [p.id for p in posts] == [1, 2]
        assert handler.last.url.path == "/wp-json/wp/v2/posts"
        assert handler.last.url.params["per_page"] == "20"
        assert handler.last.url.params["_embed"] == "true"
        assert "categories" not in handler.last.url.params

    @pytest.mark.asyncio
    async def test_fetch_posts_by_category(self, mock_settings: Settings) -> None:
        handler = RecordingHandler([])

        async with _client(mock_settings, handler) as wp:
            await wp.fetch_posts(category_id=12)

        assert handler.last.url.params["categories"] == "12"

    @pytest.mark.asyncio
    async def test_fetch_categories(self, mock_settings: Settings) -> None:
        handler = RecordingHandler([{"id": 1, "name": "News", "count": 3, "slug": "news"}])

        async with _client(mock_settings, handler) as wp:
            categories = await wp.fetch_categories()

        assert categories[0].name == "News"
        assert handler.last.url.path == "/wp-json/wp/v2/categories"
        assert dict(handler.last.url.params) == {
            "per_page": "50",
            "orderby": "count",
            "order": "desc",
        }

    @pytest.mark.asyncio
    async def test_fetch_media(self, mock_settings: Settings) -> None:
        handler = RecordingHandler([make_media()])

        async with _client(mock_settings, handler) as wp:
            media = await wp.fetch_media()

        assert media[0].source_url == "https://x.com/mag.PDF"
        assert handler.last.url.path == "/wp-json/wp/v2/media"
        assert handler.last.url.params["media_type"] == "application"
        assert handler.last.url.params["orderby"] == "date"
        assert handler.last.url.params["order"] == "desc"

    @pytest.mark.asyncio
    async def test_fetch_video_posts(self, mock_settings: Settings) -> None:
        handler = RecordingHandler([make_video_post()])

        async with _client(mock_settings, handler) as wp:
            posts = await wp.fetch_video_posts()

        assert posts[0].id == 100
        assert handler.last.url.path == "/wp-json/wp/v2/agri-tv"
        assert "_embed" not in handler.last.url.params

    @pytest.mark.asyncio
    async def test_fetch_video_posts_with_embed(self, mock_settings: Settings) -> None:
        settings = mock_settings.model_copy(update={"video_embed": True, "video_post_type": "tv"})
        handler = RecordingHandler([])

        async with _client(settings, handler) as wp:
            await wp.fetch_video_posts()

        assert handler.last.url.path == "/wp-json/wp/v2/tv"
        assert handler.last.url.params["_embed"] == "true"

    @pytest.mark.asyncio
    async def test_sends_user_agent(self, mock_settings: Settings) -> None:
        handler = RecordingHandler([])

        async with _client(mock_settings, handler) as wp:
            await wp.fetch_posts()

        assert handler.last.headers["User-Agent"] == mock_settings.http_user_agent


class TestBatchFailures:
    """A batch either decodes completely or raises ContentLoadError."""

    @pytest.mark.asyncio
    async def test_unknown_fields_tolerated(self, mock_settings: Settings) -> None:
        post = make_post(sticky=True, meta={"footnotes": ""}, yoast_head_json={"title": "x"})
        handler = RecordingHandler([post])

        async with _client(mock_settings, handler) as wp:
            posts = await wp.fetch_posts()

        assert isinstance(posts[0], WPPost)

    @pytest.mark.asyncio
    async def test_invalid_json(self, mock_settings: Settings) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>Maintenance</html>")

        async with _client(mock_settings, handler) as wp:
            with pytest.raises(ContentLoadError, match="invalid JSON") as exc_info:
                await wp.fetch_posts()

        assert exc_info.value.endpoint == "posts"
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    @pytest.mark.asyncio
    async def test_body_not_utf8(self, mock_settings: Settings) -> None:
        """A response body with bytes that are not UTF-8 is a batch failure too."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b'[{"id": 1, "title": "\xff\xfe"}]')

        async with _client(mock_settings, handler) as wp:
            with pytest.raises(ContentLoadError, match="invalid JSON") as exc_info:
                await wp.fetch_posts()

        assert exc_info.value.endpoint == "posts"
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    @pytest.mark.asyncio
    async def test_http_error_status(self, mock_settings: Settings) -> None:
        handler = RecordingHandler({"code": "rest_no_route"}, status_code=404)

        async with _client(mock_settings, handler) as wp:
            with pytest.raises(ContentLoadError):
                await wp.fetch_video_posts()

    @pytest.mark.asyncio
    async def test_transport_error(self, mock_settings: Settings) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(mock_settings, handler) as wp:
            with pytest.raises(ContentLoadError, match="connection refused"):
                await wp.fetch_categories()

    @pytest.mark.asyncio
    async def test_one_malformed_record_fails_whole_batch(self, mock_settings: Settings) -> None:
        broken = make_post(2)
        del broken["title"]
        handler = RecordingHandler([make_post(1), broken])

        async with _client(mock_settings, handler) as wp:
            with pytest.raises(ContentLoadError, match="unexpected payload"):
                await wp.fetch_posts()

    @pytest.mark.asyncio
    async def test_object_instead_of_list(self, mock_settings: Settings) -> None:
        handler = RecordingHandler({"code": "rest_forbidden", "message": "nope"})

        async with _client(mock_settings, handler) as wp:
            with pytest.raises(ContentLoadError):
                await wp.fetch_media()
