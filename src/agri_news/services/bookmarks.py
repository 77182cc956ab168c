# ABOUTME: JSON-file keyed store for bookmarked articles.
# ABOUTME: Keeps articles newest-first and unique by id under a single key.

import json
from pathlib import Path

import structlog
from pydantic import TypeAdapter, ValidationError

from agri_news.config import Settings, get_settings
from agri_news.models import Article

log = structlog.get_logger()

_ARTICLE_LIST = TypeAdapter(list[Article])


class BookmarkStore:
    """Persists bookmarked articles.

    Created by its owner and passed to whoever needs it. Writes are
    synchronous and assume a single writer.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self._articles: list[Article] = self._load()

    @property
    def path(self) -> Path:
        return self.settings.bookmarks_path

    @property
    def key(self) -> str:
        return self.settings.bookmarks_key

    @property
    def bookmarks(self) -> list[Article]:
        return list(self._articles)

    def _read_store(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            store = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            log.warning("bookmark_store_unreadable", path=str(self.path), error=str(e))
            return {}
        return store if isinstance(store, dict) else {}

    def _load(self) -> list[Article]:
        raw = self._read_store().get(self.key)
        if raw is None:
            return []
        try:
            articles = _ARTICLE_LIST.validate_python(raw)
        except ValidationError as e:
            log.warning("bookmarks_invalid", path=str(self.path), errors=e.error_count())
            return []
        log.debug("bookmarks_loaded", count=len(articles))
        return articles

    def _save(self) -> None:
        store = self._read_store()
        store[self.key] = _ARTICLE_LIST.dump_python(self._articles, mode="json", by_alias=True)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(store, indent=2, ensure_ascii=False), encoding="utf-8")
        log.debug("bookmarks_saved", path=str(self.path), count=len(self._articles))

    def is_bookmarked(self, article: Article) -> bool:
        return any(saved.id == article.id for saved in self._articles)

    def add(self, article: Article) -> None:
        """Bookmark an article at the front; no-op if already saved."""
        if self.is_bookmarked(article):
            return
        self._articles.insert(0, article)
        self._save()

    def remove(self, article_id: int) -> bool:
        """Remove a bookmark by article id. Returns True if one was removed."""
        remaining = [saved for saved in self._articles if saved.id != article_id]
        if len(remaining) == len(self._articles):
            return False
        self._articles = remaining
        self._save()
        return True

    def toggle(self, article: Article) -> bool:
        """Add or remove the article. Returns True if it is now bookmarked."""
        if self.remove(article.id):
            return False
        self.add(article)
        return True

    def clear(self) -> None:
        self._articles = []
        self._save()
