# ABOUTME: Centralized configuration using Pydantic Settings.
# ABOUTME: Loads WordPress endpoint, paging, storage and logging settings from the environment.

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # WordPress REST API
    wp_base_url: str = "https://agribusinessmedia.com"
    http_timeout: float = 10.0
    http_user_agent: str = "AgriNews/0.1 (+https://agribusinessmedia.com)"

    # Page sizes per content type
    articles_per_page: int = 20
    categories_per_page: int = 50
    magazines_per_page: int = 50
    videos_per_page: int = 50

    # Videos live in a custom post type
    video_post_type: str = "agri-tv"
    video_embed: bool = False

    # Bookmarks
    data_dir: Path = Path("data")
    bookmarks_file: str = "bookmarks.json"
    bookmarks_key: str = "SavedBookmarks"

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # "console" or "json"

    # Web / API
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    @property
    def api_root(self) -> str:
        """Base URL of the WordPress REST namespace."""
        return f"{self.wp_base_url.rstrip('/')}/wp-json/wp/v2"

    @property
    def bookmarks_path(self) -> Path:
        """Path to the bookmark store file."""
        return self.data_dir / self.bookmarks_file


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded from environment variables and .env file.
    """
    return Settings()
