# ABOUTME: Pydantic schemas for raw WordPress REST API payloads.
# ABOUTME: Only the fields the normalizers read are modeled; everything else is ignored.

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WPModel(BaseModel):
    """Lenient base: unknown fields are tolerated and dropped."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Rendered(WPModel):
    """WordPress `{"rendered": "<html>"}` wrapper."""

    rendered: str = ""


class WPFeaturedMedia(WPModel):
    # Embedded media can be an error object without a URL
    source_url: str | None = None


class WPTerm(WPModel):
    name: str | None = None


class WPEmbedded(WPModel):
    featured_media: list[WPFeaturedMedia] | None = Field(default=None, alias="wp:featuredmedia")
    terms: list[list[WPTerm]] | None = Field(default=None, alias="wp:term")

    @property
    def first_media_url(self) -> str | None:
        if not self.featured_media:
            return None
        return self.featured_media[0].source_url

    @property
    def first_term_name(self) -> str | None:
        if not self.terms or not self.terms[0]:
            return None
        return self.terms[0][0].name


class WPPost(WPModel):
    """A `/wp/v2/posts` record, optionally with `_embed=true` resources."""

    id: int
    date: str
    link: str
    title: Rendered
    excerpt: Rendered
    content: Rendered
    embedded: WPEmbedded | None = Field(default=None, alias="_embedded")


class WPMediaItem(WPModel):
    """A `/wp/v2/media` record."""

    id: int
    date: str
    title: Rendered
    source_url: str


class WPVideoFields(WPModel):
    """Advanced Custom Fields attached to a video post."""

    youtube_url: str | None = None
    description: str | None = None


class WPVideoPost(WPModel):
    """A record of the video custom post type."""

    id: int
    date: str
    link: str
    title: Rendered
    content: Rendered
    excerpt: Rendered = Field(default_factory=Rendered)
    acf: WPVideoFields | None = None
    embedded: WPEmbedded | None = Field(default=None, alias="_embedded")

    @field_validator("acf", mode="before")
    @classmethod
    def _empty_acf(cls, value: Any) -> Any:
        # WordPress serializes "no custom fields" as [] or false
        if value is False or (isinstance(value, list) and not value):
            return None
        return value


class WPCategory(WPModel):
    """A `/wp/v2/categories` record."""

    id: int
    name: str
    count: int
    slug: str
