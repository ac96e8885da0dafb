from __future__ import annotations

from datetime import datetime, timezone

from dateutil import parser as date_parser
from pydantic import BaseModel, ConfigDict, Field

CATEGORIES: tuple[str, ...] = (
    "business",
    "entertainment",
    "general",
    "health",
    "science",
    "sports",
    "technology",
)


class ArticleSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str | None = Field(default=None, description="NewsAPI source identifier")
    name: str = Field(description="Publisher name")


class Article(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: ArticleSource
    author: str | None = None
    title: str = Field(description="Article headline")
    description: str | None = Field(default=None, description="Short teaser or dek")
    url: str = Field(description="Canonical article URL, unique per article")
    url_to_image: str | None = Field(default=None, alias="urlToImage")
    published_at: str = Field(
        alias="publishedAt", description="Publication timestamp, ISO-8601 UTC"
    )
    content: str | None = None

    @property
    def published_datetime(self) -> datetime | None:
        return _parse_datetime(self.published_at)

    def display_date(self) -> str:
        """Short date for list cards, e.g. ``Nov 03, 2025``."""
        published = self.published_datetime
        if published is None:
            return self.published_at
        return published.strftime("%b %d, %Y")

    def display_datetime(self) -> str:
        """Date and time for the detail view, e.g. ``Nov 03, 2025 at 10:30``."""
        published = self.published_datetime
        if published is None:
            return self.published_at
        return published.strftime("%b %d, %Y at %H:%M")


class NewsResponse(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: str = "ok"
    total_results: int = Field(default=0, ge=0, alias="totalResults")
    articles: list[Article] = Field(default_factory=list)


def _parse_datetime(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        parsed = date_parser.isoparse(value)
    except (ValueError, TypeError, OverflowError):
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
