from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Protocol

from ..logging import get_logger
from ..models.news import NewsResponse
from ..models.result import LOADING, ApiResult, Error, Success
from .news_api import NewsApiService

logger = get_logger("repository")


class NewsRepository(Protocol):
    """Gateway between the view model and the remote news source."""

    def stream_headlines(
        self, category: str | None = None
    ) -> AsyncIterator[ApiResult[NewsResponse]]:
        """Yield ``Loading`` and then one ``Success`` or ``Error``."""
        ...

    async def refresh_headlines(
        self, category: str | None = None
    ) -> ApiResult[NewsResponse]:
        """Fetch headlines without a ``Loading`` step, for pull-to-refresh."""
        ...

    async def search(self, query: str) -> ApiResult[NewsResponse]:
        """One-shot search over all articles."""
        ...


class NewsRepositoryImpl:
    def __init__(self, api: NewsApiService) -> None:
        self._api = api

    async def stream_headlines(
        self, category: str | None = None
    ) -> AsyncIterator[ApiResult[NewsResponse]]:
        yield LOADING
        try:
            response = await self._api.get_top_headlines(category)
        except Exception as exc:
            yield _failure(exc, "Failed to fetch top headlines")
        else:
            yield Success(response)

    async def refresh_headlines(
        self, category: str | None = None
    ) -> ApiResult[NewsResponse]:
        try:
            return Success(await self._api.get_top_headlines(category))
        except Exception as exc:
            return _failure(exc, "Failed to refresh headlines")

    async def search(self, query: str) -> ApiResult[NewsResponse]:
        if not query.strip():
            return Error("Search query cannot be empty")
        try:
            return Success(await self._api.search_everything(query))
        except Exception as exc:
            return _failure(exc, "Failed to search news")


def _failure(exc: Exception, default: str) -> Error:
    logger.warning("%s: %r", default, exc)
    return Error(message=str(exc) or default, exception=exc)
