from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from ..config import Settings, get_settings
from ..http_client import with_http_client
from ..models.news import NewsResponse


class NewsApiError(RuntimeError):
    """NewsAPI answered with ``status: error``."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code


@dataclass(slots=True)
class NewsApiService:
    settings: Settings | None = None
    client: httpx.AsyncClient | None = None

    def __post_init__(self) -> None:
        if self.settings is None:
            self.settings = get_settings()

    async def get_top_headlines(self, category: str | None = None) -> NewsResponse:
        params: dict[str, Any] = {"country": self.settings.news_country}
        if category is not None:
            params["category"] = category
        params["pageSize"] = self.settings.news_page_size
        return await self._get("/v2/top-headlines", params)

    async def search_everything(self, query: str) -> NewsResponse:
        params = {
            "q": query,
            "sortBy": self.settings.news_sort_by,
            "pageSize": self.settings.news_page_size,
            "language": self.settings.news_language,
        }
        return await self._get("/v2/everything", params)

    async def _get(self, path: str, params: dict[str, Any]) -> NewsResponse:
        url = f"{self.settings.api_root}{path}"
        if self.client is not None:
            response = await self.client.get(url, params=params)
        else:
            response = await with_http_client(
                lambda client: client.get(url, params=params)
            )
        payload = _json_or_none(response)
        if isinstance(payload, dict) and payload.get("status") == "error":
            raise NewsApiError(
                payload.get("message") or f"NewsAPI error {response.status_code}",
                code=payload.get("code"),
            )
        if response.is_error:
            # raise_for_status() messages include the apiKey query parameter
            raise NewsApiError(
                f"NewsAPI error {response.status_code} {response.reason_phrase}".strip()
            )
        if payload is None:
            raise ValueError(f"NewsAPI returned a non-JSON body for {path}")
        return NewsResponse.model_validate(payload)


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None
