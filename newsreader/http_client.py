import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import httpx

from .config import Settings, get_settings
from .logging import get_logger

T = TypeVar("T")

logger = get_logger("http")

_client: httpx.AsyncClient | None = None
_client_lock = asyncio.Lock()


def _redact(url: httpx.URL) -> str:
    return str(url.copy_remove_param("apiKey"))


def build_http_client(settings: Settings | None = None) -> httpx.AsyncClient:
    settings = settings or get_settings()
    limits = httpx.Limits(
        max_connections=settings.http_max_connections,
        max_keepalive_connections=settings.http_max_keepalive,
    )
    params = {"apiKey": settings.news_api_key} if settings.news_api_key else None

    async def log_request(request: httpx.Request) -> None:
        logger.debug("--> %s %s", request.method, _redact(request.url))

    async def log_response(response: httpx.Response) -> None:
        request = response.request
        logger.debug(
            "<-- %s %s %s", response.status_code, request.method, _redact(request.url)
        )
        if settings.log_http_bodies:
            await response.aread()
            logger.debug("%s", response.text)

    return httpx.AsyncClient(
        timeout=settings.http_timeout,
        limits=limits,
        headers={"User-Agent": settings.http_user_agent},
        params=params,
        event_hooks={"request": [log_request], "response": [log_response]},
    )


async def get_http_client() -> httpx.AsyncClient:
    global _client

    if _client is None:
        async with _client_lock:
            if _client is None:
                _client = build_http_client()
    return _client


async def with_http_client(fn: Callable[[httpx.AsyncClient], Awaitable[T]]) -> T:
    client = await get_http_client()
    return await fn(client)


async def shutdown_http_client() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
