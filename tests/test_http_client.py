import logging

import pytest
import respx

import newsreader.http_client as http_module
from newsreader.config import Settings


@pytest.mark.asyncio
async def test_request_log_lines_hide_api_key(caplog, monkeypatch) -> None:
    settings = Settings(news_api_key="top-secret")
    monkeypatch.setattr(logging.getLogger("newsreader"), "propagate", True)
    caplog.set_level(logging.DEBUG, logger="newsreader.http")

    async with http_module.build_http_client(settings) as client:
        with respx.mock(assert_all_called=True) as mock:
            route = mock.get("https://newsapi.org/v2/top-headlines").respond(
                200, json={"status": "ok", "totalResults": 0, "articles": []}
            )
            await client.get(
                "https://newsapi.org/v2/top-headlines", params={"country": "us"}
            )

    assert route.calls.last.request.url.params["apiKey"] == "top-secret"
    messages = [record.getMessage() for record in caplog.records]
    assert any("--> GET" in message for message in messages)
    assert any("<-- 200 GET" in message for message in messages)
    assert all("top-secret" not in message for message in messages)


@pytest.mark.asyncio
async def test_shared_client_is_reused_and_shut_down(monkeypatch) -> None:
    monkeypatch.setattr(http_module, "_client", None)

    first = await http_module.get_http_client()
    second = await http_module.get_http_client()
    assert first is second

    await http_module.shutdown_http_client()
    assert first.is_closed
    assert http_module._client is None


@pytest.mark.asyncio
async def test_with_http_client_passes_shared_client(monkeypatch) -> None:
    monkeypatch.setattr(http_module, "_client", None)

    async def grab(client):
        return client

    client = await http_module.with_http_client(grab)

    assert client is await http_module.get_http_client()
    await http_module.shutdown_http_client()
