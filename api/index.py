from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.responses import ORJSONResponse
from mangum import Mangum

from newsreader.config import get_settings
from newsreader.http_client import shutdown_http_client
from newsreader.logging import setup_logging
from newsreader.models import CATEGORIES, NewsUiState
from newsreader.services import NewsApiService, NewsRepository, NewsRepositoryImpl
from newsreader.viewmodel import NewsViewModel

CATEGORY_PATTERN = rf"^(|{'|'.join(CATEGORIES)})$"

_view_model: NewsViewModel | None = None


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    global _view_model
    setup_logging(get_settings().log_level)
    yield
    if _view_model is not None:
        await _view_model.close()
        _view_model = None
    await shutdown_http_client()


app = FastAPI(
    title="News Reader API",
    version="0.1.0",
    description=(
        "Top headlines and search from NewsAPI.org behind a single debounced, "
        "observable news list."
    ),
    default_response_class=ORJSONResponse,
    lifespan=lifespan,
)


def build_repository() -> NewsRepository:
    return NewsRepositoryImpl(NewsApiService())


async def get_view_model() -> NewsViewModel:
    global _view_model
    if _view_model is None:
        _view_model = NewsViewModel(build_repository())
    return _view_model


def render(state: NewsUiState) -> dict[str, Any]:
    payload = state.model_dump(by_alias=True)
    payload["summary"] = state.summary
    return payload


@app.get("/health", tags=["system"])
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/news/state", tags=["news"])
async def news_state(view_model: NewsViewModel = Depends(get_view_model)):
    return render(view_model.state)


@app.post("/news/refresh", tags=["news"])
async def news_refresh(view_model: NewsViewModel = Depends(get_view_model)):
    view_model.refresh()
    return render(view_model.state)


@app.post("/news/search", tags=["news"])
async def news_search(
    q: str = Query("", max_length=500, description="Free-text query; blank resets"),
    view_model: NewsViewModel = Depends(get_view_model),
):
    view_model.search(q)
    return render(view_model.state)


@app.post("/news/search/clear", tags=["news"])
async def news_search_clear(view_model: NewsViewModel = Depends(get_view_model)):
    view_model.clear_search()
    return render(view_model.state)


@app.post("/news/category", tags=["news"])
async def news_category(
    category: str | None = Query(
        None,
        pattern=CATEGORY_PATTERN,
        description="Headline category; omit or leave empty for all",
    ),
    view_model: NewsViewModel = Depends(get_view_model),
):
    view_model.select_category(category or None)
    return render(view_model.state)


@app.post("/news/error/clear", tags=["news"])
async def news_error_clear(view_model: NewsViewModel = Depends(get_view_model)):
    view_model.clear_error()
    return render(view_model.state)


@app.post("/news/retry", tags=["news"])
async def news_retry(view_model: NewsViewModel = Depends(get_view_model)):
    state = view_model.state
    if state.search_query:
        view_model.search(state.search_query)
    else:
        view_model.select_category(state.selected_category)
    return render(view_model.state)


@app.get("/news/articles", tags=["news"])
async def news_article(
    url: str = Query(..., description="Canonical article URL"),
    view_model: NewsViewModel = Depends(get_view_model),
):
    article = view_model.state.find_article(url)
    if article is None:
        raise HTTPException(status_code=404, detail="Article not found")
    payload = article.model_dump(by_alias=True)
    payload["displayDate"] = article.display_datetime()
    return payload


handler = Mangum(app)
