from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .news import Article


class NewsUiState(BaseModel):
    """Snapshot rendered by the news list.

    Snapshots are immutable; the view model publishes a new one per change,
    so ``articles`` and ``total_results`` always describe the same page.
    """

    model_config = ConfigDict(frozen=True)

    articles: list[Article] = Field(default_factory=list)
    total_results: int = 0
    is_loading: bool = False
    error: str | None = None
    is_refreshing: bool = False
    selected_category: str | None = None
    search_query: str = ""
    is_searching: bool = False

    @property
    def summary(self) -> str | None:
        if not self.articles:
            return None
        return f"Showing {len(self.articles)} of {self.total_results}"

    def find_article(self, url: str) -> Article | None:
        return next((article for article in self.articles if article.url == url), None)
