from .news import CATEGORIES, Article, ArticleSource, NewsResponse
from .result import LOADING, ApiResult, Error, Loading, Success
from .state import NewsUiState

__all__ = [
    "CATEGORIES",
    "LOADING",
    "ApiResult",
    "Article",
    "ArticleSource",
    "Error",
    "Loading",
    "NewsResponse",
    "NewsUiState",
    "Success",
]
