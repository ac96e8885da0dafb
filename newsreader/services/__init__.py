from .news_api import NewsApiError, NewsApiService
from .repository import NewsRepository, NewsRepositoryImpl

__all__ = ["NewsApiError", "NewsApiService", "NewsRepository", "NewsRepositoryImpl"]
