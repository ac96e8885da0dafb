"""Async NewsAPI client with a debounced, observable news list view model."""

from .config import Settings, get_settings
from .services import NewsApiService, NewsRepository, NewsRepositoryImpl
from .viewmodel import NewsViewModel, StateFlow

__all__ = [
    "NewsApiService",
    "NewsRepository",
    "NewsRepositoryImpl",
    "NewsViewModel",
    "Settings",
    "StateFlow",
    "get_settings",
]

__version__ = "0.1.0"
