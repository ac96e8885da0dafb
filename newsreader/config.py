from functools import lru_cache
from pydantic import Field, HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="", extra="ignore", populate_by_name=True)

    http_timeout: float = Field(30.0, gt=0, alias="HTTP_TIMEOUT")
    http_max_connections: int = Field(20, ge=1, alias="HTTP_MAX_CONNECTIONS")
    http_max_keepalive: int = Field(10, ge=1, alias="HTTP_MAX_KEEPALIVE")
    http_user_agent: str = Field("NewsReader/0.1", alias="HTTP_USER_AGENT")

    news_api_base_url: HttpUrl = Field("https://newsapi.org", alias="NEWS_API_BASE_URL")
    news_api_key: str | None = Field(default=None, alias="NEWS_API_KEY")
    news_country: str = Field("us", alias="NEWS_COUNTRY")
    news_language: str = Field("en", alias="NEWS_LANGUAGE")
    news_sort_by: str = Field("publishedAt", alias="NEWS_SORT_BY")
    news_page_size: int = Field(20, ge=1, le=100, alias="NEWS_PAGE_SIZE")

    search_debounce: float = Field(0.5, ge=0, alias="SEARCH_DEBOUNCE")

    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_http_bodies: bool = Field(False, alias="LOG_HTTP_BODIES")

    @property
    def api_root(self) -> str:
        return str(self.news_api_base_url).rstrip("/")


@lru_cache
def get_settings() -> Settings:
    return Settings()
