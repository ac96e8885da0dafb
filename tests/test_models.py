from newsreader.models import Article, NewsResponse, NewsUiState

PAYLOAD = {
    "status": "ok",
    "totalResults": 150,
    "articles": [
        {
            "source": {"id": None, "name": "BBC News"},
            "author": None,
            "title": "Global markets show strong recovery signs",
            "description": None,
            "url": "https://example.com/article2",
            "urlToImage": None,
            "publishedAt": "2025-11-02T15:45:00Z",
            "content": None,
        }
    ],
}


def test_news_response_parses_wire_format() -> None:
    response = NewsResponse.model_validate(PAYLOAD)

    assert response.total_results == 150
    assert len(response.articles) == 1
    article = response.articles[0]
    assert article.source.id is None
    assert article.author is None
    assert article.url_to_image is None


def test_total_results_may_exceed_article_count() -> None:
    response = NewsResponse.model_validate(PAYLOAD)

    assert response.total_results > len(response.articles)


def test_article_display_dates() -> None:
    article = NewsResponse.model_validate(PAYLOAD).articles[0]

    assert article.display_date() == "Nov 02, 2025"
    assert article.display_datetime() == "Nov 02, 2025 at 15:45"
    assert article.published_datetime is not None
    assert article.published_datetime.tzinfo is not None


def test_article_display_date_falls_back_to_raw_value() -> None:
    article = Article.model_validate(
        {**PAYLOAD["articles"][0], "publishedAt": "yesterday-ish"}
    )

    assert article.published_datetime is None
    assert article.display_date() == "yesterday-ish"
    assert article.display_datetime() == "yesterday-ish"


def test_article_serializes_with_wire_aliases() -> None:
    article = NewsResponse.model_validate(PAYLOAD).articles[0]

    dumped = article.model_dump(by_alias=True)

    assert "urlToImage" in dumped
    assert dumped["publishedAt"] == "2025-11-02T15:45:00Z"


def test_ui_state_defaults() -> None:
    state = NewsUiState()

    assert state.articles == []
    assert state.total_results == 0
    assert state.is_loading is False
    assert state.is_refreshing is False
    assert state.is_searching is False
    assert state.error is None
    assert state.selected_category is None
    assert state.search_query == ""
    assert state.summary is None


def test_ui_state_summary_and_lookup() -> None:
    response = NewsResponse.model_validate(PAYLOAD)
    state = NewsUiState(articles=response.articles, total_results=response.total_results)

    assert state.summary == "Showing 1 of 150"
    assert state.find_article("https://example.com/article2") is response.articles[0]
    assert state.find_article("https://example.com/missing") is None
