"""Tests for article fetching and the parse service."""

import httpx
import pytest

from referent.clients.fetcher import ArticleFetcher
from referent.exceptions import ActionError, PageFetchError
from referent.services import ArticleService, is_valid_url

PAGE = """
<html><head><title>Budget news</title></head><body>
  <h1>Council approves the new budget</h1>
  <time datetime="2024-01-01">1 January</time>
  <article><p>The city council approved a new budget on Monday after weeks of debate.
  Officials said the plan funds schools, roads and public transport.</p></article>
</body></html>
"""


def make_service(upstream) -> ArticleService:
    return ArticleService(ArticleFetcher(user_agent="TestBrowser/1.0", timeout=30.0, transport=upstream.transport))


@pytest.mark.parametrize(
    "url, valid",
    [
        ("https://example.com/a", True),
        ("http://example.com", True),
        ("example.com/a", False),
        ("ftp://example.com/file", False),
        ("https://", False),
        ("not a url", False),
    ],
)
def test_is_valid_url(url, valid):
    assert is_valid_url(url) is valid


@pytest.mark.asyncio
async def test_parse_article(upstream):
    upstream.reply("example.com", httpx.Response(200, html=PAGE))

    article = await make_service(upstream).parse("https://example.com/news", "ru")

    assert article.title == "Council approves the new budget"
    assert article.date == "2024-01-01"
    assert article.content.startswith("The city council approved a new budget")
    assert upstream.requests[0].headers["User-Agent"] == "TestBrowser/1.0"


@pytest.mark.asyncio
@pytest.mark.parametrize("url", [None, "", "   ", 17])
async def test_parse_requires_url(upstream, url):
    with pytest.raises(ActionError) as exc_info:
        await make_service(upstream).parse(url, "en")

    assert exc_info.value.code == "INVALID_INPUT"
    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "URL is required"


@pytest.mark.asyncio
async def test_parse_rejects_malformed_url(upstream):
    with pytest.raises(ActionError) as exc_info:
        await make_service(upstream).parse("example.com/news", "ru")

    assert exc_info.value.code == "INVALID_URL"
    assert exc_info.value.message == "Некорректный формат URL"
    assert upstream.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "reply, code, status",
    [
        (httpx.Response(404), "NOT_FOUND", 404),
        (httpx.Response(503), "SERVER_ERROR", 503),
        (httpx.Response(500), "SERVER_ERROR", 500),
        (httpx.Response(403), "FETCH_ERROR", 403),
        (httpx.ConnectTimeout("timed out"), "TIMEOUT", 408),
        (httpx.ReadTimeout("timed out"), "TIMEOUT", 408),
        (httpx.ConnectError("refused"), "NETWORK_ERROR", 503),
        (httpx.RemoteProtocolError("bad framing"), "FETCH_ERROR", 500),
    ],
)
async def test_fetch_failures(upstream, reply, code, status):
    upstream.reply("example.com", reply)

    with pytest.raises(ActionError) as exc_info:
        await make_service(upstream).parse("https://example.com/news", "en")

    assert exc_info.value.code == code
    assert exc_info.value.status_code == status
    assert exc_info.value.message == "Failed to load article from this link."


@pytest.mark.asyncio
async def test_fetcher_follows_redirects(upstream):
    upstream.reply(
        "example.com",
        httpx.Response(301, headers={"Location": "https://example.com/final"}),
        httpx.Response(200, text="<html><body>final</body></html>"),
    )

    html = await ArticleFetcher(user_agent="UA", transport=upstream.transport).fetch("https://example.com/start")

    assert "final" in html
    assert str(upstream.requests[-1].url) == "https://example.com/final"


@pytest.mark.asyncio
async def test_fetcher_raises_page_fetch_error(upstream):
    upstream.reply("example.com", httpx.Response(410))

    with pytest.raises(PageFetchError) as exc_info:
        await ArticleFetcher(user_agent="UA", transport=upstream.transport).fetch("https://example.com/gone")

    assert exc_info.value.code == "FETCH_ERROR"
    assert exc_info.value.status_code == 410
