"""HTTP contract tests for the API endpoints."""

import httpx
import pytest

from referent.config import Settings, get_settings
from referent.dependencies import get_orchestrator
from referent.main import app

from conftest import chat_reply

PAGE = """
<html><head><meta property="og:title" content="Budget"></head><body>
  <h1>Council approves the new budget</h1>
  <span class="date">2024-01-01</span>
  <article><p>The city council approved a new budget on Monday after weeks of debate.
  Officials said the plan funds schools, roads and public transport.</p></article>
</body></html>
"""


def test_health_endpoint(client):
    r = client.get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "healthy"
    assert "version" in data


def test_request_id_header(client):
    r = client.get("/health")
    assert r.headers.get("X-Request-ID")


def test_parse(client, upstream):
    upstream.reply("example.com", httpx.Response(200, html=PAGE))

    r = client.post("/api/parse", json={"url": "https://example.com/article"})

    assert r.status_code == 200
    data = r.json()
    assert data["title"] == "Council approves the new budget"
    assert data["date"] == "2024-01-01"
    assert data["content"].startswith("The city council approved")


def test_parse_empty_page_returns_nulls(client, upstream):
    upstream.reply("example.com", httpx.Response(200, text=""))

    r = client.post("/api/parse", json={"url": "https://example.com/empty"})

    assert r.status_code == 200
    assert r.json() == {"title": None, "date": None, "content": None}


def test_parse_invalid_url(client, upstream):
    r = client.post("/api/parse", json={"url": "nonsense", "targetLanguage": "en"})

    assert r.status_code == 400
    assert r.json() == {"error": "INVALID_URL", "message": "Invalid URL format"}
    assert upstream.requests == []


def test_parse_missing_url(client):
    r = client.post("/api/parse", json={})

    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_INPUT"


def test_parse_not_found(client, upstream):
    upstream.reply("example.com", httpx.Response(404))

    r = client.post("/api/parse", json={"url": "https://example.com/missing"})

    assert r.status_code == 404
    assert r.json() == {"error": "NOT_FOUND", "message": "Не удалось загрузить статью по этой ссылке."}


def test_summary(client, upstream):
    upstream.reply("openrouter.ai", chat_reply("The council passed a budget. Schools get more money."))

    r = client.post(
        "/api/summary",
        json={"content": "x" * 800, "title": "X", "targetLanguage": "en"},
    )

    assert r.status_code == 200
    assert r.json() == {"summary": "The council passed a budget. Schools get more money."}


@pytest.mark.parametrize(
    "path, field",
    [
        ("/api/theses", "theses"),
        ("/api/telegram", "post"),
        ("/api/translate", "translation"),
        ("/api/generate/theses", "theses"),
        ("/api/generate/translate", "translation"),
    ],
)
def test_text_actions_return_their_field(client, upstream, path, field):
    upstream.reply("openrouter.ai", chat_reply("result"))

    r = client.post(path, json={"content": "Body"})

    assert r.status_code == 200
    assert list(r.json()) == [field]


def test_illustration(client, upstream):
    upstream.reply("openrouter.ai", chat_reply("• thesis"), chat_reply("a drawing"))
    upstream.reply("router.huggingface.co", httpx.Response(200, content=b"JPEGDATA", headers={"content-type": "image/jpeg"}))

    r = client.post("/api/illustration", json={"content": "Body"})

    assert r.status_code == 200
    assert r.json()["illustration"].startswith("data:image/jpeg;base64,")


def test_missing_key_returns_500_without_calling_upstream(client, upstream):
    app.dependency_overrides[get_settings] = lambda: Settings(_env_file=None, openrouter_api_key="")

    r = client.post("/api/summary", json={"content": "Body", "targetLanguage": "en"})

    assert r.status_code == 500
    data = r.json()
    assert data["error"] == "API_KEY_MISSING"
    assert data["message"]
    assert upstream.requests == []


def test_missing_content(client, upstream):
    r = client.post("/api/theses", json={"title": "No body", "targetLanguage": "es"})

    assert r.status_code == 400
    assert r.json() == {"error": "INVALID_INPUT", "message": "El contenido es obligatorio"}
    assert upstream.requests == []


def test_wrong_field_type_is_invalid_input(client):
    r = client.post("/api/summary", json={"content": "Body", "title": ["not", "a", "string"]})

    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_INPUT"


def test_non_json_body_is_invalid_input(client):
    r = client.post("/api/summary", content=b"not json", headers={"content-type": "application/json"})

    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_INPUT"


def test_unknown_action(client):
    r = client.post("/api/generate/poem", json={"content": "Body"})

    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_INPUT"


def test_upstream_status_is_mirrored(client, upstream):
    upstream.reply("openrouter.ai", httpx.Response(429))

    r = client.post("/api/telegram", json={"content": "Body", "targetLanguage": "en"})

    assert r.status_code == 429
    assert r.json() == {"error": "TELEGRAM_ERROR", "message": "Request limit exceeded. Please try again later."}


def test_unexpected_failure_is_structured(client):
    class Broken:
        async def generate(self, action, request):
            raise RuntimeError("boom")

    app.dependency_overrides[get_orchestrator] = lambda: Broken()

    r = client.post("/api/illustration", json={"content": "Body", "targetLanguage": "en"})

    assert r.status_code == 500
    assert r.json() == {
        "error": "ILLUSTRATION_ERROR",
        "message": "An error occurred while creating the illustration. Please try again.",
    }
