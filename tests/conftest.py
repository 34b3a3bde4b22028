"""Shared fixtures: settings, fake upstream providers and a test client."""

import json
from typing import Any, Callable, Union

import httpx
import pytest
from fastapi.testclient import TestClient

from referent.config import Settings, get_settings
from referent.dependencies import get_http_transport
from referent.main import app

Reply = Union[httpx.Response, Exception, Callable[[httpx.Request], httpx.Response]]


class FakeUpstream:
    """Scripted replies per host, recording every outbound request."""

    def __init__(self):
        self.replies: dict[str, list[Reply]] = {}
        self.requests: list[httpx.Request] = []

    def reply(self, host: str, *replies: Reply) -> "FakeUpstream":
        self.replies.setdefault(host, []).extend(replies)
        return self

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self.replies.get(request.url.host)
        if not queue:
            raise AssertionError(f"Unexpected request to {request.url}")
        reply = queue.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            return reply(request)
        return reply

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def bodies(self, host: str) -> list[dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests if r.url.host == host]


def chat_reply(text: str) -> httpx.Response:
    return httpx.Response(200, json={"choices": [{"message": {"role": "assistant", "content": text}}]})


def user_message(body: dict[str, Any]) -> str:
    return body["messages"][1]["content"]


def system_message(body: dict[str, Any]) -> str:
    return body["messages"][0]["content"]


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        openrouter_api_key="test-openrouter-key",
        huggingface_api_key="test-hf-key",
    )


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def client(settings, upstream):
    """Test client whose outbound HTTP goes to ``upstream``."""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_http_transport] = lambda: upstream.transport
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
