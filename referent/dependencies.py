"""FastAPI dependencies."""

import httpx
from fastapi import Depends

from referent.clients.fetcher import ArticleFetcher
from referent.config import Settings, get_settings
from referent.orchestrator import ArticleOrchestrator
from referent.services import ArticleService


def get_http_transport() -> httpx.AsyncBaseTransport | None:
    """Transport for outbound clients; None means httpx's default network transport."""
    return None


def get_article_service(
    settings: Settings = Depends(get_settings),
    transport: httpx.AsyncBaseTransport | None = Depends(get_http_transport),
) -> ArticleService:
    """Get article service instance via dependency injection."""
    fetcher = ArticleFetcher(
        user_agent=settings.fetch_user_agent,
        timeout=settings.fetch_timeout,
        transport=transport,
    )
    return ArticleService(fetcher)


def get_orchestrator(
    settings: Settings = Depends(get_settings),
    transport: httpx.AsyncBaseTransport | None = Depends(get_http_transport),
) -> ArticleOrchestrator:
    """Get orchestrator instance via dependency injection."""
    return ArticleOrchestrator(settings, transport=transport)
