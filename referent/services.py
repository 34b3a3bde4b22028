"""Business logic for article parsing."""

import logging
from urllib.parse import urlparse

from referent.clients.fetcher import ArticleFetcher
from referent.exceptions import ActionError, PageFetchError
from referent.extractor import extract_article
from referent.messages import Language, message
from referent.models import ParsedArticle

logger = logging.getLogger(__name__)


def is_valid_url(url: str) -> bool:
    """Absolute http(s) URL with a host."""
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class ArticleService:
    """Downloads an article page and extracts its title, date and content."""

    def __init__(self, fetcher: ArticleFetcher):
        self.fetcher = fetcher

    async def parse(self, url: object, language: Language) -> ParsedArticle:
        """
        Fetch ``url`` and run the extraction heuristics on it.

        Raises:
            ActionError: INVALID_INPUT, INVALID_URL or a page-fetch failure code
        """
        if not isinstance(url, str) or not url.strip():
            raise ActionError("INVALID_INPUT", message("url_required", language), 400)
        if not is_valid_url(url):
            raise ActionError("INVALID_URL", message("invalid_url", language), 400)

        url = url.strip()
        try:
            html = await self.fetcher.fetch(url)
        except PageFetchError as e:
            raise ActionError(e.code, message("fetch_failed", language), e.status_code) from e

        return extract_article(html, url)
