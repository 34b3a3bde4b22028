"""Download article pages."""

import logging

import httpx

from referent.exceptions import PageFetchError

logger = logging.getLogger(__name__)


class ArticleFetcher:
    """Async downloader for article HTML."""

    def __init__(
        self,
        user_agent: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.user_agent = user_agent
        self.timeout = timeout
        self.transport = transport

    async def fetch(self, url: str) -> str:
        """
        GET ``url`` and return the response body as text.

        Raises:
            PageFetchError: TIMEOUT, NETWORK_ERROR, FETCH_ERROR, NOT_FOUND or SERVER_ERROR
        """
        async with httpx.AsyncClient(
            timeout=self.timeout,
            headers={"User-Agent": self.user_agent},
            follow_redirects=True,
            transport=self.transport,
        ) as client:
            try:
                response = await client.get(url)
            except httpx.TimeoutException as e:
                logger.warning(f"Timeout fetching {url}: {e}")
                raise PageFetchError("TIMEOUT", 408, str(e)) from e
            except httpx.NetworkError as e:
                logger.warning(f"Network error fetching {url}: {e}")
                raise PageFetchError("NETWORK_ERROR", 503, str(e)) from e
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                logger.warning(f"Error fetching {url}: {e}")
                raise PageFetchError("FETCH_ERROR", 500, str(e)) from e

        status = response.status_code
        if not response.is_success:
            logger.warning(f"HTTP {status} for {url}")
            if status == 404:
                raise PageFetchError("NOT_FOUND", 404)
            if status >= 500:
                raise PageFetchError("SERVER_ERROR", status)
            raise PageFetchError("FETCH_ERROR", status)

        logger.debug(f"Fetched {url}: {len(response.content)} bytes")
        return response.text
