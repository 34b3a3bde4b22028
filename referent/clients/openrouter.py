"""OpenRouter chat-completions client."""

import logging
from typing import Any

import httpx

from referent.exceptions import (
    ConfigurationError,
    InvalidUpstreamResponseError,
    NetworkError,
    UpstreamAPIError,
    UpstreamTimeoutError,
)

logger = logging.getLogger(__name__)


class OpenRouterClient:
    """Async client for the OpenRouter chat completions API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://openrouter.ai/api/v1",
        app_url: str = "http://localhost:3000",
        timeout: float = 120.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not api_key:
            raise ConfigurationError("OpenRouter API key is required")
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.app_url = app_url
        self.timeout = timeout
        self.transport = transport

    def _headers(self, title: str) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
            "HTTP-Referer": self.app_url,
            "X-Title": title,
        }

    async def complete(
        self,
        model: str,
        messages: list[dict[str, str]],
        temperature: float,
        title: str = "Referent",
    ) -> str:
        """
        Run one chat completion and return the first choice's message text.

        Args:
            model: OpenRouter model id
            messages: Chat messages (``role``/``content`` dicts)
            temperature: Sampling temperature
            title: Value for the ``X-Title`` attribution header

        Returns:
            ``choices[0].message.content``

        Raises:
            UpstreamAPIError: On non-success status
            InvalidUpstreamResponseError: When the payload lacks the message text
            UpstreamTimeoutError: When the request times out
            NetworkError: On connection errors
        """
        url = f"{self.base_url}/chat/completions"
        body = {"model": model, "messages": messages, "temperature": temperature}

        logger.info(f"OpenRouter request: model={model} title={title!r}")

        async with httpx.AsyncClient(
            timeout=self.timeout,
            headers=self._headers(title),
            transport=self.transport,
        ) as client:
            try:
                response = await client.post(url, json=body)
            except httpx.TimeoutException as e:
                logger.error(f"OpenRouter request timed out after {self.timeout}s: {e}")
                raise UpstreamTimeoutError(f"OpenRouter request timed out: {e}") from e
            except httpx.RequestError as e:
                logger.error(f"Network error connecting to OpenRouter: {e}")
                raise NetworkError(f"Network error connecting to OpenRouter: {e}") from e

        if not response.is_success:
            error_text = response.text[:1000] if response.text else ""
            logger.error(f"OpenRouter API error {response.status_code}: model={model}, response={error_text}")
            raise UpstreamAPIError(
                status_code=response.status_code,
                message=f"API returned {response.status_code}",
                response_text=error_text,
            )

        try:
            data: Any = response.json()
        except ValueError as e:
            raise InvalidUpstreamResponseError("OpenRouter returned a non-JSON body") from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            logger.error(f"Unexpected OpenRouter payload: {str(data)[:500]}")
            raise InvalidUpstreamResponseError("OpenRouter response has no choices[0].message") from e
        if not isinstance(content, str):
            raise InvalidUpstreamResponseError("OpenRouter message content is not text")
        return content
