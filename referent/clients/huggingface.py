"""Hugging Face text-to-image client."""

import base64
import logging
from dataclasses import dataclass

import httpx

from referent.exceptions import (
    ConfigurationError,
    NetworkError,
    NonImageResponseError,
    UpstreamAPIError,
    UpstreamTimeoutError,
)

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_TYPE = "image/png"


@dataclass(frozen=True)
class GeneratedImage:
    content_type: str
    data: bytes

    def data_url(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.content_type};base64,{encoded}"


class HuggingFaceImageClient:
    """Async client for Hugging Face hosted text-to-image models."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str = "https://router.huggingface.co/hf-inference/models",
        timeout: float = 120.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not api_key:
            raise ConfigurationError("Hugging Face API key is required")
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def generate(self, prompt: str) -> GeneratedImage:
        """
        Render ``prompt`` into an image.

        Raises:
            UpstreamAPIError: On non-success status
            NonImageResponseError: When a successful response is not an image
            UpstreamTimeoutError: When the request times out
            NetworkError: On connection errors
        """
        url = f"{self.base_url}/{self.model}"
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        logger.info(f"Hugging Face request: model={self.model}, prompt_chars={len(prompt)}")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.post(url, json={"inputs": prompt}, headers=headers)
            except httpx.TimeoutException as e:
                logger.error(f"Hugging Face request timed out after {self.timeout}s: {e}")
                raise UpstreamTimeoutError(f"Hugging Face request timed out: {e}") from e
            except httpx.RequestError as e:
                logger.error(f"Network error connecting to Hugging Face: {e}")
                raise NetworkError(f"Network error connecting to Hugging Face: {e}") from e

        if not response.is_success:
            error_text = response.text[:1000] if response.text else ""
            logger.error(f"Hugging Face API error {response.status_code}: model={self.model}, response={error_text}")
            raise UpstreamAPIError(
                status_code=response.status_code,
                message=f"API returned {response.status_code}",
                response_text=error_text,
            )

        content_type = response.headers.get("content-type") or DEFAULT_IMAGE_TYPE
        if not content_type.startswith("image/"):
            logger.error(
                f"Hugging Face returned non-image response: content_type={content_type}, "
                f"body={response.text[:500]}"
            )
            raise NonImageResponseError(content_type, response.text)

        return GeneratedImage(content_type=content_type, data=response.content)
