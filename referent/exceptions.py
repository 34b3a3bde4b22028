"""Custom exceptions for the Referent application."""

import json
from typing import Any


class ReferentError(Exception):
    """Base exception for Referent application."""

    pass


class ConfigurationError(ReferentError):
    """Exception raised for configuration errors."""

    pass


class NetworkError(ReferentError):
    """Exception raised for network/connection errors."""

    pass


class UpstreamTimeoutError(NetworkError):
    """Exception raised when an upstream request exceeds its timeout."""

    pass


class UpstreamAPIError(ReferentError):
    """Exception raised when an upstream provider returns a non-success status."""

    def __init__(self, status_code: int, message: str, response_text: str = ""):
        self.status_code = status_code
        self.message = message
        self.response_text = response_text
        self.provider_message = provider_message(response_text)
        super().__init__(f"Upstream API error {status_code}: {message}")


class InvalidUpstreamResponseError(ReferentError):
    """Exception raised when an upstream payload is missing expected fields."""

    pass


class NonImageResponseError(ReferentError):
    """Exception raised when the image provider answers with something other than an image."""

    def __init__(self, content_type: str, response_text: str = ""):
        self.content_type = content_type
        self.response_text = response_text
        self.provider_message = provider_message(response_text)
        self.is_json = is_json(response_text)
        super().__init__(f"Expected an image, got {content_type!r}")


class PageFetchError(ReferentError):
    """Exception raised when an article page cannot be downloaded."""

    def __init__(self, code: str, status_code: int, detail: str = ""):
        self.code = code
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"{code} ({status_code}): {detail}" if detail else f"{code} ({status_code})")


class ActionError(ReferentError):
    """Error surfaced to API callers as a ``{error, message}`` payload."""

    def __init__(self, code: str, message: str, status_code: int = 500):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"{code}: {message}")

    def to_payload(self) -> dict[str, str]:
        return {"error": self.code, "message": self.message}


def is_json(response_text: str) -> bool:
    """Whether ``response_text`` parses as a JSON document."""
    if not response_text:
        return False
    try:
        json.loads(response_text)
    except ValueError:
        return False
    return True


def provider_message(response_text: str) -> str | None:
    """
    Pull a human readable message out of a provider error body.

    Understands ``{"error": {"message": ...}}``, ``{"error": "..."}``,
    ``{"message": ...}`` and OpenRouter's ``error.metadata.raw`` wrapper.

    Returns:
        The message, or None when the body is empty or carries none
    """
    if not response_text:
        return None
    try:
        data: Any = json.loads(response_text)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None

    error = data.get("error")
    if isinstance(error, dict):
        if isinstance(error.get("message"), str) and error["message"]:
            return error["message"]
        metadata = error.get("metadata")
        raw = metadata.get("raw") if isinstance(metadata, dict) else None
        if isinstance(raw, str):
            try:
                raw_data = json.loads(raw)
            except ValueError:
                return None
            if isinstance(raw_data, dict) and isinstance(raw_data.get("message"), str):
                return raw_data["message"]
    elif isinstance(error, str) and error:
        return error

    if isinstance(data.get("message"), str) and data["message"]:
        return data["message"]
    return None
