"""Pydantic models for request and response payloads."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from referent.messages import Language, resolve_language


class ActionKind(str, Enum):
    """Generation actions available for a parsed article."""

    SUMMARY = "summary"
    THESES = "theses"
    TELEGRAM = "telegram"
    TRANSLATE = "translate"
    ILLUSTRATION = "illustration"


class ParseRequest(BaseModel):
    """Body of ``POST /api/parse``."""

    model_config = ConfigDict(populate_by_name=True)

    url: Any = None
    target_language: Any = Field(default=None, alias="targetLanguage")

    @property
    def language(self) -> Language:
        return resolve_language(self.target_language)


class ParsedArticle(BaseModel):
    """Best-effort extraction result for one article page."""

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    date: str | None = None
    content: str | None = None


class ActionRequest(BaseModel):
    """Input shared by every generation action."""

    model_config = ConfigDict(populate_by_name=True)

    content: Any = None
    title: str | None = None
    url: str | None = None
    target_language: Any = Field(default=None, alias="targetLanguage")

    @property
    def language(self) -> Language:
        """Target language, ``ru`` when absent or unrecognized."""
        return resolve_language(self.target_language)


class GenerationResult(BaseModel):
    """Action-specific result; exactly one field is set."""

    summary: str | None = None
    theses: str | None = None
    post: str | None = None
    translation: str | None = None
    illustration: str | None = Field(default=None, description="Image as a data URL")

    def payload(self) -> dict[str, str]:
        return self.model_dump(exclude_none=True)


class ErrorResponse(BaseModel):
    """Structured error payload."""

    error: str
    message: str
