"""Prompt construction and provider calls for every generation action."""

import logging
from dataclasses import dataclass
from typing import Callable, Mapping

import httpx

from referent import prompts
from referent.clients.huggingface import HuggingFaceImageClient
from referent.clients.openrouter import OpenRouterClient
from referent.config import Settings
from referent.exceptions import (
    ActionError,
    InvalidUpstreamResponseError,
    NetworkError,
    NonImageResponseError,
    UpstreamAPIError,
    UpstreamTimeoutError,
)
from referent.messages import Language, message
from referent.models import ActionKind, ActionRequest, GenerationResult

logger = logging.getLogger(__name__)

PostProcessor = Callable[[str, ActionRequest, prompts.PromptTemplate], str]


def append_source_link(post: str, request: ActionRequest, template: prompts.PromptTemplate) -> str:
    """
    Append the source URL unless the post already mentions it.

    The check is a case-insensitive literal substring match, so a URL that the
    model rewrote (trailing slash, dropped query string) is appended again.
    """
    url = request.url
    if not url or url.lower() in post.lower():
        return post
    return f"{post.strip()}\n\n🔗 {template.link_label}: {url}"


@dataclass(frozen=True)
class ActionConfig:
    """How one text action builds its prompt and shapes its result."""

    kind: ActionKind
    result_field: str
    error_code: str
    failure_key: str
    prompt_table: prompts.PromptTable
    temperature: float
    model_setting: str
    request_title: str
    max_content_length: int | None = None
    postprocess: PostProcessor | None = None
    invalid_response_key: str = "invalid_response"

    def build_user_prompt(self, request: ActionRequest, template: prompts.PromptTemplate) -> str:
        content = request.content or ""
        if self.kind is ActionKind.TRANSLATE:
            return prompts.build_translation_prompt(template, content)
        return prompts.build_article_prompt(
            template,
            request.language,
            content,
            title=request.title,
            url=request.url,
            limit=self.max_content_length,
        )


ACTIONS: Mapping[ActionKind, ActionConfig] = {
    ActionKind.SUMMARY: ActionConfig(
        kind=ActionKind.SUMMARY,
        result_field="summary",
        error_code="SUMMARY_ERROR",
        failure_key="summary_failed",
        prompt_table=prompts.SUMMARY_PROMPTS,
        temperature=0.4,
        model_setting="text_model",
        request_title="Referent - Article Summary",
        max_content_length=20000,
    ),
    ActionKind.THESES: ActionConfig(
        kind=ActionKind.THESES,
        result_field="theses",
        error_code="THESES_ERROR",
        failure_key="theses_failed",
        prompt_table=prompts.THESES_PROMPTS,
        temperature=0.5,
        model_setting="text_model",
        request_title="Referent - Article Theses",
        max_content_length=18000,
    ),
    ActionKind.TELEGRAM: ActionConfig(
        kind=ActionKind.TELEGRAM,
        result_field="post",
        error_code="TELEGRAM_ERROR",
        failure_key="telegram_failed",
        prompt_table=prompts.TELEGRAM_PROMPTS,
        temperature=0.6,
        model_setting="text_model",
        request_title="Referent - Telegram Post Generator",
        max_content_length=20000,
        postprocess=append_source_link,
    ),
    ActionKind.TRANSLATE: ActionConfig(
        kind=ActionKind.TRANSLATE,
        result_field="translation",
        error_code="TRANSLATION_ERROR",
        failure_key="translation_failed",
        prompt_table=prompts.TRANSLATION_PROMPTS,
        temperature=0.3,
        model_setting="translation_model",
        request_title="Referent - Article Translator",
    ),
}

# Illustration pipeline steps
ILLUSTRATION_THESES = ActionConfig(
    kind=ActionKind.THESES,
    result_field="theses",
    error_code="THESES_ERROR",
    failure_key="illustration_theses_failed",
    prompt_table=prompts.THESES_PROMPTS,
    temperature=0.5,
    model_setting="text_model",
    request_title="Referent - Article Theses for Illustration",
    max_content_length=18000,
    invalid_response_key="invalid_theses_response",
)
IMAGE_PROMPT_TEMPERATURE = 0.7
IMAGE_PROMPT_TITLE = "Referent - Illustration Prompt Generator"

FALLBACK_ERROR_CODES: Mapping[ActionKind, str] = {
    ActionKind.SUMMARY: "SUMMARY_ERROR",
    ActionKind.THESES: "THESES_ERROR",
    ActionKind.TELEGRAM: "TELEGRAM_ERROR",
    ActionKind.TRANSLATE: "TRANSLATION_ERROR",
    ActionKind.ILLUSTRATION: "ILLUSTRATION_ERROR",
}


def unexpected_failure(action: ActionKind, language: Language) -> ActionError:
    """Error reported when an action fails for a reason nothing else classified."""
    key = "illustration_failed" if action is ActionKind.ILLUSTRATION else "action_failed"
    return ActionError(FALLBACK_ERROR_CODES[action], message(key, language), 500)


class ArticleOrchestrator:
    """Runs generation actions against the configured providers."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self.transport = transport

    async def generate(self, action: ActionKind, request: ActionRequest) -> GenerationResult:
        """
        Run ``action`` for ``request``.

        Raises:
            ActionError: On invalid input, missing credentials or any provider failure
        """
        language = request.language
        if not isinstance(request.content, str) or not request.content:
            raise ActionError("INVALID_INPUT", message("content_required", language), 400)

        logger.info(
            f"Generating {action.value}",
            extra={"action": action.value},
        )

        if action is ActionKind.ILLUSTRATION:
            return await self._illustrate(request)

        config = ACTIONS[action]
        client = self._text_client(language)
        template = prompts.select(config.prompt_table, language)
        text = await self._complete(client, config, template, request)
        if config.postprocess is not None:
            text = config.postprocess(text, request, template)
        return GenerationResult(**{config.result_field: text})

    def _text_client(self, language: Language) -> OpenRouterClient:
        if not self.settings.openrouter_api_key:
            raise ActionError("API_KEY_MISSING", message("openrouter_key_missing", language), 500)
        return OpenRouterClient(
            api_key=self.settings.openrouter_api_key,
            base_url=self.settings.openrouter_base_url,
            app_url=self.settings.app_url,
            timeout=self.settings.llm_timeout,
            transport=self.transport,
        )

    def _image_client(self, language: Language) -> HuggingFaceImageClient:
        if not self.settings.huggingface_api_key:
            raise ActionError("API_KEY_MISSING", message("huggingface_key_missing", language), 500)
        return HuggingFaceImageClient(
            api_key=self.settings.huggingface_api_key,
            model=self.settings.image_model,
            base_url=self.settings.huggingface_base_url,
            timeout=self.settings.image_timeout,
            transport=self.transport,
        )

    async def _complete(
        self,
        client: OpenRouterClient,
        config: ActionConfig,
        template: prompts.PromptTemplate,
        request: ActionRequest,
    ) -> str:
        user_prompt = config.build_user_prompt(request, template)
        model = getattr(self.settings, config.model_setting)
        return await self._call_text_provider(
            client,
            model=model,
            messages=prompts.chat_messages(template.system, user_prompt),
            temperature=config.temperature,
            title=config.request_title,
            error_code=config.error_code,
            failure_key=config.failure_key,
            invalid_key=config.invalid_response_key,
            language=request.language,
        )

    async def _call_text_provider(
        self,
        client: OpenRouterClient,
        *,
        model: str,
        messages: list[dict[str, str]],
        temperature: float,
        title: str,
        error_code: str,
        failure_key: str,
        invalid_key: str,
        language: Language,
    ) -> str:
        try:
            return await client.complete(model, messages, temperature, title=title)
        except UpstreamAPIError as e:
            raise self._text_failure(e, error_code, failure_key, language) from e
        except InvalidUpstreamResponseError as e:
            raise ActionError("INVALID_RESPONSE", message(invalid_key, language), 500) from e
        except UpstreamTimeoutError as e:
            raise ActionError(error_code, message("upstream_timeout", language), 504) from e
        except NetworkError as e:
            raise ActionError(error_code, message("upstream_unreachable", language), 502) from e

    async def _illustrate(self, request: ActionRequest) -> GenerationResult:
        """Theses, then an English image prompt from the theses, then the image itself."""
        language = request.language
        text_client = self._text_client(language)
        image_client = self._image_client(language)

        theses_template = prompts.select(ILLUSTRATION_THESES.prompt_table, language)
        theses = await self._complete(text_client, ILLUSTRATION_THESES, theses_template, request)

        prompt_template = prompts.select(prompts.IMAGE_PROMPT_PROMPTS, language)
        raw_image_prompt = await self._call_text_provider(
            text_client,
            model=self.settings.image_prompt_model,
            messages=prompts.chat_messages(
                prompt_template.system,
                prompts.build_image_prompt_request(prompt_template, language, theses),
            ),
            temperature=IMAGE_PROMPT_TEMPERATURE,
            title=IMAGE_PROMPT_TITLE,
            error_code="PROMPT_ERROR",
            failure_key="illustration_prompt_failed",
            invalid_key="invalid_response",
            language=language,
        )
        image_prompt = raw_image_prompt.strip()

        try:
            image = await image_client.generate(image_prompt)
        except UpstreamAPIError as e:
            raise self._image_failure(e, language) from e
        except NonImageResponseError as e:
            if e.provider_message:
                detail = e.provider_message
            elif e.response_text and not e.is_json:
                detail = e.response_text[:200]
            else:
                detail = message("invalid_image_response", language)
            raise ActionError("IMAGE_GENERATION_ERROR", detail, 500) from e
        except UpstreamTimeoutError as e:
            raise ActionError("IMAGE_GENERATION_ERROR", message("upstream_timeout", language), 504) from e
        except NetworkError as e:
            raise ActionError("IMAGE_GENERATION_ERROR", message("upstream_unreachable", language), 502) from e

        return GenerationResult(illustration=image.data_url())

    @staticmethod
    def _text_failure(
        error: UpstreamAPIError, code: str, failure_key: str, language: Language
    ) -> ActionError:
        if error.status_code in (401, 403):
            text = message("auth_failed", language)
        elif error.status_code == 429:
            text = message("rate_limited", language)
        elif error.provider_message:
            text = error.provider_message
        elif error.response_text:
            text = message("api_error", language, detail=error.response_text[:200])
        else:
            text = message(failure_key, language)
        return ActionError(code, text, error.status_code)

    def _image_failure(self, error: UpstreamAPIError, language: Language) -> ActionError:
        if error.status_code == 503:
            text = message("model_loading", language)
        elif error.status_code in (401, 403):
            text = message("image_auth_failed", language)
        elif error.status_code == 404:
            text = message("model_not_found", language, model=self.settings.image_model)
        elif error.provider_message:
            text = error.provider_message
        elif error.response_text:
            text = message("api_error", language, detail=error.response_text[:200])
        else:
            text = message("image_failed", language)
        return ActionError("IMAGE_GENERATION_ERROR", text, error.status_code)
