"""Localized user-facing error messages."""

from typing import Literal

Language = Literal["ru", "en", "es"]

DEFAULT_LANGUAGE: Language = "ru"
SUPPORTED_LANGUAGES: tuple[Language, ...] = ("ru", "en", "es")

MESSAGES: dict[str, dict[Language, str]] = {
    "url_required": {
        "ru": "URL обязателен для заполнения",
        "en": "URL is required",
        "es": "La URL es obligatoria",
    },
    "invalid_url": {
        "ru": "Некорректный формат URL",
        "en": "Invalid URL format",
        "es": "Formato de URL no válido",
    },
    "fetch_failed": {
        "ru": "Не удалось загрузить статью по этой ссылке.",
        "en": "Failed to load article from this link.",
        "es": "No se pudo cargar el artículo desde este enlace.",
    },
    "parse_failed": {
        "ru": "Произошла ошибка при обработке статьи. Попробуйте другую ссылку.",
        "en": "An error occurred while processing the article. Try another link.",
        "es": "Se produjo un error al procesar el artículo. Pruebe con otro enlace.",
    },
    "content_required": {
        "ru": "Контент обязателен для заполнения",
        "en": "Content is required",
        "es": "El contenido es obligatorio",
    },
    "invalid_input": {
        "ru": "Некорректные данные запроса",
        "en": "Invalid request data",
        "es": "Datos de solicitud no válidos",
    },
    "openrouter_key_missing": {
        "ru": "OpenRouter API ключ не настроен. Обратитесь к администратору.",
        "en": "OpenRouter API key is not configured. Contact the administrator.",
        "es": "La clave API de OpenRouter no está configurada. Contacte al administrador.",
    },
    "huggingface_key_missing": {
        "ru": "Hugging Face API ключ (HUGGINGFACE_API_KEY) не настроен. Обратитесь к администратору.",
        "en": "Hugging Face API key (HUGGINGFACE_API_KEY) is not configured. Contact the administrator.",
        "es": "La clave API de Hugging Face (HUGGINGFACE_API_KEY) no está configurada. Contacte al administrador.",
    },
    "auth_failed": {
        "ru": "Ошибка авторизации. Проверьте настройки API ключа.",
        "en": "Authorization error. Check the API key settings.",
        "es": "Error de autorización. Verifique la configuración de la clave API.",
    },
    "image_auth_failed": {
        "ru": "Ошибка авторизации Hugging Face. Проверьте настройки API ключа.",
        "en": "Hugging Face authorization error. Check the API key settings.",
        "es": "Error de autorización de Hugging Face. Verifique la configuración de la clave API.",
    },
    "rate_limited": {
        "ru": "Превышен лимит запросов. Попробуйте позже.",
        "en": "Request limit exceeded. Please try again later.",
        "es": "Se superó el límite de solicitudes. Inténtelo más tarde.",
    },
    "model_loading": {
        "ru": "Модель загружается. Подождите несколько секунд и попробуйте снова.",
        "en": "The model is loading. Wait a few seconds and try again.",
        "es": "El modelo se está cargando. Espere unos segundos e inténtelo de nuevo.",
    },
    "model_not_found": {
        "ru": "Модель {model} не найдена. Возможно, модель недоступна через Inference API.",
        "en": "Model {model} was not found. It may be unavailable through the Inference API.",
        "es": "No se encontró el modelo {model}. Puede que no esté disponible a través de la Inference API.",
    },
    "api_error": {
        "ru": "Ошибка API: {detail}",
        "en": "API error: {detail}",
        "es": "Error de API: {detail}",
    },
    "upstream_timeout": {
        "ru": "Сервис ИИ не ответил вовремя. Попробуйте еще раз.",
        "en": "The AI service did not respond in time. Please try again.",
        "es": "El servicio de IA no respondió a tiempo. Inténtelo de nuevo.",
    },
    "upstream_unreachable": {
        "ru": "Не удалось связаться с сервисом ИИ. Попробуйте еще раз.",
        "en": "Could not reach the AI service. Please try again.",
        "es": "No se pudo contactar con el servicio de IA. Inténtelo de nuevo.",
    },
    "invalid_response": {
        "ru": "Получен некорректный ответ от AI сервиса",
        "en": "Invalid response received from the AI service",
        "es": "Se recibió una respuesta no válida del servicio de IA",
    },
    "invalid_theses_response": {
        "ru": "Получен некорректный ответ при генерации тезисов",
        "en": "Invalid response received while generating theses",
        "es": "Se recibió una respuesta no válida al generar las tesis",
    },
    "invalid_image_response": {
        "ru": "Сервис вернул некорректный ответ.",
        "en": "The service returned an invalid response.",
        "es": "El servicio devolvió una respuesta no válida.",
    },
    "summary_failed": {
        "ru": "Произошла ошибка при создании описания статьи",
        "en": "An error occurred while generating the article description",
        "es": "Se produjo un error al generar la descripción del artículo",
    },
    "theses_failed": {
        "ru": "Произошла ошибка при генерации тезисов",
        "en": "An error occurred while generating theses",
        "es": "Se produjo un error al generar las tesis",
    },
    "telegram_failed": {
        "ru": "Произошла ошибка при создании поста для Telegram",
        "en": "An error occurred while creating the Telegram post",
        "es": "Se produjo un error al crear la publicación de Telegram",
    },
    "translation_failed": {
        "ru": "Произошла ошибка при переводе статьи",
        "en": "An error occurred while translating the article",
        "es": "Se produjo un error al traducir el artículo",
    },
    "illustration_theses_failed": {
        "ru": "Произошла ошибка при генерации тезисов для иллюстрации",
        "en": "An error occurred while generating theses for the illustration",
        "es": "Se produjo un error al generar las tesis para la ilustración",
    },
    "illustration_prompt_failed": {
        "ru": "Произошла ошибка при создании промпта для иллюстрации",
        "en": "An error occurred while creating the illustration prompt",
        "es": "Se produjo un error al crear el prompt de la ilustración",
    },
    "image_failed": {
        "ru": "Произошла ошибка при генерации изображения",
        "en": "An error occurred while generating the image",
        "es": "Se produjo un error al generar la imagen",
    },
    "illustration_failed": {
        "ru": "Произошла ошибка при создании иллюстрации. Попробуйте еще раз.",
        "en": "An error occurred while creating the illustration. Please try again.",
        "es": "Se produjo un error al crear la ilustración. Inténtelo de nuevo.",
    },
    "action_failed": {
        "ru": "Произошла ошибка при обработке. Попробуйте еще раз.",
        "en": "An error occurred while processing. Please try again.",
        "es": "Se produjo un error al procesar. Inténtelo de nuevo.",
    },
}


def resolve_language(code: object) -> Language:
    """Map a caller supplied language code onto a supported one, falling back to Russian."""
    if isinstance(code, str):
        normalized = code.strip().lower()
        if normalized in SUPPORTED_LANGUAGES:
            return normalized  # type: ignore[return-value]
    return DEFAULT_LANGUAGE


def message(key: str, language: str, **fmt: str) -> str:
    """Return the message ``key`` in ``language``, formatted with ``fmt``."""
    table = MESSAGES[key]
    text = table.get(resolve_language(language), table[DEFAULT_LANGUAGE])
    return text.format(**fmt) if fmt else text
