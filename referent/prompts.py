"""Per-language prompt tables for every generation action."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from referent.messages import DEFAULT_LANGUAGE, Language, resolve_language


@dataclass(frozen=True)
class PromptTemplate:
    """System instruction and user-message phrasing for one action in one language."""

    system: str
    question: str
    truncation_note: str = ""
    link_instruction: str = ""
    link_label: str = ""


@dataclass(frozen=True)
class Labels:
    title: str
    content: str
    theses: str


PromptTable = Mapping[Language, PromptTemplate]

LABELS: Mapping[Language, Labels] = MappingProxyType({
    "ru": Labels(title="Заголовок", content="Контент", theses="Тезисы"),
    "en": Labels(title="Title", content="Content", theses="Theses"),
    "es": Labels(title="Título", content="Contenido", theses="Tesis"),
})

SUMMARY_PROMPTS: PromptTable = MappingProxyType({
    "ru": PromptTemplate(
        system=(
            "Ты эксперт по анализу статей. ВАЖНО: Отвечай ТОЛЬКО на русском языке. "
            "Создай краткое, но информативное описание статьи в 2-3 предложениях. "
            "Опиши основную тему статьи и ключевые моменты, которые в ней рассматриваются. "
            "Будь точным и лаконичным."
        ),
        question="О чем эта статья?",
        truncation_note=(
            "[Примечание: статья была обрезана из-за ограничений модели, "
            "анализ выполнен на основе начала статьи]"
        ),
    ),
    "en": PromptTemplate(
        system=(
            "You are an expert in article analysis. IMPORTANT: Respond ONLY in English. "
            "Create a brief but informative description of the article in 2-3 sentences. "
            "Describe the main topic of the article and the key points it covers. "
            "Be precise and concise."
        ),
        question="What is this article about?",
        truncation_note=(
            "[Note: the article was truncated due to model limitations, "
            "the analysis is based on the beginning of the article]"
        ),
    ),
    "es": PromptTemplate(
        system=(
            "Eres un experto en análisis de artículos. IMPORTANTE: Responde SOLO en español. "
            "Crea una descripción breve pero informativa del artículo en 2-3 oraciones. "
            "Describe el tema principal del artículo y los puntos clave que trata. "
            "Sé preciso y conciso."
        ),
        question="¿De qué trata este artículo?",
        truncation_note=(
            "[Nota: el artículo fue truncado debido a las limitaciones del modelo, "
            "el análisis se basa en el comienzo del artículo]"
        ),
    ),
})

THESES_PROMPTS: PromptTable = MappingProxyType({
    "ru": PromptTemplate(
        system=(
            "Ты эксперт по анализу статей. ВАЖНО: Отвечай ТОЛЬКО на русском языке. "
            "Создай список основных тезисов статьи в формате маркированного списка "
            "(используй символы • или -). Каждый тезис должен быть кратким (1-2 предложения), "
            "информативным и отражать ключевую мысль. Выдели 5-8 наиболее важных тезисов. "
            "Все тезисы должны быть написаны на русском языке."
        ),
        question="Создай тезисы для этой статьи на русском языке.",
        truncation_note=(
            "[Примечание: статья была обрезана из-за ограничений модели, "
            "тезисы созданы на основе начала статьи]"
        ),
    ),
    "en": PromptTemplate(
        system=(
            "You are an expert in article analysis. IMPORTANT: Respond ONLY in English. "
            "Create a list of main theses of the article in bullet list format "
            "(use • or - symbols). Each thesis should be brief (1-2 sentences), informative "
            "and reflect the key idea. Highlight 5-8 most important theses. "
            "All theses must be written in English."
        ),
        question="Create theses for this article in English.",
        truncation_note=(
            "[Note: the article was truncated due to model limitations, "
            "theses are created based on the beginning of the article]"
        ),
    ),
    "es": PromptTemplate(
        system=(
            "Eres un experto en análisis de artículos. IMPORTANTE: Responde SOLO en español. "
            "Crea una lista de las tesis principales del artículo en formato de lista con viñetas "
            "(usa símbolos • o -). Cada tesis debe ser breve (1-2 oraciones), informativa y "
            "reflejar la idea clave. Destaca 5-8 tesis más importantes. "
            "Todas las tesis deben estar escritas en español."
        ),
        question="Crea tesis para este artículo en español.",
        truncation_note=(
            "[Nota: el artículo fue truncado debido a las limitaciones del modelo, "
            "las tesis se crean basándose en el comienzo del artículo]"
        ),
    ),
})

TELEGRAM_PROMPTS: PromptTable = MappingProxyType({
    "ru": PromptTemplate(
        system=(
            "Ты создаешь посты для Telegram канала. ВАЖНО: Пиши ТОЛЬКО на русском языке. "
            "Выводи только готовый пост, без предисловий, комментариев или объяснений. "
            "Не пиши 'Вот пост:', 'Я создал пост:' или подобные фразы. "
            "Начинай сразу с текста поста. Пост должен быть кратким, информативным, "
            "привлекательным и содержать призыв к действию. "
            "В конце поста обязательно добавь ссылку на источник статьи."
        ),
        question="Создай пост для Telegram на основе этой статьи.",
        truncation_note=(
            "[Примечание: статья была обрезана из-за ограничений модели, "
            "пост создан на основе начала статьи]"
        ),
        link_instruction="Обязательно добавь в конце поста ссылку на источник:",
        link_label="Источник",
    ),
    "en": PromptTemplate(
        system=(
            "You write posts for a Telegram channel. IMPORTANT: Write ONLY in English. "
            "Output only the finished post, without introductions, comments or explanations. "
            "Do not write 'Here is the post:', 'I created a post:' or similar phrases. "
            "Start directly with the post text. The post should be brief, informative, "
            "engaging and contain a call to action. "
            "Be sure to add a link to the source article at the end of the post."
        ),
        question="Create a Telegram post based on this article.",
        truncation_note=(
            "[Note: the article was truncated due to model limitations, "
            "the post is based on the beginning of the article]"
        ),
        link_instruction="Be sure to add a link to the source at the end of the post:",
        link_label="Source",
    ),
    "es": PromptTemplate(
        system=(
            "Creas publicaciones para un canal de Telegram. IMPORTANTE: Escribe SOLO en español. "
            "Muestra solo la publicación terminada, sin introducciones, comentarios ni explicaciones. "
            "No escribas 'Aquí está la publicación:', 'He creado una publicación:' ni frases similares. "
            "Comienza directamente con el texto de la publicación. La publicación debe ser breve, "
            "informativa, atractiva y contener una llamada a la acción. "
            "Al final de la publicación añade obligatoriamente un enlace a la fuente del artículo."
        ),
        question="Crea una publicación de Telegram basada en este artículo.",
        truncation_note=(
            "[Nota: el artículo fue truncado debido a las limitaciones del modelo, "
            "la publicación se basa en el comienzo del artículo]"
        ),
        link_instruction="Añade obligatoriamente al final de la publicación el enlace a la fuente:",
        link_label="Fuente",
    ),
})

TRANSLATION_PROMPTS: PromptTable = MappingProxyType({
    "ru": PromptTemplate(
        system=(
            "Ты профессиональный переводчик. ВАЖНО: Отвечай ТОЛЬКО на русском языке. "
            "Переведи следующий текст на русский язык, сохраняя структуру и стиль оригинала."
        ),
        question="Переведи следующую статью на русский язык:",
    ),
    "en": PromptTemplate(
        system=(
            "You are a professional translator. IMPORTANT: Respond ONLY in English. "
            "Translate the following text into English, preserving the structure and style "
            "of the original."
        ),
        question="Translate the following article into English:",
    ),
    "es": PromptTemplate(
        system=(
            "Eres un traductor profesional. IMPORTANTE: Responde SOLO en español. "
            "Traduce el siguiente texto al español, conservando la estructura y el estilo "
            "del original."
        ),
        question="Traduce el siguiente artículo al español:",
    ),
})

# Image prompts are always requested in English; only the instructions are localized.
IMAGE_PROMPT_PROMPTS: PromptTable = MappingProxyType({
    "ru": PromptTemplate(
        system=(
            "Ты эксперт по созданию промптов для генерации изображений. На основе тезисов статьи "
            "создай детальный промпт для генерации иллюстрации на английском языке. Промпт должен "
            "описывать визуальную сцену, основные элементы, стиль и настроение. Промпт должен быть "
            "на английском языке и содержать только описание без дополнительных комментариев. "
            "Ответ должен начинаться сразу с описания изображения."
        ),
        question=(
            "Создай промпт для генерации иллюстрации на основе этих тезисов статьи. "
            "Промпт должен быть на английском языке."
        ),
    ),
    "en": PromptTemplate(
        system=(
            "You are an expert at creating prompts for image generation. Based on the article "
            "theses, create a detailed prompt for generating an illustration in English. The prompt "
            "should describe the visual scene, main elements, style and mood. The prompt should be "
            "in English and contain only the description without additional comments. The response "
            "should start immediately with the image description."
        ),
        question=(
            "Create a prompt for generating an illustration based on these article theses. "
            "The prompt should be in English."
        ),
    ),
    "es": PromptTemplate(
        system=(
            "Eres un experto en crear prompts para generación de imágenes. Basándote en las tesis "
            "del artículo, crea un prompt detallado para generar una ilustración en inglés. El prompt "
            "debe describir la escena visual, los elementos principales, el estilo y el estado de "
            "ánimo. El prompt debe estar en inglés y contener solo la descripción sin comentarios "
            "adicionales. La respuesta debe comenzar inmediatamente con la descripción de la imagen."
        ),
        question=(
            "Crea un prompt para generar una ilustración basada en estas tesis del artículo. "
            "El prompt debe estar en inglés."
        ),
    ),
})


def select(table: PromptTable, language: str) -> PromptTemplate:
    """Template for ``language``, or the Russian one for unknown codes."""
    return table.get(resolve_language(language), table[DEFAULT_LANGUAGE])


def labels_for(language: str) -> Labels:
    return LABELS.get(resolve_language(language), LABELS[DEFAULT_LANGUAGE])


def truncate(content: str, limit: int | None) -> tuple[str, bool]:
    """Cut ``content`` to its first ``limit`` characters; the flag tells whether it was cut."""
    if limit is None or len(content) <= limit:
        return content, False
    return content[:limit], True


def build_article_prompt(
    template: PromptTemplate,
    language: str,
    content: str,
    title: str | None = None,
    url: str | None = None,
    limit: int | None = None,
) -> str:
    """
    User message for an action that reads the article.

    Shape: question, optional title, (truncated) content, optional source-link
    instruction, and the truncation notice when the content was cut.
    """
    labels = labels_for(language)
    text, truncated = truncate(content, limit)

    prompt = template.question
    if title:
        prompt += f" {labels.title}: {title}"
    prompt += f"\n\n{labels.content}: {text}"
    if url and template.link_instruction:
        prompt += f"\n\n{template.link_instruction} {url}"
    if truncated and template.truncation_note:
        prompt += f"\n\n{template.truncation_note}"
    return prompt


def build_translation_prompt(template: PromptTemplate, content: str) -> str:
    return f"{template.question}\n\n{content}"


def build_image_prompt_request(template: PromptTemplate, language: str, theses: str) -> str:
    labels = labels_for(language)
    return f"{template.question}\n\n{labels.theses}:\n{theses}"


def chat_messages(system: str, user: str) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": system},
        {"role": "user", "content": user},
    ]
