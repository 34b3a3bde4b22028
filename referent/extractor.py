"""Heuristic extraction of title, date and body text from article HTML."""

import logging
import re

from bs4 import BeautifulSoup, Tag

from referent.models import ParsedArticle

logger = logging.getLogger(__name__)

# Ordered from most specific to most generic.
TITLE_SELECTORS = (
    "h1",
    "article h1",
    ".post-title",
    ".article-title",
    ".entry-title",
    "[class*='title']",
    "title",
)

DATE_SELECTORS = (
    "time[datetime]",
    "time",
    "[class*='date']",
    "[class*='published']",
    "[class*='time']",
    "meta[property='article:published_time']",
    "meta[name='publish-date']",
    "meta[name='date']",
)

CONTENT_SELECTORS = (
    "article",
    ".post",
    ".content",
    ".article-content",
    ".entry-content",
    ".post-content",
    "[class*='article']",
    "[class*='content']",
    "main",
    "[role='article']",
)

CONTAINER_NOISE = "script, style, nav, aside, .ad, .advertisement, .sidebar"
PAGE_NOISE = "script, style, noscript, nav, header, footer, aside, .ad, .advertisement, .sidebar"

MIN_TITLE_LENGTH = 10
MIN_CONTENT_LENGTH = 100

_WHITESPACE_RE = re.compile(r"\s+")
_BLANK_LINES_RE = re.compile(r"\n\s*\n")


def clean_text(text: str) -> str:
    """Collapse whitespace runs and blank lines, then trim."""
    text = _WHITESPACE_RE.sub(" ", text)
    text = _BLANK_LINES_RE.sub("\n\n", text)
    return text.strip()


def _strip_noise(node: Tag, selector: str) -> None:
    for element in node.select(selector):
        element.decompose()


def extract_title(soup: BeautifulSoup) -> str | None:
    """
    First selector whose first match has more than ``MIN_TITLE_LENGTH`` characters.

    Falls back to ``og:title`` and then to the raw ``<title>`` text.
    """
    for selector in TITLE_SELECTORS:
        found = soup.select_one(selector)
        if found is None:
            continue
        text = found.get_text().strip()
        if len(text) > MIN_TITLE_LENGTH:
            return text

    og_title = soup.select_one("meta[property='og:title']")
    if og_title is not None:
        value = og_title.get("content")
        if isinstance(value, str) and value:
            return value

    page_title = soup.select_one("title")
    if page_title is not None:
        text = page_title.get_text().strip()
        if text:
            return text
    return None


def extract_date(soup: BeautifulSoup) -> str | None:
    for selector in DATE_SELECTORS:
        found = soup.select_one(selector)
        if found is None:
            continue

        if selector.startswith("meta"):
            value = found.get("content")
            if isinstance(value, str) and value:
                return value
            continue

        # datetime attribute, then content attribute, then visible text
        for candidate in (found.get("datetime"), found.get("content"), found.get_text().strip()):
            if isinstance(candidate, str) and candidate:
                return candidate
    return None


def extract_content(soup: BeautifulSoup) -> str | None:
    """
    Main article text from the first container holding enough cleaned text.

    Noise subtrees are removed from each candidate before it is measured. When no
    container qualifies the whole page body is used with page chrome stripped.
    """
    content = ""
    for selector in CONTENT_SELECTORS:
        found = soup.select_one(selector)
        if found is None:
            continue
        _strip_noise(found, CONTAINER_NOISE)
        text = found.get_text(" ").strip()
        if len(text) > MIN_CONTENT_LENGTH:
            logger.debug("Content matched selector %s", selector)
            content = text
            break

    if not content:
        body = soup.body or soup
        _strip_noise(body, PAGE_NOISE)
        content = body.get_text(" ")

    return clean_text(content) or None


def extract_article(html: str, source_url: str = "") -> ParsedArticle:
    """
    Extract ``{title, date, content}`` from downloaded HTML.

    Missing fields come back as None; this never raises for absent markup.

    Args:
        html: Raw page HTML
        source_url: URL the page was downloaded from, used for logging only

    Returns:
        ParsedArticle with whichever fields were found
    """
    if not html or not html.strip():
        return ParsedArticle()

    # html5lib always builds <head> and <body>.
    soup = BeautifulSoup(html, "html5lib")
    # Title and date are read before content extraction mutates the tree.
    title = extract_title(soup)
    date = extract_date(soup)
    content = extract_content(soup)

    logger.info(
        "Extracted article from %s: title=%s date=%s content_chars=%d",
        source_url or "<html>",
        bool(title),
        bool(date),
        len(content or ""),
    )
    return ParsedArticle(title=title, date=date, content=content)
