"""Работа с HTML-содержимым документов: подсчёт слов и сборка текста."""

import html
import math
from typing import Dict

import markdown
from bs4 import BeautifulSoup

WORDS_PER_MINUTE = 200
WORDS_PER_PAGE = 250

MARKDOWN_EXTENSIONS = ["sane_lists", "nl2br"]

GENERATED_NOTICE = (
    "<p><em>This content was generated with AI assistance. "
    "Feel free to edit, expand, or completely rewrite as needed.</em></p>"
)


def _text(content: str, separator: str = "") -> str:
    return BeautifulSoup(content or "", "html.parser").get_text(separator)


def strip_tags(content: str) -> str:
    """Текст без HTML-тегов"""
    return _text(content)


def count_words(content: str) -> int:
    """Количество слов в HTML-содержимом; соседние блоки не склеиваются"""
    return len(_text(content, " ").split())


def content_stats(content: str) -> Dict[str, int]:
    words = count_words(content)
    return {
        "word_count": words,
        "character_count": len(strip_tags(content)),
        "reading_time_minutes": math.ceil(words / WORDS_PER_MINUTE),
        "page_count": max(1, math.ceil(words / WORDS_PER_PAGE)),
    }


def _escape(text: str) -> str:
    return html.escape(text, quote=False)


def generated_text_to_html(text: str) -> str:
    """Ответ модели (markdown) в HTML; сырой HTML в ответе экранируется"""
    if not (text or "").strip():
        return ""
    return markdown.markdown(_escape(text), extensions=MARKDOWN_EXTENSIONS)


def append_paragraph(content: str, text: str) -> str:
    paragraph = f"<p>{_escape(text)}</p>"
    return f"{content}{paragraph}" if content else paragraph


def placeholder_content(name: str) -> str:
    return f"<h1>{_escape(name)}</h1><p>Start writing here...</p>"


def generating_content() -> str:
    return "<p><em>Generating content with AI...</em></p>"


def generated_document_content(name: str, text: str) -> str:
    return f"<h1>{_escape(name)}</h1>{generated_text_to_html(text)}{GENERATED_NOTICE}"


def generation_failed_content(name: str, error: str) -> str:
    return (
        f"<h1>{_escape(name)}</h1>"
        f"<p><em>AI content generation encountered an issue: {_escape(error)}</em></p>"
        "<p>You can start writing here, or try using the AI assistant in the sidebar "
        "to generate content.</p>"
    )
