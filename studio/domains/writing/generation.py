"""
Генераторы текста.

Сам вызов языковой модели живёт вне студии: сюда подключается любой объект
с методом ``generate``. В комплекте есть демонстрационный генератор и
заглушка для случая, когда генерация не настроена.
"""

import asyncio
import logging
from typing import Protocol

from studio.core.config import Settings
from studio.domains.writing.entities import GenerationKind
from studio.domains.writing.prompts import build_messages, suggestions_for
from studio.domains.writing.schemas import GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)

NOT_CONFIGURED_ERROR = "Please set your OpenAI API key in settings to use AI features."


class TextGenerator(Protocol):
    async def generate(self, request: GenerationRequest) -> GenerationResult:
        ...


DEMO_RESPONSES = {
    GenerationKind.CONTINUE: (
        "The mysterious figure stepped out of the shadows, their face obscured by the dim "
        "streetlight. Sarah's heart raced as she recognized the familiar silhouette—it was "
        "someone she thought she'd never see again. The singing grew louder, more insistent, "
        "as if responding to this unexpected reunion.\n\n"
        "\"I've been looking for you,\" the figure said, their voice barely audible above the "
        "ethereal melody that seemed to emanate from the very air around them."
    ),
    GenerationKind.IMPROVE: (
        "Here's an improved version of your text with enhanced flow and clarity:\n\n"
        "[Your original text would be rewritten here with better structure, more vivid "
        "descriptions, and improved pacing. The AI would maintain your voice while making "
        "the prose more engaging and polished.]"
    ),
    GenerationKind.BRAINSTORM: (
        "Here are some creative directions for your story:\n\n"
        "• The singing could be a form of communication from another dimension\n"
        "• Sarah might discover she has a unique ability to understand the phenomenon\n"
        "• The empty city could be a test or simulation\n"
        "• Other survivors might have different reactions to the singing\n"
        "• The phenomenon could be connected to Sarah's past or family history"
    ),
    GenerationKind.SUMMARIZE: (
        "Summary: Sarah discovers her city has been mysteriously emptied of all life except "
        "humans. A strange, beautiful singing fills the air, and she encounters other "
        "survivors while trying to understand what has happened. The phenomenon appears to "
        "be centered around the harbor area and affects all living creatures except people."
    ),
    GenerationKind.OUTLINE: (
        "Story Outline:\n\n"
        "Act I - Discovery\n• Sarah notices the empty city\n"
        "• Introduction of the singing phenomenon\n• Meeting other survivors\n\n"
        "Act II - Investigation\n• Exploring the source of the phenomenon\n"
        "• Character development and relationships\n• Uncovering clues about the cause\n\n"
        "Act III - Resolution\n• Confronting the source\n• Character growth and change\n"
        "• New world order established"
    ),
    GenerationKind.CHARACTER: (
        "Character Development:\n\n"
        "**Sarah Chen** - Protagonist\n"
        "• Analytical mind helps her notice patterns others miss\n"
        "• Humming habit connects her to the phenomenon\n"
        "• Internal conflict between logic and intuition\n"
        "• Character arc: Learning to trust her instincts\n\n"
        "**Supporting Characters:**\n"
        "• The Scientist - Provides logical explanations\n"
        "• The Artist - Sees beauty in the chaos\n"
        "• The Child - Represents hope and innocence"
    ),
    GenerationKind.DIALOGUE: (
        "\"Do you hear it too?\" Sarah asked, her voice barely above a whisper.\n\n"
        "Marcus nodded slowly, his medical training warring with what his senses told him. "
        "\"It's impossible, but yes. It's like... like the city itself is singing.\"\n\n"
        "\"Not the city,\" Elena interjected, her artist's eye catching something the others "
        "missed. \"Look at the light. It's moving with the music. Whatever's doing this, "
        "it's alive.\""
    ),
}


class DemoTextGenerator:
    """Генератор с заготовленными ответами для демонстрации"""

    def __init__(self, delay_seconds: float = 1.5):
        self.delay_seconds = delay_seconds

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        messages = build_messages(request)
        content = DEMO_RESPONSES.get(
            request.kind, "AI response would appear here based on your request."
        )
        logger.debug(
            f"Demo generation for {request.kind.value} request: "
            f"{len(messages)} messages, user message {len(messages[-1]['content'])} chars"
        )
        return GenerationResult(content=content, suggestions=suggestions_for(request.kind))


class DisabledTextGenerator:
    """Генерация не настроена: всегда возвращает ошибку"""

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        return GenerationResult(error=NOT_CONFIGURED_ERROR)


def build_generator(settings: Settings) -> TextGenerator:
    """Генератор по настройкам приложения"""
    backend = settings.generation_backend.lower()
    if backend == "demo":
        return DemoTextGenerator(delay_seconds=settings.generation_delay_seconds)
    if backend == "disabled":
        return DisabledTextGenerator()
    raise ValueError(f"Unsupported generation backend: {settings.generation_backend}")
