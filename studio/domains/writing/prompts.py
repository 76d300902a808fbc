from typing import Dict, List

from studio.domains.writing.entities import GenerationKind
from studio.domains.writing.schemas import GenerationRequest, QuickAction


SYSTEM_PROMPTS: Dict[GenerationKind, str] = {
    GenerationKind.CONTINUE: (
        "You are a creative writing assistant. Continue the story naturally, maintaining "
        "the same tone, style, and narrative voice. Keep the continuation engaging and "
        "coherent with what came before."
    ),
    GenerationKind.IMPROVE: (
        "You are an expert editor. Improve the given text by enhancing clarity, flow, "
        "grammar, and style while maintaining the author's voice and intent."
    ),
    GenerationKind.SUMMARIZE: (
        "You are a skilled summarizer. Create a concise summary that captures the key "
        "points and main ideas of the given text."
    ),
    GenerationKind.BRAINSTORM: (
        "You are a creative brainstorming partner. Generate creative ideas, plot points, "
        "character developments, or story directions based on the given context."
    ),
    GenerationKind.OUTLINE: (
        "You are a story structure expert. Create a detailed outline that organizes the "
        "content logically and helps develop the narrative structure."
    ),
    GenerationKind.CHARACTER: (
        "You are a character development specialist. Create detailed, believable "
        "characters with depth, motivations, and unique traits."
    ),
    GenerationKind.DIALOGUE: (
        "You are a dialogue expert. Write natural, engaging dialogue that reveals "
        "character and advances the story."
    ),
}

SUGGESTIONS: Dict[GenerationKind, List[str]] = {
    GenerationKind.CONTINUE: [
        "Add more dialogue to reveal character",
        "Introduce a plot twist",
        "Describe the setting in more detail",
        "Show character emotions through actions",
    ],
    GenerationKind.IMPROVE: [
        "Vary sentence structure",
        "Use more specific vocabulary",
        "Add sensory details",
        "Strengthen transitions between ideas",
    ],
    GenerationKind.BRAINSTORM: [
        "Explore character backstories",
        "Consider alternative plot directions",
        "Add conflict or tension",
        "Develop subplots",
    ],
}

QUICK_ACTIONS: List[QuickAction] = [
    QuickAction(
        kind="continue",
        label="Continue Writing",
        prompt="Continue writing this story naturally, maintaining the same tone and style.",
    ),
    QuickAction(
        kind="improve",
        label="Improve Text",
        prompt="Improve this text for better clarity, flow, and engagement.",
    ),
    QuickAction(
        kind="brainstorm",
        label="Brainstorm Ideas",
        prompt="Generate creative ideas and directions for this story.",
        requires_content=False,
    ),
    QuickAction(
        kind="outline",
        label="Create Outline",
        prompt="Create a detailed outline for this content.",
    ),
    QuickAction(
        kind="character",
        label="Develop Characters",
        prompt="Help develop characters with depth and personality.",
        requires_content=False,
    ),
]

# Порядок важен: первое совпадение определяет вид запроса
KIND_KEYWORDS = [
    (("improve", "better"), GenerationKind.IMPROVE),
    (("brainstorm", "ideas"), GenerationKind.BRAINSTORM),
    (("outline",), GenerationKind.OUTLINE),
    (("character",), GenerationKind.CHARACTER),
    (("dialogue",), GenerationKind.DIALOGUE),
]

KINDS_REQUIRING_CONTENT = {
    GenerationKind(action.kind) for action in QUICK_ACTIONS if action.requires_content
}


def suggestions_for(kind: GenerationKind) -> List[str]:
    return list(SUGGESTIONS.get(GenerationKind(kind), []))


def infer_generation_kind(message: str) -> GenerationKind:
    """Вид запроса по свободному сообщению пользователя"""
    lowered = message.lower()
    for keywords, kind in KIND_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return kind
    return GenerationKind.CONTINUE


def initial_prompt_for(name: str) -> str:
    """Запрос для первичного наполнения нового документа по его имени"""
    lowered = name.lower()
    if "chapter" in lowered:
        return (
            f'Write an engaging opening for a chapter titled "{name}". Create a compelling '
            "scene that draws readers in with vivid descriptions, interesting characters, "
            "and a hook that makes them want to continue reading."
        )
    if "character" in lowered:
        return (
            f'Create a detailed character profile for "{name}". Include their background, '
            "personality traits, motivations, physical description, and key relationships. "
            "Make them feel like a real, three-dimensional person."
        )
    if "research" in lowered or "notes" in lowered:
        return (
            f'Generate comprehensive research notes and key points for "{name}". Include '
            "relevant facts, important considerations, and organized information that "
            "would be useful for a writing project."
        )
    if "outline" in lowered:
        return (
            f'Create a detailed outline for "{name}". Structure it with clear sections, '
            "subsections, and key points that provide a roadmap for development."
        )
    return (
        f'Write an introductory section for "{name}". Create engaging content that '
        "establishes the topic clearly and provides a strong foundation for further "
        "development."
    )


def build_user_message(request: GenerationRequest) -> str:
    parts = []
    if request.context:
        parts.append(f"Context: {request.context}\n\n")
    parts.append(request.prompt)
    if request.current_content:
        parts.append(f"\n\nCurrent content: {request.current_content}")
    return "".join(parts)


def build_messages(request: GenerationRequest) -> List[Dict[str, str]]:
    """Сообщения для chat-completion запроса"""
    return [
        {"role": "system", "content": SYSTEM_PROMPTS[GenerationKind(request.kind)]},
        {"role": "user", "content": build_user_message(request)},
    ]
