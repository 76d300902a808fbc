from enum import Enum
from typing import List, Optional


class GenerationKind(str, Enum):
    """Вид запроса к генератору текста"""
    CONTINUE = "continue"
    IMPROVE = "improve"
    SUMMARIZE = "summarize"
    BRAINSTORM = "brainstorm"
    OUTLINE = "outline"
    CHARACTER = "character"
    DIALOGUE = "dialogue"


class Template:
    """Шаблон, из которого создаётся новый документ"""

    def __init__(
        self,
        id: str,
        name: str,
        description: str,
        category: str,
        ai_features: Optional[List[str]] = None,
        document_name: str = "New Document",
        content: Optional[str] = None,
    ):
        self.id = id
        self.name = name
        self.description = description
        self.category = category
        self.ai_features = ai_features or []
        self.document_name = document_name
        self.content = content or (
            f"<h1>{document_name}</h1><p>Start writing here...</p>"
            "<p><em>The AI assistant is ready to help with your writing.</em></p>"
        )

    def __repr__(self) -> str:
        return f"Template(id={self.id}, name={self.name})"
