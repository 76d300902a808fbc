from studio.domains.writing.entities import GenerationKind, Template
from studio.domains.writing.schemas import (
    GenerationRequest, GenerationResult, QuickAction, WritingDocumentCreate,
    ContentChange, TitleChange, ContentInsert, AssistRequest,
    ContentStatsResponse, TemplateResponse
)
from studio.domains.writing.generation import (
    TextGenerator, DemoTextGenerator, DisabledTextGenerator, build_generator
)
from studio.domains.writing.services import WritingService

__all__ = [
    "GenerationKind", "Template",
    "GenerationRequest", "GenerationResult", "QuickAction", "WritingDocumentCreate",
    "ContentChange", "TitleChange", "ContentInsert", "AssistRequest",
    "ContentStatsResponse", "TemplateResponse",
    "TextGenerator", "DemoTextGenerator", "DisabledTextGenerator", "build_generator",
    "WritingService"
]
