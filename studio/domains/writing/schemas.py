from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from studio.domains.documents.entities import NodeKind
from studio.domains.writing.entities import GenerationKind


class GenerationRequest(BaseModel):
    """Запрос к генератору текста"""
    prompt: str = Field(..., min_length=1)
    kind: GenerationKind = GenerationKind.CONTINUE
    context: Optional[str] = None
    current_content: Optional[str] = None


class GenerationResult(BaseModel):
    """Ответ генератора: текст или ошибка"""
    content: str = ""
    suggestions: List[str] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class QuickAction(BaseModel):
    """Быстрое действие ассистента"""
    kind: GenerationKind
    label: str
    prompt: str
    requires_content: bool = True


class WritingDocumentCreate(BaseModel):
    """Схема для создания документа из студии"""
    name: str = Field(..., min_length=1, max_length=255)
    kind: NodeKind = NodeKind.DOCUMENT
    parent_id: Optional[str] = None
    use_ai: bool = False

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Name cannot be empty')
        return v.strip()


class ContentChange(BaseModel):
    content: str = Field(..., max_length=1000000)


class TitleChange(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError('Title cannot be empty')
        return v.strip()


class ContentInsert(BaseModel):
    text: str = Field(..., min_length=1)


class AssistRequest(BaseModel):
    """Запрос к ассистенту; без kind вид определяется по тексту"""
    prompt: str = Field(..., min_length=1, max_length=10000)
    kind: Optional[GenerationKind] = None
    document_id: Optional[str] = None

    @field_validator('prompt')
    @classmethod
    def validate_prompt(cls, v):
        if not v.strip():
            raise ValueError('Prompt cannot be empty')
        return v.strip()


class ContentStatsResponse(BaseModel):
    """Схема для статистики текста документа"""
    document_id: str
    word_count: int
    character_count: int
    reading_time_minutes: int
    page_count: int


class TemplateResponse(BaseModel):
    id: str
    name: str
    description: str
    category: str
    ai_features: List[str]
    document_name: str

    model_config = ConfigDict(from_attributes=True)
