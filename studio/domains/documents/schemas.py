from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from studio.domains.documents.entities import NodeKind


class NodeCreate(BaseModel):
    """Схема для создания узла"""
    name: str = Field(..., min_length=1, max_length=255)
    kind: NodeKind = NodeKind.DOCUMENT
    parent_id: Optional[str] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Name cannot be empty')
        return v.strip()


class NodeUpdate(BaseModel):
    """Схема для частичного обновления узла"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    title: Optional[str] = Field(None, max_length=255)
    content: Optional[str] = Field(None, max_length=1000000)  # 1MB max content
    notes: Optional[str] = Field(None, max_length=100000)
    word_count: Optional[int] = Field(None, ge=0)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if v is not None and not v.strip():
            raise ValueError('Name cannot be empty')
        return v.strip() if v else v


class NodeMove(BaseModel):
    """Схема для перемещения узла; без new_parent_id - в корень"""
    new_parent_id: Optional[str] = None


class NodeResponse(BaseModel):
    """Схема для ответа с данными узла"""
    id: str
    name: str
    kind: NodeKind
    title: Optional[str] = None
    content: Optional[str] = None
    notes: Optional[str] = None
    word_count: Optional[int] = None
    created_at: datetime
    updated_at: datetime
    parent_id: Optional[str] = None
    children: Optional[List["NodeResponse"]] = None

    model_config = ConfigDict(from_attributes=True)


NodeResponse.model_rebuild()


class ForestResponse(BaseModel):
    """Схема для дерева проекта"""
    documents: List[NodeResponse]
    total: int
    query: Optional[str] = None


class DocumentStatsResponse(BaseModel):
    """Схема для статистики проекта"""
    document_count: int
    folder_count: int
    total_word_count: int

    model_config = ConfigDict(from_attributes=True)


class SnapshotResponse(BaseModel):
    """Схема для ответа о сохранении снимка"""
    project: str
    nodes: int
    saved_at: datetime
