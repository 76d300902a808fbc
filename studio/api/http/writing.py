from typing import List

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status

from studio.api.deps import get_generator, get_store
from studio.api.http.documents import document_not_found, raise_for_result
from studio.domains.documents.entities import NodeKind
from studio.domains.documents.schemas import NodeResponse
from studio.domains.documents.store import DocumentStore
from studio.domains.writing.generation import TextGenerator
from studio.domains.writing.prompts import QUICK_ACTIONS
from studio.domains.writing.schemas import (
    AssistRequest, ContentChange, ContentInsert, ContentStatsResponse, GenerationResult,
    QuickAction, TemplateResponse, TitleChange, WritingDocumentCreate
)
from studio.domains.writing.services import WritingService
from studio.domains.writing.templates import list_templates

router = APIRouter(prefix="/writing", tags=["writing"])


def get_writing_service(
    store: DocumentStore = Depends(get_store),
    generator: TextGenerator = Depends(get_generator)
) -> WritingService:
    return WritingService(store, generator)


@router.post("/documents", response_model=NodeResponse, status_code=status.HTTP_201_CREATED)
async def create_document(
    document_data: WritingDocumentCreate,
    background_tasks: BackgroundTasks,
    writing_service: WritingService = Depends(get_writing_service)
):
    """Создание документа; текст от генератора дописывается в фоне"""
    result = await writing_service.create_document(document_data)
    raise_for_result(result)

    node = writing_service.store.find(result.node_id)
    if not node:
        raise document_not_found()

    if document_data.use_ai and document_data.kind == NodeKind.DOCUMENT:
        background_tasks.add_task(
            writing_service.fill_with_generated_content, result.node_id, document_data.name
        )

    return NodeResponse.model_validate(node)


@router.put("/documents/{node_id}/content", response_model=NodeResponse)
async def change_content(
    node_id: str,
    change: ContentChange,
    writing_service: WritingService = Depends(get_writing_service)
):
    """Новое содержимое документа"""
    node = await writing_service.change_content(node_id, change.content)
    if not node:
        raise document_not_found()
    return NodeResponse.model_validate(node)


@router.put("/documents/{node_id}/title", response_model=NodeResponse)
async def change_title(
    node_id: str,
    change: TitleChange,
    writing_service: WritingService = Depends(get_writing_service)
):
    """Смена заголовка (и имени) документа"""
    node = await writing_service.change_title(node_id, change.title)
    if not node:
        raise document_not_found()
    return NodeResponse.model_validate(node)


@router.post("/documents/{node_id}/insert", response_model=NodeResponse)
async def insert_content(
    node_id: str,
    insertion: ContentInsert,
    writing_service: WritingService = Depends(get_writing_service)
):
    """Вставка текста ассистента в конец документа"""
    node = await writing_service.insert_content(node_id, insertion.text)
    if not node:
        raise document_not_found()
    return NodeResponse.model_validate(node)


@router.get("/documents/{node_id}/stats", response_model=ContentStatsResponse)
async def get_content_stats(
    node_id: str,
    writing_service: WritingService = Depends(get_writing_service)
):
    """Статистика текста документа"""
    stats = await writing_service.content_stats(node_id)
    if stats is None:
        raise document_not_found()
    return ContentStatsResponse(document_id=node_id, **stats)


@router.get("/templates", response_model=List[TemplateResponse])
async def get_templates():
    """Каталог шаблонов"""
    return [TemplateResponse.model_validate(template) for template in list_templates()]


@router.post("/templates/{template_id}", response_model=NodeResponse, status_code=status.HTTP_201_CREATED)
async def apply_template(
    template_id: str,
    writing_service: WritingService = Depends(get_writing_service)
):
    """Создание документа из шаблона"""
    node = await writing_service.apply_template(template_id)
    if not node:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Template not found"
        )
    return NodeResponse.model_validate(node)


@router.get("/quick-actions", response_model=List[QuickAction])
async def get_quick_actions():
    """Быстрые действия ассистента"""
    return QUICK_ACTIONS


@router.post("/assist", response_model=GenerationResult)
async def assist(
    assist_request: AssistRequest,
    writing_service: WritingService = Depends(get_writing_service)
):
    """Запрос к ассистенту; ошибка генерации возвращается в поле error"""
    result = await writing_service.assist(assist_request)
    if result is None:
        raise document_not_found()
    return result
