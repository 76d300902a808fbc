from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from studio.api.deps import get_settings, get_snapshot_repository, get_store
from studio.core.config import Settings
from studio.domains.documents.entities import OperationResult, OperationStatus
from studio.domains.documents.schemas import (
    DocumentStatsResponse, ForestResponse, NodeCreate, NodeMove, NodeResponse,
    NodeUpdate, SnapshotResponse
)
from studio.domains.documents.services import DocumentService
from studio.domains.documents.store import DocumentStore
from studio.infrastructure.repositories.snapshot_repository import SnapshotRepository

router = APIRouter(prefix="/documents", tags=["documents"])


def raise_for_result(result: OperationResult) -> None:
    """Перевод неуспешного результата операции в HTTP-ошибку"""
    if result.status == OperationStatus.NOT_FOUND:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=result.reason or "Document not found"
        )
    if result.status == OperationStatus.INVALID_OPERATION:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=result.reason or "Invalid operation"
        )


def document_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Document not found"
    )


@router.get("/", response_model=ForestResponse)
async def get_documents(
    q: Optional[str] = Query(None, max_length=100),
    store: DocumentStore = Depends(get_store)
):
    """Получение дерева проекта; с q - только совпадения по имени"""
    document_service = DocumentService(store)
    forest = await document_service.get_forest(q)

    return ForestResponse(
        documents=[NodeResponse.model_validate(node) for node in forest],
        total=len(forest),
        query=q or None
    )


@router.get("/stats", response_model=DocumentStatsResponse)
async def get_stats(store: DocumentStore = Depends(get_store)):
    """Статистика проекта"""
    document_service = DocumentService(store)
    stats = await document_service.get_stats()
    return DocumentStatsResponse.model_validate(stats)


@router.post("/snapshot", response_model=SnapshotResponse, status_code=status.HTTP_201_CREATED)
async def save_snapshot(
    store: DocumentStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
    repository: Optional[SnapshotRepository] = Depends(get_snapshot_repository)
):
    """Сохранение снимка дерева в базу"""
    if repository is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Persistence is not configured"
        )

    saved_at = await repository.save(settings.project_name, store.to_dict())
    return SnapshotResponse(project=settings.project_name, nodes=len(store), saved_at=saved_at)


@router.get("/{node_id}", response_model=NodeResponse)
async def get_document(node_id: str, store: DocumentStore = Depends(get_store)):
    """Получение узла по id"""
    document_service = DocumentService(store)

    node = await document_service.get_document(node_id)
    if not node:
        raise document_not_found()

    return NodeResponse.model_validate(node)


@router.post("/", response_model=NodeResponse, status_code=status.HTTP_201_CREATED)
async def create_document(document_data: NodeCreate, store: DocumentStore = Depends(get_store)):
    """Создание документа или папки"""
    document_service = DocumentService(store)

    result = await document_service.create_document(document_data)
    raise_for_result(result)

    node = await document_service.get_document(result.node_id)
    if not node:
        raise document_not_found()
    return NodeResponse.model_validate(node)


@router.patch("/{node_id}", response_model=NodeResponse)
async def update_document(
    node_id: str,
    update_data: NodeUpdate,
    store: DocumentStore = Depends(get_store)
):
    """Частичное обновление узла"""
    document_service = DocumentService(store)

    node = await document_service.update_document(node_id, update_data)
    if not node:
        raise document_not_found()

    return NodeResponse.model_validate(node)


@router.delete("/{node_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(node_id: str, store: DocumentStore = Depends(get_store)):
    """Удаление узла вместе с поддеревом"""
    document_service = DocumentService(store)

    result = await document_service.delete_document(node_id)
    raise_for_result(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{node_id}/move", response_model=NodeResponse)
async def move_document(
    node_id: str,
    move_data: NodeMove,
    store: DocumentStore = Depends(get_store)
):
    """Перемещение узла в папку или в корень"""
    document_service = DocumentService(store)

    result = await document_service.move_document(node_id, move_data)
    raise_for_result(result)

    node = await document_service.get_document(node_id)
    if not node:
        raise document_not_found()
    return NodeResponse.model_validate(node)
