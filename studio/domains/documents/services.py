from typing import List, Optional

from studio.domains.documents.entities import DocumentStats, Node, OperationResult
from studio.domains.documents.schemas import NodeCreate, NodeMove, NodeUpdate
from studio.domains.documents.store import DocumentStore


class DocumentService:
    """Сервис для работы с деревом документов"""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def get_forest(self, query: Optional[str] = None) -> List[Node]:
        """Получение дерева проекта, при наличии запроса - отфильтрованного"""
        return self.store.filtered_view(query)

    async def get_document(self, node_id: str) -> Optional[Node]:
        """Получение узла по id"""
        return self.store.find(node_id)

    async def create_document(self, document_data: NodeCreate) -> OperationResult:
        """Создание нового документа или папки"""
        return self.store.create(
            name=document_data.name,
            kind=document_data.kind,
            parent_id=document_data.parent_id,
        )

    async def update_document(self, node_id: str, update_data: NodeUpdate) -> Optional[Node]:
        """Обновление узла; передаются только заданные поля"""
        return self.store.update(node_id, update_data.model_dump(exclude_unset=True, exclude_none=True))

    async def delete_document(self, node_id: str) -> OperationResult:
        """Удаление узла вместе с поддеревом"""
        return self.store.delete(node_id)

    async def move_document(self, node_id: str, move_data: NodeMove) -> OperationResult:
        """Перемещение узла"""
        return self.store.move(node_id, move_data.new_parent_id)

    async def get_stats(self) -> DocumentStats:
        """Статистика проекта"""
        return self.store.stats()
