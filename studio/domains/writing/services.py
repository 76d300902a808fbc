import logging
from typing import Dict, Optional

from studio.domains.documents.entities import Node, NodeKind, OperationResult
from studio.domains.documents.store import DocumentStore
from studio.domains.writing import text
from studio.domains.writing.generation import TextGenerator
from studio.domains.writing.prompts import (
    KINDS_REQUIRING_CONTENT, infer_generation_kind, initial_prompt_for
)
from studio.domains.writing.schemas import (
    AssistRequest, GenerationRequest, GenerationResult, WritingDocumentCreate
)
from studio.domains.writing.templates import get_template

logger = logging.getLogger(__name__)

EMPTY_DOCUMENT_ERROR = "Please select a document with content to use this feature."


class WritingService:
    """Сервис студии: создание документов, правка текста и работа с генератором.

    Генерация никогда не выполняется под блокировкой хранилища: сначала
    получаем текст, потом отдельным быстрым вызовом ``update`` записываем его.
    """

    def __init__(self, store: DocumentStore, generator: TextGenerator):
        self.store = store
        self.generator = generator

    async def create_document(self, document_data: WritingDocumentCreate) -> OperationResult:
        """Создание узла с начальным содержимым.

        При ``use_ai`` документ получает временную заглушку, а сам текст
        дописывает ``fill_with_generated_content``.
        """
        result = self.store.create(
            name=document_data.name,
            kind=document_data.kind,
            parent_id=document_data.parent_id,
        )
        if not result or document_data.kind != NodeKind.DOCUMENT:
            return result

        if document_data.use_ai:
            initial = text.generating_content()
        else:
            initial = text.placeholder_content(document_data.name)
        self.store.update(result.node_id, {"content": initial, "word_count": 0})
        return result

    async def fill_with_generated_content(self, node_id: str, name: str) -> Optional[Node]:
        """Наполнение нового документа сгенерированным текстом"""
        request = GenerationRequest(
            prompt=initial_prompt_for(name),
            context=f"Document: {name}",
        )
        try:
            response = await self.generator.generate(request)
        except Exception as e:
            logger.error(f"AI generation error for {node_id}: {e}")
            response = GenerationResult(error="AI content generation failed. Please try again.")

        if response.failed:
            content = text.generation_failed_content(name, response.error)
            word_count = 0
        else:
            content = text.generated_document_content(name, response.content)
            word_count = text.count_words(content)

        node = self.store.update(node_id, {"content": content, "word_count": word_count})
        if node is None:
            logger.warning(f"Document {node_id} was removed before generated content arrived")
        return node

    async def change_content(self, node_id: str, content: str) -> Optional[Node]:
        """Новое содержимое документа с пересчётом слов"""
        node = self.store.find(node_id)
        if node is None or node.is_folder:
            return None
        return self.store.update(
            node_id, {"content": content, "word_count": text.count_words(content)}
        )

    async def change_title(self, node_id: str, title: str) -> Optional[Node]:
        """Заголовок документа меняет и его имя в дереве"""
        return self.store.update(node_id, {"title": title, "name": title})

    async def insert_content(self, node_id: str, insertion: str) -> Optional[Node]:
        """Добавление абзаца в конец документа"""
        node = self.store.find(node_id)
        if node is None or node.is_folder:
            return None
        return await self.change_content(node_id, text.append_paragraph(node.content, insertion))

    async def apply_template(self, template_id: str) -> Optional[Node]:
        """Создание документа в корне проекта из шаблона"""
        template = get_template(template_id)
        if template is None:
            return None

        result = self.store.create(name=template.document_name, kind=NodeKind.DOCUMENT)
        return self.store.update(
            result.node_id,
            {"content": template.content, "word_count": text.count_words(template.content)},
        )

    async def content_stats(self, node_id: str) -> Optional[Dict[str, int]]:
        """Статистика текста документа"""
        node = self.store.find(node_id)
        if node is None or node.is_folder:
            return None
        return text.content_stats(node.content)

    async def assist(self, assist_request: AssistRequest) -> Optional[GenerationResult]:
        """Запрос к ассистенту; ``None`` если указанного документа нет"""
        kind = assist_request.kind or infer_generation_kind(assist_request.prompt)

        document = None
        if assist_request.document_id is not None:
            document = self.store.find(assist_request.document_id)
            if document is None:
                return None

        current_content = document.content if document is not None else None
        if assist_request.kind in KINDS_REQUIRING_CONTENT and not current_content:
            return GenerationResult(error=EMPTY_DOCUMENT_ERROR)

        request = GenerationRequest(
            prompt=assist_request.prompt,
            kind=kind,
            context=f"Document: {document.name if document is not None else 'Untitled'}",
            current_content=current_content or None,
        )
        try:
            return await self.generator.generate(request)
        except Exception as e:
            logger.error(f"AI Service Error: {e}")
            return GenerationResult(error=str(e) or "An error occurred while generating content.")
