"""Unit tests for studio.domains.writing.services: WritingService."""

import logging

import pytest

from studio.domains.documents.entities import NodeKind, OperationStatus
from studio.domains.writing.generation import (
    NOT_CONFIGURED_ERROR, DemoTextGenerator, DisabledTextGenerator
)
from studio.domains.writing.schemas import (
    AssistRequest, GenerationResult, WritingDocumentCreate
)
from studio.domains.writing.services import EMPTY_DOCUMENT_ERROR, WritingService
from studio.domains.writing.text import count_words


class RecordingGenerator:
    """Генератор, запоминающий запросы"""

    def __init__(self, result=None, error=None):
        self.result = result or GenerationResult(content="Fresh text.")
        self.error = error
        self.requests = []

    async def generate(self, request):
        self.requests.append(request)
        if self.error:
            raise self.error
        return self.result


class DeletingGenerator:
    """Генератор, во время работы которого документ удаляют"""

    def __init__(self, store, node_id):
        self.store = store
        self.node_id = node_id

    async def generate(self, request):
        self.store.delete(self.node_id)
        return GenerationResult(content="Too late.")


@pytest.fixture
def generator():
    return RecordingGenerator()


@pytest.fixture
def service(seeded_store, generator):
    return WritingService(seeded_store, generator)


class TestCreateDocument:

    @pytest.mark.asyncio
    async def test_plain_document_gets_placeholder(self, service):
        result = await service.create_document(WritingDocumentCreate(name="Chapter 4", parent_id="draft"))
        node = service.store.find(result.node_id)

        assert node.content == "<h1>Chapter 4</h1><p>Start writing here...</p>"
        assert node.word_count == 0
        assert node.parent_id == "draft"

    @pytest.mark.asyncio
    async def test_folder_gets_no_content(self, service):
        result = await service.create_document(WritingDocumentCreate(name="Act II", kind=NodeKind.FOLDER))
        node = service.store.find(result.node_id)
        assert node.children == []
        assert node.content is None

    @pytest.mark.asyncio
    async def test_invalid_parent_is_reported(self, service):
        result = await service.create_document(WritingDocumentCreate(name="X", parent_id="outline"))
        assert result.status == OperationStatus.INVALID_OPERATION

    @pytest.mark.asyncio
    async def test_two_step_generation(self, service, generator):
        result = await service.create_document(WritingDocumentCreate(name="Chapter 4", use_ai=True))
        pending = service.store.find(result.node_id)
        assert "Generating content" in pending.content
        assert generator.requests == []

        node = await service.fill_with_generated_content(result.node_id, "Chapter 4")

        assert generator.requests[0].context == "Document: Chapter 4"
        assert "chapter titled" in generator.requests[0].prompt
        assert node.content.startswith("<h1>Chapter 4</h1><p>Fresh text.</p>")
        assert node.word_count == count_words(node.content)

    @pytest.mark.asyncio
    async def test_generation_error_is_written_into_document(self, seeded_store):
        service = WritingService(seeded_store, DisabledTextGenerator())
        result = await service.create_document(WritingDocumentCreate(name="Notes", use_ai=True))

        node = await service.fill_with_generated_content(result.node_id, "Notes")

        assert NOT_CONFIGURED_ERROR in node.content
        assert node.word_count == 0

    @pytest.mark.asyncio
    async def test_generator_exception_becomes_failure_content(self, seeded_store):
        service = WritingService(seeded_store, RecordingGenerator(error=RuntimeError("boom")))
        result = await service.create_document(WritingDocumentCreate(name="Notes", use_ai=True))

        node = await service.fill_with_generated_content(result.node_id, "Notes")

        assert "AI content generation failed" in node.content

    @pytest.mark.asyncio
    async def test_document_deleted_during_generation(self, seeded_store):
        node_id = seeded_store.create("Doomed", NodeKind.DOCUMENT).node_id
        service = WritingService(seeded_store, DeletingGenerator(seeded_store, node_id))

        assert await service.fill_with_generated_content(node_id, "Doomed") is None
        assert seeded_store.find(node_id) is None


class TestEditing:

    @pytest.mark.asyncio
    async def test_change_content_counts_words(self, service):
        node = await service.change_content("chapter-2", "<p>Three small words</p>")
        assert node.word_count == 3
        assert node.content == "<p>Three small words</p>"

    @pytest.mark.asyncio
    async def test_change_content_of_folder_or_missing(self, service):
        assert await service.change_content("draft", "<p>x</p>") is None
        assert await service.change_content("missing", "<p>x</p>") is None

    @pytest.mark.asyncio
    async def test_change_title_renames(self, service):
        node = await service.change_title("chapter-3", "Chapter 3: Reckoning")
        assert node.title == "Chapter 3: Reckoning"
        assert node.name == "Chapter 3: Reckoning"

    @pytest.mark.asyncio
    async def test_insert_content_appends_paragraph(self, service):
        await service.change_content("chapter-3", "<p>Start.</p>")
        node = await service.insert_content("chapter-3", "More.")
        assert node.content == "<p>Start.</p><p>More.</p>"
        assert node.word_count == 2

    @pytest.mark.asyncio
    async def test_apply_template(self, service):
        node = await service.apply_template("screenplay")
        assert node.name == "New Screenplay"
        assert node.parent_id is None
        assert "FADE IN:" in node.content
        assert node.word_count == count_words(node.content)

    @pytest.mark.asyncio
    async def test_apply_unknown_template(self, service):
        size = len(service.store)
        assert await service.apply_template("sonnet") is None
        assert len(service.store) == size

    @pytest.mark.asyncio
    async def test_content_stats(self, service):
        stats = await service.content_stats("outline")
        assert stats["word_count"] > 0
        assert await service.content_stats("research") is None


class TestAssist:

    @pytest.mark.asyncio
    async def test_assist_uses_document_context(self, service, generator):
        result = await service.assist(AssistRequest(prompt="Make it better", document_id="chapter-1"))

        request = generator.requests[0]
        assert result.content == "Fresh text."
        assert request.kind.value == "improve"
        assert request.context == "Document: Chapter 1: The Beginning"
        assert request.current_content.startswith("The world had changed")

    @pytest.mark.asyncio
    async def test_assist_without_document(self, service, generator):
        await service.assist(AssistRequest(prompt="Keep going"))
        assert generator.requests[0].context == "Document: Untitled"
        assert generator.requests[0].current_content is None

    @pytest.mark.asyncio
    async def test_quick_action_requires_content(self, service, generator):
        result = await service.assist(
            AssistRequest(prompt="Improve this text.", kind="improve", document_id="chapter-2")
        )
        assert result.error == EMPTY_DOCUMENT_ERROR
        assert generator.requests == []

    @pytest.mark.asyncio
    async def test_brainstorm_works_on_empty_document(self, service, generator):
        result = await service.assist(
            AssistRequest(prompt="Ideas?", kind="brainstorm", document_id="chapter-2")
        )
        assert result.error is None
        assert len(generator.requests) == 1

    @pytest.mark.asyncio
    async def test_assist_missing_document(self, service):
        assert await service.assist(AssistRequest(prompt="Go", document_id="missing")) is None

    @pytest.mark.asyncio
    async def test_demo_generator(self, seeded_store):
        service = WritingService(seeded_store, DemoTextGenerator(delay_seconds=0))
        result = await service.assist(AssistRequest(prompt="Write dialogue"))
        assert result.content.startswith("\"Do you hear it too?\"")
        assert result.suggestions == []

    @pytest.mark.asyncio
    async def test_demo_generator_builds_chat_messages(self, seeded_store, caplog):
        caplog.set_level(logging.DEBUG, logger="studio.domains.writing.generation")
        service = WritingService(seeded_store, DemoTextGenerator(delay_seconds=0))

        await service.assist(
            AssistRequest(prompt="Summarize", kind="summarize", document_id="chapter-1")
        )

        assert "Demo generation for summarize request: 2 messages" in caplog.text
