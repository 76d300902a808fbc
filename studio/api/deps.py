from typing import Optional

from fastapi import Request

from studio.core.config import Settings
from studio.domains.documents.store import DocumentStore
from studio.domains.writing.generation import TextGenerator
from studio.infrastructure.repositories.snapshot_repository import SnapshotRepository


def get_store(request: Request) -> DocumentStore:
    """Зависимость: хранилище дерева документов приложения"""
    return request.app.state.store


def get_generator(request: Request) -> TextGenerator:
    return request.app.state.generator


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_snapshot_repository(request: Request) -> Optional[SnapshotRepository]:
    return request.app.state.snapshot_repository
