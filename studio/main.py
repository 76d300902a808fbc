import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from studio.api.http.documents import router as documents_router
from studio.api.http.health import router as health_router
from studio.api.http.writing import router as writing_router
from studio.core.config import Settings, settings as default_settings
from studio.core.db import build_engine
from studio.core.logging import setup_logging
from studio.domains.documents.seed import seed_store
from studio.domains.documents.store import DocumentStore
from studio.domains.writing.generation import build_generator
from studio.infrastructure.repositories.snapshot_repository import SnapshotRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Загрузка снимка при старте и сохранение при остановке"""
    settings: Settings = app.state.settings
    store: DocumentStore = app.state.store
    repository: Optional[SnapshotRepository] = app.state.snapshot_repository

    if repository is not None:
        await repository.init_schema()
        snapshot = await repository.load_latest(settings.project_name)
        if snapshot is not None:
            store.load(snapshot)
            logger.info(f"Restored project '{settings.project_name}' from snapshot")

    yield

    if repository is not None:
        try:
            await repository.save(settings.project_name, store.to_dict())
        finally:
            await repository.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_title,
        description="Writing studio backend: project document tree and AI writing helpers",
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    store = DocumentStore()
    if settings.seed_sample_project:
        seed_store(store)

    app.state.settings = settings
    app.state.store = store
    app.state.generator = build_generator(settings)
    app.state.snapshot_repository = None
    if settings.database_url:
        engine = build_engine(settings.database_url, echo=settings.database_echo)
        app.state.snapshot_repository = SnapshotRepository(engine)

    # Подключаем роутеры
    app.include_router(health_router)
    app.include_router(documents_router)
    app.include_router(writing_router)

    @app.get("/")
    async def root():
        """Корневой эндпоинт"""
        return {
            "message": f"{settings.app_title} API",
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/health"
        }

    return app


app = create_app()
