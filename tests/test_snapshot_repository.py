"""Tests for snapshot persistence (SQLite via aiosqlite)."""

import pytest
from fastapi.testclient import TestClient

from studio.core.config import Settings
from studio.core.db import build_engine
from studio.domains.documents.entities import NodeKind
from studio.domains.documents.store import DocumentStore
from studio.infrastructure.repositories.snapshot_repository import SnapshotRepository
from studio.main import create_app, lifespan


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'studio.db'}"


class TestSnapshotRepository:

    @pytest.mark.asyncio
    async def test_save_and_load_latest(self, database_url, project, store):
        repository = SnapshotRepository(build_engine(database_url))
        await repository.init_schema()

        assert await repository.load_latest("novel") is None

        await repository.save("novel", [])
        await repository.save("novel", store.to_dict())
        await repository.save("other", [])

        restored = DocumentStore()
        restored.load(await repository.load_latest("novel"))
        assert restored.to_dict() == store.to_dict()
        assert await repository.load_latest("other") == []

        await repository.dispose()


def test_app_restores_project_between_runs(database_url):
    settings = Settings(
        database_url=database_url,
        seed_sample_project=True,
        project_name="Harbor",
        generation_delay_seconds=0,
    )

    with TestClient(create_app(settings)) as client:
        client.delete("/documents/research")
        created = client.post("/documents/", json={"name": "Act II", "kind": "folder"}).json()
        saved = client.post("/documents/snapshot")
        assert saved.status_code == 201
        assert saved.json()["nodes"] == 6

    with TestClient(create_app(settings)) as client:
        names = [node["name"] for node in client.get("/documents/").json()["documents"]]
        assert names == ["Draft", "Story Outline", "Act II"]
        assert client.get(f"/documents/{created['id']}").json()["kind"] == NodeKind.FOLDER.value
        assert client.get("/health").json()["persistence"] is True


class FailingSaveRepository:
    """Репозиторий, который не может сохранить снимок"""

    def __init__(self):
        self.disposed = False

    async def init_schema(self):
        pass

    async def load_latest(self, project):
        return None

    async def save(self, project, forest):
        raise RuntimeError("disk full")

    async def dispose(self):
        self.disposed = True


@pytest.mark.asyncio
async def test_engine_disposed_when_shutdown_save_fails(settings):
    app = create_app(settings)
    repository = FailingSaveRepository()
    app.state.snapshot_repository = repository

    with pytest.raises(RuntimeError):
        async with lifespan(app):
            pass

    assert repository.disposed
