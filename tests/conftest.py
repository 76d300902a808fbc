"""
Writing Studio test suite: shared fixtures.

Run:  pytest tests/ -v
"""

import itertools
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from studio.core.config import Settings
from studio.domains.documents import entities
from studio.domains.documents.entities import NodeKind
from studio.domains.documents.seed import seed_store
from studio.domains.documents.store import DocumentStore
from studio.main import create_app


@pytest.fixture
def store():
    """Пустое хранилище"""
    return DocumentStore()


@pytest.fixture
def seeded_store():
    """Хранилище с демонстрационным проектом"""
    return seed_store(DocumentStore())


@pytest.fixture
def project(store):
    """
    Draft/                 folder
      Chapter 1            document, 10 words
      Chapter 2            document, 20 words
      Scenes/              folder
        Opening scene      document
    Research/              folder
      Notes                document
    Empty/                 folder
    """
    ids = {}
    ids["draft"] = store.create("Draft", NodeKind.FOLDER).node_id
    ids["chapter1"] = store.create("Chapter 1", NodeKind.DOCUMENT, ids["draft"]).node_id
    ids["chapter2"] = store.create("Chapter 2", NodeKind.DOCUMENT, ids["draft"]).node_id
    ids["scenes"] = store.create("Scenes", NodeKind.FOLDER, ids["draft"]).node_id
    ids["opening"] = store.create("Opening scene", NodeKind.DOCUMENT, ids["scenes"]).node_id
    ids["research"] = store.create("Research", NodeKind.FOLDER).node_id
    ids["notes"] = store.create("Notes", NodeKind.DOCUMENT, ids["research"]).node_id
    ids["empty"] = store.create("Empty", NodeKind.FOLDER).node_id

    store.update(ids["chapter1"], {"word_count": 10})
    store.update(ids["chapter2"], {"word_count": 20})
    return ids


@pytest.fixture
def clock(monkeypatch):
    """Часы, которые идут вперёд на секунду при каждом обращении"""
    start = datetime(2030, 1, 1, tzinfo=timezone.utc)
    ticks = itertools.count(1)

    def now():
        return start + timedelta(seconds=next(ticks))

    monkeypatch.setattr(entities, "utcnow", now)
    return now


@pytest.fixture
def settings():
    return Settings(
        seed_sample_project=True,
        database_url=None,
        generation_backend="demo",
        generation_delay_seconds=0,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
