import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine

from studio.core.db import Base, build_session_factory
from studio.infrastructure.database.models import ProjectSnapshotModel
from studio.infrastructure.database.session import get_session

logger = logging.getLogger(__name__)


class SnapshotRepository:
    """Репозиторий снимков дерева документов"""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.session_factory = build_session_factory(engine)

    async def init_schema(self) -> None:
        """Создание таблиц, если их ещё нет"""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def save(self, project: str, forest: List[Dict[str, Any]]) -> datetime:
        """Сохранение нового снимка проекта"""
        async with get_session(self.session_factory) as session:
            model = ProjectSnapshotModel(project=project, snapshot=forest)
            session.add(model)
            await session.commit()
            await session.refresh(model)
            logger.info(f"Saved snapshot #{model.id} of project '{project}'")
            return model.created_at

    async def load_latest(self, project: str) -> Optional[List[Dict[str, Any]]]:
        """Последний снимок проекта или None"""
        async with get_session(self.session_factory) as session:
            result = await session.execute(
                select(ProjectSnapshotModel)
                .where(ProjectSnapshotModel.project == project)
                .order_by(ProjectSnapshotModel.id.desc())
                .limit(1)
            )
            model = result.scalar_one_or_none()
            return model.snapshot if model else None

    async def dispose(self) -> None:
        await self.engine.dispose()
