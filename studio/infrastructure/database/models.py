from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Integer, String

from studio.core.db import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProjectSnapshotModel(Base):
    __tablename__ = "project_snapshots"
    id = Column(Integer, primary_key=True, autoincrement=True)
    project = Column(String(255), nullable=False, index=True)
    # весь лес документов вложенными словарями
    snapshot = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
