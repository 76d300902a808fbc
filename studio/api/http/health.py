from fastapi import APIRouter, Depends

from studio.api.deps import get_settings, get_store
from studio.core.config import Settings
from studio.domains.documents.store import DocumentStore

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(
    store: DocumentStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """Проверка работоспособности"""
    return {
        "status": "ok",
        "project": settings.project_name,
        "nodes": len(store),
        "persistence": settings.database_url is not None,
    }
