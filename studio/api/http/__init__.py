from studio.api.http.health import router as health_router
from studio.api.http.documents import router as documents_router
from studio.api.http.writing import router as writing_router

__all__ = [
    "health_router",
    "documents_router",
    "writing_router"
]
