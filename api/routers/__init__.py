"""API Routers."""

from .health import router as health_router
from .documents import router as documents_router
from .quiz import router as quiz_router
from .study import router as study_router

__all__ = [
    "health_router",
    "documents_router",
    "quiz_router",
    "study_router",
]
