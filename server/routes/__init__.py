"""API routers for the FastAPI backend."""

from .media import router as media_router
from .readme import router as readme_router

__all__ = [
    "media_router",
    "readme_router",
]
