"""FastAPI application factory and global middleware registration."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from server.core.config import (
    CORS_ALLOW_CREDENTIALS,
    CORS_ALLOW_ORIGINS,
    MEDIA_DIR,
)

from .adapters.storage import LocalStorageBackend, StorageBackend
from .core.augment import DescriptionAugmenter
from .core.llm import DescriptionGenerator
from .core.store import DocumentStore
from .routes import media_router, readme_router

# Basic logging config (stdout) if not already configured by the host.
if not logging.getLogger().handlers:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

logger = logging.getLogger("readmeaker.api")


def create_app(
    *,
    store: Optional[DocumentStore] = None,
    storage: Optional[StorageBackend] = None,
    generator: Optional[DescriptionGenerator] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The app owns exactly one document store for the lifetime of the process;
    every route reaches it through ``app.state``.
    """

    app = FastAPI(
        title="READMEaker API",
        version="0.1.0",
        description="Compose README files from structured sections and export them as Markdown.",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_credentials=CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(readme_router)
    app.include_router(media_router)

    document_store = store or DocumentStore()
    app.state.document_store = document_store
    app.state.media_storage = storage or LocalStorageBackend(MEDIA_DIR)
    app.state.augmenter = DescriptionAugmenter(document_store, generator or DescriptionGenerator())

    @app.middleware("http")
    async def error_logging_middleware(request: Request, call_next):
        try:
            response = await call_next(request)
            return response
        except Exception:
            logger.exception("Unhandled exception during request")
            raise

    @app.get("/health", tags=["system"])
    async def healthcheck() -> Dict[str, str]:
        """Simple healthcheck endpoint for orchestration probes."""

        return {"status": "ok"}

    return app
