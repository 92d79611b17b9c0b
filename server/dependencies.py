"""FastAPI dependencies common across routes."""

from __future__ import annotations

from fastapi import Request

from .adapters.storage import StorageBackend
from .core.augment import DescriptionAugmenter
from .core.store import DocumentStore


def get_store(request: Request) -> DocumentStore:
    return request.app.state.document_store


def get_storage(request: Request) -> StorageBackend:
    return request.app.state.media_storage


def get_augmenter(request: Request) -> DescriptionAugmenter:
    return request.app.state.augmenter
