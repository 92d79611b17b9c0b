"""Storage backend abstractions."""

from .base import StorageBackend, StorageError, StorageObject, content_key
from .local import LocalStorageBackend

__all__ = [
    "StorageBackend",
    "StorageError",
    "StorageObject",
    "LocalStorageBackend",
    "content_key",
]
