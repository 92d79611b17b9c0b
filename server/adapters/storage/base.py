"""Base storage backend definitions for uploaded media."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class StorageObject:
    """Represents a stored object's metadata."""

    key: str
    size: Optional[int] = None
    checksum: Optional[str] = None
    content_type: Optional[str] = None


class StorageError(RuntimeError):
    """Raised when storage operations fail."""


def content_key(filename: str, data: bytes) -> str:
    """Content-addressed key: sha256 of the bytes plus the original (lower-cased) suffix."""

    checksum = hashlib.sha256(data).hexdigest()
    return f"{checksum}{Path(filename).suffix.lower()}"


class StorageBackend:
    """Abstract interface for storage backends."""

    def put_bytes(self, key: str, data: bytes, content_type: Optional[str] = None) -> StorageObject:
        raise NotImplementedError

    def get_bytes(self, key: str) -> bytes:
        raise NotImplementedError

    def exists(self, key: str) -> bool:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError
