"""Filesystem-backed storage backend."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Optional

from .base import StorageBackend, StorageError, StorageObject


class LocalStorageBackend(StorageBackend):
    """Store files on the local filesystem under a base directory."""

    def __init__(self, base_dir: Path) -> None:
        self._base_dir = base_dir.resolve()
        self._base_dir.mkdir(parents=True, exist_ok=True)

    def _resolve(self, key: str) -> Path:
        target = (self._base_dir / key).resolve()
        if self._base_dir not in target.parents:
            raise StorageError(f"Storage key escapes base directory: {key}")
        return target

    def put_bytes(self, key: str, data: bytes, content_type: Optional[str] = None) -> StorageObject:
        target = self._resolve(key)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
        return StorageObject(
            key=key,
            size=len(data),
            checksum=hashlib.sha256(data).hexdigest(),
            content_type=content_type,
        )

    def get_bytes(self, key: str) -> bytes:
        source = self._resolve(key)
        if not source.is_file():
            raise FileNotFoundError(source)
        return source.read_bytes()

    def exists(self, key: str) -> bool:
        try:
            return self._resolve(key).is_file()
        except StorageError:
            return False

    def delete(self, key: str) -> None:
        target = self._resolve(key)
        if target.exists():
            target.unlink()
