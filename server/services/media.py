"""Lifecycle helpers for media blobs referenced by the document."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from server.adapters.storage import StorageBackend, StorageError
from server.core.config import MEDIA_URL_PREFIX
from server.core.models import AttachedMedia


LOGGER = logging.getLogger(__name__)

SUPPORTED_IMAGE_EXTENSIONS = {
    ".png",
    ".jpg",
    ".jpeg",
    ".gif",
    ".webp",
    ".svg",
}


def media_url(key: str) -> str:
    return f"{MEDIA_URL_PREFIX}{key}"


def key_from_url(url: str) -> Optional[str]:
    """Storage key for URLs served by this app; None for external URLs."""

    if not url.startswith(MEDIA_URL_PREFIX):
        return None
    key = url[len(MEDIA_URL_PREFIX):]
    return key or None


async def release_media(
    storage: StorageBackend,
    previous: Optional[AttachedMedia],
    current: Optional[AttachedMedia] = None,
) -> None:
    """Delete the blob behind ``previous`` unless ``current`` still points at it.

    Failures are logged; the document update that triggered the release has
    already been applied.
    """
    if previous is None:
        return
    if current is not None and current.file_url == previous.file_url:
        return
    key = key_from_url(previous.file_url)
    if key is None:
        return
    try:
        await run_in_threadpool(storage.delete, key)
        LOGGER.info("Released media %s", key)
    except (StorageError, OSError) as exc:
        LOGGER.warning("Failed to release media %s: %s", key, exc)
