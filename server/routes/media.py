"""Uploaded media endpoints (images embedded in the README)."""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile, status
from fastapi.concurrency import run_in_threadpool

from ..adapters.storage import StorageBackend, StorageError, content_key
from ..core.config import MAX_MEDIA_BYTES
from ..core.models import AttachedMedia
from ..core.store import DocumentStore
from ..dependencies import get_storage, get_store
from ..services import SUPPORTED_IMAGE_EXTENSIONS, media_url, release_media
from .readme import DocumentResponse


router = APIRouter(tags=["media"])

LOGGER = logging.getLogger(__name__)


@router.post("/readme/media", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def upload_media(
    upload: UploadFile = File(...),
    store: DocumentStore = Depends(get_store),
    storage: StorageBackend = Depends(get_storage),
) -> DocumentResponse:
    filename = (upload.filename or "").strip()
    if not filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Uploaded file has no name")

    suffix = Path(filename).suffix.lower()
    if suffix not in SUPPORTED_IMAGE_EXTENSIONS:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=f"Unsupported file type '{suffix or filename}'. Upload an image.",
        )

    contents = await upload.read()
    if not contents:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Uploaded file is empty")
    if len(contents) > MAX_MEDIA_BYTES:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File exceeds the {MAX_MEDIA_BYTES} byte limit",
        )

    key = content_key(filename, contents)
    content_type = upload.content_type or mimetypes.guess_type(filename)[0]
    try:
        await run_in_threadpool(storage.put_bytes, key, contents, content_type)
    except (StorageError, OSError) as exc:
        LOGGER.exception("Failed to store upload %s", filename)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to store file") from exc

    media = AttachedMedia(file_name=filename, file_url=media_url(key))
    previous = store.get().attached_media
    document = store.patch(attached_media=media)
    await release_media(storage, previous, media)
    LOGGER.info("Attached media %s as %s", filename, key)
    return DocumentResponse.from_document(document)


@router.delete("/readme/media", response_model=DocumentResponse)
async def clear_media(
    store: DocumentStore = Depends(get_store),
    storage: StorageBackend = Depends(get_storage),
) -> DocumentResponse:
    previous = store.get().attached_media
    document = store.patch(attached_media=None)
    await release_media(storage, previous)
    return DocumentResponse.from_document(document)


@router.get("/media/{key}")
async def get_media(key: str, storage: StorageBackend = Depends(get_storage)) -> Response:
    try:
        data = await run_in_threadpool(storage.get_bytes, key)
    except (FileNotFoundError, StorageError) as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Media not found") from exc
    media_type = mimetypes.guess_type(key)[0] or "application/octet-stream"
    return Response(content=data, media_type=media_type)
