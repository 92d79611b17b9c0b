"""README document endpoints: fields, sections, composition and export."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field, field_validator

from ..adapters.storage import StorageBackend
from ..core.augment import (
    DescriptionAugmenter,
    GenerationCancelledError,
    GenerationInProgressError,
)
from ..core.composer import README_FILENAME, README_MEDIA_TYPE, compose_markdown
from ..core.llm import GenerationError
from ..core.models import AttachedMedia, Document
from ..core.store import DocumentStore
from ..core.templates import template_titles
from ..dependencies import get_augmenter, get_storage, get_store
from ..services import release_media


router = APIRouter(prefix="/readme", tags=["readme"])

LOGGER = logging.getLogger(__name__)


class AttachedMediaPayload(BaseModel):
    file_name: str = Field(..., min_length=1)
    file_url: str = Field(..., min_length=1)

    @field_validator("file_name", "file_url")
    @classmethod
    def validate_not_blank(cls, v):
        if not v.strip():
            raise ValueError("Media fields cannot be blank")
        return v

    def to_media(self) -> AttachedMedia:
        return AttachedMedia(file_name=self.file_name, file_url=self.file_url)


class SectionResponse(BaseModel):
    id: str
    title: str
    content: str


class DocumentResponse(BaseModel):
    project_name: str
    description: str
    attached_media: Optional[AttachedMediaPayload] = None
    sections: List[SectionResponse]

    @classmethod
    def from_document(cls, document: Document) -> "DocumentResponse":
        return cls.model_validate(document.to_dict())


class DocumentPatchRequest(BaseModel):
    project_name: Optional[str] = None
    description: Optional[str] = None
    attached_media: Optional[AttachedMediaPayload] = None


class SectionCreateRequest(BaseModel):
    title: str = Field(..., max_length=200)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError("Section title cannot be empty")
        return v.strip()


class SectionUpdateRequest(BaseModel):
    content: str


class GenerateDescriptionRequest(BaseModel):
    notes: Optional[str] = Field(None, max_length=5000)


class TemplateListResponse(BaseModel):
    templates: List[str]


@router.get("", response_model=DocumentResponse)
async def get_document(store: DocumentStore = Depends(get_store)) -> DocumentResponse:
    return DocumentResponse.from_document(store.get())


@router.patch("", response_model=DocumentResponse)
async def patch_document(
    payload: DocumentPatchRequest,
    store: DocumentStore = Depends(get_store),
    storage: StorageBackend = Depends(get_storage),
) -> DocumentResponse:
    provided = payload.model_fields_set
    changes = {}
    if "project_name" in provided and payload.project_name is not None:
        changes["project_name"] = payload.project_name
    if "description" in provided and payload.description is not None:
        changes["description"] = payload.description
    if "attached_media" in provided:
        changes["attached_media"] = payload.attached_media.to_media() if payload.attached_media else None

    previous = store.get().attached_media
    document = store.patch(**changes)
    if "attached_media" in changes:
        await release_media(storage, previous, document.attached_media)
    return DocumentResponse.from_document(document)


@router.post("/reset", response_model=DocumentResponse)
async def reset_document(
    store: DocumentStore = Depends(get_store),
    storage: StorageBackend = Depends(get_storage),
) -> DocumentResponse:
    previous = store.get().attached_media
    document = store.reset()
    await release_media(storage, previous)
    return DocumentResponse.from_document(document)


@router.get("/templates", response_model=TemplateListResponse)
async def list_templates() -> TemplateListResponse:
    return TemplateListResponse(templates=template_titles())


@router.post("/sections", response_model=SectionResponse, status_code=status.HTTP_201_CREATED)
async def add_section(
    payload: SectionCreateRequest,
    store: DocumentStore = Depends(get_store),
) -> SectionResponse:
    section = store.section(store.add_section(payload.title))
    return SectionResponse.model_validate(section.to_dict())


@router.put("/sections/{section_id}", response_model=SectionResponse)
async def update_section(
    section_id: str,
    payload: SectionUpdateRequest,
    store: DocumentStore = Depends(get_store),
) -> SectionResponse:
    if not store.update_section_content(section_id, payload.content):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Section not found")
    section = store.section(section_id)
    return SectionResponse.model_validate(section.to_dict())


@router.delete("/sections/{section_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_section(section_id: str, store: DocumentStore = Depends(get_store)) -> Response:
    store.remove_section(section_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/markdown", response_class=PlainTextResponse)
async def get_markdown(store: DocumentStore = Depends(get_store)) -> PlainTextResponse:
    return PlainTextResponse(compose_markdown(store.get()))


@router.get("/download")
async def download_readme(store: DocumentStore = Depends(get_store)) -> Response:
    content = compose_markdown(store.get())
    return Response(
        content=content.encode("utf-8"),
        media_type=README_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{README_FILENAME}"'},
    )


@router.post("/description/generate", response_model=DocumentResponse)
async def generate_description(
    payload: Optional[GenerateDescriptionRequest] = None,
    augmenter: DescriptionAugmenter = Depends(get_augmenter),
) -> DocumentResponse:
    notes = payload.notes if payload else None
    try:
        document = await augmenter.run(notes)
    except GenerationInProgressError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except GenerationCancelledError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except GenerationError as exc:
        LOGGER.warning("Description generation failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to generate AI content. Please try again.",
        ) from exc
    return DocumentResponse.from_document(document)


@router.post("/description/cancel")
async def cancel_description_generation(
    augmenter: DescriptionAugmenter = Depends(get_augmenter),
) -> dict:
    return {"cancelled": augmenter.cancel()}
