"""In-memory document store: the single source of truth for the README being edited."""

from __future__ import annotations

import logging
from dataclasses import replace
from threading import Lock
from typing import Any, Callable, Optional
from uuid import uuid4

from .models import AttachedMedia, Document, Section
from .templates import seed_content


LOGGER = logging.getLogger(__name__)

_UNSET: Any = object()


class DocumentStore:
    """Holds one :class:`Document` and applies mutations to it atomically.

    Every mutation reads the current document, computes its successor and
    installs it while holding the lock. Snapshots returned by :meth:`get` are
    immutable values, so callers can never change store state through them.
    Unknown section ids are silently ignored.
    """

    def __init__(self, document: Optional[Document] = None) -> None:
        self._document = document or Document()
        self._lock = Lock()

    def get(self) -> Document:
        return self._document

    def section(self, section_id: str) -> Optional[Section]:
        return next((s for s in self._document.sections if s.id == section_id), None)

    def patch(
        self,
        *,
        project_name: str = _UNSET,
        description: str = _UNSET,
        attached_media: Optional[AttachedMedia] = _UNSET,
    ) -> Document:
        """Shallow-merge the given top-level fields; omitted fields stay as they are.

        Passing ``attached_media=None`` clears the media reference.
        """

        changes = {}
        if project_name is not _UNSET:
            changes["project_name"] = project_name
        if description is not _UNSET:
            changes["description"] = description
        if attached_media is not _UNSET:
            changes["attached_media"] = attached_media

        if not changes:
            return self._document
        LOGGER.debug("Patching document fields: %s", ", ".join(sorted(changes)))
        return self._apply(lambda doc: replace(doc, **changes))

    def add_section(self, title: str) -> str:
        """Append a section and return its id; recognized template titles get seed content."""

        section = Section(id=uuid4().hex, title=title, content=seed_content(title))
        self._apply(lambda doc: replace(doc, sections=doc.sections + (section,)))
        LOGGER.debug("Added section %s (%r)", section.id, title)
        return section.id

    def update_section_content(self, section_id: str, content: str) -> bool:
        """Replace a section's content. Returns False (and changes nothing) if the id is unknown."""

        matched = False

        def _update(doc: Document) -> Document:
            nonlocal matched
            sections = []
            for section in doc.sections:
                if section.id == section_id:
                    matched = True
                    section = replace(section, content=content)
                sections.append(section)
            return replace(doc, sections=tuple(sections)) if matched else doc

        self._apply(_update)
        if not matched:
            LOGGER.debug("Ignoring content update for unknown section %s", section_id)
        return matched

    def remove_section(self, section_id: str) -> bool:
        removed = False

        def _remove(doc: Document) -> Document:
            nonlocal removed
            remaining = tuple(s for s in doc.sections if s.id != section_id)
            removed = len(remaining) != len(doc.sections)
            return replace(doc, sections=remaining) if removed else doc

        self._apply(_remove)
        if removed:
            LOGGER.debug("Removed section %s", section_id)
        return removed

    def reset(self) -> Document:
        LOGGER.info("Resetting document to defaults")
        return self._apply(lambda _doc: Document())

    def _apply(self, transform: Callable[[Document], Document]) -> Document:
        with self._lock:
            self._document = transform(self._document)
            return self._document
