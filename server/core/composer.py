"""Markdown composition for README documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from .models import Document
from .store import DocumentStore


LOGGER = logging.getLogger(__name__)

README_FILENAME = "README.md"
README_MEDIA_TYPE = "text/markdown; charset=utf-8"


def compose_markdown(document: Document) -> str:
    """
    Render a document as a single Markdown string.

    The layout is fixed: a level-1 heading with the project name, the
    description, an optional image embed, then every section's content in
    order. Section titles are not repeated; the content is expected to carry
    its own heading.

    Args:
        document: Snapshot to render

    Returns:
        Markdown text, identical for identical documents
    """
    parts: List[str] = [f"# {document.project_name}\n\n{document.description}\n\n"]

    media = document.attached_media
    if media is not None:
        parts.append(f"![{media.file_name}]({media.file_url})\n\n")

    for section in document.sections:
        parts.append(f"{section.content}\n\n")

    return "".join(parts)


class ReadmeComposer:
    """Composes the current state of a store and writes it out as README.md."""

    def __init__(self, store: DocumentStore):
        self.store = store

    def render(self) -> str:
        return compose_markdown(self.store.get())

    def save(self, directory: Path) -> Path:
        """
        Write the composed README into a directory.

        Args:
            directory: Folder that receives README.md (created if missing)

        Returns:
            Path of the written file
        """
        directory.mkdir(parents=True, exist_ok=True)
        output_path = directory / README_FILENAME

        with open(output_path, "w", encoding="utf-8") as f:
            f.write(self.render())

        LOGGER.info("Saved README to %s", output_path)
        return output_path
