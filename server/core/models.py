"""Immutable value types describing a README document."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class AttachedMedia:
    """An image embedded under the description; name and URL always travel together."""

    file_name: str
    file_url: str

    def __post_init__(self) -> None:
        if not self.file_name or not self.file_name.strip():
            raise ValueError("file_name cannot be empty")
        if not self.file_url or not self.file_url.strip():
            raise ValueError("file_url cannot be empty")

    def to_dict(self) -> Dict[str, str]:
        return {"file_name": self.file_name, "file_url": self.file_url}


@dataclass(frozen=True)
class Section:
    """A titled block of Markdown; ``content`` carries its own heading markup."""

    id: str
    title: str
    content: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "title": self.title, "content": self.content}


@dataclass(frozen=True)
class Document:
    """The whole README: identity, description, optional media and ordered sections."""

    project_name: str = ""
    description: str = ""
    attached_media: Optional[AttachedMedia] = None
    sections: Tuple[Section, ...] = field(default_factory=tuple)

    def section_ids(self) -> Tuple[str, ...]:
        return tuple(section.id for section in self.sections)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serialisable view of the document."""

        return {
            "project_name": self.project_name,
            "description": self.description,
            "attached_media": self.attached_media.to_dict() if self.attached_media else None,
            "sections": [section.to_dict() for section in self.sections],
        }
