"""
Module: core.models.documents

Purpose:
    SourceDocument dataclass: raw PDF bytes plus the name used to derive
    output filenames. A merge input is simply an ordered sequence of
    SourceDocuments; order is output page order and duplicates are allowed.

Key Classes:
    - SourceDocument: PDF bytes with a display name (immutable)

Used By:
    - pdf_toolkit.assembly.pages: extract_subset, merge_documents
    - pdf_toolkit.session: Split source and merge list
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class SourceDocument:
    """
    A source PDF document (immutable).

    Attributes:
        name: Display name, usually the source filename
        content: Raw PDF bytes
    """

    name: str
    content: bytes = field(repr=False)

    @classmethod
    def from_path(cls, path: Path) -> SourceDocument:
        """Read a document from disk, naming it after the file."""
        return cls(name=path.name, content=path.read_bytes())

    @property
    def size(self) -> int:
        """Size of the raw bytes."""
        return len(self.content)
