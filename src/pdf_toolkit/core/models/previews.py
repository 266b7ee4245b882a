"""
Module: core.models.previews

Purpose:
    Page previews and the page selection model. A PageSelection tracks which
    pages of one previewed document are marked for the next operation
    (extract-subset or image export).

Key Classes:
    - PagePreview: Low-resolution bitmap of one page plus its selected flag
    - PageSelection: Ordered previews of a single document with toggles

Invariants:
    - previews are ordered by index and index == position
    - selected_indices is always ascending (document order), never click order

Dependencies:
    - dataclasses (std)

Used By:
    - pdf_toolkit.preview.renderer: Builds PagePreviews
    - pdf_toolkit.session: Split/rasterize workflow state
    - pdf_toolkit.output.images: Page image export
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence


@dataclass
class PagePreview:
    """
    Preview of a single document page.

    Attributes:
        index: 0-based page index in the source document
        bitmap: PNG-encoded bytes
        width: Bitmap width in pixels
        height: Bitmap height in pixels
        selected: Whether the page is marked for the next operation
    """

    index: int
    bitmap: bytes = field(repr=False)
    width: int = 0
    height: int = 0
    selected: bool = True

    @property
    def export_filename(self) -> str:
        """Filename used when exporting this page as an image."""
        return f"page_{self.index + 1}.png"


class PageSelection:
    """
    Selection state over the previews of one document.

    Selecting a different source document means building a new
    PageSelection; state is never carried across documents.

    Example:
        >>> selection = PageSelection(previews)
        >>> selection.toggle(2)
        >>> selection.selected_indices
        (0, 1, 3)
    """

    def __init__(self, previews: Iterable[PagePreview]) -> None:
        self._previews: list[PagePreview] = sorted(previews, key=lambda p: p.index)
        self._by_index = {p.index: p for p in self._previews}
        if len(self._by_index) != len(self._previews):
            raise ValueError("Duplicate page index in previews")

    @classmethod
    def from_bitmaps(cls, bitmaps: Sequence[bytes]) -> PageSelection:
        """Build a fully selected PageSelection from bitmaps in page order."""
        return cls(PagePreview(index=i, bitmap=b) for i, b in enumerate(bitmaps))

    def __len__(self) -> int:
        return len(self._previews)

    def __iter__(self):
        return iter(self._previews)

    def __getitem__(self, index: int) -> PagePreview:
        return self._by_index[index]

    @property
    def previews(self) -> tuple[PagePreview, ...]:
        return tuple(self._previews)

    def toggle(self, index: int) -> None:
        """Flip the selected flag of one page. Unknown indices are ignored."""
        preview = self._by_index.get(index)
        if preview is not None:
            preview.selected = not preview.selected

    def select_all(self) -> None:
        for preview in self._previews:
            preview.selected = True

    def deselect_all(self) -> None:
        for preview in self._previews:
            preview.selected = False

    @property
    def selected_indices(self) -> tuple[int, ...]:
        """Selected page indices in ascending (document) order."""
        return tuple(p.index for p in self._previews if p.selected)

    @property
    def selected_previews(self) -> tuple[PagePreview, ...]:
        """Selected previews in document order."""
        return tuple(p for p in self._previews if p.selected)

    @property
    def selected_count(self) -> int:
        return len(self.selected_indices)

    def __repr__(self) -> str:
        return f"PageSelection(pages={len(self)}, selected={self.selected_count})"
