"""
Module: session

Purpose:
    Explicit, session-scoped state for an interactive front end: the image
    list, the split source with its page selection, and the merge list.
    Core operations never read this object; requests are immutable
    snapshots built from it at invocation time.

Key Classes:
    - SessionState: Transient state owned by the orchestrating layer

Used By:
    - pdf_toolkit.cli
    - GUI front ends
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional

from pdf_toolkit.controller import (
    ComposeRequest,
    MergeRequest,
    RasterizeRequest,
    SplitRequest,
    WorkflowMode,
)
from pdf_toolkit.core.errors import EmptyInputError
from pdf_toolkit.core.models import PageSelection, SourceDocument, SourceImage
from pdf_toolkit.layout import PdfSettings
from pdf_toolkit.naming import NamingConfig, suggest_filename
from pdf_toolkit.preview import PREVIEW_SCALE, render_previews

logger = logging.getLogger(__name__)


@dataclass
class SessionState:
    """
    Transient state for one user session.

    Attributes:
        mode: Active workflow
        settings: Compose settings (page size, margin, filename)
        images: Images queued for composition, in page order
        split_source: Document currently previewed for split/rasterize
        selection: Page selection for split_source
        merge_documents: Documents queued for merging, in output order
    """

    mode: WorkflowMode = WorkflowMode.IMAGE_TO_PDF
    settings: PdfSettings = field(default_factory=PdfSettings)
    images: List[SourceImage] = field(default_factory=list)
    split_source: Optional[SourceDocument] = None
    selection: Optional[PageSelection] = None
    merge_documents: List[SourceDocument] = field(default_factory=list)

    def switch_mode(self, mode: WorkflowMode) -> None:
        """Change the active workflow; queued state is kept."""
        self.mode = WorkflowMode(mode)

    # ─────────────────────────────────────────────────────────────────────
    # Images
    # ─────────────────────────────────────────────────────────────────────

    def add_images(self, images: Iterable[SourceImage]) -> None:
        self.images.extend(images)

    def remove_image(self, identifier: str) -> None:
        """Remove an image by id. Unknown ids are ignored."""
        self.images = [img for img in self.images if img.identifier != identifier]

    def rotate_image(self, identifier: str) -> None:
        """Turn an image's display rotation a further 90 degrees."""
        self.images = [
            img.rotated() if img.identifier == identifier else img
            for img in self.images
        ]

    def clear_images(self) -> None:
        self.images = []

    def update_settings(self, **changes) -> None:
        """Replace individual compose settings (validated on construction)."""
        self.settings = replace(self.settings, **changes)

    async def suggest_filename(self, config: Optional[NamingConfig] = None) -> str:
        """
        Ask for a filename based on the first queued image and store it.

        Failures fall back to the default suggestion; the session is never
        left in an error state by this call.
        """
        if not self.images:
            raise EmptyInputError("No images to name")
        first = self.images[0]
        name = await suggest_filename(first.content, first.mime_type, config=config)
        self.update_settings(filename=name)
        return name

    # ─────────────────────────────────────────────────────────────────────
    # Split / rasterize source
    # ─────────────────────────────────────────────────────────────────────

    async def load_split_source(
        self,
        document: SourceDocument,
        *,
        scale: float = PREVIEW_SCALE,
    ) -> PageSelection:
        """
        Preview a document and start a fresh, fully selected page selection.

        On failure the previous source and selection are kept.

        Raises:
            DocumentLoadError: If the document cannot be rendered
        """
        previews = await render_previews(document.content, scale=scale, name=document.name)
        self.split_source = document
        self.selection = PageSelection(previews)
        logger.info(f"Loaded {document.name} with {len(previews)} pages")
        return self.selection

    def clear_split_source(self) -> None:
        self.split_source = None
        self.selection = None

    # ─────────────────────────────────────────────────────────────────────
    # Merge list
    # ─────────────────────────────────────────────────────────────────────

    def add_merge_documents(self, documents: Iterable[SourceDocument]) -> None:
        self.merge_documents.extend(documents)

    def remove_merge_document(self, position: int) -> None:
        """Remove the document at a list position (documents have no other identity)."""
        del self.merge_documents[position]

    # ─────────────────────────────────────────────────────────────────────
    # Request snapshots
    # ─────────────────────────────────────────────────────────────────────

    def compose_request(self) -> ComposeRequest:
        if not self.images:
            raise EmptyInputError("No images to compose")
        return ComposeRequest(images=tuple(self.images), settings=self.settings)

    def split_request(self) -> SplitRequest:
        if self.split_source is None or self.selection is None:
            raise EmptyInputError("No document loaded for splitting")
        return SplitRequest(
            document=self.split_source,
            page_indices=self.selection.selected_indices,
        )

    def merge_request(self, filename: Optional[str] = None) -> MergeRequest:
        kwargs = {"filename": filename} if filename else {}
        return MergeRequest(documents=tuple(self.merge_documents), **kwargs)

    def rasterize_request(self) -> RasterizeRequest:
        if self.selection is None or not self.selection.selected_count:
            raise EmptyInputError("No pages selected for image export")
        # Copies so later toggles do not leak into an in-flight export
        previews = tuple(replace(p) for p in self.selection.selected_previews)
        return RasterizeRequest(previews=previews)

    def current_request(self):
        """Build the request for the active mode."""
        builders = {
            WorkflowMode.IMAGE_TO_PDF: self.compose_request,
            WorkflowMode.PDF_SPLIT: self.split_request,
            WorkflowMode.PDF_MERGE: self.merge_request,
            WorkflowMode.PDF_TO_IMAGE: self.rasterize_request,
        }
        return builders[self.mode]()
