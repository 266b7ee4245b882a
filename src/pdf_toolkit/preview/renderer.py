"""
Module: preview.renderer

Purpose:
    Rasterize every page of a PDF into a low-resolution PNG preview using
    PyMuPDF. Previews drive page selection and page-to-image export.

Key Functions:
    - render_previews(): All pages -> PagePreviews (async)
    - render_page(): One page -> PNG bytes and size

Dependencies:
    - fitz (PyMuPDF): PDF rendering

Used By:
    - pdf_toolkit.session: load_split_source
    - pdf_toolkit.cli: pdf-to-images command
"""

from __future__ import annotations

import asyncio
import logging
from typing import Tuple

import fitz

from pdf_toolkit.core.errors import DocumentLoadError, InvalidConfigurationError
from pdf_toolkit.core.models.previews import PagePreview

logger = logging.getLogger(__name__)

# Trades fidelity for speed; does not affect correctness
PREVIEW_SCALE = 0.5


async def render_previews(
    content: bytes,
    *,
    scale: float = PREVIEW_SCALE,
    name: str | None = None,
) -> tuple[PagePreview, ...]:
    """
    Render one preview per page, in document order.

    Blank pages still produce a preview. Pages are rendered one at a time
    in a worker thread (a PyMuPDF document must not be shared between
    threads), so the output order always matches the document.

    Args:
        content: PDF bytes
        scale: Zoom factor relative to 72 DPI (0.5 -> 36 DPI)
        name: Document name for error messages

    Returns:
        Tuple of PagePreviews, all selected

    Raises:
        InvalidConfigurationError: If scale is not positive
        DocumentLoadError: If the document is corrupt, empty or password
            protected; no previews are returned

    Example:
        >>> previews = await render_previews(pdf_bytes)
        >>> [p.index for p in previews]
        [0, 1, 2]
    """
    if scale <= 0:
        raise InvalidConfigurationError(f"Preview scale must be positive: {scale}")

    doc = await asyncio.to_thread(_open_document, content, name)
    try:
        previews = []
        for index in range(doc.page_count):
            png, width, height = await asyncio.to_thread(render_page, doc[index], scale)
            previews.append(PagePreview(index=index, bitmap=png, width=width, height=height))
    except RuntimeError as e:
        raise DocumentLoadError(f"Failed to render page: {e}", name) from e
    finally:
        doc.close()

    logger.info(f"Rendered {len(previews)} page previews at scale {scale}")
    return tuple(previews)


def render_page(page: fitz.Page, scale: float = PREVIEW_SCALE) -> Tuple[bytes, int, int]:
    """
    Render a single page to PNG.

    Args:
        page: PyMuPDF page object
        scale: Zoom factor relative to 72 DPI

    Returns:
        (png_bytes, width, height)
    """
    matrix = fitz.Matrix(scale, scale)
    pix = page.get_pixmap(matrix=matrix, alpha=False)
    return pix.tobytes("png"), pix.width, pix.height


def _open_document(content: bytes, name: str | None = None) -> fitz.Document:
    """Open PDF bytes, rejecting empty, corrupt and password-protected input."""
    if not content:
        raise DocumentLoadError("Document is empty", name)
    try:
        doc = fitz.open(stream=content, filetype="pdf")
    except (fitz.FileDataError, RuntimeError, ValueError) as e:
        raise DocumentLoadError(f"Cannot open PDF: {e}", name) from e
    if doc.needs_pass:
        doc.close()
        raise DocumentLoadError("Document is password protected", name)
    return doc
