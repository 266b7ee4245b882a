"""
Module: assembly.composer

Purpose:
    Compose an ordered list of images into a multi-page PDF using ReportLab.
    Each image becomes exactly one page, drawn at the placement computed by
    the layout engine.

Key Functions:
    - compose_from_images(): Main entry point (async)

Dependencies:
    - reportlab: PDF generation
    - PIL: Image decoding
    - pdf_toolkit.layout: PageTarget, compute_placement

Used By:
    - pdf_toolkit.controller: IMAGE_TO_PDF workflow
"""

from __future__ import annotations

import asyncio
import io
import logging
from typing import Sequence

from PIL import Image
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from pdf_toolkit.core.errors import EmptyInputError
from pdf_toolkit.core.models.images import SourceImage, decode_image
from pdf_toolkit.layout.config import PageTarget, PdfSettings
from pdf_toolkit.layout.models import Placement
from pdf_toolkit.layout.placement import compute_placement

logger = logging.getLogger(__name__)


async def compose_from_images(
    images: Sequence[SourceImage],
    settings: PdfSettings,
) -> bytes:
    """
    Compose images into a PDF, one page per image, in input order.

    Images are decoded one after another in a worker thread so the event
    loop is never blocked; page N is drawn before page N+1 is decoded.
    The display rotation of each image is ignored: pages always show the
    image upright.

    Args:
        images: Images in output page order
        settings: Page size, orientation and margin

    Returns:
        PDF bytes

    Raises:
        EmptyInputError: If images is empty
        InvalidConfigurationError: If the margin leaves no printable area
        ImageDecodeError: If any image cannot be decoded (no PDF is emitted)

    Example:
        >>> pdf_bytes = await compose_from_images(images, PdfSettings(margin=10))
    """
    if not images:
        raise EmptyInputError("No images to compose")

    # Snapshot so later edits to the caller's list cannot reorder pages
    images = tuple(images)
    target = settings.page_target()
    page_size_pt = (target.page_width * mm, target.page_height * mm)

    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=page_size_pt)
    c.setTitle(settings.filename)

    for number, image in enumerate(images, start=1):
        decoded = await asyncio.to_thread(decode_image, image.content, image.identifier)
        placement = compute_placement(decoded.width, decoded.height, target)
        await asyncio.to_thread(_draw_page, c, decoded, placement, target)
        logger.debug(f"Drew page {number}/{len(images)} ({image.name or image.identifier})")

    await asyncio.to_thread(c.save)

    logger.info(f"Composed {len(images)} pages")
    return buffer.getvalue()


def _draw_page(
    c: canvas.Canvas,
    image: Image.Image,
    placement: Placement,
    target: PageTarget,
) -> None:
    """
    Draw one image on the current page and close the page.

    Args:
        c: ReportLab canvas
        image: Decoded, upright image
        placement: Placement in millimetres (top-left origin)
        target: Page dimensions in millimetres
    """
    y_pt = _transform_y(target.page_height, placement.y_offset, placement.height)
    c.drawImage(
        _pil_to_reader(image),
        placement.x_offset * mm,
        y_pt,
        width=placement.width * mm,
        height=placement.height * mm,
        mask="auto",
    )
    c.showPage()


def _pil_to_reader(img: Image.Image) -> ImageReader:
    """
    Convert PIL image to ReportLab ImageReader.

    Palette and CMYK images are normalised so ReportLab can embed them.

    Args:
        img: PIL Image object

    Returns:
        ImageReader for use with ReportLab
    """
    if img.mode not in ("RGB", "RGBA", "L"):
        has_alpha = "A" in img.getbands() or "transparency" in img.info
        img = img.convert("RGBA" if has_alpha else "RGB")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return ImageReader(buf)


def _transform_y(page_height_mm: float, y_mm_top: float, height_mm: float) -> float:
    """
    Convert a top-down millimetre Y coordinate to bottom-up PDF points.

    Args:
        page_height_mm: Page height in millimetres
        y_mm_top: Distance from page top to element top
        height_mm: Element height

    Returns:
        Y position of the element's bottom edge in points
    """
    return (page_height_mm - y_mm_top - height_mm) * mm
