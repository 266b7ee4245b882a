"""
Module: layout.placement

Purpose:
    Fit an image inside the printable area of a page while preserving its
    aspect ratio, and center it on both axes. Never crops.

Key Functions:
    - compute_placement(): Width-first fit with height fallback

Used By:
    - pdf_toolkit.assembly.composer: One placement per composed page
"""

from __future__ import annotations

import logging

from pdf_toolkit.core.errors import InvalidConfigurationError

from .config import PageTarget
from .models import Placement

logger = logging.getLogger(__name__)


def compute_placement(
    image_pixel_width: int,
    image_pixel_height: int,
    page_target: PageTarget,
) -> Placement:
    """
    Compute where an image is drawn on a page.

    Starts with the full printable width and derives the height from the
    image aspect ratio. If that overflows the printable height, the height
    is pinned instead and the width derived from it. The result is centered
    on the page (not just within the printable area).

    Args:
        image_pixel_width: Source image width in pixels
        image_pixel_height: Source image height in pixels
        page_target: Page dimensions and margin in millimetres

    Returns:
        Placement in millimetres

    Raises:
        InvalidConfigurationError: If pixel dimensions are not positive or
            the printable area is empty

    Example:
        >>> target = PageTarget(210, 297, margin=10)
        >>> compute_placement(1000, 1500, target).height
        277.0
    """
    if image_pixel_width <= 0 or image_pixel_height <= 0:
        raise InvalidConfigurationError(
            f"Image dimensions must be positive: {image_pixel_width}x{image_pixel_height}"
        )

    printable_width = page_target.printable_width
    printable_height = page_target.printable_height
    if not (printable_width > 0 and printable_height > 0):
        raise InvalidConfigurationError("Margins leave no printable area")

    ratio = image_pixel_width / image_pixel_height

    width = printable_width
    height = width / ratio
    if height > printable_height:
        height = printable_height
        width = height * ratio

    x_offset = (page_target.page_width - width) / 2
    y_offset = (page_target.page_height - height) / 2

    logger.debug(
        f"Placed {image_pixel_width}x{image_pixel_height}px image at "
        f"({x_offset:.2f}, {y_offset:.2f}) size {width:.2f}x{height:.2f}mm"
    )
    return Placement(width=width, height=height, x_offset=x_offset, y_offset=y_offset)
