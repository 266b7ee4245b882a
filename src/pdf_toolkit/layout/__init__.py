"""
Module: layout

Purpose:
    Page layout for composing images into PDF pages.
    Resolves page settings into millimetre dimensions and fits each image
    into the printable area.

Key Functions:
    - compute_placement(): Centered, aspect-preserving fit

Key Classes:
    - PdfSettings: User-facing compose settings
    - PageTarget: Concrete page dimensions and margin
    - Placement: Where an image is drawn

Used By:
    - pdf_toolkit.assembly.composer
"""

from .config import (
    PageSize,
    Orientation,
    PdfSettings,
    PageTarget,
    PAGE_DIMENSIONS_MM,
    DEFAULT_FILENAME,
    DEFAULT_MARGIN_MM,
)
from .models import Placement
from .placement import compute_placement

__all__ = [
    # Config
    "PageSize",
    "Orientation",
    "PdfSettings",
    "PageTarget",
    "PAGE_DIMENSIONS_MM",
    "DEFAULT_FILENAME",
    "DEFAULT_MARGIN_MM",
    # Models
    "Placement",
    # Functions
    "compute_placement",
]
