"""
Module: layout.config

Purpose:
    Configuration for the image-to-PDF layout engine.
    Turns user-facing settings (page size, orientation, margin, filename)
    into a concrete PageTarget in millimetres.

Key Classes:
    - PageSize: Supported page size names
    - Orientation: Portrait / landscape
    - PdfSettings: User-facing compose settings (immutable)
    - PageTarget: Concrete page dimensions and margin (immutable)

Dependencies:
    - dataclasses (std)

Used By:
    - pdf_toolkit.layout.placement: compute_placement
    - pdf_toolkit.assembly.composer: Page size for each PDF page
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from pdf_toolkit.core.errors import InvalidConfigurationError


class PageSize(str, Enum):
    A4 = "a4"
    LETTER = "letter"
    # Not a true "use the image size" mode: degrades to A4
    ORIGINAL = "original"


class Orientation(str, Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


# Portrait (width, height) in millimetres
PAGE_DIMENSIONS_MM = {
    PageSize.A4: (210.0, 297.0),
    PageSize.LETTER: (215.9, 279.4),
}

DEFAULT_MARGIN_MM = 10.0
DEFAULT_FILENAME = "converted_document"


@dataclass(frozen=True)
class PdfSettings:
    """
    Settings for composing images into a PDF (immutable).

    String values are accepted for page_size and orientation and coerced
    to their enums.

    Attributes:
        page_size: 'a4', 'letter' or 'original' (falls back to A4)
        orientation: 'portrait' or 'landscape'
        margin: Uniform margin in millimetres (>= 0)
        filename: Output filename without extension

    Example:
        >>> settings = PdfSettings(page_size="letter", orientation="landscape")
        >>> settings.page_target().page_width
        279.4
    """

    page_size: Union[PageSize, str] = PageSize.A4
    orientation: Union[Orientation, str] = Orientation.PORTRAIT
    margin: float = DEFAULT_MARGIN_MM
    filename: str = DEFAULT_FILENAME

    def __post_init__(self) -> None:
        """Validate and coerce settings on construction."""
        try:
            object.__setattr__(self, "page_size", PageSize(self.page_size))
        except ValueError as e:
            raise InvalidConfigurationError(f"Unknown page size: {self.page_size!r}") from e
        try:
            object.__setattr__(self, "orientation", Orientation(self.orientation))
        except ValueError as e:
            raise InvalidConfigurationError(f"Unknown orientation: {self.orientation!r}") from e
        if not self.margin >= 0:
            raise InvalidConfigurationError(f"margin must be non-negative: {self.margin}")

    def page_target(self) -> PageTarget:
        """Resolve these settings to concrete page dimensions."""
        return PageTarget.from_settings(self)


@dataclass(frozen=True)
class PageTarget:
    """
    Concrete page dimensions and margin in millimetres (immutable).

    Attributes:
        page_width: Page width in mm
        page_height: Page height in mm
        margin: Uniform margin in mm

    Invariants:
        - 0 <= margin < min(page_width, page_height) / 2
    """

    page_width: float
    page_height: float
    margin: float = 0.0

    def __post_init__(self) -> None:
        if not (self.page_width > 0 and self.page_height > 0):
            raise InvalidConfigurationError(
                f"Page dimensions must be positive: {self.page_width}x{self.page_height}"
            )
        if not self.margin >= 0:
            raise InvalidConfigurationError(f"margin must be non-negative: {self.margin}")
        if not self.margin < min(self.page_width, self.page_height) / 2:
            raise InvalidConfigurationError(
                f"Margin {self.margin}mm leaves no printable area on a "
                f"{self.page_width}x{self.page_height}mm page"
            )

    @classmethod
    def from_settings(cls, settings: PdfSettings) -> PageTarget:
        """
        Build a PageTarget from PdfSettings.

        'original' uses A4 dimensions. Landscape swaps the axes so the
        long edge is horizontal.

        Raises:
            InvalidConfigurationError: If the margin consumes the page
        """
        size = PageSize(settings.page_size)
        if size is PageSize.ORIGINAL:
            size = PageSize.A4
        width, height = PAGE_DIMENSIONS_MM[size]
        if Orientation(settings.orientation) is Orientation.LANDSCAPE:
            width, height = max(width, height), min(width, height)
        return cls(page_width=width, page_height=height, margin=settings.margin)

    @property
    def printable_width(self) -> float:
        """Width available for content (page width minus both margins)."""
        return self.page_width - 2 * self.margin

    @property
    def printable_height(self) -> float:
        """Height available for content (page height minus both margins)."""
        return self.page_height - 2 * self.margin
