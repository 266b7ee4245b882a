"""
Module: layout.models

Purpose:
    Data models for image placement on a PDF page.

Key Classes:
    - Placement: Scaled, centered rectangle for one image

Used By:
    - pdf_toolkit.layout.placement: Creates Placements
    - pdf_toolkit.assembly.composer: Draws images at Placements
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Placement:
    """
    An image positioned on a page, in millimetres from the top-left corner.

    Attributes:
        width: Drawn width
        height: Drawn height
        x_offset: Distance from the left page edge
        y_offset: Distance from the top page edge

    Example:
        >>> placement = Placement(width=190, height=100, x_offset=10, y_offset=98.5)
        >>> placement.right
        200
    """

    width: float
    height: float
    x_offset: float
    y_offset: float

    @property
    def right(self) -> float:
        """Right X coordinate (x_offset + width)."""
        return self.x_offset + self.width

    @property
    def bottom(self) -> float:
        """Bottom Y coordinate (y_offset + height)."""
        return self.y_offset + self.height

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height
