"""
Module: core.models.images

Purpose:
    SourceImage dataclass: an imported raster image awaiting composition
    into a PDF. Holds the encoded bytes plus the decoded pixel size so the
    layout engine never has to decode twice.

Key Classes:
    - SourceImage: Imported image (immutable)

Key Functions:
    - decode_image(): Decode bytes to an upright PIL image

Dependencies:
    - PIL: Decoding and EXIF orientation
    - dataclasses (std)

Used By:
    - pdf_toolkit.assembly.composer: Compose-from-images
    - pdf_toolkit.session: Image list management
"""

from __future__ import annotations

import io
import uuid
from dataclasses import dataclass, field, replace
from typing import Optional

from PIL import Image, ImageOps, UnidentifiedImageError

from pdf_toolkit.core.errors import ImageDecodeError

VALID_ROTATIONS = (0, 90, 180, 270)


def decode_image(content: bytes, identifier: Optional[str] = None) -> Image.Image:
    """
    Decode encoded image bytes into an upright PIL image.

    The EXIF orientation tag is applied so that the pixel size matches what
    a viewer would display.

    Args:
        content: Encoded image bytes (PNG, JPEG, ...)
        identifier: Used in the error message only

    Returns:
        Fully loaded PIL image

    Raises:
        ImageDecodeError: If Pillow cannot decode the bytes
    """
    try:
        with Image.open(io.BytesIO(content)) as img:
            img.load()
            # Always a detached copy, safe to use after the buffer closes
            return ImageOps.exif_transpose(img)
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise ImageDecodeError(f"Cannot decode image: {e}", identifier) from e


@dataclass(frozen=True)
class SourceImage:
    """
    An imported image (immutable).

    Rotation is a display-only attribute. It is NOT applied when computing
    placements or drawing the final PDF page.

    Attributes:
        identifier: Unique opaque id
        pixel_width: Decoded width in pixels (upright)
        pixel_height: Decoded height in pixels (upright)
        content: Original encoded bytes
        rotation: Display rotation in degrees (0, 90, 180, 270)
        name: Display name, usually the source filename
        mime_type: MIME type of the encoded bytes

    Example:
        >>> image = SourceImage.from_bytes(png_bytes, name="scan.png")
        >>> image.rotated().rotation
        90
    """

    pixel_width: int
    pixel_height: int
    content: bytes = field(repr=False)
    identifier: str = field(default_factory=lambda: uuid.uuid4().hex)
    rotation: int = 0
    name: str = ""
    mime_type: str = "image/png"

    def __post_init__(self) -> None:
        if self.pixel_width <= 0 or self.pixel_height <= 0:
            raise ValueError(
                f"Image dimensions must be positive: {self.pixel_width}x{self.pixel_height}"
            )
        if self.rotation not in VALID_ROTATIONS:
            raise ValueError(f"rotation must be one of {VALID_ROTATIONS}: {self.rotation}")

    @classmethod
    def from_bytes(
        cls,
        content: bytes,
        *,
        name: str = "",
        identifier: Optional[str] = None,
    ) -> SourceImage:
        """
        Build a SourceImage by decoding the bytes once to learn their size.

        Raises:
            ImageDecodeError: If the bytes are not a decodable image
        """
        img = decode_image(content, identifier or name or None)
        mime_type = _sniff_mime_type(content)
        kwargs = {"identifier": identifier} if identifier else {}
        return cls(
            pixel_width=img.width,
            pixel_height=img.height,
            content=content,
            name=name,
            mime_type=mime_type,
            **kwargs,
        )

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height of the upright image."""
        return self.pixel_width / self.pixel_height

    def rotated(self) -> SourceImage:
        """Return a copy turned a further 90 degrees clockwise."""
        return replace(self, rotation=(self.rotation + 90) % 360)


def _sniff_mime_type(content: bytes) -> str:
    """Read the MIME type from the image header (decoded copies carry no format)."""
    try:
        with Image.open(io.BytesIO(content)) as img:
            return Image.MIME.get(img.format or "", "application/octet-stream")
    except (UnidentifiedImageError, OSError):
        return "application/octet-stream"
