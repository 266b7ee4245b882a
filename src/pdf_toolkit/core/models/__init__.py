"""
Data models shared across the toolkit.

Exports:
    - SourceImage, decode_image: Imported images
    - SourceDocument: Source PDF documents
    - PagePreview, PageSelection: Page previews and selection state
"""

from .images import SourceImage, decode_image, VALID_ROTATIONS
from .documents import SourceDocument
from .previews import PagePreview, PageSelection

__all__ = [
    "SourceImage",
    "decode_image",
    "VALID_ROTATIONS",
    "SourceDocument",
    "PagePreview",
    "PageSelection",
]
