"""
Module: core.errors

Purpose:
    Exception hierarchy shared by the layout engine, document assembler,
    previewer and filename suggester. Every error raised by the toolkit
    derives from ToolkitError so callers can report failures distinctly
    from success without catching unrelated exceptions.

Key Classes:
    - ToolkitError: Base class
    - InvalidConfigurationError: Page size / margin combination is unusable
    - EmptyInputError: Assembly invoked with nothing to assemble
    - PageOutOfRangeError: Page index not present in source document
    - DocumentLoadError: Source bytes are not a readable PDF
    - ImageDecodeError: Source bytes are not a decodable image
    - ExternalServiceError: Filename suggestion service failed

Used By:
    - pdf_toolkit.layout, pdf_toolkit.assembly, pdf_toolkit.preview
    - pdf_toolkit.naming (internally, never propagated)
    - pdf_toolkit.cli: maps ToolkitError to exit code 1
"""

from __future__ import annotations

from typing import Optional


class ToolkitError(Exception):
    """Base class for all toolkit failures."""
    pass


class InvalidConfigurationError(ToolkitError, ValueError):
    """Margin/page-size combination yields a non-positive printable area."""
    pass


class EmptyInputError(ToolkitError, ValueError):
    """An assembly operation was invoked with zero source items."""
    pass


class PageOutOfRangeError(ToolkitError, IndexError):
    """
    A requested page index does not exist in the source document.

    Attributes:
        index: The offending 0-based index
        page_count: Number of pages in the source document
    """

    def __init__(self, index: int, page_count: int) -> None:
        self.index = index
        self.page_count = page_count
        super().__init__(
            f"Page index {index} out of range for document with {page_count} pages"
        )


class DocumentLoadError(ToolkitError):
    """
    Source bytes are not a parseable document.

    Raised for corrupt data, encrypted documents and unsupported versions.

    Attributes:
        source: Name of the document that failed to load (if known)
    """

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class ImageDecodeError(ToolkitError):
    """Source bytes could not be decoded as an image."""

    def __init__(self, message: str, identifier: Optional[str] = None) -> None:
        self.identifier = identifier
        if identifier:
            message = f"{identifier}: {message}"
        super().__init__(message)


class ExternalServiceError(ToolkitError):
    """The filename suggestion service failed or timed out."""
    pass
