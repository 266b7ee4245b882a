"""Core data models and error types for pdf_toolkit."""

from .errors import (
    ToolkitError,
    InvalidConfigurationError,
    EmptyInputError,
    PageOutOfRangeError,
    DocumentLoadError,
    ImageDecodeError,
    ExternalServiceError,
)

__all__ = [
    "ToolkitError",
    "InvalidConfigurationError",
    "EmptyInputError",
    "PageOutOfRangeError",
    "DocumentLoadError",
    "ImageDecodeError",
    "ExternalServiceError",
]
