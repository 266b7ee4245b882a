"""AI filename suggestion (best effort, never fatal)."""

from .config import NamingConfig, DEFAULT_NAMING_MODEL
from .suggester import suggest_filename, normalize_suggestion, DEFAULT_SUGGESTED_FILENAME

__all__ = [
    "NamingConfig",
    "DEFAULT_NAMING_MODEL",
    "suggest_filename",
    "normalize_suggestion",
    "DEFAULT_SUGGESTED_FILENAME",
]
