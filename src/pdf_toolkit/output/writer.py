"""
Module: output.writer

Purpose:
    Persist finished PDF bytes to disk under a caller-provided name.

Key Functions:
    - pdf_filename(): Append .pdf to a caller name (no other sanitization)
    - write_file(): Write bytes into an output directory

Dependencies:
    - pathlib (std)

Used By:
    - pdf_toolkit.controller: Output filenames
    - pdf_toolkit.cli: Saving results
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def pdf_filename(name: str, default: str) -> str:
    """
    Build an output filename.

    The name is used as given with ".pdf" appended; blank names fall back
    to the default. A name already ending in ".pdf" is not extended again.

    Example:
        >>> pdf_filename("holiday photos", "converted_document")
        'holiday photos.pdf'
        >>> pdf_filename("", "merged_document")
        'merged_document.pdf'
    """
    stem = name if name.strip() else default
    if stem.lower().endswith(".pdf"):
        return stem
    return f"{stem}.pdf"


def write_file(content: bytes, output_dir: Path, filename: str) -> Path:
    """
    Write bytes to output_dir/filename, creating the directory.

    Returns:
        Path of the written file

    Raises:
        OSError: If the file cannot be written
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / filename
    path.write_bytes(content)
    logger.info(f"Wrote {len(content)} bytes to {path}")
    return path

