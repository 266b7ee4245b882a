"""
Module: output.images

Purpose:
    Name selected page previews as PNG files and bundle files into ZIP
    archives.

Key Functions:
    - page_image_files(): (filename, bytes) pairs for selected pages
    - write_zip(): Write named files into a ZIP archive

Dependencies:
    - zipfile (std)
    - core.models.previews: PagePreview

Used By:
    - pdf_toolkit.controller: PDF_TO_IMAGE workflow
    - pdf_toolkit.cli: pdf-to-images command
"""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import Iterable

from pdf_toolkit.core.models.previews import PagePreview

logger = logging.getLogger(__name__)


def page_image_files(previews: Iterable[PagePreview]) -> list[tuple[str, bytes]]:
    """
    Collect the selected previews as named PNG files.

    Files are ordered by page index (document order), not by the order in
    which pages were selected. Names use 1-based page numbers.

    Example:
        >>> [name for name, _ in page_image_files(previews)]
        ['page_1.png', 'page_3.png']
    """
    selected = sorted((p for p in previews if p.selected), key=lambda p: p.index)
    return [(p.export_filename, p.bitmap) for p in selected]


def write_zip(files: Iterable[tuple[str, bytes]], output_path: Path) -> Path:
    """
    Bundle named files into a ZIP archive.

    Creates a ZIP file with structure:
        pages.zip
        ├── page_1.png
        ├── page_3.png
        └── ...

    Args:
        files: (filename, bytes) pairs, written in order
        output_path: Path for .zip file (will append .zip if missing)

    Returns:
        Path to created ZIP file

    Raises:
        OSError: If output path is not writable
    """
    if not output_path.suffix == ".zip":
        output_path = output_path.with_suffix(".zip")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    files = list(files)
    with zipfile.ZipFile(output_path, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, data in files:
            zf.writestr(name, data)

    logger.info(f"Wrote {len(files)} files to {output_path}")
    return output_path

