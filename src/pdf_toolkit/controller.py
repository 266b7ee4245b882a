"""
Module: controller

Purpose:
    Dispatch the four workflows (images -> PDF, split, merge, PDF -> images)
    from immutable request snapshots to the core operations, and package
    the results as named output files.

Key Functions:
    - run_workflow(): Main entry point (async)

Key Classes:
    - WorkflowMode: The four workflow modes
    - ComposeRequest, SplitRequest, MergeRequest, RasterizeRequest: Requests
    - OutputFile, WorkflowResult: Results

Dependencies:
    - pdf_toolkit.assembly: Document assembly
    - pdf_toolkit.output: Filenames and page image export

Used By:
    - pdf_toolkit.session: Builds requests from session state
    - pdf_toolkit.cli: Command handlers
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union

from pdf_toolkit.assembly import compose_from_images, extract_subset, merge_documents
from pdf_toolkit.core.errors import EmptyInputError
from pdf_toolkit.core.models import PagePreview, SourceDocument, SourceImage
from pdf_toolkit.layout import DEFAULT_FILENAME, PdfSettings
from pdf_toolkit.output import page_image_files, pdf_filename

logger = logging.getLogger(__name__)

DEFAULT_MERGE_FILENAME = "merged_document"


class WorkflowMode(str, Enum):
    IMAGE_TO_PDF = "IMAGE_TO_PDF"
    PDF_TO_IMAGE = "PDF_TO_IMAGE"
    PDF_SPLIT = "PDF_SPLIT"
    PDF_MERGE = "PDF_MERGE"


@dataclass(frozen=True)
class ComposeRequest:
    """Compose images into one PDF, one page per image."""
    mode: ClassVar[WorkflowMode] = WorkflowMode.IMAGE_TO_PDF

    images: tuple[SourceImage, ...]
    settings: PdfSettings = field(default_factory=PdfSettings)


@dataclass(frozen=True)
class SplitRequest:
    """Extract the given pages of one document."""
    mode: ClassVar[WorkflowMode] = WorkflowMode.PDF_SPLIT

    document: SourceDocument
    page_indices: tuple[int, ...]


@dataclass(frozen=True)
class MergeRequest:
    """Concatenate documents in order."""
    mode: ClassVar[WorkflowMode] = WorkflowMode.PDF_MERGE

    documents: tuple[SourceDocument, ...]
    filename: str = DEFAULT_MERGE_FILENAME


@dataclass(frozen=True)
class RasterizeRequest:
    """Export the selected page previews as PNG images."""
    mode: ClassVar[WorkflowMode] = WorkflowMode.PDF_TO_IMAGE

    previews: tuple[PagePreview, ...]


WorkflowRequest = Union[ComposeRequest, SplitRequest, MergeRequest, RasterizeRequest]


@dataclass(frozen=True)
class OutputFile:
    """A named output ready for the export sink."""
    filename: str
    content: bytes = field(repr=False)


@dataclass(frozen=True)
class WorkflowResult:
    """
    Result of one workflow run (immutable).

    Attributes:
        mode: Workflow that produced the result
        files: Output files in export order
        elapsed: Seconds spent in the workflow
    """
    mode: WorkflowMode
    files: tuple[OutputFile, ...]
    elapsed: float = 0.0

    @property
    def file_count(self) -> int:
        return len(self.files)


async def run_workflow(request: WorkflowRequest) -> WorkflowResult:
    """
    Run one workflow request to completion.

    Errors from the core operations propagate unchanged; the request and
    the objects it references are never modified, so the caller can retry.

    Args:
        request: One of the four request variants

    Returns:
        WorkflowResult with the output files

    Raises:
        ToolkitError subclasses from the core operations
        EmptyInputError: If a rasterize request has no selected pages
        TypeError: If request is not a known variant

    Example:
        >>> result = await run_workflow(MergeRequest((doc_a, doc_b)))
        >>> result.files[0].filename
        'merged_document.pdf'
    """
    start_time = time.perf_counter()
    logger.info(f"Starting {type(request).__name__}")

    if isinstance(request, ComposeRequest):
        content = await compose_from_images(request.images, request.settings)
        files = (OutputFile(pdf_filename(request.settings.filename, DEFAULT_FILENAME), content),)

    elif isinstance(request, SplitRequest):
        content = await extract_subset(request.document, request.page_indices)
        files = (OutputFile(pdf_filename(f"split_{request.document.name}", "split_document"), content),)

    elif isinstance(request, MergeRequest):
        content = await merge_documents(request.documents)
        files = (OutputFile(pdf_filename(request.filename, DEFAULT_MERGE_FILENAME), content),)

    elif isinstance(request, RasterizeRequest):
        images = page_image_files(request.previews)
        if not images:
            raise EmptyInputError("No pages selected for image export")
        files = tuple(OutputFile(name, data) for name, data in images)

    else:
        raise TypeError(f"Unknown workflow request: {type(request).__name__}")

    elapsed = time.perf_counter() - start_time
    logger.info(f"{request.mode.value} produced {len(files)} file(s) in {elapsed:.2f}s")
    return WorkflowResult(mode=request.mode, files=files, elapsed=elapsed)
