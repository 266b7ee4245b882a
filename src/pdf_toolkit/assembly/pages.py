"""
Module: assembly.pages

Purpose:
    Page-level assembly of existing PDFs: copy a subset of pages out of one
    document, or concatenate several documents. Sources are never modified;
    every call returns freshly serialized bytes.

Key Functions:
    - extract_subset(): Selected pages of one document, ascending order
    - merge_documents(): All pages of all documents, input order
    - page_count(): Number of pages in a PDF byte buffer

Dependencies:
    - pypdf: PDF parsing and writing

Used By:
    - pdf_toolkit.controller: PDF_SPLIT and PDF_MERGE workflows
    - pdf_toolkit.cli: info command
"""

from __future__ import annotations

import asyncio
import io
import logging
from typing import Iterable, Optional, Sequence

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PyPdfError

from pdf_toolkit.core.errors import DocumentLoadError, PageOutOfRangeError
from pdf_toolkit.core.models.documents import SourceDocument

logger = logging.getLogger(__name__)


async def extract_subset(
    document: SourceDocument,
    page_indices: Iterable[int],
) -> bytes:
    """
    Build a new PDF containing only the given pages of a document.

    Duplicate indices collapse to one page and pages are emitted in
    ascending index order regardless of the order they were selected in.
    An empty index set yields a valid zero-page document.

    Args:
        document: Source document
        page_indices: 0-based page indices to keep

    Returns:
        PDF bytes

    Raises:
        DocumentLoadError: If the source cannot be parsed
        PageOutOfRangeError: If any index is outside [0, page_count);
            raised before any page is copied

    Example:
        >>> pdf_bytes = await extract_subset(doc, {9, 0, 4})
        >>> page_count(pdf_bytes)
        3
    """
    ordered = sorted(set(page_indices))
    reader = await asyncio.to_thread(_open_reader, document.content, document.name)
    total = len(reader.pages)
    for index in ordered:
        if index < 0 or index >= total:
            raise PageOutOfRangeError(index, total)

    content = await asyncio.to_thread(_write_pages, [(reader, ordered)])
    logger.info(f"Extracted {len(ordered)} of {total} pages from {document.name}")
    return content


async def merge_documents(documents: Sequence[SourceDocument]) -> bytes:
    """
    Concatenate every page of every document, in input order.

    Documents without pages contribute nothing. An empty input yields a
    zero-page document and a single document yields a copy of it.

    Args:
        documents: Source documents in output order (duplicates allowed)

    Returns:
        PDF bytes

    Raises:
        DocumentLoadError: If any source cannot be parsed (nothing is emitted)
    """
    documents = tuple(documents)
    sources = []
    for document in documents:
        reader = await asyncio.to_thread(_open_reader, document.content, document.name)
        sources.append((reader, range(len(reader.pages))))

    content = await asyncio.to_thread(_write_pages, sources)
    total = sum(len(indices) for _, indices in sources)
    logger.info(f"Merged {len(documents)} documents into {total} pages")
    return content


def page_count(content: bytes, name: Optional[str] = None) -> int:
    """
    Count the pages of a PDF byte buffer.

    Raises:
        DocumentLoadError: If the bytes cannot be parsed
    """
    return len(_open_reader(content, name).pages)


def _open_reader(content: bytes, name: Optional[str] = None) -> PdfReader:
    """
    Parse PDF bytes, rejecting documents that need a password.

    Documents encrypted with an empty user password (owner-only
    restrictions) are opened transparently.
    """
    if not content:
        raise DocumentLoadError("Document is empty", name)
    try:
        reader = PdfReader(io.BytesIO(content))
        if reader.is_encrypted and not reader.decrypt(""):
            raise DocumentLoadError("Document is password protected", name)
        # Touch the page tree so structural damage surfaces here
        len(reader.pages)
    except PyPdfError as e:
        raise DocumentLoadError(f"Cannot read PDF: {e}", name) from e
    except (ValueError, KeyError, TypeError) as e:
        raise DocumentLoadError(f"Malformed PDF: {e}", name) from e
    return reader


def _write_pages(sources: Iterable[tuple[PdfReader, Iterable[int]]]) -> bytes:
    """Copy the given pages of each reader into one new document."""
    writer = PdfWriter()
    for reader, indices in sources:
        for index in indices:
            writer.add_page(reader.pages[index])
    buf = io.BytesIO()
    writer.write(buf)
    return buf.getvalue()
