"""
Module: assembly

Purpose:
    Document assembly: compose images into a PDF, extract a page subset,
    merge documents. All operations are async and return fresh PDF bytes.

Key Functions:
    - compose_from_images(): Images -> PDF (ReportLab)
    - extract_subset(): Page subset of one PDF (pypdf)
    - merge_documents(): Concatenate PDFs (pypdf)
    - page_count(): Pages in a PDF byte buffer
"""

from .composer import compose_from_images
from .pages import extract_subset, merge_documents, page_count

__all__ = [
    "compose_from_images",
    "extract_subset",
    "merge_documents",
    "page_count",
]
