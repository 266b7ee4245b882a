"""
Module: output

Purpose:
    Export helpers: name and write finished PDFs and page images.

Key Functions:
    - pdf_filename(): Output name for a PDF
    - write_file(): Write bytes into an output directory
    - page_image_files(): Selected previews as page_<n>.png files
    - write_zip(): Bundle files into a ZIP archive
"""

from .writer import pdf_filename, write_file
from .images import page_image_files, write_zip

__all__ = [
    "pdf_filename",
    "write_file",
    "page_image_files",
    "write_zip",
]
