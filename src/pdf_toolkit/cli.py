"""
Command-line front end for pdf_toolkit.

Subcommands:
    images-to-pdf  Compose images into one PDF
    split          Extract pages of a PDF
    merge          Concatenate PDFs
    pdf-to-images  Export pages as PNG previews
    info           Print the page count of a PDF

Page numbers on the command line are 1-based; they are converted to
0-based indices before reaching the core operations.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from pdf_toolkit import __version__
from pdf_toolkit.assembly import page_count
from pdf_toolkit.controller import SplitRequest, WorkflowMode, WorkflowResult, run_workflow
from pdf_toolkit.core.errors import PageOutOfRangeError, ToolkitError
from pdf_toolkit.core.models import SourceDocument, SourceImage
from pdf_toolkit.layout import DEFAULT_FILENAME, DEFAULT_MARGIN_MM, Orientation, PageSize
from pdf_toolkit.output import write_file, write_zip
from pdf_toolkit.preview import PREVIEW_SCALE
from pdf_toolkit.session import SessionState

logger = logging.getLogger("pdf_toolkit")


def parse_page_ranges(text: str) -> tuple[int, ...]:
    """
    Parse "1,3,5-7" into ascending 0-based indices.

    Raises:
        argparse.ArgumentTypeError: On malformed input or page numbers < 1

    Example:
        >>> parse_page_ranges("3,1,5-6")
        (0, 2, 4, 5)
    """
    indices = set()
    for token in text.split(","):
        token = token.strip()
        if not token:
            continue
        start_text, sep, end_text = token.partition("-")
        try:
            start = int(start_text)
            end = int(end_text) if sep else start
        except ValueError:
            raise argparse.ArgumentTypeError(f"Invalid page range: {token!r}") from None
        if start < 1 or end < start:
            raise argparse.ArgumentTypeError(f"Invalid page range: {token!r}")
        indices.update(range(start - 1, end))
    return tuple(sorted(indices))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdf-toolkit",
        description="Convert images to PDF, split, merge and rasterize PDFs.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    compose = sub.add_parser("images-to-pdf", help="Compose images into one PDF")
    compose.add_argument("images", nargs="+", type=Path, help="Image files in page order")
    compose.add_argument("--page-size", choices=[s.value for s in PageSize], default=PageSize.A4.value)
    compose.add_argument("--orientation", choices=[o.value for o in Orientation], default=Orientation.PORTRAIT.value)
    compose.add_argument("--margin", type=float, default=DEFAULT_MARGIN_MM, help="Margin in millimetres")
    compose.add_argument("--filename", default=DEFAULT_FILENAME, help="Output name without extension")
    compose.add_argument("--suggest-name", action="store_true", help="Ask an AI model for the filename")
    compose.add_argument("-o", "--output-dir", type=Path, default=Path("."))

    split = sub.add_parser("split", help="Extract pages of a PDF")
    split.add_argument("pdf", type=Path)
    split.add_argument("--pages", type=parse_page_ranges, required=True, help='e.g. "1,3,5-7"')
    split.add_argument("-o", "--output-dir", type=Path, default=Path("."))

    merge = sub.add_parser("merge", help="Concatenate PDFs in the given order")
    merge.add_argument("pdfs", nargs="+", type=Path)
    merge.add_argument("--filename", default=None, help="Output name without extension")
    merge.add_argument("-o", "--output-dir", type=Path, default=Path("."))

    raster = sub.add_parser("pdf-to-images", help="Export pages as PNG images")
    raster.add_argument("pdf", type=Path)
    raster.add_argument("--pages", type=parse_page_ranges, default=None, help="Default: all pages")
    raster.add_argument("--scale", type=float, default=PREVIEW_SCALE, help="Zoom relative to 72 DPI")
    raster.add_argument("--zip", action="store_true", help="Bundle images into pages.zip")
    raster.add_argument("-o", "--output-dir", type=Path, default=Path("."))

    info = sub.add_parser("info", help="Print the page count of a PDF")
    info.add_argument("pdf", type=Path)

    return parser


async def _images_to_pdf(args: argparse.Namespace) -> WorkflowResult:
    session = SessionState()
    session.switch_mode(WorkflowMode.IMAGE_TO_PDF)
    session.add_images(
        SourceImage.from_bytes(path.read_bytes(), name=path.name) for path in args.images
    )
    session.update_settings(
        page_size=args.page_size,
        orientation=args.orientation,
        margin=args.margin,
        filename=args.filename,
    )
    if args.suggest_name:
        await session.suggest_filename()
    return await run_workflow(session.current_request())


async def _split(args: argparse.Namespace) -> WorkflowResult:
    # Pages come straight from the command line; no previews are needed
    request = SplitRequest(document=SourceDocument.from_path(args.pdf), page_indices=args.pages)
    return await run_workflow(request)


async def _merge(args: argparse.Namespace) -> WorkflowResult:
    session = SessionState(mode=WorkflowMode.PDF_MERGE)
    session.add_merge_documents(SourceDocument.from_path(path) for path in args.pdfs)
    return await run_workflow(session.merge_request(args.filename))


async def _pdf_to_images(args: argparse.Namespace) -> WorkflowResult:
    session = SessionState(mode=WorkflowMode.PDF_TO_IMAGE)
    selection = await session.load_split_source(SourceDocument.from_path(args.pdf), scale=args.scale)
    if args.pages is not None:
        _apply_page_choice(selection, args.pages)
    return await run_workflow(session.current_request())


def _apply_page_choice(selection, indices: Sequence[int]) -> None:
    """Select exactly the given pages, rejecting pages the document lacks."""
    for index in indices:
        if index >= len(selection):
            raise PageOutOfRangeError(index, len(selection))
    selection.deselect_all()
    for index in indices:
        selection.toggle(index)


def _save(result: WorkflowResult, args: argparse.Namespace) -> List[Path]:
    if result.mode is WorkflowMode.PDF_TO_IMAGE and args.zip:
        files = [(f.filename, f.content) for f in result.files]
        return [write_zip(files, args.output_dir / "pages.zip")]
    return [write_file(f.content, args.output_dir, f.filename) for f in result.files]


HANDLERS = {
    "images-to-pdf": _images_to_pdf,
    "split": _split,
    "merge": _merge,
    "pdf-to-images": _pdf_to_images,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        if args.command == "info":
            pages = page_count(args.pdf.read_bytes(), args.pdf.name)
            print(f"{args.pdf.name}: {pages} pages")
            return 0

        result = asyncio.run(HANDLERS[args.command](args))
        for path in _save(result, args):
            print(path)
    except ToolkitError as e:
        logger.error(f"Error: {e}")
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
