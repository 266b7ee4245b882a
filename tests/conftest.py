import io
import sys
from pathlib import Path

import fitz
import pytest
from PIL import Image

# Add src to sys.path so we can import pdf_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def make_image_bytes():
    """Factory for encoded test images."""
    def _create(width: int = 200, height: int = 100, fmt: str = "PNG", mode: str = "RGB", color="white"):
        img = Image.new(mode, (width, height), color=color)
        buf = io.BytesIO()
        img.save(buf, format=fmt)
        return buf.getvalue()
    return _create


@pytest.fixture
def make_pdf():
    """
    Factory for test PDFs.

    Each page carries the text "<label> <index>" so page order can be
    checked after assembly.
    """
    def _create(page_count: int, label: str = "Page", width: float = 595, height: float = 842):
        doc = fitz.open()
        for i in range(page_count):
            page = doc.new_page(width=width, height=height)
            page.insert_text((72, 72), f"{label} {i}", fontsize=12)
        content = doc.tobytes()
        doc.close()
        return content
    return _create


@pytest.fixture
def page_texts():
    """Return the stripped text of every page of a PDF byte buffer."""
    def _read(content: bytes):
        with fitz.open(stream=content, filetype="pdf") as doc:
            return [page.get_text().strip() for page in doc]
    return _read


@pytest.fixture
def sample_image(tmp_path: Path, make_image_bytes):
    """Create a simple test image on disk."""
    img_path = tmp_path / "sample.png"
    img_path.write_bytes(make_image_bytes(200, 100))
    return img_path
