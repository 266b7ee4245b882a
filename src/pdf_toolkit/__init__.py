"""Top-level package for the PDF toolkit.

Provides subpackages:
- pdf_toolkit.layout – fitting images onto pages
- pdf_toolkit.assembly – compose, extract and merge PDFs
- pdf_toolkit.preview – page rasterization
- pdf_toolkit.naming – AI filename suggestion
- pdf_toolkit.cli – command-line front end
"""


def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text().splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("pdf-toolkit")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__copyright__ = "Copyright 2026 The pdf_toolkit authors"
__all__: list[str] = ["__version__"]
