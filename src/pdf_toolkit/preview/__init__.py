"""Page previewer: rasterizes PDF pages with PyMuPDF."""

from .renderer import render_previews, render_page, PREVIEW_SCALE

__all__ = ["render_previews", "render_page", "PREVIEW_SCALE"]
