# tests/conftest.py
# ============================================================
# Shared Test Fixtures
# ============================================================
# In-memory stand-ins for the rasterizer so strategies and the
# runner can be tested without poppler, plus a helper that
# writes real PDFs with pypdf for rasterizer tests.
# ============================================================

from pathlib import Path
from typing import Optional, Sequence

import pytest
from PIL import Image
from pypdf import PdfWriter
from pypdf.generic import RectangleObject

from pdf_to_image.errors import DocumentOpenError, PageRenderError


class FakeDocument:
    """Renders solid-colour pages of fixed sizes and records what happened."""

    def __init__(self, sizes: Sequence[tuple[int, int]], fail_at: Optional[int] = None):
        self.sizes = list(sizes)
        self.fail_at = fail_at
        self.rendered: list[int] = []
        self.closed = False

    @property
    def page_count(self) -> int:
        return len(self.sizes)

    def render(self, page_index: int) -> Image.Image:
        if page_index == self.fail_at:
            raise PageRenderError(page_index, "simulated failure")
        self.rendered.append(page_index)
        shade = (page_index * 40) % 256
        return Image.new("RGB", self.sizes[page_index], color=(shade, 0, 255 - shade))

    def close(self) -> None:
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


class FakeRasterizer:
    """Hands out a FakeDocument, or fails to open like a corrupt PDF."""

    def __init__(self, document: Optional[FakeDocument] = None):
        self.document = document
        self.opened: list[Path] = []

    def open(self, path):
        self.opened.append(Path(path))
        if self.document is None:
            raise DocumentOpenError(path, "simulated corrupt file")
        return self.document


@pytest.fixture
def make_document():
    """Factory: make_document(n, size=(40, 60)) or make_document(sizes=[...])."""
    def _make(count: int = 0, size=(40, 60), sizes=None, fail_at=None) -> FakeDocument:
        return FakeDocument(sizes if sizes is not None else [size] * count, fail_at=fail_at)
    return _make


@pytest.fixture
def make_pdf(tmp_path):
    """
    Factory: write a PDF of blank pages (width, height in points) and return its path.

    ``cropboxes`` gives an optional (width, height) crop box per page,
    anchored at the lower-left corner of the media box.
    """
    def _make(sizes, name: str = "doc.pdf", rotations=None, cropboxes=None) -> Path:
        writer = PdfWriter()
        for index, (width, height) in enumerate(sizes):
            page = writer.add_blank_page(width=width, height=height)
            if rotations and rotations[index]:
                page.rotate(rotations[index])
            if cropboxes and cropboxes[index]:
                crop_width, crop_height = cropboxes[index]
                page.cropbox = RectangleObject((0, 0, crop_width, crop_height))
        path = tmp_path / name
        with open(path, "wb") as f:
            writer.write(f)
        return path
    return _make


@pytest.fixture
def make_rasterizer():
    """Factory: make_rasterizer(document) or make_rasterizer(None) for an unopenable PDF."""
    def _make(document: Optional[FakeDocument] = None) -> FakeRasterizer:
        return FakeRasterizer(document)
    return _make
