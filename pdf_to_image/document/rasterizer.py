# pdf_to_image/document/rasterizer.py
# ============================================================
# Page Rasterizer — PDF Opening & Per-Page Rendering
# ============================================================
# Opens a PDF once and renders individual pages to PIL Images
# at a fixed target size, so every page of a run shares the
# same scale basis.
#
# Backends:
#   - pypdf: reads the document, page count, and page geometry
#   - pdf2image (poppler's pdftoppm): rasterizes one page at a time
#
# Usage:
#   from pdf_to_image.document.rasterizer import PageRasterizer
#   rasterizer = PageRasterizer()
#   with rasterizer.open("report.pdf") as document:
#       for i in range(document.page_count):
#           image = document.render(i)
# ============================================================

import time
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Union

from pdf2image import convert_from_path
from pdf2image.exceptions import (
    PDFInfoNotInstalledError,
    PDFPageCountError,
    PDFPopplerTimeoutError,
    PDFSyntaxError,
)
from PIL import Image
from pypdf import PdfReader
from pypdf.errors import PyPdfError

from config.settings import settings
from pdf_to_image.errors import DocumentOpenError, PageRenderError
from pdf_to_image.utils.image import describe_image
from pdf_to_image.utils.logger import get_logger

logger = get_logger(__name__)

# PDF user space unit: 1 point = 1/72 inch
POINTS_PER_INCH = 72

_RENDER_ERRORS = (
    PDFInfoNotInstalledError,
    PDFPageCountError,
    PDFPopplerTimeoutError,
    PDFSyntaxError,
    Image.DecompressionBombError,
    OSError,
)


@contextmanager
def _pixel_budget(pixels: int) -> Iterator[None]:
    """
    Raise Pillow's decompression-bomb limit to at least ``pixels``.

    pdf2image decodes pdftoppm output with Image.open, which refuses
    large-format pages rendered at high DPI. The bitmap size here is
    chosen by us, so the limit is lifted for one render and restored.
    """
    previous = Image.MAX_IMAGE_PIXELS
    if previous is not None and pixels > previous:
        Image.MAX_IMAGE_PIXELS = pixels
    try:
        yield
    finally:
        Image.MAX_IMAGE_PIXELS = previous


# ============================================================
# Data Classes
# ============================================================

@dataclass(frozen=True)
class RenderTarget:
    """
    Fixed rendering parameters applied to every page of a run.

    Attributes:
        width: Target box width. With DPI correction this is the
               horizontal resolution in dots per inch.
        height: Target box height. With DPI correction this is the
                vertical resolution in dots per inch.
        correct_from_dpi: When True, each page is sized from its own
                          dimensions at (width, height) DPI. When False,
                          every page is rendered to exactly width x height.
    """
    width: int = 500
    height: int = 500
    correct_from_dpi: bool = True

    @classmethod
    def from_settings(cls) -> "RenderTarget":
        return cls(
            width=settings.render_width,
            height=settings.render_height,
            correct_from_dpi=settings.render_correct_from_dpi,
        )

    def pixel_size(self, page_width_pt: float, page_height_pt: float) -> tuple[int, int]:
        """
        Compute the bitmap size of a page of the given size in points.

        Example:
            >>> RenderTarget(500, 500, True).pixel_size(612, 792)
            (4250, 5500)
            >>> RenderTarget(500, 500, False).pixel_size(612, 792)
            (500, 500)
        """
        if not self.correct_from_dpi:
            return self.width, self.height

        width = int(page_width_pt * self.width / POINTS_PER_INCH)
        height = int(page_height_pt * self.height / POINTS_PER_INCH)
        return max(width, 1), max(height, 1)


# ============================================================
# Document Handle
# ============================================================

class PdfDocument:
    """
    An opened PDF document that can render its pages one at a time.

    The handle owns the underlying file stream until close() is called.
    Use it as a context manager so the stream is released on every
    exit path, including mid-run failures.
    """

    def __init__(
        self,
        path: Path,
        stream: BinaryIO,
        reader: PdfReader,
        target: RenderTarget,
        poppler_path: Optional[str] = None,
    ):
        self.path = path
        self.target = target
        self.poppler_path = poppler_path
        self._stream = stream
        self._reader = reader
        self._page_count = len(reader.pages)
        self.closed = False

    @classmethod
    def open(
        cls,
        path: Union[str, Path],
        target: Optional[RenderTarget] = None,
        poppler_path: Optional[str] = None,
    ) -> "PdfDocument":
        """
        Open and parse a PDF file.

        Raises:
            DocumentOpenError: If the file is missing, unreadable,
                encrypted, or not a valid PDF.
        """
        path = Path(path)
        target = target or RenderTarget.from_settings()

        try:
            stream = open(path, "rb")
        except OSError as exc:
            raise DocumentOpenError(path, exc.strerror or str(exc)) from exc

        try:
            reader = PdfReader(stream)
            document = cls(path, stream, reader, target, poppler_path)
        except (PyPdfError, ValueError, OSError) as exc:
            stream.close()
            raise DocumentOpenError(path, str(exc)) from exc

        logger.info(
            f"Opened [bold]{path.name}[/bold] — {document.page_count} pages"
        )
        return document

    @property
    def page_count(self) -> int:
        return self._page_count

    def page_size(self, page_index: int) -> tuple[float, float]:
        """
        Return the displayed size of a page in points.

        Uses the crop box, which render() asks poppler to rasterize,
        and swaps the sides of pages rotated by 90 or 270 degrees.
        """
        self._check_index(page_index)
        page = self._reader.pages[page_index]
        width = float(page.cropbox.width)
        height = float(page.cropbox.height)
        if page.rotation % 180 == 90:
            width, height = height, width
        return width, height

    def render(self, page_index: int) -> Image.Image:
        """
        Render a single page to an RGB image at the run's target size.

        Args:
            page_index: 0-indexed page number.

        Returns:
            The rendered page. The caller owns the image and must close it.

        Raises:
            PageRenderError: If the page is out of range or poppler fails.
        """
        start = time.perf_counter()

        try:
            size = self.target.pixel_size(*self.page_size(page_index))
        except (PyPdfError, ValueError, KeyError) as exc:
            raise PageRenderError(page_index, f"unreadable page geometry: {exc}") from exc

        try:
            with _pixel_budget(size[0] * size[1]):
                images = convert_from_path(
                    str(self.path),
                    dpi=max(self.target.width, self.target.height),
                    first_page=page_index + 1,
                    last_page=page_index + 1,
                    size=size,
                    use_cropbox=True,
                    poppler_path=self.poppler_path,
                )
        except _RENDER_ERRORS as exc:
            raise PageRenderError(page_index, str(exc)) from exc

        if not images:
            raise PageRenderError(page_index, "renderer returned no image")

        image = images[0]
        for extra in images[1:]:
            extra.close()

        if image.mode != "RGB":
            converted = image.convert("RGB")
            image.close()
            image = converted

        duration = (time.perf_counter() - start) * 1000
        logger.debug(f"  Page {page_index}: {describe_image(image)} in {duration:.0f}ms")
        return image

    def close(self) -> None:
        if not self.closed:
            self._stream.close()
            self.closed = True

    def __enter__(self) -> "PdfDocument":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _check_index(self, page_index: int) -> None:
        if self.closed:
            raise PageRenderError(page_index, "document is closed")
        if not 0 <= page_index < self._page_count:
            raise PageRenderError(
                page_index, f"page index out of range (document has {self._page_count} pages)"
            )


# ============================================================
# Rasterizer
# ============================================================

class PageRasterizer:
    """
    Factory for opened documents sharing one RenderTarget.

    Example:
        >>> rasterizer = PageRasterizer(RenderTarget(500, 500, True))
        >>> with rasterizer.open("book.pdf") as document:
        ...     cover = document.render(0)
    """

    def __init__(
        self,
        target: Optional[RenderTarget] = None,
        poppler_path: Optional[str] = None,
    ):
        self.target = target or RenderTarget.from_settings()
        self.poppler_path = poppler_path or settings.poppler_path

        logger.debug(
            f"PageRasterizer initialized — target: {self.target.width}x{self.target.height}, "
            f"DPI correction: {'on' if self.target.correct_from_dpi else 'off'}"
        )

    def open(self, path: Union[str, Path]) -> PdfDocument:
        return PdfDocument.open(path, target=self.target, poppler_path=self.poppler_path)
