# pdf_to_image/pipeline/strategies.py
# ============================================================
# Conversion Strategies — Single Pages & Paired Spreads
# ============================================================
# Each strategy walks an opened document and writes numbered
# JPEG files into an existing output directory:
#
#   SINGLE_PAGE    page i            → 0000.jpg, 0001.jpg, ...
#   PAIRED_SPREAD  pages (i, i + 1)  → ToImage-0000.jpg, ToImage-0002.jpg, ...
#
# Files are written in ascending order; the zero-padded index
# keeps lexicographic order equal to page order. Every raster
# is closed once it has been saved or composited.
#
# Usage:
#   from pdf_to_image.pipeline.strategies import ConversionMode, convert_spreads
#   with rasterizer.open("book.pdf") as document:
#       files = list(convert_spreads(document, Path("out")))
# ============================================================

from contextlib import ExitStack, closing
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional, Protocol

from PIL import Image

from config.settings import settings
from pdf_to_image.compose.compositor import SpreadCompositor
from pdf_to_image.errors import CompositionError
from pdf_to_image.utils.image import JPEG_EXTENSION, save_jpeg
from pdf_to_image.utils.logger import get_logger

logger = get_logger(__name__)

SINGLE_PAGE_PREFIX = ""
SPREAD_PREFIX = "ToImage-"


class ConversionMode(str, Enum):
    """
    Output layout of a conversion run.

    - SINGLE_PAGE: One image per page
    - PAIRED_SPREAD: One image per pair of pages, side by side
    """
    SINGLE_PAGE = "single"
    PAIRED_SPREAD = "pair"

    @classmethod
    def from_flag(cls, pair: bool) -> "ConversionMode":
        """Map the caller's "pair pages" toggle to a mode."""
        return cls.PAIRED_SPREAD if pair else cls.SINGLE_PAGE


class RenderableDocument(Protocol):
    """What a strategy needs from an opened document."""

    @property
    def page_count(self) -> int: ...

    def render(self, page_index: int) -> Image.Image: ...


def output_filename(prefix: str, index: int) -> str:
    """
    Build a numbered output file name.

    Example:
        >>> output_filename(SPREAD_PREFIX, 4)
        'ToImage-0004.jpg'
    """
    return f"{prefix}{index:04d}{JPEG_EXTENSION}"


# ============================================================
# Strategies
# ============================================================

def convert_single_pages(
    document: RenderableDocument,
    output_dir: Path,
    quality: Optional[int] = None,
) -> Iterator[Path]:
    """
    Render every page to its own image file.

    Args:
        document: Opened document to convert.
        output_dir: Existing directory that receives the images.
        quality: JPEG quality. Default: from settings.

    Yields:
        Path of each written file, in page order.
    """
    quality = quality or settings.jpeg_quality

    for i in range(document.page_count):
        with closing(document.render(i)) as image:
            path = save_jpeg(image, output_dir / output_filename(SINGLE_PAGE_PREFIX, i), quality)
        logger.debug(f"Page {i + 1}/{document.page_count} → {path.name}")
        yield path


def convert_spreads(
    document: RenderableDocument,
    output_dir: Path,
    compositor: Optional[SpreadCompositor] = None,
    quality: Optional[int] = None,
) -> Iterator[Path]:
    """
    Render pages in pairs and join each pair into one spread image.

    A trailing unpaired page is joined with a blank page of its own
    size, so an N-page document yields ceil(N / 2) spreads. Each
    spread is named after the index of its left page.

    Args:
        document: Opened document to convert.
        output_dir: Existing directory that receives the images.
        compositor: SpreadCompositor to use. Default: one built from settings.
        quality: JPEG quality. Default: from settings.

    Yields:
        Path of each written file, in page order.
    """
    compositor = compositor or SpreadCompositor()
    quality = quality or settings.jpeg_quality
    page_count = document.page_count

    for i in range(0, page_count, 2):
        with ExitStack() as stack:
            left = stack.enter_context(closing(document.render(i)))
            if i + 1 < page_count:
                right = stack.enter_context(closing(document.render(i + 1)))
            else:
                right = stack.enter_context(closing(compositor.blank_like(left)))
                logger.debug(f"Page {i + 1} has no partner — padding with a blank page")

            try:
                spread = stack.enter_context(closing(compositor.compose(left, right)))
            except ValueError as exc:
                raise CompositionError(i, str(exc)) from exc
            path = save_jpeg(spread, output_dir / output_filename(SPREAD_PREFIX, i), quality)

        logger.debug(f"Pages {i + 1}-{min(i + 2, page_count)}/{page_count} → {path.name}")
        yield path

