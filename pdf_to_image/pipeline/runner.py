# pdf_to_image/pipeline/runner.py
# ============================================================
# Conversion Runner — End-to-End PDF → Images
# ============================================================
# Ties the rasterizer, compositor and strategies together into
# one conversion run: output dir → open document → strategy →
# close document → single success/failure result.
#
# Design Decisions:
#   1. One run, one document handle: the PDF is opened once and
#      closed on every exit path by a `with` block.
#   2. Sequential processing: pages are rendered, composited and
#      saved strictly in order, one at a time.
#   3. Single outcome: any ConversionError ends the run and is
#      reported as a failed ConversionResult. Files already
#      written stay on disk.
#   4. arun() offloads the whole run to a worker thread as one
#      awaitable unit so an interactive caller stays responsive.
#
# Usage:
#   from pdf_to_image.pipeline.runner import ConversionRunner
#   runner = ConversionRunner()
#   result = runner.run("book.pdf", "book/output", ConversionMode.PAIRED_SPREAD)
#   result = await runner.arun("book.pdf", "book/output", True)
# ============================================================

import asyncio
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from config.settings import settings
from pdf_to_image.compose.compositor import SpreadCompositor
from pdf_to_image.document.rasterizer import PageRasterizer
from pdf_to_image.errors import ConversionError, OutputWriteError
from pdf_to_image.pipeline.strategies import (
    ConversionMode,
    convert_single_pages,
    convert_spreads,
)
from pdf_to_image.utils.logger import get_logger

logger = get_logger(__name__)


# ============================================================
# Data Classes
# ============================================================

@dataclass
class ConversionResult:
    """
    Outcome of one conversion run.

    Attributes:
        source_path: The input PDF.
        output_dir: Directory the images were written to.
        mode: Layout mode of the run.
        page_count: Pages in the document (0 if it failed to open).
        output_files: Files written, in order. On failure, the files
                      written before the error.
        latency_ms: Wall-clock duration of the run in milliseconds.
        success: Whether the run completed.
        error: Human-readable failure message, if any.
    """
    source_path: str = ""
    output_dir: str = ""
    mode: ConversionMode = ConversionMode.SINGLE_PAGE
    page_count: int = 0
    output_files: list[Path] = field(default_factory=list)
    latency_ms: float = 0.0
    success: bool = True
    error: Optional[str] = None


# ============================================================
# Conversion Runner
# ============================================================

class ConversionRunner:
    """
    Converts one PDF into numbered images in the chosen layout mode.

    Flow:
        1. Create the output directory if it is missing
        2. PageRasterizer.open() → PdfDocument
        3. convert_single_pages() or convert_spreads(), chosen once by mode
        4. Close the document and package a ConversionResult

    Example:
        >>> runner = ConversionRunner()
        >>> result = runner.run("scan.pdf", "scan/output", True)
        >>> print(len(result.output_files))
    """

    def __init__(
        self,
        rasterizer: Optional[PageRasterizer] = None,
        compositor: Optional[SpreadCompositor] = None,
        quality: Optional[int] = None,
    ):
        """
        Initialize the runner with its collaborators.

        If not provided, default instances are created using settings.

        Args:
            rasterizer: Opens documents and renders their pages.
            compositor: Joins page pairs in spread mode.
            quality: JPEG quality for every written image.
        """
        self.rasterizer = rasterizer or PageRasterizer()
        self.compositor = compositor or SpreadCompositor()
        self.quality = quality or settings.jpeg_quality

    def run(
        self,
        input_path: Union[str, Path],
        output_dir: Union[str, Path],
        mode: Union[ConversionMode, bool] = ConversionMode.SINGLE_PAGE,
    ) -> ConversionResult:
        """
        Convert a PDF end-to-end: open → render/composite → save.

        Args:
            input_path: Path to an existing PDF file.
            output_dir: Directory for the images. Created if absent,
                        existing files are left in place.
            mode: ConversionMode, or a bool where True selects spreads.

        Returns:
            ConversionResult describing the run. Never raises for
            conversion failures; check ``result.success``.
        """
        if isinstance(mode, bool):
            mode = ConversionMode.from_flag(mode)
        input_path = Path(input_path)
        output_dir = Path(output_dir)
        run_start = time.perf_counter()

        result = ConversionResult(
            source_path=str(input_path),
            output_dir=str(output_dir),
            mode=mode,
        )

        logger.info(
            f"Conversion starting — file: [bold]{input_path.name}[/bold], "
            f"mode: {mode.value}, output: {output_dir}"
        )

        try:
            _ensure_directory(output_dir)
            with self.rasterizer.open(input_path) as document:
                result.page_count = document.page_count
                if mode is ConversionMode.PAIRED_SPREAD:
                    written = convert_spreads(
                        document, output_dir, compositor=self.compositor, quality=self.quality
                    )
                else:
                    written = convert_single_pages(document, output_dir, quality=self.quality)

                for path in written:
                    result.output_files.append(path)
        except ConversionError as exc:
            result.success = False
            result.error = str(exc)
            logger.error(f"Conversion failed — {exc}")

        result.latency_ms = (time.perf_counter() - run_start) * 1000

        if result.success:
            logger.info(
                f"Conversion complete — {len(result.output_files)} images from "
                f"{result.page_count} pages in {result.latency_ms:.0f}ms"
            )
        return result

    async def arun(
        self,
        input_path: Union[str, Path],
        output_dir: Union[str, Path],
        mode: Union[ConversionMode, bool] = ConversionMode.SINGLE_PAGE,
    ) -> ConversionResult:
        """Run the whole conversion in a worker thread and await its result."""
        return await asyncio.to_thread(self.run, input_path, output_dir, mode)



def _ensure_directory(path: Path) -> None:
    """Create the output directory and its parents; reuse it if present."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputWriteError(path, exc.strerror or str(exc)) from exc
