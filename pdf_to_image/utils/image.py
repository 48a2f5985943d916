# pdf_to_image/utils/image.py
# ============================================================
# Image Utility Functions
# ============================================================
# Shared PIL helpers used by the rasterizer, the compositor and
# the strategies: blank canvas creation, JPEG output, and
# one-line raster descriptions for debug logging.
#
# Usage:
#   from pdf_to_image.utils.image import new_canvas, save_jpeg
#   canvas = new_canvas((1000, 700), color="white")
#   save_jpeg(canvas, output_dir / "0000.jpg", quality=75)
# ============================================================

import time
from pathlib import Path
from typing import Union

from PIL import Image

from pdf_to_image.errors import OutputWriteError
from pdf_to_image.utils.logger import get_logger

logger = get_logger(__name__)

# Every output image is written in this single lossy format
JPEG_FORMAT = "JPEG"
JPEG_EXTENSION = ".jpg"


def new_canvas(size: tuple[int, int], color: Union[str, tuple] = "white") -> Image.Image:
    """Allocate an RGB canvas of ``size`` filled with ``color``."""
    return Image.new("RGB", size, color=color)


def save_jpeg(image: Image.Image, path: Union[str, Path], quality: int = 75) -> Path:
    """
    Encode an image as JPEG and write it to disk.

    JPEG has no alpha channel or palette, so anything that is not
    RGB or grayscale is encoded from a temporary RGB copy, which is
    closed afterwards. The caller keeps ownership of ``image``.

    Args:
        image: PIL Image to save.
        path: Destination file path.
        quality: JPEG encoder quality (1-95).

    Returns:
        The path that was written.

    Raises:
        OutputWriteError: If the file cannot be written or encoded.
    """
    start = time.perf_counter()
    path = Path(path)

    encodable = image if image.mode in ("RGB", "L") else image.convert("RGB")
    try:
        encodable.save(path, format=JPEG_FORMAT, quality=quality)
    except (OSError, ValueError, KeyError) as exc:
        raise OutputWriteError(path, str(exc)) from exc
    finally:
        if encodable is not image:
            encodable.close()

    duration = (time.perf_counter() - start) * 1000
    logger.debug(f"Saved {path.name} ({image.width}x{image.height}) in {duration:.2f}ms")
    return path


def describe_image(image: Image.Image) -> str:
    """
    Summarize a raster for debug logs: size, mode and uncompressed footprint.

    Example:
        >>> describe_image(Image.new("RGB", (4250, 5500)))
        '4250x5500 RGB (66.9MB)'
    """
    width, height = image.size
    estimated_mb = width * height * len(image.getbands()) / (1024 * 1024)
    return f"{width}x{height} {image.mode} ({estimated_mb:.1f}MB)"
