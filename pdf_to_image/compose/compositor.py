# pdf_to_image/compose/compositor.py
# ============================================================
# Spread Compositor — Two Pages → One Side-by-Side Image
# ============================================================
# Joins two page rasters horizontally into a single spread:
# left page first, right page second, both top-aligned, no gap.
#
# Layout rules:
#   1. Canvas height H is the taller of the two pages.
#   2. Each page is scaled to height H keeping its own aspect
#      ratio (integer arithmetic, truncating).
#   3. Canvas width is the sum of the two scaled widths.
#   4. Pages whose scaled size equals their own size are pasted
#      as-is, so equal-height pairs are never resampled.
#
# Usage:
#   from pdf_to_image.compose.compositor import SpreadCompositor
#   compositor = SpreadCompositor()
#   spread = compositor.compose(left_page, right_page)
# ============================================================

from dataclasses import dataclass
from typing import Optional, Union

from PIL import Image

from config.settings import settings
from pdf_to_image.utils.image import new_canvas
from pdf_to_image.utils.logger import get_logger

logger = get_logger(__name__)


# ============================================================
# Data Classes
# ============================================================

@dataclass(frozen=True)
class SpreadLayout:
    """
    Placement of two pages on a spread canvas.

    Attributes:
        left_box: (x, y, width, height) of the left page on the canvas.
        right_box: (x, y, width, height) of the right page on the canvas.
    """
    left_box: tuple[int, int, int, int]
    right_box: tuple[int, int, int, int]

    @property
    def width(self) -> int:
        return self.left_box[2] + self.right_box[2]

    @property
    def height(self) -> int:
        return max(self.left_box[3], self.right_box[3])

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height


# ============================================================
# Compositor
# ============================================================

class SpreadCompositor:
    """
    Builds spread images from page pairs.

    Example:
        >>> compositor = SpreadCompositor(background="white")
        >>> compositor.layout((400, 600), (300, 300)).size
        (1000, 600)
    """

    def __init__(
        self,
        background: Optional[Union[str, tuple]] = None,
        resample: Image.Resampling = Image.Resampling.LANCZOS,
    ):
        self.background = background or settings.blank_color
        self.resample = resample

    @staticmethod
    def layout(left_size: tuple[int, int], right_size: tuple[int, int]) -> SpreadLayout:
        """
        Compute where each page lands on the spread canvas.

        Both pages are scaled to the taller height. Each scaled
        dimension is computed as ``side * H // own_height``, including
        the height itself, so equal-height pages keep their exact size.

        Args:
            left_size: (width, height) of the left page.
            right_size: (width, height) of the right page.

        Returns:
            SpreadLayout with the two destination boxes.

        Raises:
            ValueError: If either page has a non-positive dimension.
        """
        (w1, h1), (w2, h2) = left_size, right_size
        if min(w1, h1, w2, h2) <= 0:
            raise ValueError(f"Cannot lay out empty pages: {left_size}, {right_size}")

        height = h1 if h1 > h2 else h2

        new_height1 = h1 * height // h1
        new_width1 = w1 * height // h1

        new_height2 = h2 * height // h2
        new_width2 = w2 * height // h2

        return SpreadLayout(
            left_box=(0, 0, new_width1, new_height1),
            right_box=(new_width1, 0, new_width2, new_height2),
        )

    def blank_like(self, image: Image.Image) -> Image.Image:
        """Create a background-coloured page with the same size as ``image``."""
        return new_canvas(image.size, color=self.background)

    def compose(self, left: Image.Image, right: Image.Image) -> Image.Image:
        """
        Draw two pages side by side onto a new RGB canvas.

        The source images are not modified or closed; the caller
        still owns them. The returned spread is owned by the caller.
        """
        layout = self.layout(left.size, right.size)
        spread = new_canvas(layout.size, color=self.background)

        for image, box in ((left, layout.left_box), (right, layout.right_box)):
            self._draw(spread, image, box)

        logger.debug(
            f"Composed spread {layout.width}x{layout.height} from "
            f"{left.width}x{left.height} + {right.width}x{right.height}"
        )
        return spread

    def _draw(self, canvas: Image.Image, image: Image.Image, box: tuple[int, int, int, int]) -> None:
        x, y, width, height = box

        converted = image if image.mode == "RGB" else image.convert("RGB")
        if (width, height) == converted.size:
            scaled = converted
        else:
            scaled = converted.resize((width, height), self.resample)

        try:
            canvas.paste(scaled, (x, y))
        finally:
            # Intermediates only; the caller still owns ``image``
            if scaled is not image:
                scaled.close()
            if converted is not image and converted is not scaled:
                converted.close()
