# tests/test_compositor.py
# ============================================================
# Unit Tests — Spread Compositor
# ============================================================
# Tests the layout arithmetic (scaling to the taller page,
# integer truncation, side-by-side placement) and the drawing
# of two pages onto one canvas.
#
# Run:
#   pytest tests/test_compositor.py -v
# ============================================================

import pytest
from PIL import Image

from pdf_to_image.compose.compositor import SpreadCompositor, SpreadLayout


@pytest.fixture
def compositor():
    """Create a compositor with a white background."""
    return SpreadCompositor(background="white")


# ============================================================
# Layout Tests
# ============================================================

class TestLayout:
    """Test the pure placement arithmetic."""

    def test_equal_heights_are_not_rescaled(self):
        """Pages of equal height keep their own widths."""
        layout = SpreadCompositor.layout((400, 600), (350, 600))
        assert layout.left_box == (0, 0, 400, 600)
        assert layout.right_box == (400, 0, 350, 600)
        assert layout.size == (750, 600)

    def test_shorter_right_page_scales_up(self):
        """The shorter page is scaled to the taller height, keeping its aspect ratio."""
        layout = SpreadCompositor.layout((400, 600), (300, 300))
        assert layout.left_box == (0, 0, 400, 600)
        assert layout.right_box == (400, 0, 600, 600)
        assert layout.size == (1000, 600)

    def test_shorter_left_page_scales_up(self):
        """Scaling applies to the left page too; the right page starts after it."""
        layout = SpreadCompositor.layout((100, 200), (300, 400))
        assert layout.left_box == (0, 0, 200, 400)
        assert layout.right_box == (200, 0, 300, 400)

    def test_scaled_width_truncates(self):
        """Scaled widths use integer division (101 * 300 / 200 = 151.5 → 151)."""
        layout = SpreadCompositor.layout((100, 300), (101, 200))
        assert layout.right_box == (100, 0, 151, 300)
        assert layout.width == 251

    def test_blank_twin_doubles_width(self):
        """A page next to a blank of its own size yields exactly twice its width."""
        layout = SpreadCompositor.layout((612, 792), (612, 792))
        assert layout.size == (1224, 792)

    def test_no_gap_and_no_overlap(self):
        """The right page starts exactly where the left page ends."""
        layout = SpreadCompositor.layout((123, 457), (321, 200))
        left_x, _, left_w, _ = layout.left_box
        right_x, _, right_w, _ = layout.right_box
        assert right_x == left_x + left_w
        assert layout.width == left_w + right_w

    def test_empty_page_raises_error(self):
        """Zero-sized pages cannot be laid out."""
        with pytest.raises(ValueError, match="empty pages"):
            SpreadCompositor.layout((0, 100), (100, 100))

    def test_layout_is_a_value_object(self):
        """SpreadLayout compares by value."""
        assert SpreadCompositor.layout((10, 10), (10, 10)) == SpreadLayout(
            left_box=(0, 0, 10, 10), right_box=(10, 0, 10, 10)
        )


# ============================================================
# Drawing Tests
# ============================================================

class TestCompose:
    """Test drawing pages onto the spread canvas."""

    def test_left_and_right_placement(self, compositor):
        """The first page is drawn on the left, the second on the right."""
        left = Image.new("RGB", (40, 60), color=(255, 0, 0))
        right = Image.new("RGB", (40, 60), color=(0, 0, 255))

        spread = compositor.compose(left, right)

        assert spread.size == (80, 60)
        assert spread.mode == "RGB"
        assert spread.getpixel((0, 0)) == (255, 0, 0)
        assert spread.getpixel((39, 59)) == (255, 0, 0)
        assert spread.getpixel((40, 0)) == (0, 0, 255)
        assert spread.getpixel((79, 59)) == (0, 0, 255)

    def test_shorter_page_fills_full_height(self, compositor):
        """A scaled-up page covers the whole canvas height."""
        left = Image.new("RGB", (40, 60), color=(255, 0, 0))
        right = Image.new("RGB", (20, 30), color=(0, 255, 0))

        spread = compositor.compose(left, right)

        assert spread.size == (80, 60)
        r, g, b = spread.getpixel((60, 58))
        assert g > 200 and r < 50 and b < 50

    def test_sources_stay_usable(self, compositor):
        """compose() does not close or modify the caller's images."""
        left = Image.new("RGB", (10, 10), color=(1, 2, 3))
        right = Image.new("RGB", (5, 5), color=(4, 5, 6))

        compositor.compose(left, right)

        assert left.getpixel((0, 0)) == (1, 2, 3)
        assert right.size == (5, 5)

    def test_rgba_sources_are_flattened_to_rgb(self, compositor):
        """Non-RGB pages are converted so the spread can be saved as JPEG."""
        left = Image.new("RGBA", (10, 10), color=(255, 0, 0, 255))
        right = Image.new("L", (10, 10), color=128)

        spread = compositor.compose(left, right)

        assert spread.mode == "RGB"
        assert spread.getpixel((0, 0)) == (255, 0, 0)
        assert spread.getpixel((15, 5)) == (128, 128, 128)


class TestBlankLike:
    """Test the blank padding page."""

    def test_matches_size_and_background(self, compositor):
        """The blank page copies the source size and uses the background colour."""
        page = Image.new("RGB", (33, 77), color=(10, 20, 30))
        blank = compositor.blank_like(page)
        assert blank.size == (33, 77)
        assert blank.getpixel((16, 38)) == (255, 255, 255)

    def test_custom_background(self):
        """The background colour is configurable."""
        blank = SpreadCompositor(background=(0, 0, 0)).blank_like(Image.new("RGB", (4, 4)))
        assert blank.getpixel((0, 0)) == (0, 0, 0)

    def test_default_background_from_settings(self):
        """Without an explicit colour the settings value is used."""
        assert SpreadCompositor().background == "white"
