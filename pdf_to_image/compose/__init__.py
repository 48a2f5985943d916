# pdf_to_image/compose/__init__.py
# ============================================================
# Compose Package
# ============================================================
# Merges page rasters into spread images.
#
# Key classes:
#   - SpreadCompositor: Scales and joins two pages side by side
#   - SpreadLayout: Destination boxes of both pages on the canvas
# ============================================================

from pdf_to_image.compose.compositor import SpreadCompositor, SpreadLayout

__all__ = ["SpreadCompositor", "SpreadLayout"]
