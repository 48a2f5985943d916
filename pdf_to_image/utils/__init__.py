# pdf_to_image/utils/__init__.py
# ============================================================
# Shared Utilities Package
# ============================================================
# Provides reusable helpers used across the pipeline:
#   - logger: Structured logging with Rich formatting
#   - image: Blank canvases, JPEG saving, debug descriptions
# ============================================================

from pdf_to_image.utils.logger import get_logger, set_level
from pdf_to_image.utils.image import new_canvas, save_jpeg, describe_image

__all__ = [
    "get_logger",
    "set_level",
    "new_canvas",
    "save_jpeg",
    "describe_image",
]
