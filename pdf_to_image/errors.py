# pdf_to_image/errors.py
# ============================================================
# Conversion Errors
# ============================================================
# Every failure that can end a conversion run derives from
# ConversionError. Library exceptions (pypdf, pdf2image, OSError)
# are wrapped at the boundary where they occur so the runner can
# report one human-readable failure message.
#
#   ConversionError
#   ├── DocumentOpenError   document cannot be loaded
#   ├── PageRenderError     a single page failed to rasterize
#   ├── CompositionError    two pages could not be joined into a spread
#   └── OutputWriteError    an output image could not be saved
# ============================================================

from pathlib import Path
from typing import Union


class ConversionError(Exception):
    """Base class for errors that terminate a conversion run."""


class DocumentOpenError(ConversionError):
    """The PDF could not be opened or parsed."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to open PDF '{self.path.name}': {reason}")


class PageRenderError(ConversionError):
    """A page could not be rendered to an image."""

    def __init__(self, page_index: int, reason: str):
        self.page_index = page_index
        self.reason = reason
        super().__init__(f"Failed to render page {page_index}: {reason}")


class CompositionError(ConversionError):
    """Two pages could not be joined into a spread."""

    def __init__(self, page_index: int, reason: str):
        self.page_index = page_index
        self.reason = reason
        super().__init__(f"Failed to compose spread starting at page {page_index}: {reason}")


class OutputWriteError(ConversionError):
    """An output image could not be written to disk."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to write '{self.path}': {reason}")
