# pdf_to_image/pipeline/__init__.py
# ============================================================
# Pipeline Package
# ============================================================
# Contains the ConversionRunner that ties the rasterizer,
# compositor and strategies together into one conversion run.
#
# Key classes:
#   - ConversionRunner: End-to-end PDF → numbered images
#   - ConversionResult: Outcome of one run
#   - ConversionMode: SINGLE_PAGE | PAIRED_SPREAD
# ============================================================

from pdf_to_image.pipeline.runner import ConversionRunner, ConversionResult
from pdf_to_image.pipeline.strategies import ConversionMode

__all__ = ["ConversionRunner", "ConversionResult", "ConversionMode"]
