# config/__init__.py
# ============================================================
# Configuration package for the PDF to Image converter.
# Provides centralized, validated settings loaded from .env file.
#
# Usage:
#   from config.settings import settings
#   print(settings.jpeg_quality)
# ============================================================

from config.settings import settings

__all__ = ["settings"]
