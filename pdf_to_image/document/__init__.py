# pdf_to_image/document/__init__.py
# ============================================================
# Document Package
# ============================================================
# Opens PDFs and renders their pages to PIL Images:
#   - PDFs → page geometry via pypdf
#   - Pages → RGB images via pdf2image/poppler
#
# Key classes:
#   - PageRasterizer: Opens documents with a shared RenderTarget
#   - PdfDocument: Opened document handle (context manager)
#   - RenderTarget: Fixed per-run render size / DPI parameters
# ============================================================

from pdf_to_image.document.rasterizer import PageRasterizer, PdfDocument, RenderTarget

__all__ = ["PageRasterizer", "PdfDocument", "RenderTarget"]
