# pdf_to_image/__init__.py
# ============================================================
# PDF to Image — Source Package
# ============================================================
# Root package for the conversion pipeline. Sub-packages:
#   - pdf_to_image.document  → PDF opening + page rasterization
#   - pdf_to_image.compose   → Spread compositing (two pages → one image)
#   - pdf_to_image.pipeline  → Strategies + runner (ties everything together)
#   - pdf_to_image.utils     → Shared utilities (logging, image helpers)
# ============================================================
