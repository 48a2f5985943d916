# config/settings.py
# ============================================================
# Centralized Configuration for the PDF to Image Converter
# ============================================================
# All settings are loaded from environment variables (or .env file).
# Pydantic validates types and provides sensible defaults.
#
# Usage:
#   from config.settings import settings
#   rasterizer = PageRasterizer(poppler_path=settings.poppler_path)
# ============================================================

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """
    Application-wide settings. Values are loaded from environment variables
    or a .env file. Every setting has a typed default so the converter can
    run out-of-the-box with zero configuration.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Rendering ---
    render_width: int = Field(
        default=500,
        gt=0,
        description="Target box width. With DPI correction this is the horizontal DPI.",
    )
    render_height: int = Field(
        default=500,
        gt=0,
        description="Target box height. With DPI correction this is the vertical DPI.",
    )
    render_correct_from_dpi: bool = Field(
        default=True,
        description="Size each page from its own dimensions at the target DPI instead of a fixed pixel box.",
    )
    poppler_path: Optional[str] = Field(
        default=None,
        description="Directory containing the poppler binaries (pdftoppm, pdfinfo). Uses PATH if unset.",
    )

    # --- Output ---
    jpeg_quality: int = Field(
        default=75,
        ge=1,
        le=95,
        description="JPEG encoder quality for every written image.",
    )
    blank_color: str = Field(
        default="white",
        description="Fill colour of the blank page that pads an odd final spread.",
    )
    default_output_dirname: str = Field(
        default="output",
        description="Output folder created next to the input PDF when no output path is given.",
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG | INFO | WARNING | ERROR.",
    )


# ============================================================
# Singleton instance — import this everywhere:
#   from config.settings import settings
# ============================================================
settings = Settings()
