# pdf_to_image/utils/logger.py
# ============================================================
# Structured Logging Setup
# ============================================================
# One Rich console handler per pipeline module. Loggers created
# here are remembered so the CLI can turn every one of them up
# to DEBUG (per-page render timings, saved files) with a single
# --verbose switch, without touching the root logger.
#
# Usage:
#   from pdf_to_image.utils.logger import get_logger, set_level
#   logger = get_logger(__name__)
#   logger.info("Rendering page 1 of 10")
#   set_level("DEBUG")
# ============================================================

import logging
from typing import Union

from rich.logging import RichHandler

from config.settings import settings

LOG_FORMAT = "%(name)s — %(message)s"

_loggers: dict[str, logging.Logger] = {}


def _resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def get_logger(name: str) -> logging.Logger:
    """
    Create and return a pre-configured logger with Rich formatting.

    The level comes from ``LOG_LEVEL`` in the settings until
    ``set_level`` changes it.

    Example:
        >>> logger = get_logger("pdf_to_image.pipeline.runner")
        >>> logger.info("Conversion finished in 820ms")
        [10:30:45] INFO     pdf_to_image.pipeline.runner — Conversion finished in 820ms
    """
    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(name)
    level = _resolve_level(settings.log_level)
    logger.setLevel(level)

    # Another import path may have configured this name already
    if not logger.handlers:
        handler = RichHandler(
            level=level,
            rich_tracebacks=True,
            show_time=True,
            show_path=False,
            markup=True,
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    _loggers[name] = logger
    return logger


def set_level(level: Union[str, int]) -> int:
    """
    Change the level of every logger handed out by ``get_logger``.

    Accepts a level name ("debug", "INFO") or a ``logging`` constant
    and returns the numeric level applied. Unknown names fall back
    to INFO.
    """
    resolved = _resolve_level(level)
    for logger in _loggers.values():
        logger.setLevel(resolved)
        for handler in logger.handlers:
            handler.setLevel(resolved)
    return resolved
