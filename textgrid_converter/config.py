"""Configuration constants and .env loading.

WHY: Centralizes all configurable values so they are easy to find,
update, and override. Decoding fallbacks, batch sizing and export
defaults are plain data: not buried in logic.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level values read from the environment with defaults.

RULES:
- Every default can be overridden via an environment variable
- TEXTGRID_SUFFIXES lists the file extensions picked up from directories
  (compared lowercase, with dot)
- Invalid integer settings raise ValueError on import with the variable name
- TEXTGRID_LOG_LEVEL must name a standard logging level, else ValueError
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()


def _int_setting(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError("{} must be an integer, got {!r}".format(name, raw)) from None


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _log_level_setting(name: str, default: str) -> str:
    raw = os.getenv(name, "").strip().upper()
    if not raw:
        return default
    if raw not in LOG_LEVELS:
        raise ValueError(
            "{} must be one of {}, got {!r}".format(name, ", ".join(LOG_LEVELS), raw)
        )
    return raw


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

FALLBACK_ENCODING = os.getenv("TEXTGRID_FALLBACK_ENCODING", "latin-1")
"""Codec used when a BOM-less file is not valid UTF-8."""

TEXTGRID_SUFFIXES: set[str] = {".textgrid"}

# ---------------------------------------------------------------------------
# Batch processing
# ---------------------------------------------------------------------------

MAX_WORKERS = _int_setting("TEXTGRID_MAX_WORKERS", 4)

# ---------------------------------------------------------------------------
# Export and CLI defaults
# ---------------------------------------------------------------------------

NA_VALUE = os.getenv("TEXTGRID_NA_VALUE", "NA")
"""How missing values are written in CSV/TSV output."""

DEFAULT_FORMATS = os.getenv("TEXTGRID_DEFAULT_FORMATS", "csv")
LOG_LEVEL = _log_level_setting("TEXTGRID_LOG_LEVEL", "WARNING")
