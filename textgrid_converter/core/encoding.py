"""Encoding detection and line decoding for TextGrid files.

WHY: Praat saves TextGrids as plain ASCII/UTF-8 when it can, and as
UTF-16 (big-endian, with a BOM) as soon as a label holds a non-ASCII
character such as an IPA symbol. Older files and other tools produce
Latin-1. The parser needs decoded text lines regardless.

HOW: detect_encoding() looks at the raw bytes:
  1. A BOM decides directly (UTF-8 or UTF-16 either byte order).
  2. Without a BOM, NUL bytes at alternating offsets in the first bytes
     mark UTF-16-BE / UTF-16-LE.
  3. Otherwise strict UTF-8 is tried; if it fails, the configured
     fallback codec is used and a warning is logged.
read_lines() decodes the whole file and splits it into lines.

RULES:
- An explicit encoding skips detection entirely
- Decoding errors under an explicit encoding raise EncodingDetectionError
- Returned lines carry no line terminators and no BOM
"""

from __future__ import annotations

import codecs
import logging
from pathlib import Path
from typing import List, Optional

from textgrid_converter.config import FALLBACK_ENCODING
from textgrid_converter.core.errors import EncodingDetectionError

logger = logging.getLogger(__name__)

# Number of leading bytes inspected for BOM-less UTF-16.
_SNIFF_BYTES = 64

_BOMS = (
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_BE, "utf-16"),
    (codecs.BOM_UTF16_LE, "utf-16"),
)


def _sniff_utf16(head: bytes) -> Optional[str]:
    """Guess BOM-less UTF-16 from where the NUL bytes fall.

    ASCII text in UTF-16-BE has NULs at even offsets, UTF-16-LE at odd.
    """
    if len(head) < 2:
        return None
    even = head[0::2]
    odd = head[1::2]
    if even.count(0) > len(even) // 2 and odd.count(0) == 0:
        return "utf-16-be"
    if odd.count(0) > len(odd) // 2 and even.count(0) == 0:
        return "utf-16-le"
    return None


def detect_encoding(raw: bytes) -> str:
    """Return a codec name that can decode ``raw``.

    Args:
        raw: The complete file content.

    Returns:
        A codec name accepted by bytes.decode().
    """
    for bom, encoding in _BOMS:
        if raw.startswith(bom):
            return encoding

    utf16 = _sniff_utf16(raw[:_SNIFF_BYTES])
    if utf16:
        return utf16

    try:
        raw.decode("utf-8")
    except UnicodeDecodeError:
        logger.warning("Input is not valid UTF-8, falling back to %s", FALLBACK_ENCODING)
        return FALLBACK_ENCODING
    return "utf-8"


def decode_lines(raw: bytes, encoding: str, source: str = "<bytes>") -> List[str]:
    """Decode ``raw`` with ``encoding`` and split into lines."""
    try:
        text = raw.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise EncodingDetectionError(source, encoding, str(exc)) from exc
    # utf-16 strips its own BOM; utf-8 read without -sig would keep it.
    if text.startswith("\ufeff"):
        text = text[1:]
    return text.splitlines()


def read_lines(path: str | Path, encoding: Optional[str] = None) -> List[str]:
    """Read a text file into decoded lines.

    Args:
        path: File to read.
        encoding: Codec to use; None detects it from the content.

    Returns:
        The file's lines without terminators.

    Raises:
        OSError: If the file cannot be read.
        EncodingDetectionError: If the content cannot be decoded.
    """
    path = Path(path)
    raw = path.read_bytes()
    if encoding is None:
        encoding = detect_encoding(raw)
        logger.debug("Detected %s for %s", encoding, path)
    return decode_lines(raw, encoding, source=str(path))
