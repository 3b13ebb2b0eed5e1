"""TextGrid Converter: flatten Praat TextGrid files into annotation rows.

WHY: Praat's long-form TextGrid files carry no field names. Every value is
identified by where it sits in the file, which makes them awkward to load
into anything tabular. This package reads them into one row per interval
or point, with the owning tier's header repeated on every row.

HOW: Three-stage pipeline: lex (character scan into typed tokens),
validate (locate tier headers and check their token counts), assemble
(group tokens into annotation rows). Reader wrappers add decoding and
filename metadata; formatters export rows as CSV, TSV or JSON.

RULES:
- The core pipeline is a pure function of the decoded text
- Any structural violation fails the whole document
- Rows are the stable contract between parsing and formatting
"""

from textgrid_converter.core.errors import (
    EncodingDetectionError,
    MisformattedError,
    PreconditionError,
    TextGridError,
)
from textgrid_converter.core.ir import TextGridRow, TierType
from textgrid_converter.core.reader import (
    example_textgrid,
    read_textgrid,
    read_textgrid_lines,
)

__version__ = "0.1.0"

__all__ = [
    "EncodingDetectionError",
    "MisformattedError",
    "PreconditionError",
    "TextGridError",
    "TextGridRow",
    "TierType",
    "example_textgrid",
    "read_textgrid",
    "read_textgrid_lines",
]
