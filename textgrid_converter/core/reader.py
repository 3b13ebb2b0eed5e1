"""Entry points that read TextGrid lines or files into rows.

WHY: The three pipeline stages assume their input is a long-form TextGrid.
Callers hand in arbitrary files and line lists, so the wrappers here check
the ooTextFile precondition, decode files, attach the source filename and
expose the bundled example files.

HOW: parse_textgrid_lines() runs lexer → validator → assembler.
read_textgrid_lines() adds the precondition and the file column.
read_textgrid() decodes a path first (encoding.read_lines) and defaults
the file column to the path's base name.

RULES:
- Missing "ooTextFile" marker -> PreconditionError, before any lexing
- Each call is independent; nothing is cached between documents
- example_textgrid(which) is 1-based over EXAMPLE_TEXTGRIDS
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from textgrid_converter.core import assembler, lexer, validator
from textgrid_converter.core.encoding import read_lines
from textgrid_converter.core.errors import PreconditionError
from textgrid_converter.core.grammar import FILE_TYPE_MARKER
from textgrid_converter.core.ir import TextGridRow, Tier

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

EXAMPLE_TEXTGRIDS = (
    "Mary_John_bell.TextGrid",
    "utf_16_be.TextGrid",
    "nested-intervals.TextGrid",
)


def _check_precondition(lines: Sequence[str]) -> None:
    if not any(FILE_TYPE_MARKER in line for line in lines):
        raise PreconditionError(
            "Input is not a long-form TextGrid (no {!r} marker found)".format(FILE_TYPE_MARKER)
        )


def build_document(lines: Iterable[str]) -> List[Tier]:
    """Parse lines into structured tiers without flattening."""
    tokens = lexer.tokenize(lines)
    boundaries = validator.validate(tokens)
    return assembler.build_tiers(tokens, boundaries)


def parse_textgrid_lines(lines: Iterable[str]) -> List[TextGridRow]:
    """Run the core pipeline on already-decoded lines.

    No precondition check; use read_textgrid_lines() for untrusted input.
    """
    tokens = lexer.tokenize(lines)
    boundaries = validator.validate(tokens)
    logger.debug("Lexed %d tokens, %d tiers", len(tokens), len(boundaries))
    return assembler.assemble(tokens, boundaries)


def read_textgrid_lines(
    lines: Iterable[str],
    file: Optional[str] = None,
) -> List[TextGridRow]:
    """Read the lines of a TextGrid into one row per annotation.

    Args:
        lines: Decoded lines of one long-form TextGrid.
        file: Value for every row's ``file`` field (None by default).

    Returns:
        Rows in tier order, annotations in file order.

    Raises:
        PreconditionError: No line contains "ooTextFile".
        MisformattedError: The tier structure is inconsistent.
    """
    lines = list(lines)
    _check_precondition(lines)
    return [row.with_file(file) for row in parse_textgrid_lines(lines)]


def read_textgrid(
    path: str | Path,
    file: Optional[str] = None,
    encoding: Optional[str] = None,
) -> List[TextGridRow]:
    """Read a TextGrid file into one row per annotation.

    Args:
        path: Path to a long-form TextGrid.
        file: Value for the ``file`` field; defaults to the base filename.
        encoding: Codec of the file; None detects it.

    Returns:
        Rows in tier order, annotations in file order.
    """
    path = Path(path)
    if file is None:
        file = path.name
    lines = read_lines(path, encoding=encoding)
    return read_textgrid_lines(lines, file=file)


def example_textgrid(which: int = 1) -> Path:
    """Locate one of the bundled example TextGrids.

    1. "Mary_John_bell.TextGrid": Praat's default Create TextGrid output
       (interval tiers Mary and John, point tier bell), UTF-8.
    2. "utf_16_be.TextGrid": IPA labels, saved as UTF-16 BE with BOM.
    3. "nested-intervals.TextGrid": utterance, words and phones tiers,
       typical of forced alignment output.
    """
    if not 1 <= which <= len(EXAMPLE_TEXTGRIDS):
        raise ValueError(
            "which must be between 1 and {}, got {}".format(len(EXAMPLE_TEXTGRIDS), which)
        )
    return _DATA_DIR / EXAMPLE_TEXTGRIDS[which - 1]
