"""Character-level tokenizer for long-form TextGrid text.

WHY: The long TextGrid format mixes keys ("xmin =", "intervals: size ="),
indices ("item [1]:"), comments and values on free-form lines. Only the
values matter; their meaning comes from their order. The lexer reduces a
document to that ordered value stream.

HOW: Each line is cleaned (comment, bracketed indices, whitespace), the
lines are joined with single spaces plus one trailing space as an
end-of-stream sentinel, and a quote-aware scan splits the stream into raw
tokens. Raw tokens that began with a quote become Text, the rest Number.

RULES:
- Everything from the first "!" on a line is a comment (not quote-aware,
  so a "!" inside quoted text is lost too)
- "[<digits>]" is removed anywhere on a line
- A quote opening a quoted run is kept as the raw token's first character
  (text marker); a closing quote is dropped
- Outside quotes only decimal digits and "." are kept; letters, "=", ":"
  and signs are dropped
- Inside quotes every character is kept
- A space outside quotes closes the current raw token, if non-empty
- Doubled quotes inside text are not unescaped beyond what the toggle does
"""

from __future__ import annotations

import logging
import math
import re
from typing import Iterable, List

from textgrid_converter.core.ir import Number, Text, Token

logger = logging.getLogger(__name__)

_QUOTE = '"'
_SEPARATOR = " "

_COMMENT_RE = re.compile(r"!.*$")
_INDEX_RE = re.compile(r"\[\d*\]")


def clean_line(line: str) -> str:
    """Strip comment, bracketed indices and redundant whitespace from a line."""
    line = _COMMENT_RE.sub("", line)
    line = _INDEX_RE.sub("", line)
    return " ".join(line.split())


def preprocess(lines: Iterable[str]) -> str:
    """Clean every line and join them into one logical stream.

    The returned stream always ends with a single separator, which the
    scan relies on to close the final token.
    """
    return _SEPARATOR.join(clean_line(line) for line in lines) + _SEPARATOR


def scan(stream: str) -> List[str]:
    """Split a preprocessed stream into raw token strings.

    WHY: Quoted text may contain spaces and digits; unquoted runs contain
    key names and punctuation that must be discarded. A single pass with
    an in-quotes flag handles both.

    HOW: Walk the characters left to right with a flag and a buffer:
      '"'                  -> toggle; an opening quote is buffered
      ' ' outside quotes   -> flush a non-empty buffer
      digit/'.' outside    -> buffer
      anything inside      -> buffer
      anything else        -> drop

    Returns:
        Raw tokens in stream order. Text tokens still carry their leading
        quote character.
    """
    raw_tokens: List[str] = []
    current: List[str] = []
    in_quotes = False

    for char in stream:
        if char == _QUOTE:
            in_quotes = not in_quotes
            if in_quotes:
                current.append(char)
            continue

        if in_quotes:
            current.append(char)
            continue

        if char == _SEPARATOR:
            if current:
                raw_tokens.append("".join(current))
                current = []
            continue

        if char.isdecimal() or char == ".":
            current.append(char)

    if current:
        # Unterminated quote swallowed the sentinel; the partial token is dropped.
        logger.warning("Unterminated quoted text at end of TextGrid stream")

    return raw_tokens


def convert(raw: str) -> Token:
    """Turn one raw token into a Number or Text.

    A numeric run that float() rejects (e.g. "1.2.3") becomes NaN with a
    warning; it fails later only if a stage needs its value.
    """
    if raw.startswith(_QUOTE):
        return Text(raw[1:])
    try:
        return Number(float(raw))
    except ValueError:
        logger.warning("Could not read %r as a number, using NaN", raw)
        return Number(math.nan)


def tokenize(lines: Iterable[str]) -> List[Token]:
    """Lex the lines of one TextGrid document into typed tokens.

    Args:
        lines: Decoded text lines of the document, with or without
               line terminators.

    Returns:
        Ordered list of Number and Text tokens.
    """
    return [convert(raw) for raw in scan(preprocess(lines))]
