"""Exception types raised while reading TextGrid files.

WHY: Callers (the CLI, the batch runner, library users) need to tell a
malformed TextGrid apart from an I/O problem or a programming error.

HOW: One base class, TextGridError, derived from ValueError so existing
``except ValueError`` handlers keep working, and one subclass per failure
kind.

RULES:
- PreconditionError: input does not look like a long-form TextGrid at all
- MisformattedError: tier headers are missing, misplaced or miscounted
- EncodingDetectionError: bytes cannot be decoded with the chosen codec
"""

from __future__ import annotations


class TextGridError(ValueError):
    """Base class for all TextGrid reading failures."""


class PreconditionError(TextGridError):
    """Raised when the input lacks the ``ooTextFile`` marker.

    WHY: Binary TextGrids and unrelated text files would otherwise run
    through the lexer and fail with a confusing structural error.

    HOW: Raised by the reader wrappers before the core pipeline runs.
    """


class MisformattedError(TextGridError):
    """Raised by the structural validator.

    RULES:
    - First tier header not at token position 6
    - A tier's annotation span is not a multiple of its stride
    - A tier header names an unknown tier class
    """

    def __init__(self, message: str = "TextGrid appears misformatted") -> None:
        super().__init__(message)


class EncodingDetectionError(TextGridError):
    """Raised when a file cannot be decoded with the requested encoding."""

    def __init__(self, path: str, encoding: str, reason: str) -> None:
        self.path = path
        self.encoding = encoding
        super().__init__(f"Cannot decode {path} as {encoding}: {reason}")
