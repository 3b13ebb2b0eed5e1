"""Abstract base formatter and output container.

WHY: Every export format consumes the same row sequence but produces
different file content. This base class enforces a consistent interface
so the CLI and library callers can work with any formatter generically.

HOW: BaseFormatter is an ABC with two requirements: a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list so one formatter may write several files
- ``suffix`` starts with a hyphen, e.g. ``"-rows.csv"``
- The caller is responsible for prepending the source filename stem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from textgrid_converter.core.ir import TextGridRow


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``"-rows.csv"`` → ``"interview-rows.csv"``.
        content: The file content.
        media_type: MIME type for the content, e.g. ``"text/csv"``.
    """

    suffix: str
    content: str | bytes
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all row formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'CSV table'."""

    @abstractmethod
    def format(self, rows: Sequence[TextGridRow]) -> list[FormatterOutput]:
        """Convert parsed rows into one or more output files.

        Args:
            rows: Rows from one or more TextGrids, in output order.

        Returns:
            List of FormatterOutput objects.
        """
