"""Output formatter registry.

WHY: The CLI needs a single lookup to find the right formatter by name.
A central dict makes it trivial to add new formats: create the formatter
class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["csv"]()``.

RULES:
- Keys are short lowercase identifiers (used in the --formats flag)
- Values are BaseFormatter subclasses (not instances)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textgrid_converter.formatters.delimited import CSVFormatter, TSVFormatter
from textgrid_converter.formatters.json_rows import JSONRowsFormatter

if TYPE_CHECKING:
    from textgrid_converter.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "csv": CSVFormatter,
    "tsv": TSVFormatter,
    "json": JSONRowsFormatter,
}
