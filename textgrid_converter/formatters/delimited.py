"""CSV and TSV row formatters.

WHY: Most downstream analysis (R, spreadsheets, pandas) starts from a
delimited text table. One row per annotation with the tier header
repeated is exactly what those tools load without reshaping.

HOW: csv.writer with a header line from COLUMNS, then one line per row.
None is written as the configured NA string so placeholder rows and
point tiers survive a round trip through R's read.csv.

RULES:
- Column order is COLUMNS for every output
- Missing values -> NA_VALUE (default "NA")
- Floats are written with repr precision
- Output suffixes: "-rows.csv" / "-rows.tsv"
"""

from __future__ import annotations

import csv
import io
from typing import Any, List, Optional, Sequence

from textgrid_converter.config import NA_VALUE
from textgrid_converter.core.ir import COLUMNS, TextGridRow
from textgrid_converter.formatters.base import BaseFormatter, FormatterOutput


def _cell(value: Any, na_value: str) -> Any:
    return na_value if value is None else value


class DelimitedFormatter(BaseFormatter):
    """Shared writer for delimiter-separated tables."""

    delimiter = ","
    suffix = "-rows.csv"
    media_type = "text/csv"

    def __init__(self, na_value: Optional[str] = None) -> None:
        self.na_value = NA_VALUE if na_value is None else na_value

    @property
    def name(self) -> str:
        return "CSV table"

    def render(self, rows: Sequence[TextGridRow]) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, delimiter=self.delimiter, lineterminator="\n")
        writer.writerow(COLUMNS)
        for row in rows:
            writer.writerow([_cell(v, self.na_value) for v in row.as_dict().values()])
        return buffer.getvalue()

    def format(self, rows: Sequence[TextGridRow]) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                suffix=self.suffix,
                content=self.render(rows),
                media_type=self.media_type,
            ),
        ]


class CSVFormatter(DelimitedFormatter):
    pass


class TSVFormatter(DelimitedFormatter):
    delimiter = "\t"
    suffix = "-rows.tsv"
    media_type = "text/tab-separated-values"

    @property
    def name(self) -> str:
        return "TSV table"
