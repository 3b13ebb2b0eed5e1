"""Adapter from TextGridRow sequences to pandas DataFrames.

WHY: Rows are the stable output of the parser, but most phonetics
analysis happens in pandas. Loading rows through a fixed set of columns
and dtypes means an empty file list and a file with only placeholder
rows produce frames with the same shape as any other.

HOW: Build a DataFrame from row dicts with COLUMNS as the column order,
then cast each column to a nullable pandas dtype.

RULES:
- Columns are exactly COLUMNS, in that order, even for zero rows
- tier_num / annotation_num use the nullable "Int64" dtype
- Times are float64 (None becomes NaN)
- file, tier_name, tier_type, text use the "string" dtype (None -> <NA>)
"""

from __future__ import annotations

from typing import Dict, Sequence

import pandas as pd

from textgrid_converter.core.ir import COLUMNS, TextGridRow

COLUMN_DTYPES: Dict[str, str] = {
    "file": "string",
    "tier_num": "Int64",
    "tier_name": "string",
    "tier_type": "string",
    "tier_xmin": "float64",
    "tier_xmax": "float64",
    "xmin": "float64",
    "xmax": "float64",
    "text": "string",
    "annotation_num": "Int64",
}


def rows_to_dataframe(rows: Sequence[TextGridRow]) -> pd.DataFrame:
    """Convert parsed rows into a DataFrame with stable columns and dtypes.

    Args:
        rows: Output of read_textgrid(), read_textgrid_lines() or a batch.

    Returns:
        One DataFrame row per TextGridRow, columns in COLUMNS order.
    """
    frame = pd.DataFrame([row.as_dict() for row in rows], columns=list(COLUMNS))
    return frame.astype(COLUMN_DTYPES)
