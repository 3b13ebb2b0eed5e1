"""JSON row formatter with schema validation.

WHY: Web tools and scripts in other languages prefer a JSON array of
records over CSV quoting rules. Validating the output against a schema
catches a row that drifted from the documented contract before it is
written anywhere.

HOW: Rows become dicts in COLUMNS order. NaN (from an unreadable number
in the source) is emitted as null, since JSON has no NaN. The document is
validated with jsonschema against textgrid_rows_schema.json, which ships
next to this module.

RULES:
- Top-level value is an array of row objects
- Every COLUMNS key is present on every object; missing values are null
- tier_type is "IntervalTier" or "TextTier"
- Output suffix: "-rows.json"; media type "application/json"
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Dict, List, Sequence

import jsonschema

from textgrid_converter.core.ir import TextGridRow
from textgrid_converter.formatters.base import BaseFormatter, FormatterOutput

SCHEMA_PATH = Path(__file__).resolve().parent / "textgrid_rows_schema.json"


def load_schema() -> Dict[str, Any]:
    with open(SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


def _json_value(value: Any) -> Any:
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


def rows_to_records(rows: Sequence[TextGridRow]) -> List[Dict[str, Any]]:
    return [
        {key: _json_value(value) for key, value in row.as_dict().items()}
        for row in rows
    ]


class JSONRowsFormatter(BaseFormatter):
    """Formatter producing a schema-validated JSON array of rows."""

    @property
    def name(self) -> str:
        return "JSON rows"

    def format(self, rows: Sequence[TextGridRow]) -> List[FormatterOutput]:
        """Serialize rows to JSON.

        Raises:
            jsonschema.ValidationError: If a record does not match the
                row schema.
        """
        records = rows_to_records(rows)
        jsonschema.validate(instance=records, schema=load_schema())

        content = json.dumps(records, indent=2, ensure_ascii=False)

        return [
            FormatterOutput(
                suffix="-rows.json",
                content=content,
                media_type="application/json",
            ),
        ]
