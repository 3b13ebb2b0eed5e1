"""Token, tier and row dataclasses for parsed TextGrids.

WHY: A long-form TextGrid has no keys: a number is an xmin or an xmax
only because of where it sits. Giving each stage of the pipeline a
concrete type (tokens in, boundaries in the middle, rows out) keeps
that positional knowledge inside the stages instead of in loose lists.

HOW: Dataclasses form three layers:
  Number / Text     : the two cases of a lexed token
  TierHeader, Annotation, Tier
                    : the structured document model
  TextGridRow       : one flat output row (tier header + annotation)

RULES:
- All dataclasses are frozen; each parse builds fresh instances
- Times are float seconds exactly as written in the file
- TierType values are the file's own class labels
- COLUMNS is the export column order for every formatter
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple, Union


class TierType(str, enum.Enum):
    """Tier classes of the long TextGrid format.

    Inherits from str so values serialize as the literal class label.
    """

    INTERVAL = "IntervalTier"
    POINT = "TextTier"

    @classmethod
    def from_label(cls, label: str) -> Optional["TierType"]:
        """Return the member whose label is ``label``, or None."""
        for member in cls:
            if member.value == label:
                return member
        return None


@dataclass(frozen=True)
class Number:
    """A numeric token (digits and ``.`` outside quotes)."""

    value: float


@dataclass(frozen=True)
class Text:
    """A string token (everything between a pair of quotes)."""

    value: str


Token = Union[Number, Text]


@dataclass(frozen=True)
class TierBoundary:
    """Location of one validated tier inside the token sequence.

    RULES:
    - start: 1-based position of the tier's class token
    - span: number of annotation-bearing tokens after the 5-token tier header
    """

    start: int
    tier_type: TierType
    span: int


@dataclass(frozen=True)
class TierHeader:
    tier_type: TierType
    name: str
    xmin: float
    xmax: float


@dataclass(frozen=True)
class Annotation:
    """One labeled interval or point.

    xmax is None for points. index is 1-based within the tier.
    """

    xmin: float
    xmax: Optional[float]
    text: str
    index: int


@dataclass(frozen=True)
class Tier:
    header: TierHeader
    annotations: Tuple[Annotation, ...] = field(default_factory=tuple)


COLUMNS: Tuple[str, ...] = (
    "file",
    "tier_num",
    "tier_name",
    "tier_type",
    "tier_xmin",
    "tier_xmax",
    "xmin",
    "xmax",
    "text",
    "annotation_num",
)


@dataclass(frozen=True)
class TextGridRow:
    """One output row: a tier header joined with one of its annotations.

    WHY: Tabular consumers (CSV, DataFrames) want a single flat record per
    annotation with the tier context repeated on it.

    HOW: Built by the assembler, one per annotation; empty tiers produce a
    single placeholder row whose annotation fields are all None.

    RULES:
    - tier_num: 1-based tier order of appearance
    - tier_type: "IntervalTier" or "TextTier"
    - xmax is None for points and placeholders
    - xmin, text and annotation_num are None only for placeholders
    - file is filled in by the reader wrappers, None for bare lines
    """

    tier_num: int
    tier_name: str
    tier_type: str
    tier_xmin: float
    tier_xmax: float
    xmin: Optional[float] = None
    xmax: Optional[float] = None
    text: Optional[str] = None
    annotation_num: Optional[int] = None
    file: Optional[str] = None

    @property
    def is_placeholder(self) -> bool:
        return self.annotation_num is None

    def with_file(self, file: Optional[str]) -> "TextGridRow":
        return replace(self, file=file)

    def as_dict(self) -> Dict[str, Any]:
        """Return the row as a dict in COLUMNS order."""
        return {name: getattr(self, name) for name in COLUMNS}
