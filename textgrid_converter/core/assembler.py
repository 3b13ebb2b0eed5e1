"""Tier assembly: validated token stream → tiers → flat rows.

WHY: After validation the token stream is a sequence of fixed-shape
records with no keys. This module is the bridge between that stream and
the structured IR: it reads each tier's header, cuts its annotations
into stride-sized groups and joins the header onto every annotation.

HOW: For each TierBoundary (in file order) the tier's slice is read at
the offsets in grammar.py. Annotation groups start right after the
5-token tier header and are read sequentially without overlap: 3 tokens
(xmin, xmax, text) for interval tiers, 2 (xmin, text) for point tiers.
Flattening replicates the header once per annotation and zips the two.

RULES:
- tier_num is the 1-based position of the boundary in the list
- annotation_num / Annotation.index is the 1-based group position
- A tier with span 0 yields exactly one placeholder row
- The declared annotation count token is not consulted
- A Text where a Number is required (or vice versa) raises TypeError
"""

from __future__ import annotations

from itertools import repeat
from typing import List, Sequence

from textgrid_converter.core.grammar import (
    INTERVAL_STRIDE,
    POINT_STRIDE,
    TIER_HEADER_LENGTH,
    TIER_NAME_OFFSET,
    TIER_XMAX_OFFSET,
    TIER_XMIN_OFFSET,
)
from textgrid_converter.core.ir import (
    Annotation,
    Number,
    Text,
    TextGridRow,
    Tier,
    TierBoundary,
    TierHeader,
    TierType,
    Token,
)


def _number(tokens: Sequence[Token], index: int) -> float:
    token = tokens[index]
    if not isinstance(token, Number):
        raise TypeError(
            "Expected a number at token {}, found text {!r}".format(index + 1, token.value)
        )
    return token.value


def _text(tokens: Sequence[Token], index: int) -> str:
    token = tokens[index]
    if not isinstance(token, Text):
        raise TypeError(
            "Expected text at token {}, found number {!r}".format(index + 1, token.value)
        )
    return token.value


def read_header(tokens: Sequence[Token], boundary: TierBoundary) -> TierHeader:
    """Read name, xmin and xmax at their fixed offsets from the class token."""
    base = boundary.start - 1
    return TierHeader(
        tier_type=boundary.tier_type,
        name=_text(tokens, base + TIER_NAME_OFFSET),
        xmin=_number(tokens, base + TIER_XMIN_OFFSET),
        xmax=_number(tokens, base + TIER_XMAX_OFFSET),
    )


def _first_annotation_index(boundary: TierBoundary) -> int:
    """0-based index of the first annotation token of a tier."""
    return boundary.start - 1 + TIER_HEADER_LENGTH


def make_intervals(tokens: Sequence[Token], boundary: TierBoundary) -> List[Annotation]:
    """Cut an interval tier's span into (xmin, xmax, text) groups."""
    first = _first_annotation_index(boundary)
    annotations: List[Annotation] = []
    for num, idx in enumerate(range(first, first + boundary.span, INTERVAL_STRIDE), start=1):
        annotations.append(Annotation(
            xmin=_number(tokens, idx),
            xmax=_number(tokens, idx + 1),
            text=_text(tokens, idx + 2),
            index=num,
        ))
    return annotations


def make_points(tokens: Sequence[Token], boundary: TierBoundary) -> List[Annotation]:
    """Cut a point tier's span into (xmin, text) groups."""
    first = _first_annotation_index(boundary)
    annotations: List[Annotation] = []
    for num, idx in enumerate(range(first, first + boundary.span, POINT_STRIDE), start=1):
        annotations.append(Annotation(
            xmin=_number(tokens, idx),
            xmax=None,
            text=_text(tokens, idx + 1),
            index=num,
        ))
    return annotations


def build_tier(tokens: Sequence[Token], boundary: TierBoundary) -> Tier:
    """Build one structured Tier from its validated boundary."""
    header = read_header(tokens, boundary)
    if boundary.tier_type is TierType.INTERVAL:
        annotations = make_intervals(tokens, boundary)
    else:
        annotations = make_points(tokens, boundary)
    return Tier(header=header, annotations=tuple(annotations))


def build_tiers(tokens: Sequence[Token], boundaries: Sequence[TierBoundary]) -> List[Tier]:
    """Build every tier of a document, in file order."""
    return [build_tier(tokens, boundary) for boundary in boundaries]


def tier_rows(tier: Tier, tier_num: int) -> List[TextGridRow]:
    """Flatten one tier into rows.

    WHY: Tabular output repeats the tier header on every annotation row.

    HOW: Replicate the header once per annotation and zip the two
    sequences. A tier without annotations yields one placeholder row
    carrying only the header fields.
    """
    header = tier.header
    if not tier.annotations:
        return [TextGridRow(
            tier_num=tier_num,
            tier_name=header.name,
            tier_type=header.tier_type.value,
            tier_xmin=header.xmin,
            tier_xmax=header.xmax,
        )]

    return [
        TextGridRow(
            tier_num=tier_num,
            tier_name=h.name,
            tier_type=h.tier_type.value,
            tier_xmin=h.xmin,
            tier_xmax=h.xmax,
            xmin=annotation.xmin,
            xmax=annotation.xmax,
            text=annotation.text,
            annotation_num=annotation.index,
        )
        for h, annotation in zip(repeat(header), tier.annotations)
    ]


def flatten(tiers: Sequence[Tier]) -> List[TextGridRow]:
    """Concatenate the rows of every tier, preserving tier order."""
    rows: List[TextGridRow] = []
    for tier_num, tier in enumerate(tiers, start=1):
        rows.extend(tier_rows(tier, tier_num))
    return rows


def assemble(tokens: Sequence[Token], boundaries: Sequence[TierBoundary]) -> List[TextGridRow]:
    """Produce the final row sequence for a validated token stream.

    Args:
        tokens: Lexed tokens of one document.
        boundaries: Output of validator.validate() for the same tokens.

    Returns:
        Rows of all tiers in tier order, annotations in file order.
    """
    return flatten(build_tiers(tokens, boundaries))
