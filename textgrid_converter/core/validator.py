"""Structural validation of a lexed TextGrid token stream.

WHY: The assembler reads fields by fixed offset. If a tier header is out
of place or a tier holds a token count that is not a whole number of
annotations, those offsets would silently read the wrong values. The
validator finds the tier boundaries and rejects such streams up front.

HOW: Tier class tokens are Text tokens containing "Tier". The first one
must sit right after the 5-token document header. Each tier's span is
the distance to the next class token (or one past the end of the stream)
minus the 5-token tier header, and must divide by the tier's stride.

RULES:
- No tier headers at all -> MisformattedError
- First tier header not at position 6 -> MisformattedError
- Interval span % 3 != 0, Point span % 2 != 0 -> MisformattedError
- Unknown "...Tier" class label -> MisformattedError
- No partial results: the first violation aborts validation
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from textgrid_converter.core.errors import MisformattedError
from textgrid_converter.core.grammar import (
    FIRST_TIER_POSITION,
    TIER_HEADER_LENGTH,
    TIER_MARKER,
    TIER_TYPE_OFFSET,
    stride_for,
)
from textgrid_converter.core.ir import Text, TierBoundary, TierType, Token

logger = logging.getLogger(__name__)


def find_tier_positions(tokens: Sequence[Token]) -> List[int]:
    """Return the 1-based positions of every tier class token."""
    return [
        position
        for position, token in enumerate(tokens, start=1)
        if isinstance(token, Text) and TIER_MARKER in token.value
    ]


def tier_spans(positions: Sequence[int], token_count: int) -> List[int]:
    """Annotation-bearing token count of each tier.

    The last tier runs to one past the end of the stream.
    """
    ends = list(positions[1:]) + [token_count + 1]
    return [end - start - TIER_HEADER_LENGTH for start, end in zip(positions, ends)]


def validate(tokens: Sequence[Token]) -> List[TierBoundary]:
    """Locate and check every tier in the token stream.

    Args:
        tokens: Output of lexer.tokenize() for one document.

    Returns:
        One TierBoundary per tier, in file order.

    Raises:
        MisformattedError: On any structural violation listed in the
            module RULES.
    """
    positions = find_tier_positions(tokens)

    if not positions or positions[0] != FIRST_TIER_POSITION:
        logger.debug(
            "First tier header at %s, expected %d",
            positions[0] if positions else None,
            FIRST_TIER_POSITION,
        )
        raise MisformattedError()

    boundaries: List[TierBoundary] = []
    for start, span in zip(positions, tier_spans(positions, len(tokens))):
        label = tokens[start - 1 + TIER_TYPE_OFFSET].value
        tier_type = TierType.from_label(label)
        if tier_type is None:
            logger.debug("Unknown tier class %r at position %d", label, start)
            raise MisformattedError()

        if span < 0 or span % stride_for(tier_type) != 0:
            logger.debug(
                "%s at position %d spans %d tokens, not a multiple of %d",
                label, start, span, stride_for(tier_type),
            )
            raise MisformattedError()

        boundaries.append(TierBoundary(start=start, tier_type=tier_type, span=span))

    return boundaries
