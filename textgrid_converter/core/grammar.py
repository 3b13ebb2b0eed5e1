"""Fixed offsets and strides of the long TextGrid token stream.

WHY: The long format is positional. After comments, indices and keys are
stripped, a file with one interval tier lexes to:

    "ooTextFile" "TextGrid" 0 1 1          <- document header (5 tokens)
    "IntervalTier" "words" 0 1 2           <- tier header (5 tokens)
    0 0.5 "cat"  0.5 1 "dog"               <- annotations (stride 3)

Naming every offset here keeps the validator and assembler free of bare
numbers and lets the grammar be tested without the scanner.

RULES:
- Positions are 1-based token positions in the whole stream
- Offsets are 0-based from the tier's class token
"""

from __future__ import annotations

from textgrid_converter.core.ir import TierType

# Marker that must appear in some line of a long-form TextGrid.
FILE_TYPE_MARKER = "ooTextFile"

# Substring identifying a tier class token ("IntervalTier", "TextTier").
TIER_MARKER = "Tier"

# File type, object class, xmin, xmax, tier count.
DOCUMENT_HEADER_LENGTH = 5

# 1-based position of the first tier's class token.
FIRST_TIER_POSITION = DOCUMENT_HEADER_LENGTH + 1

# Class, name, xmin, xmax, annotation count.
TIER_HEADER_LENGTH = 5

TIER_TYPE_OFFSET = 0
TIER_NAME_OFFSET = 1
TIER_XMIN_OFFSET = 2
TIER_XMAX_OFFSET = 3

# xmin, xmax, text
INTERVAL_STRIDE = 3
# xmin, text
POINT_STRIDE = 2

STRIDES = {
    TierType.INTERVAL: INTERVAL_STRIDE,
    TierType.POINT: POINT_STRIDE,
}


def stride_for(tier_type: TierType) -> int:
    """Number of tokens one annotation of ``tier_type`` consumes."""
    return STRIDES[tier_type]
