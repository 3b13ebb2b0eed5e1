"""Unit tests for the tier assembler module.

WHY: The assembler decides which token becomes which field of which row.
Off-by-one slicing here silently produces plausible but wrong tables.

HOW: Tests cover header reading, interval and point grouping, empty-tier
placeholder rows, numbering (tier_num, annotation_num) and the TypeError
raised for a token of the wrong variant.

RULES:
- Floating-point comparisons use pytest.approx with default tolerance.
"""

import pytest

from textgrid_converter.core.assembler import (
    assemble,
    build_tiers,
    make_intervals,
    make_points,
    read_header,
)
from textgrid_converter.core.ir import (
    Annotation,
    Number,
    Text,
    TextGridRow,
    TierBoundary,
    TierHeader,
    TierType,
)
from textgrid_converter.core.lexer import tokenize
from textgrid_converter.core.validator import validate


def _assemble_lines(lines):
    tokens = tokenize(lines)
    return assemble(tokens, validate(tokens))


class TestReadHeader:

    def test_header_fields(self, words_lines):
        tokens = tokenize(words_lines)
        header = read_header(tokens, validate(tokens)[0])
        assert header == TierHeader(tier_type=TierType.INTERVAL, name="words", xmin=0, xmax=1)


class TestGrouping:

    def test_make_intervals(self, words_lines):
        tokens = tokenize(words_lines)
        annotations = make_intervals(tokens, validate(tokens)[0])
        assert annotations == [
            Annotation(xmin=0, xmax=0.5, text="cat", index=1),
            Annotation(xmin=0.5, xmax=1, text="dog", index=2),
        ]

    def test_make_points(self, mixed_lines):
        tokens = tokenize(mixed_lines)
        annotations = make_points(tokens, validate(tokens)[2])
        assert annotations == [
            Annotation(xmin=0.6, xmax=None, text="H*", index=1),
            Annotation(xmin=1.5, xmax=None, text="L%", index=2),
        ]

    def test_build_tiers(self, mixed_lines):
        tokens = tokenize(mixed_lines)
        tiers = build_tiers(tokens, validate(tokens))
        assert [t.header.name for t in tiers] == ["utterance", "words", "tones"]
        assert [len(t.annotations) for t in tiers] == [1, 3, 2]


class TestWordsScenario:
    """One interval tier "words" with cat/dog yields exactly two rows."""

    def test_rows(self, words_lines):
        rows = _assemble_lines(words_lines)
        assert rows == [
            TextGridRow(
                tier_num=1, tier_name="words", tier_type="IntervalTier",
                tier_xmin=0, tier_xmax=1,
                xmin=0, xmax=0.5, text="cat", annotation_num=1,
            ),
            TextGridRow(
                tier_num=1, tier_name="words", tier_type="IntervalTier",
                tier_xmin=0, tier_xmax=1,
                xmin=0.5, xmax=1, text="dog", annotation_num=2,
            ),
        ]

    def test_file_is_not_set_by_assembler(self, words_lines):
        assert all(row.file is None for row in _assemble_lines(words_lines))


class TestEmptyTiers:

    def test_empty_point_tier_placeholder(self, empty_point_tier_lines):
        rows = _assemble_lines(empty_point_tier_lines)
        assert len(rows) == 2
        placeholder = rows[1]
        assert placeholder.tier_num == 2
        assert placeholder.tier_name == "bell"
        assert placeholder.tier_type == "TextTier"
        assert placeholder.tier_xmin == 0
        assert placeholder.tier_xmax == 1
        assert placeholder.xmin is None
        assert placeholder.xmax is None
        assert placeholder.text is None
        assert placeholder.annotation_num is None
        assert placeholder.is_placeholder

    def test_empty_interval_tier_placeholder(self, textgrid_builder):
        rows = _assemble_lines(textgrid_builder([("IntervalTier", "silence", 0, 3, [])]))
        assert len(rows) == 1
        assert rows[0].tier_type == "IntervalTier"
        assert rows[0].is_placeholder


class TestRowProperties:

    def test_row_count_matches_groups(self, mixed_lines):
        rows = _assemble_lines(mixed_lines)
        counts = {}
        for row in rows:
            counts[row.tier_num] = counts.get(row.tier_num, 0) + 1
        assert counts == {1: 1, 2: 3, 3: 2}

    def test_annotation_num_contiguous_per_tier(self, mixed_lines):
        rows = _assemble_lines(mixed_lines)
        for tier_num in (1, 2, 3):
            nums = [r.annotation_num for r in rows if r.tier_num == tier_num]
            assert nums == list(range(1, len(nums) + 1))

    def test_tier_num_non_decreasing(self, mixed_lines):
        nums = [r.tier_num for r in _assemble_lines(mixed_lines)]
        assert nums == sorted(nums)

    def test_points_have_no_xmax(self, mixed_lines):
        points = [r for r in _assemble_lines(mixed_lines) if r.tier_type == "TextTier"]
        assert [r.xmax for r in points] == [None, None]
        assert [r.xmin for r in points] == [pytest.approx(0.6), pytest.approx(1.5)]

    def test_header_repeated_on_every_row(self, mixed_lines):
        words = [r for r in _assemble_lines(mixed_lines) if r.tier_name == "words"]
        assert {(r.tier_xmin, r.tier_xmax) for r in words} == {(0, 2)}


class TestTypeMismatch:

    def test_text_in_number_slot(self):
        tokens = [
            Text("ooTextFile"), Text("TextGrid"), Number(0), Number(1), Number(1),
            Text("IntervalTier"), Text("w"), Number(0), Number(1), Number(1),
            Number(0), Text("oops"), Text("x"),
        ]
        with pytest.raises(TypeError):
            assemble(tokens, validate(tokens))

    def test_number_in_text_slot(self):
        tokens = [Text("IntervalTier"), Number(3), Number(0), Number(1)]
        boundary = TierBoundary(start=1, tier_type=TierType.INTERVAL, span=0)
        with pytest.raises(TypeError):
            read_header(tokens, boundary)
