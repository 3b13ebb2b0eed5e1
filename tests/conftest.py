"""Shared test fixtures for the textgrid_converter test suite.

WHY: Most test modules need small, hand-checkable TextGrids in the exact
layout Praat writes. Building them in one place keeps the long-form
boilerplate (keys, item indices, sizes) consistent across tests.

HOW: build_textgrid_lines() renders a list of tier specs into Praat
long-form lines. Fixtures expose the two reference documents: one
interval tier "words" with cat/dog, and a document with an empty point
tier.

RULES:
- Tier spec: (class, name, xmin, xmax, annotations)
- Interval annotations are (xmin, xmax, text); points are (time, text)
- Lines match Praat's own output, including trailing spaces
"""

from typing import Any, List, Sequence, Tuple

import pytest

TierSpec = Tuple[str, str, float, float, Sequence[Tuple[Any, ...]]]


def build_textgrid_lines(
    tiers: Sequence[TierSpec],
    xmin: float = 0,
    xmax: float = 1,
) -> List[str]:
    """Render tier specs as the lines of a long-form TextGrid."""
    lines = [
        'File type = "ooTextFile"',
        'Object class = "TextGrid"',
        "",
        "xmin = {} ".format(xmin),
        "xmax = {} ".format(xmax),
        "tiers? <exists> ",
        "size = {} ".format(len(tiers)),
        "item []: ",
    ]
    for tier_idx, (tier_class, name, t_xmin, t_xmax, annotations) in enumerate(tiers, start=1):
        lines.extend([
            "    item [{}]:".format(tier_idx),
            '        class = "{}" '.format(tier_class),
            '        name = "{}" '.format(name),
            "        xmin = {} ".format(t_xmin),
            "        xmax = {} ".format(t_xmax),
        ])
        if tier_class == "IntervalTier":
            lines.append("        intervals: size = {} ".format(len(annotations)))
            for i, (a_xmin, a_xmax, text) in enumerate(annotations, start=1):
                lines.extend([
                    "        intervals [{}]:".format(i),
                    "            xmin = {} ".format(a_xmin),
                    "            xmax = {} ".format(a_xmax),
                    '            text = "{}" '.format(text),
                ])
        else:
            lines.append("        points: size = {} ".format(len(annotations)))
            for i, (time, mark) in enumerate(annotations, start=1):
                lines.extend([
                    "        points [{}]:".format(i),
                    "            number = {} ".format(time),
                    '            mark = "{}" '.format(mark),
                ])
    return lines


@pytest.fixture
def textgrid_builder():
    """The build_textgrid_lines helper, for tests that need custom tiers."""
    return build_textgrid_lines


@pytest.fixture
def words_lines():
    """One interval tier "words" (0–1) with "cat" and "dog"."""
    return build_textgrid_lines([
        ("IntervalTier", "words", 0, 1, [(0, 0.5, "cat"), (0.5, 1, "dog")]),
    ])


@pytest.fixture
def empty_point_tier_lines():
    """An interval tier with one interval followed by a point tier with no points."""
    return build_textgrid_lines([
        ("IntervalTier", "words", 0, 1, [(0, 1, "hi")]),
        ("TextTier", "bell", 0, 1, []),
    ])


@pytest.fixture
def mixed_lines():
    """Two interval tiers and a point tier with two points."""
    return build_textgrid_lines(
        [
            ("IntervalTier", "utterance", 0, 2, [(0, 2, "the cat sat")]),
            ("IntervalTier", "words", 0, 2, [(0, 0.4, "the"), (0.4, 1.1, "cat"), (1.1, 2, "sat")]),
            ("TextTier", "tones", 0, 2, [(0.6, "H*"), (1.5, "L%")]),
        ],
        xmax=2,
    )


@pytest.fixture
def words_file(tmp_path, words_lines):
    """The words document saved as UTF-8 in tmp_path."""
    path = tmp_path / "words.TextGrid"
    path.write_text("\n".join(words_lines) + "\n", encoding="utf-8")
    return path
