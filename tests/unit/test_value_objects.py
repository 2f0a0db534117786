"""Unit tests for domain value objects."""

import pytest

from emqu.domain.value_objects import (
    ChunkHeader,
    LabeledText,
    LineRange,
    SemanticLevel,
    count_lines,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [("", 0), ("a", 1), ("a\n", 1), ("a\nb", 2), ("\n", 1), ("a\n\n", 2), ("\n\n\n", 3)],
)
def test_count_lines(text: str, expected: int) -> None:
    assert count_lines(text) == expected


def test_line_range_following_starts_at_one() -> None:
    assert LineRange.following(None, "a\nb\n") == LineRange(1, 2)


def test_line_range_following_continues_previous() -> None:
    assert LineRange.following(LineRange(1, 2), "c") == LineRange(3, 3)


def test_line_range_rejects_zero_start() -> None:
    with pytest.raises(ValueError, match="1-based"):
        LineRange(0, 1)


def test_line_range_rejects_end_before_start() -> None:
    with pytest.raises(ValueError, match="precedes"):
        LineRange(5, 3)


def test_labeled_text() -> None:
    labeled = LabeledText(source_name="notes.md", content="# Notes\n")
    assert labeled.text == "From: notes.md\n# Notes\n"
    assert str(labeled) == labeled.text


def test_chunk_header() -> None:
    header = ChunkHeader(base_name="notes", lines=LineRange(4, 9))
    assert header.render() == "From notes, lines 4 - 9\n\n"


def test_semantic_levels_get_finer() -> None:
    assert SemanticLevel.PARAGRAPH.finer() is SemanticLevel.LINE
    assert SemanticLevel.WORD.finer() is SemanticLevel.CHARACTER
    assert SemanticLevel.CHARACTER.finer() is None
