"""Semantic levels used to pick chunk boundaries."""

from enum import StrEnum


class SemanticLevel(StrEnum):
    """Text units from coarsest to finest."""

    PARAGRAPH = "paragraph"
    LINE = "line"
    SENTENCE = "sentence"
    WORD = "word"
    CHARACTER = "character"

    def finer(self) -> "SemanticLevel | None":
        """Next finer level, or None below characters."""
        levels = list(SemanticLevel)
        index = levels.index(self)
        return levels[index + 1] if index + 1 < len(levels) else None
