"""Semantic text chunker bounded by a token budget."""

import re

from emqu.application.dto.chunking_config import ChunkingConfig
from emqu.application.ports import TokenCounter
from emqu.domain.entities import Chunk
from emqu.domain.value_objects import LineRange, SemanticLevel

# Separators stay attached to the unit they end.
_BOUNDARIES: dict[SemanticLevel, re.Pattern[str]] = {
    SemanticLevel.PARAGRAPH: re.compile(r"(?:\r?\n)(?:[ \t]*\r?\n)+"),
    SemanticLevel.LINE: re.compile(r"\n"),
    SemanticLevel.SENTENCE: re.compile(r"[.!?]+[\"')\]]*\s+"),
    SemanticLevel.WORD: re.compile(r"\s+"),
}


def split_units(text: str, level: SemanticLevel) -> list[str]:
    """Split text into consecutive units of the given level.

    Concatenating the result always gives back text.
    """
    if level is SemanticLevel.CHARACTER:
        return list(text)
    units: list[str] = []
    start = 0
    for match in _BOUNDARIES[level].finditer(text):
        end = match.end()
        if start < end < len(text):
            units.append(text[start:end])
            start = end
    if start < len(text):
        units.append(text[start:])
    return units


class SemanticChunker:
    """Greedy chunker: packs the coarsest units that fit into each chunk.

    Units larger than the budget are split at the next finer level
    (paragraphs, lines, sentences, words, characters). A single character
    over budget is emitted as is.
    """

    def __init__(self, token_counter: TokenCounter) -> None:
        self._counter = token_counter

    def chunk(self, text: str, config: ChunkingConfig) -> list[Chunk]:
        """Split text into chunks with sequential line ranges."""
        if not text:
            return []

        chunks: list[Chunk] = []
        previous: LineRange | None = None
        for position, content in enumerate(self._pack(text, config.max_tokens)):
            lines = LineRange.following(previous, content)
            chunks.append(Chunk(content=content, lines=lines, position=position))
            previous = lines
        return chunks

    def _fits(self, text: str, max_tokens: int) -> bool:
        return self._counter.count(text) <= max_tokens

    def _units(self, text: str, level: SemanticLevel, max_tokens: int) -> list[str]:
        if self._fits(text, max_tokens):
            return [text]
        finer = level.finer()
        pieces = split_units(text, level)
        if len(pieces) == 1:
            return pieces if finer is None else self._units(text, finer, max_tokens)

        units: list[str] = []
        for piece in pieces:
            if finer is None or self._fits(piece, max_tokens):
                units.append(piece)
            else:
                units.extend(self._units(piece, finer, max_tokens))
        return units

    def _pack(self, text: str, max_tokens: int) -> list[str]:
        packed: list[str] = []
        current = ""
        for unit in self._units(text, SemanticLevel.PARAGRAPH, max_tokens):
            candidate = current + unit
            if current and not self._fits(candidate, max_tokens):
                packed.append(current)
                current = unit
            else:
                current = candidate
        if current:
            packed.append(current)
        return packed
