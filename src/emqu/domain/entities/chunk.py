"""Chunk entity - bounded slice of a document with line provenance."""

from dataclasses import dataclass

from emqu.domain.value_objects import LineRange


@dataclass(frozen=True)
class Chunk:
    """Chunk - contiguous text segment of a document."""

    content: str
    lines: LineRange
    position: int

    @property
    def ordinal(self) -> int:
        """1-based number used in chunk file names."""
        return self.position + 1
