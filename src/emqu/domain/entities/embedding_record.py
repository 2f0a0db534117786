"""Embedding record entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EmbeddingRecord:
    """Labeled text with its embedding vector, as persisted in a store."""

    label: str
    vector: tuple[float, ...]

    @property
    def dimension(self) -> int:
        return len(self.vector)
