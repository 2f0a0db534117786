"""Vector store port - persisted label/vector pairs."""

from pathlib import Path
from typing import Protocol

from emqu.domain.entities import EmbeddingRecord


class VectorStore(Protocol):
    """Writes and reads a whole store at once."""

    def write(self, records: list[EmbeddingRecord], destination: Path) -> None: ...

    def read(self, source: Path) -> list[EmbeddingRecord]: ...
