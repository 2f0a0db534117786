"""Document source port - file discovery and loading."""

from pathlib import Path
from typing import Protocol

from emqu.domain.entities import Chunk, Document


class DocumentSource(Protocol):
    """Expands glob patterns and loads text documents."""

    def expand(self, pattern: str) -> list[Path]: ...

    def load(self, path: Path) -> Document: ...


class ChunkSink(Protocol):
    """Persists the chunks of one document."""

    def write(self, document: Document, chunks: list[Chunk], output_dir: Path) -> list[Path]: ...
