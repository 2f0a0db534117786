"""Writes chunks as individual files with a provenance header."""

from pathlib import Path

from emqu.domain.entities import Chunk, Document
from emqu.domain.exceptions import FileAccessError
from emqu.domain.value_objects import ChunkHeader


class ChunkFileWriter:
    """Writes ``<basename>-<n>.<ext>`` files into an output folder."""

    def write(self, document: Document, chunks: list[Chunk], output_dir: Path) -> list[Path]:
        written: list[Path] = []
        for chunk in chunks:
            header = ChunkHeader(base_name=document.base_name, lines=chunk.lines)
            path = output_dir / f"{document.base_name}-{chunk.ordinal}.{document.extension}"
            try:
                path.write_text(header.render() + chunk.content, encoding="utf-8", newline="")
            except OSError as e:
                raise FileAccessError(f"Cannot write chunk {path}: {e}") from e
            written.append(path)
        return written
