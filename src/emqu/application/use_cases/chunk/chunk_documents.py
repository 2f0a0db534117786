"""Chunk documents use case."""

import logging
from collections.abc import Iterable
from pathlib import Path

from emqu.application.dto.chunking_config import ChunkingConfig
from emqu.application.dto.reports import ChunkReport
from emqu.application.ports import Chunker, ChunkSink, DocumentSource
from emqu.domain.exceptions import FileAccessError

logger = logging.getLogger(__name__)


class ChunkDocumentsUseCase:
    """Split every matched file into token-bounded chunk files."""

    def __init__(
        self,
        document_source: DocumentSource,
        chunker: Chunker,
        chunk_sink: ChunkSink,
        config: ChunkingConfig,
    ) -> None:
        self._source = document_source
        self._chunker = chunker
        self._sink = chunk_sink
        self._config = config

    def discover(self, pattern: str) -> list[Path]:
        """Files the pattern matches, in processing order."""
        return self._source.expand(pattern)

    def execute(self, paths: Iterable[Path], output_dir: Path) -> ChunkReport:
        """Chunk files into output_dir. Aborts on the first failing file."""
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileAccessError(f"Cannot create output folder {output_dir}: {e}") from e

        documents = total_chunks = 0
        for path in paths:
            document = self._source.load(path)
            chunks = self._chunker.chunk(document.content, self._config)
            self._sink.write(document, chunks, output_dir)
            logger.info("Chunked %s into %d chunk(s)", path, len(chunks))
            documents += 1
            total_chunks += len(chunks)

        return ChunkReport(output_dir=output_dir, documents=documents, chunks=total_chunks)
