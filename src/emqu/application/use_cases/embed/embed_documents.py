"""Embed documents use case."""

import logging
from pathlib import Path

from emqu.application.dto.reports import EmbedReport
from emqu.application.ports import DocumentSource, EmbeddingProvider, VectorStore
from emqu.domain.entities import EmbeddingRecord
from emqu.domain.value_objects import LabeledText

logger = logging.getLogger(__name__)


class EmbedDocumentsUseCase:
    """Embed whole documents, labeled with their file name, into a store file."""

    def __init__(
        self,
        document_source: DocumentSource,
        embedding_provider: EmbeddingProvider,
        vector_store: VectorStore,
    ) -> None:
        self._source = document_source
        self._embedding_provider = embedding_provider
        self._store = vector_store

    def discover(self, pattern: str) -> list[Path]:
        """Files the pattern matches, in store order."""
        return self._source.expand(pattern)

    def execute(self, paths: list[Path], output: Path) -> EmbedReport:
        """Load, embed and persist. Overwrites output; writes an empty store for no paths."""
        labels = [
            LabeledText(source_name=doc.file_name, content=doc.content).text
            for doc in (self._source.load(p) for p in paths)
        ]
        embeddings = self._embedding_provider.embed(labels) if labels else []
        records = [
            EmbeddingRecord(label=label, vector=tuple(vector))
            for label, vector in zip(labels, embeddings, strict=True)
        ]
        self._store.write(records, output)
        logger.info("Wrote %d record(s) to %s", len(records), output)

        return EmbedReport(
            output=output,
            records=len(records),
            dimension=records[0].dimension if records else None,
        )
