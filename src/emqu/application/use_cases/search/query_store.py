"""Query store use case - flat cosine similarity search."""

import logging

from emqu.application.dto.reports import QueryInput
from emqu.application.ports import EmbeddingProvider, VectorStore
from emqu.domain.entities import RankedResult
from emqu.domain.exceptions import EmbeddingError
from emqu.domain.services import rank

logger = logging.getLogger(__name__)


class QueryStoreUseCase:
    """Rank every stored record against an embedded query."""

    def __init__(
        self,
        vector_store: VectorStore,
        embedding_provider: EmbeddingProvider,
    ) -> None:
        self._store = vector_store
        self._embedding_provider = embedding_provider

    def execute(self, input_data: QueryInput) -> list[RankedResult]:
        """Return the top_k matches, best first."""
        if input_data.top_k < 0:
            raise ValueError("top_k must be >= 0")

        records = self._store.read(input_data.store_path)
        logger.info("Loaded %d record(s) from %s", len(records), input_data.store_path)
        if not records or input_data.top_k == 0:
            return []

        embeddings = self._embedding_provider.embed([input_data.query])
        if not embeddings:
            raise EmbeddingError("Embedding provider returned no vector for the query")

        return rank(embeddings[0], records, input_data.top_k)
