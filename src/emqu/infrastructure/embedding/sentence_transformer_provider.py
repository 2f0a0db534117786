"""Local embedding provider using sentence-transformers."""

import logging
from pathlib import Path

from sentence_transformers import SentenceTransformer

from emqu.domain.exceptions import EmbeddingError
from emqu.infrastructure.embedding.vectors import to_float32_rows

logger = logging.getLogger(__name__)


class SentenceTransformerEmbeddingProvider:
    """Embedding provider running a pretrained model in process.

    The model is loaded (and downloaded into cache_dir on first use) when the
    provider is constructed.
    """

    def __init__(self, model: str, cache_dir: Path) -> None:
        logger.info("Loading embedding model %s (cache: %s)", model, cache_dir)
        try:
            cache_dir.mkdir(parents=True, exist_ok=True)
            self._model = SentenceTransformer(model, cache_folder=str(cache_dir))
        except Exception as e:
            raise EmbeddingError(f"Cannot load embedding model {model!r}: {e}") from e
        self._model_name = model

    def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings for texts."""
        if not texts:
            return []
        try:
            vectors = self._model.encode(
                texts,
                convert_to_numpy=True,
                show_progress_bar=False,
            )
        except Exception as e:
            raise EmbeddingError(f"Model {self._model_name!r} failed to embed batch: {e}") from e
        return to_float32_rows(texts, vectors)
