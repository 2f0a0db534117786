"""OpenAI-compatible embedding provider."""

from openai import OpenAI, OpenAIError

from emqu.domain.exceptions import EmbeddingError
from emqu.infrastructure.embedding.vectors import to_float32_rows


class OpenAIEmbeddingProvider:
    """Embedding provider using OpenAI-compatible API."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        model: str,
    ) -> None:
        try:
            self._client = OpenAI(base_url=base_url, api_key=api_key, max_retries=0)
        except OpenAIError as e:
            raise EmbeddingError(f"Cannot create embedding client: {e}") from e
        self._model = model

    def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings for texts."""
        if not texts:
            return []
        try:
            response = self._client.embeddings.create(
                model=self._model,
                input=texts,
            )
        except OpenAIError as e:
            raise EmbeddingError(f"Embedding request failed: {e}") from e
        data = sorted(response.data, key=lambda d: d.index)
        return to_float32_rows(texts, [d.embedding for d in data])
