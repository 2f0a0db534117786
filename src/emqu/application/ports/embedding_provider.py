"""Embedding provider port."""

from typing import Protocol


class EmbeddingProvider(Protocol):
    """Port for generating text embeddings: one vector per input, same order."""

    def embed(self, texts: list[str]) -> list[list[float]]: ...
