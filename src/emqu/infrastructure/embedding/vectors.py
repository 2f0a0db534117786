"""Checks shared by embedding providers."""

from collections.abc import Sequence

import numpy as np

from emqu.domain.exceptions import EmbeddingError


def to_float32_rows(texts: list[str], vectors: Sequence[Sequence[float]]) -> list[list[float]]:
    """Validate a provider response and round its components to float32.

    One non-empty vector per text, all of the same dimension.
    """
    try:
        matrix = np.asarray(vectors, dtype=np.float32)
    except (TypeError, ValueError) as e:
        raise EmbeddingError(f"Embedding vectors have inconsistent dimensions: {e}") from e
    if matrix.ndim != 2 or matrix.shape[0] != len(texts):
        raise EmbeddingError(
            f"Expected {len(texts)} embedding vector(s), got shape {matrix.shape}"
        )
    if matrix.shape[1] == 0:
        raise EmbeddingError("Embedding model returned empty vectors")
    if not np.isfinite(matrix).all():
        raise EmbeddingError("Embedding model returned non-finite values")
    return matrix.tolist()
