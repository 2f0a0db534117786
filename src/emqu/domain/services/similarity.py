"""Cosine similarity and top-k ranking over a flat list of records.

Scores are computed in float64 and cast to float32, so ties are decided at
float32 precision. A zero-norm vector (query or record) scores ``-inf`` and
therefore always ranks last; NaN never reaches the sort.
"""

from collections.abc import Sequence

import numpy as np

from emqu.domain.entities import EmbeddingRecord, RankedResult
from emqu.domain.exceptions import DimensionMismatch


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """dot(a, b) / (|a| * |b|), or -inf when either norm is zero."""
    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    if va.shape != vb.shape:
        raise DimensionMismatch(len(va), len(vb))
    return float(_scores(va, vb[np.newaxis, :])[0])


def _scores(query: np.ndarray, matrix: np.ndarray) -> np.ndarray:
    """Cosine of query against each row of matrix, as float32."""
    norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query)
    dots = matrix @ query
    scores = np.full(len(matrix), -np.inf, dtype=np.float64)
    nonzero = norms > 0.0
    scores[nonzero] = np.clip(dots[nonzero] / norms[nonzero], -1.0, 1.0)
    return scores.astype(np.float32)


def rank(
    query_vector: Sequence[float],
    records: Sequence[EmbeddingRecord],
    top_k: int,
) -> list[RankedResult]:
    """Return the top_k records by descending cosine similarity.

    Ties keep store order. Raises DimensionMismatch if any record's vector
    length differs from the query's.
    """
    if top_k < 0:
        raise ValueError("top_k must be >= 0")
    query = np.asarray(query_vector, dtype=np.float64)
    for record in records:
        if record.dimension != len(query):
            raise DimensionMismatch(len(query), record.dimension, record.label)
    if top_k == 0 or not records:
        return []

    matrix = np.asarray([r.vector for r in records], dtype=np.float64)
    scores = _scores(query, matrix)
    order = np.argsort(-scores, kind="stable")[:top_k]
    return [
        RankedResult(score=float(scores[i]), label=records[i].label, index=int(i))
        for i in order
    ]
