"""Domain services."""

from emqu.domain.services.similarity import cosine_similarity, rank

__all__ = ["cosine_similarity", "rank"]
