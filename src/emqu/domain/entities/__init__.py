"""Domain entities."""

from emqu.domain.entities.chunk import Chunk
from emqu.domain.entities.document import Document
from emqu.domain.entities.embedding_record import EmbeddingRecord
from emqu.domain.entities.ranked_result import RankedResult

__all__ = [
    "Chunk",
    "Document",
    "EmbeddingRecord",
    "RankedResult",
]
