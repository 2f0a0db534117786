"""Application ports - interfaces for external adapters."""

from emqu.application.ports.chunker import Chunker
from emqu.application.ports.document_source import ChunkSink, DocumentSource
from emqu.application.ports.embedding_provider import EmbeddingProvider
from emqu.application.ports.token_counter import TokenCounter
from emqu.application.ports.vector_store import VectorStore

__all__ = [
    "ChunkSink",
    "Chunker",
    "DocumentSource",
    "EmbeddingProvider",
    "TokenCounter",
    "VectorStore",
]
