"""Pytest fixtures for emqu tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from emqu.application.dto.chunking_config import ChunkingConfig
from emqu.domain.entities import Document, EmbeddingRecord
from emqu.domain.exceptions import FileAccessError
from emqu.infrastructure.chunking.semantic_chunker import SemanticChunker


# --- Fake token counters ---


class CharTokenCounter:
    """One token per character."""

    def count(self, text: str) -> int:
        return len(text)


class WordTokenCounter:
    """One token per whitespace-separated word."""

    def count(self, text: str) -> int:
        return len(text.split())


# --- Fake embedding provider ---


class KeywordEmbeddingProvider:
    """Embeds text as keyword occurrence counts. Records every call."""

    def __init__(self, keywords: list[str]) -> None:
        self.keywords = keywords
        self.calls: list[list[str]] = []

    def embed(self, texts: list[str]) -> list[list[float]]:
        self.calls.append(list(texts))
        return [
            [float(text.lower().count(k)) for k in self.keywords]
            for text in texts
        ]


# --- Fake persistence and file system ---


class InMemoryVectorStore:
    """Vector store keeping written stores in a dict."""

    def __init__(self) -> None:
        self.stores: dict[Path, list[EmbeddingRecord]] = {}

    def write(self, records: list[EmbeddingRecord], destination: Path) -> None:
        self.stores[destination] = list(records)

    def read(self, source: Path) -> list[EmbeddingRecord]:
        if source not in self.stores:
            raise FileAccessError(f"Cannot read embeddings from {source}")
        return list(self.stores[source])


class FakeDocumentSource:
    """Document source over an in-memory {path: content} mapping."""

    def __init__(self, files: dict[str, str]) -> None:
        self.files = {Path(p): c for p, c in files.items()}
        self.loaded: list[Path] = []

    def expand(self, pattern: str) -> list[Path]:
        return sorted(p for p in self.files if p.match(pattern))

    def load(self, path: Path) -> Document:
        if path not in self.files:
            raise FileAccessError(f"Cannot read {path}")
        self.loaded.append(path)
        return Document(
            path=path,
            base_name=path.stem,
            extension=path.suffix.lstrip(".") or "txt",
            content=self.files[path],
        )


class RecordingChunkSink:
    """Chunk sink remembering what it was asked to write."""

    def __init__(self) -> None:
        self.written: dict[str, list[str]] = {}

    def write(self, document, chunks, output_dir: Path) -> list[Path]:
        self.written[document.base_name] = [c.content for c in chunks]
        return [output_dir / f"{document.base_name}-{c.ordinal}.{document.extension}" for c in chunks]


# --- Fixtures ---


@pytest.fixture
def char_chunker() -> SemanticChunker:
    """Chunker sized by characters."""
    return SemanticChunker(CharTokenCounter())


@pytest.fixture
def word_chunker() -> SemanticChunker:
    """Chunker sized by words."""
    return SemanticChunker(WordTokenCounter())


@pytest.fixture
def chunking_config() -> ChunkingConfig:
    return ChunkingConfig(max_tokens=10)


@pytest.fixture
def keyword_provider() -> KeywordEmbeddingProvider:
    """Embedding stub over three keywords: cat, dog, fish."""
    return KeywordEmbeddingProvider(["cat", "dog", "fish"])


@pytest.fixture
def memory_store() -> InMemoryVectorStore:
    return InMemoryVectorStore()


@pytest.fixture
def abc_records() -> list[EmbeddingRecord]:
    """Store of three 2-d records A, B, C."""
    return [
        EmbeddingRecord(label="A", vector=(1.0, 0.0)),
        EmbeddingRecord(label="B", vector=(0.0, 1.0)),
        EmbeddingRecord(label="C", vector=(1.0, 1.0)),
    ]
