"""Command DTOs."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class ChunkReport:
    """Outcome of chunking a set of files."""

    output_dir: Path
    documents: int
    chunks: int


@dataclass
class EmbedReport:
    """Outcome of embedding a set of files."""

    output: Path
    records: int
    dimension: int | None


@dataclass
class QueryInput:
    """Input for querying a store."""

    store_path: Path
    query: str
    top_k: int = 1
