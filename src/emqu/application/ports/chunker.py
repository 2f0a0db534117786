"""Chunker port - text splitting strategies."""

from typing import Protocol

from emqu.application.dto.chunking_config import ChunkingConfig
from emqu.domain.entities import Chunk


class Chunker(Protocol):
    """Port for splitting text into line-attributed chunks."""

    def chunk(self, text: str, config: ChunkingConfig) -> list[Chunk]: ...
