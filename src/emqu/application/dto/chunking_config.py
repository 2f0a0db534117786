"""Chunking configuration DTO."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChunkingConfig:
    """Configuration for text chunking."""

    max_tokens: int

    def __post_init__(self) -> None:
        if self.max_tokens <= 0:
            raise ValueError("max_tokens must be > 0")
