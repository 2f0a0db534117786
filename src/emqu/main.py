"""Application entry point and composition root."""

import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from pydantic import ValidationError

from emqu.application.dto.chunking_config import ChunkingConfig
from emqu.application.ports import EmbeddingProvider
from emqu.application.use_cases.chunk.chunk_documents import ChunkDocumentsUseCase
from emqu.application.use_cases.embed.embed_documents import EmbedDocumentsUseCase
from emqu.application.use_cases.search.query_store import QueryStoreUseCase
from emqu.config import Settings, get_settings
from emqu.domain.exceptions import EmquError
from emqu.infrastructure.chunking.semantic_chunker import SemanticChunker
from emqu.infrastructure.filesystem.chunk_writer import ChunkFileWriter
from emqu.infrastructure.filesystem.document_source import GlobDocumentSource
from emqu.infrastructure.persistence.json_vector_store import JsonVectorStore
from emqu.infrastructure.tokenization.tiktoken_counter import TiktokenTokenCounter
from emqu.interfaces.cli.commands import ChunkCommand, EmbedCommand, QueryCommand
from emqu.interfaces.cli.parser import build_parser
from emqu.logger import configure_logging

logger = logging.getLogger(__name__)


def create_embedding_provider(settings: Settings) -> EmbeddingProvider:
    """Load the configured embedding model. Called once per process."""
    if settings.embedding_backend == "openai":
        from emqu.infrastructure.embedding.openai_provider import OpenAIEmbeddingProvider

        return OpenAIEmbeddingProvider(
            base_url=settings.embedding_api_url,
            api_key=settings.embedding_api_key,
            model=settings.embedding_model,
        )

    from emqu.infrastructure.embedding.sentence_transformer_provider import (
        SentenceTransformerEmbeddingProvider,
    )

    return SentenceTransformerEmbeddingProvider(
        model=settings.embedding_model,
        cache_dir=settings.model_cache_dir,
    )


def create_command(
    name: str,
    settings: Settings,
    embedding_provider: EmbeddingProvider | None = None,
) -> ChunkCommand | EmbedCommand | QueryCommand:
    """Composition root - wire the command with its dependencies.

    Only embed and query load the embedding model.
    """
    source = GlobDocumentSource()
    store = JsonVectorStore()

    if name == "chunk":
        chunker = SemanticChunker(TiktokenTokenCounter(settings.tokenizer_encoding))
        return ChunkCommand(
            ChunkDocumentsUseCase(
                document_source=source,
                chunker=chunker,
                chunk_sink=ChunkFileWriter(),
                config=ChunkingConfig(max_tokens=settings.chunk_max_tokens),
            )
        )

    provider = embedding_provider or create_embedding_provider(settings)
    if name == "embed":
        return EmbedCommand(
            EmbedDocumentsUseCase(
                document_source=source,
                embedding_provider=provider,
                vector_store=store,
            )
        )
    if name == "query":
        return QueryCommand(QueryStoreUseCase(vector_store=store, embedding_provider=provider))
    raise ValueError(f"Unknown command: {name}")


def main(
    argv: Sequence[str] | None = None,
    *,
    settings: Settings | None = None,
    embedding_provider: EmbeddingProvider | None = None,
    out: TextIO | None = None,
) -> int:
    """CLI entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    try:
        settings = settings or get_settings()
    except ValidationError as e:
        print(f"error: invalid configuration: {e}", file=sys.stderr)
        return 1
    configure_logging(args.log_level or settings.log_level)

    try:
        command = create_command(args.command, settings, embedding_provider)
        command.run(args, out or sys.stdout)
    except EmquError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


def cli() -> None:
    """Console script wrapper."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
