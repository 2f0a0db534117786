"""CLI command handlers. User-facing output goes to stdout."""

import argparse
from typing import TextIO

from tqdm import tqdm

from emqu.application.dto.reports import QueryInput
from emqu.application.use_cases.chunk.chunk_documents import ChunkDocumentsUseCase
from emqu.application.use_cases.embed.embed_documents import EmbedDocumentsUseCase
from emqu.application.use_cases.search.query_store import QueryStoreUseCase


class ChunkCommand:
    """emqu chunk PATTERN OUTPUT"""

    def __init__(self, chunk_documents: ChunkDocumentsUseCase) -> None:
        self._chunk_documents = chunk_documents

    def run(self, args: argparse.Namespace, out: TextIO) -> None:
        paths = self._chunk_documents.discover(args.pattern)
        print(f"Chunking {len(paths)} document(s).", file=out)
        progress = tqdm(paths, desc="Chunking", unit="doc", disable=None)
        report = self._chunk_documents.execute(progress, args.output)
        print(f"Successfully chunked documents into {report.output_dir}", file=out)


class EmbedCommand:
    """emqu embed PATTERN OUTPUT"""

    def __init__(self, embed_documents: EmbedDocumentsUseCase) -> None:
        self._embed_documents = embed_documents

    def run(self, args: argparse.Namespace, out: TextIO) -> None:
        paths = self._embed_documents.discover(args.pattern)
        print(f"Embedding {len(paths)} document(s).", file=out)
        report = self._embed_documents.execute(paths, args.output)
        print(f"Successfully generated embeddings for {report.records} documents", file=out)


class QueryCommand:
    """emqu query INPUT QUERY [--top-k K]"""

    def __init__(self, query_store: QueryStoreUseCase) -> None:
        self._query_store = query_store

    def run(self, args: argparse.Namespace, out: TextIO) -> None:
        results = self._query_store.execute(
            QueryInput(store_path=args.input, query=args.query, top_k=args.top_k)
        )
        for result in results:
            print(f"{result.label.strip()}\n", file=out)
