"""Command-line argument parser."""

import argparse
from pathlib import Path

from emqu import __version__

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _non_negative(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Chunk, embed and query textual files."""
    parser = argparse.ArgumentParser(
        prog="emqu",
        description="Chunk, embed and query textual files.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Override the configured log level",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    chunk = commands.add_parser("chunk", help="Chunk files into semantically sensible pieces")
    chunk.add_argument("pattern", help="Glob pattern for files to process")
    chunk.add_argument("output", type=Path, help="Output folder for chunks")

    embed = commands.add_parser("embed", help="Generate embeddings from files")
    embed.add_argument("pattern", help="Glob pattern for files to process")
    embed.add_argument("output", type=Path, help="Output JSON file for embeddings")

    query = commands.add_parser("query", help="Query similar documents")
    query.add_argument("input", type=Path, help="Input JSON file with embeddings")
    query.add_argument("query", help="Query text")
    query.add_argument("-k", "--top-k", type=_non_negative, default=1, help="Number of results")

    return parser
