"""JSON file vector store.

The store is a JSON array of ``[label, [component, ...]]`` pairs. Components
are rounded to float32 and written as the shortest float64 repr of that value
(``0.1`` is stored as ``0.10000000149011612``), so reading a written store
gives back identical records.
"""

import json
import math
import os
from pathlib import Path
from typing import Annotated

from pydantic import Strict, TypeAdapter, ValidationError

from emqu.domain.entities import EmbeddingRecord
from emqu.domain.exceptions import DimensionMismatch, FileAccessError, FormatError

_StoreRows = TypeAdapter(
    list[tuple[Annotated[str, Strict()], list[Annotated[float, Strict()]]]]
)


def _check_dimensions(records: list[EmbeddingRecord]) -> None:
    if not records:
        return
    expected = records[0].dimension
    for record in records:
        if record.dimension != expected:
            raise DimensionMismatch(expected, record.dimension, record.label)


class JsonVectorStore:
    """Vector store persisted as a single JSON document."""

    def write(self, records: list[EmbeddingRecord], destination: Path) -> None:
        """Replace destination with records."""
        _check_dimensions(records)
        for record in records:
            if not all(math.isfinite(x) for x in record.vector):
                raise FormatError(f"Vector for {record.label!r} has non-finite components")
        payload = json.dumps(
            [[r.label, list(r.vector)] for r in records],
            ensure_ascii=False,
            allow_nan=False,
        )

        # Write a sibling file first so a failed write never truncates the store.
        tmp = destination.with_name(f".{destination.name}.tmp")
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp, destination)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            raise FileAccessError(f"Cannot write embeddings to {destination}: {e}") from e

    def read(self, source: Path) -> list[EmbeddingRecord]:
        """Load every record from source, in stored order."""
        try:
            raw = source.read_bytes()
        except OSError as e:
            raise FileAccessError(f"Cannot read embeddings from {source}: {e}") from e

        try:
            rows = _StoreRows.validate_json(raw.decode("utf-8"))
        except (UnicodeDecodeError, ValidationError) as e:
            raise FormatError(f"{source} is not a valid embedding store: {e}") from e

        records = [EmbeddingRecord(label=label, vector=tuple(vector)) for label, vector in rows]
        for record in records:
            if not all(math.isfinite(x) for x in record.vector):
                raise FormatError(f"{source}: vector for {record.label!r} has non-finite components")
        try:
            _check_dimensions(records)
        except DimensionMismatch as e:
            raise FormatError(f"{source}: {e}") from e
        return records
