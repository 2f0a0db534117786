"""Ranked result of a similarity query."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RankedResult:
    """Single query match. Not persisted."""

    score: float
    label: str
    index: int
