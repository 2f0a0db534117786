"""Line range of a chunk within its source document."""

from dataclasses import dataclass


def count_lines(text: str) -> int:
    """Number of newline-delimited lines; a trailing newline does not open a new line."""
    if not text:
        return 0
    return text.count("\n") + (0 if text.endswith("\n") else 1)


@dataclass(frozen=True)
class LineRange:
    """1-based inclusive line range."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 1:
            raise ValueError("Line numbers are 1-based")
        if self.end < self.start - 1:
            raise ValueError("Line range end precedes its start")

    @classmethod
    def following(cls, previous: "LineRange | None", text: str) -> "LineRange":
        """Range for text placed right after previous (or at line 1)."""
        start = previous.end + 1 if previous else 1
        return cls(start=start, end=start + count_lines(text) - 1)
