"""Token counter port - sizes chunks."""

from typing import Protocol


class TokenCounter(Protocol):
    """Deterministic token count of a string."""

    def count(self, text: str) -> int: ...
