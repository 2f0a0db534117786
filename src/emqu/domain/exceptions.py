"""Domain exceptions."""


class EmquError(Exception):
    """Base exception for emqu."""

    pass


class FileAccessError(EmquError):
    """A file could not be opened, read or written."""

    pass


class FormatError(EmquError):
    """Serialized embedding store is malformed."""

    pass


class TokenizerError(EmquError):
    """Tokenizer could not be constructed or failed to count tokens."""

    pass


class EmbeddingError(EmquError):
    """Embedding model failed to load or to embed a batch."""

    pass


class DimensionMismatch(EmquError):
    """Vector lengths are incompatible."""

    def __init__(self, expected: int, actual: int, label: str | None = None) -> None:
        self.expected = expected
        self.actual = actual
        self.label = label
        where = f" for {label!r}" if label is not None else ""
        super().__init__(f"Expected vector of length {expected}, got {actual}{where}")


class GlobError(EmquError):
    """Glob pattern is malformed or a matched entry is unreadable."""

    pass
