"""Document entity."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class Document:
    """Text file loaded for a single command invocation."""

    path: Path
    base_name: str
    extension: str
    content: str

    @property
    def file_name(self) -> str:
        """Base name with its extension, as used in embedding labels."""
        return self.path.name or f"{self.base_name}.{self.extension}"
