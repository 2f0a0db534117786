"""Provenance headers attached to embedded and chunked text."""

from dataclasses import dataclass

from emqu.domain.value_objects.line_range import LineRange


@dataclass(frozen=True)
class LabeledText:
    """Document content prefixed with its source name; the unit that gets embedded."""

    source_name: str
    content: str

    @property
    def text(self) -> str:
        return f"From: {self.source_name}\n{self.content}"

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class ChunkHeader:
    """Header written at the top of every chunk file."""

    base_name: str
    lines: LineRange

    def render(self) -> str:
        return f"From {self.base_name}, lines {self.lines.start} - {self.lines.end}\n\n"
