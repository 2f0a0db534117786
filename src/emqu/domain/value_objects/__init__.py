"""Domain value objects."""

from emqu.domain.value_objects.labeled_text import ChunkHeader, LabeledText
from emqu.domain.value_objects.line_range import LineRange, count_lines
from emqu.domain.value_objects.semantic_level import SemanticLevel

__all__ = [
    "ChunkHeader",
    "LabeledText",
    "LineRange",
    "SemanticLevel",
    "count_lines",
]
