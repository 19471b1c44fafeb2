"""Source offsets and line mapping."""

from tsdocpy.text.text import (
    LineColumn,
    LineIndex,
    TextRange,
    TextSize,
    slice_text_range,
)

__all__ = [
    "LineColumn",
    "LineIndex",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
