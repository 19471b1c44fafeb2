from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Offset into the source file a comment was read from."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) of source offsets covered by a token.

    Invariant:
    - 0 <= start <= end
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def empty(offset: TextSize) -> "TextRange":
        return TextRange(offset.value, offset.value)

    @staticmethod
    def from_offsets(start: int, end: int) -> "TextRange":
        return TextRange(start, end)

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def as_tuple(self) -> tuple[int, int]:
        return (self._start, self._end)

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Source text under a token range.

    Gutter characters stripped from a block comment body are included when the
    range spans a line break.
    """
    return source[range.start.value : range.end.value]


@dataclass(frozen=True, slots=True)
class LineColumn:
    """Zero-based line/column pair."""

    line: int
    column: int


class LineIndex:
    """Maps source offsets to line/column positions for diagnostics."""

    def __init__(self, text: str) -> None:
        starts = [0]
        for index, ch in enumerate(text):
            if ch == "\n":
                starts.append(index + 1)
        self._line_starts = starts
        self._length = len(text)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_col(self, offset: TextSize) -> LineColumn:
        value = min(offset.value, self._length)
        line = bisect_right(self._line_starts, value) - 1
        return LineColumn(line=line, column=value - self._line_starts[line])
