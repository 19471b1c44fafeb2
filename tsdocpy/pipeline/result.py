"""Parse carriers for parse-once/consume-many workflows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from tsdocpy.diagnostics import format_diagnostic, has_errors, has_warnings
from tsdocpy.model import comment_to_dict
from tsdocpy.parser.options import CommentParserConfig
from tsdocpy.parser.parsed_comment import ParsedComment
from tsdocpy.text import LineIndex

if TYPE_CHECKING:
    from tsdocpy.diagnostics import Diagnostic
    from tsdocpy.model import Comment


@dataclass(slots=True)
class CommentParseResult:
    """One parsed comment with its diagnostics and cached derived views."""

    source_text: str
    source_path: str | None
    parsed: ParsedComment
    config: CommentParserConfig
    _line_index: LineIndex | None = field(default=None, init=False, repr=False)
    _serialized: dict[str, Any] | None = field(default=None, init=False, repr=False)

    @property
    def comment(self) -> Comment:
        return self.parsed.comment

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.parsed.diagnostics

    @property
    def has_errors(self) -> bool:
        return has_errors(self.parsed.diagnostics)

    @property
    def has_warnings(self) -> bool:
        return has_warnings(self.parsed.diagnostics)

    def line_index(self) -> LineIndex:
        if self._line_index is None:
            self._line_index = LineIndex(self.source_text)
        return self._line_index

    def formatted_diagnostics(self) -> list[str]:
        line_index = self.line_index()
        return [format_diagnostic(diagnostic, line_index) for diagnostic in self.diagnostics]

    def to_dict(self) -> dict[str, Any]:
        if self._serialized is None:
            self._serialized = comment_to_dict(self.parsed.comment)
        return self._serialized
