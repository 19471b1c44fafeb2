"""Comment parser state: cursor, configuration and diagnostics."""

from collections.abc import Iterator
from contextlib import contextmanager

from tsdocpy.diagnostics import Diagnostic, DiagnosticSink, DiagnosticSpec
from tsdocpy.lexer import Token, TokenKind
from tsdocpy.parser.cursor import CursorCheckpoint, TokenCursor
from tsdocpy.parser.options import CommentParserConfig
from tsdocpy.text import LineIndex, TextRange, TextSize


class CommentParser:
    """State shared by the grammar routines while parsing one comment."""

    def __init__(
        self,
        cursor: TokenCursor,
        config: CommentParserConfig | None = None,
        *,
        source_path: str | None = None,
        line_index: LineIndex | None = None,
        sink: DiagnosticSink | None = None,
    ) -> None:
        self._cursor = cursor
        self._config = config or CommentParserConfig()
        self._source_path = source_path
        self._line_index = line_index
        self._sink = sink
        self._diagnostics: list[Diagnostic] = []
        self._modifier_tags: set[str] = set()
        self._speculative_depth = 0
        self._comment_range = cursor.tokens[0].range if cursor.tokens else TextRange.empty(TextSize(0))

    @property
    def cursor(self) -> TokenCursor:
        return self._cursor

    @property
    def config(self) -> CommentParserConfig:
        return self._config

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def modifier_tags(self) -> set[str]:
        return self._modifier_tags

    @property
    def position(self) -> CursorCheckpoint:
        return self._cursor.position

    def done(self) -> bool:
        return self._cursor.done()

    def peek(self) -> Token:
        return self._cursor.peek()

    def take(self) -> Token:
        return self._cursor.take()

    def at(self, kind: TokenKind) -> bool:
        return not self._cursor.done() and self._cursor.peek().kind == kind

    def before(self, end: CursorCheckpoint) -> bool:
        """True while the cursor has not reached a boundary found by a speculative parse."""
        return self._cursor.position < end

    @contextmanager
    def speculative_parsing(self) -> Iterator[None]:
        """Parse ahead with warnings suppressed, then rewind to where we started."""
        self._cursor.mark()
        self._speculative_depth += 1
        try:
            yield
        finally:
            self._speculative_depth -= 1
            self._cursor.release()

    def is_speculative_parsing(self) -> bool:
        return self._speculative_depth > 0

    def add_modifier(self, tag: str) -> None:
        self._modifier_tags.add(tag)

    def warn(self, spec: DiagnosticSpec, token: Token, *parameters: str) -> None:
        self._emit(spec, token.range, parameters)

    def warn_comment(self, spec: DiagnosticSpec) -> None:
        """Warn about the comment as a whole, naming its location."""
        self._emit(spec, self._comment_range, (self.comment_location(),))

    def comment_location(self) -> str:
        path = self._source_path or "<memory>"
        if self._line_index is None:
            return f"{path}@{self._comment_range.start.value}"
        position = self._line_index.line_col(self._comment_range.start)
        return f"{path}:{position.line + 1}"

    def _emit(self, spec: DiagnosticSpec, range: TextRange, parameters: tuple[str, ...]) -> None:
        if self.is_speculative_parsing():
            return
        diagnostic = Diagnostic(
            code=spec.code,
            message=spec.format(*parameters),
            range=range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
            parameters=parameters,
            source_path=self._source_path,
        )
        self._diagnostics.append(diagnostic)
        if self._sink is not None:
            self._sink(diagnostic)

    def finish(self) -> tuple[frozenset[str], list[Diagnostic]]:
        return frozenset(self._modifier_tags), self._diagnostics
