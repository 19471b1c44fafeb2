"""Token cursor with single-level mark/release backtracking."""

from collections.abc import Iterable
from dataclasses import dataclass

from tsdocpy.lexer.tokens import Token
from tsdocpy.text import TextRange


@dataclass(frozen=True, slots=True, order=True)
class CursorCheckpoint:
    index: int
    offset: int = 0


class TokenCursor:
    """Read position over a materialized token sequence.

    ``offset`` counts characters of the current token that were consumed with
    ``skip_chars``; tokens themselves are never modified.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: tuple[Token, ...] = tuple(tokens)
        self._index = 0
        self._offset = 0
        self._mark: CursorCheckpoint | None = None

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    @property
    def position(self) -> CursorCheckpoint:
        return CursorCheckpoint(self._index, self._offset)

    @property
    def is_marked(self) -> bool:
        return self._mark is not None

    def done(self) -> bool:
        return self._index >= len(self._tokens)

    def peek(self) -> Token:
        if self.done():
            raise RuntimeError("peek() called on an exhausted token cursor")
        token = self._tokens[self._index]
        if self._offset == 0:
            return token
        start = min(token.range.start.value + self._offset, token.range.end.value)
        return Token(
            kind=token.kind,
            text=token.text[self._offset :],
            range=TextRange.from_offsets(start, token.range.end.value),
            link_target=token.link_target,
            link_text=token.link_text,
        )

    def take(self) -> Token:
        token = self.peek()
        self._index += 1
        self._offset = 0
        return token

    def skip_chars(self, count: int) -> None:
        """Consume the first ``count`` characters of the current token."""
        token = self.peek()
        if count >= len(token.text):
            self.take()
        else:
            self._offset += count

    def mark(self) -> None:
        if self._mark is not None:
            raise RuntimeError("Can only mark one location for backtracking at a time")
        self._mark = self.position

    def release(self) -> None:
        if self._mark is None:
            raise RuntimeError("release() called without a matching mark()")
        self.rewind(self._mark)
        self._mark = None

    def rewind(self, checkpoint: CursorCheckpoint) -> None:
        self._index = checkpoint.index
        self._offset = checkpoint.offset
