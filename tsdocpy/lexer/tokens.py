"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import TypeAlias

from tsdocpy.text import TextRange, TextSize

LinkTarget: TypeAlias = str | int
"""Resolved link target: a reflection id or an external URL."""


class TokenKind(IntEnum):
    # -------------------------
    # Text
    # -------------------------
    TEXT = 1
    NEWLINE = 2
    CODE = 3  # fenced block or inline code span, verbatim

    # -------------------------
    # Tags
    # -------------------------
    TAG = 10  # @name
    TYPE_ANNOTATION = 11  # legacy JSDoc {Type} after a tag

    # -------------------------
    # Punctuation
    # -------------------------
    OPEN_BRACE = 20  # {
    CLOSE_BRACE = 21  # }


@dataclass(frozen=True, slots=True)
class Token:
    """A single comment token.

    ``text`` is the logical text of the token (escapes resolved, comment gutter
    removed), ``range`` covers the token in the source file.
    """

    kind: TokenKind
    text: str
    range: TextRange
    link_target: LinkTarget | None = None
    link_text: str | None = None

    @property
    def position(self) -> TextSize:
        return self.range.start

    def is_whitespace(self) -> bool:
        return self.kind == TokenKind.TEXT and not self.text.strip()
