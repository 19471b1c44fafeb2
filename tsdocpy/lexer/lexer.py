"""Lexer."""

from dataclasses import dataclass
import re

from tsdocpy.lexer.tokens import Token, TokenKind
from tsdocpy.text import TextRange

_TAG_RE = re.compile(r"@[A-Za-z][A-Za-z0-9_]*")
_BLANK_LINE_RE = re.compile(r"\n[ \t]*\n")
_ESCAPABLE = frozenset("@{}/")


@dataclass(frozen=True, slots=True)
class CommentText:
    """Comment body text plus a map from logical offsets to source offsets.

    ``offsets`` has ``len(text) + 1`` entries; the final entry is the source
    offset just past the body.
    """

    text: str
    offsets: tuple[int, ...]

    @staticmethod
    def plain(text: str, base: int = 0) -> "CommentText":
        """Text that is already free of comment delimiters."""
        return CommentText(text, tuple(range(base, base + len(text) + 1)))

    @staticmethod
    def from_block_comment(source: str, start: int = 0, end: int | None = None) -> "CommentText":
        """Strip ``/**``, ``*/`` and the leading ``*`` gutter of a block comment.

        Offsets stay in the coordinates of ``source``.
        """
        end = len(source) if end is None else end
        pos = start
        while pos < end and source[pos] in " \t\r\n":
            pos += 1
        if source.startswith("/**", pos) and not source.startswith("/**/", pos):
            pos += 3
        elif source.startswith("/*", pos):
            pos += 2
        if pos < end and source[pos] == " ":
            pos += 1

        body_end = end
        while body_end > pos and source[body_end - 1] in " \t\r\n":
            body_end -= 1
        if body_end - 2 >= pos and source[body_end - 2 : body_end] == "*/":
            body_end -= 2

        chars: list[str] = []
        offsets: list[int] = []
        at_line_start = False
        while pos < body_end:
            if at_line_start:
                at_line_start = False
                gutter = pos
                while gutter < body_end and source[gutter] in " \t":
                    gutter += 1
                if gutter < body_end and source[gutter] == "*":
                    pos = gutter + 1
                    if pos < body_end and source[pos] == " ":
                        pos += 1
                    continue
            ch = source[pos]
            if ch == "\r" and pos + 1 < body_end and source[pos + 1] == "\n":
                pos += 1
                continue
            chars.append(ch)
            offsets.append(pos)
            if ch == "\n" or ch == "\r":
                at_line_start = True
            pos += 1
        offsets.append(body_end)
        return CommentText("".join(chars), tuple(offsets))

    def source_range(self, start: int, end: int) -> TextRange:
        return TextRange.from_offsets(self.offsets[start], max(self.offsets[start], self.offsets[end]))


class Lexer:
    """Splits comment text into tokens covering the whole input."""

    def __init__(self, source: CommentText | str) -> None:
        if isinstance(source, str):
            source = CommentText.plain(source)
        self._source = source
        self._text = source.text
        self._position = 0
        self._line_start = 0
        self._tokens: list[Token] = []
        self._text_start: int | None = None
        self._text_parts: list[str] = []

    @property
    def source(self) -> CommentText:
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._text)

    def lex(self) -> list[Token]:
        while not self.is_eof:
            self._lex_token()
        self._flush_text()
        return self._tokens

    def _lex_token(self) -> None:
        ch = self._current_char()

        if ch == "\n" or ch == "\r":
            self._lex_newline()
            return

        if ch == "\\":
            self._lex_escape()
            return

        if ch == "`":
            self._lex_backticks()
            return

        if ch == "{":
            if self._at_type_annotation() and self._lex_type_annotation():
                return
            self._push_single(TokenKind.OPEN_BRACE)
            return

        if ch == "}":
            self._push_single(TokenKind.CLOSE_BRACE)
            return

        if ch == "@" and self._at_word_start():
            match = _TAG_RE.match(self._text, self._position)
            if match is not None:
                self._flush_text()
                self._push(TokenKind.TAG, match.group(0), self._position, match.end())
                self._position = match.end()
                return

        self._append_text(ch, 1)

    def _lex_newline(self) -> None:
        self._flush_text()
        start = self._position
        if self._current_char() == "\r" and self._peek_char() == "\n":
            self._advance(2)
        else:
            self._advance(1)
        self._push(TokenKind.NEWLINE, "\n", start, self._position)
        self._line_start = self._position

    def _lex_escape(self) -> None:
        next_char = self._peek_char()
        if next_char in _ESCAPABLE:
            self._append_text(next_char, 2)
        elif next_char == "`":
            # Markdown needs the backslash; it must never open a code span.
            self._append_text("\\`", 2)
        else:
            self._append_text("\\", 1)

    def _lex_backticks(self) -> None:
        start = self._position
        run = 0
        while self._peek_char(run) == "`":
            run += 1
        fence = "`" * run

        if run >= 3 and not self._text[self._line_start : start].strip():
            close = self._text.find(fence, start + run)
            if close != -1:
                self._push_code(start, close + run)
                return
        else:
            closing = re.compile(rf"(?<!`){fence}(?!`)")
            match = closing.search(self._text, start + run)
            if match is not None and not _BLANK_LINE_RE.search(self._text, start, match.start()):
                self._push_code(start, match.end())
                return

        self._append_text(fence, run)

    def _push_code(self, start: int, end: int) -> None:
        self._flush_text()
        self._push(TokenKind.CODE, self._text[start:end], start, end)
        self._position = end

    def _at_type_annotation(self) -> bool:
        # Only whitespace may sit between the tag and the brace; a newline
        # would have been emitted as its own token.
        if not self._tokens or self._tokens[-1].kind != TokenKind.TAG:
            return False
        return not "".join(self._text_parts).strip()

    def _lex_type_annotation(self) -> bool:
        start = self._position
        head = self._text[start + 1 :].lstrip(" \t")
        if head.startswith("@"):
            return False

        depth = 0
        index = start
        while index < len(self._text):
            ch = self._text[index]
            if ch == "\n" or ch == "\r":
                return False
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    self._flush_text()
                    self._push(TokenKind.TYPE_ANNOTATION, self._text[start : index + 1], start, index + 1)
                    self._position = index + 1
                    return True
            index += 1
        return False

    def _at_word_start(self) -> bool:
        if self._position == 0:
            return True
        previous = self._text[self._position - 1]
        if previous == "{":
            return self._position < 2 or self._text[self._position - 2] != "\\"
        return previous.isspace()

    def _push_single(self, kind: TokenKind) -> None:
        self._flush_text()
        start = self._position
        self._advance(1)
        self._push(kind, self._text[start], start, self._position)

    def _push(self, kind: TokenKind, text: str, start: int, end: int) -> None:
        self._tokens.append(Token(kind, text, self._source.source_range(start, end)))

    def _append_text(self, text: str, width: int) -> None:
        if self._text_start is None:
            self._text_start = self._position
        self._text_parts.append(text)
        self._advance(width)

    def _flush_text(self) -> None:
        if self._text_start is None:
            return
        self._push(TokenKind.TEXT, "".join(self._text_parts), self._text_start, self._position)
        self._text_start = None
        self._text_parts = []

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._text[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._text):
            return "\0"
        return self._text[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def lex_comment(text: str) -> list[Token]:
    """Tokenize comment text that is already free of delimiters."""
    return Lexer(text).lex()


def lex_block_comment(source: str, start: int = 0, end: int | None = None) -> list[Token]:
    """Tokenize a raw ``/** ... */`` comment found in ``source[start:end]``."""
    return Lexer(CommentText.from_block_comment(source, start, end)).lex()


def dump_tokens(tokens: list[Token]) -> None:
    """Print token list with kind, range, and text for debugging."""
    for i, tok in enumerate(tokens):
        extra = f" target={tok.link_target!r}" if tok.link_target is not None else ""
        print(f"{i:03d} {tok.kind.name:<16} range={tok.range.as_tuple()} text={tok.text!r}{extra}")
