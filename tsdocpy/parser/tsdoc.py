"""High-level parse entrypoints for documentation comments."""

from __future__ import annotations

from collections.abc import Iterable
import logging
from typing import TYPE_CHECKING

from tsdocpy.diagnostics import DiagnosticSink
from tsdocpy.lexer import CommentText, Lexer, Token
from tsdocpy.model import Comment
from tsdocpy.parser.cursor import TokenCursor
from tsdocpy.parser.grammar import parse_comment_body
from tsdocpy.parser.options import CommentParserConfig, ParseMode
from tsdocpy.parser.parsed_comment import ParsedComment
from tsdocpy.parser.parser import CommentParser
from tsdocpy.parser.post_process import post_process_comment
from tsdocpy.text import LineIndex

if TYPE_CHECKING:
    from tsdocpy.pipeline import CommentParseResult

LOGGER = logging.getLogger(__name__)


def resolve_config(
    config: CommentParserConfig | None,
    mode: ParseMode | None,
) -> CommentParserConfig:
    if mode is not None and config is not None:
        raise ValueError("Pass either config or mode, not both")

    if config is not None:
        return config

    if mode is not None:
        return CommentParserConfig.for_mode(mode)

    return CommentParserConfig()


def parse_tokens(
    tokens: Iterable[Token],
    config: CommentParserConfig | None = None,
    *,
    mode: ParseMode | None = None,
    source_path: str | None = None,
    line_index: LineIndex | None = None,
    sink: DiagnosticSink | None = None,
) -> ParsedComment:
    """Parse an already tokenized comment."""
    resolved_config = resolve_config(config=config, mode=mode)
    parser = CommentParser(
        TokenCursor(tokens),
        resolved_config,
        source_path=source_path,
        line_index=line_index,
        sink=sink,
    )

    summary, block_tags = parse_comment_body(parser)
    summary, block_tags = post_process_comment(parser, summary, block_tags)
    modifier_tags, diagnostics = parser.finish()

    comment = Comment(
        summary=tuple(summary),
        block_tags=tuple(block_tags),
        modifier_tags=modifier_tags,
    )
    LOGGER.debug(
        "Parsed comment at %s: %d block tags, %d diagnostics",
        parser.comment_location(),
        len(comment.block_tags),
        len(diagnostics),
    )
    return ParsedComment(comment=comment, diagnostics=diagnostics)


def parse(
    text: str,
    config: CommentParserConfig | None = None,
    *,
    mode: ParseMode | None = None,
    source_path: str | None = None,
    block_comment: bool = False,
    start: int = 0,
    end: int | None = None,
    sink: DiagnosticSink | None = None,
) -> ParsedComment:
    """Tokenize and parse comment text.

    With ``block_comment=True`` the text (or ``text[start:end]``) is a raw
    ``/** ... */`` comment; diagnostic ranges then point into ``text``.
    """
    if block_comment:
        comment_text = CommentText.from_block_comment(text, start, end)
    else:
        comment_text = CommentText.plain(text[start:end], base=start)

    tokens = Lexer(comment_text).lex()
    return parse_tokens(
        tokens,
        config,
        mode=mode,
        source_path=source_path,
        line_index=LineIndex(text),
        sink=sink,
    )


def parse_result(
    text: str,
    config: CommentParserConfig | None = None,
    *,
    mode: ParseMode | None = None,
    source_path: str | None = None,
    block_comment: bool = False,
    sink: DiagnosticSink | None = None,
) -> CommentParseResult:
    from tsdocpy.pipeline import CommentParseResult

    resolved_config = resolve_config(config=config, mode=mode)
    parsed = parse(
        text,
        resolved_config,
        source_path=source_path,
        block_comment=block_comment,
        sink=sink,
    )
    return CommentParseResult(
        source_text=text,
        source_path=source_path,
        parsed=parsed,
        config=resolved_config,
    )
