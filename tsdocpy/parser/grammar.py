"""Comment grammar routines: summary, block tags, special blocks and inline tags."""

from dataclasses import replace
import re

from tsdocpy.diagnostics.codes import (
    COMMENT_EXAMPLE_LITERAL_NAME,
    COMMENT_INHERITDOC_CASING,
    COMMENT_INLINE_TAG_NOT_CLOSED,
    COMMENT_OPEN_BRACE_IN_INLINE_TAG,
    COMMENT_UNESCAPED_OPEN_BRACE,
    COMMENT_UNKNOWN_INLINE_TAG,
    COMMENT_UNMATCHED_CLOSING_BRACE,
    COMMENT_UNRECOGNIZED_TAG_AS_MODIFIER,
)
from tsdocpy.lexer import Token, TokenKind
from tsdocpy.model import (
    CodePart,
    CommentTag,
    DisplayPart,
    InlineTagPart,
    TextPart,
    combine_display_parts,
)
from tsdocpy.parser.cursor import CursorCheckpoint
from tsdocpy.parser.parser import CommentParser
from tsdocpy.parser.tags import (
    INHERIT_DOC_TAG,
    canonical_tag_name,
    is_misspelled_inherit_doc,
)

DEFAULT_TAGS: frozenset[str] = frozenset({"@default", "@defaultValue"})

_CAPTION_BLOCK_RE = re.compile(r"^\s*<caption>(.*?)</caption>\s*(\n|$)")
_CAPTION_NAME_RE = re.compile(r"^<caption>(.*?)</caption>$")


def parse_comment_body(parser: CommentParser) -> tuple[list[DisplayPart], list[CommentTag]]:
    summary = parse_block_content(parser)
    block_tags: list[CommentTag] = []
    while not parser.done():
        block_tags.append(parse_block_tag(parser))
    return summary, block_tags


def parse_block_content(parser: CommentParser) -> list[DisplayPart]:
    """Parse display parts up to the next block tag or the end of input."""
    config = parser.config
    content: list[DisplayPart] = []
    at_new_line = True

    while not parser.done():
        token = parser.peek()
        consume = True

        match token.kind:
            case TokenKind.TEXT | TokenKind.NEWLINE:
                content.append(TextPart(token.text))

            case TokenKind.CODE:
                content.append(CodePart(token.text))

            case TokenKind.TAG:
                tag = _check_inherit_doc_casing(parser, token)
                if tag in config.modifier_tags:
                    parser.add_modifier(tag)
                elif not at_new_line and tag not in config.block_tags:
                    parser.add_modifier(tag)
                    parser.warn(COMMENT_UNRECOGNIZED_TAG_AS_MODIFIER, token, tag)
                else:
                    # Block tag or unknown tag at a line start, the caller handles it.
                    break

            case TokenKind.TYPE_ANNOTATION:
                # Redundant in TS, required in JS; never part of the rendered text.
                pass

            case TokenKind.CLOSE_BRACE:
                if not config.compatibility.ignore_unescaped_braces:
                    parser.warn(COMMENT_UNMATCHED_CLOSING_BRACE, token)
                content.append(TextPart(token.text))

            case TokenKind.OPEN_BRACE:
                parse_inline_tag(parser, content)
                consume = False

            case _:
                raise RuntimeError(f"Unexpected token kind {token.kind!r} in block content")

        if not consume:
            at_new_line = False
            continue

        taken = parser.take()
        if taken.kind == TokenKind.NEWLINE:
            at_new_line = True
        elif not taken.is_whitespace():
            at_new_line = False

    return normalize_display_parts(content)


def normalize_display_parts(content: list[DisplayPart]) -> list[DisplayPart]:
    """Merge adjacent text, trim block and inline tag edges, drop empty text."""
    merged: list[DisplayPart] = []
    for part in content:
        if merged and isinstance(part, TextPart) and isinstance(merged[-1], TextPart):
            merged[-1] = TextPart(merged[-1].text + part.text)
        else:
            merged.append(part)

    result: list[DisplayPart] = []
    last = len(merged) - 1
    for index, part in enumerate(merged):
        text = part.text
        is_inline = isinstance(part, InlineTagPart)
        if index == 0 or is_inline:
            text = text.lstrip()
        if index == last or is_inline:
            text = text.rstrip()

        if isinstance(part, TextPart) and not text:
            continue
        result.append(part if text == part.text else replace(part, text=text))
    return result


def parse_block_tag(parser: CommentParser) -> CommentTag:
    token = parser.take()
    if token.kind != TokenKind.TAG:
        raise RuntimeError("parse_block_tag called not at the start of a block tag")

    tag = canonical_tag_name(token.text)

    if tag == "@example":
        return parse_example_block(parser)

    if tag in DEFAULT_TAGS and parser.config.compatibility.default_tag:
        content = parse_default_block_content(parser)
    else:
        content = parse_block_content(parser)

    return CommentTag(tag=tag, content=tuple(content))


def parse_default_block_content(parser: CommentParser) -> list[DisplayPart]:
    """Legacy JSDoc ``@default`` values are code unless they already contain code.

    Parsing them as rich text would warn about every unescaped brace in an
    object literal default.
    """
    with parser.speculative_parsing():
        content = parse_block_content(parser)
        end = parser.position

    if any(isinstance(part, CodePart) for part in content):
        return parse_block_content(parser)

    block_text = _take_raw_text(parser, end).strip()
    return [CodePart(make_code_block(block_text, parser.config.code_language))]


def parse_example_block(parser: CommentParser) -> CommentTag:
    """``@example``: legacy JSDoc code block, or TSDoc titled example.

    In TSDoc the first line of the block is the example name.
    """
    with parser.speculative_parsing():
        content = parse_block_content(parser)
        end = parser.position

    if not parser.config.compatibility.example_tag or _has_fenced_code(content):
        return _parse_titled_example(parser, end)

    block_text = _take_raw_text(parser, end).strip()
    language = parser.config.code_language

    caption = _CAPTION_BLOCK_RE.match(block_text)
    if caption is not None:
        code = CodePart(make_code_block(block_text[caption.end() :], language))
        return CommentTag(tag="@example", content=(code,), name=caption.group(1))

    return CommentTag(tag="@example", content=(CodePart(make_code_block(block_text, language)),))


def _parse_titled_example(parser: CommentParser, end: CursorCheckpoint) -> CommentTag:
    _skip_blank_lines(parser, end)
    name = _read_example_name(parser, end).strip()
    content = parse_block_content(parser)

    caption = _CAPTION_NAME_RE.match(name)
    if caption is not None:
        name = caption.group(1).strip()
        if content and not _has_fenced_code(content):
            code_text = combine_display_parts(content).strip()
            content = [CodePart(make_code_block(code_text, parser.config.code_language))]

    return CommentTag(tag="@example", content=tuple(content), name=name or None)


def _skip_blank_lines(parser: CommentParser, end: CursorCheckpoint) -> None:
    while parser.before(end):
        token = parser.peek()
        if token.kind != TokenKind.NEWLINE and not token.is_whitespace():
            return
        parser.take()


def _read_example_name(parser: CommentParser, end: CursorCheckpoint) -> str:
    name_parts: list[str] = []
    warned_about_rich_name = False

    while parser.before(end):
        token = parser.peek()
        match token.kind:
            case TokenKind.NEWLINE:
                parser.take()
                break

            case TokenKind.TEXT:
                newline = token.text.find("\n")
                if newline != -1:
                    name_parts.append(token.text[:newline])
                    parser.cursor.skip_chars(newline + 1)
                    break
                name_parts.append(parser.take().text)

            case TokenKind.CODE if not name_parts and token.text.startswith("```"):
                # The block opens with its code; there is no name line.
                break

            case (
                TokenKind.CODE
                | TokenKind.TAG
                | TokenKind.TYPE_ANNOTATION
                | TokenKind.OPEN_BRACE
                | TokenKind.CLOSE_BRACE
            ):
                if not warned_about_rich_name:
                    parser.warn(COMMENT_EXAMPLE_LITERAL_NAME, token)
                    warned_about_rich_name = True
                name_parts.append(parser.take().text)

            case _:
                raise RuntimeError(f"Unexpected token kind {token.kind!r} in example name")

    return "".join(name_parts)


def parse_inline_tag(parser: CommentParser, block: list[DisplayPart]) -> None:
    """Parse ``{@tag ...}`` starting at an open brace, appending to ``block``."""
    open_brace = parser.take()
    warn_braces = not parser.config.compatibility.ignore_unescaped_braces

    # The first non-whitespace token after the brace must be a tag, otherwise
    # what was consumed is plain text.
    if parser.done() or parser.peek().kind not in (TokenKind.TEXT, TokenKind.TAG):
        if warn_braces:
            parser.warn(COMMENT_UNESCAPED_OPEN_BRACE, open_brace)
        block.append(TextPart(open_brace.text))
        return

    tag_token = parser.take()
    if parser.done() or (
        tag_token.kind == TokenKind.TEXT and (tag_token.text.strip() or parser.peek().kind != TokenKind.TAG)
    ):
        if warn_braces:
            parser.warn(COMMENT_UNESCAPED_OPEN_BRACE, open_brace)
        block.append(TextPart(open_brace.text + tag_token.text))
        return

    if tag_token.kind != TokenKind.TAG:
        tag_token = parser.take()

    tag = _check_inherit_doc_casing(parser, tag_token)
    if tag not in parser.config.inline_tags:
        parser.warn(COMMENT_UNKNOWN_INLINE_TAG, tag_token, tag)

    content: list[str] = []
    while not parser.done() and parser.peek().kind != TokenKind.CLOSE_BRACE:
        token = parser.take()
        if token.kind == TokenKind.OPEN_BRACE:
            parser.warn(COMMENT_OPEN_BRACE_IN_INLINE_TAG, token)
        content.append(" " if token.kind == TokenKind.NEWLINE else token.text)

    if parser.done():
        parser.warn(COMMENT_INLINE_TAG_NOT_CLOSED, open_brace)
    else:
        parser.take()

    if tag_token.link_target is not None:
        block.append(
            InlineTagPart(
                tag=tag,
                text="".join(content),
                target=tag_token.link_target,
                link_text=tag_token.link_text,
            )
        )
    else:
        block.append(InlineTagPart(tag=tag, text="".join(content)))


def make_code_block(text: str, language: str) -> str:
    return f"```{language}\n{text}\n```"


def _has_fenced_code(content: list[DisplayPart]) -> bool:
    return any(isinstance(part, CodePart) and part.text.startswith("```") for part in content)


def _take_raw_text(parser: CommentParser, end: CursorCheckpoint) -> str:
    parts: list[str] = []
    while parser.before(end):
        parts.append(parser.take().text)
    return "".join(parts)


def _check_inherit_doc_casing(parser: CommentParser, token: Token) -> str:
    if not is_misspelled_inherit_doc(token.text):
        return token.text
    if not parser.config.compatibility.inherit_doc_tag:
        parser.warn(COMMENT_INHERITDOC_CASING, token)
    return INHERIT_DOC_TAG
