from tsdocpy.diagnostics import codes
from tsdocpy.lexer import LinkTarget, Token, TokenKind
from tsdocpy.model import InlineTagPart, TextPart
from tsdocpy.parser import CommentParserConfig, ParseMode, parse, parse_tokens
from tsdocpy.text import TextRange


def _token(
    kind: TokenKind,
    text: str,
    start: int,
    link_target: LinkTarget | None = None,
    link_text: str | None = None,
) -> Token:
    return Token(kind, text, TextRange.from_offsets(start, start + len(text)), link_target, link_text)


def test_link_in_summary() -> None:
    parsed = parse("{@link Foo}")

    assert parsed.comment.summary == (InlineTagPart(tag="@link", text="Foo"),)
    assert parsed.diagnostics == []


def test_link_between_text() -> None:
    parsed = parse("See {@link Foo} now.")

    assert parsed.comment.summary == (
        TextPart("See "),
        InlineTagPart(tag="@link", text="Foo"),
        TextPart(" now."),
    )


def test_whitespace_between_brace_and_tag() -> None:
    parsed = parse("{  @link Foo }", mode=ParseMode.STRICT)

    assert parsed.comment.summary == (InlineTagPart(tag="@link", text="Foo"),)
    assert parsed.diagnostics == []


def test_inline_tag_without_text() -> None:
    parsed = parse("{@inheritDoc}")

    assert parsed.comment.summary == (InlineTagPart(tag="@inheritDoc", text=""),)


def test_unescaped_open_brace_is_text() -> None:
    parsed = parse("{not a tag}", mode=ParseMode.STRICT)

    assert parsed.comment.summary == (TextPart("{not a tag}"),)
    assert [d.code for d in parsed.diagnostics] == [
        codes.COMMENT_UNESCAPED_OPEN_BRACE.code,
        codes.COMMENT_UNMATCHED_CLOSING_BRACE.code,
    ]


def test_unescaped_braces_quiet_in_permissive_mode() -> None:
    parsed = parse("{not a tag}")

    assert parsed.comment.summary == (TextPart("{not a tag}"),)
    assert parsed.diagnostics == []


def test_open_brace_at_end_of_input() -> None:
    parsed = parse("trailing {", mode=ParseMode.STRICT)

    assert parsed.comment.summary == (TextPart("trailing {"),)
    assert [d.code for d in parsed.diagnostics] == [codes.COMMENT_UNESCAPED_OPEN_BRACE.code]


def test_open_brace_before_code_span() -> None:
    parsed = parse("{`code`}", mode=ParseMode.STRICT)

    assert not any(isinstance(part, InlineTagPart) for part in parsed.comment.summary)
    assert codes.COMMENT_UNESCAPED_OPEN_BRACE.code in [d.code for d in parsed.diagnostics]


def test_unclosed_inline_tag() -> None:
    parsed = parse("See {@link Foo")

    assert parsed.comment.summary == (TextPart("See "), InlineTagPart(tag="@link", text="Foo"))
    assert [d.code for d in parsed.diagnostics] == [codes.COMMENT_INLINE_TAG_NOT_CLOSED.code]


def test_unknown_inline_tag_warns_and_is_kept() -> None:
    parsed = parse("{@whatever thing}")

    assert parsed.comment.summary == (InlineTagPart(tag="@whatever", text="thing"),)
    assert [d.code for d in parsed.diagnostics] == [codes.COMMENT_UNKNOWN_INLINE_TAG.code]
    assert parsed.diagnostics[0].parameters == ("@whatever",)


def test_configured_inline_tag_is_known() -> None:
    config = CommentParserConfig().with_tags(inline_tags=["@whatever"])
    parsed = parse("{@whatever thing}", config)

    assert parsed.diagnostics == []


def test_newline_inside_inline_tag_becomes_space() -> None:
    parsed = parse("{@link Foo\nBar}")

    assert parsed.comment.summary == (InlineTagPart(tag="@link", text="Foo Bar"),)


def test_open_brace_inside_inline_tag_warns() -> None:
    parsed = parse("{@link a {b} c}")

    assert parsed.comment.summary[0] == InlineTagPart(tag="@link", text="a {b")
    assert codes.COMMENT_OPEN_BRACE_IN_INLINE_TAG.code in [d.code for d in parsed.diagnostics]


def test_lowercase_inline_inheritdoc_is_normalized() -> None:
    strict = parse("{@inheritdoc Base}", mode=ParseMode.STRICT)
    permissive = parse("{@inheritdoc Base}")

    assert strict.comment.summary == (InlineTagPart(tag="@inheritDoc", text="Base"),)
    assert [d.code for d in strict.diagnostics] == [codes.COMMENT_INHERITDOC_CASING.code]
    assert permissive.comment.summary == strict.comment.summary
    assert permissive.diagnostics == []


def test_link_target_is_copied_from_tag_token() -> None:
    tokens = [
        _token(TokenKind.OPEN_BRACE, "{", 0),
        _token(TokenKind.TAG, "@link", 1, link_target=42, link_text="Widget"),
        _token(TokenKind.TEXT, " Widget", 6),
        _token(TokenKind.CLOSE_BRACE, "}", 13),
    ]

    parsed = parse_tokens(tokens)

    assert parsed.comment.summary == (
        InlineTagPart(tag="@link", text="Widget", target=42, link_text="Widget"),
    )


def test_inline_tag_in_block_tag_content() -> None:
    parsed = parse("@returns the {@link Widget}.")

    assert parsed.comment.block_tags[0].content == (
        TextPart("the "),
        InlineTagPart(tag="@link", text="Widget"),
        TextPart("."),
    )
