from tsdocpy.diagnostics import codes
from tsdocpy.model import CommentTag, InlineTagPart, TextPart
from tsdocpy.parser import ParsedComment, parse, split_user_identifier


def _codes(parsed: ParsedComment) -> list[str]:
    return [diagnostic.code for diagnostic in parsed.diagnostics]


def test_duplicate_returns_keep_first() -> None:
    parsed = parse("@returns first\n@returns second")

    assert parsed.comment.get_tags("@returns") == (CommentTag(tag="@returns", content=(TextPart("first"),)),)
    assert _codes(parsed) == [codes.COMMENT_MULTIPLE_RETURNS.code]


def test_duplicate_returns_collapse_without_any_remarks() -> None:
    # The collapse is guarded by the @returns count. Guarding it with the
    # @remarks count would keep both tags here.
    parsed = parse("Summary.\n@returns first\n@return second")

    assert len(parsed.comment.get_tags("@returns")) == 1
    assert parsed.comment.get_tags("@remarks") == ()
    assert _codes(parsed) == [codes.COMMENT_MULTIPLE_RETURNS.code]


def test_duplicate_remarks_keep_first() -> None:
    parsed = parse("@remarks one\n@param x - the x\n@remarks two")

    assert [tag.tag for tag in parsed.comment.block_tags] == ["@remarks", "@param"]
    assert parsed.comment.get_tag("@remarks") == CommentTag(tag="@remarks", content=(TextPart("one"),))
    assert _codes(parsed) == [codes.COMMENT_MULTIPLE_REMARKS.code]


def test_cardinality_warning_names_comment_location() -> None:
    parsed = parse("@returns a\n@returns b", source_path="src/widget.ts")

    diagnostic = parsed.diagnostics[0]
    assert diagnostic.parameters == ("src/widget.ts:1",)
    assert diagnostic.message.endswith("in comment at src/widget.ts:1.")
    assert diagnostic.source_path == "src/widget.ts"


def test_block_comment_location_uses_file_line() -> None:
    src = "const a = 1;\n\n/**\n * @remarks a\n * @remarks b\n */"
    parsed = parse(src, block_comment=True, start=src.index("/**"), source_path="a.ts")

    assert parsed.diagnostics[0].parameters == ("a.ts:3",)


def test_multiple_inheritdoc_keeps_first_across_summary_and_tags() -> None:
    parsed = parse("{@inheritDoc Base}\n@inheritDoc Other")

    assert parsed.comment.summary == (InlineTagPart(tag="@inheritDoc", text="Base"),)
    assert parsed.comment.get_tags("@inheritDoc") == ()
    assert _codes(parsed) == [codes.COMMENT_MULTIPLE_INHERITDOC.code]


def test_multiple_block_inheritdoc() -> None:
    parsed = parse("@inheritDoc First\n@inheritDoc Second")

    assert parsed.comment.get_tags("@inheritDoc") == (CommentTag(tag="@inheritDoc", name="First"),)
    assert _codes(parsed) == [codes.COMMENT_MULTIPLE_INHERITDOC.code]


def test_summary_overwritten_by_inheritdoc() -> None:
    parsed = parse("Summary text.\n@inheritDoc Base")

    assert _codes(parsed) == [codes.COMMENT_SUMMARY_OVERWRITTEN_BY_INHERITDOC.code]


def test_remarks_overwritten_by_inheritdoc() -> None:
    parsed = parse("@inheritDoc Base\n@remarks More.")

    assert _codes(parsed) == [codes.COMMENT_REMARKS_OVERWRITTEN_BY_INHERITDOC.code]


def test_inline_inheritdoc_in_block_tag() -> None:
    parsed = parse("@param x - see {@inheritDoc Foo}")

    assert _codes(parsed) == [codes.COMMENT_INLINE_INHERITDOC_IN_BLOCK_TAG.code]
    assert parsed.diagnostics[0].parameters == ("<memory>:1",)


def test_split_user_identifier() -> None:
    tag = CommentTag(tag="@typeParam", content=(TextPart("T - the element type"),))

    assert split_user_identifier(tag) == CommentTag(
        tag="@typeParam",
        content=(TextPart("the element type"),),
        name="T",
    )


def test_split_user_identifier_drops_empty_part() -> None:
    tag = CommentTag(tag="@param", content=(TextPart("x"), InlineTagPart(tag="@link", text="Y")))

    assert split_user_identifier(tag) == CommentTag(
        tag="@param",
        content=(InlineTagPart(tag="@link", text="Y"),),
        name="x",
    )


def test_split_user_identifier_ignores_other_tags() -> None:
    tag = CommentTag(tag="@returns", content=(TextPart("value here"),))

    assert split_user_identifier(tag) is tag


def test_split_user_identifier_needs_leading_text() -> None:
    tag = CommentTag(tag="@param", content=(InlineTagPart(tag="@link", text="Y"),))

    assert split_user_identifier(tag) is tag
