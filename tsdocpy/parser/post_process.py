"""Per-comment validation run after the whole comment is parsed.

Sets identifier names on tags that carry one, and enforces the cardinality
rules for ``@remarks``, ``@returns`` and inheritance directives.
"""

from dataclasses import replace

from tsdocpy.diagnostics.codes import (
    COMMENT_INLINE_INHERITDOC_IN_BLOCK_TAG,
    COMMENT_MULTIPLE_INHERITDOC,
    COMMENT_MULTIPLE_REMARKS,
    COMMENT_MULTIPLE_RETURNS,
    COMMENT_REMARKS_OVERWRITTEN_BY_INHERITDOC,
    COMMENT_SUMMARY_OVERWRITTEN_BY_INHERITDOC,
)
from tsdocpy.model import CommentTag, DisplayPart, InlineTagPart, TextPart
from tsdocpy.parser.grammar import normalize_display_parts
from tsdocpy.parser.parser import CommentParser
from tsdocpy.parser.tag_name import extract_tag_name
from tsdocpy.parser.tags import HAS_USER_IDENTIFIER, INHERIT_DOC_TAG


def post_process_comment(
    parser: CommentParser,
    summary: list[DisplayPart],
    block_tags: list[CommentTag],
) -> tuple[list[DisplayPart], list[CommentTag]]:
    tags = [split_user_identifier(tag) for tag in block_tags]

    for tag in tags:
        if any(_is_inline_inherit_doc(part) for part in tag.content):
            parser.warn_comment(COMMENT_INLINE_INHERITDOC_IN_BLOCK_TAG)

    remarks = [tag for tag in tags if tag.tag == "@remarks"]
    if len(remarks) > 1:
        parser.warn_comment(COMMENT_MULTIPLE_REMARKS)
        tags = _keep_first(tags, remarks)

    # The guard checks the @returns count. Checking the @remarks count here
    # would let duplicate @returns tags through.
    returns = [tag for tag in tags if tag.tag == "@returns"]
    if len(returns) > 1:
        parser.warn_comment(COMMENT_MULTIPLE_RETURNS)
        tags = _keep_first(tags, returns)

    block_inherit = [tag for tag in tags if tag.tag == INHERIT_DOC_TAG]
    inline_inherit = [part for part in summary if _is_inline_inherit_doc(part)]

    if len(block_inherit) + len(inline_inherit) > 1:
        parser.warn_comment(COMMENT_MULTIPLE_INHERITDOC)
        keep = [*inline_inherit, *block_inherit][0]
        summary = normalize_display_parts(
            [part for part in summary if part is keep or not _is_inline_inherit_doc(part)]
        )
        tags = [tag for tag in tags if tag is keep or tag.tag != INHERIT_DOC_TAG]

    if block_inherit or inline_inherit:
        if any(not isinstance(part, InlineTagPart) and part.text.strip() for part in summary):
            parser.warn_comment(COMMENT_SUMMARY_OVERWRITTEN_BY_INHERITDOC)
        if remarks:
            parser.warn_comment(COMMENT_REMARKS_OVERWRITTEN_BY_INHERITDOC)

    return summary, tags


def split_user_identifier(tag: CommentTag) -> CommentTag:
    """Move the leading identifier of ``@param``-like tags into ``name``."""
    if tag.tag not in HAS_USER_IDENTIFIER or not tag.content:
        return tag

    first = tag.content[0]
    if not isinstance(first, TextPart):
        return tag

    extracted = extract_tag_name(first.text)
    rest = tag.content[1:]
    content = (TextPart(extracted.remaining), *rest) if extracted.remaining else rest
    return replace(tag, name=extracted.name or None, content=content)


def _keep_first(tags: list[CommentTag], group: list[CommentTag]) -> list[CommentTag]:
    dropped = {id(tag) for tag in group[1:]}
    return [tag for tag in tags if id(tag) not in dropped]


def _is_inline_inherit_doc(part: DisplayPart) -> bool:
    return isinstance(part, InlineTagPart) and part.tag == INHERIT_DOC_TAG
