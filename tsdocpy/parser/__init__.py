"""Comment parser (cursor + grammar + post-processing)."""

from tsdocpy.parser.cursor import CursorCheckpoint, TokenCursor
from tsdocpy.parser.grammar import (
    make_code_block,
    normalize_display_parts,
    parse_block_content,
    parse_block_tag,
    parse_comment_body,
    parse_default_block_content,
    parse_example_block,
    parse_inline_tag,
)
from tsdocpy.parser.options import CommentParserConfig, JsDocCompatibility, ParseMode
from tsdocpy.parser.parsed_comment import ParsedComment
from tsdocpy.parser.parser import CommentParser
from tsdocpy.parser.post_process import post_process_comment, split_user_identifier
from tsdocpy.parser.tag_name import ExtractedTagName, extract_tag_name
from tsdocpy.parser.tsdoc import parse, parse_result, parse_tokens, resolve_config

__all__ = [
    "CommentParser",
    "CommentParserConfig",
    "CursorCheckpoint",
    "ExtractedTagName",
    "JsDocCompatibility",
    "ParseMode",
    "ParsedComment",
    "TokenCursor",
    "extract_tag_name",
    "make_code_block",
    "normalize_display_parts",
    "parse",
    "parse_block_content",
    "parse_block_tag",
    "parse_comment_body",
    "parse_default_block_content",
    "parse_example_block",
    "parse_inline_tag",
    "parse_result",
    "parse_tokens",
    "post_process_comment",
    "resolve_config",
    "split_user_identifier",
]
