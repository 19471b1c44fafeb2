"""Documentation comment parser for JSDoc/TSDoc comments."""

from tsdocpy.diagnostics import Diagnostic
from tsdocpy.model import (
    CodePart,
    Comment,
    CommentTag,
    InlineTagPart,
    TextPart,
)
from tsdocpy.parser import (
    CommentParserConfig,
    JsDocCompatibility,
    ParseMode,
    ParsedComment,
    parse,
    parse_result,
    parse_tokens,
)
from tsdocpy.pipeline import CommentParseResult, CommentSource, parse_comments

__all__ = [
    "CodePart",
    "Comment",
    "CommentParseResult",
    "CommentParserConfig",
    "CommentSource",
    "CommentTag",
    "Diagnostic",
    "InlineTagPart",
    "JsDocCompatibility",
    "ParseMode",
    "ParsedComment",
    "TextPart",
    "parse",
    "parse_comments",
    "parse_result",
    "parse_tokens",
]
