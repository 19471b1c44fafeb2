"""Parse result carriers and batch entrypoints."""

from tsdocpy.pipeline.batch import CommentSource, parse_comments
from tsdocpy.pipeline.result import CommentParseResult

__all__ = [
    "CommentParseResult",
    "CommentSource",
    "parse_comments",
]
