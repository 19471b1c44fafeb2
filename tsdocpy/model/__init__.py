"""Comment document model."""

from tsdocpy.model.comment import (
    CodePart,
    Comment,
    CommentTag,
    DisplayPart,
    DisplayPartKind,
    InlineTagPart,
    TextPart,
    combine_display_parts,
)
from tsdocpy.model.serialize import (
    comment_from_dict,
    comment_to_dict,
    display_part_from_dict,
    display_part_to_dict,
    dumps_comment,
    loads_comment,
)

__all__ = [
    "CodePart",
    "Comment",
    "CommentTag",
    "DisplayPart",
    "DisplayPartKind",
    "InlineTagPart",
    "TextPart",
    "combine_display_parts",
    "comment_from_dict",
    "comment_to_dict",
    "display_part_from_dict",
    "display_part_to_dict",
    "dumps_comment",
    "loads_comment",
]
