"""JSON persistence for parsed comments.

The layout mirrors the document model with camelCase keys so the output can
be handed to renderers that expect the usual ``summary`` / ``blockTags`` /
``modifierTags`` shape.
"""

from __future__ import annotations

import json
from typing import Any

from tsdocpy.model.comment import (
    CodePart,
    Comment,
    CommentTag,
    DisplayPart,
    DisplayPartKind,
    InlineTagPart,
    TextPart,
)


def display_part_to_dict(part: DisplayPart) -> dict[str, Any]:
    match part:
        case InlineTagPart(tag=tag, text=text, target=target, link_text=link_text):
            data: dict[str, Any] = {"kind": part.kind.value, "tag": tag, "text": text}
            if target is not None:
                data["target"] = target
            if link_text is not None:
                data["tsLinkText"] = link_text
            return data
        case _:
            return {"kind": part.kind.value, "text": part.text}


def display_part_from_dict(data: dict[str, Any]) -> DisplayPart:
    kind = DisplayPartKind(data["kind"])
    match kind:
        case DisplayPartKind.TEXT:
            return TextPart(data["text"])
        case DisplayPartKind.CODE:
            return CodePart(data["text"])
        case DisplayPartKind.INLINE_TAG:
            return InlineTagPart(
                tag=data["tag"],
                text=data["text"],
                target=data.get("target"),
                link_text=data.get("tsLinkText"),
            )


def comment_to_dict(comment: Comment) -> dict[str, Any]:
    data: dict[str, Any] = {"summary": [display_part_to_dict(part) for part in comment.summary]}
    if comment.block_tags:
        data["blockTags"] = [_tag_to_dict(tag) for tag in comment.block_tags]
    if comment.modifier_tags:
        data["modifierTags"] = sorted(comment.modifier_tags)
    return data


def comment_from_dict(data: dict[str, Any]) -> Comment:
    return Comment(
        summary=tuple(display_part_from_dict(part) for part in data.get("summary", ())),
        block_tags=tuple(_tag_from_dict(tag) for tag in data.get("blockTags", ())),
        modifier_tags=frozenset(data.get("modifierTags", ())),
    )


def dumps_comment(comment: Comment, *, indent: int | None = None) -> str:
    return json.dumps(comment_to_dict(comment), indent=indent)


def loads_comment(text: str) -> Comment:
    return comment_from_dict(json.loads(text))


def _tag_to_dict(tag: CommentTag) -> dict[str, Any]:
    data: dict[str, Any] = {"tag": tag.tag}
    if tag.name is not None:
        data["name"] = tag.name
    data["content"] = [display_part_to_dict(part) for part in tag.content]
    return data


def _tag_from_dict(data: dict[str, Any]) -> CommentTag:
    return CommentTag(
        tag=data["tag"],
        content=tuple(display_part_from_dict(part) for part in data.get("content", ())),
        name=data.get("name"),
    )
