"""Parsed comment document model."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import TypeAlias

from tsdocpy.lexer.tokens import LinkTarget


class DisplayPartKind(StrEnum):
    TEXT = "text"
    CODE = "code"
    INLINE_TAG = "inline-tag"


@dataclass(frozen=True, slots=True)
class TextPart:
    text: str

    @property
    def kind(self) -> DisplayPartKind:
        return DisplayPartKind.TEXT


@dataclass(frozen=True, slots=True)
class CodePart:
    """Code span or fenced block, text includes the backticks."""

    text: str

    @property
    def kind(self) -> DisplayPartKind:
        return DisplayPartKind.CODE


@dataclass(frozen=True, slots=True)
class InlineTagPart:
    """``{@tag text}`` span. ``target`` is filled in by link resolution."""

    tag: str
    text: str
    target: LinkTarget | None = None
    link_text: str | None = None

    @property
    def kind(self) -> DisplayPartKind:
        return DisplayPartKind.INLINE_TAG


DisplayPart: TypeAlias = TextPart | CodePart | InlineTagPart


@dataclass(frozen=True, slots=True)
class CommentTag:
    """A block tag such as ``@param`` or ``@returns``."""

    tag: str
    content: tuple[DisplayPart, ...] = ()
    name: str | None = None


@dataclass(frozen=True, slots=True)
class Comment:
    """Immutable parsed documentation comment."""

    summary: tuple[DisplayPart, ...] = ()
    block_tags: tuple[CommentTag, ...] = ()
    modifier_tags: frozenset[str] = frozenset()

    def has_modifier(self, tag: str) -> bool:
        return tag in self.modifier_tags

    def get_tag(self, tag: str) -> CommentTag | None:
        for block in self.block_tags:
            if block.tag == tag:
                return block
        return None

    def get_tags(self, tag: str) -> tuple[CommentTag, ...]:
        return tuple(block for block in self.block_tags if block.tag == tag)

    def get_identified_tag(self, name: str, tag: str) -> CommentTag | None:
        """Find e.g. the ``@param`` tag documenting parameter ``name``."""
        for block in self.block_tags:
            if block.tag == tag and block.name == name:
                return block
        return None

    def is_empty(self) -> bool:
        return not self.summary and not self.block_tags and not self.modifier_tags

    def has_visible_component(self) -> bool:
        return any(part.text.strip() for part in self.summary) or bool(self.block_tags)

    def iter_display_parts(self) -> Iterator[DisplayPart]:
        yield from self.summary
        for block in self.block_tags:
            yield from block.content

    def clone(self) -> Comment:
        """Copy for inheritance, so later link resolution cannot alias parts."""
        return Comment(
            summary=tuple(replace(part) for part in self.summary),
            block_tags=tuple(
                replace(block, content=tuple(replace(part) for part in block.content))
                for block in self.block_tags
            ),
            modifier_tags=frozenset(self.modifier_tags),
        )

    def without_tags(self, tag: str) -> Comment:
        return replace(self, block_tags=tuple(block for block in self.block_tags if block.tag != tag))

    def without_modifier(self, tag: str) -> Comment:
        return replace(self, modifier_tags=self.modifier_tags - {tag})


def combine_display_parts(parts: Iterable[DisplayPart]) -> str:
    """Render display parts back to comment text."""
    result: list[str] = []
    for part in parts:
        match part:
            case InlineTagPart(tag=tag, text=text):
                result.append(f"{{{tag} {text}}}" if text else f"{{{tag}}}")
            case _:
                result.append(part.text)
    return "".join(result)
