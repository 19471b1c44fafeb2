"""Parser modes and configuration options."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Any

from tsdocpy.parser.tags import (
    DEFAULT_BLOCK_TAGS,
    DEFAULT_INLINE_TAGS,
    DEFAULT_MODIFIER_TAGS,
)


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class JsDocCompatibility:
    """Flags that relax TSDoc rules for legacy JSDoc comments."""

    # Treat @example blocks as code unless they contain a fenced block.
    example_tag: bool = True
    # Treat @default/@defaultValue blocks as code unless they contain code.
    default_tag: bool = True
    # Accept @inheritdoc without warning.
    inherit_doc_tag: bool = True
    # Do not warn about unescaped { and } characters.
    ignore_unescaped_braces: bool = True

    @staticmethod
    def for_mode(mode: ParseMode) -> "JsDocCompatibility":
        if mode == ParseMode.STRICT:
            return JsDocCompatibility(
                example_tag=False,
                default_tag=False,
                inherit_doc_tag=False,
                ignore_unescaped_braces=False,
            )
        return JsDocCompatibility()


_COMPATIBILITY_KEYS: dict[str, str] = {
    "exampleTag": "example_tag",
    "defaultTag": "default_tag",
    "inheritDocTag": "inherit_doc_tag",
    "ignoreUnescapedBraces": "ignore_unescaped_braces",
}


@dataclass(frozen=True, slots=True)
class CommentParserConfig:
    """Tag vocabularies and compatibility flags shared read-only by every parse."""

    mode: ParseMode = ParseMode.PERMISSIVE
    block_tags: frozenset[str] = DEFAULT_BLOCK_TAGS
    inline_tags: frozenset[str] = DEFAULT_INLINE_TAGS
    modifier_tags: frozenset[str] = DEFAULT_MODIFIER_TAGS
    compatibility: JsDocCompatibility = field(default_factory=JsDocCompatibility)
    code_language: str = "ts"

    def __post_init__(self) -> None:
        for group in (self.block_tags, self.inline_tags, self.modifier_tags):
            _validate_tag_names(group)

    @staticmethod
    def for_mode(mode: ParseMode) -> "CommentParserConfig":
        return CommentParserConfig(mode=mode, compatibility=JsDocCompatibility.for_mode(mode))

    @staticmethod
    def from_mapping(options: Mapping[str, Any]) -> "CommentParserConfig":
        """Build a config from the ``blockTags``/``inlineTags``/``modifierTags`` option shape.

        Missing keys fall back to the permissive defaults.
        """
        base = CommentParserConfig.for_mode(ParseMode(options.get("mode", ParseMode.PERMISSIVE)))

        compatibility = base.compatibility
        raw_compatibility = options.get("jsDocCompatibility")
        if isinstance(raw_compatibility, bool):
            compatibility = JsDocCompatibility(
                example_tag=raw_compatibility,
                default_tag=raw_compatibility,
                inherit_doc_tag=raw_compatibility,
                ignore_unescaped_braces=raw_compatibility,
            )
        elif raw_compatibility is not None:
            unknown = set(raw_compatibility) - set(_COMPATIBILITY_KEYS)
            if unknown:
                raise ValueError(f"Unknown jsDocCompatibility keys: {sorted(unknown)}")
            compatibility = replace(
                compatibility,
                **{_COMPATIBILITY_KEYS[key]: bool(value) for key, value in raw_compatibility.items()},
            )

        return replace(
            base,
            block_tags=frozenset(options.get("blockTags", base.block_tags)),
            inline_tags=frozenset(options.get("inlineTags", base.inline_tags)),
            modifier_tags=frozenset(options.get("modifierTags", base.modifier_tags)),
            compatibility=compatibility,
            code_language=options.get("codeLanguage", base.code_language),
        )

    def with_tags(
        self,
        *,
        block_tags: Iterable[str] = (),
        inline_tags: Iterable[str] = (),
        modifier_tags: Iterable[str] = (),
    ) -> "CommentParserConfig":
        """Return a copy with extra tags added to each vocabulary."""
        return replace(
            self,
            block_tags=self.block_tags | frozenset(block_tags),
            inline_tags=self.inline_tags | frozenset(inline_tags),
            modifier_tags=self.modifier_tags | frozenset(modifier_tags),
        )


def _validate_tag_names(tags: frozenset[str]) -> None:
    for tag in tags:
        if not tag.startswith("@") or len(tag) < 2:
            raise ValueError(f"Tag names must start with '@', got {tag!r}")
