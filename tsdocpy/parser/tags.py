"""Default tag vocabularies (TSDoc standard tags plus common JSDoc/TypeDoc tags)."""

from types import MappingProxyType
from typing import Final, Mapping

TSDOC_BLOCK_TAGS: Final[frozenset[str]] = frozenset(
    {
        "@deprecated",
        "@param",
        "@remarks",
        "@returns",
        "@throws",
        "@privateRemarks",
        "@defaultValue",
        "@typeParam",
    }
)

TSDOC_INLINE_TAGS: Final[frozenset[str]] = frozenset(
    {
        "@link",
        "@inheritDoc",
        "@label",
    }
)

TSDOC_MODIFIER_TAGS: Final[frozenset[str]] = frozenset(
    {
        "@alpha",
        "@beta",
        "@eventProperty",
        "@experimental",
        "@internal",
        "@override",
        "@packageDocumentation",
        "@public",
        "@readonly",
        "@sealed",
        "@virtual",
    }
)

DEFAULT_BLOCK_TAGS: Final[frozenset[str]] = TSDOC_BLOCK_TAGS | frozenset(
    {
        "@author",
        "@callback",
        "@category",
        "@categoryDescription",
        "@default",
        "@document",
        "@example",
        "@group",
        "@groupDescription",
        "@import",
        "@inheritDoc",
        "@license",
        "@module",
        "@prop",
        "@property",
        "@return",
        "@satisfies",
        "@see",
        "@since",
        "@summary",
        "@template",
        "@type",
        "@typedef",
    }
)

DEFAULT_INLINE_TAGS: Final[frozenset[str]] = TSDOC_INLINE_TAGS | frozenset(
    {
        "@linkcode",
        "@linkplain",
        "@include",
        "@includeCode",
    }
)

DEFAULT_MODIFIER_TAGS: Final[frozenset[str]] = TSDOC_MODIFIER_TAGS | frozenset(
    {
        "@abstract",
        "@class",
        "@enum",
        "@event",
        "@expand",
        "@function",
        "@hidden",
        "@hideconstructor",
        "@ignore",
        "@inline",
        "@interface",
        "@namespace",
        "@overload",
        "@private",
        "@protected",
        "@showCategories",
        "@hideCategories",
        "@showGroups",
        "@hideGroups",
        "@useDeclaredType",
    }
)

HAS_USER_IDENTIFIER: Final[frozenset[str]] = frozenset(
    {
        "@callback",
        "@param",
        "@prop",
        "@property",
        "@template",
        "@typedef",
        "@typeParam",
        "@inheritDoc",
    }
)

TAG_ALIASES: Final[Mapping[str, str]] = MappingProxyType({"@return": "@returns"})

INHERIT_DOC_TAG: Final[str] = "@inheritDoc"


def is_misspelled_inherit_doc(tag: str) -> bool:
    return tag != INHERIT_DOC_TAG and tag.lower() == INHERIT_DOC_TAG.lower()


def canonical_tag_name(tag: str) -> str:
    """Normalize ``@inheritdoc`` casing and apply tag aliases."""
    if is_misspelled_inherit_doc(tag):
        return INHERIT_DOC_TAG
    return TAG_ALIASES.get(tag, tag)
