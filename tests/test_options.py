import pytest

from tsdocpy.parser import CommentParserConfig, JsDocCompatibility, ParseMode, resolve_config
from tsdocpy.parser.tags import (
    DEFAULT_BLOCK_TAGS,
    DEFAULT_INLINE_TAGS,
    DEFAULT_MODIFIER_TAGS,
    canonical_tag_name,
    is_misspelled_inherit_doc,
)


def test_permissive_is_default() -> None:
    config = CommentParserConfig()

    assert config.mode == ParseMode.PERMISSIVE
    assert config.compatibility == JsDocCompatibility()
    assert config.block_tags == DEFAULT_BLOCK_TAGS
    assert config.code_language == "ts"


def test_strict_turns_off_every_compatibility_flag() -> None:
    config = CommentParserConfig.for_mode(ParseMode.STRICT)

    assert config.mode == ParseMode.STRICT
    assert config.compatibility == JsDocCompatibility(
        example_tag=False,
        default_tag=False,
        inherit_doc_tag=False,
        ignore_unescaped_braces=False,
    )


def test_tag_names_must_start_with_at() -> None:
    with pytest.raises(ValueError):
        CommentParserConfig(block_tags=frozenset({"param"}))
    with pytest.raises(ValueError):
        CommentParserConfig().with_tags(modifier_tags=["@"])


def test_with_tags_extends_vocabularies() -> None:
    config = CommentParserConfig().with_tags(
        block_tags=["@widget"],
        inline_tags=["@widgetLink"],
        modifier_tags=["@stable"],
    )

    assert "@widget" in config.block_tags
    assert "@widgetLink" in config.inline_tags
    assert "@stable" in config.modifier_tags
    assert DEFAULT_BLOCK_TAGS <= config.block_tags


def test_from_mapping_tag_lists() -> None:
    config = CommentParserConfig.from_mapping(
        {
            "blockTags": ["@param", "@returns"],
            "inlineTags": ["@link"],
            "modifierTags": ["@beta"],
            "codeLanguage": "js",
        }
    )

    assert config.block_tags == frozenset({"@param", "@returns"})
    assert config.inline_tags == frozenset({"@link"})
    assert config.modifier_tags == frozenset({"@beta"})
    assert config.code_language == "js"


def test_from_mapping_defaults() -> None:
    config = CommentParserConfig.from_mapping({})

    assert config == CommentParserConfig()
    assert config.inline_tags == DEFAULT_INLINE_TAGS
    assert config.modifier_tags == DEFAULT_MODIFIER_TAGS


def test_from_mapping_compatibility_bool() -> None:
    config = CommentParserConfig.from_mapping({"jsDocCompatibility": False})

    assert config.compatibility == JsDocCompatibility.for_mode(ParseMode.STRICT)


def test_from_mapping_compatibility_flags() -> None:
    config = CommentParserConfig.from_mapping(
        {"mode": "strict", "jsDocCompatibility": {"exampleTag": True, "ignoreUnescapedBraces": True}}
    )

    assert config.mode == ParseMode.STRICT
    assert config.compatibility == JsDocCompatibility(
        example_tag=True,
        default_tag=False,
        inherit_doc_tag=False,
        ignore_unescaped_braces=True,
    )


def test_from_mapping_rejects_unknown_compatibility_key() -> None:
    with pytest.raises(ValueError):
        CommentParserConfig.from_mapping({"jsDocCompatibility": {"exampleTags": True}})


def test_resolve_config() -> None:
    config = CommentParserConfig.for_mode(ParseMode.STRICT)

    assert resolve_config(None, None) == CommentParserConfig()
    assert resolve_config(config, None) is config
    assert resolve_config(None, ParseMode.STRICT) == config
    with pytest.raises(ValueError):
        resolve_config(config, ParseMode.STRICT)


def test_tag_name_normalization() -> None:
    assert canonical_tag_name("@return") == "@returns"
    assert canonical_tag_name("@INHERITDOC") == "@inheritDoc"
    assert canonical_tag_name("@param") == "@param"
    assert is_misspelled_inherit_doc("@inheritdoc")
    assert not is_misspelled_inherit_doc("@inheritDoc")
