import pytest

from tsdocpy.parser import ExtractedTagName, extract_tag_name


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("foo The foo.", ExtractedTagName("foo", "The foo.")),
        ("  foo   The foo.", ExtractedTagName("foo", "The foo.")),
        ("foo - The foo.", ExtractedTagName("foo", "The foo.")),
        ("foo -", ExtractedTagName("foo", "")),
        ("foo", ExtractedTagName("foo", "")),
        ("[foo] Optional.", ExtractedTagName("foo", "Optional.")),
        ("[foo=1] - Defaults to one.", ExtractedTagName("foo", "Defaults to one.")),
        ("[ foo = [1, 2] ] List.", ExtractedTagName("foo", "List.")),
        ("opts.name The name.", ExtractedTagName("opts.name", "The name.")),
        ("foo -bar", ExtractedTagName("foo", "-bar")),
    ],
)
def test_extract_tag_name(text: str, expected: ExtractedTagName) -> None:
    assert extract_tag_name(text) == expected


def test_unclosed_bracket_is_a_plain_word() -> None:
    assert extract_tag_name("[foo bar") == ExtractedTagName("[foo", "bar")


def test_empty_text() -> None:
    assert extract_tag_name("") == ExtractedTagName("", "")
