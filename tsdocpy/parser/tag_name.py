"""Identifier extraction for tags such as ``@param name description``."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ExtractedTagName:
    name: str
    remaining: str


def extract_tag_name(text: str) -> ExtractedTagName:
    """Split the leading identifier off a tag's first text part.

    Accepts ``name``, ``[name]`` and ``[name=default]`` (JSDoc optional
    parameters) and drops a ``-`` separator between the name and the text.
    """
    pos = _skip_whitespace(text, 0)

    bracketed = _extract_bracketed(text, pos) if text.startswith("[", pos) else None
    if bracketed is not None:
        name, pos = bracketed
    else:
        start = pos
        while pos < len(text) and not text[pos].isspace():
            pos += 1
        name = text[start:pos]

    remaining = text[pos:].lstrip()
    if remaining == "-" or remaining.startswith("- "):
        remaining = remaining[1:].lstrip()
    return ExtractedTagName(name=name, remaining=remaining)


def _extract_bracketed(text: str, pos: int) -> tuple[str, int] | None:
    depth = 0
    name_end: int | None = None
    index = pos
    while index < len(text):
        ch = text[index]
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
            if depth == 0:
                end = index if name_end is None else name_end
                return text[pos + 1 : end].strip(), index + 1
        elif ch == "=" and depth == 1 and name_end is None:
            name_end = index
        index += 1
    return None


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos
