"""Centralized comment cases used across lexer/parser tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap


@dataclass(frozen=True, slots=True)
class CommentCase:
    name: str
    source: str
    strict_should_parse_cleanly: bool = True


def _dedent(text: str) -> str:
    return textwrap.dedent(text).strip("\n")


PARSER_CASES: tuple[CommentCase, ...] = (
    CommentCase(name="plain_summary", source="Adds two numbers together."),
    CommentCase(name="summary_with_code_span", source="Calls `fetch()` under the hood."),
    CommentCase(name="summary_with_link", source="See {@link Widget} for details."),
    CommentCase(
        name="summary_and_block_tags",
        source=_dedent(
            """
            Adds two numbers.

            @param a - The first number.
            @param b - The second number.
            @returns The sum.
            """
        ),
    ),
    CommentCase(name="leading_modifier", source="@beta\nExperimental widget."),
    CommentCase(
        name="fenced_code_in_summary",
        source=_dedent(
            """
            Usage:
            ```ts
            const x = { a: 1 };
            ```
            """
        ),
    ),
    CommentCase(
        name="titled_example",
        source=_dedent(
            """
            Summary.
            @example Basic
            ```ts
            widget.render();
            ```
            """
        ),
    ),
    CommentCase(name="escaped_braces", source="Literal \\{ and \\} and \\@at."),
    CommentCase(name="stray_closing_brace", source="a } b", strict_should_parse_cleanly=False),
    CommentCase(name="unclosed_inline_tag", source="See {@link Widget", strict_should_parse_cleanly=False),
    CommentCase(name="unknown_inline_tag", source="See {@whatever Widget}.", strict_should_parse_cleanly=False),
    CommentCase(name="mid_line_unknown_tag", source="Text @custom more", strict_should_parse_cleanly=False),
    CommentCase(name="lowercase_inheritdoc", source="{@inheritdoc Base}", strict_should_parse_cleanly=False),
    CommentCase(
        name="duplicate_returns",
        source="@returns first\n@returns second",
        strict_should_parse_cleanly=False,
    ),
)


def case_id(case: CommentCase) -> str:
    return case.name
