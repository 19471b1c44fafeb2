#!/usr/bin/env python
"""Print the token stream and parse diagnostics for one comment."""

from __future__ import annotations

import argparse
from pathlib import Path

from tsdocpy.diagnostics import format_diagnostic
from tsdocpy.lexer import CommentText, Lexer, dump_tokens
from tsdocpy.model import dumps_comment
from tsdocpy.parser import ParseMode, parse_tokens
from tsdocpy.text import LineIndex


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump comment tokens")
    parser.add_argument("path", type=Path, nargs="?", help="File holding a single /** */ comment")
    parser.add_argument("--text", type=str, default=None, help="Inline comment text instead of a file")
    parser.add_argument(
        "--mode",
        type=ParseMode,
        choices=list(ParseMode),
        default=ParseMode.PERMISSIVE,
        help="Parser mode (default: permissive)",
    )
    parser.add_argument("--json", action="store_true", help="Also print the parsed comment as JSON")
    args = parser.parse_args()

    if args.text is not None:
        source = args.text
        comment_text = CommentText.plain(source)
        source_path = "<text>"
    elif args.path is not None:
        source = args.path.read_text(encoding="utf-8")
        comment_text = CommentText.from_block_comment(source)
        source_path = str(args.path)
    else:
        raise SystemExit("Pass a path or --text")

    tokens = Lexer(comment_text).lex()
    dump_tokens(tokens)

    line_index = LineIndex(source)
    parsed = parse_tokens(tokens, mode=args.mode, source_path=source_path, line_index=line_index)

    print("\nDiagnostics:")
    for diagnostic in parsed.diagnostics:
        print(f"- {format_diagnostic(diagnostic, line_index)}")

    if args.json:
        print()
        print(dumps_comment(parsed.comment, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
