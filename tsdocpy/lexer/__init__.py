"""Lexer."""

from tsdocpy.lexer.lexer import (
    CommentText,
    Lexer,
    dump_tokens,
    lex_block_comment,
    lex_comment,
)
from tsdocpy.lexer.tokens import LinkTarget, Token, TokenKind

__all__ = [
    "CommentText",
    "Lexer",
    "LinkTarget",
    "Token",
    "TokenKind",
    "dump_tokens",
    "lex_block_comment",
    "lex_comment",
]
