from .lexer import Lexer, LexResult, tokenize
from .tokens import LITERAL_KINDS, Token, TokenKind, format_token_table

"""Lexical analysis for the declaration language."""


__all__ = [
    "Lexer",
    "LexResult",
    "tokenize",
    "Token",
    "TokenKind",
    "LITERAL_KINDS",
    "format_token_table",
]
