"""Token definitions produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List


class TokenKind(Enum):
    """Kinds of tokens in the declaration language."""

    TYPE = "TYPE"
    IDENTIFIER = "IDENTIFIER"
    INT_LITERAL = "INT_LITERAL"
    LONG_LITERAL = "LONG_LITERAL"
    FLOAT_LITERAL = "FLOAT_LITERAL"
    DOUBLE_LITERAL = "DOUBLE_LITERAL"
    CHAR_LITERAL = "CHAR_LITERAL"
    STRING_LITERAL = "STRING_LITERAL"
    BOOLEAN_LITERAL = "BOOLEAN_LITERAL"
    EQUALS = "EQUALS"
    COMMA = "COMMA"
    SEMICOLON = "SEMICOLON"
    END = "END"

    @property
    def is_literal(self) -> bool:
        return self in LITERAL_KINDS


LITERAL_KINDS = frozenset(
    {
        TokenKind.INT_LITERAL,
        TokenKind.LONG_LITERAL,
        TokenKind.FLOAT_LITERAL,
        TokenKind.DOUBLE_LITERAL,
        TokenKind.CHAR_LITERAL,
        TokenKind.STRING_LITERAL,
        TokenKind.BOOLEAN_LITERAL,
    }
)

PUNCTUATION = {
    "=": TokenKind.EQUALS,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
}


@dataclass(frozen=True)
class Token:
    """A lexical unit: kind, source text and the line it starts on."""

    kind: TokenKind
    lexeme: str
    line: int

    def __str__(self) -> str:
        return f"{self.kind.value:<14} {self.lexeme:<20} line {self.line}"


def format_token_table(tokens: Iterable[Token]) -> str:
    """Render tokens as an aligned table, hiding the END sentinel."""
    rows: List[str] = [
        f"{'TOKEN TYPE':<14} {'LEXEME':<20} LINE",
        f"{'----------':<14} {'------':<20} ----",
    ]
    for token in tokens:
        if token.kind is TokenKind.END:
            continue
        lexeme = token.lexeme.replace("\n", "\\n").replace("\r", "\\r")
        rows.append(f"{token.kind.value:<14} {lexeme:<20} line {token.line}")
    return "\n".join(rows)
