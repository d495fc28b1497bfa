from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Dict, FrozenSet

from decl_analyzer.src.lexing.tokens import TokenKind

"""Assignment compatibility between declared types and literal kinds."""


WHOLE_NUMBER_TYPES: FrozenSet[str] = frozenset({"byte", "short", "int", "long"})

# Literal kinds a declared type accepts unconditionally
ACCEPTED_LITERALS: Dict[str, FrozenSet[TokenKind]] = {
    "String": frozenset({TokenKind.STRING_LITERAL}),
    "boolean": frozenset({TokenKind.BOOLEAN_LITERAL}),
    "char": frozenset({TokenKind.CHAR_LITERAL}),
    "float": frozenset(
        {TokenKind.FLOAT_LITERAL, TokenKind.INT_LITERAL, TokenKind.DOUBLE_LITERAL}
    ),
    "double": frozenset(
        {TokenKind.DOUBLE_LITERAL, TokenKind.FLOAT_LITERAL, TokenKind.INT_LITERAL}
    ),
    "byte": frozenset({TokenKind.INT_LITERAL}),
    "short": frozenset({TokenKind.INT_LITERAL}),
    "int": frozenset({TokenKind.INT_LITERAL}),
    "long": frozenset({TokenKind.INT_LITERAL, TokenKind.LONG_LITERAL}),
}

# Fractional literal kinds an integral type accepts when the value is whole
FRACTIONAL_LITERALS: FrozenSet[TokenKind] = frozenset(
    {TokenKind.FLOAT_LITERAL, TokenKind.DOUBLE_LITERAL}
)

NUMERIC_SUFFIXES = frozenset("lLfFdD")


def strip_suffix(lexeme: str) -> str:
    """Drop a trailing type suffix from a numeric literal."""
    if lexeme and lexeme[-1] in NUMERIC_SUFFIXES:
        return lexeme[:-1]
    return lexeme


def is_integral(lexeme: str) -> bool:
    """True if the numeric literal's exact value is a whole number."""
    try:
        value = Decimal(strip_suffix(lexeme))
    except InvalidOperation:
        return False
    return value.is_finite() and value == value.to_integral_value()


def is_assignable(type_name: str, kind: TokenKind, lexeme: str) -> bool:
    """Check whether a literal of ``kind`` may initialize a ``type_name`` variable."""
    if kind in ACCEPTED_LITERALS.get(type_name, frozenset()):
        return True
    if type_name in WHOLE_NUMBER_TYPES and kind in FRACTIONAL_LITERALS:
        return is_integral(lexeme)
    return False
