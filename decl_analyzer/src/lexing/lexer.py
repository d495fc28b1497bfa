"""Hand-written scanner for the declaration language."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from decl_analyzer.src.common.constants import (
    BOOLEAN_LITERALS,
    CHAR_ESCAPES,
    DEFAULT_CONFIG,
    AnalyzerConfig,
)
from decl_analyzer.src.common.diagnostics import Diagnostic, lexical_error

from .tokens import PUNCTUATION, Token, TokenKind

logger = logging.getLogger(__name__)

FLOAT_SUFFIXES = ("f", "F")
DOUBLE_SUFFIXES = ("d", "D")
LONG_SUFFIXES = ("l", "L")


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char == "_"


@dataclass
class LexResult:
    """Tokens and lexical diagnostics for one source text."""

    tokens: List[Token] = field(default_factory=list)
    errors: List[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class Lexer:
    """Converts source text into tokens.

    The lexer never raises for bad input. Every problem becomes a diagnostic
    and, unless ``config.stop_on_first_error`` is set, scanning continues so
    that all problems are reported in one pass. The returned token list
    always ends with a single END token.
    """

    def __init__(self, config: AnalyzerConfig = DEFAULT_CONFIG):
        self.config = config
        self._source = ""
        self._pos = 0
        self._line = 1
        self._errors: List[Diagnostic] = []

    def tokenize(self, source: Optional[str]) -> LexResult:
        self._source = source or ""
        self._pos = 0
        self._line = 1
        self._errors = []
        tokens: List[Token] = []

        while True:
            self._skip_whitespace_and_comments()
            if self._at_end():
                break

            start = self._pos
            try:
                token = self._scan_token()
            except Exception as exc:
                logger.exception("Scanner failure at offset %d", start)
                self._error(f"Lexical exception: {exc}")
                self._pos = max(self._pos, start + 1)
                token = None

            if token is not None:
                tokens.append(token)
            if self._errors and self.config.stop_on_first_error:
                break

        tokens.append(Token(TokenKind.END, "", self._line))
        logger.debug(
            "Lexed %d token(s) with %d error(s)", len(tokens), len(self._errors)
        )
        return LexResult(tokens=tokens, errors=self._errors)

    # Cursor helpers

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _peek(self, offset: int = 0) -> str:
        index = self._pos + offset
        return self._source[index] if index < len(self._source) else ""

    def _error(self, message: str, line: Optional[int] = None) -> None:
        self._errors.append(lexical_error(line or self._line, message))

    def _skip_whitespace_and_comments(self) -> None:
        source = self._source
        while not self._at_end():
            char = source[self._pos]
            if char == "\n":
                self._line += 1
                self._pos += 1
            elif char.isspace():
                self._pos += 1
            elif source.startswith("//", self._pos):
                newline = source.find("\n", self._pos)
                self._pos = len(source) if newline == -1 else newline
            elif source.startswith("/*", self._pos):
                close = source.find("*/", self._pos + 2)
                stop = len(source) if close == -1 else close + 2
                self._line += source.count("\n", self._pos, stop)
                self._pos = stop
            else:
                break

    # Token scanners

    def _scan_token(self) -> Optional[Token]:
        char = self._peek()
        if char.isalpha() or char == "_":
            return self._scan_word()
        if _is_digit(char) or (char == "-" and _is_digit(self._peek(1))):
            return self._scan_number()
        if char == '"':
            return self._scan_string()
        if char == "'":
            return self._scan_char()

        self._pos += 1
        kind = PUNCTUATION.get(char)
        if kind is not None:
            return Token(kind, char, self._line)
        self._error(f"Unrecognized character '{char}'")
        return None

    def _consume_word_chars(self) -> None:
        while not self._at_end() and _is_word_char(self._peek()):
            self._pos += 1

    def _scan_word(self) -> Token:
        start = self._pos
        self._consume_word_chars()
        word = self._source[start : self._pos]
        if word in self.config.type_names:
            kind = TokenKind.TYPE
        elif word in BOOLEAN_LITERALS:
            kind = TokenKind.BOOLEAN_LITERAL
        else:
            kind = TokenKind.IDENTIFIER
        return Token(kind, word, self._line)

    def _scan_number(self) -> Optional[Token]:
        start = self._pos
        if self._peek() == "-":
            self._pos += 1

        seen_dot = False
        while not self._at_end():
            char = self._peek()
            if _is_digit(char):
                self._pos += 1
            elif char == "." and not seen_dot:
                seen_dot = True
                self._pos += 1
            else:
                break

        suffix = self._peek()
        if suffix in FLOAT_SUFFIXES:
            kind = TokenKind.FLOAT_LITERAL
            self._pos += 1
        elif suffix in DOUBLE_SUFFIXES:
            kind = TokenKind.DOUBLE_LITERAL
            self._pos += 1
        elif suffix in LONG_SUFFIXES:
            self._pos += 1
            if seen_dot:
                text = self._source[start : self._pos]
                self._error(f"Invalid long literal with decimal point: {text}")
                return None
            kind = TokenKind.LONG_LITERAL
        elif suffix.isalpha() or suffix == "_":
            self._consume_word_chars()
            text = self._source[start : self._pos]
            self._error(f"Invalid token (identifier starting with digit): {text}")
            return None
        else:
            kind = TokenKind.DOUBLE_LITERAL if seen_dot else TokenKind.INT_LITERAL

        return Token(kind, self._source[start : self._pos], self._line)

    def _scan_string(self) -> Optional[Token]:
        start, line = self._pos, self._line
        self._pos += 1
        while not self._at_end():
            char = self._peek()
            if char == "\\":
                # An escape takes the next character along unless the line ends
                self._pos += 2 if self._peek(1) not in ("", "\n") else 1
            elif char == '"':
                self._pos += 1
                return Token(TokenKind.STRING_LITERAL, self._source[start : self._pos], line)
            elif char == "\n":
                break
            else:
                self._pos += 1

        self._error("Unterminated string literal", line)
        return None

    def _scan_char(self) -> Optional[Token]:
        start, line = self._pos, self._line
        self._pos += 1
        while not self._at_end():
            char = self._peek()
            if char == "\\":
                self._pos += 2 if self._peek(1) not in ("", "\n") else 1
            elif char == "'":
                self._pos += 1
                return self._validate_char(self._source[start : self._pos], line)
            elif char == "\n":
                self._pos += 1
                self._line += 1
                self._error("Newline inside char literal", line)
                return None
            else:
                self._pos += 1

        self._error("Unterminated char literal", line)
        return None

    def _validate_char(self, lexeme: str, line: int) -> Optional[Token]:
        content = lexeme[1:-1]
        if len(content) == 1 or (
            len(content) == 2 and content[0] == "\\" and content[1] in CHAR_ESCAPES
        ):
            return Token(TokenKind.CHAR_LITERAL, lexeme, line)
        self._error(f"Invalid char literal: '{content}'", line)
        return None


def tokenize(source: Optional[str], config: AnalyzerConfig = DEFAULT_CONFIG) -> LexResult:
    """Scan ``source`` into tokens plus lexical diagnostics."""
    return Lexer(config).tokenize(source)
