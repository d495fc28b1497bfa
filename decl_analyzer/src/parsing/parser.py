"""Recursive-descent parser for declaration statements.

Grammar::

    Program     := Declaration* End
    Declaration := TYPE Declarator (',' Declarator)* ';'
    Declarator  := IDENTIFIER ('=' Literal)?
    Literal     := INT | LONG | FLOAT | DOUBLE | CHAR | STRING | BOOLEAN literal

Errors never abort the parse. Each recovery path skips forward with
``_skip_until`` so the cursor always advances and the parse ends after at
most a bounded number of steps.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Sequence

from decl_analyzer.src.ast.declarations import Declaration, Declarator, Initializer
from decl_analyzer.src.common.diagnostics import Diagnostic, syntax_error
from decl_analyzer.src.lexing.tokens import Token, TokenKind

logger = logging.getLogger(__name__)

LIST_DELIMITERS: FrozenSet[TokenKind] = frozenset({TokenKind.COMMA, TokenKind.SEMICOLON})
STATEMENT_END: FrozenSet[TokenKind] = frozenset({TokenKind.SEMICOLON})


@dataclass
class ParseResult:
    """Declarations recognized in a token stream plus syntax diagnostics."""

    declarations: List[Declaration] = field(default_factory=list)
    errors: List[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def _describe(token: Token) -> str:
    if token.kind is TokenKind.END:
        return "end of input"
    return f"'{token.lexeme}'"


class DeclarationParser:
    """Parses a token sequence into declarations."""

    def __init__(self, tokens: Sequence[Token]):
        self.tokens: List[Token] = list(tokens)
        if not self.tokens or self.tokens[-1].kind is not TokenKind.END:
            line = self.tokens[-1].line if self.tokens else 1
            self.tokens.append(Token(TokenKind.END, "", line))
        self.pos = 0
        self.errors: List[Diagnostic] = []

    def parse(self) -> ParseResult:
        declarations: List[Declaration] = []
        while not self._at_end():
            declaration = self._parse_declaration()
            if declaration is not None:
                declarations.append(declaration)

            if not self._at_end() and not self._check(TokenKind.TYPE):
                self._skip_until(STATEMENT_END)
                self._match(TokenKind.SEMICOLON)

        logger.debug(
            "Parsed %d declaration(s) with %d error(s)",
            len(declarations),
            len(self.errors),
        )
        return ParseResult(declarations=declarations, errors=self.errors)

    # Cursor helpers

    def _peek(self) -> Token:
        return self.tokens[min(self.pos, len(self.tokens) - 1)]

    def _advance(self) -> Token:
        token = self._peek()
        if token.kind is not TokenKind.END:
            self.pos += 1
        return token

    def _at_end(self) -> bool:
        return self._peek().kind is TokenKind.END

    def _check(self, *kinds: TokenKind) -> bool:
        return self._peek().kind in kinds

    def _match(self, kind: TokenKind) -> bool:
        if self._check(kind):
            self._advance()
            return True
        return False

    def _skip_until(self, kinds: FrozenSet[TokenKind]) -> None:
        """Advance until the current token kind is in ``kinds`` or END."""
        while not self._at_end() and self._peek().kind not in kinds:
            self.pos += 1

    def _error(self, token: Token, message: str) -> None:
        self.errors.append(syntax_error(token.line, message))

    # Grammar rules

    def _parse_declaration(self) -> Optional[Declaration]:
        type_token = self._peek()
        if type_token.kind is not TokenKind.TYPE:
            self._error(type_token, f"Expected type but found {_describe(type_token)}")
            self._advance()
            return None
        self._advance()

        declarators: List[Declarator] = []
        while True:
            declarator = self._parse_declarator()
            if declarator is not None:
                declarators.append(declarator)

            if not self._check(TokenKind.COMMA, TokenKind.SEMICOLON, TokenKind.END):
                token = self._peek()
                self._error(token, f"Unexpected token {_describe(token)}")
                self._skip_until(LIST_DELIMITERS)

            if self._match(TokenKind.COMMA):
                continue
            if not self._match(TokenKind.SEMICOLON):
                self._error(self._peek(), "Unexpected end of input; missing ';'")
            break

        if not declarators:
            return None
        return Declaration(type_token.lexeme, tuple(declarators), type_token.line)

    def _parse_declarator(self) -> Optional[Declarator]:
        name_token = self._peek()
        if name_token.kind is not TokenKind.IDENTIFIER:
            self._error(
                name_token, f"Expected identifier but found {_describe(name_token)}"
            )
            self._skip_until(LIST_DELIMITERS)
            return None
        self._advance()

        initializer = None
        if self._match(TokenKind.EQUALS):
            literal = self._peek()
            if literal.kind.is_literal:
                self._advance()
                initializer = Initializer(literal.kind, literal.lexeme, literal.line)
            else:
                self._error(literal, f"Expected literal but found {_describe(literal)}")

        return Declarator(name_token.lexeme, name_token.line, initializer)


def parse(tokens: Sequence[Token]) -> ParseResult:
    """Parse ``tokens`` into declarations plus syntax diagnostics."""
    return DeclarationParser(tokens).parse()
