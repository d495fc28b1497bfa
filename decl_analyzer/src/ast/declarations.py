from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from decl_analyzer.src.lexing.tokens import TokenKind

from .base import ASTNode

"""Declaration node definitions for the declaration language."""


@dataclass(frozen=True)
class Initializer(ASTNode):
    """Literal on the right of ``=``: its token kind and source text."""

    kind: TokenKind
    lexeme: str
    line: int = 0


@dataclass(frozen=True)
class Declarator(ASTNode):
    """name [= literal]"""

    name: str
    line: int
    initializer: Optional[Initializer] = None


@dataclass(frozen=True)
class Declaration(ASTNode):
    """type name [= literal] (, name [= literal])* ;"""

    type_name: str
    declarators: Tuple[Declarator, ...]
    line: int = 0

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(declarator.name for declarator in self.declarators)
