"""AST node definitions for the declaration language."""

from .base import ASTNode, ASTVisitor, ast_to_dict
from .declarations import Declaration, Declarator, Initializer

__all__ = [
    "ASTNode",
    "ASTVisitor",
    "ast_to_dict",
    "Declaration",
    "Declarator",
    "Initializer",
]
