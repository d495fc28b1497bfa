"""Base classes and utilities for AST traversal."""

from __future__ import annotations

from abc import ABC
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any, Dict


class ASTNode(ABC):
    """Base class for all AST nodes.

    Concrete nodes are frozen dataclasses; every node records the line it
    starts on.
    """

    line: int


class ASTVisitor(ABC):
    """Base class for AST traversal visitors."""

    def visit(self, node: ASTNode) -> Any:
        """Visit a node and return result."""
        method_name = f"visit_{type(node).__name__}"
        if hasattr(self, method_name):
            return getattr(self, method_name)(node)
        return self.generic_visit(node)

    def generic_visit(self, node: ASTNode) -> Any:
        """Default visitor for unhandled node types."""
        pass


def ast_to_dict(node: Any) -> Any:
    """Convert an AST node to a plain dictionary (for JSON output and debugging)."""
    if isinstance(node, Enum):
        return node.value
    if isinstance(node, (list, tuple)):
        return [ast_to_dict(item) for item in node]
    if not (isinstance(node, ASTNode) and is_dataclass(node)):
        return node

    result: Dict[str, Any] = {"type": type(node).__name__}
    for node_field in fields(node):
        result[node_field.name] = ast_to_dict(getattr(node, node_field.name))
    return result
