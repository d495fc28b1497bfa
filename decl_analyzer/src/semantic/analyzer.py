"""Semantic analysis for declaration lists."""

import logging
from typing import Iterable, List, Optional, Set

from decl_analyzer.src.ast.base import ASTVisitor
from decl_analyzer.src.ast.declarations import Declaration, Declarator
from decl_analyzer.src.common.constants import DEFAULT_CONFIG, AnalyzerConfig
from decl_analyzer.src.common.diagnostics import Diagnostic, semantic_error

from .type_system import is_assignable

logger = logging.getLogger(__name__)


class SemanticAnalyzer(ASTVisitor):
    """Checks names and initializers across all declarations in one pass.

    Every declarator gets three independent checks, so one declarator can
    produce several diagnostics:

    1. the name must not be a reserved word,
    2. the name must not repeat an earlier declarator's name (in any
       declaration), and
    3. an initializer must be assignable to the declared type.
    """

    def __init__(self, config: AnalyzerConfig = DEFAULT_CONFIG):
        self.config = config
        self.seen_names: Set[str] = set()
        self.errors: List[Diagnostic] = []
        self._current_type: Optional[str] = None

    def analyze(self, declarations: Iterable[Declaration]) -> List[Diagnostic]:
        self.seen_names = set()
        self.errors = []
        for declaration in declarations:
            self.visit(declaration)
        logger.debug("Semantic analysis found %d error(s)", len(self.errors))
        return self.errors

    def visit_Declaration(self, node: Declaration) -> None:
        self._current_type = node.type_name
        for declarator in node.declarators:
            self.visit(declarator)
        self._current_type = None

    def visit_Declarator(self, node: Declarator) -> None:
        if node.name in self.config.reserved_words:
            self._error(node, f"Invalid identifier (reserved): {node.name}")

        if node.name in self.seen_names:
            self._error(node, f"Duplicate variable name: {node.name}")
        self.seen_names.add(node.name)

        init = node.initializer
        if init is not None and not is_assignable(self._current_type, init.kind, init.lexeme):
            self._error(
                node,
                f"Type mismatch: cannot assign {init.kind.value}({init.lexeme}) "
                f"to {self._current_type} variable '{node.name}'",
            )

    def _error(self, node: Declarator, message: str) -> None:
        self.errors.append(semantic_error(node.line, message))


def analyze_semantics(
    declarations: Iterable[Declaration], config: AnalyzerConfig = DEFAULT_CONFIG
) -> List[Diagnostic]:
    """Run semantic checks over ``declarations`` and return the diagnostics."""
    return SemanticAnalyzer(config).analyze(declarations)
