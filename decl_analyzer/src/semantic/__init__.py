"""Semantic analysis package for the declaration language."""

from .analyzer import SemanticAnalyzer, analyze_semantics
from .type_system import ACCEPTED_LITERALS, is_assignable, is_integral, strip_suffix

__all__ = [
    "SemanticAnalyzer",
    "analyze_semantics",
    "ACCEPTED_LITERALS",
    "is_assignable",
    "is_integral",
    "strip_suffix",
]
