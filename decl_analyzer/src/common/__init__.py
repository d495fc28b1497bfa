"""Common utilities shared across analyzer stages."""

from .constants import *
from .diagnostics import (
    Diagnostic,
    ProgramDiagnostics,
    Stage,
    lexical_error,
    semantic_error,
    syntax_error,
)

__all__ = [
    "Diagnostic",
    "ProgramDiagnostics",
    "Stage",
    "lexical_error",
    "syntax_error",
    "semantic_error",
    # Constants
    "AnalyzerConfig",
    "DEFAULT_CONFIG",
    "TYPE_NAMES",
    "RESERVED_WORDS",
    "CHAR_ESCAPES",
    "BOOLEAN_LITERALS",
    "STAGE_TITLES",
]
