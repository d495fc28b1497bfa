"""Shared constants across the analyzer."""

from dataclasses import dataclass, field
from typing import FrozenSet

# Primitive and reference type names recognized as TYPE tokens
TYPE_NAMES: FrozenSet[str] = frozenset(
    {"byte", "short", "int", "long", "float", "double", "boolean", "char", "String"}
)

BOOLEAN_LITERALS: FrozenSet[str] = frozenset({"true", "false"})

# Characters allowed after a backslash in a char literal
CHAR_ESCAPES: FrozenSet[str] = frozenset({"b", "t", "n", "f", "r", "'", '"', "\\"})

# Names that can never be used as variable names
RESERVED_WORDS: FrozenSet[str] = frozenset(
    {
        "abstract", "assert", "boolean", "break", "byte", "case", "catch",
        "char", "class", "const", "continue", "default", "do", "double",
        "else", "enum", "extends", "final", "finally", "float", "for", "goto",
        "if", "implements", "import", "instanceof", "int", "interface", "long",
        "native", "new", "package", "private", "protected", "public", "return",
        "short", "static", "strictfp", "super", "switch", "synchronized",
        "this", "throw", "throws", "transient", "try", "void", "volatile",
        "while",
        # Literal names
        "true", "false", "null",
    }
)

# Stage names used in diagnostics and user output
STAGE_TITLES = {
    "lexical": "Lexical Analysis",
    "syntax": "Syntax Analysis",
    "semantic": "Semantic Analysis",
}


@dataclass(frozen=True)
class AnalyzerConfig:
    """Settings shared by the lexer, the semantic analyzer and the pipeline."""

    type_names: FrozenSet[str] = field(default=TYPE_NAMES)
    reserved_words: FrozenSet[str] = field(default=RESERVED_WORDS)
    stop_on_first_error: bool = False  # halt the lexer after its first diagnostic


DEFAULT_CONFIG = AnalyzerConfig()
