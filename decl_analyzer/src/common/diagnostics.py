from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Union

from .constants import STAGE_TITLES

"""Diagnostic records shared by every analysis stage."""


class Stage(Enum):
    """Analysis stage that produced a diagnostic."""

    LEXICAL = "lexical"
    SYNTAX = "syntax"
    SEMANTIC = "semantic"

    @property
    def title(self) -> str:
        return STAGE_TITLES[self.value]


@dataclass(frozen=True)
class Diagnostic:
    """A problem found in the source text.

    Lexical, syntax and semantic errors share this shape and differ only in
    the stage that reported them.
    """

    stage: Stage
    line: int
    message: str

    def to_dict(self) -> Dict[str, Union[int, str]]:
        """Wire shape handed to presentation code."""
        return {"line": self.line, "message": self.message}

    def __str__(self) -> str:
        return f"Line {self.line}: {self.message}"


def lexical_error(line: int, message: str) -> Diagnostic:
    return Diagnostic(Stage.LEXICAL, line, message)


def syntax_error(line: int, message: str) -> Diagnostic:
    return Diagnostic(Stage.SYNTAX, line, message)


def semantic_error(line: int, message: str) -> Diagnostic:
    return Diagnostic(Stage.SEMANTIC, line, message)


class ProgramDiagnostics:
    """Diagnostic collection across all stages of one analysis run.

    Usage:
        diagnostics = ProgramDiagnostics()
        diagnostics.extend(lex_result.errors)
        if diagnostics.has_errors():
            print(diagnostics.format_for_user())
    """

    def __init__(self) -> None:
        self.diagnostics: List[Diagnostic] = []

    def add(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        self.diagnostics.extend(diagnostics)

    def has_errors(self) -> bool:
        """Check if any diagnostics have been recorded."""
        return bool(self.diagnostics)

    def error_count(self, stage: Stage | None = None) -> int:
        return len(self.for_stage(stage)) if stage else len(self.diagnostics)

    def for_stage(self, stage: Stage) -> List[Diagnostic]:
        return [diag for diag in self.diagnostics if diag.stage is stage]

    def get_messages(self) -> List[str]:
        """Get formatted one-line messages for every diagnostic."""
        return [
            f"ERROR [{diag.stage.value}:{diag.line}]: {diag.message}"
            for diag in self.diagnostics
        ]

    def format_stage(self, stage: Stage) -> str:
        """Numbered listing of one stage's diagnostics."""
        lines = [f"{stage.title} errors:"]
        for index, diag in enumerate(self.for_stage(stage), start=1):
            lines.append(f"{index}. {diag}")
        return "\n".join(lines)

    def format_for_user(self) -> str:
        """Format all diagnostics grouped by stage, followed by a summary."""
        if not self.diagnostics:
            return "No diagnostics."

        sections = [self.format_stage(stage) for stage in Stage if self.for_stage(stage)]
        summary = f"\nAnalysis summary: {self.error_count()} error(s)"
        return "\n".join(sections) + summary

    def to_list(self) -> List[Dict[str, Union[int, str]]]:
        return [diag.to_dict() for diag in self.diagnostics]

    def merge(self, other: "ProgramDiagnostics") -> None:
        """Merge diagnostics from another collector."""
        self.diagnostics.extend(other.diagnostics)
