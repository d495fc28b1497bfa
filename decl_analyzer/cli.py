#!/usr/bin/env python3
"""
decl-analyzer CLI - Command-line interface for the declaration analyzer.

This module provides the entry point for the 'decl-analyzer' command installed via pip.

Usage:
    decl-analyzer input.java                       # Run all three stages on a file
    decl-analyzer --input "int x = 5;"             # Analyze a string
    decl-analyzer input.java --stage syntax        # Stop after syntax analysis
    decl-analyzer input.java --tokens              # Also print the token table
    decl-analyzer input.java --json                # Machine-readable output
"""

import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List

import click

from decl_analyzer.src.ast.base import ast_to_dict
from decl_analyzer.src.common.constants import DEFAULT_CONFIG, AnalyzerConfig
from decl_analyzer.src.common.diagnostics import ProgramDiagnostics, Stage
from decl_analyzer.src.lexing.tokens import TokenKind, format_token_table
from decl_analyzer.src.pipeline.controller import PipelineController
from decl_analyzer.src.pipeline.state import PipelineState

STAGE_PASSED_MESSAGES = {
    PipelineState.LEXED_OK: "Lexical Analysis phase passed. "
    "You may proceed to Syntax Analysis (level 2).",
    PipelineState.PARSED_OK: "Syntax Analysis phase passed. "
    "You may proceed to Semantic Analysis (level 3).",
    PipelineState.VALIDATED_OK: "Semantic Analysis phase passed. All levels passed!",
}


def analyze_source(
    source_code: str,
    stage: str = "semantic",
    config: AnalyzerConfig = DEFAULT_CONFIG,
    show_tokens: bool = False,
    use_json: bool = False,
) -> tuple[bool, str, ProgramDiagnostics]:
    """
    Run the analysis stages on source text, stopping at the first failing stage.

    Args:
        source_code: The declaration source text to analyze
        stage: Last stage to run ("lexical", "syntax" or "semantic")
        config: Analyzer configuration settings
        show_tokens: Include the token table in the report
        use_json: If True, return a JSON document instead of a text report

    Returns:
        (success: bool, report: str, diagnostics: ProgramDiagnostics)
    """
    last_stage = Stage(stage)
    pipeline = PipelineController(config)
    pipeline.load_source(source_code)
    diagnostics = ProgramDiagnostics()

    lex_result = pipeline.run_lexical()
    diagnostics.extend(lex_result.errors)

    if pipeline.can_run_syntax() and last_stage is not Stage.LEXICAL:
        diagnostics.extend(pipeline.run_syntax().errors)
        if pipeline.can_run_semantic() and last_stage is Stage.SEMANTIC:
            diagnostics.extend(pipeline.run_semantic())

    success = not diagnostics.has_errors()
    state = pipeline.current_state

    if use_json:
        document = {
            "success": success,
            "state": state.value,
            "declarations": ast_to_dict(list(pipeline.declarations or ())),
            "errors": {
                diag_stage.value: [diag.to_dict() for diag in diagnostics.for_stage(diag_stage)]
                for diag_stage in Stage
            },
        }
        if show_tokens:
            document["tokens"] = [
                {"kind": token.kind.value, "lexeme": token.lexeme, "line": token.line}
                for token in lex_result.tokens
                if token.kind is not TokenKind.END
            ]
        return success, json.dumps(document, indent=2), diagnostics

    report: List[str] = []
    if show_tokens:
        report.append(format_token_table(lex_result.tokens))
    if success:
        report.append(STAGE_PASSED_MESSAGES[state])
    else:
        report.append(diagnostics.format_for_user())
    return success, "\n\n".join(report), diagnostics


def setup_logging(level: str) -> None:
    """Setup logging configuration."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    logging.basicConfig(level=numeric_level, format="%(levelname)s: %(message)s")


@click.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path), required=False)
@click.option(
    "-i",
    "--input",
    "input_string",
    type=str,
    help="Analyze a string instead of a file",
)
@click.option(
    "--stage",
    type=click.Choice([stage.value for stage in Stage], case_sensitive=False),
    default=Stage.SEMANTIC.value,
    help="Last analysis stage to run (default: semantic)",
)
@click.option("--tokens", "show_tokens", is_flag=True, help="Print the token table")
@click.option(
    "--json",
    "use_json",
    is_flag=True,
    help="Output results as JSON instead of a text report",
)
@click.option(
    "--stop-on-first-error",
    is_flag=True,
    help="Stop lexical analysis at the first lexical error",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default="warning",
    help="Set the logging level",
)
def main(
    input_file,
    input_string,
    stage,
    show_tokens,
    use_json,
    stop_on_first_error,
    log_level,
):
    """Run lexical, syntax and semantic analysis on declaration source."""
    setup_logging(log_level)

    # Validate input source
    if input_file and input_string is not None:
        click.echo("Error: Cannot specify both input file and --input string", err=True)
        sys.exit(1)

    if not input_file and input_string is None:
        click.echo("Error: Must specify either an input file or --input string", err=True)
        sys.exit(1)

    if input_string is not None:
        source_code = input_string
    else:
        try:
            source_code = input_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            click.echo(f"Failed to read input file: {e}", err=True)
            sys.exit(1)
        if log_level in ["debug", "info"]:
            click.echo(f"Analyzing {input_file}...", err=True)

    config = replace(DEFAULT_CONFIG, stop_on_first_error=stop_on_first_error)
    success, report, diagnostics = analyze_source(
        source_code,
        stage=stage.lower(),
        config=config,
        show_tokens=show_tokens,
        use_json=use_json,
    )
    click.echo(report)

    if not success:
        click.echo(f"Analysis failed with {diagnostics.error_count()} error(s).", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
