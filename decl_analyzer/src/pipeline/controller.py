"""Stage-gated driver for the three analysis phases."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from decl_analyzer.src.ast.declarations import Declaration
from decl_analyzer.src.common.constants import DEFAULT_CONFIG, AnalyzerConfig
from decl_analyzer.src.common.diagnostics import Diagnostic
from decl_analyzer.src.lexing.lexer import LexResult, tokenize
from decl_analyzer.src.lexing.tokens import Token
from decl_analyzer.src.parsing.parser import ParseResult, parse
from decl_analyzer.src.semantic.analyzer import analyze_semantics

from .exceptions import PrerequisiteNotMetError
from .state import SEMANTIC_READY_STATES, SYNTAX_READY_STATES, PipelineState

logger = logging.getLogger(__name__)


class PipelineController:
    """Runs lexical, syntax and semantic analysis in strict order.

    The controller owns the loaded source text and the cached artifacts of
    successful stages. Syntax analysis runs whenever tokens are cached (any
    state after a passed lexical run) and semantic analysis whenever
    declarations are cached (any state after a passed syntax run), so a
    downstream stage can be retried without recomputing its inputs. Caches
    are tuples and are replaced as a whole, never edited.

    Usage:
        pipeline = PipelineController()
        pipeline.load_source("int x = 5;")
        pipeline.run_lexical()
        if pipeline.can_run_syntax():
            pipeline.run_syntax()
    """

    def __init__(self, config: AnalyzerConfig = DEFAULT_CONFIG):
        self.config = config
        self._source = ""
        self._state = PipelineState.IDLE
        self._tokens: Optional[Tuple[Token, ...]] = None
        self._declarations: Optional[Tuple[Declaration, ...]] = None

    # Queries

    @property
    def current_state(self) -> PipelineState:
        return self._state

    @property
    def source(self) -> str:
        return self._source

    @property
    def tokens(self) -> Optional[Tuple[Token, ...]]:
        """Tokens of the last successful lexical run, if any."""
        return self._tokens

    @property
    def declarations(self) -> Optional[Tuple[Declaration, ...]]:
        """Declarations of the last successful syntax run, if any."""
        return self._declarations

    def can_run_syntax(self) -> bool:
        return self._state in SYNTAX_READY_STATES

    def can_run_semantic(self) -> bool:
        return self._state in SEMANTIC_READY_STATES

    # Commands

    def load_source(self, text: Optional[str]) -> None:
        """Replace the source text and discard every cached artifact."""
        self._source = text or ""
        self._reset()
        logger.debug("Loaded %d character(s) of source", len(self._source))

    def clear(self) -> None:
        """Drop the source text and all analysis state."""
        self.load_source("")

    def run_lexical(self) -> LexResult:
        result = tokenize(self._source, self.config)
        self._declarations = None
        if result.ok:
            self._tokens = tuple(result.tokens)
            self._state = PipelineState.LEXED_OK
        else:
            self._tokens = None
            self._state = PipelineState.LEXED_FAIL
        self._log_outcome("Lexical analysis", result.errors)
        return result

    def run_syntax(self) -> ParseResult:
        if not self.can_run_syntax():
            raise PrerequisiteNotMetError(
                "syntax analysis", SYNTAX_READY_STATES, self._state
            )

        result = parse(self._tokens)
        if result.ok:
            self._declarations = tuple(result.declarations)
            self._state = PipelineState.PARSED_OK
        else:
            self._declarations = None
            self._state = PipelineState.PARSED_FAIL
        self._log_outcome("Syntax analysis", result.errors)
        return result

    def run_semantic(self) -> List[Diagnostic]:
        if not self.can_run_semantic():
            raise PrerequisiteNotMetError(
                "semantic analysis", SEMANTIC_READY_STATES, self._state
            )

        errors = analyze_semantics(self._declarations, self.config)
        self._state = (
            PipelineState.VALIDATED_FAIL if errors else PipelineState.VALIDATED_OK
        )
        self._log_outcome("Semantic analysis", errors)
        return errors

    def _reset(self) -> None:
        self._state = PipelineState.IDLE
        self._tokens = None
        self._declarations = None

    def _log_outcome(self, stage: str, errors: List[Diagnostic]) -> None:
        if errors:
            logger.info("%s failed with %d error(s)", stage, len(errors))
        else:
            logger.info("%s passed", stage)
