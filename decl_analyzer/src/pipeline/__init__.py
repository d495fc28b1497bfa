"""Stage-gated analysis pipeline."""

from .controller import PipelineController
from .exceptions import PipelineError, PrerequisiteNotMetError
from .state import PipelineState

__all__ = [
    "PipelineController",
    "PipelineError",
    "PrerequisiteNotMetError",
    "PipelineState",
]
