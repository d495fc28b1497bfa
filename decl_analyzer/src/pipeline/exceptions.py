"""Pipeline exceptions."""

from typing import FrozenSet

from .state import PipelineState


class PipelineError(Exception):
    """Base class for misuse of the analysis pipeline."""


class PrerequisiteNotMetError(PipelineError):
    """Raised when a stage is requested before its predecessor succeeded."""

    def __init__(
        self, stage: str, required: FrozenSet[PipelineState], current: PipelineState
    ) -> None:
        self.stage = stage
        self.required = required
        self.current = current
        allowed = ", ".join(sorted(state.value for state in required))
        super().__init__(
            f"Cannot run {stage}: prerequisite not met "
            f"(requires one of {allowed}, current state is {current.value})"
        )
