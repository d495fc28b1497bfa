"""Pipeline states and the transitions between them."""

from enum import Enum


class PipelineState(Enum):
    """Outcome of the most recent stage run on the loaded source."""

    IDLE = "idle"
    LEXED_OK = "lexed_ok"
    LEXED_FAIL = "lexed_fail"
    PARSED_OK = "parsed_ok"
    PARSED_FAIL = "parsed_fail"
    VALIDATED_OK = "validated_ok"
    VALIDATED_FAIL = "validated_fail"

    @property
    def failed(self) -> bool:
        return self in (
            PipelineState.LEXED_FAIL,
            PipelineState.PARSED_FAIL,
            PipelineState.VALIDATED_FAIL,
        )


# States a stage may start from. Each set is exactly the states in which the
# artifact the stage consumes is cached.
SYNTAX_READY_STATES = frozenset(
    {
        PipelineState.LEXED_OK,
        PipelineState.PARSED_OK,
        PipelineState.PARSED_FAIL,
        PipelineState.VALIDATED_OK,
        PipelineState.VALIDATED_FAIL,
    }
)
SEMANTIC_READY_STATES = frozenset(
    {
        PipelineState.PARSED_OK,
        PipelineState.VALIDATED_OK,
        PipelineState.VALIDATED_FAIL,
    }
)
