"""Data types for agent loop runs."""

from dataclasses import dataclass
from enum import Enum


class LoopState(str, Enum):
    """States of the agent loop."""

    AWAITING_MODEL = "awaiting_model"
    EXECUTING_TOOLS = "executing_tools"
    DONE = "done"


@dataclass(frozen=True)
class RunOutcome:
    """Final result of one agent loop run.

    Attributes:
        answer: The model's final text (may be empty)
        tool_calls: Number of tool invocations executed during the run
    """

    answer: str
    tool_calls: int
