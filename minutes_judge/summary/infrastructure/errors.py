"""Error types raised by summary generation infrastructure."""

from minutes_judge.core.errors import MinutesJudgeError


class GenerationFailure(MinutesJudgeError):
    """Raised when the summary call fails or returns no usable text."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to generate summary: {reason}")
