"""Error types raised by judge infrastructure."""

from minutes_judge.core.errors import MinutesJudgeError


class EvaluationFailure(MinutesJudgeError):
    """Raised when the judge cannot be invoked or returns an unusable payload."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to evaluate summary: {reason}")
