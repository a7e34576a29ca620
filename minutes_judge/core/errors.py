"""Base exception class for all minutes-judge-specific errors."""


class MinutesJudgeError(Exception):
    """Base class for all minutes-judge errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
