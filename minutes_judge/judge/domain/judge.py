"""Judge Protocol: structural interface for all judge implementations."""

from typing import Protocol

from minutes_judge.evaluation.domain.result import EvaluationResult


class Judge(Protocol):
    """Structural interface satisfied by any judge implementation.

    Scores a summary against the transcript it was produced from. Stateless;
    every call yields a complete EvaluationResult or raises EvaluationFailure.
    """

    async def evaluate(self, transcript: str, summary: str) -> EvaluationResult: ...
