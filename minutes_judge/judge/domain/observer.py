"""JudgeObserver port: domain events emitted during judge invocations."""

from typing import Protocol


class JudgeObserver(Protocol):
    """Observer port for judge domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def judge_evaluation_started(
        self, model: str, transcript_chars: int, summary_chars: int
    ) -> None: ...

    def judge_evaluation_completed(
        self, model: str, duration_ms: int, overall_score: int
    ) -> None: ...

    def judge_evaluation_failed(self, model: str, reason: str) -> None: ...

    def judge_high_temperature_warned(self, model: str, temperature: float) -> None: ...
