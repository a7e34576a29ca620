"""Structlog implementation of the JudgeObserver port."""

import structlog


class StructlogJudgeObserver:
    """Delegates judge domain events to structlog.

    Satisfies the JudgeObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def judge_evaluation_started(
        self, model: str, transcript_chars: int, summary_chars: int
    ) -> None:
        self._log.info(
            "judge.evaluation_started",
            model=model,
            transcript_chars=transcript_chars,
            summary_chars=summary_chars,
        )

    def judge_evaluation_completed(
        self, model: str, duration_ms: int, overall_score: int
    ) -> None:
        self._log.info(
            "judge.evaluation_completed",
            model=model,
            duration_ms=duration_ms,
            overall_score=overall_score,
        )

    def judge_evaluation_failed(self, model: str, reason: str) -> None:
        self._log.error("judge.evaluation_failed", model=model, reason=reason)

    def judge_high_temperature_warned(self, model: str, temperature: float) -> None:
        self._log.warning(
            "judge.high_temperature_warned",
            model=model,
            temperature=temperature,
        )
