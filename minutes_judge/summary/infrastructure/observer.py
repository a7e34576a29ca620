"""Structlog implementation of the SummaryObserver port."""

import structlog


class StructlogSummaryObserver:
    """Delegates summary generation events to structlog.

    Satisfies the SummaryObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def summary_generation_started(self, model: str, transcript_chars: int) -> None:
        self._log.info(
            "summary.generation_started",
            model=model,
            transcript_chars=transcript_chars,
        )

    def summary_generation_completed(
        self, model: str, duration_ms: int, summary_chars: int
    ) -> None:
        self._log.info(
            "summary.generation_completed",
            model=model,
            duration_ms=duration_ms,
            summary_chars=summary_chars,
        )

    def summary_generation_failed(self, model: str, reason: str) -> None:
        self._log.error("summary.generation_failed", model=model, reason=reason)
