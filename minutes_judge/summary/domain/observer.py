"""SummaryObserver port: domain events emitted while generating a summary."""

from typing import Protocol


class SummaryObserver(Protocol):
    """Observer port for summary generation events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def summary_generation_started(self, model: str, transcript_chars: int) -> None: ...

    def summary_generation_completed(
        self, model: str, duration_ms: int, summary_chars: int
    ) -> None: ...

    def summary_generation_failed(self, model: str, reason: str) -> None: ...
