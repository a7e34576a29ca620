"""FakeSummaryObserver: records summary generation events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationStartedEvent:
    model: str
    transcript_chars: int


@dataclass(frozen=True)
class GenerationCompletedEvent:
    model: str
    duration_ms: int
    summary_chars: int


@dataclass(frozen=True)
class GenerationFailedEvent:
    model: str
    reason: str


class FakeSummaryObserver:
    """Records all emitted summary events as typed frozen dataclasses."""

    def __init__(self) -> None:
        self.started: list[GenerationStartedEvent] = []
        self.completed: list[GenerationCompletedEvent] = []
        self.failed: list[GenerationFailedEvent] = []

    def summary_generation_started(self, model: str, transcript_chars: int) -> None:
        self.started.append(
            GenerationStartedEvent(model=model, transcript_chars=transcript_chars)
        )

    def summary_generation_completed(
        self, model: str, duration_ms: int, summary_chars: int
    ) -> None:
        self.completed.append(
            GenerationCompletedEvent(
                model=model, duration_ms=duration_ms, summary_chars=summary_chars
            )
        )

    def summary_generation_failed(self, model: str, reason: str) -> None:
        self.failed.append(GenerationFailedEvent(model=model, reason=reason))
