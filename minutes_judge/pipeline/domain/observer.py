"""Observer port for the pipeline domain: defines events in domain language."""

from typing import Protocol

from minutes_judge.pipeline.domain.phase import GuardRejection, Phase


class PipelineObserver(Protocol):
    """Observer port emitting structured events from the pipeline controller.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def pipeline_phase_changed(self, previous: Phase, current: Phase) -> None: ...

    def pipeline_guard_rejected(
        self, action: str, phase: Phase, reason: GuardRejection
    ) -> None: ...

    def pipeline_stage_failed(self, phase: Phase, reason: str) -> None: ...

    def pipeline_evaluation_replaced(self, overall_score: int, source: str) -> None: ...

    def pipeline_evaluation_cleared(self) -> None: ...
