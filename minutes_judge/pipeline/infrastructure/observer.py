"""StructlogPipelineObserver: production observer that delegates to structlog."""

import structlog

from minutes_judge.pipeline.domain.phase import GuardRejection, Phase


class StructlogPipelineObserver:
    """Logs pipeline domain events to structlog.

    Does NOT inherit from PipelineObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def pipeline_phase_changed(self, previous: Phase, current: Phase) -> None:
        self._log.info(
            "pipeline.phase_changed",
            previous=previous.value,
            current=current.value,
        )

    def pipeline_guard_rejected(
        self, action: str, phase: Phase, reason: GuardRejection
    ) -> None:
        self._log.debug(
            "pipeline.guard_rejected",
            action=action,
            phase=phase.value,
            reason=reason.value,
        )

    def pipeline_stage_failed(self, phase: Phase, reason: str) -> None:
        self._log.error("pipeline.stage_failed", phase=phase.value, reason=reason)

    def pipeline_evaluation_replaced(self, overall_score: int, source: str) -> None:
        self._log.info(
            "pipeline.evaluation_replaced",
            overall_score=overall_score,
            source=source,
        )

    def pipeline_evaluation_cleared(self) -> None:
        self._log.info("pipeline.evaluation_cleared")
