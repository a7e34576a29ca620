"""PipelineController: owns pipeline state and the phase transitions over it."""

from minutes_judge.core.errors import MinutesJudgeError
from minutes_judge.evaluation.domain.edit_session import EvaluationEditSession
from minutes_judge.evaluation.domain.observer import EditSessionObserver
from minutes_judge.evaluation.domain.result import EvaluationResult
from minutes_judge.judge.domain.judge import Judge
from minutes_judge.pipeline.domain.observer import PipelineObserver
from minutes_judge.pipeline.domain.phase import GuardRejection, Phase
from minutes_judge.summary.domain.generator import SummaryGenerator
from minutes_judge.summary.infrastructure.errors import GenerationFailure


class PipelineController:
    """Drives transcript -> summary -> verdict with at most one call in flight.

    The controller exclusively owns the transcript, the summary, the current
    phase, the authoritative EvaluationResult and the last stage error. Front
    ends read that state and trigger transitions; they never mutate it
    directly. The single-flight rule is enforced purely by the phase guard:
    the phase leaves ``Phase.IDLE`` before the first await, so a second
    trigger arriving while a call is pending is refused.

    Editing the summary after a verdict exists does not clear the verdict. The
    last verdict stays until a new evaluation overwrites it or a new
    generation starts.
    """

    def __init__(
        self,
        generator: SummaryGenerator,
        judge: Judge,
        observer: PipelineObserver,
        edit_observer: EditSessionObserver,
        transcript: str = "",
    ) -> None:
        self._generator = generator
        self._judge = judge
        self._observer = observer
        self._transcript = transcript
        self._summary = ""
        self._evaluation: EvaluationResult | None = None
        self._phase = Phase.IDLE
        self._last_error: MinutesJudgeError | None = None
        self._edit_session = EvaluationEditSession(holder=self, observer=edit_observer)

    # ------------------------------------------------------------------
    # State reads
    # ------------------------------------------------------------------

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def transcript(self) -> str:
        return self._transcript

    @property
    def summary(self) -> str:
        return self._summary

    @property
    def evaluation(self) -> EvaluationResult | None:
        return self._evaluation

    @property
    def last_error(self) -> MinutesJudgeError | None:
        return self._last_error

    @property
    def edit_session(self) -> EvaluationEditSession:
        return self._edit_session

    def can_generate(self) -> bool:
        return self._generation_rejection(transcript=self._transcript) is None

    def can_evaluate(self) -> bool:
        rejection = self._evaluation_rejection(
            transcript=self._transcript, summary=self._summary
        )
        return rejection is None

    # ------------------------------------------------------------------
    # Input edits
    # ------------------------------------------------------------------

    def set_transcript(self, transcript: str) -> bool:
        """Replace the transcript. Refused unless the pipeline is idle."""
        if self._phase is not Phase.IDLE:
            self._reject(action="set_transcript", reason=GuardRejection.BUSY)
            return False
        self._transcript = transcript
        return True

    def set_summary(self, summary: str) -> bool:
        """Replace the summary by hand. Refused unless the pipeline is idle.

        Any existing verdict is kept as-is, even though it may now describe
        text that is no longer there.
        """
        if self._phase is not Phase.IDLE:
            self._reject(action="set_summary", reason=GuardRejection.BUSY)
            return False
        self._summary = summary
        return True

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    async def start_generation(self, transcript: str | None = None) -> bool:
        """Idle -> GeneratingSummary -> Idle.

        Uses *transcript* when given, otherwise the current transcript. Any
        existing verdict is discarded on entry. On failure the summary is left
        unchanged and the error is recorded in ``last_error``.

        Returns False (and changes nothing) when the guard refuses the
        transition; True once the transition has run, whatever its outcome.
        """
        candidate = self._transcript if transcript is None else transcript
        rejection = self._generation_rejection(transcript=candidate)
        if rejection is not None:
            self._reject(action="start_generation", reason=rejection)
            return False

        self._transcript = candidate
        self._last_error = None
        self._replace_evaluation(None, source="generation")
        self._enter(Phase.GENERATING_SUMMARY)
        try:
            summary = await self._generator.generate(transcript=candidate)
            if not summary.strip():
                raise GenerationFailure(reason="generator returned an empty summary")
        except MinutesJudgeError as exc:
            self._record_failure(exc)
        else:
            self._summary = summary
        finally:
            self._enter(Phase.IDLE)
        return True

    async def start_evaluation(
        self, transcript: str | None = None, summary: str | None = None
    ) -> bool:
        """Idle -> Evaluating -> Idle.

        On success the verdict is replaced wholesale and any edit in progress
        is reset onto it. On failure the previous verdict is left untouched and
        the error is recorded in ``last_error``.

        Returns False (and changes nothing) when the guard refuses the
        transition; True once the transition has run, whatever its outcome.
        """
        candidate_transcript = self._transcript if transcript is None else transcript
        candidate_summary = self._summary if summary is None else summary
        rejection = self._evaluation_rejection(
            transcript=candidate_transcript, summary=candidate_summary
        )
        if rejection is not None:
            self._reject(action="start_evaluation", reason=rejection)
            return False

        self._transcript = candidate_transcript
        self._summary = candidate_summary
        self._last_error = None
        self._enter(Phase.EVALUATING)
        try:
            result = await self._judge.evaluate(
                transcript=candidate_transcript, summary=candidate_summary
            )
        except MinutesJudgeError as exc:
            self._record_failure(exc)
        else:
            self._replace_evaluation(result, source="judge")
        finally:
            self._enter(Phase.IDLE)
        return True

    def commit_evaluation(self, result: EvaluationResult) -> None:
        """Accept a hand-edited verdict as the new authoritative value.

        Called by the edit session on commit.
        """
        self._replace_evaluation(result, source="edit")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _generation_rejection(self, transcript: str) -> GuardRejection | None:
        if self._phase is not Phase.IDLE:
            return GuardRejection.BUSY
        if not transcript.strip():
            return GuardRejection.BLANK_TRANSCRIPT
        return None

    def _evaluation_rejection(
        self, transcript: str, summary: str
    ) -> GuardRejection | None:
        if self._phase is not Phase.IDLE:
            return GuardRejection.BUSY
        if not transcript.strip():
            return GuardRejection.BLANK_TRANSCRIPT
        if not summary.strip():
            return GuardRejection.BLANK_SUMMARY
        return None

    def _reject(self, action: str, reason: GuardRejection) -> None:
        self._observer.pipeline_guard_rejected(
            action=action, phase=self._phase, reason=reason
        )

    def _enter(self, phase: Phase) -> None:
        previous = self._phase
        self._phase = phase
        self._observer.pipeline_phase_changed(previous=previous, current=phase)

    def _record_failure(self, exc: MinutesJudgeError) -> None:
        self._last_error = exc
        self._observer.pipeline_stage_failed(phase=self._phase, reason=str(exc))

    def _replace_evaluation(self, result: EvaluationResult | None, source: str) -> None:
        had_evaluation = self._evaluation is not None
        self._evaluation = result
        self._edit_session.reset(result)
        if result is not None:
            self._observer.pipeline_evaluation_replaced(
                overall_score=result.overall_score, source=source
            )
        elif had_evaluation:
            self._observer.pipeline_evaluation_cleared()
