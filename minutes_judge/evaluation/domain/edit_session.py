"""EvaluationEditSession: a local overlay for hand-tuning a committed verdict."""

from typing import Protocol

from minutes_judge.evaluation.domain.errors import EditSessionInactiveError
from minutes_judge.evaluation.domain.metric import Metric, MetricName
from minutes_judge.evaluation.domain.observer import EditSessionObserver
from minutes_judge.evaluation.domain.result import EvaluationResult

_OVERALL_SCORE = "overall_score"
_OVERALL_COMMENT = "overall_comment"


class EvaluationHolder(Protocol):
    """Owner of the authoritative EvaluationResult an edit session borrows from."""

    @property
    def evaluation(self) -> EvaluationResult | None: ...

    def commit_evaluation(self, result: EvaluationResult) -> None: ...


class EvaluationEditSession:
    """Working copy plus dirty tracking over the holder's authoritative verdict.

    ``working_copy`` is what a front end displays: it mirrors the authoritative
    value while no edit is in progress, and diverges from it only between
    ``begin_edit()`` and ``commit()`` / ``discard()``. When the holder's value is
    replaced from outside, the holder calls ``reset()`` so an edit made against
    the old verdict can never be committed over the new one.
    """

    def __init__(self, holder: EvaluationHolder, observer: EditSessionObserver) -> None:
        self._holder = holder
        self._observer = observer
        self._working_copy: EvaluationResult | None = holder.evaluation
        self._editing = False
        self._changed: list[str] = []

    @property
    def is_editing(self) -> bool:
        return self._editing

    @property
    def is_dirty(self) -> bool:
        return bool(self._changed)

    @property
    def changed_fields(self) -> list[str]:
        return list(self._changed)

    @property
    def working_copy(self) -> EvaluationResult | None:
        return self._working_copy

    def begin_edit(self) -> bool:
        """Snapshot the authoritative verdict into the working copy.

        Returns False when there is nothing to edit. Calling it while already
        editing keeps the pending edits.
        """
        if self._editing:
            return True
        authoritative = self._holder.evaluation
        if authoritative is None:
            return False
        self._working_copy = authoritative
        self._editing = True
        self._changed = []
        self._observer.edit_started()
        return True

    def set_metric(self, name: MetricName, metric: Metric) -> None:
        name = MetricName(name)
        working = self._require_working_copy(field=name.value)
        self._apply(working.with_metric(name, metric), field=name.value)

    def set_metric_score(self, name: MetricName, score: int) -> None:
        name = MetricName(name)
        working = self._require_working_copy(field=name.value)
        current = working.metric(name)
        self.set_metric(name, Metric(score=score, reasoning=current.reasoning))

    def set_metric_reasoning(self, name: MetricName, reasoning: str) -> None:
        name = MetricName(name)
        working = self._require_working_copy(field=name.value)
        current = working.metric(name)
        self.set_metric(name, Metric(score=current.score, reasoning=reasoning))

    def set_overall_score(self, score: int) -> None:
        working = self._require_working_copy(field=_OVERALL_SCORE)
        self._apply(
            working.model_copy(update={_OVERALL_SCORE: score}), field=_OVERALL_SCORE
        )

    def set_overall_comment(self, comment: str) -> None:
        working = self._require_working_copy(field=_OVERALL_COMMENT)
        self._apply(
            working.model_copy(update={_OVERALL_COMMENT: comment}),
            field=_OVERALL_COMMENT,
        )

    def commit(self) -> bool:
        """Promote the working copy to the holder and end the edit.

        A no-op returning False when no edit is in progress.
        """
        if not self._editing or self._working_copy is None:
            return False
        committed = self._working_copy
        changed = list(self._changed)
        self._editing = False
        self._changed = []
        self._holder.commit_evaluation(committed)
        self._observer.edit_committed(changed_fields=changed)
        return True

    def discard(self) -> None:
        """Drop pending edits and fall back to the authoritative verdict."""
        if not self._editing:
            return
        changed = list(self._changed)
        self._working_copy = self._holder.evaluation
        self._editing = False
        self._changed = []
        self._observer.edit_discarded(changed_fields=changed)

    def reset(self, authoritative: EvaluationResult | None) -> None:
        """End any edit and mirror a verdict that was replaced from outside."""
        had_pending_edits = self._editing and bool(self._changed)
        was_editing = self._editing
        self._working_copy = authoritative
        self._editing = False
        self._changed = []
        if was_editing:
            self._observer.edit_reset(had_pending_edits=had_pending_edits)

    def _require_working_copy(self, field: str) -> EvaluationResult:
        if not self._editing or self._working_copy is None:
            raise EditSessionInactiveError(field=field)
        return self._working_copy

    def _apply(self, updated: EvaluationResult, field: str) -> None:
        self._working_copy = updated
        if field not in self._changed:
            self._changed.append(field)
        self._observer.edit_field_changed(field=field)
