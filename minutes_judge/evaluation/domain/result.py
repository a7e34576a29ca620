"""EvaluationResult: the judge's full verdict over a summary."""

from pydantic import BaseModel, ConfigDict, Field

from minutes_judge.evaluation.domain.metric import Metric, MetricName, Score


class EvaluationResult(BaseModel):
    """Immutable aggregate of the four rubric metrics plus the overall verdict.

    Serializes to the wire shape the judge is asked to produce, with
    ``overallScore`` / ``overallComment`` as camelCase keys. Unknown keys in a
    payload are ignored; every listed field is required.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    accuracy: Metric
    completeness: Metric
    coverage: Metric
    structure: Metric
    overall_score: Score = Field(alias="overallScore")
    overall_comment: str = Field(alias="overallComment")

    def metric(self, name: MetricName) -> Metric:
        return getattr(self, MetricName(name).value)

    def metrics(self) -> list[tuple[MetricName, Metric]]:
        """Return (name, metric) pairs in rubric order."""
        return [(name, self.metric(name)) for name in MetricName]

    def with_metric(self, name: MetricName, metric: Metric) -> "EvaluationResult":
        return self.model_copy(update={MetricName(name).value: metric})

    def to_payload(self) -> dict[str, object]:
        """Return the JSON-ready wire representation."""
        return self.model_dump(mode="json", by_alias=True)
