"""Tests for the EvaluationResult aggregate."""

import json

import pytest
from pydantic import ValidationError

from minutes_judge.evaluation.domain.metric import Metric, MetricName
from minutes_judge.evaluation.domain.result import EvaluationResult
from tests.evaluation.factories import make_evaluation, make_payload


class TestEvaluationResultValidation:
    """Only fully-populated payloads produce an EvaluationResult."""

    def test_complete_payload_validates(self) -> None:
        result = EvaluationResult.model_validate(make_payload())

        assert result.accuracy == Metric(score=9, reasoning="Attribution is correct.")
        assert result.overall_score == 8
        assert result.overall_comment == "Solid minutes."

    @pytest.mark.parametrize(
        "missing_key",
        ["accuracy", "completeness", "coverage", "structure", "overallScore", "overallComment"],
    )
    def test_missing_top_level_key_is_rejected(self, missing_key: str) -> None:
        payload = make_payload(**{missing_key: None})

        with pytest.raises(ValidationError):
            EvaluationResult.model_validate(payload)

    def test_metric_missing_reasoning_is_rejected(self) -> None:
        payload = make_payload(coverage={"score": 6})

        with pytest.raises(ValidationError):
            EvaluationResult.model_validate(payload)

    def test_metric_given_as_bare_number_is_rejected(self) -> None:
        payload = make_payload(structure=9)

        with pytest.raises(ValidationError):
            EvaluationResult.model_validate(payload)

    def test_additional_keys_are_ignored(self) -> None:
        payload = make_payload(clarity={"score": 3, "reasoning": "Extra."})

        result = EvaluationResult.model_validate(payload)

        assert "clarity" not in result.to_payload()

    def test_field_names_are_accepted_alongside_aliases(self) -> None:
        result = make_evaluation(overall_score=6, overall_comment="Okay.")

        assert result.overall_score == 6
        assert result.overall_comment == "Okay."


class TestEvaluationResultAccess:
    """Uniform access to the four named metrics."""

    def test_metric_returns_named_metric(self) -> None:
        result = make_evaluation(coverage=4)

        assert result.metric(MetricName.COVERAGE).score == 4

    def test_metric_accepts_plain_string_name(self) -> None:
        result = make_evaluation(structure=3)

        assert result.metric("structure").score == 3  # type: ignore[arg-type]

    def test_metrics_lists_all_four_in_rubric_order(self) -> None:
        names = [name for name, _ in make_evaluation().metrics()]

        assert names == list(MetricName)

    def test_with_metric_returns_copy_and_leaves_original(self) -> None:
        original = make_evaluation(accuracy=9)
        replacement = Metric(score=2, reasoning="Wrong owner for release notes.")

        updated = original.with_metric(MetricName.ACCURACY, replacement)

        assert updated.accuracy == replacement
        assert original.accuracy.score == 9
        assert updated.completeness == original.completeness


class TestEvaluationResultSerialization:
    """to_payload produces the camelCase wire shape."""

    def test_payload_uses_wire_keys(self) -> None:
        payload = make_evaluation().to_payload()

        assert set(payload) == {
            "accuracy",
            "completeness",
            "coverage",
            "structure",
            "overallScore",
            "overallComment",
        }

    def test_payload_parses_back_to_equal_result(self) -> None:
        original = make_evaluation(structure=2)

        parsed = EvaluationResult.model_validate_json(json.dumps(original.to_payload()))

        assert parsed == original

    def test_result_is_frozen(self) -> None:
        result = make_evaluation()

        with pytest.raises(ValidationError):
            result.overall_score = 1  # type: ignore[misc]
