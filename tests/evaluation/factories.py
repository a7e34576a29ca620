"""Builders for EvaluationResult values shared across test modules."""

from typing import Any

from minutes_judge.evaluation.domain.metric import Metric
from minutes_judge.evaluation.domain.result import EvaluationResult


def make_evaluation(
    accuracy: int = 9,
    completeness: int = 8,
    coverage: int = 7,
    structure: int = 10,
    overall_score: int = 8,
    overall_comment: str = "Solid minutes.",
) -> EvaluationResult:
    return EvaluationResult(
        accuracy=Metric(score=accuracy, reasoning="Attribution is correct."),
        completeness=Metric(score=completeness, reasoning="One date missing."),
        coverage=Metric(score=coverage, reasoning="Hiring thread is thin."),
        structure=Metric(
            score=structure,
            reasoning="Both Meeting Notes and Action Items headers are present.",
        ),
        overall_score=overall_score,
        overall_comment=overall_comment,
    )


def make_payload(**overrides: Any) -> dict[str, Any]:
    """Return a complete wire payload; pass a key with value None to drop it."""
    payload: dict[str, Any] = {
        "accuracy": {"score": 9, "reasoning": "Attribution is correct."},
        "completeness": {"score": 8, "reasoning": "One date missing."},
        "coverage": {"score": 7, "reasoning": "Hiring thread is thin."},
        "structure": {"score": 10, "reasoning": "Both headers present."},
        "overallScore": 8,
        "overallComment": "Solid minutes.",
    }
    for key, value in overrides.items():
        if value is None:
            payload.pop(key, None)
        else:
            payload[key] = value
    return payload
