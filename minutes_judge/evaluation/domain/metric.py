"""Metric: one scored rubric dimension of a judge verdict."""

from enum import StrEnum
from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, BeforeValidator, ConfigDict

ScoreBand: TypeAlias = Literal["high", "medium", "low"]

DISPLAY_MIN = 0
DISPLAY_MAX = 10


def _require_number(value: object) -> object:
    # int would otherwise accept true and "7" in lax mode.
    if isinstance(value, (bool, str)):
        raise ValueError(f"score must be a number, got {type(value).__name__}")
    return value


# Whole numbers only; 8.0 is accepted, 7.5 is not.
Score = Annotated[int, BeforeValidator(_require_number)]


class MetricName(StrEnum):
    """The closed set of rubric dimensions a judge scores.

    accuracy:     faithfulness of claims and correct attribution of task owners.
    completeness: omitted decisions, dates, numbers or agreed tasks.
    coverage:     breadth and balance across distinct discussion threads.
    structure:    expected section headers present and clean formatting.
    """

    ACCURACY = "accuracy"
    COMPLETENESS = "completeness"
    COVERAGE = "coverage"
    STRUCTURE = "structure"


class Metric(BaseModel):
    """A score and its justification, always constructed together.

    The score is unbounded: an out-of-range value from the judge
    or from a manual edit stays visible instead of being coerced.
    """

    model_config = ConfigDict(frozen=True)

    score: Score
    reasoning: str


def display_fill(score: int) -> int:
    """Clamp a score to [0, 10] for rendering a score bar.

    Presentation only, the stored score is never altered.
    """
    return min(max(score, DISPLAY_MIN), DISPLAY_MAX)


def score_band(score: int) -> ScoreBand:
    if score >= 8:
        return "high"
    if score >= 5:
        return "medium"
    return "low"
