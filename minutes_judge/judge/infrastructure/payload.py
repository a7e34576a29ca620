"""Cleanup and schema validation of raw judge payloads."""

import re

from pydantic import ValidationError

from minutes_judge.evaluation.domain.result import EvaluationResult
from minutes_judge.judge.infrastructure.errors import EvaluationFailure

# A fence line: ``` or ~~~, optionally followed by a language tag such as "json".
_LEADING_FENCE = re.compile(r"\A\s*(?:```|~~~)[A-Za-z0-9_+-]*[ \t]*(?:\r?\n)?")
_TRAILING_FENCE = re.compile(r"(?:\r?\n)?[ \t]*(?:```|~~~)\s*\Z")


def strip_fences(payload: str) -> str:
    """Remove a leading and a trailing code fence wrapped around a payload.

    A payload without fences is returned unchanged, so applying this twice is
    the same as applying it once.
    """
    unfenced = _LEADING_FENCE.sub("", payload, count=1)
    return _TRAILING_FENCE.sub("", unfenced, count=1)


def parse_evaluation(payload: str) -> EvaluationResult:
    """Strip fences and validate the payload as one complete EvaluationResult.

    Raises:
        EvaluationFailure: if the payload is not JSON or violates the schema.
    """
    cleaned = strip_fences(payload)
    try:
        return EvaluationResult.model_validate_json(cleaned)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
            for error in exc.errors()
        )
        raise EvaluationFailure(
            reason=f"payload does not match schema: {problems}"
        ) from exc
