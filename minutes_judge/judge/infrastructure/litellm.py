"""LiteLLMJudge: judge implementation using LiteLLM for structured scoring."""

import time

import litellm

from minutes_judge.config.domain.judge import JudgeConfig
from minutes_judge.evaluation.domain.result import EvaluationResult
from minutes_judge.judge.domain.observer import JudgeObserver
from minutes_judge.judge.infrastructure.errors import EvaluationFailure
from minutes_judge.judge.infrastructure.payload import parse_evaluation

_SYSTEM_PROMPT = """\
You are an expert Meeting Minute Auditor. Compare the Generated Meeting Minutes \
against the Original Transcript and identify discrepancies. Score each metric \
on a 1-10 integer scale using the rubric below, and give specific reasoning for \
each score that quotes or points at the transcript.

The Generated Meeting Minutes are expected to have two sections:
1. **Meeting Notes**: a summary of the discussion and decisions.
2. **Action Items**: a list of task assignments.

## Metric 1: Accuracy (1-10)

Focus: hallucinations and attribution.
- Did each speaker actually say what the Notes attribute to them?
- Is every Action Item assigned to the correct person? If the transcript says \
"John will do X" but the Action Item says "Sarah: X", that is a major error.

## Metric 2: Completeness (1-10)

Focus: omitted detail.
- Are significant decisions, dates, numbers or deadlines from the transcript \
missing from the Notes?
- Are tasks agreed upon in the transcript missing from the Action Items?

## Metric 3: Coverage (1-10)

Focus: breadth across topics, not detail within a topic.
- Does the summary touch every distinct discussion thread in the transcript?
- Is attention balanced, or is one thread summarized at the expense of others?

## Metric 4: Structure (1-10)

Focus: formatting and organization.
- Are the headers "**Meeting Notes**" and "**Action Items**" both present? \
Name any header that is missing in your reasoning.
- Is the formatting clean (bullet points, bold owners, no stray prose)?

## Output Format

Respond with a JSON object containing:
- accuracy: {"score": integer 1-10, "reasoning": string}
- completeness: {"score": integer 1-10, "reasoning": string}
- coverage: {"score": integer 1-10, "reasoning": string}
- structure: {"score": integer 1-10, "reasoning": string}
- overallScore: integer 1-10
- overallComment: a short final verdict
"""


class LiteLLMJudge:
    """Judge implementation that delegates to an LLM via LiteLLM.

    The request is constrained to the EvaluationResult schema through
    ``response_format``; the response is still validated against that schema
    here, since providers do not all honour the constraint.
    """

    def __init__(self, config: JudgeConfig, observer: JudgeObserver) -> None:
        litellm.suppress_debug_info = True
        self._config = config
        self._observer = observer

        if config.temperature > 0.0:
            self._observer.judge_high_temperature_warned(
                model=config.model,
                temperature=config.temperature,
            )

    async def evaluate(self, transcript: str, summary: str) -> EvaluationResult:
        """Invoke the LLM judge and return a validated EvaluationResult.

        Raises:
            EvaluationFailure: if the LLM call fails, returns no payload, or the
                payload cannot be parsed into a complete EvaluationResult.
        """
        self._observer.judge_evaluation_started(
            model=self._config.model,
            transcript_chars=len(transcript),
            summary_chars=len(summary),
        )

        user_message = (
            f"## Original Transcript\n{transcript}\n\n"
            f"## Generated Meeting Minutes\n{summary}\n\n"
            "Return the JSON result."
        )

        start = time.monotonic()
        try:
            response = await litellm.acompletion(
                model=self._config.model,
                temperature=self._config.temperature,
                api_key=self._config.api_key,
                response_format=EvaluationResult,
                messages=[
                    {"role": "system", "content": _SYSTEM_PROMPT},
                    {"role": "user", "content": user_message},
                ],
            )
        except Exception as exc:
            raise self._fail(reason=str(exc)) from exc

        duration_ms = int((time.monotonic() - start) * 1000)

        try:
            raw_content: str | None = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as exc:
            raise self._fail(reason="judge returned no payload") from exc
        if raw_content is None or not raw_content.strip():
            raise self._fail(reason="judge returned no payload")

        try:
            result = parse_evaluation(raw_content)
        except EvaluationFailure as exc:
            self._observer.judge_evaluation_failed(
                model=self._config.model,
                reason=exc.reason,
            )
            raise

        self._observer.judge_evaluation_completed(
            model=self._config.model,
            duration_ms=duration_ms,
            overall_score=result.overall_score,
        )
        return result

    def _fail(self, reason: str) -> EvaluationFailure:
        self._observer.judge_evaluation_failed(
            model=self._config.model,
            reason=reason,
        )
        return EvaluationFailure(reason=reason)
