"""LiteLLMSummaryGenerator: summary generator backed by LiteLLM."""

import time

import litellm

from minutes_judge.config.domain.generator import GeneratorConfig
from minutes_judge.summary.domain.observer import SummaryObserver
from minutes_judge.summary.infrastructure.errors import GenerationFailure

_SYSTEM_PROMPT = """\
You are a precise minute-taker. Generate a structured summary of the meeting \
transcript you are given.

Format requirements:
- Use Markdown.
- Section 1: "**Meeting Notes**" (key discussion points and decisions).
- Section 2: "**Action Items**" (a clear checklist of tasks, each assigned to \
the specific person who agreed to do it).

Attribute every point and task to the speaker who actually said or owns it. \
Keep dates, numbers and deadlines exactly as stated. Cover every distinct \
topic that was discussed.
"""


class LiteLLMSummaryGenerator:
    """SummaryGenerator implementation that delegates to an LLM via LiteLLM.

    Performs no validation of the returned markdown; judging its structure is
    the judge's job.
    """

    def __init__(self, config: GeneratorConfig, observer: SummaryObserver) -> None:
        litellm.suppress_debug_info = True
        self._config = config
        self._observer = observer

    async def generate(self, transcript: str) -> str:
        """Ask the model for meeting minutes and return the raw markdown.

        Raises:
            GenerationFailure: if the LLM call fails or returns no usable text.
        """
        self._observer.summary_generation_started(
            model=self._config.model,
            transcript_chars=len(transcript),
        )

        start = time.monotonic()
        try:
            response = await litellm.acompletion(
                model=self._config.model,
                temperature=self._config.temperature,
                api_key=self._config.api_key,
                messages=[
                    {"role": "system", "content": _SYSTEM_PROMPT},
                    {"role": "user", "content": f"## Transcript\n{transcript}"},
                ],
            )
        except Exception as exc:
            raise self._fail(reason=str(exc)) from exc

        duration_ms = int((time.monotonic() - start) * 1000)

        try:
            content: str | None = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as exc:
            raise self._fail(reason="model returned no text") from exc
        if content is None or not content.strip():
            raise self._fail(reason="model returned no text")

        self._observer.summary_generation_completed(
            model=self._config.model,
            duration_ms=duration_ms,
            summary_chars=len(content),
        )
        return content

    def _fail(self, reason: str) -> GenerationFailure:
        self._observer.summary_generation_failed(
            model=self._config.model,
            reason=reason,
        )
        return GenerationFailure(reason=reason)
