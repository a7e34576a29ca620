"""FakeSummaryGenerator: in-memory SummaryGenerator for use in tests."""

import asyncio

from minutes_judge.summary.infrastructure.errors import GenerationFailure

DEFAULT_SUMMARY = """\
**Meeting Notes**
- Launch moves to October 15th.

**Action Items**
- [ ] Speaker 2: notify the engineering team
"""


class FakeSummaryGenerator:
    """Satisfies the SummaryGenerator protocol with a canned summary or error.

    Set ``gate`` to an unset asyncio.Event to hold generate() open until the
    test releases it.
    """

    def __init__(
        self,
        summary: str = DEFAULT_SUMMARY,
        error: GenerationFailure | None = None,
    ) -> None:
        self._summary = summary
        self._error = error
        self.gate: asyncio.Event | None = None
        self.transcripts: list[str] = []

    async def generate(self, transcript: str) -> str:
        self.transcripts.append(transcript)
        if self.gate is not None:
            await self.gate.wait()
        if self._error is not None:
            raise self._error
        return self._summary
