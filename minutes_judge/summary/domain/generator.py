"""SummaryGenerator Protocol: structural interface for transcript summarizers."""

from typing import Protocol


class SummaryGenerator(Protocol):
    """Turns a raw meeting transcript into structured markdown minutes.

    Stateless: no retry, no caching. Implementations raise GenerationFailure
    when no usable text comes back.
    """

    async def generate(self, transcript: str) -> str: ...
