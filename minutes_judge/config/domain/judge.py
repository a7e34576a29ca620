"""Judge configuration model."""

from pydantic import BaseModel, Field

DEFAULT_JUDGE_MODEL = "gemini/gemini-3-pro-preview"


class JudgeConfig(BaseModel, frozen=True):
    model: str = Field(default=DEFAULT_JUDGE_MODEL, min_length=1)
    temperature: float = Field(default=0.0, ge=0.0)
    api_key: str | None = None
