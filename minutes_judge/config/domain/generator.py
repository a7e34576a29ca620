"""Summary generator configuration model."""

from pydantic import BaseModel, Field

DEFAULT_GENERATOR_MODEL = "gemini/gemini-2.5-flash"


class GeneratorConfig(BaseModel, frozen=True):
    model: str = Field(default=DEFAULT_GENERATOR_MODEL, min_length=1)
    temperature: float = Field(default=0.3, ge=0.0)
    api_key: str | None = None
