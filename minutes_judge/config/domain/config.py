"""Top-level AppConfig aggregate: the root configuration object."""

from pydantic import BaseModel, Field

from minutes_judge.config.domain.generator import GeneratorConfig
from minutes_judge.config.domain.judge import JudgeConfig


class AppConfig(BaseModel, frozen=True):
    """Root configuration aggregate for the summarize-then-judge pipeline.

    Every section has defaults, so an empty config file (or none at all) is a
    valid configuration.
    """

    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    judge: JudgeConfig = Field(default_factory=JudgeConfig)
