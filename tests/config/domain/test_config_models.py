"""Tests for defaults and validation constraints on config domain models."""

import pytest
from pydantic import ValidationError

from minutes_judge.config.domain.config import AppConfig
from minutes_judge.config.domain.generator import (
    DEFAULT_GENERATOR_MODEL,
    GeneratorConfig,
)
from minutes_judge.config.domain.judge import DEFAULT_JUDGE_MODEL, JudgeConfig


class TestDefaults:
    """Every section has usable defaults."""

    def test_generator_defaults(self) -> None:
        cfg = GeneratorConfig()

        assert cfg.model == DEFAULT_GENERATOR_MODEL
        assert cfg.temperature == 0.3
        assert cfg.api_key is None

    def test_judge_defaults_to_deterministic_temperature(self) -> None:
        cfg = JudgeConfig()

        assert cfg.model == DEFAULT_JUDGE_MODEL
        assert cfg.temperature == 0.0
        assert cfg.api_key is None

    def test_app_config_builds_from_empty_mapping(self) -> None:
        cfg = AppConfig.model_validate({})

        assert cfg.generator == GeneratorConfig()
        assert cfg.judge == JudgeConfig()


class TestValidation:
    """Constraints reject unusable values."""

    def test_negative_generator_temperature_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GeneratorConfig(temperature=-0.1)

    def test_negative_judge_temperature_rejected(self) -> None:
        with pytest.raises(ValidationError):
            JudgeConfig(temperature=-1.0)

    def test_empty_model_rejected(self) -> None:
        with pytest.raises(ValidationError):
            JudgeConfig(model="")

    def test_nested_section_is_validated(self) -> None:
        with pytest.raises(ValidationError):
            AppConfig.model_validate({"generator": {"temperature": "hot"}})


class TestImmutability:
    def test_config_is_frozen(self) -> None:
        cfg = JudgeConfig()

        with pytest.raises(ValidationError):
            cfg.temperature = 0.9  # type: ignore[misc]
