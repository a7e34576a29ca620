"""YAML config loader: parses, expands env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from minutes_judge.config.domain.config import AppConfig
from minutes_judge.config.domain.observer import ConfigObserver
from minutes_judge.config.infrastructure.env_interpolation import expand_env_refs
from minutes_judge.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
)


class YamlConfigLoader:
    """Loads, expands, validates, and returns an AppConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> AppConfig:
        """
        Load and validate an AppConfig from a YAML file.

        Raises:
            ConfigLoadError: if the file is missing or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the document is not a mapping or violates the schema.
        """
        raw = _parse_yaml(path=path)
        expanded = expand_env_refs(raw)
        cfg = _build_config(raw=expanded)
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(
            path=str(path),
            generator_model=cfg.generator.model,
            judge_model=cfg.judge.model,
        )
        return cfg

    def load_default(self) -> AppConfig:
        """Return the built-in defaults, emitting the same events as load()."""
        cfg = AppConfig()
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(
            path="<defaults>",
            generator_model=cfg.generator.model,
            judge_model=cfg.judge.model,
        )
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason="invalid YAML") from exc


def _build_config(raw: Any) -> AppConfig:
    # An empty document parses as None and means "all defaults".
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"top-level document must be a mapping, got {type(raw).__name__}"
        )
    try:
        return AppConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _emit_warnings(cfg: AppConfig, observer: ConfigObserver) -> None:
    if cfg.judge.temperature > 0.0:
        observer.config_judge_temperature_warning(cfg.judge.temperature)
