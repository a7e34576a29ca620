"""Expansion of ${ENV_VAR} references inside raw YAML config data."""

import os
import re
from collections.abc import Mapping
from typing import TypeAlias

from minutes_judge.config.infrastructure.errors import MissingEnvVarsError

_ENV_REF = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

RawValue: TypeAlias = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def expand_env_refs(
    data: RawValue, environ: Mapping[str, str] | None = None
) -> RawValue:
    """Return a copy of *data* with every ${VAR} replaced by its value.

    The whole tree is walked before failing, so a single MissingEnvVarsError
    names every unset variable (in first-seen order).

    Raises:
        MissingEnvVarsError: if any referenced variable is unset.
    """
    env = os.environ if environ is None else environ
    missing: list[str] = []
    expanded = _expand(data, env, missing)
    if missing:
        raise MissingEnvVarsError(missing_vars=missing)
    return expanded


def _expand(data: RawValue, env: Mapping[str, str], missing: list[str]) -> RawValue:
    if isinstance(data, str):

        def _lookup(match: re.Match[str]) -> str:
            name = match.group(1)
            if name in env:
                return env[name]
            if name not in missing:
                missing.append(name)
            return match.group(0)

        return _ENV_REF.sub(_lookup, data)
    if isinstance(data, list):
        return [_expand(item, env, missing) for item in data]
    if isinstance(data, dict):
        return {key: _expand(value, env, missing) for key, value in data.items()}
    return data
