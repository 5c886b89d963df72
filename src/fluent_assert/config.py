from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator

CONFIG_ENV_VAR = "FLUENT_ASSERT_CONFIG"


class AssertionSettings(BaseModel):
    """Knobs shared by every assertion created after they are applied.

    Attributes:
        max_repr_length: Values rendered into failure messages are cut to this
            many characters (with a trailing ``...``). ``None`` disables it.
        accessor_prefixes: Getter-method prefixes tried before plain attribute
            access when reading a property segment.
        read_mapping_keys: Treat mapping keys as properties.
        unwrap_scalars: Replace scalar wrappers (ctypes, numpy scalars) with
            their plain Python value in extraction results.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_repr_length: int | None = 500
    accessor_prefixes: list[str] = ["get_", "is_"]
    read_mapping_keys: bool = True
    unwrap_scalars: bool = True

    @field_validator("max_repr_length")
    @classmethod
    def max_repr_length_must_be_positive(cls, v: int | None) -> int | None:
        if v is not None and v < 4:
            raise ValueError("max_repr_length must be at least 4")
        return v

    @field_validator("accessor_prefixes")
    @classmethod
    def prefixes_must_be_identifiers(cls, v: list[str]) -> list[str]:
        for prefix in v:
            if not prefix or not prefix.replace("_", "a").isidentifier():
                raise ValueError(f"Accessor prefix '{prefix}' is not a valid identifier prefix")
        return v


def _expand(value: Any) -> Any:
    if isinstance(value, str):
        return expandvars(value, nounset=True)
    if isinstance(value, list):
        return [_expand(v) for v in value]
    if isinstance(value, dict):
        return {k: _expand(v) for k, v in value.items()}
    return value


def load_settings(path: Path) -> AssertionSettings:
    """Load and validate settings from a YAML file.

    String values may reference environment variables as ``${VAR}`` or
    ``${VAR:-default}``; a reference to an unset variable without a default
    is an error.
    """
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")

    try:
        expanded = _expand(raw)
    except Exception as e:
        raise ValueError(f"Settings file {path} references an unset variable: {e}") from e

    return AssertionSettings(**expanded)


_settings: AssertionSettings | None = None


def get_settings() -> AssertionSettings:
    """Return the active settings, loading them from ``$FLUENT_ASSERT_CONFIG`` on first use."""
    global _settings
    if _settings is None:
        config_path = os.environ.get(CONFIG_ENV_VAR)
        _settings = load_settings(Path(config_path)) if config_path else AssertionSettings()
    return _settings


def configure(settings: AssertionSettings) -> None:
    global _settings
    _settings = settings


def reset_settings() -> None:
    global _settings
    _settings = None
