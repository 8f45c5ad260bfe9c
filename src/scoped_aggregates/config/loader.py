"""
Configuration loading utilities.

Supports environment variable interpolation and config inheritance.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from scoped_aggregates.config.settings import ScopingConfig


def _interpolate_env_vars(value: str) -> str:
    """
    Interpolate environment variables in string values.

    Supports ${VAR} and ${VAR:default} syntax.
    """
    pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)
        return os.environ.get(var_name, default if default is not None else "")

    return re.sub(pattern, replacer, value)


def _process_config_values(obj: Any) -> Any:
    """Recursively process config values for env var interpolation."""
    if isinstance(obj, str):
        return _interpolate_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _process_config_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_process_config_values(item) for item in obj]
    return obj


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and process environment variables."""
    with path.open(encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            msg = f"Malformed YAML in {path}: {e}"
            raise ValueError(msg) from e
    if data is not None and not isinstance(data, dict):
        msg = f"Config {path} must contain a mapping, got {type(data).__name__}"
        raise ValueError(msg)
    return _process_config_values(data) if data else {}


def load_config(
    config_path: Path,
    base_path: Path | None = None,
) -> ScopingConfig:
    """
    Load scoping configuration from YAML file(s).

    Minimal config:

        scope_name: InjectionType
        scope_keys: [Recap, WhoToFollow]
        features:
          - name: user_injection_aggregate.pair.any_label.any_feature.5.days.count

    Args:
        config_path: Path to the main configuration file.
        base_path: Optional path to base configuration for inheritance.

    Returns:
        Fully validated ScopingConfig instance.

    Raises:
        ValueError: If required fields are missing or invalid.
    """
    if base_path is not None:
        base_data = load_yaml(base_path)
    else:
        potential_base = config_path.parent / "base.yaml"
        is_self = potential_base.resolve() == config_path.resolve()
        base_data = (
            load_yaml(potential_base)
            if potential_base.exists() and not is_self
            else {}
        )

    merged = _deep_merge(base_data, load_yaml(config_path))

    if not merged.get("scope_name"):
        msg = "Config must specify 'scope_name'"
        raise ValueError(msg)
    if not merged.get("scope_keys"):
        msg = "Config must specify 'scope_keys'"
        raise ValueError(msg)

    # YAML may parse keys such as 2024 or yes as non-strings
    if isinstance(merged["scope_keys"], list):
        merged["scope_keys"] = [str(key) for key in merged["scope_keys"]]

    try:
        return ScopingConfig.model_validate(merged)
    except ValidationError as e:
        msg = f"Invalid configuration in {config_path}: {e}"
        raise ValueError(msg) from e
