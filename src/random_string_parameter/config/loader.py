"""Read and write the YAML configuration file."""

from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from random_string_parameter.config.schema import PluginConfig


DEFAULT_CONFIG_PATH = Path.home() / ".random-string-parameter" / "config.yaml"


class ConfigError(Exception):
    """The configuration file could not be read or is invalid."""


def load_config(path: Optional[Path] = None) -> PluginConfig:
    """Load the configuration, falling back to defaults.

    A missing or empty file yields ``PluginConfig()``; the plugin runs with
    the default pattern and server settings without any file at all.

    Raises:
        ConfigError: If the file is not YAML, not a mapping, or fails validation
    """
    path = path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return PluginConfig()

    try:
        raw = yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if raw is None:
        return PluginConfig()
    if not isinstance(raw, dict):
        raise ConfigError(f"Expected a mapping at the top of {path}")

    try:
        return PluginConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed for {path}: {e}") from e


def save_config(config: PluginConfig, path: Optional[Union[str, Path]] = None) -> None:
    """Write ``config`` as YAML, creating parent directories as needed."""
    target = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(
        yaml.safe_dump(config.model_dump(), default_flow_style=False, sort_keys=False)
    )
