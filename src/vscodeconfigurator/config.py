"""Tool configuration model for VSCode Configurator.

Captures optional user settings from a YAML file, with defaults
matching the toolchain arguments the configurator has always used.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

from vscodeconfigurator.errors import ConfiguratorError, ErrorKind

CONFIG_ENV_VAR = "VSCODECONFIGURATOR_CONFIG"


class ToolConfig(BaseModel):
    """User-level configuration loaded from config.yaml."""

    model_config = {"extra": "forbid"}

    templates_dir: str | None = None
    cargo_edition: str = "2021"
    globaljson_roll_forward: str = "latestMinor"
    check_exit_codes: bool = True


def default_config_path() -> Path:
    """Return the config file location, honouring VSCODECONFIGURATOR_CONFIG."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "vscodeconfigurator" / "config.yaml"


def load_tool_config(config_path: Path | None = None) -> ToolConfig:
    """Load ToolConfig from YAML. Returns defaults if the file is not found.

    Args:
        config_path: Path to the YAML file. If None, uses
            default_config_path() to locate it.

    Returns:
        Validated ToolConfig instance.

    Raises:
        ConfiguratorError: If the file is not valid YAML or has unknown
            or mistyped keys.
    """
    if config_path is None:
        config_path = default_config_path()
    if not config_path.exists():
        return ToolConfig()

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfiguratorError(
            f"The config file '{config_path}' is not valid YAML: {e}",
            ErrorKind.INVALID_CONFIG_FILE,
        ) from e
    if raw is None:
        return ToolConfig()

    try:
        return ToolConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfiguratorError(
            f"The config file '{config_path}' has invalid settings: {e}",
            ErrorKind.INVALID_CONFIG_FILE,
        ) from e
