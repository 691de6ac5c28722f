# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""landscaper-cli configuration schema using Pydantic.

Configuration Priority
----------------------
Settings are loaded from multiple sources with the following priority (highest to lowest):
1. CLI arguments (passed to CliConfig constructor)
2. Environment variables (LANDSCAPER_CLI_* prefix)
3. Config file (--config, $LANDSCAPER_CLI_CONFIG, or ~/.landscaper-cli/config.yaml)
4. Built-in defaults (Field defaults in CliConfig)
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from landscaper_cli._internal.io.yaml import describe_yaml_error, load_yaml
from landscaper_cli._internal.logging import LEVEL_MAP
from landscaper_cli.cli.constants import (
    ENV_CONFIG_FILE,
    ENV_PREFIX,
    USER_CONFIG_DIR,
    USER_CONFIG_FILE,
)


def _find_config_file() -> Path | None:
    """Locate the config file when none was given explicitly.

    Search order:
    1. $LANDSCAPER_CLI_CONFIG (used even if missing, so typos surface)
    2. ~/.landscaper-cli/config.yaml if it exists
    """
    if env_file := os.environ.get(ENV_CONFIG_FILE):
        return Path(env_file).expanduser()

    candidate = USER_CONFIG_DIR / USER_CONFIG_FILE
    if candidate.exists():
        return candidate

    return None


class YamlSettingsSource(PydanticBaseSettingsSource):
    """Settings source reading a single YAML config file."""

    def __init__(self, settings_cls: type[BaseSettings], config_file: Path | None = None):
        super().__init__(settings_cls)
        self.config_file = config_file if config_file is not None else _find_config_file()
        self._data = self._load()

    def _load(self) -> dict[str, Any]:
        """Load the config file.

        Raises:
            yaml.YAMLError: If the config file has syntax errors
            FileNotFoundError: If the config file doesn't exist
        """
        if self.config_file is None:
            return {}

        try:
            data = load_yaml(self.config_file)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(
                f"Invalid YAML in config file {self.config_file} at {describe_yaml_error(e)}"
            ) from e

        if not isinstance(data, dict):
            raise yaml.YAMLError(f"Config file {self.config_file} must contain a mapping")
        return data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        if field_name in self._data:
            return self._data[field_name], field_name, True
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        return {
            name: value
            for name, value in self._data.items()
            if name in self.settings_cls.model_fields
        }


class CliConfig(BaseSettings):
    """Configuration schema with hierarchical priority.

    Priority order (highest to lowest):
    1. CLI arguments (passed to constructor)
    2. Environment variables (LANDSCAPER_CLI_* prefix)
    3. Config file
    4. Built-in defaults
    """

    log_level: str = Field(
        default="normal", description="Console verbosity level: quiet | normal | verbose | debug"
    )
    no_color: bool = Field(default=False, description="Disable colored console output")

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        validate_assignment=True,
        extra="ignore",
        case_sensitive=False,
        env_file=None,  # Config files are handled by YamlSettingsSource
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.lower()
        if value not in LEVEL_MAP:
            raise ValueError(f"unknown log level {value!r}, choose from {', '.join(LEVEL_MAP)}")
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Init args win over env vars, which win over the config file.

        An explicit config file path travels in the init kwargs as ``_config_file``.
        """
        config_file = init_settings().get("_config_file")

        return (
            init_settings,
            env_settings,
            YamlSettingsSource(
                settings_cls, config_file=Path(config_file) if config_file else None
            ),
        )
