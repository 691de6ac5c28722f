# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Configuration loading and management for landscaper-cli."""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional
from unittest.mock import patch

import yaml
from pydantic import ValidationError

from landscaper_cli.cli.constants import ENV_PREFIX
from landscaper_cli.cli.exceptions import ConfigurationError

from .schema import CliConfig

logger = logging.getLogger(__name__)


def load_config(config_file: Optional[Path] = None, **cli_overrides) -> CliConfig:
    """Load configuration with hierarchical priority.

    Priority order (highest to lowest):
    1. CLI arguments (passed as kwargs, None values are skipped)
    2. Environment variables (LANDSCAPER_CLI_* prefix)
    3. Config file
    4. Built-in defaults

    Args:
        config_file: Explicit config file (otherwise discovered)
        **cli_overrides: CLI argument overrides

    Returns:
        CliConfig object

    Raises:
        ConfigurationError: If a config file is missing, invalid YAML, or a
            value fails validation
    """
    overrides = {key: value for key, value in cli_overrides.items() if value is not None}
    if config_file:
        overrides['_config_file'] = config_file

    try:
        config = CliConfig(**overrides)
    except ValidationError as e:
        details = [
            f"{' → '.join(str(x) for x in error['loc'])}: {error['msg']}"
            for error in e.errors()
        ]
        raise ConfigurationError("Configuration validation failed", details=details) from e
    except (yaml.YAMLError, OSError) as e:
        raise ConfigurationError(f"Failed to load configuration: {e}") from e

    logger.debug(f"Loaded configuration: log_level={config.log_level}, no_color={config.no_color}")
    return config


@lru_cache(maxsize=1)
def get_config() -> CliConfig:
    """Get cached configuration instance."""
    return load_config()


def reset_config() -> None:
    """Reset the cached configuration (mainly for testing)."""
    get_config.cache_clear()


def get_default_config() -> CliConfig:
    """Get a configuration instance with only default values (no files or env vars)."""
    filtered_env = {
        k: v for k, v in os.environ.items()
        if not k.startswith(ENV_PREFIX)
    }

    with patch.dict(os.environ, filtered_env, clear=True):
        # Prevent loading config files
        return load_config(config_file=Path(os.devnull))
