# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from __future__ import annotations  # PEP 563: Postponed evaluation of annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TYPE_CHECKING

# Type hints only - settings imported lazily inside methods
if TYPE_CHECKING:
    from landscaper_cli.settings import CliConfig

logger = logging.getLogger(__name__)


@dataclass
class ApplicationContext:
    """CLI execution context with CliConfig loading and CLI argument handling."""

    config_file: Path | None = None
    overrides: dict[str, Any] = field(default_factory=dict)

    # Loaded configuration
    config: "CliConfig | None" = None

    @classmethod
    def from_cli_args(
        cls,
        config_file: Path | None,
        log_level: str | None,
        no_color: bool,
        cli_name: str
    ) -> "ApplicationContext":
        """Create context from CLI arguments and perform all initialization.

        Args:
            config_file: Path to config file override
            log_level: Verbosity from the command line (None keeps configured value)
            no_color: Disable colored output
            cli_name: Name of CLI (for logging)

        Returns:
            Initialized ApplicationContext with loaded configuration
        """
        from landscaper_cli._internal.logging import setup_logging
        from .utils import configure_console

        context = cls(config_file=config_file)

        if log_level:
            context.overrides["log_level"] = log_level
        if no_color:
            context.overrides["no_color"] = True

        config = context.get_effective_config()

        setup_logging(level=config.log_level)
        configure_console(no_color=config.no_color)
        logger.debug(f"{cli_name} CLI initialized with log_level={config.log_level}")

        return context

    def load_configuration(self) -> None:
        from landscaper_cli.settings import load_config

        self.config = load_config(config_file=self.config_file, **self.overrides)

    def get_effective_config(self) -> "CliConfig":
        if not self.config:
            self.load_configuration()
        return self.config
