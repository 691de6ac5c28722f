# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Scaffolding of deploy executions inside a blueprint directory.

A deploy execution is registered in blueprint.yaml and points at a companion
file ``<name>DeployExecution.yaml`` next to it, which holds the template for
the deploy items. Adding an execution:

1. loads blueprint.yaml,
2. rejects names that are already registered,
3. creates the companion file with an empty deploy item list unless it exists,
4. appends the execution and writes blueprint.yaml back.

The blueprint is overwritten as a whole. A companion file created before a
failed write is left in place.
"""

from __future__ import annotations

import logging
import stat
from dataclasses import dataclass, field
from pathlib import Path

from landscaper_cli._internal.io.yaml import dump_yaml
from landscaper_cli.cli.exceptions import (
    DuplicateExecutionError,
    LoadError,
    PathConflictError,
    WriteError,
)
from landscaper_cli.cli.messages import (
    BLUEPRINT_LOAD_HINTS,
    EXECUTION_DIR_CONFLICT,
    EXECUTION_DIR_CONFLICT_HINT,
    EXECUTION_EXISTS,
)

from .codec import BlueprintCodec, BlueprintDecodeError
from .schema import BLUEPRINT_FILE_NAME, GO_TEMPLATE_TYPE, Blueprint, TemplateExecutor

EXECUTION_FILE_SUFFIX = "DeployExecution.yaml"
EMPTY_DEPLOY_ITEMS = {"deployItems": []}


@dataclass
class ExecutionAdder:
    """Adds a GoTemplate deploy execution skeleton to a blueprint directory."""

    blueprint_dir: Path
    name: str
    codec: BlueprintCodec = field(default_factory=BlueprintCodec)

    def __post_init__(self) -> None:
        self.blueprint_dir = Path(self.blueprint_dir)

    @property
    def blueprint_path(self) -> Path:
        return self.blueprint_dir / BLUEPRINT_FILE_NAME

    @property
    def execution_file_name(self) -> str:
        return f"{self.name}{EXECUTION_FILE_SUFFIX}"

    @property
    def execution_file_path(self) -> Path:
        return self.blueprint_dir / self.execution_file_name

    def run(self, log: logging.Logger) -> TemplateExecutor:
        """Add the execution and persist the blueprint.

        Args:
            log: Logger receiving progress messages

        Returns:
            The execution appended to the blueprint

        Raises:
            LoadError: blueprint.yaml is missing, unreadable or malformed
            DuplicateExecutionError: an execution with this name exists
            PathConflictError: a directory occupies the companion file path
            WriteError: the companion file or the blueprint could not be written
        """
        blueprint = self.read_blueprint()
        log.debug(f"Loaded {self.blueprint_path} with "
                  f"{len(blueprint.deploy_executions)} deploy executions")

        if blueprint.has_execution(self.name):
            raise DuplicateExecutionError(EXECUTION_EXISTS.format(name=self.name))

        if self.execution_file_exists():
            log.info(f"Keeping existing execution file {self.execution_file_path}")
        else:
            self.create_execution_file()
            log.info(f"Created execution file {self.execution_file_path}")

        execution = TemplateExecutor(
            name=self.name,
            type=GO_TEMPLATE_TYPE,
            file=f"/{self.execution_file_name}",
        )
        blueprint.append_execution(execution)

        self.write_blueprint(blueprint)
        log.info(f"Registered deploy execution {self.name} in {self.blueprint_path}")
        return execution

    def read_blueprint(self) -> Blueprint:
        try:
            data = self.blueprint_path.read_bytes()
        except OSError as e:
            raise LoadError(
                f"Unable to read blueprint {self.blueprint_path}: {e.strerror or e}",
                details=BLUEPRINT_LOAD_HINTS,
            ) from e

        try:
            return self.codec.decode(data)
        except BlueprintDecodeError as e:
            raise LoadError(
                f"Unable to parse blueprint {self.blueprint_path}: {e}",
                details=BLUEPRINT_LOAD_HINTS,
            ) from e

    def write_blueprint(self, blueprint: Blueprint) -> None:
        # Encode before opening so a serialization failure keeps the old file
        try:
            data = self.codec.encode(blueprint)
        except Exception as e:
            raise WriteError(f"Unable to serialize blueprint: {e}") from e

        try:
            with open(self.blueprint_path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise WriteError(
                f"Unable to write blueprint {self.blueprint_path}: {e.strerror or e}"
            ) from e

    def execution_file_exists(self) -> bool:
        """Report whether the companion file exists.

        Raises:
            PathConflictError: the path is a directory
            WriteError: the path cannot be inspected
        """
        try:
            mode = self.execution_file_path.stat().st_mode
        except FileNotFoundError:
            return False
        except OSError as e:
            raise WriteError(
                f"Unable to inspect {self.execution_file_path}: {e.strerror or e}"
            ) from e

        if stat.S_ISDIR(mode):
            raise PathConflictError(
                EXECUTION_DIR_CONFLICT.format(file_name=self.execution_file_name),
                details=[EXECUTION_DIR_CONFLICT_HINT],
            )
        return True

    def create_execution_file(self) -> None:
        try:
            dump_yaml(EMPTY_DEPLOY_ITEMS, self.execution_file_path)
        except OSError as e:
            raise WriteError(
                f"Unable to create {self.execution_file_path}: {e.strerror or e}"
            ) from e
