# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from __future__ import annotations  # PEP 563: Postponed evaluation of annotations

import logging
from pathlib import Path

import click

from ..messages import EXECUTION_ADDED
from ..utils import success

logger = logging.getLogger(__name__)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
def blueprints():
    """Create and modify Landscaper blueprints."""
    pass


@blueprints.group(context_settings={"help_option_names": ["-h", "--help"]})
def add():
    """Add skeletons to an existing blueprint."""
    pass


@add.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("blueprint_dir", metavar="BLUEPRINT_DIR", type=click.Path(path_type=Path))
@click.argument("name")
def execution(blueprint_dir: Path, name: str) -> None:
    """Add a deploy execution skeleton to the blueprint in BLUEPRINT_DIR.

    Registers a GoTemplate execution NAME in blueprint.yaml and creates
    NAMEDeployExecution.yaml with an empty deploy item list, unless that
    file already exists.

    Example:

      \b
      landscaper-cli blueprints add execution path/to/blueprint/directory default
    """
    from landscaper_cli.blueprints import ExecutionAdder

    if not name:
        raise click.BadParameter("must not be empty", param_hint="NAME")

    logger.debug(f"Adding deploy execution {name} to {blueprint_dir}")
    ExecutionAdder(blueprint_dir, name).run(logger)
    success(EXECUTION_ADDED.format(name=name))
