# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Global pytest configuration and fixtures."""

import logging
import os

import pytest
from rich.logging import RichHandler

from landscaper_cli.settings import reset_config
from tests.fixtures.blueprints import BLUEPRINT_WITH_EXECUTION, write_blueprint


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user config files and LANDSCAPER_CLI_* variables out of tests."""
    for name in list(os.environ):
        if name.startswith("LANDSCAPER_CLI_"):
            monkeypatch.delenv(name)

    home = tmp_path / "home"
    monkeypatch.setattr("landscaper_cli.settings.schema.USER_CONFIG_DIR", home / ".landscaper-cli")

    reset_config()
    yield home
    reset_config()


def _remove_rich_handlers():
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging system between tests (pytest's own handlers are left alone)."""
    _remove_rich_handlers()
    yield
    _remove_rich_handlers()


@pytest.fixture
def blueprint_dir(tmp_path):
    """Blueprint directory with a valid blueprint and no deploy executions."""
    directory = tmp_path / "blueprint"
    write_blueprint(directory)
    return directory


@pytest.fixture
def populated_blueprint_dir(tmp_path):
    """Blueprint directory whose blueprint already declares execution 'init'."""
    directory = tmp_path / "populated"
    write_blueprint(directory, BLUEPRINT_WITH_EXECUTION)
    return directory


@pytest.fixture
def log():
    return logging.getLogger("landscaper_cli.tests")
