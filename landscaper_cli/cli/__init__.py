# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""landscaper-cli command-line interface.

Architecture:
- Command registration in commands/__init__.py, loaded lazily by LazyGroup
- Configuration managed through ApplicationContext (context.py)
- Commands receive the context via @click.pass_obj
- Errors derive from CLIError (exceptions.py) and are reported by main()

Entry point defined in setup.py.
"""

from .cli import create_cli, main

__all__ = [
    "create_cli",
    "main",
]
