# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""landscaper-cli commands.

This module provides the single source of truth for CLI command registration.
Command mappings are used by cli.py's LazyGroup for lazy loading.
"""

# Format: 'command_name': (relative_module, attribute_name)
_COMMAND_REGISTRY = {
    "blueprints": (".blueprints", "blueprints"),
}


def _build_command_map() -> dict[str, tuple[str, str]]:
    """Build command map for LazyGroup.

    Returns:
        Dict mapping command names to (absolute_module_path, attribute_name) tuples
    """
    return {
        name: (f"landscaper_cli.cli.commands{module}", attr)
        for name, (module, attr) in _COMMAND_REGISTRY.items()
    }


COMMAND_MAP = _build_command_map()

__all__ = [
    "COMMAND_MAP",
]
