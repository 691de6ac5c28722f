# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""YAML utilities for landscaper-cli.

Provides basic YAML operations:
- load_yaml(): Load a YAML file with no processing
- parse_yaml(): Parse YAML text or bytes
- dump_yaml_str(): Render YAML text with blueprint-compatible formatting
- dump_yaml(): Write YAML to file
"""

from pathlib import Path
from typing import Any

import yaml

# Blueprint-compatible defaults
DUMP_DEFAULTS = {
    'default_flow_style': False,  # Lists as '- item' not '[item1, item2]'
    'sort_keys': False,            # Preserve dict insertion order
    'allow_unicode': True,
    'width': 80,
    'indent': 2,
    'explicit_start': False,       # No '---' document marker
    'explicit_end': False,         # No '...' document marker
}


def parse_yaml(data: str | bytes) -> Any:
    """Parse a single YAML document.

    Raises:
        yaml.YAMLError: If the YAML is invalid
    """
    return yaml.safe_load(data)


def load_yaml(file_path: str | Path) -> dict[str, Any]:
    """Load YAML with no processing.

    Raises:
        FileNotFoundError: If the YAML file doesn't exist
        yaml.YAMLError: If the YAML is invalid
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"YAML file not found: {file_path}")

    with open(file_path) as f:
        return yaml.safe_load(f) or {}


def describe_yaml_error(error: yaml.YAMLError) -> str:
    """Render a YAML error as 'line L, column C: problem'."""
    mark = getattr(error, "problem_mark", None)
    problem = getattr(error, "problem", None) or str(error)
    if mark is None:
        return problem
    return f"line {mark.line + 1}, column {mark.column + 1}: {problem}"


def dump_yaml_str(data: Any, **kwargs) -> str:
    """Render YAML text with blueprint-compatible formatting.

    - 2-space indentation
    - Block style (not inline)
    - Preserved key ordering
    - None -> 'null', empty lists -> '[]'
    - No document markers (---, ...)

    Note: Comments are not preserved (PyYAML limitation).
    """
    dump_kwargs = dict(DUMP_DEFAULTS)
    dump_kwargs.update(kwargs)
    return yaml.safe_dump(data, **dump_kwargs)


def dump_yaml(data: Any, file_path: str | Path, **kwargs) -> None:
    """Write YAML file with blueprint-compatible formatting.

    The document is rendered before the file is opened, so a serialization
    failure leaves an existing file untouched.
    """
    file_path = Path(file_path)
    content = dump_yaml_str(data, **kwargs)

    with open(file_path, 'w') as f:
        f.write(content)
