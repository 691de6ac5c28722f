# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""User-facing messages and strings for CLI output.

Centralizes all UI text to separate presentation from business logic.
"""

# ============================================================================
# Package Metadata
# ============================================================================

PACKAGE_NAME = "landscaper-cli"

# ============================================================================
# Blueprint Messages
# ============================================================================

EXECUTION_ADDED = "Successfully added deploy execution {name}"
EXECUTION_EXISTS = "The blueprint already contains a deploy execution {name}"
EXECUTION_DIR_CONFLICT = "There already exists a directory {file_name}"

BLUEPRINT_LOAD_HINTS = [
    "Check that the directory contains a blueprint.yaml file",
    "Verify the file declares apiVersion landscaper.gardener.cloud/v1alpha1 and kind Blueprint",
]

EXECUTION_DIR_CONFLICT_HINT = "Remove or rename the directory, or choose another execution name"

# ============================================================================
# Configuration Messages
# ============================================================================

CONFIG_YAML_HINT = "Fix the syntax error and try again."
