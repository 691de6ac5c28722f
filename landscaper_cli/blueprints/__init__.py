# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Landscaper blueprint documents and the edits the CLI performs on them."""

from .codec import BlueprintCodec
from .execution import ExecutionAdder
from .schema import (
    BLUEPRINT_API_VERSION,
    BLUEPRINT_FILE_NAME,
    BLUEPRINT_KIND,
    GO_TEMPLATE_TYPE,
    Blueprint,
    TemplateExecutor,
)

__all__ = [
    "Blueprint",
    "TemplateExecutor",
    "BlueprintCodec",
    "ExecutionAdder",
    "BLUEPRINT_API_VERSION",
    "BLUEPRINT_FILE_NAME",
    "BLUEPRINT_KIND",
    "GO_TEMPLATE_TYPE",
]
