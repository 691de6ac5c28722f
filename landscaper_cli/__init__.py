# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Landscaper CLI: scaffolding tools for Landscaper blueprints."""

__version__ = "0.1.0"
