# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""I/O utilities.

Private helpers for reading and writing YAML documents.
Not part of the public API.
"""
