# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Structured document codec for blueprint.yaml."""

import logging

import yaml
from pydantic import ValidationError

from landscaper_cli._internal.io.yaml import describe_yaml_error, dump_yaml_str, parse_yaml

from .schema import Blueprint

logger = logging.getLogger(__name__)


class BlueprintDecodeError(ValueError):
    """Raised when bytes cannot be turned into a Blueprint."""


class BlueprintCodec:
    """Converts between blueprint YAML bytes and Blueprint models."""

    encoding = "utf-8"

    def decode(self, data: bytes) -> Blueprint:
        try:
            document = parse_yaml(data)
        except yaml.YAMLError as e:
            raise BlueprintDecodeError(f"invalid YAML at {describe_yaml_error(e)}") from e

        if not isinstance(document, dict):
            raise BlueprintDecodeError(
                f"expected a mapping at the top level, got {type(document).__name__}"
            )

        try:
            return Blueprint.model_validate(document)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(x) for x in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise BlueprintDecodeError(problems) from e

    def encode(self, blueprint: Blueprint) -> bytes:
        # Only fields present in the source (or assigned since) are emitted;
        # extras always count as set
        document = blueprint.model_dump(by_alias=True, exclude_unset=True)

        logger.debug("Encoding blueprint with %d deploy executions",
                     len(blueprint.deploy_executions))
        return dump_yaml_str(document).encode(self.encoding)
