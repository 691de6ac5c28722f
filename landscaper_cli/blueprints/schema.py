# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Blueprint document schema using Pydantic.

Only the parts of a Landscaper blueprint the CLI edits are modelled
explicitly. Every other field is kept as an extra so that a document can be
loaded, changed and written back without losing content.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

BLUEPRINT_FILE_NAME = "blueprint.yaml"
BLUEPRINT_API_VERSION = "landscaper.gardener.cloud/v1alpha1"
BLUEPRINT_KIND = "Blueprint"

GO_TEMPLATE_TYPE = "GoTemplate"


class TemplateExecutor(BaseModel):
    """A named template execution producing deploy items."""

    name: str | None = Field(default=None, description="Unique name within the blueprint")
    type: str | None = Field(
        default=None, description="Template engine type, e.g. GoTemplate or Spiff"
    )
    file: str | None = Field(
        default=None, description="Blueprint-root-relative file holding the template"
    )
    template: Any = Field(default=None, description="Inline template")

    model_config = ConfigDict(extra="allow")


class Blueprint(BaseModel):
    """Blueprint descriptor as stored in blueprint.yaml."""

    api_version: str = Field(alias="apiVersion")
    kind: str
    deploy_executions: list[TemplateExecutor] = Field(
        default_factory=list, alias="deployExecutions"
    )

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator("api_version")
    @classmethod
    def _check_api_version(cls, value: str) -> str:
        if value != BLUEPRINT_API_VERSION:
            raise ValueError(f"unsupported apiVersion {value!r}, expected {BLUEPRINT_API_VERSION!r}")
        return value

    @field_validator("kind")
    @classmethod
    def _check_kind(cls, value: str) -> str:
        if value != BLUEPRINT_KIND:
            raise ValueError(f"unsupported kind {value!r}, expected {BLUEPRINT_KIND!r}")
        return value

    @field_validator("deploy_executions", mode="before")
    @classmethod
    def _null_executions(cls, value: Any) -> Any:
        # 'deployExecutions:' with no items parses as None
        return [] if value is None else value

    def get_execution(self, name: str) -> TemplateExecutor | None:
        for execution in self.deploy_executions:
            if execution.name == name:
                return execution
        return None

    def has_execution(self, name: str) -> bool:
        return self.get_execution(name) is not None

    def append_execution(self, execution: TemplateExecutor) -> None:
        """Append an execution, keeping the existing order.

        Assigns a new list rather than mutating in place so the field counts as
        set and is emitted even when the source document omitted it.
        """
        self.deploy_executions = [*self.deploy_executions, execution]
