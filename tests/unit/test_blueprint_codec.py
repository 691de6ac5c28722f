# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Tests for blueprint decoding, encoding and the schema rules behind them."""

import pytest
import yaml

from landscaper_cli.blueprints import Blueprint, BlueprintCodec, TemplateExecutor
from landscaper_cli.blueprints.codec import BlueprintDecodeError
from tests.fixtures.blueprints import (
    BLUEPRINT_WITH_EXECUTION,
    BLUEPRINT_WITHOUT_EXECUTIONS,
    VALID_BLUEPRINT,
)


@pytest.fixture
def codec():
    return BlueprintCodec()


class TestDecode:

    def test_decodes_executions_in_order(self, codec):
        blueprint = codec.decode(BLUEPRINT_WITH_EXECUTION.encode())

        assert [e.name for e in blueprint.deploy_executions] == ["init"]
        assert blueprint.get_execution("init").file == "/initDeployExecution.yaml"
        assert blueprint.has_execution("init")
        assert not blueprint.has_execution("other")

    def test_missing_execution_list_defaults_to_empty(self, codec):
        blueprint = codec.decode(BLUEPRINT_WITHOUT_EXECUTIONS.encode())
        assert blueprint.deploy_executions == []

    def test_null_execution_list_is_empty(self, codec):
        data = BLUEPRINT_WITHOUT_EXECUTIONS + "deployExecutions:\n"
        assert codec.decode(data.encode()).deploy_executions == []

    def test_unknown_fields_are_kept(self, codec):
        blueprint = codec.decode(VALID_BLUEPRINT.encode())
        assert blueprint.model_extra["imports"][0]["name"] == "cluster"

    @pytest.mark.parametrize("data, fragment", [
        (b"", "mapping"),
        (b"- a\n- b\n", "mapping"),
        (b"kind: [Blueprint\n", "invalid YAML"),
        (b"kind: Blueprint\n", "apiVersion"),
        (b"apiVersion: v1\nkind: Blueprint\n", "unsupported apiVersion"),
        (b"apiVersion: landscaper.gardener.cloud/v1alpha1\nkind: Target\n", "unsupported kind"),
    ])
    def test_rejects_invalid_documents(self, codec, data, fragment):
        with pytest.raises(BlueprintDecodeError, match=fragment):
            codec.decode(data)


class TestEncode:

    def test_round_trip_keeps_new_execution(self, codec):
        blueprint = codec.decode(VALID_BLUEPRINT.encode())
        blueprint.append_execution(
            TemplateExecutor(name="default", type="GoTemplate", file="/defaultDeployExecution.yaml")
        )

        reloaded = codec.decode(codec.encode(blueprint))

        assert reloaded.deploy_executions == blueprint.deploy_executions
        assert reloaded.model_extra == blueprint.model_extra

    def test_unset_executor_fields_are_not_written(self, codec):
        blueprint = codec.decode(BLUEPRINT_WITHOUT_EXECUTIONS.encode())
        blueprint.append_execution(TemplateExecutor(name="a", type="GoTemplate", file="/a.yaml"))

        document = yaml.safe_load(codec.encode(blueprint))

        assert document["deployExecutions"] == [{"name": "a", "type": "GoTemplate", "file": "/a.yaml"}]

    def test_inline_template_survives(self, codec):
        data = (
            "apiVersion: landscaper.gardener.cloud/v1alpha1\n"
            "kind: Blueprint\n"
            "deployExecutions:\n"
            "- name: inline\n"
            "  type: Spiff\n"
            "  template:\n"
            "    deployItems: []\n"
        )
        document = yaml.safe_load(codec.encode(codec.decode(data.encode())))

        assert document["deployExecutions"] == [
            {"name": "inline", "type": "Spiff", "template": {"deployItems": []}}
        ]

    def test_partial_executor_entries_load_and_survive(self, codec):
        data = (
            "apiVersion: landscaper.gardener.cloud/v1alpha1\n"
            "kind: Blueprint\n"
            "deployExecutions:\n"
            "- type: GoTemplate\n"
            "  file: /anonymous.yaml\n"
            "- name: untyped\n"
        )
        blueprint = codec.decode(data.encode())
        assert not blueprint.has_execution("anonymous")

        blueprint.append_execution(TemplateExecutor(name="new", type="GoTemplate", file="/n.yaml"))
        document = yaml.safe_load(codec.encode(blueprint))

        assert document["deployExecutions"] == [
            {"type": "GoTemplate", "file": "/anonymous.yaml"},
            {"name": "untyped"},
            {"name": "new", "type": "GoTemplate", "file": "/n.yaml"},
        ]

    def test_nested_extras_survive(self, codec):
        data = (
            "apiVersion: landscaper.gardener.cloud/v1alpha1\n"
            "kind: Blueprint\n"
            "deployExecutions:\n"
            "- name: labelled\n"
            "  type: GoTemplate\n"
            "  file: /l.yaml\n"
            "  labels:\n"
            "    team: infra\n"
        )
        document = yaml.safe_load(codec.encode(codec.decode(data.encode())))

        assert document["deployExecutions"][0]["labels"] == {"team": "infra"}

    def test_untouched_blueprint_omits_execution_list(self, codec):
        document = yaml.safe_load(codec.encode(codec.decode(BLUEPRINT_WITHOUT_EXECUTIONS.encode())))
        assert "deployExecutions" not in document

    def test_populate_by_field_name(self):
        blueprint = Blueprint(
            api_version="landscaper.gardener.cloud/v1alpha1", kind="Blueprint"
        )
        assert blueprint.deploy_executions == []
