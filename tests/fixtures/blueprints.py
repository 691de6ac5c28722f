"""Blueprint creation helpers for testing."""

from pathlib import Path

import yaml

# YAML Blueprint Templates

VALID_BLUEPRINT = """\
apiVersion: landscaper.gardener.cloud/v1alpha1
kind: Blueprint
imports:
- name: cluster
  targetType: landscaper.gardener.cloud/kubernetes-cluster
deployExecutions: []
"""

BLUEPRINT_WITH_EXECUTION = """\
apiVersion: landscaper.gardener.cloud/v1alpha1
kind: Blueprint
deployExecutions:
- name: init
  type: GoTemplate
  file: /initDeployExecution.yaml
exportExecutions:
- name: export
  type: Spiff
  file: /exports.yaml
"""

BLUEPRINT_WITHOUT_EXECUTIONS = """\
apiVersion: landscaper.gardener.cloud/v1alpha1
kind: Blueprint
"""


def write_blueprint(directory: Path, content: str = VALID_BLUEPRINT) -> Path:
    """Write blueprint.yaml into directory (created if needed)."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "blueprint.yaml"
    path.write_text(content)
    return path


def read_blueprint(directory: Path) -> dict:
    """Parse blueprint.yaml from directory as plain YAML."""
    return yaml.safe_load((directory / "blueprint.yaml").read_text())
