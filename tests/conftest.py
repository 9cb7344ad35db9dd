"""Test configuration and fixtures."""

from pathlib import Path
from unittest.mock import Mock

import pytest

from fleetscan.core.helm import ChartRenderer
from fleetscan.errors import FetchError

REMOVED_CRD_MANIFEST = """
---
# Source: widgets/templates/crd.yaml
apiVersion: apiextensions.k8s.io/v1beta1
kind: CustomResourceDefinition
metadata:
  name: widgets.example.com
spec:
  group: example.com
---
apiVersion: apps/v1
kind: Deployment
metadata:
  name: widget-controller
  namespace: widgets
"""

CLEAN_MANIFEST = """
apiVersion: v1
kind: Service
metadata:
  name: svc-c
  namespace: default
---
apiVersion: apps/v1
kind: Deployment
metadata:
  name: svc-c
  namespace: default
---
apiVersion: apiextensions.k8s.io/v1
kind: CustomResourceDefinition
metadata:
  name: gadgets.example.com
"""

FLEET_YAML = """
zones:
  uat:
    alias: u
    description: User acceptance
    endpoint: https://uat.example.com
    Clusters:
      apollo:
        name: apollo
        autosync: true
      svc-a:
        name: svc-a
        chart: svc-a
        chartVersion: 1.0.0
      svc-b:
        name: svc-b
        chart: svc-b
        valuesFiles:
          - values-uat.yaml
      svc-c:
        name: svc-c
        chart: svc-c
        chartVersion: ^2.0.0
        syncOptions:
          - CreateNamespace=true
        ignoreDifferences:
          - /spec/replicas
"""


@pytest.fixture
def removed_crd_manifest():
    return REMOVED_CRD_MANIFEST


@pytest.fixture
def clean_manifest():
    return CLEAN_MANIFEST


@pytest.fixture
def fleet_file(tmp_path) -> Path:
    """Fleet configuration with one cluster per scenario."""
    path = tmp_path / "argocd-apps.yaml"
    path.write_text(FLEET_YAML)
    return path


@pytest.fixture
def fake_renderer():
    """Renderer mock: svc-a fails to fetch, svc-b has a removed CRD, others are clean."""
    renderer = Mock(spec=ChartRenderer)

    def fetch(repo, chart, version=None):
        if chart == "svc-a":
            raise FetchError(f"Failed to fetch chart {chart}", stderr="chart not found")
        return Path("/charts") / chart

    def render(chart_path, values_files):
        if Path(chart_path).name == "svc-b":
            return REMOVED_CRD_MANIFEST
        return CLEAN_MANIFEST

    renderer.fetch.side_effect = fetch
    renderer.render.side_effect = render
    return renderer
