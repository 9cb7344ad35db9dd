"""Scan a fleet of Helm-deployed clusters for removed Kubernetes APIs."""

__version__ = "0.1.0"
