"""Deprecated Kubernetes API detection."""

from .classifier import ClassifierConfig, DeprecationClassifier, default_deprecated_versions
from .versions import DEPRECATED_VERSIONS

__all__ = [
    "ClassifierConfig",
    "DeprecationClassifier",
    "default_deprecated_versions",
    "DEPRECATED_VERSIONS",
]
