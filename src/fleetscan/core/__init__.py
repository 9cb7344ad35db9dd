"""Core business logic."""

from .evaluator import ClusterEvaluator
from .helm import ChartRenderer, HelmClient, is_unpinned
from .loader import load_fleet, load_fleet_or_empty

__all__ = [
    "ClusterEvaluator",
    "ChartRenderer",
    "HelmClient",
    "is_unpinned",
    "load_fleet",
    "load_fleet_or_empty",
]
