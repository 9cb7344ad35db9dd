"""Data models for fleetscan."""

from .deprecation import DeprecatedVersion, Finding, Severity, parse_version
from .fleet import ClusterSpec, FleetSpec, ZoneSpec
from .report import ClusterResult, ClusterStatus, ReportFormat, ReportMap, ReportStyle
from .settings import ConfigErrorPolicy, RunSettings

__all__ = [
    "DeprecatedVersion",
    "Finding",
    "Severity",
    "parse_version",
    "ClusterSpec",
    "FleetSpec",
    "ZoneSpec",
    "ClusterResult",
    "ClusterStatus",
    "ReportFormat",
    "ReportMap",
    "ReportStyle",
    "ConfigErrorPolicy",
    "RunSettings",
]
