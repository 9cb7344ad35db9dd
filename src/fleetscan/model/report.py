"""Report-related models."""

from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field


class ClusterStatus(str, Enum):
    """Outcome of evaluating one cluster."""

    PASSED = "Passed"
    FAILED = "Failed"
    UNKNOWN = "Unknown"


class ReportStyle(str, Enum):
    """How cluster results are rendered in the report."""

    SIMPLE = "simple"
    DETAILED = "detailed"


class ReportFormat(str, Enum):
    """Supported report formats."""

    YAML = "yaml"
    JSON = "json"


class ClusterResult(BaseModel):
    """Result of evaluating one cluster."""

    status: ClusterStatus
    crds: List[str] = Field(default_factory=list)
    reason: Optional[str] = None

    @classmethod
    def passed(cls) -> "ClusterResult":
        return cls(status=ClusterStatus.PASSED)

    @classmethod
    def failed(cls, crds: List[str]) -> "ClusterResult":
        return cls(status=ClusterStatus.FAILED, crds=sorted(set(crds)))

    @classmethod
    def unknown(cls, reason: Optional[str] = None) -> "ClusterResult":
        return cls(status=ClusterStatus.UNKNOWN, reason=reason)

    def to_report_value(self, style: ReportStyle = ReportStyle.DETAILED) -> Union[str, List[str]]:
        """Value written for this cluster in the report."""
        if style == ReportStyle.DETAILED and self.status == ClusterStatus.FAILED and self.crds:
            return list(self.crds)
        return self.status.value

    @classmethod
    def from_report_value(cls, value: Union[str, List[str]]) -> "ClusterResult":
        """Inverse of ``to_report_value``."""
        if isinstance(value, list):
            return cls.failed([str(item) for item in value])
        return cls(status=ClusterStatus(value))

    def __eq__(self, other: object) -> bool:
        # reason is diagnostic only and never reaches the report
        if not isinstance(other, ClusterResult):
            return NotImplemented
        return self.status == other.status and sorted(self.crds) == sorted(other.crds)


ReportMap = Dict[str, ClusterResult]
