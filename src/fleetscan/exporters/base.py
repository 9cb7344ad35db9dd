"""Base report exporter class."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Union

from ..errors import ReportError, SerializeError, WriteError
from ..model.report import ClusterResult, ReportMap, ReportStyle
from ..utils.logger import get_logger

logger = get_logger(__name__)


class ReportExporter(ABC):
    """Base class for report exporters."""

    def __init__(self, style: ReportStyle = ReportStyle.DETAILED):
        self.style = style

    @abstractmethod
    def dumps(self, data: Dict[str, Any]) -> str:
        """Serialize the plain report mapping."""

    @abstractmethod
    def loads(self, text: str) -> Any:
        """Parse serialized report text, raising ``ValueError`` when it is malformed."""

    def to_plain(self, report: ReportMap) -> Dict[str, Union[str, List[str]]]:
        return {name: result.to_report_value(self.style) for name, result in report.items()}

    def export(self, report: ReportMap, path: Path):
        """Write ``report`` to ``path``, replacing any existing file."""
        path = Path(path)
        try:
            text = self.dumps(self.to_plain(report))
        except (TypeError, ValueError) as e:
            raise SerializeError(f"Cannot serialize report: {e}") from e

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise WriteError(f"Cannot write report to {path}: {e}") from e

        logger.info(f"Wrote results for {len(report)} clusters to {path}")

    def load(self, path: Path) -> ReportMap:
        """Read a report written by ``export``."""
        try:
            with open(path, encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            raise ReportError(f"Cannot read report {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise SerializeError(f"Report {path} is not valid UTF-8: {e}") from e

        try:
            data = self.loads(text) or {}
            if not isinstance(data, dict):
                raise ValueError(f"expected a mapping, got {type(data).__name__}")
            return {str(name): ClusterResult.from_report_value(value) for name, value in data.items()}
        except (TypeError, ValueError) as e:
            raise SerializeError(f"Cannot parse report {path}: {e}") from e
