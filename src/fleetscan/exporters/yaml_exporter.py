"""YAML exporter."""

from typing import Any, Dict

import yaml

from ..errors import SerializeError
from .base import ReportExporter


class YamlReportExporter(ReportExporter):
    """Export the report as a YAML mapping."""

    def dumps(self, data: Dict[str, Any]) -> str:
        try:
            return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
        except yaml.YAMLError as e:
            raise SerializeError(f"Cannot serialize report: {e}") from e

    def loads(self, text: str) -> Any:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValueError(f"invalid YAML: {e}") from e
