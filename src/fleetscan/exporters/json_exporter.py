"""JSON exporter."""

import json
from typing import Any, Dict

from .base import ReportExporter


class JsonReportExporter(ReportExporter):
    """Export the report as a JSON object."""

    def dumps(self, data: Dict[str, Any]) -> str:
        return json.dumps(data, indent=2) + "\n"

    def loads(self, text: str) -> Any:
        return json.loads(text)
