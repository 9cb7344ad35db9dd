"""Report exporters."""

from ..model.report import ReportFormat, ReportStyle
from .base import ReportExporter
from .yaml_exporter import YamlReportExporter
from .json_exporter import JsonReportExporter

EXPORTERS = {
    ReportFormat.YAML: YamlReportExporter,
    ReportFormat.JSON: JsonReportExporter,
}


def get_exporter(
    report_format: ReportFormat = ReportFormat.YAML, style: ReportStyle = ReportStyle.DETAILED
) -> ReportExporter:
    """Exporter for ``report_format``."""
    return EXPORTERS[report_format](style=style)


__all__ = ["ReportExporter", "YamlReportExporter", "JsonReportExporter", "get_exporter"]
