"""Error types raised across the scan workflow."""

from typing import Optional


class FleetScanError(Exception):
    """Base class for all fleetscan errors."""


class ConfigError(FleetScanError):
    """The fleet configuration could not be loaded."""


class ConfigReadError(ConfigError):
    """The fleet configuration file could not be read."""


class ConfigParseError(ConfigError):
    """The fleet configuration is not valid YAML or does not match the schema."""


class ChartError(FleetScanError):
    """A Helm invocation failed."""

    def __init__(self, message: str, stderr: Optional[str] = None):
        super().__init__(message)
        self.stderr = stderr or ""

    def __str__(self) -> str:
        base = super().__str__()
        if self.stderr:
            return f"{base}: {self.stderr.strip()}"
        return base


class FetchError(ChartError):
    """`helm fetch` failed."""


class RenderError(ChartError):
    """`helm template` failed."""


class ClassifyError(FleetScanError):
    """Rendered manifests or deprecation data could not be classified."""


class ReportError(FleetScanError):
    """The report could not be produced."""


class SerializeError(ReportError):
    """The report could not be serialized."""


class WriteError(ReportError):
    """The report could not be written to disk."""
