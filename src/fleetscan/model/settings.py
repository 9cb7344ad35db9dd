"""Run-time settings for a fleet scan."""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from .report import ReportFormat, ReportStyle

DEFAULT_INPUT = Path("./argocd-apps.yaml")
DEFAULT_OUTPUT = Path("./report.yaml")
DEFAULT_WORKDIR = Path("./charts")
DEFAULT_CHART_REPO = "chartrepo"
DEFAULT_TARGET_VERSION = "v1.23.0"


class ConfigErrorPolicy(str, Enum):
    """What to do when the fleet configuration cannot be loaded."""

    ABORT = "abort"
    CONTINUE = "continue"


class RunSettings(BaseModel):
    """Paths and options for one scan run."""

    input_path: Path = DEFAULT_INPUT
    output_path: Path = DEFAULT_OUTPUT
    workdir: Path = DEFAULT_WORKDIR
    chart_repo: str = DEFAULT_CHART_REPO
    helm_binary: str = "helm"
    target_version: str = DEFAULT_TARGET_VERSION
    additional_versions: Optional[Path] = None
    report_style: ReportStyle = ReportStyle.DETAILED
    report_format: ReportFormat = ReportFormat.YAML
    on_config_error: ConfigErrorPolicy = ConfigErrorPolicy.ABORT
