"""Helm client for fetching and rendering charts."""

import shutil
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Tuple

from ..errors import FetchError, RenderError
from ..utils.logger import get_logger

logger = get_logger(__name__)

RANGE_OPERATORS = ("*", "~", "^", "-")


def is_unpinned(version: Optional[str]) -> bool:
    """True when ``version`` is blank or a range rather than an exact version."""
    if not version or not version.strip():
        return True
    return any(op in version for op in RANGE_OPERATORS)


class ChartRenderer(ABC):
    """Fetches charts and renders them to manifest YAML."""

    @abstractmethod
    def fetch(self, repo: str, chart: str, version: Optional[str] = None) -> Path:
        """Fetch and unpack ``chart``, returning the local chart directory."""

    @abstractmethod
    def render(self, chart_path: Path, values_files: List[str]) -> str:
        """Render the chart at ``chart_path`` with ``values_files`` applied in order."""


class HelmClient(ChartRenderer):
    """Client for Helm operations."""

    def __init__(self, workdir: Path, binary: str = "helm"):
        self.workdir = Path(workdir)
        self.binary = binary
        self.helm_available = self._check_helm()

    def _check_helm(self) -> bool:
        """Check if Helm is available."""
        try:
            subprocess.run([self.binary, "version"], capture_output=True, check=True)
            return True
        except (subprocess.CalledProcessError, OSError) as e:
            logger.warning(f"Helm not available: {e}")
            return False

    def _execute(self, args: List[str]) -> Tuple[bool, str]:
        """Execute Helm command."""
        if not self.helm_available:
            return False, "Helm not available"

        cmd = [self.binary] + args
        logger.debug(f"Executing: {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, errors="replace", check=True
            )
            return True, result.stdout
        except subprocess.CalledProcessError as e:
            return False, e.stderr
        except (OSError, UnicodeDecodeError) as e:
            return False, str(e)

    @staticmethod
    def chart_reference(repo: str, chart: str) -> str:
        """Qualify ``chart`` with ``repo`` unless it already names a source."""
        if chart.startswith("oci://") or "/" in chart or not repo:
            return chart
        return f"{repo.rstrip('/')}/{chart}"

    def build_fetch_args(self, repo: str, chart: str, version: Optional[str] = None) -> List[str]:
        args = ["fetch", self.chart_reference(repo, chart)]
        if not is_unpinned(version):
            args.extend(["--version", version.strip()])
        args.extend(["--untar", "-d", str(self.workdir)])
        return args

    def build_template_args(self, chart_path: Path, values_files: List[str]) -> List[str]:
        args = ["template", str(chart_path)]
        for values_file in values_files:
            path = Path(values_file)
            if not path.is_absolute():
                path = chart_path / path
            args.extend(["-f", str(path)])
        return args

    def fetch(self, repo: str, chart: str, version: Optional[str] = None) -> Path:
        """Fetch ``chart`` into the workdir, replacing any earlier copy."""
        self.workdir.mkdir(parents=True, exist_ok=True)
        chart_path = self.workdir / chart.rstrip("/").split("/")[-1]

        if chart_path.exists():
            logger.debug(f"Removing stale chart directory {chart_path}")
            try:
                shutil.rmtree(chart_path)
            except OSError as e:
                raise FetchError(f"Cannot clean {chart_path}: {e}") from e

        if is_unpinned(version) and version:
            logger.info(f"Version '{version}' of {chart} is a range, fetching latest")

        success, output = self._execute(self.build_fetch_args(repo, chart, version))
        if not success:
            raise FetchError(f"Failed to fetch chart {chart}", stderr=output)

        return chart_path

    def render(self, chart_path: Path, values_files: List[str]) -> str:
        """Render the chart with ``helm template``."""
        success, output = self._execute(self.build_template_args(Path(chart_path), values_files))
        if not success:
            raise RenderError(f"Failed to render chart {chart_path}", stderr=output)
        return output
