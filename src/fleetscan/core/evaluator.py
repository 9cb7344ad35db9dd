"""Per-cluster evaluation: fetch, render, classify, decide."""

from typing import List

from ..deprecation.classifier import DeprecationClassifier
from ..errors import ChartError, ClassifyError
from ..model.deprecation import Finding
from ..model.fleet import ClusterSpec, FleetSpec
from ..model.report import ClusterResult, ReportMap
from ..utils.logger import get_logger
from .helm import ChartRenderer

logger = get_logger(__name__)

CRD_KIND = "CustomResourceDefinition"


def removed_crds(findings: List[Finding]) -> List[str]:
    """Names of CustomResourceDefinitions using an API removed at the target."""
    return sorted({f.name for f in findings if f.kind == CRD_KIND and f.removed})


class ClusterEvaluator:
    """Decides Passed/Failed/Unknown for clusters.

    A cluster fails when any CustomResourceDefinition in its rendered chart
    uses an API version removed at the classifier's target version. Other
    removed resources are logged but do not fail the cluster. Any error while
    fetching, rendering or classifying makes the result Unknown.
    """

    def __init__(
        self,
        renderer: ChartRenderer,
        classifier: DeprecationClassifier,
        chart_repo: str = "",
    ):
        self.renderer = renderer
        self.classifier = classifier
        self.chart_repo = chart_repo

    def evaluate(self, cluster: ClusterSpec) -> ClusterResult:
        """Evaluate one cluster."""
        label = cluster.name or cluster.chart or "<unnamed>"

        if not cluster.chart:
            logger.info(f"{label}: no chart configured")
            return ClusterResult.unknown("no chart configured")

        try:
            chart_path = self.renderer.fetch(self.chart_repo, cluster.chart, cluster.chart_version)
            manifest = self.renderer.render(chart_path, cluster.values_files)
        except ChartError as e:
            logger.warning(f"{label}: {e}")
            return ClusterResult.unknown(str(e))

        try:
            findings = self.classifier.detect(manifest)
        except ClassifyError as e:
            logger.warning(f"{label}: {e}")
            return ClusterResult.unknown(str(e))

        crds = removed_crds(findings)
        others = [f for f in findings if f.kind != CRD_KIND and f.removed]
        for finding in others:
            logger.warning(
                f"{label}: {finding.kind}/{finding.name} uses removed {finding.api_version}"
            )

        if crds:
            logger.info(f"{label}: {len(crds)} CRDs use removed APIs")
            return ClusterResult.failed(crds)

        return ClusterResult.passed()

    def evaluate_fleet(self, fleet: FleetSpec) -> ReportMap:
        """Evaluate every cluster in ``fleet`` in order."""
        report: ReportMap = {}

        for zone_name, cluster_name, cluster in fleet.iter_clusters():
            key = cluster_name
            if key in report:
                key = f"{zone_name}/{cluster_name}"
                logger.warning(f"Cluster {cluster_name} appears in several zones, reporting as {key}")

            logger.info(f"Evaluating {zone_name}/{cluster_name}")
            report[key] = self.evaluate(cluster)

        return report
