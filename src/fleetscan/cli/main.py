"""Main CLI interface using Typer."""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..core import ClusterEvaluator, HelmClient, load_fleet_or_empty
from ..deprecation import ClassifierConfig, DeprecationClassifier
from ..errors import ClassifyError, FleetScanError
from ..exporters import get_exporter
from ..model.deprecation import Finding
from ..model.report import ClusterStatus, ReportFormat, ReportMap, ReportStyle
from ..model.settings import (
    DEFAULT_CHART_REPO,
    DEFAULT_INPUT,
    DEFAULT_OUTPUT,
    DEFAULT_TARGET_VERSION,
    DEFAULT_WORKDIR,
    ConfigErrorPolicy,
    RunSettings,
)
from ..utils.logger import get_logger, set_log_level

# Create CLI app
app = typer.Typer(
    name="fleetscan",
    help="Check the Helm charts of a cluster fleet for removed Kubernetes APIs",
    add_completion=True,
)

console = Console()
logger = get_logger(__name__)

STATUS_COLORS = {
    ClusterStatus.PASSED: "green",
    ClusterStatus.FAILED: "red",
    ClusterStatus.UNKNOWN: "yellow",
}


def build_classifier(
    target_version: str, additional_versions: Optional[Path] = None
) -> DeprecationClassifier:
    """Classifier configured for removed-API detection at ``target_version``."""
    try:
        config = ClassifierConfig(target_versions={"k8s": target_version})
    except ValidationError as e:
        raise ClassifyError(f"Invalid target version {target_version!r}: {e}") from e
    classifier = DeprecationClassifier(config)
    if additional_versions:
        classifier.load_additional_versions(additional_versions)
    return classifier


def run_scan(settings: RunSettings) -> ReportMap:
    """Load the fleet, evaluate every cluster and write the report."""
    fleet = load_fleet_or_empty(settings.input_path, settings.on_config_error)
    classifier = build_classifier(settings.target_version, settings.additional_versions)
    helm = HelmClient(workdir=settings.workdir, binary=settings.helm_binary)
    evaluator = ClusterEvaluator(helm, classifier, chart_repo=settings.chart_repo)

    report = evaluator.evaluate_fleet(fleet)

    exporter = get_exporter(settings.report_format, settings.report_style)
    exporter.export(report, settings.output_path)
    return report


def _print_report_table(report: ReportMap) -> None:
    """Print cluster results in a formatted table."""
    table = Table(title="Cluster Results")
    table.add_column("Cluster", style="cyan")
    table.add_column("Status")
    table.add_column("Removed CRDs")

    for name, result in report.items():
        color = STATUS_COLORS.get(result.status, "white")
        table.add_row(
            name,
            f"[{color}]{result.status.value}[/{color}]",
            ", ".join(result.crds),
        )

    console.print(table)


def _print_findings_table(findings: List[Finding]) -> None:
    table = Table(title="Deprecated APIs")
    table.add_column("Name", style="cyan")
    table.add_column("Kind")
    table.add_column("Version")
    table.add_column("Replacement")
    table.add_column("Deprecated")
    table.add_column("Removed")

    for finding in findings:
        table.add_row(
            finding.name,
            finding.kind,
            finding.api_version,
            finding.replacement_api,
            str(finding.deprecated).lower(),
            str(finding.removed).lower(),
        )

    console.print(table)


@app.command()
def scan(
    input_path: Path = typer.Option(
        DEFAULT_INPUT, "--input", "-i", envvar="FLEETSCAN_INPUT", help="Fleet configuration file"
    ),
    output: Path = typer.Option(
        DEFAULT_OUTPUT, "--output", "-o", envvar="FLEETSCAN_OUTPUT", help="Report file to write"
    ),
    workdir: Path = typer.Option(
        DEFAULT_WORKDIR,
        "--workdir",
        "-w",
        envvar="FLEETSCAN_WORKDIR",
        help="Scratch directory charts are unpacked into",
    ),
    chart_repo: str = typer.Option(
        DEFAULT_CHART_REPO,
        "--chart-repo",
        envvar="FLEETSCAN_CHART_REPO",
        help="Helm repository alias charts are fetched from",
    ),
    target_version: str = typer.Option(
        DEFAULT_TARGET_VERSION,
        "--target-version",
        "-t",
        envvar="FLEETSCAN_TARGET_VERSION",
        help="Kubernetes version to check against",
    ),
    helm_binary: str = typer.Option(
        "helm", "--helm-binary", envvar="FLEETSCAN_HELM_BINARY", help="Helm executable"
    ),
    additional_versions: Optional[Path] = typer.Option(
        None,
        "--additional-versions",
        envvar="FLEETSCAN_ADDITIONAL_VERSIONS",
        help="Extra deprecated-versions YAML file",
    ),
    style: ReportStyle = typer.Option(
        ReportStyle.DETAILED,
        "--style",
        envvar="FLEETSCAN_STYLE",
        help="Write CRD names for failed clusters (detailed) or status only (simple)",
    ),
    format: ReportFormat = typer.Option(
        ReportFormat.YAML, "--format", "-f", envvar="FLEETSCAN_FORMAT", help="Report format"
    ),
    on_config_error: ConfigErrorPolicy = typer.Option(
        ConfigErrorPolicy.ABORT,
        "--on-config-error",
        envvar="FLEETSCAN_ON_CONFIG_ERROR",
        help="Abort, or continue with an empty fleet, when the configuration is invalid",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Render every cluster's chart and report clusters with removed CRD APIs."""
    if verbose:
        set_log_level(logging.DEBUG)

    settings = RunSettings(
        input_path=input_path,
        output_path=output,
        workdir=workdir,
        chart_repo=chart_repo,
        helm_binary=helm_binary,
        target_version=target_version,
        additional_versions=additional_versions,
        report_style=style,
        report_format=format,
        on_config_error=on_config_error,
    )

    try:
        console.print(f"Checking fleet [cyan]{settings.input_path}[/cyan] against {target_version}")
        report = run_scan(settings)
    except FleetScanError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if report:
        _print_report_table(report)
    else:
        console.print("[yellow]No clusters found in the fleet configuration[/yellow]")

    console.print(f"[green]✓[/green] Report written to [cyan]{settings.output_path}[/cyan]")


@app.command()
def detect(
    manifest: Path = typer.Argument(..., help="Rendered manifest file to check"),
    target_version: str = typer.Option(
        DEFAULT_TARGET_VERSION,
        "--target-version",
        "-t",
        envvar="FLEETSCAN_TARGET_VERSION",
        help="Kubernetes version to check against",
    ),
    additional_versions: Optional[Path] = typer.Option(
        None,
        "--additional-versions",
        envvar="FLEETSCAN_ADDITIONAL_VERSIONS",
        help="Extra deprecated-versions YAML file",
    ),
    show_deprecated: bool = typer.Option(
        False, "--show-deprecated", help="Also report APIs that are deprecated but not removed"
    ),
    exit_code: bool = typer.Option(
        False, "--exit-code", help="Exit with the severity code of the findings"
    ),
):
    """Check a single rendered manifest file."""
    try:
        classifier = build_classifier(target_version, additional_versions)
        if show_deprecated:
            classifier.config.only_show_removed = False
            classifier.config.ignore_deprecations = False

        with open(manifest, encoding="utf-8") as f:
            findings = classifier.detect(f.read())
    except (OSError, UnicodeDecodeError, FleetScanError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if findings:
        _print_findings_table(findings)
    else:
        console.print(f"[green]No deprecated APIs found for {target_version}[/green]")

    if exit_code:
        raise typer.Exit(int(classifier.severity(findings)))


@app.command("list-versions")
def list_versions(
    component: Optional[str] = typer.Option(
        None, "--component", "-c", help="Only show this component (e.g. k8s, istio)"
    ),
):
    """Show the deprecated API versions that are checked."""
    classifier = DeprecationClassifier()

    table = Table(title="Deprecated API Versions")
    table.add_column("Kind", style="cyan")
    table.add_column("Version")
    table.add_column("Deprecated In")
    table.add_column("Removed In")
    table.add_column("Replacement")
    table.add_column("Component")

    for row in classifier.config.deprecated_versions:
        if component and row.component != component:
            continue
        table.add_row(
            row.kind,
            row.version,
            row.deprecated_in,
            row.removed_in,
            row.replacement_api,
            row.component,
        )

    console.print(table)


@app.command()
def version():
    """Show version information."""
    console.print(f"[bold]fleetscan[/bold] version {__version__}")
    console.print("Removed Kubernetes API checks for Helm-deployed cluster fleets")


if __name__ == "__main__":
    app()
