"""Classify rendered manifests against the deprecated API database."""

from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..errors import ClassifyError
from ..model.deprecation import DeprecatedVersion, Finding, Severity, parse_version
from ..model.settings import DEFAULT_TARGET_VERSION
from ..utils.logger import get_logger
from .versions import DEPRECATED_VERSIONS

logger = get_logger(__name__)


def default_deprecated_versions() -> List[DeprecatedVersion]:
    """Build the bundled deprecation database."""
    return [DeprecatedVersion(**row) for row in DEPRECATED_VERSIONS]


class ClassifierConfig(BaseModel):
    """Options shared by every classification in a run."""

    target_versions: Dict[str, str] = Field(default_factory=lambda: {"k8s": DEFAULT_TARGET_VERSION})
    ignore_deprecations: bool = True
    ignore_removals: bool = False
    only_show_removed: bool = True
    ignore_unavailable_replacements: bool = False
    components: List[str] = Field(default_factory=lambda: ["k8s"])
    deprecated_versions: List[DeprecatedVersion] = Field(default_factory=default_deprecated_versions)

    @field_validator("target_versions")
    @classmethod
    def _check_target_versions(cls, value: Dict[str, str]) -> Dict[str, str]:
        for component, version in value.items():
            if parse_version(version) is None:
                raise ValueError(
                    f"target version {version!r} for {component} is not a version such as v1.23.0"
                )
        return value


class DeprecationClassifier:
    """Finds resources using deprecated or removed API versions."""

    def __init__(self, config: Optional[ClassifierConfig] = None):
        self.config = config or ClassifierConfig()
        self._index: Dict[Tuple[str, str], DeprecatedVersion] = {}
        self._rebuild_index()

    def _rebuild_index(self):
        self._index = {row.key: row for row in self.config.deprecated_versions}

    def load_additional_versions(self, path: Path) -> int:
        """Merge rows from a pluto-style versions file; later rows win."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, UnicodeDecodeError) as e:
            raise ClassifyError(f"Cannot read additional versions file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ClassifyError(f"Invalid additional versions file {path}: {e}") from e

        rows = data.get("deprecated-versions") if isinstance(data, dict) else None
        if not isinstance(rows, list):
            raise ClassifyError(f"{path} has no 'deprecated-versions' list")

        try:
            extra = [DeprecatedVersion(**row) for row in rows]
        except (TypeError, ValidationError) as e:
            raise ClassifyError(f"Invalid deprecated version entry in {path}: {e}") from e

        merged = {row.key: row for row in self.config.deprecated_versions}
        for row in extra:
            merged[row.key] = row
        self.config.deprecated_versions = list(merged.values())
        self._rebuild_index()

        logger.info(f"Loaded {len(extra)} additional deprecated versions from {path}")
        return len(extra)

    def _iter_resources(self, manifest: Union[str, bytes]) -> Iterator[Dict[str, Any]]:
        try:
            documents = list(yaml.safe_load_all(manifest))
        except yaml.YAMLError as e:
            raise ClassifyError(f"Rendered manifest is not valid YAML: {e}") from e

        for document in documents:
            if not isinstance(document, dict):
                continue
            if document.get("kind") == "List":
                for item in document.get("items") or []:
                    if isinstance(item, dict):
                        yield item
                continue
            yield document

    def classify(self, manifest: Union[str, bytes]) -> List[Finding]:
        """Return a finding for every resource whose apiVersion/kind is in the database."""
        findings = []

        for resource in self._iter_resources(manifest):
            api_version = resource.get("apiVersion")
            kind = resource.get("kind")
            if not isinstance(api_version, str) or not isinstance(kind, str):
                if api_version or kind:
                    logger.debug(f"Skipping document with apiVersion {api_version!r} and kind {kind!r}")
                continue
            if not api_version or not kind:
                continue

            row = self._index.get((api_version, kind))
            if row is None:
                continue

            target = self.config.target_versions.get(row.component)
            if not target:
                logger.debug(f"No target version for component {row.component}, skipping {kind}")
                continue

            metadata = resource.get("metadata") or {}
            if not isinstance(metadata, dict):
                raise ClassifyError(
                    f"{kind} {api_version} has metadata of type {type(metadata).__name__}, expected a mapping"
                )
            namespace = metadata.get("namespace")
            findings.append(
                Finding(
                    name=str(metadata.get("name") or ""),
                    namespace=None if namespace is None else str(namespace),
                    kind=kind,
                    api_version=api_version,
                    deprecated=row.is_deprecated_in(target),
                    removed=row.is_removed_in(target),
                    replacement_api=row.replacement_api,
                    replacement_available=row.is_replacement_available_in(target),
                    deprecated_in=row.deprecated_in,
                    removed_in=row.removed_in,
                    component=row.component,
                )
            )

        return findings

    def filter(self, findings: List[Finding]) -> List[Finding]:
        """Apply the configured suppression options."""
        config = self.config
        kept = []

        for finding in findings:
            if config.components and finding.component not in config.components:
                continue
            if not finding.deprecated and not finding.removed:
                continue
            if config.only_show_removed and not finding.removed:
                continue
            if config.ignore_deprecations and finding.deprecated and not finding.removed:
                continue
            if config.ignore_removals and finding.removed:
                continue
            if (
                config.ignore_unavailable_replacements
                and finding.replacement_api
                and not finding.replacement_available
            ):
                continue
            kept.append(finding)

        return kept

    def detect(self, manifest: Union[str, bytes]) -> List[Finding]:
        """Classify and filter in one step."""
        return self.filter(self.classify(manifest))

    @staticmethod
    def severity(findings: List[Finding]) -> Severity:
        """Most severe code across ``findings``."""
        return max((finding.severity for finding in findings), default=Severity.CLEAN)
