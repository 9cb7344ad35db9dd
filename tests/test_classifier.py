"""Test deprecated API classification."""

import pytest
from pydantic import ValidationError

from fleetscan.deprecation import ClassifierConfig, DeprecationClassifier
from fleetscan.errors import ClassifyError
from fleetscan.model.deprecation import Severity

HPA_V2BETA2 = """
apiVersion: autoscaling/v2beta2
kind: HorizontalPodAutoscaler
metadata:
  name: web
  namespace: default
"""

MIXED_MANIFEST = """
apiVersion: extensions/v1beta1
kind: Ingress
metadata:
  name: old-ingress
  namespace: default
---
apiVersion: autoscaling/v2beta2
kind: HorizontalPodAutoscaler
metadata:
  name: web
---
apiVersion: apps/v1
kind: Deployment
metadata:
  name: new-deployment
"""

CERT_MANAGER = """
apiVersion: cert-manager.io/v1alpha2
kind: Certificate
metadata:
  name: tls
"""


def _show_everything(**overrides) -> ClassifierConfig:
    options = dict(only_show_removed=False, ignore_deprecations=False)
    options.update(overrides)
    return ClassifierConfig(**options)


class TestClassify:
    def setup_method(self):
        """Set up test fixtures."""
        self.classifier = DeprecationClassifier()

    def test_default_config(self):
        config = self.classifier.config
        assert config.target_versions == {"k8s": "v1.23.0"}
        assert config.only_show_removed is True
        assert config.ignore_removals is False
        assert config.components == ["k8s"]

    def test_removed_crd(self, removed_crd_manifest):
        """Test that a v1beta1 CRD is removed at v1.23.0."""
        findings = self.classifier.classify(removed_crd_manifest)

        assert len(findings) == 1
        finding = findings[0]
        assert finding.kind == "CustomResourceDefinition"
        assert finding.name == "widgets.example.com"
        assert finding.api_version == "apiextensions.k8s.io/v1beta1"
        assert finding.removed is True
        assert finding.deprecated is True
        assert finding.replacement_api == "apiextensions.k8s.io/v1"

    def test_clean_manifest(self, clean_manifest):
        assert self.classifier.classify(clean_manifest) == []

    def test_bytes_input(self, removed_crd_manifest):
        findings = self.classifier.classify(removed_crd_manifest.encode("utf-8"))
        assert [f.name for f in findings] == ["widgets.example.com"]

    def test_list_kind_expanded(self):
        """Test that items of a List are classified."""
        manifest = """
apiVersion: v1
kind: List
items:
  - apiVersion: extensions/v1beta1
    kind: Ingress
    metadata:
      name: listed-ingress
  - apiVersion: v1
    kind: ConfigMap
    metadata:
      name: settings
"""
        findings = self.classifier.classify(manifest)
        assert [(f.kind, f.name) for f in findings] == [("Ingress", "listed-ingress")]

    def test_empty_documents_skipped(self):
        assert self.classifier.classify("---\n---\n# only a comment\n") == []

    def test_invalid_yaml(self):
        with pytest.raises(ClassifyError):
            self.classifier.classify("kind: [unclosed\n")

    def test_earlier_target_only_deprecated(self, removed_crd_manifest):
        classifier = DeprecationClassifier(ClassifierConfig(target_versions={"k8s": "v1.21.0"}))

        finding = classifier.classify(removed_crd_manifest)[0]
        assert finding.deprecated is True
        assert finding.removed is False

    def test_component_without_target_ignored(self):
        assert self.classifier.classify(CERT_MANAGER) == []

    def test_non_string_api_version_or_kind_skipped(self, removed_crd_manifest):
        """Test that documents whose apiVersion or kind is not a string are skipped."""
        manifest = (
            "apiVersion: [apiextensions.k8s.io/v1beta1]\n"
            "kind: CustomResourceDefinition\n"
            "---\n"
            "apiVersion: apiextensions.k8s.io/v1beta1\n"
            "kind: {name: CustomResourceDefinition}\n"
            "---\n" + removed_crd_manifest
        )

        findings = self.classifier.classify(manifest)
        assert [f.name for f in findings] == ["widgets.example.com"]

    def test_metadata_not_a_mapping(self):
        manifest = (
            "apiVersion: apiextensions.k8s.io/v1beta1\n"
            "kind: CustomResourceDefinition\n"
            "metadata: oops\n"
        )

        with pytest.raises(ClassifyError, match="expected a mapping"):
            self.classifier.classify(manifest)

    def test_non_string_name_and_namespace(self):
        manifest = (
            "apiVersion: extensions/v1beta1\n"
            "kind: Ingress\n"
            "metadata:\n"
            "  name: 42\n"
            "  namespace: 7\n"
        )

        finding = self.classifier.classify(manifest)[0]
        assert finding.name == "42"
        assert finding.namespace == "7"


class TestClassifierConfig:
    def test_later_target_accepted(self):
        config = ClassifierConfig(target_versions={"k8s": "1.29", "istio": "v1.6.0"})
        assert config.target_versions["k8s"] == "1.29"

    @pytest.mark.parametrize("version", ["latest", "", "1.23.0x", "v1"])
    def test_unparsable_target_rejected(self, version):
        """Test that a target that is not a version is refused up front."""
        with pytest.raises(ValidationError, match="not a version"):
            ClassifierConfig(target_versions={"k8s": version})


class TestFilter:
    def test_only_removed_by_default(self):
        """Test that deprecated-only findings are dropped by default."""
        classifier = DeprecationClassifier()

        findings = classifier.classify(MIXED_MANIFEST)
        assert {f.name for f in findings} == {"old-ingress", "web"}

        kept = classifier.filter(findings)
        assert [f.name for f in kept] == ["old-ingress"]

    def test_show_deprecated(self):
        classifier = DeprecationClassifier(_show_everything())

        kept = classifier.detect(MIXED_MANIFEST)
        assert {f.name for f in kept} == {"old-ingress", "web"}

    def test_ignore_deprecations(self):
        classifier = DeprecationClassifier(_show_everything(ignore_deprecations=True))

        kept = classifier.detect(MIXED_MANIFEST)
        assert [f.name for f in kept] == ["old-ingress"]

    def test_ignore_removals(self):
        classifier = DeprecationClassifier(_show_everything(ignore_removals=True))

        kept = classifier.detect(MIXED_MANIFEST)
        assert [f.name for f in kept] == ["web"]

    def test_component_filter(self):
        """Test that only configured components are reported."""
        targets = {"k8s": "v1.23.0", "cert-manager": "v1.8.0"}
        k8s_only = DeprecationClassifier(ClassifierConfig(target_versions=targets))
        both = DeprecationClassifier(
            ClassifierConfig(target_versions=targets, components=["k8s", "cert-manager"])
        )

        assert len(k8s_only.classify(CERT_MANAGER)) == 1
        assert k8s_only.detect(CERT_MANAGER) == []
        assert [f.name for f in both.detect(CERT_MANAGER)] == ["tls"]


class TestSeverity:
    def test_clean(self):
        assert DeprecationClassifier.severity([]) == Severity.CLEAN

    def test_deprecated(self):
        classifier = DeprecationClassifier(_show_everything())
        assert classifier.severity(classifier.detect(HPA_V2BETA2)) == Severity.DEPRECATED

    def test_removed_outranks_deprecated(self):
        classifier = DeprecationClassifier(_show_everything())
        assert classifier.severity(classifier.detect(MIXED_MANIFEST)) == Severity.REMOVED


class TestAdditionalVersions:
    def test_new_rows(self, tmp_path):
        """Test that extra rows are detected."""
        path = tmp_path / "versions.yaml"
        path.write_text(
            "deprecated-versions:\n"
            "  - version: example.com/v1alpha1\n"
            "    kind: Widget\n"
            "    deprecated-in: v1.18.0\n"
            "    removed-in: v1.20.0\n"
            "    replacement-api: example.com/v1\n"
            "    component: k8s\n"
        )
        classifier = DeprecationClassifier()

        assert classifier.load_additional_versions(path) == 1
        findings = classifier.detect(
            "apiVersion: example.com/v1alpha1\nkind: Widget\nmetadata:\n  name: w\n"
        )
        assert [f.name for f in findings] == ["w"]

    def test_override_existing_row(self, tmp_path, removed_crd_manifest):
        path = tmp_path / "versions.yaml"
        path.write_text(
            "deprecated-versions:\n"
            "  - version: apiextensions.k8s.io/v1beta1\n"
            "    kind: CustomResourceDefinition\n"
            "    deprecated-in: v1.16.0\n"
            "    removed-in: v1.30.0\n"
            "    replacement-api: apiextensions.k8s.io/v1\n"
        )
        classifier = DeprecationClassifier()
        classifier.load_additional_versions(path)

        assert classifier.detect(removed_crd_manifest) == []

    def test_missing_list(self, tmp_path):
        path = tmp_path / "versions.yaml"
        path.write_text("something: else\n")

        with pytest.raises(ClassifyError):
            DeprecationClassifier().load_additional_versions(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ClassifyError):
            DeprecationClassifier().load_additional_versions(tmp_path / "nope.yaml")
