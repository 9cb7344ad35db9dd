"""Known deprecated and removed API versions."""

from typing import Dict, List


def _rows(
    version: str,
    kinds: List[str],
    deprecated_in: str,
    removed_in: str,
    replacement_api: str,
    component: str = "k8s",
) -> List[Dict[str, str]]:
    return [
        {
            "version": version,
            "kind": kind,
            "deprecated-in": deprecated_in,
            "removed-in": removed_in,
            "replacement-api": replacement_api,
            "component": component,
        }
        for kind in kinds
    ]


_WORKLOADS = ["Deployment", "DaemonSet", "ReplicaSet", "StatefulSet"]
_RBAC = ["ClusterRole", "ClusterRoleBinding", "Role", "RoleBinding"]

# Same layout as pluto's versions.yaml ("deprecated-versions" rows)
DEPRECATED_VERSIONS: List[Dict[str, str]] = [
    # Removed in 1.16
    *_rows("extensions/v1beta1", ["Deployment", "DaemonSet", "ReplicaSet"], "v1.9.0", "v1.16.0", "apps/v1"),
    *_rows("extensions/v1beta1", ["NetworkPolicy"], "v1.9.0", "v1.16.0", "networking.k8s.io/v1"),
    *_rows("extensions/v1beta1", ["PodSecurityPolicy"], "v1.10.0", "v1.16.0", "policy/v1beta1"),
    *_rows("apps/v1beta1", ["Deployment", "StatefulSet"], "v1.9.0", "v1.16.0", "apps/v1"),
    *_rows("apps/v1beta2", _WORKLOADS, "v1.9.0", "v1.16.0", "apps/v1"),
    # Removed in 1.17
    *_rows("scheduling.k8s.io/v1alpha1", ["PriorityClass"], "v1.14.0", "v1.17.0", "scheduling.k8s.io/v1"),
    # Removed in 1.22
    *_rows("extensions/v1beta1", ["Ingress"], "v1.14.0", "v1.22.0", "networking.k8s.io/v1"),
    *_rows("networking.k8s.io/v1beta1", ["Ingress", "IngressClass"], "v1.19.0", "v1.22.0", "networking.k8s.io/v1"),
    *_rows(
        "apiextensions.k8s.io/v1beta1",
        ["CustomResourceDefinition"],
        "v1.16.0",
        "v1.22.0",
        "apiextensions.k8s.io/v1",
    ),
    *_rows(
        "admissionregistration.k8s.io/v1beta1",
        ["MutatingWebhookConfiguration", "ValidatingWebhookConfiguration"],
        "v1.16.0",
        "v1.22.0",
        "admissionregistration.k8s.io/v1",
    ),
    *_rows("rbac.authorization.k8s.io/v1alpha1", _RBAC, "v1.17.0", "v1.22.0", "rbac.authorization.k8s.io/v1"),
    *_rows("rbac.authorization.k8s.io/v1beta1", _RBAC, "v1.17.0", "v1.22.0", "rbac.authorization.k8s.io/v1"),
    *_rows("scheduling.k8s.io/v1beta1", ["PriorityClass"], "v1.14.0", "v1.22.0", "scheduling.k8s.io/v1"),
    *_rows(
        "storage.k8s.io/v1beta1",
        ["CSIDriver", "CSINode", "StorageClass", "VolumeAttachment"],
        "v1.19.0",
        "v1.22.0",
        "storage.k8s.io/v1",
    ),
    *_rows(
        "certificates.k8s.io/v1beta1",
        ["CertificateSigningRequest"],
        "v1.19.0",
        "v1.22.0",
        "certificates.k8s.io/v1",
    ),
    *_rows("coordination.k8s.io/v1beta1", ["Lease"], "v1.19.0", "v1.22.0", "coordination.k8s.io/v1"),
    *_rows("apiregistration.k8s.io/v1beta1", ["APIService"], "v1.19.0", "v1.22.0", "apiregistration.k8s.io/v1"),
    *_rows("authentication.k8s.io/v1beta1", ["TokenReview"], "v1.19.0", "v1.22.0", "authentication.k8s.io/v1"),
    *_rows(
        "authorization.k8s.io/v1beta1",
        ["LocalSubjectAccessReview", "SelfSubjectAccessReview", "SubjectAccessReview"],
        "v1.19.0",
        "v1.22.0",
        "authorization.k8s.io/v1",
    ),
    # Removed in 1.25
    *_rows("batch/v1beta1", ["CronJob"], "v1.21.0", "v1.25.0", "batch/v1"),
    *_rows("discovery.k8s.io/v1beta1", ["EndpointSlice"], "v1.21.0", "v1.25.0", "discovery.k8s.io/v1"),
    *_rows("events.k8s.io/v1beta1", ["Event"], "v1.19.0", "v1.25.0", "events.k8s.io/v1"),
    *_rows("autoscaling/v2beta1", ["HorizontalPodAutoscaler"], "v1.22.0", "v1.25.0", "autoscaling/v2"),
    *_rows("policy/v1beta1", ["PodDisruptionBudget"], "v1.21.0", "v1.25.0", "policy/v1"),
    *_rows("policy/v1beta1", ["PodSecurityPolicy"], "v1.21.0", "v1.25.0", ""),
    *_rows("node.k8s.io/v1beta1", ["RuntimeClass"], "v1.20.0", "v1.25.0", "node.k8s.io/v1"),
    # Removed in 1.26
    *_rows(
        "flowcontrol.apiserver.k8s.io/v1beta1",
        ["FlowSchema", "PriorityLevelConfiguration"],
        "v1.23.0",
        "v1.26.0",
        "flowcontrol.apiserver.k8s.io/v1beta3",
    ),
    *_rows("autoscaling/v2beta2", ["HorizontalPodAutoscaler"], "v1.23.0", "v1.26.0", "autoscaling/v2"),
    # Removed in 1.27
    *_rows("storage.k8s.io/v1beta1", ["CSIStorageCapacity"], "v1.24.0", "v1.27.0", "storage.k8s.io/v1"),
    # Removed in 1.29
    *_rows(
        "flowcontrol.apiserver.k8s.io/v1beta2",
        ["FlowSchema", "PriorityLevelConfiguration"],
        "v1.26.0",
        "v1.29.0",
        "flowcontrol.apiserver.k8s.io/v1",
    ),
    # Removed in 1.32
    *_rows(
        "flowcontrol.apiserver.k8s.io/v1beta3",
        ["FlowSchema", "PriorityLevelConfiguration"],
        "v1.29.0",
        "v1.32.0",
        "flowcontrol.apiserver.k8s.io/v1",
    ),
    # Add-on components
    *_rows(
        "cert-manager.io/v1alpha2",
        ["Certificate", "CertificateRequest", "ClusterIssuer", "Issuer"],
        "v1.4.0",
        "v1.6.0",
        "cert-manager.io/v1",
        component="cert-manager",
    ),
    *_rows(
        "authentication.istio.io/v1alpha1",
        ["Policy"],
        "v1.5.0",
        "v1.6.0",
        "security.istio.io/v1beta1",
        component="istio",
    ),
]
