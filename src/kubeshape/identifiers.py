"""Identifier construction for wrapped workloads.

An identifier is ``"<kind>/<namespace>/<name>"`` and is stable for the
lifetime of a resource, which makes it usable both as an ordering key and in
log lines.
"""

from __future__ import annotations

from kubernetes.client import V1CronJob, V1DaemonSet, V1Deployment, V1StatefulSet

from .models import IDENTIFIER_SEPARATOR, KubernetesWorkload, WorkloadKind


def get_object_name(obj: KubernetesWorkload) -> str:
    """Return ``metadata.name`` or an empty string when unset."""
    metadata = obj.metadata
    if metadata is None:
        return ""
    return metadata.name or ""


def get_object_namespace(obj: KubernetesWorkload) -> str:
    """Return ``metadata.namespace`` or an empty string when unset."""
    metadata = obj.metadata
    if metadata is None:
        return ""
    return metadata.namespace or ""


def _build_identifier(kind: WorkloadKind, obj: KubernetesWorkload) -> str:
    return IDENTIFIER_SEPARATOR.join((kind.value, get_object_namespace(obj), get_object_name(obj)))


def get_deployment_identifier(deployment: V1Deployment) -> str:
    """Return the identifier of a Deployment."""
    return _build_identifier(WorkloadKind.DEPLOYMENT, deployment)


def get_stateful_set_identifier(stateful_set: V1StatefulSet) -> str:
    """Return the identifier of a StatefulSet."""
    return _build_identifier(WorkloadKind.STATEFUL_SET, stateful_set)


def get_daemon_set_identifier(daemon_set: V1DaemonSet) -> str:
    """Return the identifier of a DaemonSet."""
    return _build_identifier(WorkloadKind.DAEMON_SET, daemon_set)


def get_cron_job_identifier(cron_job: V1CronJob) -> str:
    """Return the identifier of a CronJob."""
    return _build_identifier(WorkloadKind.CRON_JOB, cron_job)
