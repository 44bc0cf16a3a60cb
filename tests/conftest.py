"""Shared pytest fixtures for the kubeshape test suite."""

from __future__ import annotations

import pytest
from kubernetes.client import (
    V1Container,
    V1CronJob,
    V1CronJobSpec,
    V1CronJobStatus,
    V1DaemonSet,
    V1DaemonSetSpec,
    V1DaemonSetStatus,
    V1Deployment,
    V1DeploymentSpec,
    V1DeploymentStatus,
    V1JobSpec,
    V1JobTemplateSpec,
    V1LabelSelector,
    V1LocalObjectReference,
    V1ObjectMeta,
    V1ObjectReference,
    V1PodSpec,
    V1PodTemplateSpec,
    V1StatefulSet,
    V1StatefulSetSpec,
    V1StatefulSetStatus,
)

from kubeshape.models import KubernetesWorkload, WorkloadKind


def _pod_template(app: str) -> V1PodTemplateSpec:
    """Build a pod template with two app containers, one init container and a pull secret."""
    return V1PodTemplateSpec(
        metadata=V1ObjectMeta(labels={"app": app}, annotations={"checksum/config": "abc"}),
        spec=V1PodSpec(
            containers=[
                V1Container(name=app, image=f"registry.example.com/my-org/{app}:v1.0.0"),
                V1Container(name="sidecar", image="registry.example.com/my-org/sidecar:v2.0.0"),
            ],
            init_containers=[
                V1Container(name="migrate", image=f"registry.example.com/my-org/{app}-migrate:v1.0.0"),
            ],
            image_pull_secrets=[V1LocalObjectReference(name="registry-creds")],
        ),
    )


@pytest.fixture()
def sample_deployment() -> V1Deployment:
    """Return a Deployment with populated metadata, template and status."""
    return V1Deployment(
        metadata=V1ObjectMeta(
            name="backend",
            namespace="default",
            labels={"team": "platform"},
            annotations={"owner": "platform"},
        ),
        spec=V1DeploymentSpec(
            replicas=3,
            selector=V1LabelSelector(match_labels={"app": "backend"}),
            template=_pod_template("backend"),
        ),
        status=V1DeploymentStatus(
            replicas=3,
            updated_replicas=2,
            ready_replicas=2,
            available_replicas=1,
            unavailable_replicas=2,
        ),
    )


@pytest.fixture()
def sample_stateful_set() -> V1StatefulSet:
    """Return a StatefulSet with populated metadata, template and status."""
    return V1StatefulSet(
        metadata=V1ObjectMeta(name="database", namespace="storage"),
        spec=V1StatefulSetSpec(
            service_name="database",
            selector=V1LabelSelector(match_labels={"app": "database"}),
            template=_pod_template("database"),
        ),
        status=V1StatefulSetStatus(
            replicas=3,
            updated_replicas=3,
            ready_replicas=2,
            current_replicas=1,
            available_replicas=2,
        ),
    )


@pytest.fixture()
def sample_daemon_set() -> V1DaemonSet:
    """Return a DaemonSet with populated metadata, template and status."""
    return V1DaemonSet(
        metadata=V1ObjectMeta(name="node-agent", namespace="kube-system"),
        spec=V1DaemonSetSpec(
            selector=V1LabelSelector(match_labels={"app": "node-agent"}),
            template=_pod_template("node-agent"),
        ),
        status=V1DaemonSetStatus(
            current_number_scheduled=5,
            desired_number_scheduled=5,
            number_misscheduled=0,
            number_ready=4,
            number_available=3,
            number_unavailable=2,
            updated_number_scheduled=4,
        ),
    )


@pytest.fixture()
def sample_cron_job() -> V1CronJob:
    """Return a CronJob with two active runs and no object annotations."""
    return V1CronJob(
        metadata=V1ObjectMeta(name="report", namespace="batch"),
        spec=V1CronJobSpec(
            schedule="*/5 * * * *",
            job_template=V1JobTemplateSpec(
                metadata=V1ObjectMeta(annotations={"job-level": "true"}),
                spec=V1JobSpec(template=_pod_template("report")),
            ),
        ),
        status=V1CronJobStatus(
            active=[
                V1ObjectReference(kind="Job", name="report-1"),
                V1ObjectReference(kind="Job", name="report-2"),
            ],
        ),
    )


@pytest.fixture(params=list(WorkloadKind), ids=lambda kind: kind.value)
def workload_case(
    request: pytest.FixtureRequest,
    sample_deployment: V1Deployment,
    sample_stateful_set: V1StatefulSet,
    sample_daemon_set: V1DaemonSet,
    sample_cron_job: V1CronJob,
) -> tuple[WorkloadKind, KubernetesWorkload]:
    """Yield every supported workload kind together with a sample object of that kind.

    Returns:
        Tuple of ``(expected_kind, workload_object)``.
    """
    objects: dict[WorkloadKind, KubernetesWorkload] = {
        WorkloadKind.DEPLOYMENT: sample_deployment,
        WorkloadKind.STATEFUL_SET: sample_stateful_set,
        WorkloadKind.DAEMON_SET: sample_daemon_set,
        WorkloadKind.CRON_JOB: sample_cron_job,
    }
    return request.param, objects[request.param]
