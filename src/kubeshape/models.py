"""Data models shared by the kubeshape adapter layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from kubernetes.client import V1CronJob, V1DaemonSet, V1Deployment, V1StatefulSet

# ---------------------------------------------------------------------------
# Shared type alias: the closed set of workload objects a holder can wrap
# ---------------------------------------------------------------------------
KubernetesWorkload: TypeAlias = V1Deployment | V1StatefulSet | V1DaemonSet | V1CronJob

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
IMAGE_SEPARATOR: str = ", "  # Joins image lists in the human-readable resource representation.

IDENTIFIER_SEPARATOR: str = "/"  # Joins kind, namespace and name into a resource identifier.


class WorkloadKind(str, Enum):
    """Tags for the workload kinds a ``GenericResource`` can hold."""

    DEPLOYMENT = "deployment"
    STATEFUL_SET = "statefulset"
    DAEMON_SET = "daemonset"
    CRON_JOB = "cronjob"

    def __str__(self) -> str:
        return self.value


class ContainerType(str, Enum):
    """Classification of a container within a pod spec."""

    INIT = "init"
    APP = "app"


@dataclass
class Status:
    """Normalized rollout status shared by every workload kind.

    Counters with no equivalent on a given kind are reported as ``0``, which
    means "not applicable" rather than "no live replicas".

    Attributes:
        replicas: Total pods targeted (active runs for CronJobs).
        updated_replicas: Pods running the desired template.
        ready_replicas: Pods passing readiness.
        available_replicas: Pods ready for at least ``minReadySeconds``.
        unavailable_replicas: Pods still required for full availability.
    """

    replicas: int = 0
    updated_replicas: int = 0
    ready_replicas: int = 0
    available_replicas: int = 0
    unavailable_replicas: int = 0

    def to_dict(self) -> dict[str, int]:
        """Serialise the status using its JSON wire keys."""
        return {
            "replicas": self.replicas,
            "updatedReplicas": self.updated_replicas,
            "readyReplicas": self.ready_replicas,
            "availableReplicas": self.available_replicas,
            "unavailableReplica": self.unavailable_replicas,
        }


@dataclass
class ContainerReference:
    """Positional reference to a container image inside a pod template.

    ``index`` addresses the container within its own list (app or init), and
    is what ``update_container`` / ``update_init_container`` expect.
    """

    index: int
    image: str
    name: str = ""
    container_type: ContainerType = ContainerType.APP
