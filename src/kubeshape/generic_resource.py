"""Generic workload holder for kubeshape.

``GenericResource`` wraps a single Deployment, StatefulSet, DaemonSet or
CronJob and exposes one uniform surface for images, labels, annotations and
status.  Kind-specific knowledge lives in the lookup tables at the top of the
module: every table is keyed by all four ``WorkloadKind`` members, and every
operation on the holder goes through them.

Getters hand out live references into the wrapped object.  Two holders
around the same object see each other's changes; call ``deep_copy()`` before
mutating when isolation is needed.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable
from typing import Any

from kubernetes.client import (
    V1Container,
    V1CronJob,
    V1DaemonSet,
    V1Deployment,
    V1ObjectMeta,
    V1PodSpec,
    V1PodTemplateSpec,
    V1StatefulSet,
)

from .containers import (
    get_container_images,
    get_container_references,
    get_image_pull_secrets,
    update_container_image,
)
from .identifiers import (
    get_cron_job_identifier,
    get_daemon_set_identifier,
    get_deployment_identifier,
    get_object_name,
    get_object_namespace,
    get_stateful_set_identifier,
)
from .models import IMAGE_SEPARATOR, ContainerReference, ContainerType, KubernetesWorkload, Status, WorkloadKind

logger = logging.getLogger(__name__)


class GenericResourceException(Exception):
    """Base exception for GenericResource errors."""


class UnsupportedResourceException(GenericResourceException, TypeError):
    """Raised when a holder is built around an object that is not a supported workload."""


class ContainerIndexException(GenericResourceException, IndexError):
    """Raised when a container update addresses a position outside the container list."""


# ---------------------------------------------------------------------------
# Pod template resolution: the only place that knows CronJobs nest deeper
# ---------------------------------------------------------------------------


def _spec_template(obj: V1Deployment | V1StatefulSet | V1DaemonSet) -> V1PodTemplateSpec | None:
    return obj.spec.template if obj.spec else None


def _job_template(cron_job: V1CronJob) -> V1PodTemplateSpec | None:
    job_template = cron_job.spec.job_template if cron_job.spec else None
    job_spec = job_template.spec if job_template else None
    return job_spec.template if job_spec else None


# ---------------------------------------------------------------------------
# Status normalisation
# ---------------------------------------------------------------------------


def _deployment_status(deployment: V1Deployment) -> Status:
    status = deployment.status
    if status is None:
        return Status()
    return Status(
        replicas=status.replicas or 0,
        updated_replicas=status.updated_replicas or 0,
        ready_replicas=status.ready_replicas or 0,
        available_replicas=status.available_replicas or 0,
        unavailable_replicas=status.unavailable_replicas or 0,
    )


def _stateful_set_status(stateful_set: V1StatefulSet) -> Status:
    status = stateful_set.status
    if status is None:
        return Status()
    return Status(
        replicas=status.replicas or 0,
        updated_replicas=status.updated_replicas or 0,
        ready_replicas=status.ready_replicas or 0,
        available_replicas=status.current_replicas or 0,
        unavailable_replicas=0,  # N/A
    )


def _daemon_set_status(daemon_set: V1DaemonSet) -> Status:
    status = daemon_set.status
    if status is None:
        return Status()
    return Status(
        replicas=status.desired_number_scheduled or 0,
        updated_replicas=status.updated_number_scheduled or 0,
        ready_replicas=status.number_ready or 0,
        available_replicas=status.number_available or 0,
        unavailable_replicas=status.number_unavailable or 0,
    )


def _cron_job_status(cron_job: V1CronJob) -> Status:
    active = cron_job.status.active if cron_job.status else None
    return Status(replicas=len(active or []))


# ---------------------------------------------------------------------------
# Kind dispatch tables
# ---------------------------------------------------------------------------

_WORKLOAD_KINDS: dict[type, WorkloadKind] = {
    V1Deployment: WorkloadKind.DEPLOYMENT,
    V1StatefulSet: WorkloadKind.STATEFUL_SET,
    V1DaemonSet: WorkloadKind.DAEMON_SET,
    V1CronJob: WorkloadKind.CRON_JOB,
}

_IDENTIFIER_BUILDERS: dict[WorkloadKind, Callable[[Any], str]] = {
    WorkloadKind.DEPLOYMENT: get_deployment_identifier,
    WorkloadKind.STATEFUL_SET: get_stateful_set_identifier,
    WorkloadKind.DAEMON_SET: get_daemon_set_identifier,
    WorkloadKind.CRON_JOB: get_cron_job_identifier,
}

_POD_TEMPLATE_ACCESSORS: dict[WorkloadKind, Callable[[Any], V1PodTemplateSpec | None]] = {
    WorkloadKind.DEPLOYMENT: _spec_template,
    WorkloadKind.STATEFUL_SET: _spec_template,
    WorkloadKind.DAEMON_SET: _spec_template,
    WorkloadKind.CRON_JOB: _job_template,
}

_STATUS_NORMALIZERS: dict[WorkloadKind, Callable[[Any], Status]] = {
    WorkloadKind.DEPLOYMENT: _deployment_status,
    WorkloadKind.STATEFUL_SET: _stateful_set_status,
    WorkloadKind.DAEMON_SET: _daemon_set_status,
    WorkloadKind.CRON_JOB: _cron_job_status,
}


def resolve_workload_kind(obj: object) -> WorkloadKind | None:
    """Return the ``WorkloadKind`` of ``obj``, or ``None`` if it is not a supported workload."""
    for workload_cls, kind in _WORKLOAD_KINDS.items():
        if isinstance(obj, workload_cls):
            return kind
    return None


def _get_or_initialise(values: dict[str, str] | None) -> dict[str, str]:
    if values is None:
        return {}
    return values


class GenericResource:
    """Uniform view over one Deployment, StatefulSet, DaemonSet or CronJob.

    ``identifier``, ``namespace`` and ``name`` are read once at construction
    and are not refreshed if the wrapped object changes afterwards; use
    ``get_identifier()``, ``get_namespace()`` and ``get_name()`` for live
    values.

    Args:
        obj: A ``V1Deployment``, ``V1StatefulSet``, ``V1DaemonSet`` or
            ``V1CronJob``.  The holder keeps this exact reference.

    Raises:
        UnsupportedResourceException: If ``obj`` is any other type.
    """

    def __init__(self, obj: KubernetesWorkload) -> None:
        kind = resolve_workload_kind(obj)
        if kind is None:
            raise UnsupportedResourceException(f"unsupported resource type: {type(obj).__name__}")

        self._obj: KubernetesWorkload | None = obj
        self._kind: WorkloadKind | None = kind

        self.identifier = self.get_identifier()
        self.namespace = self.get_namespace()
        self.name = self.get_name()

    @classmethod
    def empty(cls) -> GenericResource:
        """Return a holder that wraps nothing.

        Every getter on it returns an empty value and every setter is a no-op.
        """
        resource = cls.__new__(cls)
        resource._obj = None
        resource._kind = None
        resource.identifier = ""
        resource.namespace = ""
        resource.name = ""
        return resource

    def __str__(self) -> str:
        return f"{self.kind}/{self.namespace}/{self.name} images: {IMAGE_SEPARATOR.join(self.get_images())}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.identifier!r})"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, GenericResource):
            return NotImplemented
        return self.identifier < other.identifier

    def __deepcopy__(self, memo: dict[int, Any]) -> GenericResource:
        copied = self.deep_copy()
        memo[id(self)] = copied
        return copied

    def deep_copy(self) -> GenericResource:
        """Return an independent holder around a deep copy of the wrapped object.

        The cached ``identifier``, ``namespace`` and ``name`` are carried over
        as they are, not recomputed.
        """
        resource = GenericResource.empty()
        if self._obj is None:
            return resource

        resource._obj = copy.deepcopy(self._obj)
        resource._kind = self._kind
        resource.identifier = self.identifier
        resource.namespace = self.namespace
        resource.name = self.name
        return resource

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def kind(self) -> WorkloadKind | str:
        """Kind tag of the wrapped object, or an empty string for an empty holder."""
        return self._kind or ""

    def get_resource(self) -> KubernetesWorkload | None:
        """Return the wrapped object itself."""
        return self._obj

    def get_identifier(self) -> str:
        """Return the identifier computed from the current state of the wrapped object."""
        if self._kind is None:
            return ""
        return _IDENTIFIER_BUILDERS[self._kind](self._obj)

    def get_namespace(self) -> str:
        """Return the wrapped object's current namespace."""
        if self._obj is None:
            return ""
        return get_object_namespace(self._obj)

    def get_name(self) -> str:
        """Return the wrapped object's current name."""
        if self._obj is None:
            return ""
        return get_object_name(self._obj)

    # ------------------------------------------------------------------
    # Object metadata
    # ------------------------------------------------------------------

    def _metadata(self, create: bool = False) -> V1ObjectMeta | None:
        if self._obj is None:
            return None
        if self._obj.metadata is None and create:
            self._obj.metadata = V1ObjectMeta()
        return self._obj.metadata

    def get_labels(self) -> dict[str, str]:
        """Return the object labels; a fresh empty dict when none are set."""
        metadata = self._metadata()
        return _get_or_initialise(metadata.labels if metadata else None)

    def set_labels(self, labels: dict[str, str]) -> None:
        """Replace the object labels wholesale."""
        metadata = self._metadata(create=True)
        if metadata is not None:
            metadata.labels = labels

    def get_annotations(self) -> dict[str, str]:
        """Return the object annotations; a fresh empty dict when none are set."""
        metadata = self._metadata()
        return _get_or_initialise(metadata.annotations if metadata else None)

    def set_annotations(self, annotations: dict[str, str]) -> None:
        """Replace the object annotations wholesale."""
        metadata = self._metadata(create=True)
        if metadata is not None:
            metadata.annotations = annotations

    # ------------------------------------------------------------------
    # Pod template
    # ------------------------------------------------------------------

    def _pod_template(self) -> V1PodTemplateSpec | None:
        if self._kind is None:
            return None
        return _POD_TEMPLATE_ACCESSORS[self._kind](self._obj)

    def _pod_spec(self) -> V1PodSpec | None:
        template = self._pod_template()
        return template.spec if template else None

    def get_spec_annotations(self) -> dict[str, str]:
        """Return the pod template annotations; a fresh empty dict when none are set."""
        template = self._pod_template()
        metadata = template.metadata if template else None
        return _get_or_initialise(metadata.annotations if metadata else None)

    def set_spec_annotations(self, annotations: dict[str, str]) -> None:
        """Replace the pod template annotations wholesale."""
        template = self._pod_template()
        if template is None:
            if self._obj is not None:
                logger.warning(f"{self.identifier} has no pod template, spec annotations not set")
            return
        if template.metadata is None:
            template.metadata = V1ObjectMeta()
        template.metadata.annotations = annotations

    # ------------------------------------------------------------------
    # Containers and images
    # ------------------------------------------------------------------

    def containers(self) -> list[V1Container]:
        """Return the live app container list of the pod template."""
        pod_spec = self._pod_spec()
        if pod_spec is None or pod_spec.containers is None:
            return []
        return pod_spec.containers

    def init_containers(self) -> list[V1Container]:
        """Return the live init container list of the pod template."""
        pod_spec = self._pod_spec()
        if pod_spec is None or pod_spec.init_containers is None:
            return []
        return pod_spec.init_containers

    def container_references(self) -> list[ContainerReference]:
        """Return positional image references, init containers first."""
        return get_container_references(self.init_containers(), ContainerType.INIT) + get_container_references(
            self.containers(), ContainerType.APP,
        )

    def get_image_pull_secrets(self) -> list[str]:
        """Return the image pull secret names of the pod template."""
        pod_spec = self._pod_spec()
        return get_image_pull_secrets(pod_spec.image_pull_secrets if pod_spec else None)

    def get_images(self) -> list[str]:
        """Return app container images in container order."""
        return get_container_images(self.containers())

    def get_init_images(self) -> list[str]:
        """Return init container images in container order."""
        return get_container_images(self.init_containers())

    def update_container(self, index: int, image: str) -> None:
        """Set the image of the app container at ``index``.

        Raises:
            ContainerIndexException: If ``index`` is out of range; nothing is changed.
        """
        self._update_image(self.containers(), index, image, ContainerType.APP)

    def update_init_container(self, index: int, image: str) -> None:
        """Set the image of the init container at ``index``.

        Raises:
            ContainerIndexException: If ``index`` is out of range; nothing is changed.
        """
        self._update_image(self.init_containers(), index, image, ContainerType.INIT)

    def _update_image(
        self, containers: list[V1Container], index: int, image: str, container_type: ContainerType,
    ) -> None:
        try:
            update_container_image(containers, index, image)
        except IndexError as e:
            logger.warning(f"Rejected {container_type.value} container update on {self.identifier}: {e}")
            raise ContainerIndexException(f"{self.identifier}: {e}") from e
        logger.debug(f"Set {container_type.value} container {index} of {self.identifier} to {image}")

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def get_status(self) -> Status:
        """Return the kind-specific status counters mapped onto ``Status``."""
        if self._kind is None:
            return Status()
        return _STATUS_NORMALIZERS[self._kind](self._obj)
