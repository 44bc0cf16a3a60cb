"""kubeshape: one uniform surface over Kubernetes workload objects.

Wrap Deployments, StatefulSets, DaemonSets and CronJobs in a single
``GenericResource`` type for image, label, annotation and status handling.
"""

import logging

from kubeshape._version import __version__
from kubeshape.collection import sort_resources, wrap_workloads
from kubeshape.generic_resource import (
    ContainerIndexException,
    GenericResource,
    GenericResourceException,
    UnsupportedResourceException,
)
from kubeshape.models import ContainerReference, ContainerType, Status, WorkloadKind

__all__ = [
    "ContainerIndexException",
    "ContainerReference",
    "ContainerType",
    "GenericResource",
    "GenericResourceException",
    "Status",
    "UnsupportedResourceException",
    "WorkloadKind",
    "__version__",
    "sort_resources",
    "wrap_workloads",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
