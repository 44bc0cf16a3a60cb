"""Batch helpers for working with many ``GenericResource`` holders.

Rollouts that touch several workloads should visit them in a reproducible
order; both helpers here return holders sorted by identifier.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from .generic_resource import GenericResource, UnsupportedResourceException
from .models import KubernetesWorkload

logger = logging.getLogger(__name__)


def sort_resources(resources: Iterable[GenericResource]) -> list[GenericResource]:
    """Return ``resources`` as a new list ordered by identifier."""
    return sorted(resources, key=lambda resource: resource.identifier)


def wrap_workloads(
    workloads: Iterable[KubernetesWorkload] | Mapping[str, KubernetesWorkload],
    skip_unsupported: bool = False,
) -> list[GenericResource]:
    """Wrap workload objects into holders, ordered by identifier.

    Args:
        workloads: Workload objects, or a mapping of ``"namespace/name"`` to
            workload object as returned by namespaced list helpers.
        skip_unsupported: When ``True``, objects of unsupported types are
            logged and left out instead of aborting the whole batch.

    Returns:
        Sorted list of ``GenericResource`` instances.

    Raises:
        UnsupportedResourceException: If an object is unsupported and
            ``skip_unsupported`` is ``False``.
    """
    items = workloads.values() if isinstance(workloads, Mapping) else workloads
    resources: list[GenericResource] = []
    skipped = 0

    for obj in items:
        try:
            resources.append(GenericResource(obj))
        except UnsupportedResourceException as e:
            if not skip_unsupported:
                raise
            logger.warning(f"Skipping workload: {e}")
            skipped += 1

    logger.info(f"Wrapped {len(resources)} workloads ({skipped} skipped)")
    return sort_resources(resources)
