"""Container list helpers for kubeshape.

Pure functions over the container, init-container and image-pull-secret lists
of a pod spec.  They know nothing about which workload kind the list came
from; ``GenericResource`` resolves the pod spec and hands the lists in.
"""

from __future__ import annotations

from kubernetes.client import V1Container, V1LocalObjectReference

from .models import ContainerReference, ContainerType


def get_container_images(containers: list[V1Container] | None) -> list[str]:
    """Return container images in list order (not sorted, not deduplicated)."""
    return [container.image or "" for container in containers or []]


def get_image_pull_secrets(secrets: list[V1LocalObjectReference] | None) -> list[str]:
    """Return the names of the referenced image pull secrets in list order."""
    return [secret.name or "" for secret in secrets or []]


def get_container_references(
    containers: list[V1Container] | None,
    container_type: ContainerType,
) -> list[ContainerReference]:
    """Build positional ``ContainerReference`` entries for a container list.

    Args:
        containers: App or init containers (may be ``None``).
        container_type: Which list ``containers`` is, recorded on each entry.

    Returns:
        One ``ContainerReference`` per container, indexed from ``0``.
    """
    return [
        ContainerReference(
            index=index,
            image=container.image or "",
            name=container.name or "",
            container_type=container_type,
        )
        for index, container in enumerate(containers or [])
    ]


def update_container_image(containers: list[V1Container] | None, index: int, image: str) -> None:
    """Overwrite the image of the container at ``index``.

    Negative indexes are rejected rather than counted from the end, so a
    caller can never address a container it did not mean to.

    Raises:
        IndexError: If ``index`` is not a position in ``containers``.
    """
    size = len(containers or [])
    if not 0 <= index < size:
        raise IndexError(f"container index {index} out of range for {size} container(s)")
    containers[index].image = image
