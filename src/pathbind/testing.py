"""Test utilities for code using pathbind.

Example:
    ```python
    from pathbind.binding import EagerBinding
    from pathbind.repository import FileResource, InMemoryResourceRepository
    from pathbind.testing import create_binder
    from pathbind.types import BindingType

    resource = FileResource("/file")
    binding = EagerBinding("/file", [resource], BindingType("type"))

    binder = create_binder(InMemoryResourceRepository(), [binding])
    binder.find("type")
    # [FileResource(path='/file', body=None)]
    ```
"""

import logging
from typing import Any, Iterable, List

from pathbind.binder import ResourceBinder
from pathbind.binding import Binding
from pathbind.config import BinderConfig
from pathbind.exceptions import ValidationError
from pathbind.repository import FileResource, ResourceRepository

logger = logging.getLogger(__name__)


def create_test_resources(repo: ResourceRepository, paths: Iterable[str]) -> List[FileResource]:
    """Add a :class:`FileResource` to the repository for every path.

    Returns:
        The created resources
    """
    resources = []
    for path in paths:
        resource = FileResource(path)
        repo.add(path, resource)
        resources.append(resource)
    return resources


def create_binder(
    repo: ResourceRepository,
    bindings: Iterable[Binding] = (),
    config: BinderConfig | None = None,
) -> ResourceBinder:
    """Create a binder holding the given bindings.

    The resources of every binding are added to the repository, each
    distinct type is defined once and every binding is then bound again
    through the binder.

    Args:
        repo: Repository to add the resources to
        bindings: Bindings to reproduce
        config: Optional binder settings

    Returns:
        The populated binder
    """
    bindings = list(bindings)

    for binding in bindings:
        for resource in binding.get_resources():
            path = _resource_path(resource)
            if not repo.contains(path) or repo.get(path) is not resource:
                repo.add(path, resource)

    binder = ResourceBinder(repo, config=config)

    for binding in bindings:
        if not binder.is_defined(binding.type_name):
            binder.define(binding.type)

    for binding in bindings:
        binder.bind(binding.path, binding.type_name, binding.parameters)

    logger.debug("Created test binder with %d binding(s)", len(binder))
    return binder


def _resource_path(resource: Any) -> str:
    path = getattr(resource, "path", None)
    if not path:
        raise ValidationError(f"Resource {resource!r} has no path", context={"resource": resource})
    return path
