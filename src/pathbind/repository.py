"""Resource repository contract and an in-memory implementation.

The binder treats the repository as an external collaborator: it only calls
``find()`` to resolve a path or selector. How resources are stored and how
selectors are matched belongs to the repository.

:class:`InMemoryResourceRepository` is a simple implementation keyed by
path, matching selectors with shell-style wildcards (``*``, ``?``,
``[...]``). It is used by tests and by code that wires bindings to
resources held in memory.

Example:
    ```python
    from pathbind.repository import FileResource, InMemoryResourceRepository

    repo = InMemoryResourceRepository()
    repo.add("/config/app.yml", FileResource())
    repo.add("/config/db.yml", FileResource())

    len(repo.find("/config/*.yml"))
    # 2
    ```
"""

import fnmatch
import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol, runtime_checkable

from pathbind.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

_WILDCARDS = frozenset("*?[")


def is_selector(path: str) -> bool:
    """Check whether a path contains wildcard characters."""
    return any(char in _WILDCARDS for char in path)


@runtime_checkable
class ResourceRepository(Protocol):
    """Protocol for stores that resolve paths to resources."""

    def find(self, selector: str) -> List[Any]:
        """Find all resources matching a path or selector.

        Returns:
            The matching resources, possibly empty
        """
        ...

    def contains(self, selector: str) -> bool:
        ...

    def get(self, path: str) -> Any:
        ...

    def add(self, path: str, resource: Any) -> None:
        ...


@dataclass(eq=False)
class FileResource:
    """A minimal resource with a path and an optional body."""

    path: str | None = None
    body: Any = None


class InMemoryResourceRepository:
    """Thread-safe resource repository held in memory.

    Resources are kept in insertion order, which is also the order in which
    ``find()`` returns them.
    """

    def __init__(self) -> None:
        self._resources: Dict[str, Any] = {}
        self._lock = threading.RLock()

    def add(self, path: str, resource: Any) -> None:
        """Add a resource at a path, replacing any resource stored there.

        If the resource has a ``path`` attribute it is set to ``path``.
        """
        if is_selector(path):
            raise ValidationError(
                f"Cannot add a resource at selector '{path}'",
                context={"path": path},
            )
        if hasattr(resource, "path"):
            resource.path = path
        with self._lock:
            self._resources[path] = resource
        logger.debug("Added resource at %s", path)

    def get(self, path: str) -> Any:
        """Get the resource stored at an exact path.

        Raises:
            NotFoundError: If no resource is stored at the path
        """
        with self._lock:
            if path not in self._resources:
                raise NotFoundError(
                    f"Resource not found: {path}",
                    context={"path": path},
                )
            return self._resources[path]

    def find(self, selector: str) -> List[Any]:
        with self._lock:
            if not is_selector(selector):
                resource = self._resources.get(selector)
                return [] if resource is None else [resource]
            return [
                resource
                for path, resource in self._resources.items()
                if fnmatch.fnmatchcase(path, selector)
            ]

    def contains(self, selector: str) -> bool:
        return len(self.find(selector)) > 0

    def remove(self, selector: str) -> int:
        """Remove all resources matching a path or selector.

        Returns:
            Number of removed resources
        """
        with self._lock:
            paths = [
                path
                for path in self._resources
                if path == selector or (is_selector(selector) and fnmatch.fnmatchcase(path, selector))
            ]
            for path in paths:
                del self._resources[path]
        logger.debug("Removed %d resource(s) matching %s", len(paths), selector)
        return len(paths)

    def clear(self) -> None:
        with self._lock:
            self._resources.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._resources)

    def __contains__(self, selector: str) -> bool:
        return self.contains(selector)
