"""Typed registry binding resource paths to binding types.

Resources are addressed by path or glob selector and bound to named binding
types with validated parameters. Consumers then ask for every resource bound
to a type without knowing where the resources are stored.

- **Types**: :class:`BindingType` and :class:`BindingParameter`
- **Bindings**: :class:`EagerBinding` and :class:`LazyBinding`
- **Binder**: :class:`ResourceBinder`, the registry engine
- **Repository**: the resource store contract and an in-memory store
- **Exceptions**: :class:`PathbindError` and its subclasses

Example:
    ```python
    from pathbind import BindingType, ResourceBinder
    from pathbind.repository import FileResource, InMemoryResourceRepository

    repo = InMemoryResourceRepository()
    repo.add("/plugins/cache.py", FileResource())

    binder = ResourceBinder(repo)
    binder.define(BindingType("plugin"))
    binder.bind("/plugins/*.py", "plugin")

    binder.find("plugin")
    ```
"""

from pathbind.binder import ResourceBinder
from pathbind.binding import Binding, EagerBinding, LazyBinding
from pathbind.config import BinderConfig
from pathbind.discovery import ResourceDiscovery
from pathbind.exceptions import (
    BindingError,
    ConfigurationError,
    InvalidArgumentError,
    InvalidParameterError,
    MissingParameterError,
    NoSuchParameterError,
    NoSuchTypeError,
    NotFoundError,
    OperationError,
    PathbindError,
    ValidationError,
)
from pathbind.repository import (
    FileResource,
    InMemoryResourceRepository,
    ResourceRepository,
)
from pathbind.types import BindingParameter, BindingType

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",
    # Types
    "BindingParameter",
    "BindingType",
    # Bindings
    "Binding",
    "EagerBinding",
    "LazyBinding",
    # Binder
    "ResourceBinder",
    "ResourceDiscovery",
    "BinderConfig",
    # Repository
    "ResourceRepository",
    "InMemoryResourceRepository",
    "FileResource",
    # Exceptions
    "PathbindError",
    "ValidationError",
    "NotFoundError",
    "OperationError",
    "ConfigurationError",
    "InvalidArgumentError",
    "InvalidParameterError",
    "MissingParameterError",
    "NoSuchParameterError",
    "NoSuchTypeError",
    "BindingError",
]
