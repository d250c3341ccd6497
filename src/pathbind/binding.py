"""Bindings between resource paths and binding types.

A binding associates a path (or glob selector) with a :class:`BindingType`
and a set of effective parameters. Bindings are immutable; two bindings are
equal when they have the same path, type name and effective parameters. The
resources a binding refers to are never part of its identity.

Two variants exist:
- :class:`EagerBinding` holds resources passed at construction
- :class:`LazyBinding` loads resources from a repository on first access
  and memoizes them for the lifetime of the binding
"""

import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable, Iterable, List, Mapping

from pathbind.exceptions import NoSuchParameterError
from pathbind.repository import ResourceRepository
from pathbind.types import BindingType


def _freeze(value: Any) -> Hashable:
    """Convert a parameter value into a hashable equivalent.

    Containers are tagged with their kind so that values which compare
    unequal (a list and a tuple with the same items) freeze differently.
    """
    if isinstance(value, Mapping):
        return ("dict", frozenset((k, _freeze(v)) for k, v in value.items()))
    if isinstance(value, list):
        return ("list", tuple(_freeze(v) for v in value))
    if isinstance(value, tuple):
        return ("tuple", tuple(_freeze(v) for v in value))
    if isinstance(value, (set, frozenset)):
        return ("set", frozenset(_freeze(v) for v in value))
    return value


class Binding(ABC):
    """Base class for resource bindings.

    The supplied parameters are normalized against the binding type on
    construction, so a binding always carries its effective parameters.

    Args:
        path: Resource path or selector
        binding_type: Type the path is bound to
        parameters: Raw parameter values

    Raises:
        MissingParameterError: If a required parameter is not supplied
        NoSuchParameterError: If an undeclared parameter is supplied
    """

    def __init__(
        self,
        path: str,
        binding_type: BindingType,
        parameters: Mapping[str, Any] | None = None,
    ):
        self._path = path
        self._type = binding_type
        self._parameters = binding_type.normalize(parameters)
        self._key = (
            path,
            binding_type.name,
            frozenset((name, _freeze(value)) for name, value in self._parameters.items()),
        )

    @property
    def path(self) -> str:
        return self._path

    @property
    def type(self) -> BindingType:
        return self._type

    @property
    def type_name(self) -> str:
        return self._type.name

    @property
    def parameters(self) -> Dict[str, Any]:
        """Get a copy of the effective parameters."""
        return dict(self._parameters)

    @property
    def key(self) -> tuple:
        """Identity of the binding: path, type name and frozen parameters."""
        return self._key

    def has_parameter(self, name: str) -> bool:
        return name in self._parameters

    def get_parameter(self, name: str) -> Any:
        """Get the effective value of a parameter.

        Raises:
            NoSuchParameterError: If the binding type declares no such parameter
        """
        if name not in self._parameters:
            raise NoSuchParameterError(name, self._type.name)
        return self._parameters[name]

    @abstractmethod
    def get_resources(self) -> List[Any]:
        """Get the resources bound by this binding."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Binding):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(path={self._path!r}, type={self._type.name!r}, "
            f"parameters={self._parameters!r})"
        )


class EagerBinding(Binding):
    """Binding whose resources are supplied at construction."""

    def __init__(
        self,
        path: str,
        resources: Iterable[Any],
        binding_type: BindingType,
        parameters: Mapping[str, Any] | None = None,
    ):
        super().__init__(path, binding_type, parameters)
        self._resources = list(resources)

    def get_resources(self) -> List[Any]:
        return list(self._resources)


class LazyBinding(Binding):
    """Binding that loads its resources from a repository on demand.

    The repository is queried at most once per binding. Later changes to
    the repository are not reflected in the memoized resources.

    Args:
        path: Resource path or selector
        repo: Repository to load the resources from
        binding_type: Type the path is bound to
        parameters: Raw parameter values
    """

    def __init__(
        self,
        path: str,
        repo: ResourceRepository,
        binding_type: BindingType,
        parameters: Mapping[str, Any] | None = None,
    ):
        super().__init__(path, binding_type, parameters)
        self._repo = repo
        self._resources: List[Any] | None = None
        self._load_lock = threading.Lock()

    def is_loaded(self) -> bool:
        """Check whether the resources have been loaded."""
        return self._resources is not None

    def get_resources(self) -> List[Any]:
        if self._resources is None:
            with self._load_lock:
                if self._resources is None:
                    self._resources = list(self._repo.find(self._path))
        return list(self._resources)
