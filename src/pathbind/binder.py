"""Registry binding resource paths to binding types.

The :class:`ResourceBinder` owns the defined binding types and the active
bindings. Bindings are indexed by their literal path string and by type
name, so lookups never evaluate selectors: a binding made for ``/file*`` is
only found (and removed) under ``/file*``, even though the selector matches
``/file1`` in the repository.

Example:
    ```python
    from pathbind import BindingParameter, BindingType, ResourceBinder
    from pathbind.repository import FileResource, InMemoryResourceRepository

    repo = InMemoryResourceRepository()
    repo.add("/app/messages.en.yml", FileResource())

    binder = ResourceBinder(repo)
    binder.define(BindingType("translations", [
        BindingParameter("domain", default="messages"),
    ]))
    binder.bind("/app/messages.*.yml", "translations")

    binder.find("translations")
    # [FileResource(path='/app/messages.en.yml', body=None)]
    ```

All public methods are serialized with a re-entrant lock, and read
operations return copies of the internal state.
"""

import logging
import threading
from typing import Any, Dict, List, Mapping, Union

from pathbind.binding import Binding, EagerBinding, LazyBinding
from pathbind.config import BinderConfig
from pathbind.exceptions import BindingError, InvalidArgumentError, NoSuchTypeError
from pathbind.repository import ResourceRepository
from pathbind.types import BindingType

logger = logging.getLogger(__name__)

TypeOrName = Union[str, BindingType]

_METRIC_NAMES = ("defined", "undefined", "bound", "duplicates", "unbound")


class ResourceBinder:
    """Binds resource paths to binding types and looks them up by type.

    Args:
        repo: Repository used to resolve paths and selectors
        config: Binder settings; defaults are used when omitted
    """

    def __init__(self, repo: ResourceRepository, config: BinderConfig | None = None):
        self._repo = repo
        self._config = config or BinderConfig()
        self._types: Dict[str, BindingType] = {}
        # Dicts keyed by binding identity keep insertion order and act as sets.
        self._bindings: Dict[tuple, Binding] = {}
        self._by_path: Dict[str, Dict[tuple, Binding]] = {}
        self._by_type: Dict[str, Dict[tuple, Binding]] = {}
        self._lock = threading.RLock()
        self._metrics: Dict[str, int] | None = (
            dict.fromkeys(_METRIC_NAMES, 0) if self._config.enable_metrics else None
        )

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def config(self) -> BinderConfig:
        return self._config

    @property
    def repository(self) -> ResourceRepository:
        return self._repo

    # Type management

    def define(self, type_or_name: TypeOrName) -> BindingType:
        """Define a binding type.

        A bare name defines a type without parameters. Defining a type with
        the name of an existing type replaces it.

        Args:
            type_or_name: Type name or binding type

        Returns:
            The defined type

        Raises:
            InvalidArgumentError: If the argument is neither a string nor a
                BindingType
        """
        binding_type = self._to_type(type_or_name)

        with self._lock:
            replaced = binding_type.name in self._types
            self._types[binding_type.name] = binding_type
            self._count("defined")

        logger.debug(
            "%s type '%s' in %s",
            "Redefined" if replaced else "Defined",
            binding_type.name,
            self.name,
        )
        return binding_type

    def undefine(self, type_or_name: TypeOrName) -> None:
        """Remove a binding type.

        Unknown types are ignored. Bindings of the type are kept unless the
        binder is configured with ``cascade_undefine``.

        Raises:
            InvalidArgumentError: If the argument is neither a string nor a
                BindingType
        """
        if isinstance(type_or_name, BindingType):
            type_name = type_or_name.name
        elif isinstance(type_or_name, str):
            type_name = type_or_name
        else:
            raise InvalidArgumentError(type_or_name)

        with self._lock:
            if type_name not in self._types:
                return

            del self._types[type_name]
            self._count("undefined")
            logger.debug("Undefined type '%s' in %s", type_name, self.name)

            remaining = self._by_type.get(type_name)
            if not remaining:
                return

            if self._config.cascade_undefine:
                for binding in list(remaining.values()):
                    self._remove(binding)
                logger.debug(
                    "Removed bindings of undefined type '%s' in %s", type_name, self.name
                )
            else:
                logger.warning(
                    "Type '%s' was undefined while %d binding(s) still reference it",
                    type_name,
                    len(remaining),
                )

    def is_defined(self, type_name: str) -> bool:
        with self._lock:
            return type_name in self._types

    def get_defined_type(self, type_name: str) -> BindingType:
        """Get a defined type by name.

        Raises:
            NoSuchTypeError: If the type is not defined
        """
        with self._lock:
            if type_name not in self._types:
                raise NoSuchTypeError(type_name, self._types)
            return self._types[type_name]

    def get_defined_types(self) -> List[BindingType]:
        with self._lock:
            return list(self._types.values())

    # Binding lifecycle

    def bind(
        self,
        path: str,
        type_name: str,
        parameters: Mapping[str, Any] | None = None,
    ) -> Binding:
        """Bind a path or selector to a defined type.

        Binding the same path to the same type with parameters that
        normalize to the same values again has no effect.

        Args:
            path: Resource path or selector
            type_name: Name of a defined type
            parameters: Parameter values for the binding

        Returns:
            The stored binding (the existing one for a duplicate)

        Raises:
            NoSuchTypeError: If the type is not defined
            MissingParameterError: If a required parameter is missing
            NoSuchParameterError: If an undeclared parameter is given
            BindingError: If the path matches no resources
        """
        with self._lock:
            if type_name not in self._types:
                raise NoSuchTypeError(type_name, self._types)

            binding_type = self._types[type_name]
            effective = binding_type.normalize(parameters)

            resources = list(self._repo.find(path))
            if not resources:
                raise BindingError(path, type_name)

            binding: Binding
            if self._config.eager:
                binding = EagerBinding(path, resources, binding_type, effective)
            else:
                binding = LazyBinding(path, self._repo, binding_type, effective)

            existing = self._bindings.get(binding.key)
            if existing is not None:
                self._count("duplicates")
                logger.debug("Ignoring duplicate binding of %s to '%s'", path, type_name)
                return existing

            self._bindings[binding.key] = binding
            self._by_path.setdefault(path, {})[binding.key] = binding
            self._by_type.setdefault(type_name, {})[binding.key] = binding
            self._count("bound")

        logger.debug("Bound %s to '%s' in %s", path, type_name, self.name)
        return binding

    def unbind(self, path: str, type_name: str | None = None) -> int:
        """Remove the bindings stored under a path.

        The path is compared literally: unbinding ``/file1`` does not
        remove a binding made for the selector ``/file*``. Unknown paths
        and types are ignored.

        Args:
            path: Path or selector the bindings were made for
            type_name: Only remove bindings of this type

        Returns:
            Number of removed bindings
        """
        with self._lock:
            bucket = self._by_path.get(path)
            if not bucket:
                return 0

            removed = [
                binding
                for binding in bucket.values()
                if type_name is None or binding.type_name == type_name
            ]
            for binding in removed:
                self._remove(binding)

        if removed:
            logger.debug(
                "Unbound %d binding(s) of %s%s in %s",
                len(removed),
                path,
                f" from '{type_name}'" if type_name else "",
                self.name,
            )
        return len(removed)

    def clear(self) -> int:
        """Remove all bindings. Defined types are kept.

        Returns:
            Number of removed bindings
        """
        with self._lock:
            removed = len(self._bindings)
            self._bindings.clear()
            self._by_path.clear()
            self._by_type.clear()
            if self._metrics is not None:
                self._metrics["unbound"] += removed

        if removed:
            logger.debug("Cleared %d binding(s) in %s", removed, self.name)
        return removed

    # Lookup

    def find(self, type_name: str) -> List[Any]:
        """Find the resources bound to a type.

        Returns:
            Resources of all bindings of the type in binding order. A
            resource matched by several bindings appears once per binding.
            Empty if the type has no bindings or is not defined.
        """
        with self._lock:
            bindings = list(self._by_type.get(type_name, {}).values())

        resources: List[Any] = []
        for binding in bindings:
            resources.extend(binding.get_resources())
        return resources

    def get_bindings(
        self, path: str | None = None, type_name: str | None = None
    ) -> List[Binding]:
        """Get bindings, optionally filtered by literal path and type name."""
        with self._lock:
            if path is None:
                bindings = list(self._bindings.values())
            else:
                bindings = list(self._by_path.get(path, {}).values())

        if type_name is not None:
            bindings = [b for b in bindings if b.type_name == type_name]
        return bindings

    def get_metrics(self) -> Dict[str, int]:
        """Get operation counts; empty unless metrics are enabled."""
        with self._lock:
            return dict(self._metrics) if self._metrics is not None else {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._bindings)

    def __contains__(self, binding: object) -> bool:
        if not isinstance(binding, Binding):
            return False
        with self._lock:
            return binding.key in self._bindings

    def __repr__(self) -> str:
        return (
            f"ResourceBinder(name={self.name!r}, types={len(self._types)}, "
            f"bindings={len(self._bindings)})"
        )

    # Internals

    def _to_type(self, type_or_name: Any) -> BindingType:
        if isinstance(type_or_name, BindingType):
            return type_or_name
        if isinstance(type_or_name, str):
            return BindingType(type_or_name)
        raise InvalidArgumentError(type_or_name)

    def _remove(self, binding: Binding) -> None:
        """Remove a binding from the master set and both indexes."""
        key = binding.key
        self._bindings.pop(key, None)

        for index, bucket_key in ((self._by_path, binding.path), (self._by_type, binding.type_name)):
            bucket = index.get(bucket_key)
            if bucket is None:
                continue
            bucket.pop(key, None)
            if not bucket:
                del index[bucket_key]

        self._count("unbound")

    def _count(self, metric: str) -> None:
        if self._metrics is not None:
            self._metrics[metric] += 1
