"""Read-only view of a binder.

Consumers that only look up resources should depend on
:class:`ResourceDiscovery` rather than on the binder itself.

Example:
    ```python
    def load_translations(discovery: ResourceDiscovery) -> list:
        return discovery.find("translations")
    ```
"""

from typing import Any, List, Protocol, runtime_checkable

from pathbind.binding import Binding
from pathbind.types import BindingType


@runtime_checkable
class ResourceDiscovery(Protocol):
    """Protocol for looking up resources by binding type."""

    def find(self, type_name: str) -> List[Any]:
        """Find the resources bound to a type."""
        ...

    def get_bindings(
        self, path: str | None = None, type_name: str | None = None
    ) -> List[Binding]:
        ...

    def is_defined(self, type_name: str) -> bool:
        ...

    def get_defined_type(self, type_name: str) -> BindingType:
        ...

    def get_defined_types(self) -> List[BindingType]:
        ...
