"""Binding types and their parameter declarations.

A :class:`BindingType` is a named schema: it declares which parameters a
binding of that type must or may carry. At bind time the raw parameters
supplied by the caller are normalized against the type, producing the
*effective* parameters (supplied values merged with declared defaults).

Example:
    ```python
    from pathbind.types import BindingParameter, BindingType

    translations = BindingType("translations", [
        BindingParameter("locale", required=True),
        BindingParameter("domain", default="messages"),
    ])

    translations.normalize({"locale": "en"})
    # {'locale': 'en', 'domain': 'messages'}
    ```
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping

from pathbind.exceptions import (
    InvalidParameterError,
    MissingParameterError,
    NoSuchParameterError,
)


@dataclass(frozen=True)
class BindingParameter:
    """A parameter declared by a binding type.

    Attributes:
        name: Parameter name, unique within its type
        required: Whether bindings must supply a value
        default: Value used when an optional parameter is omitted
    """

    name: str
    required: bool = False
    default: Any = field(default=None, hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidParameterError(
                "Parameter names must be non-empty strings",
                context={"name": self.name},
            )
        if self.required and self.default is not None:
            raise InvalidParameterError(
                f"Required parameter '{self.name}' must not have a default value",
                context={"parameter": self.name, "default": self.default},
            )

    def is_required(self) -> bool:
        return self.required

    def is_optional(self) -> bool:
        return not self.required

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name, "required": self.required}
        if self.default is not None:
            data["default"] = self.default
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BindingParameter":
        if "name" not in data:
            raise InvalidParameterError("Parameter definition requires a 'name'", context=dict(data))
        required = data.get("required", False)
        if not isinstance(required, bool):
            raise InvalidParameterError(
                f"The 'required' flag of parameter '{data['name']}' must be a boolean, "
                f"got {type(required).__name__}",
                context={"parameter": data["name"], "required": required},
            )
        return cls(
            name=data["name"],
            required=required,
            default=data.get("default"),
        )


class BindingType:
    """A named set of binding parameters.

    Binding types are immutable once constructed. Parameter names must be
    unique; the declaration order is preserved and used to order the
    normalized parameter maps.

    Args:
        name: Unique type name
        parameters: Parameters declared by the type

    Raises:
        InvalidParameterError: If the name is empty or two parameters share
            a name
    """

    def __init__(self, name: str, parameters: Iterable[BindingParameter] = ()):
        if not isinstance(name, str) or not name:
            raise InvalidParameterError(
                "Binding type names must be non-empty strings",
                context={"name": name},
            )

        params: Dict[str, BindingParameter] = {}
        for parameter in parameters:
            if not isinstance(parameter, BindingParameter):
                raise InvalidParameterError(
                    f"Parameters of type '{name}' must be BindingParameter instances, "
                    f"got {type(parameter).__name__}",
                    context={"type": name},
                )
            if parameter.name in params:
                raise InvalidParameterError(
                    f"Duplicate parameter '{parameter.name}' on type '{name}'",
                    context={"type": name, "parameter": parameter.name},
                )
            params[parameter.name] = parameter

        self._name = name
        self._parameters = params

    @property
    def name(self) -> str:
        """Get the type name."""
        return self._name

    @property
    def parameters(self) -> tuple[BindingParameter, ...]:
        """Get the declared parameters in declaration order."""
        return tuple(self._parameters.values())

    @property
    def parameter_names(self) -> List[str]:
        return list(self._parameters)

    def has_parameter(self, name: str) -> bool:
        return name in self._parameters

    def get_parameter(self, name: str) -> BindingParameter:
        """Get a declared parameter by name.

        Raises:
            NoSuchParameterError: If the type declares no such parameter
        """
        if name not in self._parameters:
            raise NoSuchParameterError(name, self._name)
        return self._parameters[name]

    def get_default_values(self) -> Dict[str, Any]:
        """Get the default values of all optional parameters."""
        return {
            name: parameter.default
            for name, parameter in self._parameters.items()
            if parameter.is_optional()
        }

    def normalize(self, raw_parameters: Mapping[str, Any] | None = None) -> Dict[str, Any]:
        """Validate raw parameters and merge them with declared defaults.

        Args:
            raw_parameters: Parameter values supplied by the caller

        Returns:
            The effective parameters, one entry per declared parameter in
            declaration order

        Raises:
            MissingParameterError: If a required parameter is not supplied
            NoSuchParameterError: If an undeclared parameter is supplied
        """
        raw = dict(raw_parameters or {})

        normalized: Dict[str, Any] = {}
        for name, parameter in self._parameters.items():
            if name in raw:
                normalized[name] = raw[name]
            elif parameter.is_required():
                raise MissingParameterError(name, self._name)
            else:
                normalized[name] = parameter.default

        for key in raw:
            if key not in self._parameters:
                raise NoSuchParameterError(key, self._name)

        return normalized

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self._name,
            "parameters": [parameter.to_dict() for parameter in self._parameters.values()],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BindingType":
        if "name" not in data:
            raise InvalidParameterError("Type definition requires a 'name'", context=dict(data))
        return cls(
            data["name"],
            [BindingParameter.from_dict(item) for item in data.get("parameters", [])],
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BindingType):
            return NotImplemented
        return self._name == other._name and self._parameters == other._parameters

    def __hash__(self) -> int:
        return hash((self._name, tuple(self._parameters)))

    def __repr__(self) -> str:
        return f"BindingType({self._name!r}, parameters={self.parameter_names!r})"
