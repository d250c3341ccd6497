"""Exception hierarchy for the pathbind package.

Every error raised by the binder derives from :class:`PathbindError`, which
carries an optional context dictionary with structured information about the
failure (type names, paths, parameter names).

The hierarchy has two levels:
- Category bases (``ValidationError``, ``NotFoundError``, ``OperationError``,
  ``ConfigurationError``) for broad handling
- Specific errors raised by binder operations

Example:
    ```python
    from pathbind.exceptions import PathbindError, NoSuchTypeError

    try:
        binder.bind("/app/config.yml", "config")
    except NoSuchTypeError as e:
        logger.error("Undefined type: %s", e.context["type"])
    except PathbindError as e:
        logger.error("Binding failed: %s (%s)", e, e.context)
    ```
"""

from typing import Any, Dict, Iterable


class PathbindError(Exception):
    """Base exception for all pathbind errors.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context
        details: Alternative to context (takes precedence if both are given)
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class ValidationError(PathbindError):
    """Raised when input data fails validation."""

    pass


class NotFoundError(PathbindError):
    """Raised when a requested item is not found."""

    pass


class OperationError(PathbindError):
    """Raised when an operation cannot be completed."""

    pass


class ConfigurationError(PathbindError):
    """Raised when binder configuration is invalid or missing.

    Example:
        ```python
        raise ConfigurationError(
            "Unknown configuration keys",
            context={"keys": ["eagre"], "allowed": ["name", "eager"]}
        )
        ```
    """

    pass


class InvalidArgumentError(ValidationError, TypeError):
    """Raised when an argument has an unsupported type.

    ``define`` and ``undefine`` accept either a type name or a
    :class:`~pathbind.types.BindingType`; anything else raises this error.
    """

    def __init__(self, value: Any, expected: str = "a type name or BindingType"):
        type_name = type(value).__name__
        super().__init__(
            f"Expected {expected}, got {type_name}",
            context={"argument_type": type_name},
        )


class InvalidParameterError(ValidationError):
    """Raised when a binding parameter or type is declared incorrectly.

    Example:
        ```python
        # A required parameter cannot carry a default
        BindingParameter("encoding", required=True, default="utf-8")
        ```
    """

    pass


class MissingParameterError(ValidationError):
    """Raised when a required parameter is not supplied."""

    def __init__(self, parameter: str, type_name: str | None = None):
        message = f"Missing required parameter '{parameter}'"
        if type_name is not None:
            message += f" of type '{type_name}'"
        super().__init__(message, context={"parameter": parameter, "type": type_name})
        self.parameter = parameter


class NoSuchParameterError(NotFoundError):
    """Raised when a parameter is not declared on a binding type."""

    def __init__(self, parameter: str, type_name: str | None = None):
        message = f"No such parameter '{parameter}'"
        if type_name is not None:
            message += f" on type '{type_name}'"
        super().__init__(message, context={"parameter": parameter, "type": type_name})
        self.parameter = parameter


class NoSuchTypeError(NotFoundError):
    """Raised when a binding type has not been defined."""

    def __init__(self, type_name: str, defined_types: Iterable[str] = ()):
        super().__init__(
            f"The binding type '{type_name}' has not been defined",
            context={"type": type_name, "defined_types": list(defined_types)},
        )
        self.type_name = type_name


class BindingError(OperationError):
    """Raised when a path cannot be bound.

    The most common cause is a path or selector that matches no resources
    in the repository at bind time.
    """

    def __init__(self, path: str, type_name: str | None = None, reason: str | None = None):
        message = f"Cannot bind '{path}'"
        if type_name is not None:
            message += f" to type '{type_name}'"
        message += f": {reason or 'no matching resources found'}"
        super().__init__(message, context={"path": path, "type": type_name})
        self.path = path


__all__ = [
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
