"""Binder configuration.

Settings can be given as a dictionary or loaded from a YAML or JSON file.
Environment variables named ``PATHBIND_<SETTING>`` override loaded values.

Example:
    ```yaml
    # binder.yml
    name: plugins
    eager: false
    cascade_undefine: true
    ```

    ```python
    config = BinderConfig.from_file("binder.yml").with_env_overrides()
    binder = ResourceBinder(repo, config=config)
    ```
"""

import json
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml  # type: ignore[import-untyped]

from pathbind.exceptions import ConfigurationError

ENV_PREFIX = "PATHBIND_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class BinderConfig:
    """Settings for a :class:`~pathbind.binder.ResourceBinder`.

    Attributes:
        name: Binder name, used in log messages and error context
        eager: Store the resources resolved at bind time in the bindings
            instead of loading them again on first access
        cascade_undefine: Unbind all bindings of a type when it is undefined.
            When false, such bindings are left in place.
        enable_metrics: Track operation counts
    """

    name: str = "binder"
    eager: bool = False
    cascade_undefine: bool = False
    enable_metrics: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "BinderConfig":
        """Create a configuration from a dictionary.

        Raises:
            ConfigurationError: If the dictionary contains unknown keys or
                values of the wrong type
        """
        data = dict(data or {})
        allowed = [f.name for f in fields(cls)]
        unknown = sorted(set(data) - set(allowed))
        if unknown:
            raise ConfigurationError(
                f"Unknown binder configuration keys: {', '.join(unknown)}",
                context={"keys": unknown, "allowed": allowed},
            )

        values: Dict[str, Any] = {}
        for key, value in data.items():
            values[key] = _coerce(key, value, str if key == "name" else bool)
        return cls(**values)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "BinderConfig":
        """Load a configuration from a YAML or JSON file.

        Raises:
            ConfigurationError: If the file is missing, has an unsupported
                format or contains invalid settings
        """
        path = Path(path).resolve()
        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {path}",
                context={"path": str(path)},
            )

        suffix = path.suffix.lower()
        with open(path) as f:
            if suffix in [".yaml", ".yml"]:
                data = yaml.safe_load(f)
            elif suffix == ".json":
                data = json.load(f)
            else:
                raise ConfigurationError(
                    f"Unsupported file format: {suffix}",
                    context={"path": str(path)},
                )

        if data is not None and not isinstance(data, dict):
            raise ConfigurationError(
                "Binder configuration must be a mapping",
                context={"path": str(path)},
            )
        return cls.from_dict(data)

    def with_env_overrides(self, prefix: str = ENV_PREFIX) -> "BinderConfig":
        """Return a copy with values overridden from environment variables."""
        overrides: Dict[str, Any] = {}
        for f in fields(self):
            env_var = f"{prefix}{f.name.upper()}"
            if env_var in os.environ:
                raw = os.environ[env_var]
                overrides[f.name] = raw if f.name == "name" else _parse_bool(env_var, raw)
        return replace(self, **overrides) if overrides else self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _parse_bool(key: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Invalid boolean value for {key}: {value!r}",
        context={"key": key, "value": value},
    )


def _coerce(key: str, value: Any, expected: type) -> Any:
    if expected is bool and isinstance(value, str):
        return _parse_bool(key, value)
    if not isinstance(value, expected):
        raise ConfigurationError(
            f"Invalid value for '{key}': expected {expected.__name__}, "
            f"got {type(value).__name__}",
            context={"key": key, "value": value},
        )
    return value
