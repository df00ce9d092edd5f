"""Typed, defaulted configuration properties scoped by component code."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Generic, Mapping, TypeVar

from segstore.errors import ConfigurationError

T = TypeVar("T")
C = TypeVar("C")

_TRUE = {"true", "yes", "1"}
_FALSE = {"false", "no", "0"}


@dataclass(frozen=True)
class Property(Generic[T]):
    """A named configuration key with a default and an optional legacy alias.

    The value type is the type of ``default``.
    """

    name: str
    default: T
    legacy_name: str | None = None

    @classmethod
    def named(cls, name: str, default: T, legacy_name: str | None = None) -> Property[T]:
        return cls(name=name, default=default, legacy_name=legacy_name)

    @property
    def value_type(self) -> type:
        return type(self.default)

    @property
    def has_legacy_name(self) -> bool:
        return self.legacy_name is not None


class TypedProperties:
    """Read-only typed view over a raw property bag for one component.

    Keys are looked up as ``<component>.<name>`` first, then
    ``<component>.<legacy_name>``. ``None`` values count as absent.
    """

    def __init__(self, properties: Mapping[str, Any], component_code: str) -> None:
        self._properties = MappingProxyType(dict(properties))
        self._component_code = component_code

    @property
    def component_code(self) -> str:
        return self._component_code

    def key_of(self, prop: Property[Any]) -> str:
        """Return the fully qualified key for a property."""
        return f"{self._component_code}.{prop.name}"

    def get(self, prop: Property[T]) -> T:
        value_type = prop.value_type
        if value_type is bool:
            return self._lookup(prop, _to_bool)  # type: ignore[return-value]
        if value_type is int:
            return self._lookup(prop, _to_int)  # type: ignore[return-value]
        if value_type is str:
            return self._lookup(prop, _to_str)  # type: ignore[return-value]
        raise TypeError(f"Unsupported property type {value_type.__name__} for '{prop.name}'")

    def get_boolean(self, prop: Property[bool]) -> bool:
        _check_type(prop, bool)
        return self._lookup(prop, _to_bool)

    def get_int(self, prop: Property[int]) -> int:
        _check_type(prop, int)
        return self._lookup(prop, _to_int)

    def get_string(self, prop: Property[str]) -> str:
        _check_type(prop, str)
        return self._lookup(prop, _to_str)

    def _lookup(self, prop: Property[Any], convert: Callable[[Any], Any]) -> Any:
        key = self.key_of(prop)
        raw = self._properties.get(key)
        if raw is None and prop.legacy_name is not None:
            key = f"{self._component_code}.{prop.legacy_name}"
            raw = self._properties.get(key)
        if raw is None:
            return prop.default
        try:
            return convert(raw)
        except ValueError as e:
            raise ConfigurationError(key, str(e)) from e


def _check_type(prop: Property[Any], expected: type) -> None:
    if prop.value_type is not expected:
        raise TypeError(
            f"Property '{prop.name}' is of type {prop.value_type.__name__}, "
            f"not {expected.__name__}"
        )


def _to_bool(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"expected a boolean, got {raw!r}")


def _to_int(raw: Any) -> int:
    # bool is an int subclass; a YAML `true` is not a size.
    if isinstance(raw, bool):
        raise ValueError(f"expected an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip(), 10)
    except ValueError:
        raise ValueError(f"expected an integer, got {raw!r}") from None


def _to_str(raw: Any) -> str:
    if isinstance(raw, bool):
        return "true" if raw else "false"
    return str(raw)


class ConfigBuilder(Generic[C]):
    """Collects raw properties for one component and builds its config object."""

    def __init__(
        self,
        component_code: str,
        constructor: Callable[[TypedProperties], C],
    ) -> None:
        self._component_code = component_code
        self._constructor = constructor
        self._properties: dict[str, Any] = {}

    @property
    def component_code(self) -> str:
        return self._component_code

    def rebase(self, properties: Mapping[str, Any]) -> ConfigBuilder[C]:
        """Use ``properties`` as the base; values set on the builder so far win."""
        merged = dict(properties)
        merged.update(self._properties)
        self._properties = merged
        return self

    def with_property(self, prop: Property[Any], value: Any) -> ConfigBuilder[C]:
        self._properties[f"{self._component_code}.{prop.name}"] = value
        return self

    def with_unsafe(self, key: str, value: Any) -> ConfigBuilder[C]:
        """Set a raw, unqualified key for this component."""
        self._properties[f"{self._component_code}.{key}"] = value
        return self

    def build(self) -> C:
        return self._constructor(TypedProperties(self._properties, self._component_code))
