"""Shared required-field checks for backend configurations."""

from __future__ import annotations

from typing import TypeVar

from segstore.errors import ConfigurationError
from segstore.properties import Property, TypedProperties

PATH_SEPARATOR = "/"

T = TypeVar("T")


def require(value: T | None, property_name: str, detail: str = "is required") -> T:
    """Return ``value`` or fail naming ``property_name``. Empty strings count as missing."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ConfigurationError(property_name, detail)
    return value


def require_string(properties: TypedProperties, prop: Property[str]) -> str:
    return require(properties.get_string(prop), properties.key_of(prop))


def read_prefix(properties: TypedProperties, prop: Property[str]) -> str:
    """Read a path prefix and make sure it ends with the path separator."""
    return normalize_prefix(properties.get_string(prop))


def normalize_prefix(prefix: str) -> str:
    return prefix if prefix.endswith(PATH_SEPARATOR) else prefix + PATH_SEPARATOR


def read_size(properties: TypedProperties, prop: Property[int]) -> int:
    value = properties.get_int(prop)
    if value < 0:
        raise ConfigurationError(properties.key_of(prop), f"must be non-negative, got {value}")
    return value
