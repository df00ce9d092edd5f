"""CLI helpers that turn global options into a ConfigSetup and registry."""

from __future__ import annotations

from typing import Any, Callable

from segstore.config import ConfigSetup, load_properties, parse_overrides
from segstore.factory import StorageFactoryInfo, StorageLayoutType
from segstore.properties import ConfigBuilder
from segstore.registry import StorageFactoryRegistry


def open_setup() -> ConfigSetup:
    """Build the property bag from --properties and --set options."""
    from segstore.cli import state

    props: dict[str, Any] = {}
    if state.properties_file:
        props.update(load_properties(state.properties_file))
    props.update(parse_overrides(state.overrides))
    return ConfigSetup(props)


def open_registry() -> StorageFactoryRegistry:
    return StorageFactoryRegistry.from_entry_points()


def config_builder_for(
    registry: StorageFactoryRegistry, backend: str
) -> Callable[[], ConfigBuilder[Any]]:
    """Return the config builder of the creator serving ``backend``."""
    info = StorageFactoryInfo(backend.upper(), StorageLayoutType.ROLLING_STORAGE)
    return registry.find(info).config_builder()
