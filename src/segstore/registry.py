"""Registry that routes (backend name, layout type) requests to factory creators."""

from __future__ import annotations

import logging
from concurrent.futures import Executor
from importlib.metadata import entry_points
from typing import Iterable

from segstore.config import ConfigSetup
from segstore.errors import ConfigurationError, WiringError
from segstore.factory import (
    AzureStorageFactoryCreator,
    ExtendedS3StorageFactoryCreator,
    S3StorageFactoryCreator,
    StorageFactory,
    StorageFactoryCreator,
    StorageFactoryInfo,
    StorageLayoutType,
)
from segstore.properties import Property, TypedProperties

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "segstore.storage_factories"

SERVICE_COMPONENT_CODE = "segmentstore"
STORAGE_IMPLEMENTATION = Property.named("storageImplementation", "EXTENDEDS3")
STORAGE_LAYOUT = Property.named("storageLayout", StorageLayoutType.CHUNKED_STORAGE.value)


def builtin_creators() -> list[StorageFactoryCreator]:
    return [
        ExtendedS3StorageFactoryCreator(),
        S3StorageFactoryCreator(),
        AzureStorageFactoryCreator(),
    ]


class StorageFactoryRegistry:
    """Lookup table from :class:`StorageFactoryInfo` to the creator that serves it."""

    def __init__(self, creators: Iterable[StorageFactoryCreator] = ()) -> None:
        self._creators: dict[StorageFactoryInfo, StorageFactoryCreator] = {}
        for creator in creators:
            self.register(creator)

    @classmethod
    def default(cls) -> StorageFactoryRegistry:
        return cls(builtin_creators())

    @classmethod
    def from_entry_points(cls, group: str = ENTRY_POINT_GROUP) -> StorageFactoryRegistry:
        """Built-in creators plus any creator classes published under ``group``."""
        registry = cls.default()
        for ep in entry_points(group=group):
            creator_cls = ep.load()
            creator = creator_cls()
            if any(info in registry._creators for info in creator.get_storage_factories()):
                logger.debug("Skipping entry point %s: backend already registered", ep.name)
                continue
            registry.register(creator)
            logger.info("Registered storage factory creator %s from %s", ep.name, group)
        return registry

    def register(self, creator: StorageFactoryCreator) -> None:
        for info in creator.get_storage_factories():
            if info in self._creators:
                raise WiringError(
                    f"Duplicate storage factory for {info.name}/{info.storage_layout_type.value}"
                )
            self._creators[info] = creator

    def supported(self) -> list[StorageFactoryInfo]:
        return sorted(self._creators, key=lambda i: (i.name, i.storage_layout_type.value))

    def find(self, info: StorageFactoryInfo) -> StorageFactoryCreator:
        creator = self._creators.get(info)
        if creator is None:
            raise WiringError(
                f"No storage factory registered for {info.name}/{info.storage_layout_type.value}"
            )
        return creator

    def create_factory(
        self,
        name: str,
        layout: StorageLayoutType | str,
        setup: ConfigSetup,
        executor: Executor,
    ) -> StorageFactory:
        info = StorageFactoryInfo(name.upper(), layout)
        return self.find(info).create_factory(info, setup, executor)

    def load(self, setup: ConfigSetup, executor: Executor) -> StorageFactory:
        """Create the factory named by ``segmentstore.storageImplementation``/``storageLayout``."""
        props = TypedProperties(setup.properties, SERVICE_COMPONENT_CODE)
        name = props.get_string(STORAGE_IMPLEMENTATION)
        layout_text = props.get_string(STORAGE_LAYOUT)
        try:
            layout = StorageLayoutType.parse(layout_text)
        except ValueError as e:
            raise ConfigurationError(props.key_of(STORAGE_LAYOUT), str(e)) from e
        logger.info("Loading storage implementation %s with layout %s", name, layout.value)
        return self.create_factory(name, layout, setup, executor)
