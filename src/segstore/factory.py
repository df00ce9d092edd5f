"""Storage factory selection by backend and layout type.

A :class:`StorageFactoryCreator` serves exactly one backend. Given a
:class:`StorageFactoryInfo` it builds a chunked or rolling factory bound to the
validated backend configuration. No I/O happens here.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from concurrent.futures import Executor
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar

from segstore.azure import AzureStorageConfig
from segstore.chunked import ChunkedSegmentStorageConfig
from segstore.config import ConfigSetup
from segstore.errors import WiringError
from segstore.extendeds3 import ExtendedS3StorageConfig, ReplicatedExtendedS3StorageConfig
from segstore.handles import SegmentHandle
from segstore.properties import ConfigBuilder
from segstore.s3 import S3StorageConfig

logger = logging.getLogger(__name__)


class StorageBackend(str, Enum):
    EXTENDEDS3 = "EXTENDEDS3"
    S3 = "S3"
    AZURE = "AZURE"


class StorageLayoutType(str, Enum):
    CHUNKED_STORAGE = "CHUNKED_STORAGE"
    ROLLING_STORAGE = "ROLLING_STORAGE"

    @classmethod
    def parse(cls, value: str | StorageLayoutType) -> StorageLayoutType:
        """Accept enum members, full names, or the short forms ``chunked``/``rolling``."""
        if isinstance(value, StorageLayoutType):
            return value
        normalized = value.strip().upper()
        for member in cls:
            if normalized in (member.value, member.value.split("_")[0]):
                return member
        raise ValueError(f"Unknown storage layout type '{value}'")


@dataclass(frozen=True)
class StorageFactoryInfo:
    """Selection key for a storage factory: backend name and layout type.

    A layout given as text (``"CHUNKED_STORAGE"``, ``"rolling"``) is coerced
    to :class:`StorageLayoutType`; anything else is a :class:`WiringError`.
    """

    name: str
    storage_layout_type: StorageLayoutType

    def __post_init__(self) -> None:
        layout = self.storage_layout_type
        if not isinstance(layout, str):
            raise WiringError(f"Storage layout type must be a string, got {layout!r}")
        try:
            parsed = StorageLayoutType.parse(layout)
        except ValueError as e:
            raise WiringError(str(e)) from e
        object.__setattr__(self, "storage_layout_type", parsed)


class StorageFactory:
    """Base for factories handed to the storage engines.

    Holds the backend configuration and the executor the engines run on. For a
    replicated EXTENDEDS3 configuration, both replicas are derived at
    construction so the failover path never parses configuration.
    """

    layout_type: ClassVar[StorageLayoutType]

    def __init__(self, backend: StorageBackend, config: Any, executor: Executor) -> None:
        self.backend = backend
        self.config = config
        self.executor = executor
        if isinstance(config, ReplicatedExtendedS3StorageConfig):
            self._effective_configs: tuple[Any, ...] = config.replica_configs()
        else:
            self._effective_configs = (config,)

    @property
    def effective_configs(self) -> tuple[Any, ...]:
        """Configs clients are built from: the replica pair, or the config itself."""
        return self._effective_configs

    @property
    def replicated(self) -> bool:
        return len(self._effective_configs) > 1

    def create_clients(self) -> list[Any]:
        """Construct one backend client per effective config. No requests are sent."""
        return [c.create_client() for c in self._effective_configs]

    def read_handle(self, segment_name: str) -> SegmentHandle:
        return SegmentHandle.for_read(segment_name)

    def write_handle(self, segment_name: str) -> SegmentHandle:
        return SegmentHandle.for_write(segment_name)

    def describe(self) -> dict[str, Any]:
        return {
            "factory": type(self).__name__,
            "backend": self.backend.value,
            "layout": self.layout_type.value,
            "replicated": self.replicated,
            "config": self.config.describe(),
        }


class ChunkedStorageFactory(StorageFactory):
    """Factory for the chunked layout; also bound to the chunk engine config."""

    layout_type = StorageLayoutType.CHUNKED_STORAGE

    def __init__(
        self,
        backend: StorageBackend,
        chunked_config: ChunkedSegmentStorageConfig,
        config: Any,
        executor: Executor,
    ) -> None:
        super().__init__(backend, config, executor)
        self.chunked_config = chunked_config

    def describe(self) -> dict[str, Any]:
        data = super().describe()
        data["chunked_config"] = self.chunked_config.describe()
        return data


class RollingStorageFactory(StorageFactory):
    """Factory for the rolling layout; needs only the backend config."""

    layout_type = StorageLayoutType.ROLLING_STORAGE


class StorageFactoryCreator(ABC):
    """Builds storage factories for one backend."""

    backend: ClassVar[StorageBackend]

    @abstractmethod
    def config_builder(self) -> Callable[[], ConfigBuilder[Any]]:
        """Return the builder factory for this backend's configuration."""

    def get_storage_factories(self) -> tuple[StorageFactoryInfo, ...]:
        return (
            StorageFactoryInfo(self.backend.value, StorageLayoutType.CHUNKED_STORAGE),
            StorageFactoryInfo(self.backend.value, StorageLayoutType.ROLLING_STORAGE),
        )

    def create_factory(
        self,
        storage_factory_info: StorageFactoryInfo | None,
        setup: ConfigSetup | None,
        executor: Executor | None,
    ) -> StorageFactory:
        if storage_factory_info is None:
            raise WiringError("storage_factory_info must not be None")
        if setup is None:
            raise WiringError("setup must not be None")
        if executor is None:
            raise WiringError("executor must not be None")
        if storage_factory_info.name != self.backend.value:
            raise WiringError(
                f"{type(self).__name__} serves '{self.backend.value}', "
                f"not '{storage_factory_info.name}'"
            )

        layout = storage_factory_info.storage_layout_type
        backend_config = setup.get_config(self.config_builder())
        logger.info("Creating %s factory for backend %s", layout.value, self.backend.value)
        if layout is StorageLayoutType.CHUNKED_STORAGE:
            return ChunkedStorageFactory(
                self.backend,
                setup.get_config(ChunkedSegmentStorageConfig.builder),
                backend_config,
                executor,
            )
        if layout is StorageLayoutType.ROLLING_STORAGE:
            return RollingStorageFactory(self.backend, backend_config, executor)
        raise WiringError(f"Unsupported storage layout type {layout!r}")


class ExtendedS3StorageFactoryCreator(StorageFactoryCreator):
    backend = StorageBackend.EXTENDEDS3

    def config_builder(self) -> Callable[[], ConfigBuilder[Any]]:
        return ExtendedS3StorageConfig.builder


class S3StorageFactoryCreator(StorageFactoryCreator):
    backend = StorageBackend.S3

    def config_builder(self) -> Callable[[], ConfigBuilder[Any]]:
        return S3StorageConfig.builder


class AzureStorageFactoryCreator(StorageFactoryCreator):
    backend = StorageBackend.AZURE

    def config_builder(self) -> Callable[[], ConfigBuilder[Any]]:
        return AzureStorageConfig.builder
