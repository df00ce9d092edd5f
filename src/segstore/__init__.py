"""segstore: storage-backend configuration and factory selection for a segment store."""

__version__ = "0.1.0"

from segstore.azure import AzureStorageConfig
from segstore.chunked import ChunkedSegmentStorageConfig
from segstore.config import ConfigSetup, load_properties
from segstore.errors import ConfigurationError, SegstoreError, WiringError
from segstore.extendeds3 import (
    ExtendedS3Config,
    ExtendedS3StorageConfig,
    ReplicatedExtendedS3StorageConfig,
)
from segstore.factory import (
    ChunkedStorageFactory,
    RollingStorageFactory,
    StorageBackend,
    StorageFactory,
    StorageFactoryCreator,
    StorageFactoryInfo,
    StorageLayoutType,
)
from segstore.handles import SegmentHandle
from segstore.properties import ConfigBuilder, Property, TypedProperties
from segstore.registry import StorageFactoryRegistry
from segstore.s3 import S3StorageConfig

__all__ = [
    "__version__",
    "Property",
    "TypedProperties",
    "ConfigBuilder",
    "ConfigSetup",
    "load_properties",
    "ExtendedS3Config",
    "ExtendedS3StorageConfig",
    "ReplicatedExtendedS3StorageConfig",
    "S3StorageConfig",
    "AzureStorageConfig",
    "ChunkedSegmentStorageConfig",
    "SegmentHandle",
    "StorageBackend",
    "StorageLayoutType",
    "StorageFactoryInfo",
    "StorageFactory",
    "ChunkedStorageFactory",
    "RollingStorageFactory",
    "StorageFactoryCreator",
    "StorageFactoryRegistry",
    "SegstoreError",
    "ConfigurationError",
    "WiringError",
]
