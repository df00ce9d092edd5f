"""Configuration for the chunked segment storage engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from segstore._validation import read_size
from segstore.errors import ConfigurationError
from segstore.properties import ConfigBuilder, Property, TypedProperties

COMPONENT_CODE = "storage"

MIN_SIZE_LIMIT_FOR_CONCAT = Property.named("concat.size.min", 0)
MAX_SIZE_LIMIT_FOR_CONCAT = Property.named("concat.size.max", 1 << 62)
APPENDS_ENABLED = Property.named("appends.enable", True)
INLINE_DEFRAG_ENABLED = Property.named("inline.defrag.enable", True)
READ_INDEX_BLOCK_SIZE = Property.named("readindex.block.size", 1024 * 1024)
GARBAGE_COLLECTION_DELAY = Property.named("garbage.collection.delay.seconds", 60)
GARBAGE_COLLECTION_MAX_CONCURRENCY = Property.named("garbage.collection.concurrency.max", 10)


@dataclass(frozen=True)
class ChunkedSegmentStorageConfig:
    """Tuning for the chunked layout: concat size bounds, appends, and GC."""

    min_size_limit_for_concat: int = MIN_SIZE_LIMIT_FOR_CONCAT.default
    max_size_limit_for_concat: int = MAX_SIZE_LIMIT_FOR_CONCAT.default
    appends_enabled: bool = APPENDS_ENABLED.default
    inline_defrag_enabled: bool = INLINE_DEFRAG_ENABLED.default
    read_index_block_size: int = READ_INDEX_BLOCK_SIZE.default
    garbage_collection_delay_seconds: int = GARBAGE_COLLECTION_DELAY.default
    garbage_collection_max_concurrency: int = GARBAGE_COLLECTION_MAX_CONCURRENCY.default

    @staticmethod
    def builder() -> ConfigBuilder[ChunkedSegmentStorageConfig]:
        return ConfigBuilder(COMPONENT_CODE, ChunkedSegmentStorageConfig.from_properties)

    @classmethod
    def from_properties(cls, properties: TypedProperties) -> ChunkedSegmentStorageConfig:
        min_concat = read_size(properties, MIN_SIZE_LIMIT_FOR_CONCAT)
        max_concat = read_size(properties, MAX_SIZE_LIMIT_FOR_CONCAT)
        if min_concat > max_concat:
            raise ConfigurationError(
                properties.key_of(MIN_SIZE_LIMIT_FOR_CONCAT),
                f"must not exceed {properties.key_of(MAX_SIZE_LIMIT_FOR_CONCAT)} ({max_concat})",
            )
        return cls(
            min_size_limit_for_concat=min_concat,
            max_size_limit_for_concat=max_concat,
            appends_enabled=properties.get_boolean(APPENDS_ENABLED),
            inline_defrag_enabled=properties.get_boolean(INLINE_DEFRAG_ENABLED),
            read_index_block_size=read_size(properties, READ_INDEX_BLOCK_SIZE),
            garbage_collection_delay_seconds=read_size(properties, GARBAGE_COLLECTION_DELAY),
            garbage_collection_max_concurrency=read_size(
                properties, GARBAGE_COLLECTION_MAX_CONCURRENCY
            ),
        )

    def describe(self) -> dict[str, Any]:
        return {
            "min_size_limit_for_concat": self.min_size_limit_for_concat,
            "max_size_limit_for_concat": self.max_size_limit_for_concat,
            "appends_enabled": self.appends_enabled,
            "inline_defrag_enabled": self.inline_defrag_enabled,
            "read_index_block_size": self.read_index_block_size,
            "garbage_collection_delay_seconds": self.garbage_collection_delay_seconds,
            "garbage_collection_max_concurrency": self.garbage_collection_max_concurrency,
        }
