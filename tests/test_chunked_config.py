"""Tests for the chunked storage engine configuration."""

from __future__ import annotations

import pytest

from segstore.chunked import ChunkedSegmentStorageConfig
from segstore.config import ConfigSetup
from segstore.errors import ConfigurationError


def test_defaults() -> None:
    config = ConfigSetup().get_config(ChunkedSegmentStorageConfig.builder)
    assert config == ChunkedSegmentStorageConfig()
    assert config.appends_enabled is True
    assert config.read_index_block_size == 1024 * 1024


def test_values_from_properties() -> None:
    config = ConfigSetup(
        {
            "storage.concat.size.min": "100",
            "storage.concat.size.max": "1000",
            "storage.appends.enable": "false",
            "storage.garbage.collection.delay.seconds": 5,
        }
    ).get_config(ChunkedSegmentStorageConfig.builder)
    assert config.min_size_limit_for_concat == 100
    assert config.max_size_limit_for_concat == 1000
    assert config.appends_enabled is False
    assert config.garbage_collection_delay_seconds == 5


def test_min_concat_above_max_fails() -> None:
    setup = ConfigSetup({"storage.concat.size.min": "10", "storage.concat.size.max": "5"})
    with pytest.raises(ConfigurationError) as exc:
        setup.get_config(ChunkedSegmentStorageConfig.builder)
    assert exc.value.property_name == "storage.concat.size.min"
