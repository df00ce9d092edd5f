"""Tests for backend client construction. Building a client sends no requests."""

from __future__ import annotations

import pytest

from segstore.config import ConfigSetup
from segstore.extendeds3 import ExtendedS3StorageConfig
from segstore.factory import (
    AzureStorageFactoryCreator,
    ExtendedS3StorageFactoryCreator,
    S3StorageFactoryCreator,
    StorageFactoryInfo,
    StorageLayoutType,
)
from segstore.s3 import S3StorageConfig


@pytest.fixture(autouse=True)
def aws_env(monkeypatch, tmp_path):
    """Keep the local AWS profile and endpoint overrides out of client construction."""
    for name in ("AWS_ENDPOINT_URL", "AWS_ENDPOINT_URL_S3", "AWS_PROFILE", "AWS_REGION"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "credentials"))
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


def test_extendeds3_client_targets_config_uri_endpoint(extendeds3_props) -> None:
    config = ConfigSetup(extendeds3_props).get_config(ExtendedS3StorageConfig.builder)
    client = config.create_client()
    assert client.meta.endpoint_url == "https://ecs1.example.com:9021"
    assert client.meta.config.s3["addressing_style"] == "path"
    assert client.meta.config.signature_version == "s3v4"


def test_vhost_and_v2_signer_flags_reach_the_client(extendeds3_props) -> None:
    extendeds3_props["extendeds3.connect.config.uri"] = (
        "http://ecs.example.com:9020/?identity=u&secretKey=k&useVHost=true&useV2Signer=true"
    )
    config = ConfigSetup(extendeds3_props).get_config(ExtendedS3StorageConfig.builder)
    client = config.create_client()
    assert client.meta.endpoint_url == "http://ecs.example.com:9020"
    assert client.meta.config.s3["addressing_style"] == "virtual"
    assert client.meta.config.signature_version == "s3"


def test_replicated_factory_builds_one_client_per_replica(replicated_props, executor) -> None:
    factory = ExtendedS3StorageFactoryCreator().create_factory(
        StorageFactoryInfo("EXTENDEDS3", StorageLayoutType.CHUNKED_STORAGE),
        ConfigSetup(replicated_props),
        executor,
    )
    primary, alternate = factory.create_clients()
    assert primary.meta.endpoint_url == "https://ecs1.example.com:9021"
    assert alternate.meta.endpoint_url == "http://ecs2.example.com:9020"


def test_s3_client_uses_config_uri_endpoint(config_setup, executor) -> None:
    factory = S3StorageFactoryCreator().create_factory(
        StorageFactoryInfo("S3", StorageLayoutType.ROLLING_STORAGE), config_setup, executor
    )
    (client,) = factory.create_clients()
    assert client.meta.endpoint_url == "https://s3.us-east-2.amazonaws.com"
    assert client.meta.region_name == "us-east-2"


def test_s3_without_uri_falls_back_to_default_endpoint(s3_props) -> None:
    del s3_props["s3.connect.config.uri"]
    config = ConfigSetup(s3_props).get_config(S3StorageConfig.builder)
    client = config.create_client()
    assert client.meta.endpoint_url.startswith("https://")
    assert client.meta.endpoint_url.endswith("amazonaws.com")
    assert client.meta.region_name == "us-east-1"


def test_azure_factory_builds_container_client(config_setup, executor) -> None:
    pytest.importorskip("azure.storage.blob")
    factory = AzureStorageFactoryCreator().create_factory(
        StorageFactoryInfo("AZURE", StorageLayoutType.ROLLING_STORAGE), config_setup, executor
    )
    (client,) = factory.create_clients()
    assert client.container_name == "segments"
    assert client.account_name == "acct"
    assert client.url.startswith("https://acct.blob.core.windows.net/segments")
