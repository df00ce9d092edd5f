"""Shared test fixtures for segstore tests."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from segstore.config import ConfigSetup

PRIMARY_URI = "https://ecs1.example.com:9021/?identity=user1&secretKey=secret1&namespace=ns1"
ALT_URI = "http://ecs2.example.com,ecs3.example.com:9020/?identity=user2&secretKey=secret2"


@pytest.fixture
def extendeds3_props() -> dict[str, object]:
    """A valid direct-mode EXTENDEDS3 property bag."""
    return {
        "extendeds3.connect.config.uri": PRIMARY_URI,
        "extendeds3.bucket": "segments",
        "extendeds3.prefix": "pravega",
    }


@pytest.fixture
def replicated_props() -> dict[str, object]:
    """A valid replication-mode EXTENDEDS3 property bag."""
    return {
        "extendeds3.replication.enabled": "true",
        "extendeds3.connect.config.uri": PRIMARY_URI,
        "extendeds3.bucket": "b1",
        "extendeds3.alt.connect.config.uri": ALT_URI,
        "extendeds3.alt.bucket": "b2",
        "extendeds3.prefix": "tier2/",
        "extendeds3.concat.smallObject.threshold.size": "2048",
    }


@pytest.fixture
def s3_props() -> dict[str, object]:
    return {
        "s3.connect.config.uri": "https://s3.us-east-2.amazonaws.com/?region=us-east-2",
        "s3.connect.config.access.key": "AKIAEXAMPLE",
        "s3.connect.config.secret.key": "s3secret",
        "s3.bucket": "s3-segments",
    }


@pytest.fixture
def azure_props() -> dict[str, object]:
    return {
        "azure.connection.string": (
            "DefaultEndpointsProtocol=https;AccountName=acct;AccountKey=a2V5;"
            "EndpointSuffix=core.windows.net"
        ),
        "azure.container": "segments",
    }


@pytest.fixture
def executor():
    pool = ThreadPoolExecutor(max_workers=1)
    yield pool
    pool.shutdown(wait=False)


@pytest.fixture
def config_setup(extendeds3_props, s3_props, azure_props) -> ConfigSetup:
    """A setup carrying valid properties for every backend."""
    return ConfigSetup({**extendeds3_props, **s3_props, **azure_props})
