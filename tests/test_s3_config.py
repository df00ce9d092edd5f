"""Tests for generic S3 configuration."""

from __future__ import annotations

import pytest

from segstore.config import ConfigSetup
from segstore.errors import ConfigurationError
from segstore.s3 import S3StorageConfig


def _build(props: dict[str, object]) -> S3StorageConfig:
    return ConfigSetup(props).get_config(S3StorageConfig.builder)


def test_explicit_credentials_when_uri_has_none(s3_props) -> None:
    config = _build(s3_props)
    assert config.access_key == "AKIAEXAMPLE"
    assert config.secret_key == "s3secret"
    assert config.bucket == "s3-segments"
    assert config.prefix == "/"
    assert config.connection is not None
    assert config.connection.region == "us-east-2"
    assert config.connection.identity == "AKIAEXAMPLE"


def test_threshold_defaults_to_five_mebibytes(s3_props) -> None:
    assert _build(s3_props).small_object_size_limit_for_concat == 5 * 1024 * 1024


def test_uri_credentials_preferred_without_override(s3_props) -> None:
    s3_props["s3.connect.config.uri"] = "http://minio:9000/?identity=uri-user&secretKey=uri-key"
    config = _build(s3_props)
    assert config.access_key == "uri-user"
    assert config.should_override_uri is False


def test_override_forces_explicit_credentials(s3_props) -> None:
    s3_props["s3.connect.config.uri"] = "http://minio:9000/?identity=uri-user&secretKey=uri-key"
    s3_props["s3.connect.config.uri.override"] = "true"
    config = _build(s3_props)
    assert config.access_key == "AKIAEXAMPLE"
    assert config.connection is not None
    assert config.connection.secret_key == "s3secret"


def test_empty_uri_uses_provider_default_endpoint(s3_props) -> None:
    del s3_props["s3.connect.config.uri"]
    config = _build(s3_props)
    assert config.connection is None
    assert config.client_kwargs() == {
        "aws_access_key_id": "AKIAEXAMPLE",
        "aws_secret_access_key": "s3secret",
    }


def test_missing_access_key_names_property(s3_props) -> None:
    del s3_props["s3.connect.config.access.key"]
    with pytest.raises(ConfigurationError) as exc:
        _build(s3_props)
    assert exc.value.property_name == "s3.connect.config.access.key"


def test_missing_secret_key_names_property(s3_props) -> None:
    s3_props["s3.connect.config.secret.key"] = ""
    with pytest.raises(ConfigurationError) as exc:
        _build(s3_props)
    assert exc.value.property_name == "s3.connect.config.secret.key"


def test_missing_bucket_names_bucket(s3_props) -> None:
    del s3_props["s3.bucket"]
    with pytest.raises(ConfigurationError) as exc:
        _build(s3_props)
    assert exc.value.property_name == "s3.bucket"


def test_invalid_uri_fails(s3_props) -> None:
    s3_props["s3.connect.config.uri"] = "s3://bucket"
    with pytest.raises(ConfigurationError) as exc:
        _build(s3_props)
    assert exc.value.property_name == "s3.connect.config.uri"


def test_describe_omits_secret(s3_props) -> None:
    data = _build(s3_props).describe()
    assert "s3secret" not in repr(data)
    assert data["backend"] == "S3"


def test_uri_with_identity_but_no_secret_uses_explicit_credentials(s3_props) -> None:
    s3_props["s3.connect.config.uri"] = "http://minio:9000/?identity=uri-user"
    config = _build(s3_props)
    assert (config.access_key, config.secret_key) == ("AKIAEXAMPLE", "s3secret")
    assert config.connection is not None
    assert config.connection.identity == "AKIAEXAMPLE"
