"""Configuration for the generic S3 storage backend."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import boto3

from segstore._validation import read_prefix, read_size, require, require_string
from segstore.connection import S3ClientConfig, create_s3_client, parse_s3_config_uri
from segstore.errors import ConfigurationError
from segstore.properties import ConfigBuilder, Property, TypedProperties

COMPONENT_CODE = "s3"

OVERRIDE_CONFIGURI = Property.named("connect.config.uri.override", False)
CONFIGURI = Property.named("connect.config.uri", "", "configUri")
ACCESS_KEY = Property.named("connect.config.access.key", "")
SECRET_KEY = Property.named("connect.config.secret.key", "")
BUCKET = Property.named("bucket", "")
PREFIX = Property.named("prefix", "/")
USENONEMATCH = Property.named("noneMatch.enable", False, "useNoneMatch")
SMALL_OBJECT_THRESHOLD = Property.named(
    "concat.smallObject.threshold.size", 5 * 1024 * 1024, "smallObjectSizeLimitForConcat"
)


@dataclass(frozen=True)
class S3StorageConfig:
    """Generic S3 configuration.

    ``connection`` is ``None`` when no config URI is given, meaning the
    provider's default endpoint and region resolution apply.
    """

    connection: S3ClientConfig | None
    access_key: str
    secret_key: str = field(repr=False)
    bucket: str
    prefix: str
    use_none_match: bool = False
    should_override_uri: bool = False
    small_object_size_limit_for_concat: int = SMALL_OBJECT_THRESHOLD.default

    @staticmethod
    def builder() -> ConfigBuilder[S3StorageConfig]:
        return ConfigBuilder(COMPONENT_CODE, S3StorageConfig.from_properties)

    @classmethod
    def from_properties(cls, properties: TypedProperties) -> S3StorageConfig:
        should_override_uri = properties.get_boolean(OVERRIDE_CONFIGURI)
        config_uri = properties.get_string(CONFIGURI)
        connection: S3ClientConfig | None = None
        if config_uri.strip():
            connection = require(
                parse_s3_config_uri(config_uri),
                properties.key_of(CONFIGURI),
                "is not a valid config URI",
            )

        access_key, secret_key = _resolve_credentials(
            properties, connection, should_override_uri
        )
        if connection is not None:
            connection = connection.with_credentials(access_key, secret_key)

        bucket = require_string(properties, BUCKET)
        return cls(
            connection=connection,
            access_key=access_key,
            secret_key=secret_key,
            bucket=bucket,
            prefix=read_prefix(properties, PREFIX),
            use_none_match=properties.get_boolean(USENONEMATCH),
            should_override_uri=should_override_uri,
            small_object_size_limit_for_concat=read_size(properties, SMALL_OBJECT_THRESHOLD),
        )

    def client_kwargs(self) -> dict[str, Any]:
        if self.connection is not None:
            return self.connection.client_kwargs()
        return {
            "aws_access_key_id": self.access_key,
            "aws_secret_access_key": self.secret_key,
        }

    def create_client(self) -> Any:
        if self.connection is not None:
            return create_s3_client(self.connection)
        return boto3.client("s3", **self.client_kwargs())

    def describe(self) -> dict[str, Any]:
        return {
            "backend": "S3",
            "connection": self.connection.describe() if self.connection else None,
            "access_key": self.access_key,
            "bucket": self.bucket,
            "prefix": self.prefix,
            "use_none_match": self.use_none_match,
            "should_override_uri": self.should_override_uri,
            "small_object_size_limit_for_concat": self.small_object_size_limit_for_concat,
        }


def _resolve_credentials(
    properties: TypedProperties,
    connection: S3ClientConfig | None,
    should_override_uri: bool,
) -> tuple[str, str]:
    """Pick URI-embedded credentials unless overridden or absent."""
    if (
        connection is not None
        and connection.identity
        and connection.secret_key
        and not should_override_uri
    ):
        return connection.identity, connection.secret_key

    access_key = properties.get_string(ACCESS_KEY)
    secret_key = properties.get_string(SECRET_KEY)
    if not access_key.strip():
        raise ConfigurationError(properties.key_of(ACCESS_KEY), "is required")
    if not secret_key.strip():
        raise ConfigurationError(properties.key_of(SECRET_KEY), "is required")
    return access_key, secret_key
