"""Configuration for the ECS-compatible S3 (EXTENDEDS3) storage backend.

A configuration is either direct (``ExtendedS3StorageConfig``), carrying a
parsed connection, credentials and bucket, or replicated
(``ReplicatedExtendedS3StorageConfig``), carrying two raw endpoints from which
a primary/alternate pair of direct configurations is derived.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from segstore._validation import read_prefix, read_size, require, require_string
from segstore.connection import S3ClientConfig, create_s3_client, parse_s3_config_uri
from segstore.properties import ConfigBuilder, Property, TypedProperties

COMPONENT_CODE = "extendeds3"

REPLICATION_ENABLED = Property.named("replication.enabled", False)
CONFIGURI = Property.named("connect.config.uri", "", "configUri")
BUCKET = Property.named("bucket", "")
ALT_CONFIGURI = Property.named("alt.connect.config.uri", "")
ALT_BUCKET = Property.named("alt.bucket", "")
PREFIX = Property.named("prefix", "/")
USENONEMATCH = Property.named("noneMatch.enable", False, "useNoneMatch")
SMALL_OBJECT_THRESHOLD = Property.named(
    "concat.smallObject.threshold.size", 1024 * 1024, "smallObjectSizeLimitForConcat"
)


def _key(prop: Property[Any]) -> str:
    return f"{COMPONENT_CODE}.{prop.name}"


@dataclass(frozen=True)
class ExtendedS3StorageConfig:
    """Direct EXTENDEDS3 configuration, ready for client construction."""

    connection: S3ClientConfig
    access_key: str
    secret_key: str = field(repr=False)
    bucket: str
    prefix: str
    use_none_match: bool = False
    # Above this size a concat source is no longer read whole and re-appended.
    small_object_size_limit_for_concat: int = SMALL_OBJECT_THRESHOLD.default

    replication_enabled = False

    @staticmethod
    def builder() -> ConfigBuilder[ExtendedS3Config]:
        return ConfigBuilder(COMPONENT_CODE, load_extendeds3_config)

    @classmethod
    def for_endpoint(
        cls,
        config_uri: str,
        bucket: str | None,
        *,
        uri_property: str,
        bucket_property: str,
        prefix: str,
        use_none_match: bool,
        small_object_size_limit_for_concat: int,
    ) -> ExtendedS3StorageConfig:
        """Parse ``config_uri`` and bind it to ``bucket``; fail naming the bad property."""
        connection = require(
            parse_s3_config_uri(config_uri), uri_property, "is not a valid config URI"
        )
        return cls(
            connection=connection,
            access_key=require(connection.identity, uri_property, "has no identity"),
            secret_key=require(connection.secret_key, uri_property, "has no secretKey"),
            bucket=require(bucket, bucket_property),
            prefix=prefix,
            use_none_match=use_none_match,
            small_object_size_limit_for_concat=small_object_size_limit_for_concat,
        )

    def create_client(self) -> Any:
        return create_s3_client(self.connection)

    def describe(self) -> dict[str, Any]:
        return {
            "backend": "EXTENDEDS3",
            "replication_enabled": False,
            "connection": self.connection.describe(),
            "access_key": self.access_key,
            "bucket": self.bucket,
            "prefix": self.prefix,
            "use_none_match": self.use_none_match,
            "small_object_size_limit_for_concat": self.small_object_size_limit_for_concat,
        }


@dataclass(frozen=True)
class ReplicatedExtendedS3StorageConfig:
    """EXTENDEDS3 configuration in replication mode.

    Holds no credentials of its own; use :meth:`replica_configs` to obtain the
    primary and alternate direct configurations.
    """

    config_uri: str = field(repr=False)
    bucket: str
    alt_config_uri: str = field(repr=False)
    alt_bucket: str
    prefix: str
    use_none_match: bool = False
    small_object_size_limit_for_concat: int = SMALL_OBJECT_THRESHOLD.default

    replication_enabled = True

    def replica_configs(self) -> tuple[ExtendedS3StorageConfig, ExtendedS3StorageConfig]:
        """Derive fresh (primary, alternate) configurations.

        Both are derived on every call; a failure in either aborts the call.
        """
        primary = ExtendedS3StorageConfig.for_endpoint(
            self.config_uri,
            self.bucket,
            uri_property=_key(CONFIGURI),
            bucket_property=_key(BUCKET),
            prefix=self.prefix,
            use_none_match=self.use_none_match,
            small_object_size_limit_for_concat=self.small_object_size_limit_for_concat,
        )
        alternate = ExtendedS3StorageConfig.for_endpoint(
            self.alt_config_uri,
            self.alt_bucket,
            uri_property=_key(ALT_CONFIGURI),
            bucket_property=_key(ALT_BUCKET),
            prefix=self.prefix,
            use_none_match=self.use_none_match,
            small_object_size_limit_for_concat=self.small_object_size_limit_for_concat,
        )
        return primary, alternate

    def describe(self) -> dict[str, Any]:
        return {
            "backend": "EXTENDEDS3",
            "replication_enabled": True,
            "bucket": self.bucket or None,
            "alt_bucket": self.alt_bucket or None,
            "prefix": self.prefix,
            "use_none_match": self.use_none_match,
            "small_object_size_limit_for_concat": self.small_object_size_limit_for_concat,
        }


ExtendedS3Config = Union[ExtendedS3StorageConfig, ReplicatedExtendedS3StorageConfig]


def load_extendeds3_config(properties: TypedProperties) -> ExtendedS3Config:
    """Build an EXTENDEDS3 configuration from component-scoped properties."""
    if properties.get_boolean(REPLICATION_ENABLED):
        # Credentials and buckets are resolved per replica.
        return ReplicatedExtendedS3StorageConfig(
            config_uri=properties.get_string(CONFIGURI),
            bucket=properties.get_string(BUCKET),
            alt_config_uri=properties.get_string(ALT_CONFIGURI),
            alt_bucket=properties.get_string(ALT_BUCKET),
            prefix=read_prefix(properties, PREFIX),
            use_none_match=properties.get_boolean(USENONEMATCH),
            small_object_size_limit_for_concat=read_size(properties, SMALL_OBJECT_THRESHOLD),
        )

    uri_key = properties.key_of(CONFIGURI)
    connection = require(
        parse_s3_config_uri(properties.get_string(CONFIGURI)),
        uri_key,
        "is not a valid config URI",
    )
    access_key = require(connection.identity, uri_key, "has no identity")
    secret_key = require(connection.secret_key, uri_key, "has no secretKey")
    bucket = require_string(properties, BUCKET)
    return ExtendedS3StorageConfig(
        connection=connection,
        access_key=access_key,
        secret_key=secret_key,
        bucket=bucket,
        prefix=read_prefix(properties, PREFIX),
        use_none_match=properties.get_boolean(USENONEMATCH),
        small_object_size_limit_for_concat=read_size(properties, SMALL_OBJECT_THRESHOLD),
    )
