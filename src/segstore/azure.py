"""Configuration for the Azure Blob storage backend."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from segstore._validation import read_prefix, require, require_string
from segstore.connection import (
    AzureConnection,
    create_container_client,
    parse_azure_connection_string,
)
from segstore.errors import ConfigurationError
from segstore.properties import ConfigBuilder, Property, TypedProperties

COMPONENT_CODE = "azure"

CONNECTION_STRING = Property.named("connection.string", "", "connect.config.uri")
CONTAINER = Property.named("container", "")
PREFIX = Property.named("prefix", "/")
CREATE_CONTAINER = Property.named("container.create", False)


@dataclass(frozen=True)
class AzureStorageConfig:
    """Azure Blob configuration. Segments are stored as append blobs in ``container``.

    The connection string is optional: a config holding only the container is
    valid when the caller supplies its own container client. Unlike the S3
    backends there is no conditional none-match flag and no small-object
    concat threshold, since append blobs are extended in place.
    """

    container: str
    prefix: str = "/"
    connection: AzureConnection | None = None
    account_name: str | None = None
    create_container: bool = False

    @staticmethod
    def builder() -> ConfigBuilder[AzureStorageConfig]:
        return ConfigBuilder(COMPONENT_CODE, AzureStorageConfig.from_properties)

    @classmethod
    def from_properties(cls, properties: TypedProperties) -> AzureStorageConfig:
        container = require_string(properties, CONTAINER)
        connection_string = properties.get_string(CONNECTION_STRING)
        connection: AzureConnection | None = None
        account_name: str | None = None
        if connection_string.strip():
            key = properties.key_of(CONNECTION_STRING)
            connection = require(
                parse_azure_connection_string(connection_string),
                key,
                "is not a valid connection string",
            )
            account_name = require(connection.account_name, key, "has no AccountName")
            require(connection.account_key, key, "has no AccountKey")
        return cls(
            container=container,
            prefix=read_prefix(properties, PREFIX),
            connection=connection,
            account_name=account_name,
            create_container=properties.get_boolean(CREATE_CONTAINER),
        )

    def create_client(self, container_client: Any = None) -> Any:
        """Return ``container_client`` if given, else build one from the connection string."""
        if container_client is not None:
            return container_client
        if self.connection is None:
            raise ConfigurationError(
                f"{COMPONENT_CODE}.{CONNECTION_STRING.name}",
                "is required to build a container client",
            )
        return create_container_client(self.connection, self.container)

    def describe(self) -> dict[str, Any]:
        return {
            "backend": "AZURE",
            "connection": self.connection.describe() if self.connection else None,
            "container": self.container,
            "prefix": self.prefix,
            "create_container": self.create_container,
        }
