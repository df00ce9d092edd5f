"""segstore replicas: derive the EXTENDEDS3 primary/alternate pair."""

from __future__ import annotations

import typer

from segstore.cli import _exitcodes as ec
from segstore.cli._output import print_error, print_object
from segstore.cli._setup import open_setup
from segstore.errors import ConfigurationError
from segstore.extendeds3 import ExtendedS3StorageConfig, ReplicatedExtendedS3StorageConfig


def replicas_cmd() -> None:
    """Derive and print both replica configurations."""
    from segstore.cli import state

    try:
        config = open_setup().get_config(ExtendedS3StorageConfig.builder)
        if not isinstance(config, ReplicatedExtendedS3StorageConfig):
            print_error("extendeds3.replication.enabled is not set; nothing to derive")
            raise typer.Exit(ec.CONFIGURATION_ERROR)
        primary, alternate = config.replica_configs()
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(ec.CONFIGURATION_ERROR)

    data = {"primary": primary.describe(), "alternate": alternate.describe()}
    print_object(data, json_mode=state.json_output)
