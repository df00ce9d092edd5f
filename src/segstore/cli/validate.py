"""segstore validate: build and print a backend's normalized configuration."""

from __future__ import annotations

import typer

from segstore.cli import _exitcodes as ec
from segstore.cli._output import print_error, print_object
from segstore.cli._setup import config_builder_for, open_registry, open_setup
from segstore.errors import ConfigurationError, WiringError


def validate_cmd(
    backend: str = typer.Argument(..., help="Backend name: EXTENDEDS3, S3 or AZURE"),
) -> None:
    """Validate configuration for BACKEND and print the normalized result."""
    from segstore.cli import state

    try:
        setup = open_setup()
        builder = config_builder_for(open_registry(), backend)
        config = setup.get_config(builder)
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(ec.CONFIGURATION_ERROR)
    except WiringError as e:
        print_error(str(e))
        raise typer.Exit(ec.WIRING_ERROR)

    print_object(config.describe(), json_mode=state.json_output)
