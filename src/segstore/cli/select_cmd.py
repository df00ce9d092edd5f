"""segstore select: construct the storage factory for a backend and layout."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import typer

from segstore.cli import _exitcodes as ec
from segstore.cli._output import print_error, print_object
from segstore.cli._setup import open_registry, open_setup
from segstore.errors import ConfigurationError, WiringError
from segstore.factory import StorageLayoutType


def select_cmd(
    backend: str = typer.Argument(..., help="Backend name: EXTENDEDS3, S3 or AZURE"),
    layout: str = typer.Option("chunked", "--layout", "-l", help="chunked or rolling"),
) -> None:
    """Build the factory the segment store would use and describe it."""
    from segstore.cli import state

    try:
        layout_type = StorageLayoutType.parse(layout)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--layout")

    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="segstore-cli")
    try:
        factory = open_registry().create_factory(backend, layout_type, open_setup(), executor)
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(ec.CONFIGURATION_ERROR)
    except WiringError as e:
        print_error(str(e))
        raise typer.Exit(ec.WIRING_ERROR)
    finally:
        executor.shutdown(wait=False)

    print_object(factory.describe(), json_mode=state.json_output)
