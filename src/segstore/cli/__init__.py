"""segstore CLI: operator console for checking storage-backend configuration."""

from __future__ import annotations

import logging
from typing import List, Optional

import typer

from segstore.cli import factories, replicas, select_cmd, validate

app = typer.Typer(
    name="segstore",
    help="segstore CLI: validate storage-backend configuration and factory selection.",
    no_args_is_help=True,
)


class _State:
    """Global CLI state shared across subcommands."""

    properties_file: str | None = None
    overrides: tuple[str, ...] = ()
    json_output: bool = False


state = _State()


def _version_callback(value: bool) -> None:
    if value:
        try:
            from importlib.metadata import version

            v = version("segstore-bindings")
        except Exception:
            v = "unknown"
        print(f"segstore {v}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    properties_file: Optional[str] = typer.Option(
        None,
        "--properties",
        "-p",
        envvar="SEGSTORE_PROPERTIES",
        help="Properties file (.properties, .yaml or .yml)",
    ),
    overrides: Optional[List[str]] = typer.Option(
        None,
        "--set",
        help="Override a property, e.g. --set extendeds3.bucket=b1 (repeatable)",
    ),
    json_output: bool = typer.Option(False, "--json", help="JSON output"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log to stderr"),
    version: bool = typer.Option(
        False, "--version", help="Show version", is_eager=True, callback=_version_callback
    ),
) -> None:
    """Global options for all segstore commands."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    state.properties_file = properties_file
    state.overrides = tuple(overrides or ())
    state.json_output = json_output
    if ctx.invoked_subcommand is None and not version:
        print(ctx.get_help())
        raise typer.Exit()


app.command(name="factories")(factories.factories_cmd)
app.command(name="validate")(validate.validate_cmd)
app.command(name="replicas")(replicas.replicas_cmd)
app.command(name="select")(select_cmd.select_cmd)


def main() -> None:
    """Entry point for the segstore CLI."""
    app()
