"""segstore factories: list supported (backend, layout) pairs."""

from __future__ import annotations

from segstore.cli._output import print_table
from segstore.cli._setup import open_registry


def factories_cmd() -> None:
    """List the storage factories available for selection."""
    from segstore.cli import state

    registry = open_registry()
    rows = [[info.name, info.storage_layout_type.value] for info in registry.supported()]
    print_table(["backend", "layout"], rows, json_mode=state.json_output)
