"""Output formatting helpers for the CLI."""

from __future__ import annotations

import json
import sys
from typing import Any


def print_table(headers: list[str], rows: list[list[Any]], *, json_mode: bool = False) -> None:
    """Print data as a table (text) or JSON array."""
    if json_mode:
        data = [dict(zip(headers, row)) for row in rows]
        print(json.dumps(data, indent=2, default=str))
        return

    if not rows:
        return

    widths = [len(h) for h in headers]
    str_rows = [[str(v) for v in row] for row in rows]
    for row in str_rows:
        for i, val in enumerate(row):
            widths[i] = max(widths[i], len(val))

    print("  ".join(h.ljust(widths[i]) for i, h in enumerate(headers)))
    print("  ".join("-" * w for w in widths))
    for row in str_rows:
        print("  ".join(val.ljust(widths[i]) for i, val in enumerate(row)))


def print_object(data: dict[str, Any] | list[Any], *, json_mode: bool = False) -> None:
    """Print an object as JSON or as indented key-value pairs."""
    if json_mode:
        print(json.dumps(data, indent=2, default=str))
        return
    if isinstance(data, list):
        for i, item in enumerate(data):
            if i:
                print()
            _print_mapping(item, indent=0)
        return
    _print_mapping(data, indent=0)


def _print_mapping(data: Any, *, indent: int) -> None:
    pad = "  " * indent
    if not isinstance(data, dict):
        print(f"{pad}{data}")
        return
    for k, v in data.items():
        if isinstance(v, dict):
            print(f"{pad}{k}:")
            _print_mapping(v, indent=indent + 1)
        else:
            print(f"{pad}{k}: {v}")


def print_error(msg: str) -> None:
    """Print an error message to stderr."""
    print(f"Error: {msg}", file=sys.stderr)
