"""Raw property sources and the config setup service handed to factory creators."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, TypeVar

import yaml

from segstore.errors import ConfigurationError
from segstore.properties import ConfigBuilder

logger = logging.getLogger(__name__)

C = TypeVar("C")


class ConfigSetup:
    """Frozen property bag that builds per-component configuration objects."""

    def __init__(self, properties: Mapping[str, Any] | None = None) -> None:
        self._properties = MappingProxyType(dict(properties or {}))

    @property
    def properties(self) -> Mapping[str, Any]:
        return self._properties

    def get_config(self, builder: Callable[[], ConfigBuilder[C]]) -> C:
        """Build a component config from this bag using the component's builder."""
        return builder().rebase(self._properties).build()

    def with_overrides(self, overrides: Mapping[str, Any]) -> ConfigSetup:
        merged = dict(self._properties)
        merged.update(overrides)
        return ConfigSetup(merged)

    @classmethod
    def from_file(cls, path: str | Path) -> ConfigSetup:
        return cls(load_properties(path))


def load_properties(path: str | Path) -> dict[str, Any]:
    """Load a flat property bag from a YAML or ``.properties`` file.

    Nested YAML mappings are flattened with ``.`` so ``extendeds3: {bucket: b}``
    and ``extendeds3.bucket: b`` are equivalent.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(str(p), f"cannot read properties file: {e}") from e

    if p.suffix.lower() in {".yaml", ".yml"}:
        try:
            doc = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigurationError(str(p), f"invalid YAML: {e}") from e
        if doc is None:
            props: dict[str, Any] = {}
        elif isinstance(doc, dict):
            props = _flatten(doc)
        else:
            raise ConfigurationError(str(p), "top-level YAML value must be a mapping")
    else:
        props = parse_properties_text(text)

    logger.debug("Loaded %d properties from %s", len(props), p)
    return props


def parse_properties_text(text: str) -> dict[str, str]:
    """Parse Java-style ``key=value`` / ``key: value`` lines."""
    props: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line[0] in "#!":
            continue
        sep = _first_separator(line)
        if sep < 0:
            props[line] = ""
            continue
        key = line[:sep].strip()
        value = line[sep + 1 :].strip()
        props[key] = value
    return props


def parse_overrides(pairs: Iterable[str]) -> dict[str, str]:
    """Parse ``KEY=VALUE`` pairs from the command line."""
    out: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise ConfigurationError(pair, "expected KEY=VALUE")
        out[key.strip()] = value
    return out


def _first_separator(line: str) -> int:
    positions = [i for i in (line.find("="), line.find(":")) if i >= 0]
    return min(positions) if positions else -1


def _flatten(doc: Mapping[Any, Any], parent: str = "") -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in doc.items():
        full = f"{parent}.{key}" if parent else str(key)
        if isinstance(value, Mapping):
            out.update(_flatten(value, full))
        else:
            out[full] = value
    return out
