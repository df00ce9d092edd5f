"""Shared fixtures for CLI tests."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner():
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture
def properties_file(tmp_path):
    """A .properties file with a valid EXTENDEDS3 replication setup."""
    path = tmp_path / "segstore.properties"
    path.write_text(
        "\n".join(
            [
                "extendeds3.replication.enabled=true",
                "extendeds3.connect.config.uri=http://ecs1:9020/?identity=u1&secretKey=k1",
                "extendeds3.bucket=b1",
                "extendeds3.alt.connect.config.uri=http://ecs2:9020/?identity=u2&secretKey=k2",
                "extendeds3.alt.bucket=b2",
                "extendeds3.prefix=tier2",
                "",
            ]
        )
    )
    return str(path)
