"""Shared pytest fixtures and sample documents for oidcdp tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

MINIMAL_SERVER_API_CONFIG = """\
domains = ["domain.test"]

[acme]
email = "admin@domain.test"
tos_accepted = true

[server_api]
address = "unix:///some/socket/path"
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """A valid configuration file on disk."""
    path = tmp_path / "oidc-discovery-provider.toml"
    path.write_text(MINIMAL_SERVER_API_CONFIG, encoding="utf-8")
    return path
