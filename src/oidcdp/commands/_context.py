"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to subcommands via
``@click.pass_obj``. The configuration file is loaded lazily so
``--help`` and ``--version`` never touch the filesystem.
"""

from __future__ import annotations

from pathlib import Path

import click

from oidcdp.config.errors import ConfigError
from oidcdp.config.loader import load_config
from oidcdp.config.logging import configure_logging
from oidcdp.config.models import Config


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, config_path: Path) -> None:
        self.config_path = config_path
        self._config: Config | None = None

    @property
    def config(self) -> Config:
        """The validated configuration (loaded on first access).

        Raises:
            click.ClickException: If loading or validation fails.
        """
        if self._config is None:
            try:
                config = load_config(self.config_path)
            except ConfigError as exc:
                raise click.ClickException(str(exc)) from exc
            try:
                configure_logging(level=config.log_level, log_format=config.log_format)
            except ValueError as exc:
                raise click.ClickException(str(exc)) from exc
            self._config = config
        return self._config
