"""Command: validate a configuration file."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from oidcdp.commands._base import OidcCommand

if TYPE_CHECKING:
    from oidcdp.commands._context import AppContext


@click.command(
    cls=OidcCommand,
    examples="""\
  oidcdp check
  oidcdp -c /etc/oidc-discovery-provider.toml check
  OIDCDP_CONFIG=provider.toml oidcdp check""",
)
@click.pass_obj
def check(app: AppContext) -> None:
    """Validate the configuration file and report the selected modes."""
    config = app.config
    click.echo(f"configuration OK: {app.config_path}")
    click.echo(f"  exposure: {config.exposure}")
    click.echo(f"  source:   {config.source}")
    click.echo(f"  domains:  {', '.join(config.domains)}")
