"""Command: print the resolved configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from oidcdp.commands._base import OidcCommand

if TYPE_CHECKING:
    from oidcdp.commands._context import AppContext


@click.command(
    cls=OidcCommand,
    examples="""\
  oidcdp show
  oidcdp -c provider.toml show --compact""",
)
@click.option("--compact", is_flag=True, help="Single-line JSON output.")
@click.pass_obj
def show(app: AppContext, compact: bool) -> None:
    """Print the configuration with all defaults applied, as JSON."""
    indent = None if compact else 2
    click.echo(app.config.model_dump_json(indent=indent))
