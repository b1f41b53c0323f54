"""Root CLI group for oidcdp with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from oidcdp import __version__
from oidcdp.commands import register_commands
from oidcdp.commands._context import AppContext
from oidcdp.config.loader import CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="oidcdp")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=DEFAULT_CONFIG_PATH,
    envvar=CONFIG_ENV_VAR,
    show_default=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Configuration file path.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """oidcdp: OIDC discovery provider configuration tool."""
    ctx.obj = AppContext(config_path)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
