"""Subcommand modules for oidcdp."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register standalone commands on the root CLI group."""
    from oidcdp.commands.check import check
    from oidcdp.commands.show import show

    cli.add_command(check)
    cli.add_command(show)
