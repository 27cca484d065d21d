"""Subcommand modules for datestr.

Provides register_commands() which uses deferred imports so
``datestr --help`` only loads what it needs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from datestr.commands.arithmetic import add, sub
    from datestr.commands.check import check
    from datestr.commands.format_cmd import format_cmd
    from datestr.commands.parse import parse

    cli.add_command(parse)
    cli.add_command(check)
    cli.add_command(format_cmd)
    cli.add_command(add)
    cli.add_command(sub)
