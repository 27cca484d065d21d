"""Commands: add and subtract dates.

Arithmetic uses a fixed 30-day month and 12-month year; results are not
re-checked against real month lengths.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datestr.commands._base import DateCommand
from datestr.config.logging import bind_command

if TYPE_CHECKING:
    from datestr.commands._context import AppContext


@click.command(
    cls=DateCommand,
    examples="""\
  datestr add 2023-01-25 0-2-10
  datestr --json add 2022-12-29 0-1-3""",
)
@click.argument("left")
@click.argument("right")
@click.pass_obj
def add(app: AppContext, left: str, right: str) -> None:
    """Add RIGHT to LEFT, carrying days into months and months into years."""
    bind_command("add")
    app.emit(app.service.add(left, right))


@click.command(
    cls=DateCommand,
    examples="""\
  datestr sub 2023-04-05 2023-01-04
  datestr -q sub 2024-03-01 0-1-15""",
)
@click.argument("left")
@click.argument("right")
@click.pass_obj
def sub(app: AppContext, left: str, right: str) -> None:
    """Subtract RIGHT from LEFT, borrowing from months and years."""
    bind_command("sub")
    app.emit(app.service.subtract(left, right))
