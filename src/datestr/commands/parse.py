"""Command: parse a single date string."""

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
  datestr parse 2023-1-4
  datestr --json parse 2022-12-29
  datestr -q parse 0-3-1""",
)
@click.argument("date")
@click.pass_obj
def parse(app: AppContext, date: str) -> None:
    """Parse DATE (YEAR-MONTH-DAY) and show its components."""
    bind_command("parse")
    app.emit(app.service.parse(date))
