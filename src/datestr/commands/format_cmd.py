"""Command: render a date through a format template."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datestr.commands._base import DateCommand
from datestr.config.logging import bind_command

if TYPE_CHECKING:
    from datestr.commands._context import AppContext


@click.command(
    "format",
    cls=DateCommand,
    examples="""\
  datestr format 2022-12-29 --template dd-mm-yyyy
  datestr format 2022-12-29 --template dd/mm/yyyy --separator /
  datestr -q format 2022-12-29 -t mm.dd.yyyy -s .""",
)
@click.argument("date")
@click.option("-t", "--template", default=None, help="Template with YYYY, MM and DD tokens.")
@click.option("-s", "--separator", default=None, help="Single-character token separator.")
@click.pass_obj
def format_cmd(app: AppContext, date: str, template: str | None, separator: str | None) -> None:
    """Render DATE through a template (defaults from [format] config)."""
    bind_command("format")
    app.emit(app.service.format(date, template=template, separator=separator))
