"""Command: validate one or more date strings."""

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
  datestr check 2023-02-29 2023-02-30
  datestr check --strict 2023-04-30 2023-04-31
  datestr --json check 2023-12-32""",
)
@click.argument("dates", nargs=-1, required=True)
@click.option("--strict", is_flag=True, help="Exit with code 1 if any date is invalid.")
@click.pass_obj
def check(app: AppContext, dates: tuple[str, ...], strict: bool) -> None:
    """Check that every DATES entry is a valid date."""
    bind_command("check")
    result = app.service.check(list(dates))
    app.emit(result)
    if strict and result.data["invalid_count"]:
        raise SystemExit(1)
