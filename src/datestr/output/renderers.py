"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from datestr.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from datestr.services.result import ServiceResult

# Primary value printed by --quiet, per op.
_QUIET_KEYS: dict[str, str] = {
    "parse": "date",
    "format": "formatted",
    "add": "result",
    "subtract": "result",
}


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render only the primary value, or a one-line error."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    if result.op == "check":
        return "\n".join(
            f"{item['input']}\t{'valid' if item['valid'] else 'invalid'}"
            for item in result.data.get("items", [])
        )
    key = _QUIET_KEYS.get(result.op)
    if key is not None and key in result.data:
        return str(result.data[key])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="ds.ok"), Text(f"  {result.op}", style="ds.op"))


def _field(console: Console, key: str, value: Any) -> None:
    style = "ds.date" if key in {"date", "result", "formatted"} else ""
    console.print(Text(f"  {key}: ", style="ds.key"), Text(str(value), style=style), end="")
    console.print()


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="ds.error")
    op = Text(f"  {result.op}", style="ds.op")
    console.print(label, op, "-", Text(msg))
    if err:
        console.print(Text(f"  code: {err.code}", style="dim"))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v!r}"))


def _render_date(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key in ("date", "year", "month", "day"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_format(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key in ("date", "template", "formatted"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_arithmetic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key in ("left", "right", "result"):
        if key in result.data:
            _field(console, key, result.data[key])
    if result.data.get("valid") is False:
        console.print(Text("  (result breaks the month's day ceiling)", style="ds.warning"))


def _render_check(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "count", data.get("count", 0))
    _field(console, "valid", data.get("valid_count", 0))
    _field(console, "invalid", data.get("invalid_count", 0))

    items = data.get("items", [])
    if not items:
        return
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Input")
    table.add_column("Status")
    table.add_column("Result")
    for item in items:
        if item["valid"]:
            table.add_row(Text(item["input"]), Text("valid", style="ds.valid"), Text(item["date"]))
        else:
            table.add_row(
                Text(item["input"]), Text("invalid", style="ds.invalid"), Text(item["error"])
            )
    console.print()
    console.print(table)


_OP_RENDERERS: dict[str, Any] = {
    "parse": _render_date,
    "format": _render_format,
    "add": _render_arithmetic,
    "subtract": _render_arithmetic,
    "check": _render_check,
}
