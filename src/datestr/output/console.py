"""Rich Console factory and theme for datestr output.

Consoles render into a StringIO buffer so renderers return plain strings.
In non-TTY environments (tests, pipes) Rich disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DATESTR_THEME = Theme(
    {
        "ds.ok": "bold green",
        "ds.error": "bold red",
        "ds.warning": "bold yellow",
        "ds.op": "bold cyan",
        "ds.key": "dim",
        "ds.date": "bold blue",
        "ds.valid": "green",
        "ds.invalid": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=DATESTR_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
