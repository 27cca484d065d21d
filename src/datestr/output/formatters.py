"""Rich/JSON output dispatch.

The CLI renders ServiceResult for humans (Rich output) or machines
(``--json``). ``--quiet`` reduces human output to the primary value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from datestr.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from datestr.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON takes precedence over quiet, quiet over the Rich renderer.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
