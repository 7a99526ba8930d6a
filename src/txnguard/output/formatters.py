"""Output mode dispatch.

The CLI renders ServiceResult for humans (Rich) or machines (--json).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from txnguard.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from txnguard.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Resolved output flags for a single CLI invocation."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult according to *settings*.

    JSON wins over quiet; quiet wins over verbose.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
