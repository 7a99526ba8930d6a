"""AppContext: the object Click hands to every ``check`` subcommand.

Built once by the root group.  Building it routes logging; ``emit`` is the
only place results are written and exit codes chosen.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from txnguard.config.logging import configure_logging
from txnguard.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from txnguard.config.settings import TxnGuardSettings
    from txnguard.services.result import ServiceResult


class AppContext:
    """Settings plus result emission for one CLI run."""

    def __init__(self, settings: TxnGuardSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.output.json_output,
            quiet=settings.output.quiet,
            verbose=settings.logging.verbose,
        )
        configure_logging(verbose=settings.logging.verbose, json_lines=settings.logging.json_logs)

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; a failed result goes to stderr and exits with 1."""
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)
        click.echo(text)
