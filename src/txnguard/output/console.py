"""Rich Console factory and theme for txnguard output.

Consoles render to a StringIO buffer so ``format_result() -> str`` stays a
plain string contract.  In non-TTY environments (tests, pipes) Rich
disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GUARD_THEME = Theme(
    {
        "guard.ok": "bold green",
        "guard.error": "bold red",
        "guard.op": "bold cyan",
        "guard.key": "dim",
        "guard.address": "bold blue",
        "guard.amount": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=GUARD_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
