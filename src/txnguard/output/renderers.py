"""Rich renderers for ServiceResult.

Every check result is a flat mapping, so one key-value renderer covers all
ops; values are styled by what they hold (addresses, amounts).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from txnguard.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from txnguard.services.result import ServiceResult

_ADDRESS_KEYS = frozenset({"public_key", "signer_key", "issuer", "canonical"})
_AMOUNT_KEYS = frozenset({"scaled", "amount"})


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        _render_ok(result, console)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    return f"OK: {result.op}"


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="guard.key")
    if key in _ADDRESS_KEYS:
        v = Text(str(value), style="guard.address")
    elif key in _AMOUNT_KEYS:
        v = Text(str(value), style="guard.amount")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_ok(result: ServiceResult, console: Console) -> None:
    console.print(Text("OK", style="guard.ok"), Text(f"  {result.op}", style="guard.op"))
    for key, value in result.data.items():
        if value != "":
            _field(console, key, value)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="guard.error")
    op = Text(f"  {result.op}", style="guard.op")
    console.print(label, op, Text(" - "), Text(msg))

    if verbose and err:
        console.print(Text("  detail:", style="dim"))
        console.print(Text(f"    code: {err.code}"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))
