"""Commands: validate individual operation field values."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from txnguard.services.inspect import AssetPolicy, InspectService

if TYPE_CHECKING:
    from collections.abc import Callable

    from txnguard.commands._context import AppContext


def examples(text: str) -> Callable[[click.decorators.FC], click.decorators.FC]:
    """Add an eager ``--examples`` flag that prints *text* and exits."""

    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{text}")
            ctx.exit(0)

    return click.option(
        "--examples",
        is_flag=True,
        is_eager=True,
        expose_value=False,
        callback=show,
        help="Show usage examples.",
    )


@click.group()
@examples(
    """\
  txnguard check pubkey GA...
  txnguard check signer XB...
  txnguard check amount 10.1234567
  txnguard check asset native
  txnguard --json check asset USD:GA... --policy trustline"""
)
def check() -> None:
    """Validate a single field value."""


@check.command()
@click.argument("value")
@click.pass_obj
def pubkey(app: AppContext, value: str) -> None:
    """Validate an ed25519 account public key (G...)."""
    app.emit(InspectService().public_key(value))


@check.command()
@click.argument("value")
@click.pass_obj
def signer(app: AppContext, value: str) -> None:
    """Validate a signer key (G..., T..., X... or P...)."""
    app.emit(InspectService().signer_key(value))


@check.command()
@examples("  txnguard check amount 10.1234567\n  txnguard check amount --stroops 101234567")
@click.argument("value")
@click.option("--stroops", is_flag=True, help="VALUE is an already-scaled integer.")
@click.pass_obj
def amount(app: AppContext, value: str, stroops: bool) -> None:
    """Validate an amount with at most seven decimal places."""
    svc = InspectService()
    if stroops:
        try:
            scaled = int(value)
        except ValueError as exc:
            msg = f"{value!r} is not an integer"
            raise click.BadParameter(msg, param_hint="VALUE") from exc
        app.emit(svc.amount(scaled))
    else:
        app.emit(svc.amount(value))


@check.command()
@click.argument("value")
@click.option(
    "--policy",
    type=click.Choice([p.value for p in AssetPolicy]),
    default=AssetPolicy.GENERAL.value,
    help="general: payments/offers; code: trust authorization; trustline: change trust.",
)
@click.pass_obj
def asset(app: AppContext, value: str, policy: str) -> None:
    """Validate a canonical asset string (native or CODE:ISSUER)."""
    app.emit(InspectService().asset(value, policy=AssetPolicy(policy)))
