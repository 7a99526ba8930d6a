"""``txnguard`` entry point: global flags, then the ``check`` group."""

from __future__ import annotations

import click

from txnguard import __version__
from txnguard.commands._context import AppContext
from txnguard.commands.check import check
from txnguard.config.settings import TxnGuardSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="txnguard")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON ([output] json).")
@click.option("-q", "--quiet", is_flag=True, help="Print one OK/ERROR line ([output] quiet).")
@click.option("-v", "--verbose", is_flag=True, help="Show error detail and debug logs ([logging] verbose).")
@click.option("--log-json", is_flag=True, help="Write logs as JSON lines ([logging] json).")
@click.option("-c", "--config", "config_path", default=None, help="Read this TOML file instead of txnguard.toml.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """txnguard - validate Stellar operation fields before building."""
    ctx.obj = AppContext(TxnGuardSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(check)


def main() -> None:
    cli(prog_name="txnguard")
