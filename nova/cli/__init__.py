"""nova CLI — main entry point.

Registers all subcommands under the ``nova`` group.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from nova.cli.common import CliState
from nova.cli.config_cmd import config_cmd
from nova.cli.settings_cmd import settings_cmd


@click.group(invoke_without_command=True)
@click.version_option(package_name="nova-configs")
@click.option(
    "--db",
    "db_path",
    envvar="NOVA_DB",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Record database to use instead of the configured one.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output.")
@click.pass_context
def cli(ctx: click.Context, db_path: Optional[Path], verbose: bool) -> None:
    """nova — a registry of reusable project config files."""
    ctx.obj = CliState(db_path=db_path, verbose=verbose)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(config_cmd, "config")
cli.add_command(settings_cmd, "settings")


def main() -> None:
    """Package entry point."""
    cli()
