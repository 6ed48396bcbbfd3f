"""histchain CLI entry point.

Orchestrator for the histchain command-line interface. Registers all
command modules and provides the main entry point.

Execution Context:
    CLI application - run via `python main.py` or `histchain` command

Dependencies:
    - click: CLI framework
    - histchain_core: Core library

Metadata:
    Version: 0.1.0
    Author: histchain Team
"""
from __future__ import annotations

import logging
import sys

import click

from histchain_cli.commands.run import run
from histchain_cli.commands.shell import shell
from histchain_cli.commands.utils import configure_logging
from histchain_cli.commands.utils import load_config


# ---- CLI Group ----------------------------------------------------------------------------------------------


@click.group()
@click.version_option(version="0.1.0", prog_name="histchain")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON file with name, log_limit and log_level settings.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Log every history operation.",
)
@click.pass_context
def cli(
        ctx: click.Context,
        config_path: str | None,
        verbose: bool,
) -> None:
    """histchain - Linear commit history playground.

    Build a history of commits in memory and rewrite it with reset,
    drop and squash, either interactively or by replaying a script.
    """
    try:
        config = load_config(config_path)
    except RuntimeError as config_error:
        raise click.ClickException(str(config_error)) from config_error

    configure_logging(logging.DEBUG if verbose else config.log_level)
    ctx.obj = config


# ---- Register Commands --------------------------------------------------------------------------------------


cli.add_command(run)
cli.add_command(shell)


# ---- Main Function ------------------------------------------------------------------------------------------


def main() -> int:
    """Main entry point for histchain CLI.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        cli()
        return 0
    except Exception as cli_error:
        click.echo(f"Error: {cli_error}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
