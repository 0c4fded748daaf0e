"""gitlanes CLI entry point.

Orchestrator for the gitlanes command-line interface. Registers all
command modules and provides the main entry point.

Execution Context:
    CLI application - run via `python main.py` or `gitlanes` command

Dependencies:
    - click: CLI framework
    - gitlanes_core: Core library

Metadata:
    Version: 0.1.0
    Author: gitlanes Team
"""
from __future__ import annotations

import logging
import sys

import click

from gitlanes_cli import __version__
from gitlanes_cli.commands.config import config
from gitlanes_cli.commands.graph import graph

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


# ---- CLI Group ----------------------------------------------------------------------------------------------


@click.group()
@click.version_option(version=__version__, prog_name="gitlanes")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Log debug details to stderr.",
)
def cli(
        verbose: bool,
) -> None:
    """gitlanes - Commit history as a lane graph in the terminal.

    Reads the history of the current git repository and draws it the way
    `git log --graph` does, with stable colors per branch.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


# ---- Register Commands --------------------------------------------------------------------------------------


cli.add_command(graph)
cli.add_command(config)


# ---- Main Function ------------------------------------------------------------------------------------------


def main() -> int:
    """Main entry point for gitlanes CLI.

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
