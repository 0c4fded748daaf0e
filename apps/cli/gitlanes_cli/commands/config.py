"""gitlanes config command.

Shows and updates the graph settings of the current repository.

Execution Context:
    CLI command - invoked via `gitlanes config`

Dependencies:
    - click: CLI framework
    - rich: Terminal output
    - gitlanes_core: Config handling

Metadata:
    Version: 0.1.0
    Author: gitlanes Team
"""
from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from gitlanes_core.config import CONFIG_FILE
from gitlanes_core.config import find_config
from gitlanes_core.config import load_config
from gitlanes_core.source import GitCommitSource

console = Console()


# ---- Config Command -----------------------------------------------------------------------------------------


@click.command()
@click.option(
    "--max-commits",
    type=click.IntRange(min=1),
    default=None,
    help="Number of commits read into the graph.",
)
@click.option(
    "--palette-size",
    type=click.IntRange(min=1),
    default=None,
    help="Number of distinct lane colors.",
)
@click.option(
    "--legend/--no-legend",
    "show_legend",
    default=None,
    help="Show or hide the branch legend by default.",
)
@click.option(
    "--unicode/--ascii",
    "unicode",
    default=None,
    help="Draw with box-drawing characters or plain ASCII.",
)
@click.option(
    "--path",
    "-C",
    "repo_path",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Run as if started in this directory.",
)
def config(
        max_commits: int | None,
        palette_size: int | None,
        show_legend: bool | None,
        unicode: bool | None,
        repo_path: str | None,
) -> None:
    """Show or change graph settings.

    Without options, prints the effective settings. With options, writes
    them to the repository's .gitlanes.json.

    Examples:
        gitlanes config
        gitlanes config --max-commits 1000
        gitlanes config --no-legend --ascii
    """
    try:
        source = GitCommitSource(repo_path)
        config_obj = load_config(source.root)
        changes_made = False

        if max_commits is not None:
            config_obj.max_commits = max_commits
            changes_made = True
        if palette_size is not None:
            config_obj.palette_size = palette_size
            changes_made = True
        if show_legend is not None:
            config_obj.show_legend = show_legend
            changes_made = True
        if unicode is not None:
            config_obj.unicode = unicode
            changes_made = True

        if changes_made:
            config_path = source.root / CONFIG_FILE
            config_obj.save(config_path)
            console.print(f"[green]Settings saved to {config_path}[/green]")
            return

        location = find_config(source.root)
        table = Table(title="gitlanes settings")
        table.add_column("Setting", style="cyan")
        table.add_column("Value")
        for key, value in config_obj.to_dict().items():
            table.add_row(key, str(value))
        console.print(table)
        console.print(f"[dim]Source: {location or 'defaults'}[/dim]")

    except Exception as config_error:
        msg = f"Config failed: {config_error}"
        raise click.ClickException(msg) from config_error
