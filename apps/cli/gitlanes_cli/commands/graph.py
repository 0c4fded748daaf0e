"""gitlanes graph command.

Prints the commit graph of the current repository.

Execution Context:
    CLI command - invoked via `gitlanes graph`

Dependencies:
    - click: CLI framework
    - rich: Terminal output
    - gitlanes_core: Commit source and layout

Metadata:
    Version: 0.1.0
    Author: gitlanes Team
"""
from __future__ import annotations

from datetime import datetime
from datetime import timedelta

import click
from rich.console import Console

from gitlanes_core.config import load_config
from gitlanes_core.graph import GraphBuilder
from gitlanes_core.graph import graph_width
from gitlanes_core.legend import collect_legend
from gitlanes_core.search import CommitFilter
from gitlanes_core.source import GitCommitSource
from gitlanes_cli.render import render_graph
from gitlanes_cli.render import render_legend

console = Console()

DATE_FORMATS = ["%Y-%m-%d"]


# ---- Graph Command ------------------------------------------------------------------------------------------


@click.command()
@click.option(
    "--limit",
    "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of commits to lay out.",
)
@click.option(
    "--all/--head-only",
    "all_branches",
    default=None,
    help="Include every branch and tag, or only history reachable from HEAD.",
)
@click.option(
    "--legend/--no-legend",
    "show_legend",
    default=None,
    help="Show the branch legend below the graph.",
)
@click.option(
    "--ascii",
    "ascii_only",
    is_flag=True,
    help="Draw with ASCII characters only.",
)
@click.option(
    "--path",
    "-C",
    "repo_path",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Run as if started in this directory.",
)
@click.option(
    "--author",
    default=None,
    help="Only commits whose author contains this text.",
)
@click.option(
    "--grep",
    "message",
    default=None,
    help="Only commits whose message contains this text.",
)
@click.option(
    "--since",
    type=click.DateTime(formats=DATE_FORMATS),
    default=None,
    help="Only commits made on or after this day (YYYY-MM-DD).",
)
@click.option(
    "--until",
    type=click.DateTime(formats=DATE_FORMATS),
    default=None,
    help="Only commits made on or before this day (YYYY-MM-DD).",
)
def graph(
        limit: int | None,
        all_branches: bool | None,
        show_legend: bool | None,
        ascii_only: bool,
        repo_path: str | None,
        author: str | None,
        message: str | None,
        since: datetime | None,
        until: datetime | None,
) -> None:
    """Show the commit graph.

    Lays out the most recent commits in lanes, one line per commit and a
    connector line between commits, like `git log --graph`. Author, message
    and date filters narrow the loaded window, and kept commits are joined
    to their nearest kept ancestors.

    Examples:
        gitlanes graph
        gitlanes graph -n 50 --head-only
        gitlanes graph --ascii --no-legend
        gitlanes graph --author alice --since 2024-01-01
    """
    try:
        source = GitCommitSource(repo_path)
        config = load_config(source.root)

        commits = source.load_commits(
            max_count=limit if limit is not None else config.max_commits,
            all_branches=config.all_branches if all_branches is None else all_branches,
        )
        if not commits:
            console.print("[dim]No commits yet[/dim]")
            return

        commit_filter = CommitFilter(
            author=author,
            message=message,
            since=int(since.timestamp()) if since else None,
            until=int((until + timedelta(days=1)).timestamp()) - 1 if until else None,
        )
        if commit_filter.is_active():
            commits = commit_filter.apply(commits)
            if not commits:
                console.print("[dim]No matching commits[/dim]")
                return

        rows = GraphBuilder(
            palette_size=config.palette_size,
            remote_names=source.remote_names,
        ).build(commits)

        unicode = config.unicode and not ascii_only
        for line in render_graph(rows, unicode=unicode):
            console.print(line, overflow="ellipsis", no_wrap=True)

        if config.show_legend if show_legend is None else show_legend:
            entries = collect_legend(
                rows,
                scan_rows=config.legend_scan_rows,
                max_entries=config.legend_max_entries,
                remote_names=source.remote_names,
            )
            if entries:
                console.print()
                console.print(render_legend(entries, unicode=unicode))

        console.print(
            f"[dim]{len(rows)} commit(s), {graph_width(rows)} lane(s) wide[/dim]"
        )

    except Exception as graph_error:
        msg = f"Graph failed: {graph_error}"
        raise click.ClickException(msg) from graph_error
