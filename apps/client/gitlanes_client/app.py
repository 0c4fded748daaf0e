"""gitlanes Client TUI Application.

Main application entry point for the gitlanes terminal user interface.
Opens the git repository containing the working directory and shows its
commit lane graph.

Execution Context:
    TUI application - run via `gitlanes-client` command

Dependencies:
    - textual: TUI framework
    - gitlanes_core: Core library
    - rich: Terminal formatting

Metadata:
    Version: 0.1.0
    Author: gitlanes Team
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Static

from gitlanes_core.config import load_config
from gitlanes_core.source import GitCommitSource

from gitlanes_client.screens.graph_view import GraphScreen

console = Console()


# ---- Main Application ---------------------------------------------------------------------------------------


class GitLanesClient(App):
    """gitlanes TUI Client Application.

    Interactive terminal view of a repository's commit graph.
    """

    CSS = """
    Screen {
        background: $background;
    }

    .title {
        background: $primary;
        color: $text;
        padding: 0 1;
        text-align: center;
        text-style: bold;
    }

    #graph-container {
        height: 1fr;
    }

    #commit-detail {
        height: 7;
        padding: 0 1;
        border-top: solid $primary;
    }

    #graph-legend {
        height: 1;
        padding: 0 1;
    }

    #search-input {
        height: 3;
        margin: 0 1;
    }

    #startup-message {
        padding: 1;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", key_display="Q"),
        Binding("?", "show_help", "Help", key_display="?"),
    ]

    TITLE = "gitlanes"
    SUB_TITLE = "Commit history as a lane graph"

    def __init__(
            self,
            repo_path: Path | None = None,
    ) -> None:
        """Initialize gitlanes Client.

        Args:
            repo_path: Directory inside the repository (defaults to cwd).
        """
        super().__init__()
        self.repo_path = repo_path

    def compose(
            self,
    ) -> ComposeResult:
        """Compose the fallback layout shown until the graph screen opens.

        Yields:
            UI widgets in layout order.
        """
        yield Header()
        yield Static("Opening repository...", id="startup-message")
        yield Footer()

    def on_mount(
            self,
    ) -> None:
        """Open the repository and push the graph screen."""
        try:
            source = GitCommitSource(self.repo_path)
            config = load_config(source.root)
        except RuntimeError as open_error:
            self.notify(f"Error opening repository: {open_error}", severity="error", timeout=10)
            self.query_one("#startup-message", Static).update(f"[red]{open_error}[/red]")
            return
        self.push_screen(GraphScreen(source, config))

    def action_show_help(
            self,
    ) -> None:
        """Show key help."""
        self.notify(
            "J/K or arrows move, PgUp/PgDn page, G/Shift+G first/last, / search, "
            "N/Shift+N next/previous match, R refresh, Q quit",
            severity="information",
            timeout=5,
        )


# ---- Main Function ------------------------------------------------------------------------------------------


def main() -> int:
    """Main entry point for gitlanes Client TUI.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = argparse.ArgumentParser(
        description="gitlanes TUI Client - Interactive commit lane graph"
    )
    parser.add_argument(
        "--repo",
        "-r",
        type=str,
        help="Path inside the git repository (default: current directory)",
    )

    args = parser.parse_args()

    try:
        repo_path = Path(args.repo).resolve() if args.repo else None
        app = GitLanesClient(repo_path=repo_path)
        app.run()
        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Exited by user[/yellow]")
        return 0
    except Exception as app_error:
        console.print(f"[red]Error: {app_error}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
