"""Commit Graph Screen.

Displays the commit lane graph with a selection cursor, a detail panel
for the selected commit and a search bar that jumps between matches.

Metadata:
    Version: 0.1.0
    Author: gitlanes Team
"""
from __future__ import annotations

from datetime import datetime

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Input, Static

from gitlanes_core.config import GraphConfig
from gitlanes_core.graph import GraphBuilder
from gitlanes_core.legend import collect_legend
from gitlanes_core.legend import collect_legend_colors
from gitlanes_core.search import find_commits
from gitlanes_core.search import next_match
from gitlanes_core.search import parse_query
from gitlanes_core.search import previous_match
from gitlanes_core.selection import GraphSelection
from gitlanes_core.source import GitCommitSource
from gitlanes_cli.render import render_compact_legend
from gitlanes_cli.render import render_graph
from gitlanes_cli.render import render_legend

# Below this many columns the legend shows colored dots only
COMPACT_LEGEND_WIDTH = 60


class GraphScreen(Screen):
    """Commit graph screen.

    Displays:
    - Lane graph with one node line and one connector line per commit
    - Details of the selected commit
    - Branch legend, reduced to colored dots on narrow terminals
    - Search bar: plain text searches messages, `author:` and `hash:`
      prefixes search authors and hash prefixes
    """

    BINDINGS = [
        Binding("r", "refresh", "Refresh", key_display="R"),
        Binding("j,down", "cursor_down", "Down", key_display="J"),
        Binding("k,up", "cursor_up", "Up", key_display="K"),
        Binding("pagedown", "page_down", "Page Down", show=False),
        Binding("pageup", "page_up", "Page Up", show=False),
        Binding("g,home", "first", "First", show=False),
        Binding("G,end", "last", "Last", show=False),
        Binding("slash", "search", "Search", key_display="/"),
        Binding("n", "next_match", "Next Match", show=False),
        Binding("N", "previous_match", "Previous Match", show=False),
        Binding("escape", "close_search", "Close Search", show=False),
    ]

    def __init__(
            self,
            source: GitCommitSource,
            config: GraphConfig,
    ) -> None:
        """Initialize graph view.

        Args:
            source: Commit source of the open repository.
            config: Effective graph settings.
        """
        super().__init__()
        self.source = source
        self.config = config
        self.selection = GraphSelection()
        self.matches: list[int] = []

    def compose(
            self,
    ) -> ComposeResult:
        """Compose graph widgets.

        Yields:
            UI widgets for the graph display.
        """
        yield Header()
        with Container():
            with Vertical():
                yield Static("Commit Graph", classes="title")
                with VerticalScroll(id="graph-container"):
                    yield Static("", id="graph-lines")
                yield Input(
                    placeholder="Search messages, author:name or hash:prefix",
                    id="search-input",
                )
                yield Static("", id="commit-detail")
                yield Static("", id="graph-legend")
        yield Footer()

    def on_mount(
            self,
    ) -> None:
        """Build the graph when the screen mounts."""
        self.query_one("#search-input", Input).display = False
        self.action_refresh()
        self.call_after_refresh(self._sync_height)

    def on_resize(
            self,
            event: events.Resize,
    ) -> None:
        """Track the visible height and redraw once the layout settles."""
        self.call_after_refresh(self._sync_height)

    def _sync_height(
            self,
    ) -> None:
        """Page and scroll by the height the graph container actually got."""
        height = self.query_one("#graph-container", VerticalScroll).size.height
        if height:
            self.selection.set_visible_height(height)
        self._render_graph()
        self._render_legend()

    def action_refresh(
            self,
    ) -> None:
        """Rebuild the graph from the repository."""
        try:
            commits = self.source.load_commits(
                max_count=self.config.max_commits,
                all_branches=self.config.all_branches,
            )
            rows = GraphBuilder(
                palette_size=self.config.palette_size,
                remote_names=self.source.remote_names,
            ).build(commits)
        except RuntimeError as load_error:
            self.notify(f"Error loading commits: {load_error}", severity="error", timeout=10)
            self.query_one("#graph-lines", Static).update(
                Text(f"Error loading commits:\n{load_error}", style="red")
            )
            return

        self.selection.set_rows(rows)
        self.matches = []
        branch = self.source.current_branch() or "detached HEAD"
        self.sub_title = f"{self.source.root} - {branch}"
        self._render_graph()
        self._render_legend()

    def _render_legend(
            self,
    ) -> None:
        """Named legend, or colored dots when the screen is narrow."""
        legend = self.query_one("#graph-legend", Static)
        rows = self.selection.rows
        if not self.config.show_legend:
            legend.update("")
            return

        if self.size.width < COMPACT_LEGEND_WIDTH:
            colors = collect_legend_colors(
                rows,
                scan_rows=self.config.legend_scan_rows,
                max_entries=self.config.legend_max_entries,
            )
            legend.update(render_compact_legend(colors, unicode=self.config.unicode))
            return

        entries = collect_legend(
            rows,
            scan_rows=self.config.legend_scan_rows,
            max_entries=self.config.legend_max_entries,
            remote_names=self.source.remote_names,
        )
        legend.update(render_legend(entries, unicode=self.config.unicode) if entries else "")

    def _render_graph(
            self,
    ) -> None:
        """Redraw graph lines, scroll position and detail panel."""
        if not self.is_mounted:
            return
        graph_lines = self.query_one("#graph-lines", Static)
        if not len(self.selection):
            graph_lines.update(Text("No commits yet", style="dim"))
            self.query_one("#commit-detail", Static).update("")
            return

        lines = render_graph(
            self.selection.rows,
            unicode=self.config.unicode,
            selected=self.selection.selected,
        )
        graph_lines.update(Text("\n").join(lines))
        self.query_one("#graph-container", VerticalScroll).scroll_to(
            y=self.selection.scroll_offset,
            animate=False,
        )
        self._render_detail()

    def _render_detail(
            self,
    ) -> None:
        row = self.selection.selected_row
        detail = self.query_one("#commit-detail", Static)
        if row is None:
            detail.update("")
            return

        node = row.node
        when = datetime.fromtimestamp(node.timestamp).strftime("%Y-%m-%d %H:%M")
        text = Text()
        text.append(f"commit {node.id}", style="bold cyan")
        if node.names:
            text.append(f" ({', '.join(node.names)})", style="yellow")
        text.append(f"\nAuthor: {node.author}\nDate:   {when}\n")
        if node.is_merge:
            parents = " ".join(parent[:7] for parent in node.parent_ids)
            text.append(f"Merge:  {parents}\n", style="dim")
        text.append(f"\n    {node.message}")
        detail.update(text)

    def action_cursor_down(
            self,
    ) -> None:
        """Move selection down."""
        self.selection.select_next()
        self._render_graph()

    def action_cursor_up(
            self,
    ) -> None:
        """Move selection up."""
        self.selection.select_previous()
        self._render_graph()

    def action_page_down(
            self,
    ) -> None:
        self.selection.page_down()
        self._render_graph()

    def action_page_up(
            self,
    ) -> None:
        self.selection.page_up()
        self._render_graph()

    def action_first(
            self,
    ) -> None:
        self.selection.select_first()
        self._render_graph()

    def action_last(
            self,
    ) -> None:
        self.selection.select_last()
        self._render_graph()

    # ---- Search ---------------------------------------------------------------------------------------------

    def action_search(
            self,
    ) -> None:
        """Open the search bar."""
        search_input = self.query_one("#search-input", Input)
        search_input.display = True
        search_input.focus()
        self.call_after_refresh(self._sync_height)

    def action_close_search(
            self,
    ) -> None:
        """Hide the search bar and give the keys back to the graph."""
        search_input = self.query_one("#search-input", Input)
        if search_input.display:
            search_input.display = False
            self.set_focus(None)
            self.call_after_refresh(self._sync_height)

    def on_input_submitted(
            self,
            event: Input.Submitted,
    ) -> None:
        """Run the search and jump to the first match at or below the cursor."""
        query, search_type = parse_query(event.value)
        self.matches = find_commits(self.selection.rows, query, search_type)
        self.action_close_search()
        if not self.matches:
            self.notify(f"No commits match {event.value.strip()!r}", severity="warning", timeout=3)
            return

        target = next_match(self.matches, self.selection.selected - 1)
        self.selection.select(target)
        self._render_graph()
        self.notify(f"{len(self.matches)} match(es) by {search_type.value}", timeout=3)

    def action_next_match(
            self,
    ) -> None:
        """Jump to the next search match."""
        target = next_match(self.matches, self.selection.selected)
        if target is not None:
            self.selection.select(target)
            self._render_graph()

    def action_previous_match(
            self,
    ) -> None:
        """Jump to the previous search match."""
        target = previous_match(self.matches, self.selection.selected)
        if target is not None:
            self.selection.select(target)
            self._render_graph()
