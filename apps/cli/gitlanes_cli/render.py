"""Terminal rendering of graph rows.

Maps edge types to glyphs and color indices to terminal colors, producing
rich Text lines: a node line per commit and a connector line between
consecutive commits.

Execution Context:
    Presentation module - used by CLI commands and the TUI client

Dependencies:
    - rich: Styled terminal text
    - gitlanes_core: Graph rows

Metadata:
    Version: 0.1.0
    Author: gitlanes Team
"""
from __future__ import annotations

from typing import Sequence

from rich.text import Text

from gitlanes_core.graph import graph_width
from gitlanes_core.legend import LegendEntry
from gitlanes_core.models import EdgeType
from gitlanes_core.models import GraphCell
from gitlanes_core.models import GraphRow


# ---- Configuration Constants ---------------------------------------------------------------------------------


BRANCH_COLORS = [
    "green",
    "red",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "bright_green",
    "bright_red",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
]

# Two characters per lane: glyph, then the filler up to the next lane
UNICODE_GLYPHS = {
    "node": "●",
    EdgeType.VERTICAL: "│ ",
    EdgeType.FORK_RIGHT: "├─",
    EdgeType.FORK_LEFT: "╯ ",
    EdgeType.FORK_BOTH: "┴─",
    EdgeType.MERGE_FROM_LEFT: "╮ ",
    EdgeType.MERGE_FROM_RIGHT: "├─",
    EdgeType.HORIZONTAL: "──",
    EdgeType.CROSS: "┼─",
}

ASCII_GLYPHS = {
    "node": "*",
    EdgeType.VERTICAL: "| ",
    EdgeType.FORK_RIGHT: "|-",
    EdgeType.FORK_LEFT: "/ ",
    EdgeType.FORK_BOTH: "+-",
    EdgeType.MERGE_FROM_LEFT: "\\ ",
    EdgeType.MERGE_FROM_RIGHT: "|-",
    EdgeType.HORIZONTAL: "--",
    EdgeType.CROSS: "+-",
}

HASH_STYLE = "yellow"
AUTHOR_STYLE = "dim"
SELECTED_STYLE = "bold on grey23"


def branch_color(
        index: int,
) -> str:
    """Terminal color for a color index."""
    return BRANCH_COLORS[index % len(BRANCH_COLORS)]


# ---- Line Builders ------------------------------------------------------------------------------------------


def _append_cell(
        line: Text,
        cell: GraphCell | None,
        glyphs: dict,
) -> None:
    if cell is None:
        line.append("  ")
        return
    line.append(glyphs[cell.edge], style=branch_color(cell.color))


def render_node_line(
        row: GraphRow,
        width: int,
        unicode: bool = True,
        selected: bool = False,
) -> Text:
    """Node line: lane prefix, short hash, names, message and author.

    Args:
        row: Row to render.
        width: Number of lanes to pad the prefix to.
        unicode: Use box-drawing glyphs.
        selected: Highlight the message.

    Returns:
        Styled line.
    """
    glyphs = UNICODE_GLYPHS if unicode else ASCII_GLYPHS
    node = row.node
    line = Text()

    for lane in range(max(width, row.width)):
        if lane == node.lane:
            line.append(glyphs["node"], style=f"bold {branch_color(node.color)}")
            line.append(" ")
        elif lane < row.width:
            _append_cell(line, row.cells[lane], glyphs)
        else:
            line.append("  ")

    line.append(f"{node.short_id} ", style=HASH_STYLE)
    for name in node.names:
        line.append(f"[{name}]", style=f"bold reverse {branch_color(node.color)}")
        line.append(" ")
    line.append(node.message, style=SELECTED_STYLE if selected else "")
    if node.author:
        line.append(f" - {node.author}", style=AUTHOR_STYLE)
    return line


def render_connector_line(
        row: GraphRow,
        width: int,
        unicode: bool = True,
) -> Text:
    """Connector line drawn under ``row``; empty for the last row."""
    glyphs = UNICODE_GLYPHS if unicode else ASCII_GLYPHS
    line = Text()
    if row.connection is None:
        return line
    cells = row.connection.cells
    for lane in range(max(width, len(cells))):
        _append_cell(line, cells[lane] if lane < len(cells) else None, glyphs)
    line.rstrip()
    return line


def render_graph(
        rows: Sequence[GraphRow],
        unicode: bool = True,
        selected: int | None = None,
) -> list[Text]:
    """All visual lines of a graph: 2N - 1 lines for N rows.

    Args:
        rows: Graph rows.
        unicode: Use box-drawing glyphs.
        selected: Index of the selected commit, if any.

    Returns:
        Rendered lines in display order.
    """
    width = graph_width(rows)
    lines: list[Text] = []
    for index, row in enumerate(rows):
        lines.append(render_node_line(row, width, unicode=unicode, selected=index == selected))
        if row.connection is not None:
            lines.append(render_connector_line(row, width, unicode=unicode))
    return lines


def render_legend(
        entries: Sequence[LegendEntry],
        unicode: bool = True,
) -> Text:
    """One-line branch legend: colored dot and name per entry."""
    dot = UNICODE_GLYPHS["node"] if unicode else ASCII_GLYPHS["node"]
    line = Text("Branches: ", style="bold grey70")
    for position, entry in enumerate(entries):
        if position:
            line.append("  ")
        line.append(dot, style=f"bold {branch_color(entry.color)}")
        line.append(f" {entry.name}")
    return line


def render_compact_legend(
        colors: Sequence[int],
        unicode: bool = True,
) -> Text:
    """Colored dots only, for terminals too narrow for the named legend."""
    dot = UNICODE_GLYPHS["node"] if unicode else ASCII_GLYPHS["node"]
    line = Text()
    for position, color in enumerate(colors):
        if position:
            line.append(" ")
        line.append(dot, style=f"bold {branch_color(color)}")
    return line
