"""Tests for terminal rendering of graph rows.

Execution Context:
    Test module - run via pytest

Dependencies:
    - pytest: Test framework
    - gitlanes_cli.render: Module under test
"""
from __future__ import annotations

import pytest

from gitlanes_core.graph import build_graph
from gitlanes_core.legend import LegendEntry
from gitlanes_core.models import CommitDescriptor
from gitlanes_cli.render import (
    BRANCH_COLORS,
    branch_color,
    render_connector_line,
    render_graph,
    render_compact_legend,
    render_legend,
    render_node_line,
)


# ---- Fixtures ------------------------------------------------------------------------------------------------


@pytest.fixture
def merge_rows() -> list:
    """Rows for main merging a one-commit feature branch."""
    commits = [
        CommitDescriptor.create("m000000000", ["a000000000", "f000000000"], "Jane", 0, "Merge feature", ["HEAD -> main"]),
        CommitDescriptor.create("a000000000", ["b000000000"], "Jane", 0, "Main work"),
        CommitDescriptor.create("f000000000", ["b000000000"], "Joe", 0, "Feature work", ["feature"]),
        CommitDescriptor.create("b000000000", [], "Jane", 0, "Initial commit"),
    ]
    return build_graph(commits)


# ---- Line Tests ----------------------------------------------------------------------------------------------


class TestRenderGraph:
    """Tests for render_graph()."""

    def test_line_count(self, merge_rows: list) -> None:
        """Test N rows render as 2N - 1 lines."""
        assert len(render_graph(merge_rows)) == 2 * len(merge_rows) - 1

    def test_single_row(self) -> None:
        """Test a single commit renders one line."""
        rows = build_graph([CommitDescriptor.create("r000000000")])
        assert len(render_graph(rows)) == 1

    def test_empty(self) -> None:
        """Test no rows render nothing."""
        assert render_graph([]) == []

    def test_unicode_connectors(self, merge_rows: list) -> None:
        """Test fork, pass-through and fold-back connectors."""
        lines = [line.plain for line in render_graph(merge_rows)]

        assert lines[1] == "├─╮"
        assert lines[3] == "│ │"
        assert lines[5] == "├─╯"

    def test_ascii_connectors(self, merge_rows: list) -> None:
        """Test ASCII glyphs replace box drawing."""
        lines = [line.plain for line in render_graph(merge_rows, unicode=False)]

        assert lines[1] == "|-\\"
        assert lines[0].startswith("*")
        assert "●" not in "".join(lines)


class TestRenderNodeLine:
    """Tests for render_node_line()."""

    def test_node_contents(self, merge_rows: list) -> None:
        """Test hash, names, message and author appear in order."""
        plain = render_node_line(merge_rows[0], width=2).plain

        assert plain.startswith("●   m000000 ")
        assert "[HEAD -> main]" in plain
        assert plain.endswith("Merge feature - Jane")

    def test_side_lane_node(self, merge_rows: list) -> None:
        """Test a node in lane 1 is drawn right of the mainline."""
        plain = render_node_line(merge_rows[2], width=2).plain

        assert plain.startswith("│ ● f000000 [feature]")

    def test_last_row_has_no_connector(self, merge_rows: list) -> None:
        """Test the last row renders an empty connector."""
        assert render_connector_line(merge_rows[-1], width=2).plain == ""


class TestColors:
    """Tests for color lookup and the legend."""

    def test_branch_color_wraps(self) -> None:
        """Test indices past the palette wrap around."""
        assert branch_color(0) == BRANCH_COLORS[0]
        assert branch_color(len(BRANCH_COLORS)) == BRANCH_COLORS[0]

    def test_legend(self) -> None:
        """Test the legend lists each entry with a dot."""
        legend = render_legend([LegendEntry("main", 0), LegendEntry("feature", 3)])

        assert legend.plain == "Branches: ● main  ● feature"

    def test_legend_ascii(self) -> None:
        """Test the ASCII legend uses asterisks."""
        assert render_legend([LegendEntry("main", 0)], unicode=False).plain == "Branches: * main"

    def test_compact_legend(self) -> None:
        """Test the compact legend is one colored dot per color."""
        legend = render_compact_legend([0, 3, 0])

        assert legend.plain == "● ● ●"
        assert [span.style for span in legend.spans] == [
            f"bold {BRANCH_COLORS[0]}",
            f"bold {BRANCH_COLORS[3]}",
            f"bold {BRANCH_COLORS[0]}",
        ]

    def test_compact_legend_empty(self) -> None:
        """Test no colors give an empty line."""
        assert render_compact_legend([], unicode=False).plain == ""


# ---- Criss-Cross Tests ---------------------------------------------------------------------------------------


class TestCrissCrossRendering:
    """Tests for a merge whose spans leave in both directions."""

    def test_fork_both_glyphs(self) -> None:
        """Test the merge lane joins a span on each side."""
        commits = [
            CommitDescriptor.create("a000000000", ["b000000000"]),
            CommitDescriptor.create("x100000000", ["x000000000"]),
            CommitDescriptor.create("z000000000", ["w000000000"]),
            CommitDescriptor.create("c000000000", ["y000000000"]),
            CommitDescriptor.create("x000000000", ["b000000000", "y000000000"]),
            CommitDescriptor.create("b000000000"),
            CommitDescriptor.create("w000000000"),
            CommitDescriptor.create("y000000000"),
        ]
        rows = build_graph(commits)

        assert render_connector_line(rows[4], width=4).plain == "├─┴─┼─╮"
        assert render_connector_line(rows[4], width=4, unicode=False).plain == "|-+-+-\\"
